"""General amino acid structure builder.

Four groups surround the alpha carbon; the learner picks a group and clicks
the position where it belongs.
"""

from typing import Optional

from simulations.timer import HINT_SECONDS, notice, visible_text
from states import AminoBuilderState

PARTS = {
    "amine": {"label": "Amine Group (-NH2)", "zone": "left"},
    "carboxyl": {"label": "Carboxyl Group (-COOH)", "zone": "right"},
    "hydrogen": {"label": "Hydrogen (-H)", "zone": "top"},
    "r-group": {"label": "R Group (Side Chain)", "zone": "bottom"},
}
ZONES = ("top", "bottom", "left", "right")

WRONG_ZONE_TEXT = "Incorrect placement! Remember the general structure."


def initial_state() -> AminoBuilderState:
    return AminoBuilderState()


def is_placed(state: AminoBuilderState, part: str) -> bool:
    return any(p == part for _, p in state.placed)


def select_part(state: AminoBuilderState, part: str) -> AminoBuilderState:
    if part not in PARTS or is_placed(state, part):
        return state
    return state.model_copy(update={"selected_part": part, "hint": None})


def place(state: AminoBuilderState, zone: str, now: float,
          hint_seconds: float = HINT_SECONDS) -> AminoBuilderState:
    part = state.selected_part
    if part is None or zone not in ZONES:
        return state
    if PARTS[part]["zone"] == zone:
        return state.model_copy(update={
            "placed": state.placed + ((zone, part),),
            "selected_part": None,
            "hint": None,
        })
    return state.model_copy(update={"hint": notice(WRONG_ZONE_TEXT, now, hint_seconds)})


def is_complete(state: AminoBuilderState) -> bool:
    return all(state.part_in(zone) is not None for zone in ZONES)


def reset(state: Optional[AminoBuilderState] = None) -> AminoBuilderState:
    return initial_state()


def visible_hint(state: AminoBuilderState, now: float) -> Optional[str]:
    return visible_text(state.hint, now)
