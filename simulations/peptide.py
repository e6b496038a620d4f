"""Peptide bond synthesis by condensation (dehydration) reaction.

The learner removes the hydroxyl from the carboxyl end of the first amino
acid, then a hydrogen from the amine end of the second, then forms the bond
and releases water.
"""

from enum import Enum
from typing import Optional

from simulations.timer import HINT_SECONDS, notice, visible_text
from states import PeptideBondState

START, HYDROXYL_SELECTED, HYDROGEN_SELECTED, BONDED = 0, 1, 2, 3


class Atom(Enum):
    CARBOXYL_HYDROXYL = "carboxyl_hydroxyl"
    AMINE_HYDROGEN = "amine_hydrogen"
    CARBONYL_OXYGEN = "carbonyl_oxygen"
    ALPHA_CARBON = "alpha_carbon"
    ALPHA_HYDROGEN = "alpha_hydrogen"
    AMINE_NITROGEN = "amine_nitrogen"
    R_GROUP = "r_group"


CORRECT_TARGET = {
    START: Atom.CARBOXYL_HYDROXYL,
    HYDROXYL_SELECTED: Atom.AMINE_HYDROGEN,
}

HINTS = {
    START: "Not that one! Water's OH comes from the carboxyl (-COOH) end of the first amino acid.",
    HYDROXYL_SELECTED: "Not that one! Pick a hydrogen from the amine (-NH2) end of the second amino acid.",
}

INSTRUCTIONS = {
    START: "Step 1: Select the Hydroxyl (-OH) group from the Carboxyl end.",
    HYDROXYL_SELECTED: "Step 2: Select a Hydrogen (-H) atom from the Amine end.",
    HYDROGEN_SELECTED: "Structure ready. Form the bond!",
    BONDED: "Success! Peptide Bond formed & Water released.",
}


def initial_state() -> PeptideBondState:
    return PeptideBondState()


def select_atom(state: PeptideBondState, atom: Atom, now: float,
                hint_seconds: float = HINT_SECONDS) -> PeptideBondState:
    """Advance on the correct atom; otherwise keep the step and show a hint."""
    expected = CORRECT_TARGET.get(state.step)
    if expected is None:
        return state
    if Atom(atom) is expected:
        return state.model_copy(update={"step": state.step + 1, "hint": None})
    return state.model_copy(update={"hint": notice(HINTS[state.step], now, hint_seconds)})


def form_bond(state: PeptideBondState) -> PeptideBondState:
    if state.step != HYDROGEN_SELECTED:
        return state
    return state.model_copy(update={"step": BONDED, "hint": None})


def reset(state: Optional[PeptideBondState] = None) -> PeptideBondState:
    return initial_state()


def visible_hint(state: PeptideBondState, now: float) -> Optional[str]:
    return visible_text(state.hint, now)


def instruction(state: PeptideBondState) -> str:
    return INSTRUCTIONS[state.step]
