"""Protein function gallery: match each protein to its description."""

import random
from typing import List, Optional

from simulations.timer import HINT_SECONDS, notice, visible_text
from states import PROTEIN_FUNCTIONS, MatchingGameState, ProteinFunction

MISMATCH_TEXT = "Not quite! Try again."

CATALOG_IDS = frozenset(p.id for p in PROTEIN_FUNCTIONS)
_BY_ID = {p.id: p for p in PROTEIN_FUNCTIONS}


def new_game(seed: Optional[int] = None) -> MatchingGameState:
    """Start a game with the descriptions in a seeded, reproducible order."""
    order = [p.id for p in PROTEIN_FUNCTIONS]
    random.Random(seed).shuffle(order)
    return MatchingGameState(definition_order=tuple(order))


def select_protein(state: MatchingGameState, protein_id: str) -> MatchingGameState:
    if protein_id not in CATALOG_IDS or protein_id in state.matched_ids:
        return state
    return state.model_copy(update={"selected_protein_id": protein_id, "notice": None})


def select_definition(state: MatchingGameState, definition_id: str, now: float,
                      hint_seconds: float = HINT_SECONDS) -> MatchingGameState:
    if state.selected_protein_id is None:
        return state
    if definition_id == state.selected_protein_id:
        return state.model_copy(update={
            "matched_ids": state.matched_ids | {definition_id},
            "selected_protein_id": None,
            "notice": None,
        })
    # Selection stays active so the learner can try another description
    return state.model_copy(update={"notice": notice(MISMATCH_TEXT, now, hint_seconds)})


def is_complete(state: MatchingGameState) -> bool:
    return state.matched_ids >= CATALOG_IDS


def reset(seed: Optional[int] = None) -> MatchingGameState:
    return new_game(seed)


def visible_notice(state: MatchingGameState, now: float) -> Optional[str]:
    return visible_text(state.notice, now)


def protein(protein_id: str) -> ProteinFunction:
    return _BY_ID[protein_id]


def remaining_definitions(state: MatchingGameState) -> List[ProteinFunction]:
    """Unmatched descriptions in display order."""
    return [_BY_ID[i] for i in state.definition_order if i not in state.matched_ids]


def remaining_proteins(state: MatchingGameState) -> List[ProteinFunction]:
    return [p for p in PROTEIN_FUNCTIONS if p.id not in state.matched_ids]
