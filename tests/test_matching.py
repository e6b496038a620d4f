"""
Tests for the protein function matching game.
"""
from simulations import matching
from states import PROTEIN_FUNCTIONS


def test_new_game_shuffles_reproducibly():
    first = matching.new_game(seed=7)
    second = matching.new_game(seed=7)

    assert first.definition_order == second.definition_order
    assert sorted(first.definition_order) == sorted(p.id for p in PROTEIN_FUNCTIONS)
    assert first.matched_ids == frozenset()


def test_correct_match():
    state = matching.select_protein(matching.new_game(seed=1), "7")
    state = matching.select_definition(state, "7", now=0.0)

    assert state.matched_ids == {"7"}
    assert state.selected_protein_id is None
    assert all(p.id != "7" for p in matching.remaining_proteins(state))
    assert all(p.id != "7" for p in matching.remaining_definitions(state))


def test_mismatch_keeps_selection():
    state = matching.select_protein(matching.new_game(seed=1), "1")
    state = matching.select_definition(state, "2", now=0.0)

    assert state.matched_ids == frozenset()
    assert state.selected_protein_id == "1"
    assert matching.visible_notice(state, 1.0) == matching.MISMATCH_TEXT
    assert matching.visible_notice(state, 1.5) is None


def test_definition_without_selection_is_ignored():
    state = matching.new_game(seed=1)

    assert matching.select_definition(state, "1", now=0.0) == state


def test_matched_protein_cannot_be_selected_again():
    state = matching.select_protein(matching.new_game(seed=1), "3")
    state = matching.select_definition(state, "3", now=0.0)

    assert matching.select_protein(state, "3") == state
    assert matching.select_protein(state, "99") == state


def test_game_completes():
    state = matching.new_game(seed=3)
    for p in PROTEIN_FUNCTIONS:
        assert not matching.is_complete(state)
        state = matching.select_protein(state, p.id)
        state = matching.select_definition(state, p.id, now=0.0)

    assert matching.is_complete(state)
    assert matching.remaining_definitions(state) == []


def test_remaining_definitions_follow_display_order():
    state = matching.new_game(seed=5)

    assert [p.id for p in matching.remaining_definitions(state)] == list(state.definition_order)


def test_reset():
    state = matching.select_protein(matching.new_game(seed=2), "4")
    state = matching.reset(seed=2)

    assert state.selected_protein_id is None
    assert state.definition_order == matching.new_game(seed=2).definition_order
    assert matching.protein("5").name == "Collagen"
