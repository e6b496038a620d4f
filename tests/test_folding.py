"""
Tests for the folding stage machine and its animation timer.
"""
import pytest

from simulations import folding, timer
from states import SecondaryVariant, Stage


def _complete_stage(state, now=0.0):
    state = folding.trigger_action(state, now)
    return folding.tick(state, now + timer.ANIMATION_SECONDS)


def test_initial_state():
    state = folding.initial_state()

    assert state.current_stage is Stage.PRIMARY
    assert state.completed == (False, False, False, False)
    assert not state.is_animating
    assert state.pending is None


def test_trigger_starts_animation():
    state = folding.trigger_action(folding.initial_state(), now=10.0)

    assert state.is_animating
    assert state.pending.stage is Stage.PRIMARY
    assert state.pending.due_at == pytest.approx(13.0)
    assert folding.status_text(state) == "Synthesizing..."


def test_completion_waits_for_the_timer():
    state = folding.trigger_action(folding.initial_state(), now=0.0)

    assert folding.tick(state, 2.9) == state

    done = folding.tick(state, 3.0)
    assert done.is_completed(Stage.PRIMARY)
    assert not done.is_animating
    assert done.pending is None
    assert folding.status_text(done) == "Structure Confirmed!"


def test_trigger_ignored_while_animating_or_completed():
    animating = folding.trigger_action(folding.initial_state(), now=0.0)
    assert folding.trigger_action(animating, now=1.0) == animating

    done = folding.tick(animating, 3.0)
    assert folding.trigger_action(done, now=4.0) == done


def test_advance_requires_completion():
    state = folding.initial_state()
    assert folding.advance(state) == state

    state = folding.advance(_complete_stage(state))
    assert state.current_stage is Stage.SECONDARY


def test_cannot_advance_past_quaternary():
    state = folding.initial_state()
    for _ in range(3):
        state = folding.advance(_complete_stage(state))
    state = _complete_stage(state)

    assert state.current_stage is Stage.QUATERNARY
    assert not folding.can_advance(state)
    assert folding.advance(state) == state


def test_variant_needs_secondary_structure():
    state = folding.advance(_complete_stage(folding.initial_state()))
    assert folding.select_variant(state, SecondaryVariant.SHEET) == state

    state = _complete_stage(state)
    state = folding.select_variant(state, SecondaryVariant.SHEET)
    assert state.secondary_variant is SecondaryVariant.SHEET


def test_denature_only_after_assembly():
    state = folding.initial_state()
    assert folding.denature(state) == state

    for _ in range(3):
        state = folding.advance(_complete_stage(state))
    assert folding.denature(state) == state

    state = folding.denature(_complete_stage(state))
    assert state.is_denatured
    assert "Denatured" in folding.status_text(state)
    assert folding.denature(state) == state


def test_reset_discards_pending_timer():
    state = folding.trigger_action(folding.initial_state(), now=0.0)
    state = folding.reset(state)

    assert state == folding.initial_state()
    assert folding.tick(state, 100.0) == state


def test_stale_timer_does_not_complete_another_stage():
    state = folding.trigger_action(folding.initial_state(), now=0.0)
    # Stage changed underneath the timer
    state = state.model_copy(update={"current_stage": Stage.SECONDARY})

    state = folding.tick(state, 5.0)

    assert state.completed == (False, False, False, False)
    assert state.pending is None
    assert not state.is_animating


def test_timer_helpers():
    t = timer.start_timer(Stage.TERTIARY, now=5.0, duration=2.0)

    assert t.stage is Stage.TERTIARY
    assert not t.is_due(6.9)
    assert t.is_due(7.0)

    hint = timer.notice("Try again", now=1.0)
    assert timer.visible_text(hint, 2.0) == "Try again"
    assert timer.visible_text(hint, 2.5) is None
    assert timer.visible_text(None, 0.0) is None
