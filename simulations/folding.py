"""Four-stage protein folding and denaturation simulation.

Every transition is a pure function taking a `StageSimulationState` and
returning the next one. Out-of-sequence actions return the state unchanged;
the UI disables the matching controls so they are rarely reachable.

Typical flow:
    >>> state = initial_state()
    >>> state = trigger_action(state, now=0.0)     # synthesise polypeptide
    >>> state = tick(state, now=3.0)               # animation window over
    >>> state = advance(state)                     # on to secondary structure
"""

from typing import Optional

from logging_config import get_logger
from simulations.timer import ANIMATION_SECONDS, start_timer
from states import SecondaryVariant, Stage, StageSimulationState

logger = get_logger(__name__)


STAGES = [
    {
        "title": "Primary Structure",
        "subtitle": "Amino Acid Sequence",
        "description": (
            "The primary structure is the specific sequence of amino acids determined by DNA. "
            "During translation, the ribosome reads mRNA to synthesize this polypeptide chain."
        ),
        "action_label": "Synthesize Polypeptide",
        "hint": "The Ribosome adds amino acids one by one based on mRNA codons.",
    },
    {
        "title": "Secondary Structure",
        "subtitle": "Backbone H-Bonding",
        "description": (
            "Hydrogen bonds form specifically between the Carbonyl Oxygen (C=O) and Amino Hydrogen (N-H) "
            "of the polypeptide backbone. R-groups are NOT involved. This creates repeating patterns: "
            "the coiled Alpha Helix or the flat Beta-Pleated Sheet."
        ),
        "action_label": "Form Hydrogen Bonds",
        "hint": "",
    },
    {
        "title": "Tertiary Structure",
        "subtitle": "R-Group Interactions",
        "description": (
            "To minimize free energy in an aqueous environment, the protein folds into a compact 3D globular "
            "shape. Hydrophobic R-groups cluster in the core (entropy driven), while charged and polar groups "
            "form Ionic and Hydrogen bonds. Covalent Disulfide bridges lock the structure."
        ),
        "action_label": "Fold Side Chains",
        "hint": "Tertiary folding is driven by R-group interactions to create a stable 3D shape.",
    },
    {
        "title": "Quaternary Structure",
        "subtitle": "Complex Assembly & Function",
        "description": (
            "In Hemoglobin, four globular polypeptide subunits (2 Alpha, 2 Beta) assemble into a functional "
            "tetramer. Each subunit contains a Heme group with Iron (Fe2+) that binds Oxygen. This specific "
            "arrangement allows the protein to transport oxygen efficiently throughout the body."
        ),
        "action_label": "Assemble Hemoglobin",
        "hint": "Hemoglobin has 4 subunits: 2 Alpha (Yellow) and 2 Beta (Red).",
    },
]


def initial_state() -> StageSimulationState:
    return StageSimulationState()


def can_trigger(state: StageSimulationState) -> bool:
    return not state.is_animating and not state.is_completed(state.current_stage)


def can_advance(state: StageSimulationState) -> bool:
    return state.is_completed(state.current_stage) and state.current_stage < Stage.QUATERNARY


def can_denature(state: StageSimulationState) -> bool:
    return state.is_completed(Stage.QUATERNARY) and not state.is_denatured


def trigger_action(state: StageSimulationState, now: float, duration: float = ANIMATION_SECONDS) -> StageSimulationState:
    """Start the current stage's animation; completion is recorded by `tick`."""
    if not can_trigger(state):
        return state
    logger.debug(f"Stage {state.current_stage.name} animation started, due in {duration}s")
    return state.model_copy(update={
        "is_animating": True,
        "pending": start_timer(state.current_stage, now, duration),
    })


def tick(state: StageSimulationState, now: float) -> StageSimulationState:
    """Record completion once the pending animation has elapsed."""
    timer = state.pending
    if timer is None or not timer.is_due(now):
        return state
    if timer.stage != state.current_stage:
        # Stage moved on underneath the timer; it can no longer complete anything
        return state.model_copy(update={"is_animating": False, "pending": None})
    completed = list(state.completed)
    completed[int(timer.stage)] = True
    logger.debug(f"Stage {timer.stage.name} completed")
    return state.model_copy(update={
        "is_animating": False,
        "pending": None,
        "completed": tuple(completed),
    })


def advance(state: StageSimulationState) -> StageSimulationState:
    if not can_advance(state):
        return state
    return state.model_copy(update={"current_stage": Stage(state.current_stage + 1)})


def select_variant(state: StageSimulationState, variant: SecondaryVariant) -> StageSimulationState:
    if not state.is_completed(Stage.SECONDARY):
        return state
    return state.model_copy(update={"secondary_variant": SecondaryVariant(variant)})


def denature(state: StageSimulationState) -> StageSimulationState:
    if not can_denature(state):
        return state
    logger.debug("Protein denatured")
    return state.model_copy(update={"is_denatured": True})


def reset(state: Optional[StageSimulationState] = None) -> StageSimulationState:
    """Back to the freshly mounted state; any pending timer is discarded."""
    return initial_state()


def status_text(state: StageSimulationState) -> str:
    stage = STAGES[state.current_stage]
    if state.is_animating:
        return "Synthesizing..."
    if not state.is_completed(state.current_stage):
        return stage["action_label"]
    if state.is_denatured:
        return ("Protein Denatured! Extreme heat has disrupted bonds and destroyed the conformation. "
                "The protein can no longer bind Oxygen.")
    return "Structure Confirmed!"
