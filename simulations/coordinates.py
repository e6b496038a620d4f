"""Residue layout for the folding canvas (800 x 500 SVG units)."""

import math
from typing import Tuple

from states import (
    NUM_RESIDUES,
    ResidueClass,
    SecondaryVariant,
    Stage,
    StageSimulationState,
)

Point = Tuple[float, float]

# Primary: straight chain
PRIMARY_X0 = 100.0
PRIMARY_PITCH = 20.0
PRIMARY_Y = 200.0

# Secondary, alpha helix (side view of the coil)
HELIX_X0 = 100.0
HELIX_PITCH = 18.0
HELIX_MIDLINE = 250.0
HELIX_AMPLITUDE = 50.0
HELIX_PHASE = 0.5

# Secondary, beta sheet: two antiparallel strands
SHEET_X0 = 140.0
SHEET_SPACING = 35.0
SHEET_UPPER_Y = 200.0
SHEET_LOWER_Y = 300.0
SHEET_ZIGZAG = 15.0
SHEET_TURN = 14

# Tertiary / quaternary globule
GLOBULE_CENTER = (400.0, 250.0)
GLOBULE_SPREAD = 12.0
GLOBULE_PHASE = 0.5
CHAIN_MIDPOINT = 15

RESIDUE_COLORS = {
    ResidueClass.HYDROPHOBIC: "#ea580c",
    ResidueClass.CYSTEINE: "#facc15",
    ResidueClass.ACIDIC: "#ef4444",
    ResidueClass.BASIC: "#3b82f6",
    ResidueClass.POLAR: "#10b981",
    ResidueClass.NEUTRAL: "#cbd5e1",
}
BACKBONE_GREY = "#cbd5e1"


def _check_index(index: int):
    if not 0 <= index < NUM_RESIDUES:
        raise ValueError(f"residue index must be in 0..{NUM_RESIDUES - 1}, got {index}")


def residue_class(index: int) -> ResidueClass:
    _check_index(index)
    if 13 <= index <= 17:
        return ResidueClass.HYDROPHOBIC
    if index in (5, 20):
        return ResidueClass.CYSTEINE
    if index == 8:
        return ResidueClass.ACIDIC
    if index == 22:
        return ResidueClass.BASIC
    if index in (2, 27):
        return ResidueClass.POLAR
    return ResidueClass.NEUTRAL


def _sheet_position(index: int) -> Point:
    # Upper strand runs left to right, lower strand comes back right to left
    if index <= SHEET_TURN:
        track_index, y0 = index, SHEET_UPPER_Y
    else:
        track_index, y0 = (NUM_RESIDUES - 1) - index, SHEET_LOWER_Y
    x = SHEET_X0 + track_index * SHEET_SPACING
    y = y0 + (-SHEET_ZIGZAG if track_index % 2 == 0 else SHEET_ZIGZAG)
    return x, y


def position(index: int, stage: Stage, variant: SecondaryVariant = SecondaryVariant.HELIX) -> Point:
    """Return the (x, y) canvas position of residue `index` laid out for `stage`.

    Pure: the result depends only on the arguments. Completion gating is
    applied by `layout_stage`, not here.
    """
    _check_index(index)
    stage = Stage(stage)

    if stage is Stage.PRIMARY:
        return PRIMARY_X0 + index * PRIMARY_PITCH, PRIMARY_Y

    if stage is Stage.SECONDARY:
        if variant is SecondaryVariant.SHEET:
            return _sheet_position(index)
        x = HELIX_X0 + index * HELIX_PITCH
        y = HELIX_MIDLINE + HELIX_AMPLITUDE * math.sin(index * HELIX_PHASE)
        return x, y

    # Radius grows with the distance from the chain midpoint
    cx, cy = GLOBULE_CENTER
    radius = (index - CHAIN_MIDPOINT) * GLOBULE_SPREAD
    angle = index * GLOBULE_PHASE
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def layout_stage(state: StageSimulationState) -> Stage:
    """The structure the chain has actually earned at the current stage.

    A stage's layout is used only once its milestone has completed, and the
    globule needs the secondary structure first.
    """
    if state.current_stage >= Stage.TERTIARY and state.completed[1] and state.completed[2]:
        return Stage.TERTIARY
    if state.current_stage >= Stage.SECONDARY and state.completed[0] and state.completed[1]:
        return Stage.SECONDARY
    return Stage.PRIMARY


def residue_position(index: int, state: StageSimulationState) -> Point:
    return position(index, layout_stage(state), state.secondary_variant)


def chain_positions(state: StageSimulationState):
    stage = layout_stage(state)
    return [position(i, stage, state.secondary_variant) for i in range(NUM_RESIDUES)]


def residue_color(index: int, stage: Stage) -> str:
    """Bead colour: rainbow while synthesising, grey backbone view, then R-group classes."""
    stage = Stage(stage)
    if stage is Stage.PRIMARY:
        return f"hsl({index * 12}, 75%, 65%)"
    if stage is Stage.SECONDARY:
        return BACKBONE_GREY
    return RESIDUE_COLORS[residue_class(index)]


def hydrogen_bond_pairs(variant: SecondaryVariant):
    """Backbone C=O ... H-N contacts drawn once the secondary structure forms."""
    if variant is SecondaryVariant.SHEET:
        # Facing residues of the two antiparallel strands
        return [(i, NUM_RESIDUES - 1 - i) for i in range(12)]
    # i -> i+4 in an alpha helix
    return [(i, i + 4) for i in range(NUM_RESIDUES - 4)]


DISULFIDE_BRIDGE = (5, 20)
IONIC_BOND = (8, 22)
