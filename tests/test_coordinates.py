"""
Tests for the folding canvas layout.
"""
import math

import pytest

from simulations import coordinates
from simulations.coordinates import hydrogen_bond_pairs, layout_stage, position, residue_class, residue_color
from states import NUM_RESIDUES, ResidueClass, SecondaryVariant, Stage, StageSimulationState


def test_primary_is_a_straight_line():
    assert position(0, Stage.PRIMARY) == (100.0, 200.0)
    assert position(29, Stage.PRIMARY) == (680.0, 200.0)


def test_helix_follows_a_sine():
    x, y = position(3, Stage.SECONDARY, SecondaryVariant.HELIX)

    assert x == pytest.approx(154.0)
    assert y == pytest.approx(250 + 50 * math.sin(1.5))


def test_sheet_upper_strand_zigzags():
    assert position(0, Stage.SECONDARY, SecondaryVariant.SHEET) == (140.0, 185.0)
    assert position(1, Stage.SECONDARY, SecondaryVariant.SHEET) == (175.0, 215.0)
    assert position(14, Stage.SECONDARY, SecondaryVariant.SHEET) == (630.0, 185.0)


def test_sheet_lower_strand_runs_back():
    # Residue 15 sits under residue 14, residue 29 under residue 0
    assert position(15, Stage.SECONDARY, SecondaryVariant.SHEET) == (630.0, 285.0)
    assert position(29, Stage.SECONDARY, SecondaryVariant.SHEET) == (140.0, 285.0)


def test_globule_midpoint_is_the_centre():
    assert position(15, Stage.TERTIARY) == pytest.approx((400.0, 250.0))


def test_globule_spiral():
    x, y = position(0, Stage.TERTIARY)

    assert x == pytest.approx(400 - 15 * 12)
    assert y == pytest.approx(250.0)


def test_quaternary_reuses_the_globule():
    for i in range(NUM_RESIDUES):
        assert position(i, Stage.QUATERNARY) == position(i, Stage.TERTIARY)


@pytest.mark.parametrize("index", [-1, NUM_RESIDUES])
def test_index_out_of_range(index):
    with pytest.raises(ValueError):
        position(index, Stage.PRIMARY)


def test_position_is_pure():
    assert position(7, Stage.SECONDARY, SecondaryVariant.SHEET) == position(7, Stage.SECONDARY, SecondaryVariant.SHEET)


def test_layout_waits_for_completion():
    """The chain keeps its earned shape until the next milestone completes."""
    state = StageSimulationState(current_stage=Stage.SECONDARY, completed=(True, False, False, False))
    assert layout_stage(state) is Stage.PRIMARY

    state = state.model_copy(update={"completed": (True, True, False, False)})
    assert layout_stage(state) is Stage.SECONDARY

    state = state.model_copy(update={"current_stage": Stage.TERTIARY})
    assert layout_stage(state) is Stage.SECONDARY

    state = state.model_copy(update={"completed": (True, True, True, False)})
    assert layout_stage(state) is Stage.TERTIARY


def test_chain_positions_use_variant():
    state = StageSimulationState(current_stage=Stage.SECONDARY, completed=(True, True, False, False),
                                 secondary_variant=SecondaryVariant.SHEET)

    positions = coordinates.chain_positions(state)

    assert len(positions) == NUM_RESIDUES
    assert positions[0] == (140.0, 185.0)
    assert coordinates.residue_position(0, state) == positions[0]


def test_residue_classes():
    assert residue_class(15) is ResidueClass.HYDROPHOBIC
    assert residue_class(5) is ResidueClass.CYSTEINE
    assert residue_class(20) is ResidueClass.CYSTEINE
    assert residue_class(8) is ResidueClass.ACIDIC
    assert residue_class(22) is ResidueClass.BASIC
    assert residue_class(2) is ResidueClass.POLAR
    assert residue_class(0) is ResidueClass.NEUTRAL


def test_residue_colors_by_stage():
    assert residue_color(10, Stage.PRIMARY) == "hsl(120, 75%, 65%)"
    assert residue_color(8, Stage.SECONDARY) == coordinates.BACKBONE_GREY
    assert residue_color(8, Stage.TERTIARY) == coordinates.RESIDUE_COLORS[ResidueClass.ACIDIC]


def test_hydrogen_bond_pairs():
    helix = hydrogen_bond_pairs(SecondaryVariant.HELIX)
    sheet = hydrogen_bond_pairs(SecondaryVariant.SHEET)

    assert helix[0] == (0, 4)
    assert helix[-1] == (25, 29)
    assert sheet[0] == (0, 29)
    assert sheet[-1] == (11, 18)


def test_special_bonds_join_matching_residues():
    a, b = coordinates.DISULFIDE_BRIDGE
    assert residue_class(a) is residue_class(b) is ResidueClass.CYSTEINE

    acid, base = coordinates.IONIC_BOND
    assert residue_class(acid) is ResidueClass.ACIDIC
    assert residue_class(base) is ResidueClass.BASIC
