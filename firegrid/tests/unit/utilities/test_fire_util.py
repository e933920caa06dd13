"""Tests for fire utility functions and classes.

These tests validate the cell state constants, the wind direction type,
and the wind adjusted spread probability.
"""

import itertools

import numpy as np
import pytest
from firegrid.exceptions import ValidationError
from firegrid.utilities.fire_util import (
    CellStates,
    WindDirection,
    UtilFuncs,
    SPREAD_ORDER,
    WIND_ADJUSTMENT,
    adjust_probability,
    validate_probability,
    is_int,
)


class TestCellStates:
    """Tests for CellStates enumeration."""

    def test_cell_states_values(self):
        """Cell states should have expected integer values."""
        assert CellStates.UNTOUCHED == 0
        assert CellStates.BURNING == 1
        assert CellStates.SCORCHED == 2

    def test_cell_states_ordering(self):
        """Cell states should follow the burn lifecycle order."""
        assert CellStates.UNTOUCHED < CellStates.BURNING < CellStates.SCORCHED

    def test_state_names(self):
        assert UtilFuncs.get_state_name(CellStates.BURNING) == "BURNING"
        assert UtilFuncs.get_state_name(7) == "7"


class TestWindDirection:
    """Tests for the WindDirection enumeration."""

    @pytest.mark.parametrize("direction, opposite", [
        (WindDirection.NORTH, WindDirection.SOUTH),
        (WindDirection.SOUTH, WindDirection.NORTH),
        (WindDirection.EAST, WindDirection.WEST),
        (WindDirection.WEST, WindDirection.EAST),
    ])
    def test_opposite(self, direction, opposite):
        assert direction.opposite() == opposite

    def test_opposite_is_involution(self):
        for direction in WindDirection:
            assert direction.opposite().opposite() == direction
            assert direction.opposite() != direction

    def test_offsets_point_along_grid_axes(self):
        """NORTH points toward row 0, WEST toward column 0."""
        assert WindDirection.NORTH.offset == (-1, 0)
        assert WindDirection.SOUTH.offset == (1, 0)
        assert WindDirection.WEST.offset == (0, -1)
        assert WindDirection.EAST.offset == (0, 1)

    def test_spread_order_covers_every_direction_once(self):
        assert SPREAD_ORDER == (WindDirection.NORTH, WindDirection.SOUTH,
                                WindDirection.WEST, WindDirection.EAST)
        assert set(SPREAD_ORDER) == set(WindDirection)

    @pytest.mark.parametrize("token, expected", [
        ("N", WindDirection.NORTH),
        ("s", WindDirection.SOUTH),
        (" E ", WindDirection.EAST),
        ("west", WindDirection.WEST),
        ("NORTH", WindDirection.NORTH),
        (WindDirection.SOUTH, WindDirection.SOUTH),
    ])
    def test_parse_accepts_known_tokens(self, token, expected):
        assert WindDirection.parse(token) == expected

    @pytest.mark.parametrize("token", ["NE", "", "up", None, 0, 1.5])
    def test_parse_rejects_unknown_tokens(self, token):
        """There is no silent default direction."""
        with pytest.raises(ValidationError):
            WindDirection.parse(token)


class TestIsInt:
    """Tests for the shared integer check."""

    @pytest.mark.parametrize("value", [0, -4, 11, np.int32(3), np.int64(7)])
    def test_accepts_integers(self, value):
        assert is_int(value)

    @pytest.mark.parametrize("value", [True, False, 2.0, "3", None, (1, 2)])
    def test_rejects_non_integers(self, value):
        assert not is_int(value)


class TestValidateProbability:
    """Tests for probability validation."""

    @pytest.mark.parametrize("p", [0, 0.0, 0.01, 0.5, 1, 1.0])
    def test_accepts_values_in_range(self, p):
        assert validate_probability(p) == pytest.approx(float(p))

    @pytest.mark.parametrize("p", [-0.01, 1.01, 2, float("nan"), float("inf")])
    def test_rejects_values_out_of_range(self, p):
        """Out of range values are rejected, never clamped."""
        with pytest.raises(ValidationError):
            validate_probability(p)

    @pytest.mark.parametrize("p", ["0.5", None, True])
    def test_rejects_non_numbers(self, p):
        with pytest.raises(ValidationError):
            validate_probability(p)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_probability(3.0)


def _expected_adjustment(p, wind, spread):
    if spread == wind:
        return min(p + WIND_ADJUSTMENT, 1.0)
    if spread == wind.opposite():
        return max(p - WIND_ADJUSTMENT, 0.0)
    return p


class TestAdjustProbability:
    """Tests for the wind adjusted spread probability."""

    @pytest.mark.parametrize(
        "wind, spread", list(itertools.product(WindDirection, WindDirection))
    )
    def test_all_direction_combinations(self, wind, spread):
        """Every (wind, spread) pair follows the downwind/upwind/crosswind rule."""
        for p in (0.0, 0.05, 0.3, 0.5, 0.95, 1.0):
            result = adjust_probability(p, wind, spread)
            assert result == pytest.approx(_expected_adjustment(p, wind, spread))
            assert 0.0 <= result <= 1.0

    def test_example_from_north_wind(self):
        """30% base with wind toward the north: N 40%, S 20%, E and W 30%."""
        assert adjust_probability(0.3, "N", "N") == pytest.approx(0.4)
        assert adjust_probability(0.3, "N", "S") == pytest.approx(0.2)
        assert adjust_probability(0.3, "N", "E") == pytest.approx(0.3)
        assert adjust_probability(0.3, "N", "W") == pytest.approx(0.3)

    def test_downwind_clamps_at_one(self):
        assert adjust_probability(1.0, WindDirection.EAST, WindDirection.EAST) == 1.0
        assert adjust_probability(0.95, WindDirection.EAST, WindDirection.EAST) == 1.0

    def test_upwind_clamps_at_zero(self):
        assert adjust_probability(0.0, WindDirection.EAST, WindDirection.WEST) == 0.0
        assert adjust_probability(0.05, WindDirection.EAST, WindDirection.WEST) == 0.0

    def test_crosswind_unchanged(self):
        assert adjust_probability(0.42, WindDirection.NORTH, WindDirection.EAST) == 0.42
        assert adjust_probability(0.42, WindDirection.NORTH, WindDirection.WEST) == 0.42

    def test_deterministic(self):
        first = adjust_probability(0.37, "W", "W")
        second = adjust_probability(0.37, "W", "W")
        assert first == second

    def test_invalid_probability_rejected(self):
        with pytest.raises(ValidationError):
            adjust_probability(1.2, WindDirection.NORTH, WindDirection.NORTH)

    def test_invalid_direction_rejected(self):
        with pytest.raises(ValidationError):
            adjust_probability(0.5, "NW", WindDirection.NORTH)

        with pytest.raises(ValidationError):
            adjust_probability(0.5, WindDirection.NORTH, "down")


class TestUtilFuncs:
    """Tests for UtilFuncs helpers."""

    @pytest.mark.parametrize("size, center", [(1, (0, 0)), (3, (1, 1)), (11, (5, 5)), (4, (2, 2))])
    def test_get_center(self, size, center):
        assert UtilFuncs.get_center(size) == center
