"""Various sets of constants and helper functions useful throughout the codebase

.. autoclass:: CellStates
    :members:

.. autoclass:: WindDirection
    :members:

.. autoclass:: UtilFuncs
    :members:

"""

from enum import Enum
from numbers import Integral, Real
from typing import Tuple, Union

from firegrid.exceptions import ValidationError

# Change in spread probability along the wind axis
WIND_ADJUSTMENT = 0.1

# Number of step-increments a cell burns for before it is scorched
BURN_STEPS = 2

# Rows and columns in a grid when no size is given
DEFAULT_GRID_SIZE = 11


class CellStates:
    """Enumeration of the possible cell states.

    Attributes:
        - **UNTOUCHED** (int): Represents a cell that has not caught fire.
        - **BURNING** (int): Represents a cell that is currently on fire.
        - **SCORCHED** (int): Represents a cell that has burned out; terminal.
    """
    # Cell States:
    UNTOUCHED, BURNING, SCORCHED = 0, 1, 2

    names = {
        UNTOUCHED: "UNTOUCHED",
        BURNING: "BURNING",
        SCORCHED: "SCORCHED"
    }


class WindDirection(Enum):
    """Compass directions used both for the global wind and for spread tests.

    Wind direction is the direction the fire is blown toward. NORTH points
    toward row 0 of the grid and WEST toward column 0.
    """
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    def opposite(self) -> "WindDirection":
        """Returns the direction pointing the other way along the same axis."""
        return _OPPOSITES[self]

    @property
    def offset(self) -> Tuple[int, int]:
        """(row, col) step from a cell to its neighbor in this direction."""
        return _OFFSETS[self]

    @classmethod
    def parse(cls, token: Union["WindDirection", str]) -> "WindDirection":
        """Converts a direction token into a :class:`WindDirection`.

        Accepts an existing member, the full name (``"north"``) or the single
        letter used by the simulator's wind selector (``"N"``). Matching is
        case-insensitive and ignores surrounding whitespace.

        Args:
            token (Union[WindDirection, str]): direction to convert.

        Raises:
            ValidationError: if the token does not name a direction.

        Returns:
            WindDirection: the matching direction.
        """
        if isinstance(token, cls):
            return token

        if isinstance(token, str):
            key = token.strip().upper()
            for direction in cls:
                if key == direction.name or key == direction.value:
                    return direction

        raise ValidationError("Unrecognised direction", field="direction", value=token)


_OPPOSITES = {
    WindDirection.NORTH: WindDirection.SOUTH,
    WindDirection.SOUTH: WindDirection.NORTH,
    WindDirection.EAST: WindDirection.WEST,
    WindDirection.WEST: WindDirection.EAST,
}

_OFFSETS = {
    WindDirection.NORTH: (-1, 0),
    WindDirection.SOUTH: (1, 0),
    WindDirection.WEST: (0, -1),
    WindDirection.EAST: (0, 1),
}

# Order in which a burning cell tests its neighbors
SPREAD_ORDER = (WindDirection.NORTH, WindDirection.SOUTH, WindDirection.WEST, WindDirection.EAST)


def is_int(value) -> bool:
    """Returns `True` for integers, including numpy integers, but not bools."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_probability(probability: float, field: str = "probability") -> float:
    """Checks that a probability is a real number within [0, 1].

    Out of range values are rejected rather than clamped.

    Raises:
        ValidationError: if 'probability' is not a number or lies outside [0, 1].

    Returns:
        float: the probability as a float.
    """
    if isinstance(probability, bool) or not isinstance(probability, Real):
        raise ValidationError("Probability must be a real number", field=field, value=probability)

    if not 0.0 <= probability <= 1.0:
        raise ValidationError("Probability must be between 0 and 1", field=field, value=probability)

    return float(probability)


def adjust_probability(base_probability: float,
                       wind_direction: Union[WindDirection, str],
                       spread_direction: Union[WindDirection, str]) -> float:
    """Adjusts a spread probability for the effect of the wind.

    Spread downwind (same direction as the wind) is WIND_ADJUSTMENT more
    likely, spread upwind is WIND_ADJUSTMENT less likely, and spread across the
    wind is unchanged. The result is kept within [0, 1].

    Args:
        base_probability (float): probability of spread without wind, in [0, 1].
        wind_direction (Union[WindDirection, str]): direction the wind blows toward.
        spread_direction (Union[WindDirection, str]): direction from the burning
                                                      cell to the neighbor tested.

    Raises:
        ValidationError: if the probability or either direction is invalid.

    Returns:
        float: wind adjusted probability in [0, 1].
    """
    p = validate_probability(base_probability)
    wind = WindDirection.parse(wind_direction)
    spread = WindDirection.parse(spread_direction)

    if spread == wind:
        return min(p + WIND_ADJUSTMENT, 1.0)

    if spread == wind.opposite():
        return max(p - WIND_ADJUSTMENT, 0.0)

    return p


class UtilFuncs:
    """Various utility functions that are useful across numerous files.
    """
    @staticmethod
    def get_center(size: int) -> Tuple[int, int]:
        """Returns the (row, col) of the center cell of a square grid.

        For even sizes the cell just below and right of the midpoint is used.
        """
        return size // 2, size // 2

    @staticmethod
    def get_state_name(state: int) -> str:
        """Returns a readable name for a :class:`CellStates` value."""
        return CellStates.names.get(state, str(state))
