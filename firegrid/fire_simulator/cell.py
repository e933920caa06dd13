"""Representation of the discrete cells that make up the fire simulation.

This module defines the `Cell` class, which represents the fundamental unit of
the forest grid. Each `Cell` owns its burn state and the number of steps it
has been burning. Cells hold no references to their neighbors; spread between
cells is handled by the simulation engine.

Classes:
    - Cell: A square forest unit with a three state burn lifecycle.

.. autoclass:: Cell
    :members:
"""

from firegrid.utilities.fire_util import CellStates, BURN_STEPS, UtilFuncs
from firegrid.utilities.logger_schemas import CellLogEntry


class Cell:
    """Represents a single forest cell in the fire model.

    A cell moves through the states ``UNTOUCHED -> BURNING -> SCORCHED``. It
    transitions to BURNING exactly once, either by direct ignition or by
    catching fire from a neighbor, and is scorched after `BURN_STEPS`
    step-increments. SCORCHED is terminal.

    Attributes:
        id (int): Unique identifier for the cell (row-major index).
        row (int): Row index of the cell in the simulation grid.
        col (int): Column index of the cell in the simulation grid.
        state (CellStates): Current fire state (UNTOUCHED, BURNING, SCORCHED).
        burn_duration (int): Number of steps the cell has spent burning.
    """

    def __init__(self, id: int, row: int, col: int):
        self.id = id

        # Set cell indices
        self._row = row
        self._col = col

        self._state = CellStates.UNTOUCHED
        self._burn_duration = 0

    def ignite(self) -> bool:
        """Sets the cell on fire if it has not burned yet.

        Igniting a cell that is already burning or scorched has no effect.

        Returns:
            bool: `True` if the cell transitioned to BURNING, `False` otherwise.
        """
        if self._state != CellStates.UNTOUCHED:
            return False

        self._state = CellStates.BURNING
        self._burn_duration = 0
        return True

    def increment_burn(self):
        """Advances a burning cell by one step.

        The cell is scorched once its burn duration reaches `BURN_STEPS`.
        Untouched and scorched cells are left unchanged.
        """
        if self._state != CellStates.BURNING:
            return

        self._burn_duration += 1

        if self._burn_duration >= BURN_STEPS:
            self._state = CellStates.SCORCHED

    def reset(self):
        """Returns the cell to its unburned starting condition."""
        self._state = CellStates.UNTOUCHED
        self._burn_duration = 0

    def to_log_entry(self, timestamp: int) -> CellLogEntry:
        """Returns a log row describing the cell at simulation tick 'timestamp'."""
        return CellLogEntry(
            timestamp=timestamp,
            id=self.id,
            row=self._row,
            col=self._col,
            state=self._state,
            burn_duration=self._burn_duration
        )

    def __str__(self):
        return (f"(id: {self.id}, {self._row}, {self._col}, "
                f"state: {UtilFuncs.get_state_name(self._state)}, "
                f"burn duration: {self._burn_duration})")

    def __repr__(self):
        return f"Cell(id={self.id}, row={self._row}, col={self._col})"

    @property
    def row(self) -> int:
        """Row index of the cell in the grid."""
        return self._row

    @property
    def col(self) -> int:
        """Column index of the cell in the grid."""
        return self._col

    @property
    def state(self) -> int:
        """Current state of the cell (UNTOUCHED, BURNING, or SCORCHED)."""
        return self._state

    @property
    def burn_duration(self) -> int:
        """Number of step-increments the cell has received while burning."""
        return self._burn_duration

    @property
    def is_untouched(self) -> bool:
        return self._state == CellStates.UNTOUCHED

    @property
    def is_burning(self) -> bool:
        return self._state == CellStates.BURNING

    @property
    def is_burned(self) -> bool:
        return self._state == CellStates.SCORCHED
