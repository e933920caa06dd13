"""Grid management for the square forest grid.

This module provides the GridManager class which handles all grid-related
operations for the fire simulation, including cell storage, index
validation, orthogonal neighbor lookup, and state snapshots.

Classes:
    - GridManager: Manages the square cell grid for fire simulation.
"""

from typing import Optional, List, Tuple, Dict, Callable, Iterator, TYPE_CHECKING
import numpy as np

from firegrid.exceptions import GridError, ValidationError
from firegrid.utilities.fire_util import CellStates, WindDirection, SPREAD_ORDER, is_int

if TYPE_CHECKING:
    from firegrid.fire_simulator.cell import Cell


class GridManager:
    """Manages the square cell grid for fire simulation.

    Handles grid initialization, cell storage, index validation and
    neighbor calculations. Only the four orthogonal neighbors of a cell are
    ever consulted and the grid does not wrap around at its edges.

    Attributes:
        cell_grid (np.ndarray): 2D array of Cell objects.
        cell_dict (Dict[int, Cell]): Dictionary mapping cell IDs to Cell objects.
        shape (Tuple[int, int]): Grid dimensions (size, size).
        size (int): Number of rows (and columns) in the grid.
    """

    def __init__(self, size: int):
        """Initialize the grid manager.

        Creates the backing array for the cell grid but does not populate
        cells. Use init_grid() to populate with Cell objects.

        Args:
            size: Number of rows and columns in the grid.

        Raises:
            ValidationError: If size is not a positive integer.
        """
        if not is_int(size) or size < 1:
            raise ValidationError("Grid size must be a positive integer", field="size", value=size)

        self._size = int(size)
        self._shape = (self._size, self._size)
        self._cell_grid = np.empty(self._shape, dtype=object)

        self._cell_dict: Dict[int, 'Cell'] = {}

        # Reference to logger for error messages (set by parent)
        self.logger = None

    @property
    def cell_grid(self) -> np.ndarray:
        """2D array of Cell objects."""
        return self._cell_grid

    @property
    def cell_dict(self) -> Dict[int, 'Cell']:
        """Dictionary mapping cell IDs to Cell objects."""
        return self._cell_dict

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions (size, size)."""
        return self._shape

    @property
    def size(self) -> int:
        """Number of rows and columns in the grid."""
        return self._size

    def set_cell(self, row: int, col: int, cell: 'Cell') -> None:
        """Place a cell in the grid at the specified position.

        Args:
            row: Row index.
            col: Column index.
            cell: Cell object to place.
        """
        self._cell_grid[row, col] = cell
        self._cell_dict[cell.id] = cell

    def init_grid(self, cell_factory: Callable[[int, int, int], 'Cell']) -> None:
        """Initialize the grid by creating cells using the provided factory.

        Cells are created in row-major order so a cell's id equals
        ``row * size + col``.

        Args:
            cell_factory: Callable that takes (cell_id, row, col) and returns
                a Cell object.
        """
        cell_id = 0
        for row in range(self._size):
            for col in range(self._size):
                cell = cell_factory(cell_id, row, col)
                self.set_cell(row, col, cell)
                cell_id += 1

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if (row, col) lies on the grid."""
        return 0 <= row < self._size and 0 <= col < self._size

    def validate_indices(self, row: int, col: int) -> None:
        """Check that (row, col) are integer indices on the grid.

        Raises:
            ValidationError: If row or col is not an integer.
            GridError: If row or col is outside the grid.
        """
        for name, value in (("row", row), ("col", col)):
            if not is_int(value):
                msg = (f"Row and column must be integer index values. "
                       f"Input was {type(row)}, {type(col)}")
                self._log_error("get_cell_from_indices", msg)
                raise ValidationError(msg, field=name, value=value)

        if not self.in_bounds(row, col):
            msg = (f"Out of bounds error. {row}, {col} are out of bounds "
                   f"for grid of size {self._size}, {self._size}")
            self._log_error("get_cell_from_indices", msg)
            raise GridError(msg, row=row, col=col)

    def get_cell_from_indices(self, row: int, col: int) -> 'Cell':
        """Return the cell at the indices [row, col] in the cell grid.

        Rows increase from north to south, columns from west to east.

        Raises:
            ValidationError: If row or col is not an integer.
            GridError: If row or col is outside the grid.
        """
        self.validate_indices(row, col)
        return self._cell_grid[row, col]

    def get_neighbors(self, row: int, col: int) -> List[Tuple[WindDirection, 'Cell']]:
        """Return the orthogonal neighbors of the cell at (row, col).

        Neighbors are listed in spread order (north, south, west, east).
        Positions that fall off the grid are omitted, so edge cells have
        three neighbors and corner cells two.

        Args:
            row: Row index of the center cell.
            col: Column index of the center cell.

        Returns:
            List of (direction, cell) pairs, where direction points from the
            center cell toward the neighbor.
        """
        neighbors = []
        for direction in SPREAD_ORDER:
            d_row, d_col = direction.offset
            n_row, n_col = row + d_row, col + d_col

            if self.in_bounds(n_row, n_col):
                neighbors.append((direction, self._cell_grid[n_row, n_col]))

        return neighbors

    def iter_cells(self) -> Iterator['Cell']:
        """Iterate over all cells in row-major order."""
        for row in range(self._size):
            for col in range(self._size):
                yield self._cell_grid[row, col]

    def get_cells_in_state(self, state: int) -> List['Cell']:
        """Return all cells currently in 'state', in row-major order."""
        return [cell for cell in self.iter_cells() if cell.state == state]

    def any_in_state(self, state: int) -> bool:
        """Return True if at least one cell is in 'state'."""
        return any(cell.state == state for cell in self.iter_cells())

    def state_array(self) -> np.ndarray:
        """Return a (size, size) integer array of cell states."""
        states = np.full(self._shape, CellStates.UNTOUCHED, dtype=np.int32)
        for cell in self.iter_cells():
            states[cell.row, cell.col] = cell.state

        return states

    def burn_duration_array(self) -> np.ndarray:
        """Return a (size, size) integer array of cell burn durations."""
        durations = np.zeros(self._shape, dtype=np.int32)
        for cell in self.iter_cells():
            durations[cell.row, cell.col] = cell.burn_duration

        return durations

    def _log_error(self, method: str, msg: str) -> None:
        if self.logger:
            self.logger.log_message(f"Following error occurred in 'GridManager.{method}()': "
                                    f"{msg}")
