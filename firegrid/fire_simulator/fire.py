"""
Core fire simulation model.

This module defines the `FireSim` class, which implements a **forest fire
simulation** on a square grid. Fire spreads from burning cells to their four
orthogonal neighbors with a probability that is biased by a single global
wind direction.

Classes:
    - FireSim: The grid based forest fire simulation engine.

.. autoclass:: FireSim
    :members:
"""

from typing import Dict, List, Optional, Tuple, Union
import numpy as np

from firegrid.base_classes.grid_manager import GridManager
from firegrid.exceptions import ValidationError
from firegrid.fire_simulator.cell import Cell
from firegrid.utilities.fire_util import (
    CellStates,
    WindDirection,
    UtilFuncs,
    DEFAULT_GRID_SIZE,
    adjust_probability,
    validate_probability,
)
from firegrid.utilities.logger_schemas import CellLogEntry


class FireSim:
    """A square grid forest fire simulation model.

    `FireSim` owns an N x N grid of :class:`Cell` objects and the random
    number generator used to decide spread. A driver ignites one cell and
    then calls :meth:`step` until :meth:`has_active_fire` returns `False`.

    All cells are evaluated synchronously: the set of burning cells is
    captured at the start of each step and only those cells spread fire or
    advance their burn duration during that step. A cell ignited during a
    step therefore never spreads fire before the next step.

    Attributes:
        logger (Optional[Logger]): A logging utility for storing simulation outputs.
        log_freq (int): Number of steps between logger flushes.
        _grid (GridManager): Storage and neighbor lookup for the cells.
        _rng (np.random.Generator): Random number source owned by this sim.
        _iters (int): Number of steps taken since the last reset.
        _updated_cells (dict): Cells modified during the current step.

    Methods:
        ignite(): Sets a single cell on fire.
        step(): Advances the simulation by one time step.
        has_active_fire(): Reports whether any cell is still burning.
        reset(): Returns every cell to its unburned state.
    """
    def __init__(self, size: int = DEFAULT_GRID_SIZE,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 logger=None,
                 log_freq: int = 10):
        """Initializes the grid of cells and the simulation's random source.

        Args:
            size (int, optional): number of rows and columns in the grid.
                                  Defaults to 11.
            rng (np.random.Generator, optional): generator used for spread draws.
                                                 If `None` one is created from
                                                 'seed'.
            seed (int, optional): seed for the generator created when 'rng' is
                                  not given. Defaults to `None`.
            logger (Logger, optional): logger to record cell changes to.
            log_freq (int, optional): steps between logger flushes. Defaults to 10.

        Raises:
            ValidationError: if 'size' is not a positive integer.
        """
        self._grid = GridManager(size)
        self._grid.init_grid(lambda cell_id, row, col: Cell(cell_id, row, col))

        if rng is None:
            rng = np.random.default_rng(seed)
        self._rng = rng

        self._iters = 0
        self._updated_cells: Dict[int, Cell] = {}

        self.log_freq = max(1, int(log_freq))
        self.logger = None
        if logger is not None:
            self.set_logger(logger)

    def set_logger(self, logger):
        """Attaches a logger and records the initial state of every cell."""
        self.logger = logger
        self._grid.logger = logger

        self.logger.cache_cell_updates(
            [cell.to_log_entry(self._iters) for cell in self._grid.iter_cells()]
        )

    # Functions for starting fires
    def ignite(self, row: int, col: int):
        """Sets the cell at [row, col] on fire.

        Only an untouched cell catches fire; igniting a cell that is already
        burning or scorched has no effect.

        Args:
            row (int): row index of the cell to ignite
            col (int): col index of the cell to ignite

        Raises:
            ValidationError: if row or col is not an integer
            GridError: if row or col is outside the grid
        """
        cell = self._grid.get_cell_from_indices(row, col)

        if cell.ignite():
            self._updated_cells[cell.id] = cell

    def ignite_center(self):
        """Sets the center cell of the grid on fire."""
        row, col = UtilFuncs.get_center(self.size)
        self.ignite(row, col)

    def step(self, probability: float, wind_direction: Union[WindDirection, str]):
        """Advances the fire simulation by one time step.

        Behavior:
            - Captures the cells burning at step entry, in row-major order.
            - For each of those cells, tests the orthogonal neighbors in the
              order north, south, west, east. An untouched neighbor consumes one
              uniform draw in [0, 1) and ignites if the draw is below the wind
              adjusted probability for that direction. Neighbors that are not
              untouched are skipped without a draw.
            - After its neighbors are tested, the cell's burn duration is
              incremented, scorching it once the duration reaches two.

        Args:
            probability (float): base probability of spread in [0, 1].
            wind_direction (Union[WindDirection, str]): direction the wind blows
                                                        toward.

        Raises:
            ValidationError: if 'probability' is outside [0, 1] or
                             'wind_direction' is not a direction. The grid is not
                             modified when the call is rejected.
        """
        try:
            probability = validate_probability(probability)
            wind = WindDirection.parse(wind_direction)
        except ValidationError as e:
            if self.logger:
                self.logger.log_message(f"Following error occurred in 'FireSim.step()': {e}")
            raise

        # Precompute spread probabilities for each direction
        spread_probs = {
            direction: adjust_probability(probability, wind, direction)
            for direction in WindDirection
        }

        burning = self._grid.get_cells_in_state(CellStates.BURNING)

        for cell in burning:
            for direction, neighbor in self._grid.get_neighbors(cell.row, cell.col):
                if not neighbor.is_untouched:
                    continue

                if self._rng.random() < spread_probs[direction]:
                    neighbor.ignite()
                    self._updated_cells[neighbor.id] = neighbor

            cell.increment_burn()
            self._updated_cells[cell.id] = cell

        self._iters += 1

        if self.logger:
            self._log_changes()

            if self._iters % self.log_freq == 0:
                self.logger.flush()

    # Drivers may call iterate() instead of step()
    iterate = step

    def has_active_fire(self) -> bool:
        """Returns `True` if at least one cell is burning."""
        return self._grid.any_in_state(CellStates.BURNING)

    def reset(self):
        """Returns every cell to the untouched state and zeroes the step count."""
        for cell in self._grid.iter_cells():
            cell.reset()

        self._iters = 0
        self._updated_cells = {}

        if self.logger:
            self.logger.log_message("Simulation reset.")
            self.logger.cache_cell_updates(
                [cell.to_log_entry(self._iters) for cell in self._grid.iter_cells()]
            )

    def _log_changes(self):
        self.logger.cache_cell_updates(self._get_cell_updates())

    def _get_cell_updates(self) -> List[CellLogEntry]:
        entries = [cell.to_log_entry(self._iters) for cell in self._updated_cells.values()]
        self._updated_cells = {}
        return entries

    # Cell queries
    def get_cell_from_indices(self, row: int, col: int) -> Cell:
        """Returns the cell at the indices [row, col] in the grid.

        Raises:
            ValidationError: if row or col is not an integer
            GridError: if row or col is out of the grid bounds
        """
        return self._grid.get_cell_from_indices(row, col)

    def state(self, row: int, col: int) -> int:
        """Returns the :class:`CellStates` value of the cell at [row, col]."""
        return self.get_cell_from_indices(row, col).state

    def is_burned(self, row: int, col: int) -> bool:
        """Returns `True` if the cell at [row, col] is scorched."""
        return self.get_cell_from_indices(row, col).is_burned

    def is_burning(self, row: int, col: int) -> bool:
        """Returns `True` if the cell at [row, col] is burning."""
        return self.get_cell_from_indices(row, col).is_burning

    def burn_duration(self, row: int, col: int) -> int:
        """Returns the number of steps the cell at [row, col] has burned for."""
        return self.get_cell_from_indices(row, col).burn_duration

    def state_array(self) -> np.ndarray:
        """Returns a (size, size) array of cell states."""
        return self._grid.state_array()

    def counts(self) -> Dict[int, int]:
        """Returns the number of cells in each :class:`CellStates` value."""
        states = self.state_array()
        return {
            CellStates.UNTOUCHED: int(np.count_nonzero(states == CellStates.UNTOUCHED)),
            CellStates.BURNING: int(np.count_nonzero(states == CellStates.BURNING)),
            CellStates.SCORCHED: int(np.count_nonzero(states == CellStates.SCORCHED)),
        }

    @property
    def burning_cells(self) -> List[Cell]:
        """List of cells that are currently burning."""
        return self._grid.get_cells_in_state(CellStates.BURNING)

    @property
    def burnt_cells(self) -> List[Cell]:
        """List of cells that have been scorched."""
        return self._grid.get_cells_in_state(CellStates.SCORCHED)

    @property
    def cell_grid(self) -> np.ndarray:
        """2D array of the cells in the sim."""
        return self._grid.cell_grid

    @property
    def cell_dict(self) -> Dict[int, Cell]:
        """Dictionary mapping cell ids to cells."""
        return self._grid.cell_dict

    @property
    def size(self) -> int:
        """Number of rows and columns in the grid."""
        return self._grid.size

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions (size, size)."""
        return self._grid.shape

    @property
    def iters(self) -> int:
        """Number of steps taken since construction or the last reset."""
        return self._iters

    @property
    def rng(self) -> np.random.Generator:
        """Random number generator owned by this sim."""
        return self._rng
