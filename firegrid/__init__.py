"""firegrid - wind driven forest fire spread on a square grid."""

from firegrid.fire_simulator.fire import FireSim
from firegrid.fire_simulator.cell import Cell
from firegrid.utilities.fire_util import CellStates, WindDirection, adjust_probability
from firegrid.utilities.data_classes import SimParams, SimResult
from firegrid.sim_runner import run_sim
from firegrid.exceptions import (
    FireGridError,
    ConfigurationError,
    SimulationError,
    ValidationError,
    GridError,
)

__version__ = "0.1.0"

__all__ = [
    "FireSim",
    "Cell",
    "CellStates",
    "WindDirection",
    "adjust_probability",
    "SimParams",
    "SimResult",
    "run_sim",
    "FireGridError",
    "ConfigurationError",
    "SimulationError",
    "ValidationError",
    "GridError",
]
