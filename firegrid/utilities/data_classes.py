from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from firegrid.exceptions import ConfigurationError, ValidationError
from firegrid.utilities.fire_util import (
    WindDirection,
    UtilFuncs,
    DEFAULT_GRID_SIZE,
    validate_probability,
    is_int,
)


@dataclass
class SimParams:
    """Inputs needed to set up and drive a single simulation run.

    Attributes:
        size (int): number of rows and columns in the grid.
        probability (float): base probability of spread in [0, 1].
        wind_direction (WindDirection): direction the wind blows toward.
        seed (Optional[int]): seed for the sim's random generator.
        max_steps (Optional[int]): stop the run after this many steps even if
                                   fire remains. `None` runs until extinction.
        ignition (Optional[Tuple[int, int]]): (row, col) of the starting fire,
                                              the grid center when `None`.
        log_folder (Optional[str]): folder to write run logs to, no logs when `None`.
        log_freq (int): steps between logger flushes.
    """
    size: int = DEFAULT_GRID_SIZE
    probability: float = 0.3
    wind_direction: Union[WindDirection, str] = WindDirection.NORTH
    seed: Optional[int] = None
    max_steps: Optional[int] = None
    ignition: Optional[Tuple[int, int]] = None
    log_folder: Optional[str] = None
    log_freq: int = field(default=10)

    def __post_init__(self):
        try:
            self.wind_direction = WindDirection.parse(self.wind_direction)
        except ValidationError as e:
            raise ConfigurationError(str(e), parameter="wind_direction") from e

    def validate(self):
        """Checks that all parameters are usable.

        Raises:
            ConfigurationError: naming the first invalid parameter.
        """
        if not is_int(self.size) or self.size < 1:
            raise ConfigurationError(f"Grid size must be a positive integer, got {self.size!r}",
                                     parameter="size")

        try:
            validate_probability(self.probability)
        except ValidationError as e:
            raise ConfigurationError(str(e), parameter="probability") from e

        if self.seed is not None and not is_int(self.seed):
            raise ConfigurationError(f"Seed must be an integer, got {self.seed!r}",
                                     parameter="seed")

        if self.max_steps is not None and (not is_int(self.max_steps) or self.max_steps < 1):
            raise ConfigurationError(f"max_steps must be a positive integer, got {self.max_steps!r}",
                                     parameter="max_steps")

        if self.ignition is not None:
            if (not isinstance(self.ignition, (tuple, list)) or len(self.ignition) != 2
                    or not all(is_int(v) for v in self.ignition)):
                raise ConfigurationError(f"Ignition must be a (row, col) pair, got {self.ignition!r}",
                                         parameter="ignition")

            row, col = self.ignition
            if not (0 <= row < self.size and 0 <= col < self.size):
                raise ConfigurationError(f"Ignition {self.ignition} is outside a grid of size {self.size}",
                                         parameter="ignition")

        if not is_int(self.log_freq) or self.log_freq < 1:
            raise ConfigurationError(f"log_freq must be a positive integer, got {self.log_freq!r}",
                                     parameter="log_freq")

    def ignition_point(self) -> Tuple[int, int]:
        if self.ignition is not None:
            return tuple(self.ignition)

        return UtilFuncs.get_center(self.size)

@dataclass
class SimResult:
    ticks: int
    burnt_cells: int
    untouched_cells: int
    extinguished: bool
