"""Custom exceptions for the firegrid simulation package.

This module defines a hierarchy of exceptions used throughout firegrid
to provide clear, specific error messages and enable targeted exception
handling by drivers of the simulation.

Exception Hierarchy:
    FireGridError (base)
    ├── ConfigurationError - Invalid configuration files or parameters
    ├── SimulationError - Errors during simulation execution
    ├── ValidationError - Input validation failures (also a ValueError)
    └── GridError - Out of bounds grid access (also an IndexError)

Example:
    >>> from firegrid.exceptions import GridError
    >>> raise GridError("Cell coordinates outside grid bounds", row=11, col=3)
"""

from typing import Optional


class FireGridError(Exception):
    """Base exception for all firegrid errors.

    All custom exceptions in firegrid inherit from this class, allowing
    callers to catch every firegrid error with a single except clause.

    Example:
        >>> try:
        ...     fire.step(0.3, "N")
        ... except FireGridError as e:
        ...     print(f"firegrid error occurred: {e}")
    """

    pass


class ConfigurationError(FireGridError):
    """Raised when a configuration file or parameter set is invalid.

    This exception is raised when:
    - The configuration file is missing or unreadable
    - Required sections are missing from the config file
    - Parameter values cannot be parsed or are out of range

    Attributes:
        message (str): Explanation of the configuration error.
        config_path (str): Path to the configuration file, if applicable.
        parameter (str): Name of the problematic parameter, if applicable.

    Example:
        >>> raise ConfigurationError(
        ...     "Grid size must be a positive integer",
        ...     config_path="/path/to/sim.cfg",
        ...     parameter="size"
        ... )
    """

    def __init__(self, message: str, config_path: Optional[str] = None, parameter: Optional[str] = None):
        self.config_path = config_path
        self.parameter = parameter

        parts = []
        if config_path:
            parts.append(f"in {config_path}")
        if parameter:
            parts.append(f"parameter '{parameter}'")

        if parts:
            full_message = f"{message} ({', '.join(parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class SimulationError(FireGridError):
    """Raised when a simulation run cannot proceed.

    Attributes:
        message (str): Explanation of the simulation error.
        tick (int): Simulation tick when the error occurred, if available.
    """

    def __init__(self, message: str, tick: Optional[int] = None):
        self.tick = tick

        if tick is not None:
            full_message = f"{message} (at tick {tick})"
        else:
            full_message = message

        super().__init__(full_message)


class ValidationError(FireGridError, ValueError):
    """Raised when input validation fails.

    This exception is raised when:
    - A spread probability lies outside [0, 1]
    - A wind or spread direction token is not recognised
    - Coordinates or sizes are not integers

    Attributes:
        message (str): Explanation of the validation failure.
        field (str): Name of the field that failed validation, if applicable.
        value: The invalid value, if applicable.

    Example:
        >>> raise ValidationError(
        ...     "Probability must be between 0 and 1",
        ...     field="probability",
        ...     value=1.5
        ... )
    """

    def __init__(self, message: str, field: Optional[str] = None, value=None):
        self.field = field
        self.value = value

        parts = []
        if field:
            parts.append(f"field '{field}'")
        if value is not None:
            parts.append(f"value={value!r}")

        if parts:
            full_message = f"{message} ({', '.join(parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class GridError(FireGridError, IndexError):
    """Raised when grid coordinates fall outside the grid.

    Attributes:
        message (str): Explanation of the grid error.
        row (int): Row index involved, if applicable.
        col (int): Column index involved, if applicable.

    Example:
        >>> raise GridError(
        ...     "Cell coordinates outside grid bounds",
        ...     row=150,
        ...     col=200
        ... )
    """

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        self.row = row
        self.col = col

        parts = []
        if row is not None:
            parts.append(f"row={row}")
        if col is not None:
            parts.append(f"col={col}")

        if parts:
            full_message = f"{message} ({', '.join(parts)})"
        else:
            full_message = message

        super().__init__(full_message)
