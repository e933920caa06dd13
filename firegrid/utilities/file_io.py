"""Configuration file readers for firegrid.

Simulation parameters can be supplied as an INI style ``.cfg`` file::

    [Simulation]
    size = 11
    probability = 0.3
    wind_direction = N
    seed = 42
    max_steps = 200
    ignition_row = 5
    ignition_col = 5

    [Logging]
    log_folder = logs
    log_freq = 10

Only the ``[Simulation]`` section is required; every key has a default.
"""

import configparser
import os

from firegrid.exceptions import ConfigurationError
from firegrid.utilities.data_classes import SimParams


def load_sim_params(cfg_path: str) -> SimParams:
    """Read a ``.cfg`` file into a validated :class:`SimParams`.

    Args:
        cfg_path (str): path to the configuration file.

    Raises:
        ConfigurationError: if the file is missing, the ``[Simulation]`` section
                            is absent, or a value cannot be parsed or is invalid.

    Returns:
        SimParams: parameters for the run.
    """
    if not os.path.exists(cfg_path):
        raise ConfigurationError("Configuration file not found", config_path=cfg_path)

    config = configparser.ConfigParser()
    try:
        config.read(cfg_path)
    except configparser.Error as e:
        raise ConfigurationError(f"Could not parse configuration file: {e}", config_path=cfg_path) from e

    if "Simulation" not in config:
        raise ConfigurationError("Missing [Simulation] section", config_path=cfg_path)

    sim = config["Simulation"]
    defaults = SimParams()

    size = _get(sim.getint, "size", defaults.size, cfg_path)
    probability = _get(sim.getfloat, "probability", defaults.probability, cfg_path)
    wind_direction = sim.get("wind_direction", defaults.wind_direction.value)
    seed = _get(sim.getint, "seed", None, cfg_path)
    max_steps = _get(sim.getint, "max_steps", None, cfg_path)

    ignition_row = _get(sim.getint, "ignition_row", None, cfg_path)
    ignition_col = _get(sim.getint, "ignition_col", None, cfg_path)

    if (ignition_row is None) != (ignition_col is None):
        raise ConfigurationError("ignition_row and ignition_col must be given together",
                                 config_path=cfg_path, parameter="ignition")

    ignition = None
    if ignition_row is not None:
        ignition = (ignition_row, ignition_col)

    log_folder = None
    log_freq = defaults.log_freq
    if "Logging" in config:
        log_folder = config["Logging"].get("log_folder", None) or None
        log_freq = _get(config["Logging"].getint, "log_freq", defaults.log_freq, cfg_path)

    try:
        params = SimParams(
            size=size,
            probability=probability,
            wind_direction=wind_direction,
            seed=seed,
            max_steps=max_steps,
            ignition=ignition,
            log_folder=log_folder,
            log_freq=log_freq
        )
        params.validate()

    except ConfigurationError as e:
        raise ConfigurationError(str(e), config_path=cfg_path) from e

    return params


def _get(getter, key: str, default, cfg_path: str):
    try:
        return getter(key, fallback=default)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value: {e}", config_path=cfg_path, parameter=key) from e
