"""Run logging for firegrid simulations.

A :class:`Logger` owns a session folder named after the time it was created.
Each run gets its own ``run_<n>`` sub-folder holding:

- ``cell_logs.parquet``: one row per cell change, keyed by simulation tick.
- ``status_log.json``: timestamped messages and the results of the run.
- ``metadata.json``: the run's inputs, written by :meth:`Logger.log_metadata`.
"""

import datetime
import json
import os
from enum import Enum
from typing import TYPE_CHECKING, Optional

import numpy as np

from firegrid.utilities.fire_util import CellStates
from firegrid.utilities.logger_schemas import CellLogEntry
from firegrid.utilities.parquet_writer import ParquetWriter

if TYPE_CHECKING:
    from firegrid.fire_simulator.fire import FireSim
    from firegrid.utilities.data_classes import SimParams


class Logger:
    def __init__(self, log_folder: str):

        self.log_ctr = 0

        self.log_folder = log_folder
        os.makedirs(self.log_folder, exist_ok=True)

        self._session_folder = self.generate_session_folder()
        os.makedirs(self._session_folder, exist_ok=True)

        self._run_folder = None
        self.cell_writer = None
        self._cell_cache = []

        self.start_new_run()

    def start_new_run(self):
        """Creates the folder for the next run and resets the status log."""
        self._run_folder = os.path.join(self._session_folder, f"run_{self.log_ctr}")
        os.makedirs(self._run_folder, exist_ok=True)

        self.log_ctr += 1

        self.cell_writer = ParquetWriter(
            os.path.join(self._run_folder, "cell_logs"), schema=CellLogEntry
        )
        self._cell_cache = []
        self._run_finished = False

        self._status_log = {
            "sim_start": datetime.datetime.now().isoformat(),
            "messages": [],
            "latest_flush": None,
            "results": None
        }

    def cache_cell_updates(self, entries):
        self._cell_cache.extend(entries)

    def flush(self):
        self.cell_writer.write_batch(self._cell_cache)
        self._cell_cache.clear()

        self._status_log["latest_flush"] = datetime.datetime.now().isoformat()
        self._write_status_log()

    def write_results(self, fire: 'FireSim', on_interrupt: bool = False):
        if fire is not None:
            counts = fire.counts()
            fire_extinguished = counts[CellStates.BURNING] == 0

            self._status_log["results"] = {
                "user interrupted": on_interrupt,
                "ticks": fire.iters,
                "cells scorched": counts[CellStates.SCORCHED],
                "cells untouched": counts[CellStates.UNTOUCHED],
                "fire extinguished": fire_extinguished
            }

            if not fire_extinguished:
                self._status_log["results"]["burning cells remaining"] = counts[CellStates.BURNING]

    def finish(self, fire: 'FireSim', on_interrupt: bool = False):
        """Records results, flushes cached rows and merges the cell log parts."""
        self.write_results(fire, on_interrupt=on_interrupt)
        self.flush()

        self.cell_writer.merge(os.path.join(self._run_folder, "cell_logs.parquet"))
        self._run_finished = True

    def generate_session_folder(self) -> str:
        """Generates the path for the current sim's log files based on current datetime

        :return: Session folder path string
        :rtype: str
        """
        date_time_str = datetime.datetime.now().strftime('%d-%b-%Y-%H-%M-%S')
        return os.path.join(self.log_folder, f"log_{date_time_str}")

    def log_metadata(self, sim_params: 'SimParams'):
        row, col = sim_params.ignition_point()

        metadata = {
            "inputs": {
                "probability": sim_params.probability,
                "wind direction": sim_params.wind_direction,
                "seed": sim_params.seed,
                "max steps": sim_params.max_steps,
                "ignition": (row, col)
            },

            "sim size": {
                "rows": sim_params.size,
                "cols": sim_params.size,
                "total cells": sim_params.size ** 2
            }
        }

        safe_dict = make_json_serializable(metadata)

        metadata_path = os.path.join(self._run_folder, "metadata.json")
        with open(metadata_path, 'w') as f:
            json.dump(safe_dict, f, indent=2)

    def log_message(self, message: str):
        timestamp = datetime.datetime.now().isoformat()
        entry = f"[{timestamp}]: {message}"
        self._status_log["messages"].append(entry)

    def _write_status_log(self):
        status_path = os.path.join(self._run_folder, "status_log.json")
        with open(status_path, 'w') as f:
            json.dump(make_json_serializable(self._status_log), f, indent=2)

    @property
    def session_folder(self) -> str:
        return self._session_folder

    @property
    def run_folder(self) -> Optional[str]:
        return self._run_folder

    @property
    def run_finished(self) -> bool:
        """`True` once :meth:`finish` has been called for the current run."""
        return self._run_finished

    @property
    def status_log(self) -> dict:
        return self._status_log


def make_json_serializable(obj):
    if isinstance(obj, dict):
        return {k: make_json_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_json_serializable(item) for item in obj]
    elif isinstance(obj, Enum):
        return obj.name
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, np.generic):
        return obj.item()
    elif isinstance(obj, datetime.datetime):
        return obj.isoformat()
    else:
        return obj
