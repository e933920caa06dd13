"""Headless driver for firegrid simulations.

Ignites a starting cell and steps the simulation until no cell is burning,
then reports how many ticks the fire lasted.

Usage:
    python -m firegrid.sim_runner --probability 0.4 --wind N --seed 7
    python -m firegrid.sim_runner --config path/to/sim.cfg
"""

import argparse
import sys
from typing import Optional

from tqdm import tqdm

from firegrid.exceptions import ConfigurationError, SimulationError
from firegrid.fire_simulator.fire import FireSim
from firegrid.utilities.data_classes import SimParams, SimResult
from firegrid.utilities.file_io import load_sim_params
from firegrid.utilities.fire_util import CellStates, WindDirection, DEFAULT_GRID_SIZE
from firegrid.utilities.logger import Logger


def run_sim(sim_params: SimParams, fire: Optional[FireSim] = None,
            logger: Optional[Logger] = None, progress: bool = True) -> SimResult:
    """Run a simulation from ignition until the fire burns out.

    Args:
        sim_params (SimParams): inputs for the run.
        fire (FireSim, optional): existing sim to continue. A new sim is built
                                  from 'sim_params' when `None`.
        logger (Logger, optional): logger for the run. One is created in
                                   'sim_params.log_folder' when that is set.
                                   A logger that already finished a run is
                                   moved on to a new ``run_<n>`` folder.
        progress (bool, optional): show a tqdm progress bar. Defaults to `True`.

    Raises:
        ConfigurationError: if 'sim_params' is invalid or 'fire' does not have
                            a grid of size 'sim_params.size'.
        SimulationError: if no cell is burning after ignition, e.g. when an
                         already burnt out sim is passed in.

    Returns:
        SimResult: tick count and final cell counts.
    """
    sim_params.validate()

    if fire is None:
        fire = FireSim(sim_params.size, seed=sim_params.seed, log_freq=sim_params.log_freq)

    elif fire.size != sim_params.size:
        raise ConfigurationError(f"Sim has a grid of size {fire.size} but {sim_params.size} "
                                 f"was requested", parameter="size")

    if logger is None and sim_params.log_folder:
        logger = Logger(sim_params.log_folder)

    if logger is not None:
        new_run = logger.run_finished
        if new_run:
            logger.start_new_run()

        logger.log_metadata(sim_params)

        # Each run's cell log starts from the current state of every cell
        if fire.logger is not logger or new_run:
            fire.set_logger(logger)

    row, col = sim_params.ignition_point()
    fire.ignite(row, col)

    if not fire.has_active_fire():
        msg = f"No burning cells after igniting ({row}, {col})"
        if logger is not None:
            logger.log_message(msg)
        raise SimulationError(msg, tick=fire.iters)

    progress_bar = None
    if progress:
        progress_bar = tqdm(total=sim_params.max_steps, desc='Current sim ',
                            position=0, leave=False)

    steps = 0
    try:
        while fire.has_active_fire():
            if sim_params.max_steps is not None and steps >= sim_params.max_steps:
                break

            fire.step(sim_params.probability, sim_params.wind_direction)
            steps += 1

            if progress_bar is not None:
                progress_bar.update(1)

    except KeyboardInterrupt:
        if logger is not None:
            logger.log_message(f"Run interrupted at tick {fire.iters}.")
            logger.finish(fire, on_interrupt=True)
        raise

    finally:
        if progress_bar is not None:
            progress_bar.close()

    if logger is not None:
        logger.log_message(f"Run finished after {fire.iters} ticks.")
        logger.finish(fire)

    counts = fire.counts()
    return SimResult(
        ticks=fire.iters,
        burnt_cells=counts[CellStates.SCORCHED],
        untouched_cells=counts[CellStates.UNTOUCHED],
        extinguished=counts[CellStates.BURNING] == 0
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Simulate a wind driven forest fire on a square grid"
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to simulation configuration file"
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_GRID_SIZE,
        help=f"Number of rows and columns in the grid (default: {DEFAULT_GRID_SIZE})"
    )
    parser.add_argument(
        "--probability", "-p",
        type=float,
        default=0.3,
        help="Base probability of fire spreading to a neighbor (default: 0.3)"
    )
    parser.add_argument(
        "--wind", "-w",
        type=str,
        default=WindDirection.NORTH.value,
        help="Direction the wind blows toward: N, S, E or W (default: N)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random number generator"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Stop after this many steps even if the fire is still burning"
    )
    parser.add_argument(
        "--log-folder",
        type=str,
        default=None,
        help="Folder to write run logs to"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.config is not None:
            sim_params = load_sim_params(args.config)
        else:
            sim_params = SimParams(
                size=args.size,
                probability=args.probability,
                wind_direction=args.wind,
                seed=args.seed,
                max_steps=args.max_steps,
                log_folder=args.log_folder
            )

        result = run_sim(sim_params, progress=not args.no_progress)

    except ConfigurationError as e:
        print(f"Error: {e}")
        return 1

    if result.extinguished:
        print(f"Simulation complete after {result.ticks} ticks")
    else:
        print(f"Simulation stopped after {result.ticks} ticks with fire still burning")

    print(f"Cells scorched: {result.burnt_cells}, cells untouched: {result.untouched_cells}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
