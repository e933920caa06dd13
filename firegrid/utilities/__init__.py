"""Shared utilities for the firegrid simulation package.

Modules:
    - fire_util: Cell states, wind directions and the wind probability adjustment.
    - data_classes: Dataclasses for simulation parameters and results.
    - file_io: Configuration file readers.
    - logger: Run logging with Parquet output.
    - logger_schemas: Data schemas for logged entries.
    - parquet_writer: Parquet file writing utilities.
"""
