"""Fire simulation engine for forest fire spread modeling.

This package provides the core simulation components for modeling fire
spread on a square grid: the simulation engine and the cell state machine.

Classes:
    - FireSim: Square grid fire simulation with wind biased spread.
    - Cell: Forest cell with an UNTOUCHED -> BURNING -> SCORCHED lifecycle.

.. autoclass:: FireSim
    :members:

.. autoclass:: Cell
    :members:
"""
