"""Base classes for the firegrid simulation package.

Classes:
    - GridManager: Manages the square cell grid for fire simulation.

.. autoclass:: firegrid.base_classes.grid_manager.GridManager
    :members:
"""

from firegrid.base_classes.grid_manager import GridManager

__all__ = [
    "GridManager",
]
