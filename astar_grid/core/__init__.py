"""core package."""

from .errors import ContractViolation, GridBusyError
from .events import CellEvent, NoPathFound, PathFound
from .grid import Cell, Coord, Grid, Role

__all__ = [
    "Cell",
    "CellEvent",
    "ContractViolation",
    "Coord",
    "Grid",
    "GridBusyError",
    "NoPathFound",
    "PathFound",
    "Role",
]
