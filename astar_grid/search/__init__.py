"""search package."""

from .driver import SearchDriver, SearchStatus, find_path, run_search
from .frontier import Frontier, FrontierEntry
from .heuristic import manhattan
from .path import reconstruct_path
from .state import SearchState

__all__ = [
    "Frontier",
    "FrontierEntry",
    "SearchDriver",
    "SearchState",
    "SearchStatus",
    "find_path",
    "manhattan",
    "reconstruct_path",
    "run_search",
]
