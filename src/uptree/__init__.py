"""uptree library initialization."""

from .structures import (
    DisjointSetError,
    DisjointSetForest,
    DuplicateElementError,
    ElementNotFoundError,
    InvalidPositionError,
    Position,
)
from .spanning import Edge, kruskal, total_weight
from .normalization import normalize_key
from .pipeline import ComponentsResult, ForestBuilder, ForestConfig, ForestStats, SpanningResult
from .runner import run_file

__all__ = [
    "DisjointSetForest",
    "Position",
    "DisjointSetError",
    "ElementNotFoundError",
    "InvalidPositionError",
    "DuplicateElementError",
    "Edge",
    "kruskal",
    "total_weight",
    "normalize_key",
    "ForestBuilder",
    "ForestConfig",
    "ForestStats",
    "ComponentsResult",
    "SpanningResult",
    "run_file",
]
