"""Edge-table pipeline built on the disjoint-set forest."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .normalization import normalize_key
from .spanning import Edge, kruskal, total_weight
from .structures import DisjointSetForest


@dataclass
class ForestStats:
    """Summary metrics for a pipeline run."""

    total_rows: int
    element_count: int
    merges: int
    redundant_edges: int
    skipped_rows: int
    component_count: int
    runtime_seconds: float
    total_weight: float | None = None


@dataclass
class ComponentsResult:
    """Result bundle returned by :meth:`ForestBuilder.components`."""

    dataframe: pd.DataFrame
    component_map: Dict[int, List[Hashable]]
    stats: ForestStats


@dataclass
class SpanningResult:
    """Result bundle returned by :meth:`ForestBuilder.spanning_forest`."""

    dataframe: pd.DataFrame
    edges: List[Edge]
    stats: ForestStats


@dataclass
class ForestConfig:
    """Configuration parameters for :class:`ForestBuilder`."""

    source_column: str = ""
    target_column: str = ""
    weight_column: str | None = None
    normalize_keys: bool = False
    use_tqdm: bool | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        if not self.source_column:
            self.source_column = os.getenv("UPTREE_SOURCE_COLUMN", "source")
        if not self.target_column:
            self.target_column = os.getenv("UPTREE_TARGET_COLUMN", "target")
        if not self.weight_column:
            self.weight_column = os.getenv("UPTREE_WEIGHT_COLUMN") or None


class ForestBuilder:
    """Group the endpoints of an edge table into connected components."""

    def __init__(self, config: ForestConfig | None = None) -> None:
        self.config = config or ForestConfig()

    def components(self, dataframe: pd.DataFrame) -> ComponentsResult:
        """Label every endpoint in `dataframe` with its connected component."""

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Component Labelling Started ---")
            print("\n1. Reading edge rows...")

        t0 = time.time()
        rows, skipped = self._edge_rows(dataframe)
        elements = self._first_seen(rows)
        if verbose:
            print(f"   Read {len(rows)} edges over {len(elements)} elements ({skipped} skipped).")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Registering elements...")
        forest: DisjointSetForest = DisjointSetForest()
        for element in elements:
            forest.make_set(element)
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Merging connected elements...")
        merges = 0
        redundant = 0
        iterator: Iterable[Tuple[Hashable, Hashable, Hashable]] = rows
        if rows and self._use_tqdm:
            iterator = tqdm(rows, desc="   Merging Edges", unit="edge")
        for _, source, target in iterator:
            root_source = forest.find(source)
            root_target = forest.find(target)
            if root_source == root_target:
                redundant += 1
                continue
            forest.union(root_source, root_target)
            merges += 1
        if verbose:
            print(f"   {merges} merges, {redundant} redundant edges.")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("4. Assigning component labels...")
        groups = forest.groups()
        root_to_id = {root: component_id for component_id, root in enumerate(groups)}
        component_map = {root_to_id[root]: members for root, members in groups.items()}
        records = []
        for element in forest:
            root = forest.find(element)
            records.append(
                {
                    "element": element,
                    "component_id": root_to_id[root],
                    "component_size": forest.size(element),
                    "representative": root.element,
                }
            )
        df = pd.DataFrame.from_records(
            records, columns=["element", "component_id", "component_size", "representative"]
        )
        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        elapsed = time.time() - overall_start_time
        stats = ForestStats(
            total_rows=len(dataframe),
            element_count=len(forest),
            merges=merges,
            redundant_edges=redundant,
            skipped_rows=skipped,
            component_count=forest.num_sets,
            runtime_seconds=elapsed,
        )

        if verbose:
            self._print_summary(stats, component_map)
            print(f"\n--- Component Labelling Finished in {elapsed:.2f} seconds ---")

        return ComponentsResult(dataframe=df, component_map=component_map, stats=stats)

    def spanning_forest(self, dataframe: pd.DataFrame) -> SpanningResult:
        """Return the rows of `dataframe` that form a minimum spanning forest."""

        weight_column = self.config.weight_column
        if not weight_column:
            raise ValueError("A weight column is required to build a spanning forest")
        if weight_column not in dataframe.columns:
            raise KeyError(f"Column '{weight_column}' not found in dataframe")

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Spanning Forest Started ---")
            print("\n1. Reading weighted edge rows...")

        t0 = time.time()
        rows, skipped = self._edge_rows(dataframe)
        positions = [position for position, _, _ in rows]
        weights = pd.to_numeric(dataframe[weight_column], errors="coerce").to_numpy(dtype=float)[positions]
        invalid = ~np.isfinite(weights)
        if invalid.any():
            bad_rows = [position for position, bad in zip(positions, invalid) if bad]
            raise ValueError(
                f"Column '{weight_column}' has {len(bad_rows)} non-numeric weights (rows {bad_rows[:5]})"
            )
        edges = [
            Edge(source, target, float(weight), payload=position)
            for (position, source, target), weight in zip(rows, weights)
        ]
        vertices = self._first_seen(rows)
        if verbose:
            print(f"   Read {len(edges)} edges over {len(vertices)} vertices ({skipped} skipped).")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("2. Running Kruskal's algorithm...")
        accepted = kruskal(vertices, edges)
        weight_sum = total_weight(accepted)
        if verbose:
            print(f"   Kept {len(accepted)} of {len(edges)} edges, total weight {weight_sum:g}.")
            print(f"   Done in {time.time() - t0:.2f}s")

        df = dataframe.iloc[[edge.payload for edge in accepted]].reset_index(drop=True)

        elapsed = time.time() - overall_start_time
        stats = ForestStats(
            total_rows=len(dataframe),
            element_count=len(vertices),
            merges=len(accepted),
            redundant_edges=len(edges) - len(accepted),
            skipped_rows=skipped,
            component_count=len(vertices) - len(accepted),
            runtime_seconds=elapsed,
            total_weight=weight_sum,
        )

        if verbose:
            print(f"\n--- Spanning Forest Finished in {elapsed:.2f} seconds ---")

        return SpanningResult(dataframe=df, edges=accepted, stats=stats)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _key(self, value: object) -> Hashable | None:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return None
        if self.config.normalize_keys:
            return normalize_key(value) or None
        if isinstance(value, str):
            return value.strip() or None
        return value

    def _edge_rows(self, dataframe: pd.DataFrame) -> Tuple[List[Tuple[Hashable, Hashable, Hashable]], int]:
        for column in (self.config.source_column, self.config.target_column):
            if column not in dataframe.columns:
                raise KeyError(f"Column '{column}' not found in dataframe")

        rows: List[Tuple[Hashable, Hashable, Hashable]] = []
        skipped = 0
        sources = dataframe[self.config.source_column]
        targets = dataframe[self.config.target_column]
        for position, (raw_source, raw_target) in enumerate(zip(sources, targets)):
            source = self._key(raw_source)
            target = self._key(raw_target)
            if source is None or target is None:
                skipped += 1
                continue
            rows.append((position, source, target))
        return rows, skipped

    @staticmethod
    def _first_seen(rows: Sequence[Tuple[Hashable, Hashable, Hashable]]) -> List[Hashable]:
        seen: Dict[Hashable, None] = {}
        for _, source, target in rows:
            seen.setdefault(source, None)
            seen.setdefault(target, None)
        return list(seen)

    @staticmethod
    def _print_summary(stats: ForestStats, component_map: Dict[int, List[Hashable]]) -> None:
        print("\n--- Results Summary ---")
        print(f"   - Total elements processed: {stats.element_count}")
        print(f"   - Connected components found: {stats.component_count}")
        components_by_size = sorted(component_map.items(), key=lambda item: len(item[1]), reverse=True)
        print("\n   --- Sample of Largest Components Found ---")
        for component_id, members in components_by_size[:10]:
            if len(members) <= 1:
                break
            print(f"   Component {component_id} (Size: {len(members)})")
            for member in members[:5]:
                print(f"     - {member}")
            if len(members) > 5:
                print("     - ...")


__all__ = [
    "ComponentsResult",
    "ForestBuilder",
    "ForestConfig",
    "ForestStats",
    "SpanningResult",
]
