"""Convenience helpers for running the edge-table pipeline end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from .pipeline import ComponentsResult, ForestBuilder, ForestConfig, SpanningResult

MODES = ("components", "spanning")


def run_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[ForestConfig] = None,
    mode: str = "components",
) -> ComponentsResult | SpanningResult | None:
    """Run `mode` on the edge table at `input_path` and write the results."""

    input_path = Path(input_path)
    output_path = Path(output_path)
    if mode not in MODES:
        print(f"ERROR: Unknown mode '{mode}'. Choose one of: {', '.join(MODES)}.")
        return None

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    config = config or ForestConfig()
    builder = ForestBuilder(config)
    try:
        if mode == "spanning":
            result = builder.spanning_forest(dataframe)
        else:
            result = builder.components(dataframe)
    except KeyError as exc:
        print(f"ERROR: {exc.args[0]} (input '{input_path}'). Please check the column options.")
        return None
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None

    try:
        _save_dataframe(result.dataframe, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None
    if config.verbose:
        print(f"\n   Processing complete. Results saved to '{output_path}'")
    return result


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=str, keep_default_na=False)
    raise ValueError("unsupported format")


def _save_dataframe(dataframe: pd.DataFrame, path: Path) -> None:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
