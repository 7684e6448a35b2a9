import pandas as pd
import pytest

from uptree.pipeline import ForestBuilder, ForestConfig


def _builder(**overrides):
    config = ForestConfig(verbose=False, use_tqdm=False, **overrides)
    return ForestBuilder(config)


def test_components_labels_every_endpoint():
    edges = pd.DataFrame(
        {
            "source": ["a", "b", "d", "c", "f"],
            "target": ["b", "c", "e", "a", ""],
        }
    )
    result = _builder().components(edges)

    assert result.dataframe["element"].tolist() == ["a", "b", "c", "d", "e"]
    assert result.dataframe["component_id"].tolist() == [0, 0, 0, 1, 1]
    assert result.dataframe["component_size"].tolist() == [3, 3, 3, 2, 2]
    assert result.dataframe["representative"].tolist() == ["b", "b", "b", "e", "e"]
    assert result.component_map == {0: ["a", "b", "c"], 1: ["d", "e"]}

    stats = result.stats
    assert stats.total_rows == 5
    assert stats.element_count == 5
    assert stats.merges == 3
    assert stats.redundant_edges == 1
    assert stats.skipped_rows == 1
    assert stats.component_count == 2


def test_components_can_fold_spelling_variants():
    edges = pd.DataFrame({"source": ["José", "JOSE "], "target": ["jose", "Maria"]})
    result = _builder(normalize_keys=True).components(edges)
    assert result.component_map == {0: ["jose", "maria"]}
    assert result.stats.redundant_edges == 1


def test_components_missing_column_raises():
    edges = pd.DataFrame({"from": ["a"], "target": ["b"]})
    with pytest.raises(KeyError):
        _builder().components(edges)


def test_spanning_forest_keeps_cheapest_rows():
    edges = pd.DataFrame(
        {
            "source": ["a", "a", "b", "c"],
            "target": ["b", "c", "c", "d"],
            "weight": ["4", "1", "2", "7"],
            "name": ["ab", "ac", "bc", "cd"],
        }
    )
    result = _builder(weight_column="weight").spanning_forest(edges)
    assert result.dataframe["name"].tolist() == ["ac", "bc", "cd"]
    assert result.stats.total_weight == 10
    assert result.stats.redundant_edges == 1
    assert result.stats.component_count == 1


def test_spanning_forest_requires_weight_column(monkeypatch):
    monkeypatch.delenv("UPTREE_WEIGHT_COLUMN", raising=False)
    edges = pd.DataFrame({"source": ["a"], "target": ["b"]})
    with pytest.raises(ValueError):
        _builder().spanning_forest(edges)
    with pytest.raises(KeyError):
        _builder(weight_column="cost").spanning_forest(edges)


def test_spanning_forest_rejects_non_numeric_weights():
    edges = pd.DataFrame({"source": ["a", "b"], "target": ["b", "c"], "weight": ["1", "heavy"]})
    with pytest.raises(ValueError, match="non-numeric"):
        _builder(weight_column="weight").spanning_forest(edges)


def test_config_reads_columns_from_environment(monkeypatch):
    monkeypatch.setenv("UPTREE_SOURCE_COLUMN", "from")
    monkeypatch.setenv("UPTREE_TARGET_COLUMN", "to")
    config = ForestConfig()
    assert config.source_column == "from"
    assert config.target_column == "to"
    assert ForestConfig(source_column="left").source_column == "left"
