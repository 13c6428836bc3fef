"""Unit tests for configuration classes."""

import pytest

from bstreelib import (
    TraversalOrder,
    HeightStrategy,
    ReportFormat,
    TreeConfig,
    TrackerConfig,
    ConfigurationError,
)


class TestTraversalOrder:
    """Test order parsing."""

    @pytest.mark.parametrize("name,expected", [
        ("inorder", TraversalOrder.INORDER),
        ("IN", TraversalOrder.INORDER),
        ("pre_order", TraversalOrder.PREORDER),
        ("Post", TraversalOrder.POSTORDER),
        (TraversalOrder.PREORDER, TraversalOrder.PREORDER),
    ])
    def test_parse(self, name, expected):
        assert TraversalOrder.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown traversal order: bfs"):
            TraversalOrder.parse("bfs")


class TestTreeConfig:
    """Test tree configuration validation."""

    def test_defaults_are_valid(self):
        config = TreeConfig()
        assert config.validate() == []
        assert config.default_order is TraversalOrder.INORDER
        assert config.height_strategy is HeightStrategy.ITERATIVE

    def test_recursive_constructor(self):
        assert TreeConfig.recursive().height_strategy is HeightStrategy.RECURSIVE

    def test_reports_every_problem(self):
        config = TreeConfig(default_order="inorder", height_strategy="fast")
        assert len(config.validate()) == 2


class TestTrackerConfig:
    """Test tracker configuration validation."""

    def test_defaults_are_valid(self):
        config = TrackerConfig()
        assert config.validate() == []
        assert config.persist
        assert config.repository_path == "repository.json"

    def test_in_memory(self):
        config = TrackerConfig.in_memory()
        assert not config.persist
        assert config.validate() == []

    def test_with_repository(self, tmp_path):
        config = TrackerConfig.with_repository(tmp_path / "words.json")
        assert config.persist
        assert config.repository_path == tmp_path / "words.json"

    def test_persist_requires_path(self):
        errors = TrackerConfig(repository_path=None, persist=True).validate()
        assert errors == ["repository_path required when persist is enabled"]

    def test_empty_encoding(self):
        assert "encoding cannot be empty" in TrackerConfig(encoding="").validate()

    def test_nested_tree_problems_are_prefixed(self):
        config = TrackerConfig(tree=TreeConfig(height_strategy=None))
        errors = config.validate()
        assert len(errors) == 1
        assert errors[0].startswith("tree: height_strategy")


class TestReportFormat:

    def test_flag_values(self):
        assert ReportFormat("pf") is ReportFormat.FILES
        assert ReportFormat("pl") is ReportFormat.LINES
        assert ReportFormat("po") is ReportFormat.OCCURRENCES


def test_configuration_error_lists_problems():
    error = ConfigurationError(["a is bad", "b is bad"], context="widget")
    assert error.problems == ["a is bad", "b is bad"]
    assert str(error) == "Invalid widget: a is bad; b is bad"
    assert isinstance(error, ValueError)
