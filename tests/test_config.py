"""Tests for the configuration module."""

from pathlib import Path

import pytest

from graph_algos._cli.config import (
    ConfigError,
    GraphAlgosConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "graphs" / "nested"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfigGraph:
    """Tests for the graph file setting."""

    def test_relative_graph_path(self, tmp_path: Path) -> None:
        """Should resolve the graph path relative to the project root."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graph-algos]
graph = "graphs/roads.in"
""",
        )

        config = load_config(pyproject)

        assert config.graph == tmp_path / "graphs" / "roads.in"
        assert config.project_root == tmp_path

    def test_absolute_graph_path(self, tmp_path: Path) -> None:
        """Should keep absolute graph paths as they are."""
        graph_file = tmp_path / "elsewhere" / "g.in"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.graph-algos]\ngraph = "{graph_file.as_posix()}"\n')

        config = load_config(pyproject)

        assert config.graph == graph_file

    def test_invalid_graph_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when graph is not a string."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graph-algos]
graph = 42
""",
        )

        with pytest.raises(ConfigError, match=r"graph: expected string path"):
            load_config(pyproject)


class TestLoadConfigNodes:
    """Tests for source, target and int-nodes settings."""

    def test_full_configuration(self, tmp_path: Path) -> None:
        """Should parse all settings together."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graph-algos]
graph = "dag.in"
source = 1
target = "6"
int-nodes = true
""",
        )

        config = load_config(pyproject)

        assert config == GraphAlgosConfig(
            graph=tmp_path / "dag.in",
            source="1",
            target="6",
            int_nodes=True,
            project_root=tmp_path,
        )

    def test_invalid_source_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for a table as source."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graph-algos.source]
name = "a"
""",
        )

        with pytest.raises(ConfigError, match=r"source: expected string"):
            load_config(pyproject)

    def test_invalid_int_nodes_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when int-nodes is not a boolean."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graph-algos]
int-nodes = "yes"
""",
        )

        with pytest.raises(ConfigError, match=r"int-nodes: expected boolean"):
            load_config(pyproject)


class TestLoadConfigEmptySection:
    """Tests for missing or empty configuration."""

    def test_no_tool_section(self, tmp_path: Path) -> None:
        """Should return empty config when there is no [tool.graph-algos] section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == GraphAlgosConfig(project_root=tmp_path)

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for invalid TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("invalid toml [[[")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_get_config_without_pyproject(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should return defaults when no pyproject.toml is reachable."""
        monkeypatch.chdir(tmp_path)

        assert get_config() == GraphAlgosConfig()


class TestGraphAlgosConfigDataclass:
    """Tests for the GraphAlgosConfig dataclass."""

    def test_default_values(self) -> None:
        config = GraphAlgosConfig()

        assert config.graph is None
        assert config.source is None
        assert config.target is None
        assert config.int_nodes is False

    def test_frozen(self) -> None:
        config = GraphAlgosConfig()

        with pytest.raises(AttributeError):
            config.source = "a"  # type: ignore[misc]
