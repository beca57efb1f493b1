"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_SECTION = "graph-algos"


class ConfigError(Exception):
    """Error in graph-algos configuration."""


@dataclass(slots=True, frozen=True)
class GraphAlgosConfig:
    """Configuration loaded from the ``[tool.graph-algos]`` table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    source: str | None = None
    target: str | None = None
    int_nodes: bool = False
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _get_str(section: dict[str, object], key: str) -> str | None:
    if key not in section:
        return None
    value = section[key]
    # TOML integers are accepted for node names and kept as text until parsed
    if isinstance(value, bool) or not isinstance(value, str | int):
        msg = f"Invalid [tool.{CONFIG_SECTION}].{key}: expected string"
        raise ConfigError(msg)
    return str(value)


def load_config(pyproject_path: Path) -> GraphAlgosConfig:
    """Load and validate [tool.graph-algos] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphAlgosConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    section = tool_section.get(CONFIG_SECTION, {})

    if not section:
        return GraphAlgosConfig(project_root=project_root)

    graph_path: Path | None = None
    if "graph" in section:
        graph_value = section["graph"]
        if not isinstance(graph_value, str):
            msg = f"Invalid [tool.{CONFIG_SECTION}].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    int_nodes = section.get("int-nodes", False)
    if not isinstance(int_nodes, bool):
        msg = f"Invalid [tool.{CONFIG_SECTION}].int-nodes: expected boolean"
        raise ConfigError(msg)

    return GraphAlgosConfig(
        graph=graph_path,
        source=_get_str(section, "source"),
        target=_get_str(section, "target"),
        int_nodes=int_nodes,
        project_root=project_root,
    )


def get_config() -> GraphAlgosConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphAlgosConfig (may be empty if no pyproject.toml or no [tool.graph-algos] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphAlgosConfig()
    return load_config(pyproject_path)
