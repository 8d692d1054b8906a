"""Configuration loading from pyproject.toml."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, NonNegativeInt, ValidationError

from densegraph._graph._dense_graph import DEFAULT_CAPACITY


class ConfigError(Exception):
    """Error in densegraph configuration."""


class DenseGraphSettings(BaseModel):
    """Settings read from the [tool.densegraph] table."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    capacity: NonNegativeInt = DEFAULT_CAPACITY


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


def load_config(pyproject_path: Path) -> DenseGraphSettings:
    """Load and validate [tool.densegraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DenseGraphSettings

    Raises:
        ConfigError: If the configuration is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("densegraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.densegraph] configuration: expected a table"
        raise ConfigError(msg)

    try:
        return DenseGraphSettings.model_validate(section)
    except ValidationError as e:
        msg = f"Invalid [tool.densegraph] configuration in {pyproject_path}: {e}"
        raise ConfigError(msg) from e


def get_config() -> DenseGraphSettings:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DenseGraphSettings (defaults if no pyproject.toml or no [tool.densegraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DenseGraphSettings()
    return load_config(pyproject_path)
