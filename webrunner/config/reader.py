"""YAML config file reader for the test runner.

Looks up the user's config file and loads it into a plain mapping that
parse_config can merge.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..errors import ConfigFileError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ("web-test-runner.config.yaml", "web-test-runner.config.yml")


def read_config_file(
    path: Optional[Union[str, Path]] = None,
    cwd: Optional[Union[str, Path]] = None,
) -> dict[str, Any]:
    """Read the user's config file.

    Args:
        path: Explicit config file path. Relative paths resolve against cwd.
        cwd: Directory to look in. Default: the current working directory.

    Returns:
        The config mapping, or an empty mapping when no file was given and
        none of the default file names exist.

    Raises:
        ConfigFileError: If the file is missing, not YAML, or not a mapping.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()

    if path is not None:
        file_path = base / path
        if not file_path.exists():
            raise ConfigFileError(f"Could not find a config file at {file_path}")
    else:
        file_path = _find_default_config(base)
        if file_path is None:
            logger.debug("No config file found in %s", base)
            return {}

    config = load_yaml_mapping(file_path)

    # root_dir inside a config file is relative to that file
    root_dir = config.get("root_dir")
    if isinstance(root_dir, str):
        config["root_dir"] = str((file_path.parent / root_dir).resolve())

    logger.debug("Loaded config file %s", file_path)
    return config


def load_yaml_mapping(file_path: Union[str, Path]) -> dict[str, Any]:
    """Load a YAML file that must contain a mapping.

    An empty file loads as an empty mapping.

    Raises:
        ConfigFileError: If the file can't be read or parsed, or holds
            something other than a mapping.
    """
    file_path = Path(file_path)

    if file_path.suffix not in (".yaml", ".yml"):
        raise ConfigFileError(f"Expected .yaml or .yml file, got: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigFileError(f"Could not read {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigFileError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigFileError(
            f"Config in {file_path} must be a YAML mapping, got {type(data).__name__}"
        )

    return data


def _find_default_config(base: Path) -> Optional[Path]:
    for name in CONFIG_FILE_NAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None
