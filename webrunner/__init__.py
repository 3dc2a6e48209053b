"""Config resolution for a browser based test runner."""

from .config import GroupConfig, ParsedConfig, RunConfig, parse_config
from .errors import (
    ConfigFileError,
    ConfigValidationError,
    ConflictingLauncherError,
    GroupNotFoundError,
    InvalidLauncherSelectionError,
    MissingRootDirError,
    ReservedGroupNameError,
    RunnerStartError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "ConflictingLauncherError",
    "GroupConfig",
    "GroupNotFoundError",
    "InvalidLauncherSelectionError",
    "MissingRootDirError",
    "ParsedConfig",
    "ReservedGroupNameError",
    "RunConfig",
    "RunnerStartError",
    "parse_config",
]
