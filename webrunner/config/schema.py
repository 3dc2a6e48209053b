"""Configuration data models for the test runner.

Config sources (defaults, config file, CLI) are plain mappings. The result
of resolving them is a RunConfig plus a list of GroupConfig overlays.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional, Union

from ..errors import ConfigValidationError
from ..launchers import BrowserLauncher
from ..logger import RunnerLogger
from ..plugins import Plugin
from ..reporting.default_reporter import Reporter

STRING_SETTINGS = ("root_dir", "hostname")
NUMBER_SETTINGS = (
    "port",
    "concurrent_browsers",
    "concurrency",
    "browser_start_timeout",
    "tests_start_timeout",
    "tests_finish_timeout",
)
BOOLEAN_SETTINGS = (
    "watch",
    "preserve_symlinks",
    "browser_logs",
    "coverage",
    "static_logging",
    "manual",
    "open",
    "debug",
)
STRING_OR_LIST_SETTINGS = ("esbuild_target", "files")

RESERVED_GROUP_NAME = "default"

FilesSpec = Union[str, list[str]]


@dataclass
class FrameworkConfig:
    """Test framework adapter loaded in the browser.

    Adapter options other than ``path`` and ``config`` are kept in ``extras``.
    """
    path: str
    config: dict[str, Any] = field(default_factory=dict)
    extras: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = {"path": self.path, "config": self.config}
        data.update(self.extras)
        return data


@dataclass
class GroupConfig:
    """A named overlay on the root config, runnable on its own."""
    name: str
    files: Optional[FilesSpec] = None
    browsers: Optional[list[Any]] = None
    test_framework: Optional[Any] = None
    config_file_path: Optional[str] = None
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GroupConfig":
        """Build a GroupConfig from a mapping, keeping unknown keys in extras.

        Raises:
            ConfigValidationError: If the group has no string name.
        """
        if not isinstance(data.get("name"), str):
            raise ConfigValidationError("group name", "string")
        known = {f.name for f in fields(cls)} - {"extras"}
        return cls(
            **{k: _copy(v) for k, v in data.items() if k in known},
            extras={k: _copy(v) for k, v in data.items() if k not in known},
        )

    def copy(self) -> "GroupConfig":
        return replace(
            self,
            files=_copy(self.files),
            browsers=_copy(self.browsers),
            extras=dict(self.extras),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "files": self.files,
            "browsers": _describe_list(self.browsers),
            "test_framework": _describe(self.test_framework),
            "config_file_path": self.config_file_path,
        }
        data.update(self.extras)
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class RunConfig:
    """Fully resolved configuration for one test runner invocation."""
    root_dir: Optional[str] = None
    protocol: str = "http:"
    hostname: str = "localhost"
    port: Optional[int] = None
    concurrent_browsers: int = 2
    concurrency: int = 1
    browser_start_timeout: int = 30_000
    tests_start_timeout: int = 20_000
    tests_finish_timeout: int = 120_000
    watch: bool = False
    preserve_symlinks: Optional[bool] = None
    browser_logs: bool = True
    coverage: Optional[bool] = None
    static_logging: Optional[bool] = None
    manual: Optional[bool] = None
    open: Optional[bool] = None
    debug: Optional[bool] = None
    files: Optional[FilesSpec] = None
    groups: Optional[Union[str, list[Any]]] = None
    esbuild_target: Optional[FilesSpec] = None
    node_resolve: Optional[Union[bool, dict[str, Any]]] = None
    middleware: list[Any] = field(default_factory=list)
    plugins: list[Plugin] = field(default_factory=list)
    browsers: Optional[list[BrowserLauncher]] = None
    test_framework: Optional[Union[FrameworkConfig, dict[str, Any]]] = None
    reporters: Optional[list[Reporter]] = None
    logger: Optional[RunnerLogger] = None
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RunConfig":
        """Build a RunConfig from a merged mapping.

        Keys that are not fields of RunConfig are kept in ``extras``. Lists
        are copied so the result never shares them with its sources.
        """
        known = {f.name for f in fields(cls)} - {"extras"}
        return cls(
            **{k: _copy(v) for k, v in data.items() if k in known and v is not None},
            extras={k: _copy(v) for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        """Summarize the config as JSON friendly data."""
        data = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("plugins", "browsers", "reporters", "logger", "middleware",
                              "test_framework", "groups", "extras")
        }
        data["plugins"] = _describe_list(self.plugins)
        data["browsers"] = _describe_list(self.browsers)
        data["reporters"] = _describe_list(self.reporters)
        data["middleware"] = len(self.middleware)
        data["test_framework"] = _describe(self.test_framework)
        data.update(self.extras)
        return data


def _copy(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def _describe(value: Any) -> Any:
    if isinstance(value, (Plugin, BrowserLauncher, Reporter)):
        return value.name
    if isinstance(value, FrameworkConfig):
        return value.to_dict()
    if isinstance(value, GroupConfig):
        return value.to_dict()
    return value


def _describe_list(values: Optional[list[Any]]) -> Optional[list[Any]]:
    if values is None:
        return None
    return [_describe(v) for v in values]
