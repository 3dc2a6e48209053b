"""Resolution of the final test runner config.

Turns the layered config sources into a RunConfig and the list of groups
to run:
1. Merge defaults, user config and CLI args
2. Validate setting types
3. Resolve root_dir and pick a port
4. Resolve groups and apply the CLI group focus
5. Select browser launchers
6. Fill in test framework, reporters and logger
7. Assemble the plugin pipeline
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from ..errors import ConfigValidationError, MissingRootDirError
from ..logger import RunnerLogger
from ..network import DEFAULT_PORT, find_free_port
from ..reporting import default_reporter
from .groups import GroupCollector, apply_group_focus, collect_group_configs, resolve_groups
from .launchers import negotiate_launchers
from .merging import cli_args_to_config, merge_configs
from .plugins import assemble_plugins
from .schema import FrameworkConfig, GroupConfig, RunConfig
from .validator import validate_config

logger = logging.getLogger(__name__)

SECOND_MS = 1000
MINUTE_MS = SECOND_MS * 60

DEFAULT_TEST_FRAMEWORK_PATH = "@web/test-runner-mocha/dist/autorun.js"

PortFinder = Callable[[int], Awaitable[int]]


@dataclass
class ParsedConfig:
    """Result of a config resolution."""
    config: RunConfig
    group_configs: list[GroupConfig]


def default_config() -> dict[str, Any]:
    """Built-in defaults, lowest precedence source. Fresh on every call."""
    return {
        "root_dir": os.getcwd(),
        "protocol": "http:",
        "hostname": "localhost",
        "middleware": [],
        "plugins": [],
        "watch": False,
        "concurrent_browsers": 2,
        "concurrency": max(1, (os.cpu_count() or 1) // 2),
        "browser_start_timeout": MINUTE_MS // 2,
        "tests_start_timeout": SECOND_MS * 20,
        "tests_finish_timeout": MINUTE_MS * 2,
        "browser_logs": True,
    }


async def parse_config(
    config: Optional[dict[str, Any]] = None,
    cli_args: Optional[dict[str, Any]] = None,
    *,
    port_finder: PortFinder = find_free_port,
    group_collector: GroupCollector = collect_group_configs,
) -> ParsedConfig:
    """Resolve the final config from the user config and CLI args.

    Args:
        config: User config mapping, usually read from the config file.
        cli_args: Overrides from the command line, plus the CLI-only
            controls ``group``, ``puppeteer``, ``playwright`` and ``browsers``.
        port_finder: Returns a free port, given a preferred one.
        group_collector: Loads group configs matched by glob patterns.

    Returns:
        The resolved config and the groups to run.

    Raises:
        RunnerStartError: Any subclass, when the sources don't resolve to
            a valid config. Nothing is returned in that case.
    """
    cli_args = cli_args or {}

    merged = merge_configs(default_config(), config, cli_args_to_config(cli_args))
    final_config = RunConfig.from_dict(validate_config(merged))

    if not isinstance(final_config.root_dir, str):
        raise MissingRootDirError("No root_dir specified.")
    final_config.root_dir = os.path.abspath(final_config.root_dir)

    if final_config.port is None:
        final_config.port = await port_finder(DEFAULT_PORT)
        logger.debug("No port configured, using free port %d", final_config.port)
    else:
        final_config.port = _resolve_port(final_config.port)

    group_configs = await resolve_groups(final_config.groups, group_collector)
    group_configs = apply_group_focus(final_config, group_configs, cli_args.get("group"))

    negotiate_launchers(final_config, cli_args)

    final_config.test_framework = _resolve_test_framework(final_config.test_framework)

    if final_config.reporters is None:
        final_config.reporters = [default_reporter()]

    if final_config.logger is None:
        final_config.logger = RunnerLogger(bool(final_config.debug))

    final_config.plugins = assemble_plugins(final_config)

    logger.debug(
        "Resolved config for %s with %d group(s) and %d plugin(s)",
        final_config.root_dir,
        len(group_configs),
        len(final_config.plugins),
    )
    return ParsedConfig(config=final_config, group_configs=group_configs)


def _resolve_port(port: float) -> int:
    """Check a configured port is a whole number and return it as an int."""
    if isinstance(port, float) and not (math.isfinite(port) and port.is_integer()):
        raise ConfigValidationError("port", "whole number")
    return int(port)


def _resolve_test_framework(test_framework: Any) -> FrameworkConfig:
    """Default the framework path, keeping every option the user did set."""
    if isinstance(test_framework, FrameworkConfig):
        user_settings = {"path": test_framework.path, "config": test_framework.config}
        user_settings.update(test_framework.extras)
    else:
        user_settings = dict(test_framework or {})

    resolved: dict[str, Any] = {"path": DEFAULT_TEST_FRAMEWORK_PATH}
    resolved.update({k: v for k, v in user_settings.items() if v is not None})

    path = resolved.pop("path")
    config = dict(resolved.pop("config", None) or {})
    return FrameworkConfig(path=path, config=config, extras=resolved)
