"""Config module - test runner config resolution."""

from .schema import FrameworkConfig, GroupConfig, RunConfig
from .groups import apply_group_focus, collect_group_configs, resolve_groups
from .launchers import negotiate_launchers
from .merging import cli_args_to_config, merge_configs
from .resolution import DEFAULT_TEST_FRAMEWORK_PATH, ParsedConfig, default_config, parse_config
from .plugins import assemble_plugins
from .reader import read_config_file
from .validator import validate_config

__all__ = [
    "DEFAULT_TEST_FRAMEWORK_PATH",
    "FrameworkConfig",
    "GroupConfig",
    "ParsedConfig",
    "RunConfig",
    "apply_group_focus",
    "assemble_plugins",
    "cli_args_to_config",
    "collect_group_configs",
    "default_config",
    "merge_configs",
    "negotiate_launchers",
    "parse_config",
    "read_config_file",
    "resolve_groups",
    "validate_config",
]
