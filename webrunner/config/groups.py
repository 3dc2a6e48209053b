"""Group config resolution.

Groups are named overlays on the root config. They are defined inline in
the config or in separate YAML files matched by glob patterns, and one of
them can be focused from the command line.
"""

import asyncio
import glob
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Union

from ..errors import ConfigValidationError, GroupNotFoundError, ReservedGroupNameError
from .reader import load_yaml_mapping
from .schema import RESERVED_GROUP_NAME, GroupConfig, RunConfig

logger = logging.getLogger(__name__)

GroupCollector = Callable[[list[str]], Awaitable[list[GroupConfig]]]


async def collect_group_configs(
    patterns: list[str],
    cwd: Optional[Union[str, Path]] = None,
) -> list[GroupConfig]:
    """Load group configs from YAML files matching glob patterns.

    A group file without a name is named after the file, up to its first dot
    (``groups/firefox.config.yaml`` is named ``firefox``).

    Args:
        patterns: Glob patterns, relative to cwd unless absolute.
        cwd: Base directory for relative patterns. Default: current directory.

    Returns:
        Group configs, in sorted file order per pattern.

    Raises:
        ConfigFileError: If a matched file is not a valid YAML mapping.
    """
    return await asyncio.to_thread(_collect_group_configs, patterns, cwd)


def _collect_group_configs(
    patterns: list[str], cwd: Optional[Union[str, Path]]
) -> list[GroupConfig]:
    base = Path(cwd) if cwd is not None else Path.cwd()
    seen: set[Path] = set()
    group_configs = []

    for pattern in patterns:
        matches = sorted(glob.glob(pattern, root_dir=base, recursive=True))
        if not matches:
            logger.warning("Group pattern %r did not match any files", pattern)

        for match in matches:
            file_path = (base / match).resolve()
            if file_path in seen:
                continue
            seen.add(file_path)

            data = load_yaml_mapping(file_path)
            data.setdefault("name", file_path.name.split(".")[0])
            data["config_file_path"] = str(file_path)
            group_configs.append(GroupConfig.from_dict(data))
            logger.debug("Loaded group %s from %s", data["name"], file_path)

    return group_configs


async def resolve_groups(
    groups: Optional[Union[str, list[Any]]],
    collector: GroupCollector = collect_group_configs,
) -> list[GroupConfig]:
    """Expand the ``groups`` setting into a flat list of group configs.

    Inline groups come first, in the order given, followed by the groups
    collected from string patterns. Groups are not deduplicated by name.

    Args:
        groups: None, one glob pattern, or a list of inline groups
            (mappings or GroupConfig) and glob patterns.
        collector: Loads the groups matched by the glob patterns.

    Returns:
        New GroupConfig objects; the inputs are not modified.

    Raises:
        ReservedGroupNameError: If a group is named "default".
        ConfigValidationError: If an entry is neither a group nor a pattern.
    """
    if not groups:
        return []

    entries = [groups] if isinstance(groups, str) else groups
    group_configs: list[GroupConfig] = []
    patterns: list[str] = []

    for entry in entries:
        if isinstance(entry, str):
            patterns.append(entry)
        elif isinstance(entry, GroupConfig):
            group_configs.append(entry.copy())
        elif isinstance(entry, dict):
            group_configs.append(GroupConfig.from_dict(entry))
        else:
            raise ConfigValidationError("groups", "list of group configs or glob patterns")

    if patterns:
        group_configs.extend(await collector(patterns))

    for group_config in group_configs:
        if group_config.name == RESERVED_GROUP_NAME:
            raise ReservedGroupNameError(
                'Cannot create a group named "default". '
                "This name is reserved by the test runner."
            )

    return group_configs


def apply_group_focus(
    config: RunConfig,
    group_configs: list[GroupConfig],
    focus: Optional[str],
) -> list[GroupConfig]:
    """Restrict the run to the group focused from the command line.

    Focusing "default" runs only the root config. Focusing a named group
    runs only that group: it inherits the root files when it has none of
    its own, and the root files are cleared so they don't run twice.

    Args:
        config: The root config. Its files may be cleared.
        group_configs: Resolved groups.
        focus: Name of the focused group, or None for no focus.

    Returns:
        The groups left to run.

    Raises:
        GroupNotFoundError: If no group has the focused name.
    """
    if focus is None:
        return group_configs

    if focus == RESERVED_GROUP_NAME:
        return []

    group_config = next((g for g in group_configs if g.name == focus), None)
    if group_config is None:
        raise GroupNotFoundError(focus)

    if group_config.files is None:
        group_config.files = config.files
    config.files = None

    return [group_config]
