"""Merging of layered config sources."""

from typing import Any, Optional

# Shadowed by CLI-only meanings, resolved separately from the generic merge
CLI_SHADOWED_SETTINGS = ("groups", "browsers")


def merge_configs(*configs: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Merge config mappings, later sources overriding earlier ones.

    Each key takes the value of the last source where it is not None.
    Values are replaced wholesale: lists and mappings are never combined,
    so an empty list in a later source still discards an earlier list.

    Args:
        configs: Sources in increasing order of precedence. None is skipped.

    Returns:
        A new merged mapping.
    """
    merged: dict[str, Any] = {}
    for config in configs:
        if not config:
            continue
        for key, value in config.items():
            if value is not None:
                merged[key] = value
    return merged


def cli_args_to_config(cli_args: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Turn CLI args into a config source for merge_configs.

    ``groups`` and ``browsers`` are dropped: on the command line they select
    groups and browser names instead of defining them.
    """
    return {
        key: value
        for key, value in (cli_args or {}).items()
        if key not in CLI_SHADOWED_SETTINGS
    }
