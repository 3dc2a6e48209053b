"""Dev server plugins added to the pipeline by the config resolver."""

from typing import Any, Optional, Union

from .base import Plugin


def _noop_transform_import(source: str, **kwargs: Any) -> None:
    return None


def syntax_checker_plugin() -> Plugin:
    """Create the syntax checker plugin.

    Its transform_import hook does nothing, but having one makes the dev
    server parse every served module, so syntax errors are reported even
    when no other transform is configured.
    """
    return Plugin(name="syntax-checker", transform_import=_noop_transform_import)


def esbuild_plugin(target: Union[str, list[str]]) -> Plugin:
    """Create the esbuild plugin that downlevels served code to ``target``."""
    if isinstance(target, str):
        targets = [target]
    else:
        targets = list(target)
    return Plugin(name="esbuild", options={"target": targets})


def node_resolve_plugin(
    root_dir: str,
    preserve_symlinks: Optional[bool] = None,
    options: Optional[dict[str, Any]] = None,
) -> Plugin:
    """Create the plugin resolving bare module imports from node_modules.

    Args:
        root_dir: Root directory the dev server serves from.
        preserve_symlinks: Resolve symlinked packages to their link path.
        options: Extra resolve options passed through to the resolver.

    Returns:
        The node-resolve Plugin.
    """
    return Plugin(
        name="node-resolve",
        options={
            "root_dir": root_dir,
            "preserve_symlinks": bool(preserve_symlinks),
            "resolve_options": dict(options or {}),
        },
    )
