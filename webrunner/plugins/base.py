"""Plugin handle consumed by the dev server's serving pipeline."""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass
class Plugin:
    """A serving/transform plugin.

    The resolver only decides whether a plugin is present and where it sits
    in the pipeline. What the plugin does is up to the dev server.
    """
    name: str
    options: dict[str, Any] = field(default_factory=dict)
    transform_import: Optional[Callable[..., Optional[str]]] = None

    def __str__(self) -> str:
        return self.name
