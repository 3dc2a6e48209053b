"""Network module - server port lookup."""

from .ports import DEFAULT_PORT, find_free_port

__all__ = ["DEFAULT_PORT", "find_free_port"]
