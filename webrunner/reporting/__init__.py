"""Reporting module - reporters and CLI output."""

from .default_reporter import Reporter, default_reporter
from .json_reporter import JsonReporter

__all__ = ["JsonReporter", "Reporter", "default_reporter"]
