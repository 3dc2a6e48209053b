"""Errors raised while resolving the test runner configuration.

All of them are fatal: resolution stops at the first one and the CLI
reports it to the user.
"""


class RunnerStartError(Exception):
    """Base class for errors that prevent the test runner from starting."""


class ConfigValidationError(RunnerStartError, ValueError):
    """A known configuration key holds a value of the wrong type."""

    def __init__(self, key: str, expected: str):
        self.key = key
        self.expected = expected
        super().__init__(f"Configuration error: The {key} setting should be a {expected}.")


class ConfigFileError(RunnerStartError):
    """A config file or group config file could not be loaded."""


class MissingRootDirError(RunnerStartError):
    """No usable root_dir after merging all sources."""


class ReservedGroupNameError(RunnerStartError):
    """A group tried to use the reserved name "default"."""


class GroupNotFoundError(RunnerStartError):
    """The group focused from the CLI does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Could not find any group named {name}")


class ConflictingLauncherError(RunnerStartError):
    """A launcher family flag was combined with manually configured browsers."""


class InvalidLauncherSelectionError(RunnerStartError):
    """Browser names were given that no launcher family can serve."""
