"""Type validation for known configuration keys.

Only keys that are present are checked; unknown keys pass through.
"""

from typing import Any

from ..errors import ConfigValidationError
from .schema import (
    BOOLEAN_SETTINGS,
    NUMBER_SETTINGS,
    STRING_OR_LIST_SETTINGS,
    STRING_SETTINGS,
)


def validate_config(config: dict[str, Any]) -> dict[str, Any]:
    """Check the types of known settings in a (merged) config mapping.

    Args:
        config: Config mapping to check.

    Returns:
        The same mapping, unchanged.

    Raises:
        ConfigValidationError: On the first setting with a wrong type.
    """
    for key in STRING_SETTINGS:
        _validate(config, key, _is_string, "string")
    for key in NUMBER_SETTINGS:
        _validate(config, key, _is_number, "number")
    for key in BOOLEAN_SETTINGS:
        _validate(config, key, _is_boolean, "boolean")
    for key in STRING_OR_LIST_SETTINGS:
        _validate(config, key, _is_string_or_list, "string or an array")
    return config


def _validate(config: dict[str, Any], key: str, check, expected: str) -> None:
    value = config.get(key)
    if value is None:
        return
    if not check(value):
        raise ConfigValidationError(key, expected)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a number setting
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def _is_string_or_list(value: Any) -> bool:
    return isinstance(value, (str, list, tuple))
