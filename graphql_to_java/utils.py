"""
Utility functions for identifier case conversion.
"""

import re

# Every uppercase letter after the first character starts a new word
_UPPER_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leave the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def lower_first(text: str) -> str:
    """Lowercase the first character, leave the rest untouched."""
    if not text:
        return text
    return text[0].lower() + text[1:]


def to_camel_case(text: str) -> str:
    """Convert snake_case or PascalCase text to camelCase.

    Examples:
        "first_name" -> "firstName"
        "FIRST_NAME" -> "firstName"
        "FirstName" -> "firstName"
        "firstName" -> "firstName"
        "user_i_d" -> "userID"
    """
    if not text:
        return text
    # Leading underscores are kept: "_id" stays "_id"
    stripped = text.lstrip("_")
    leading = text[: len(text) - len(stripped)]
    if "_" in stripped:
        parts = stripped.split("_")
        head = parts[0].lower()
        return leading + head + "".join(capitalize_first(part.lower()) for part in parts[1:] if part)
    return leading + lower_first(stripped)


def to_snake_case(text: str) -> str:
    """Convert camelCase or PascalCase text to snake_case.

    Examples:
        "firstName" -> "first_name"
        "FirstName" -> "first_name"
        "userID" -> "user_i_d"
        "already_snake" -> "already_snake"
    """
    if not text:
        return text
    return _UPPER_BOUNDARY.sub("_", text).lower()
