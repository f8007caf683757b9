"""Presentation normalizer for default values shown in attribute tables."""

import re

NONE_TOKEN = "None"

_NULL_SENTINELS: frozenset[str] = frozenset({"", "null", "none", "default"})
_NUMERIC_LITERAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?[fFdDmM]$")
_DEFAULT_OF_TYPE = re.compile(r"^default\s*\(.*\)$")


def make_more_presentable(value: str | None, type_name: str = "") -> str:
    """Turn a default-value expression from source into display text.

    Examples:
        >>> make_more_presentable("1.5f", "float")
        '1.5'
        >>> make_more_presentable('"abc"', "string")
        'abc'
        >>> make_more_presentable("DamageType.Burn", "DamageType")
        'Burn'
        >>> make_more_presentable("null", "string")
        'None'
    """
    text = (value or "").strip()
    if text.lower() in _NULL_SENTINELS or _DEFAULT_OF_TYPE.match(text):
        return NONE_TOKEN

    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
        inner = text[1:-1]
        return inner if inner else '""'

    if _NUMERIC_LITERAL.match(text):
        return text[:-1]

    if text.lower() in ("true", "false"):
        return text.lower()

    prefix, _, member = text.rpartition(".")
    if member and type_name and prefix.rsplit(".", 1)[-1] == type_name.rsplit(".", 1)[-1]:
        return member

    return text
