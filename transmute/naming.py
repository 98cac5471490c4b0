"""Turn arbitrary prose fragments into safe identifiers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from . import constants

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class NamingRules:
    """Groups the knobs that shape a generated identifier."""

    separator: str = constants.IDENTIFIER_SEPARATOR
    max_length: int = constants.IDENTIFIER_MAX_LENGTH
    var_default: str = constants.DEFAULT_VAR_NAME
    func_default: str = constants.DEFAULT_FUNC_NAME
    key_default: str = constants.DEFAULT_KEY_NAME

    def default_for(self, category: str) -> str:
        if category == "func":
            return self.func_default
        if category == "key":
            return self.key_default
        return self.var_default


DEFAULT_NAMING = NamingRules()


def make_identifier(
    fragment: str, category: str = "var", rules: NamingRules = DEFAULT_NAMING
) -> str:
    """Derive an identifier from *fragment*.

    Lowercases, collapses every run of non-alphanumeric characters to a
    single separator, strips separators from both ends and truncates to
    ``rules.max_length``. Falls back to the category default (``var``,
    ``func`` or ``key``) when nothing usable remains.

    Args:
        fragment: Arbitrary input text.
        category: ``"var"``, ``"func"`` or ``"key"``.
        rules: Naming rules to apply.

    Returns:
        A non-empty identifier made of ``[a-z0-9]`` and the separator.
    """
    name = _NON_ALNUM.sub(rules.separator, fragment.lower()).strip(rules.separator)
    name = name[: rules.max_length].strip(rules.separator)
    return name or rules.default_for(category)


def to_pascal_case(name: str, separator: str = constants.IDENTIFIER_SEPARATOR) -> str:
    """``buy_milk`` -> ``BuyMilk``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split(separator) if part)


def subject_words(line: str, limit: int = 3) -> str:
    """First *limit* whitespace-separated words of *line*."""
    return " ".join(line.split()[:limit])
