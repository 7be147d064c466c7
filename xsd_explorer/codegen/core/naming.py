"""
Naming utilities for safe code generation.

Handles case conversion, namespace prefixes, reserved word conflicts and
per-run disambiguation of repeated field names.
"""

import re
from typing import Dict, Set
from enum import Enum

from .qname import trim_ns_prefix

_ACRONYM_BOUNDARY = re.compile(r"([A-Z])([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_INVALID_CHARS = re.compile(r"[^\w-]")


def to_snake_case(name: str) -> str:
    """Convert a name to snake_case ("XMLHttpRequest" -> "xml_http_request")."""
    output = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    output = _WORD_BOUNDARY.sub(r"\1_\2", output)
    output = output.replace("-", "_")
    return output.lower()


def _single(char: str, converted: str) -> str:
    # Full case mappings such as "ß" -> "SS" would change the length
    return converted if len(converted) == 1 else char


def make_first_upper_case(name: str) -> str:
    """Uppercase the first code point only, leaving the rest untouched."""
    if not name:
        return name
    return _single(name[0], name[0].upper()) + name[1:]


# Alias kept for callers using the shorter name
to_title = make_first_upper_case


def make_first_lower_case(name: str) -> str:
    """Lowercase the first code point only."""
    if not name:
        return name
    return _single(name[0], name[0].lower()) + name[1:]


def gen_field_comment(name: str, doc: str, prefix: str) -> str:
    """
    Build a documentation comment for a generated declaration.

    Args:
        name: Declaration name the comment starts with
        doc: Documentation text from the schema, may be empty
        prefix: Comment marker of the target language (e.g. "//")
    """
    if not doc:
        return f"\n{prefix} {name} ...\n"
    doc = doc.replace("\r\n", "\n").replace("\t", "").replace("\n", f"\n{prefix} ")
    return f"\n{prefix} {name}: {doc}\n"


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME
    ORIGINAL = "original"  # as declared in the schema


class FieldNameCounter:
    """
    Disambiguates repeated field names within one generation run.

    The first request for a name returns it unchanged; the Nth request
    returns the name suffixed with N ("Item", "Item2", "Item3").
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}

    def unique(self, name: str) -> str:
        count = self._counts.get(name, 0) + 1
        self._counts[name] = count
        if count > 1:
            return f"{name}{count}"
        return name

    def count(self, name: str) -> int:
        return self._counts.get(name, 0)

    def reset(self):
        self._counts.clear()


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.PASCAL_CASE,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Sanitize a schema name for safe use in the target language.

        Args:
            name: Schema name, possibly namespace-qualified
            target_case: Desired case style
            suffix_on_conflict: Suffix appended to reserved words

        Returns:
            Identifier made of word characters, not starting with a digit
        """
        cache_key = f"{name}_{target_case.value}_{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(trim_ns_prefix(name))
        converted = self._convert_case(cleaned, target_case)
        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        # Hyphens survive here so snake conversion can split on them
        cleaned = _INVALID_CHARS.sub("_", name)
        cleaned = cleaned.strip("_-")

        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "field"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            result = to_snake_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            result = to_snake_case(name).upper()
        elif target_case == NamingCase.PASCAL_CASE:
            result = "".join(make_first_upper_case(part) for part in name.split("-"))
        elif target_case == NamingCase.CAMEL_CASE:
            parts = name.split("-")
            result = make_first_lower_case(parts[0]) + "".join(
                make_first_upper_case(part) for part in parts[1:]
            )
        else:
            result = name

        # Whatever case was applied, no hyphen may remain
        return result.replace("-", "_")

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Append a suffix to reserved words and builtin names."""
        if name in self.reserved_words or name in self.builtin_types:
            return f"{name}{suffix}"
        return name
