"""
Built-in XSD datatypes and their spellings in each target language.

https://www.w3.org/TR/xmlschema-2/#datatype
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .config import ConfigError

# Column order of every entry in BUILTIN_TYPES
SUPPORTED_LANGUAGES: Tuple[str, ...] = ("Go", "TypeScript", "C", "Java", "Rust")

_LANGUAGE_INDEX = {language: index for index, language in enumerate(SUPPORTED_LANGUAGES)}

_STRING = ("string", "string", "char", "String", "String")
_STRING_LIST = ("[]string", "Array<string>", "char[]", "List<String>", "Vec<String>")
_BINARY = ("string", "Uint8Array", "char[]", "List<Byte>", "String")

BUILTIN_TYPES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "anyType": _STRING,
        "ENTITIES": _STRING_LIST,
        "ENTITY": _STRING,
        "ID": _STRING,
        "IDREF": _STRING,
        "IDREFS": _STRING_LIST,
        "NCName": _STRING,
        "NMTOKEN": _STRING,
        "NMTOKENS": _STRING_LIST,
        "NOTATION": _STRING_LIST,
        "Name": _STRING,
        "QName": ("xml.Name", "any", "char", "String", "String"),
        "anyURI": ("string", "string", "char", "QName", "String"),
        "base64Binary": _BINARY,
        "boolean": ("bool", "boolean", "bool", "Boolean", "bool"),
        "byte": ("int8", "any", "char[]", "Byte", "u8"),
        "date": _STRING,
        "dateTime": _STRING,
        "decimal": ("float64", "number", "float", "Float", "f64"),
        "double": ("float64", "number", "float", "Float", "f64"),
        "duration": _STRING,
        "float": ("float32", "number", "float", "Float", "f64"),
        "gDay": _STRING,
        "gMonth": _STRING,
        "gMonthDay": _STRING,
        "gYear": _STRING,
        "gYearMonth": _STRING,
        "hexBinary": _BINARY,
        "int": ("int", "number", "int", "Integer", "i32"),
        "integer": ("int", "number", "int", "Integer", "i32"),
        "language": _STRING,
        "long": ("int64", "number", "int", "Long", "i64"),
        "negativeInteger": ("int", "number", "int", "Integer", "i32"),
        "nonNegativeInteger": ("int", "number", "int", "Integer", "u32"),
        "normalizedString": _STRING,
        "nonPositiveInteger": ("int", "number", "int", "Integer", "i32"),
        "positiveInteger": ("int", "number", "int", "Integer", "u32"),
        "short": ("int16", "number", "int", "Integer", "i16"),
        "string": _STRING,
        "time": ("time.Time", "string", "char", "String", "String"),
        "token": _STRING,
        "unsignedByte": ("uint8", "any", "char", "Byte", "u8"),
        "unsignedInt": ("uint32", "number", "unsigned int", "Integer", "u32"),
        "unsignedLong": ("uint64", "number", "unsigned int", "Long", "u64"),
        "unsignedShort": ("uint16", "number", "unsigned int", "Short", "u16"),
        "xml:lang": _STRING,
        "xml:space": _STRING,
        "xml:base": _STRING,
        "xml:id": _STRING,
    }
)


def language_index(language: str) -> int:
    """
    Get the table column for a target language.

    Raises:
        ConfigError: If the language is not one of SUPPORTED_LANGUAGES
    """
    try:
        return _LANGUAGE_INDEX[language]
    except KeyError:
        raise ConfigError(
            f"Unsupported target language: {language!r}. "
            f"Supported: {', '.join(SUPPORTED_LANGUAGES)}"
        ) from None


def get_builtin_type(name: str, language: str) -> Tuple[str, bool]:
    """
    Look up the spelling of a built-in type in a target language.

    Args:
        name: Exact XSD built-in name (case-sensitive, e.g. "unsignedInt")
        language: One of SUPPORTED_LANGUAGES

    Returns:
        (spelling, True) for a built-in, ("", False) otherwise

    Raises:
        ConfigError: If the language is not supported
    """
    index = language_index(language)
    spellings = BUILTIN_TYPES.get(name)
    if spellings is None:
        return "", False
    return spellings[index], True


def is_builtin_type(name: str) -> bool:
    """Check whether a name is an XSD built-in type."""
    return name in BUILTIN_TYPES
