"""
Language-specific code generators.

This module contains generators for the supported target languages.
"""

from .c import CGenerator, create_c_generator
from .go import GoGenerator, create_go_generator
from .java import JavaGenerator, create_java_generator
from .rust import RustGenerator, create_rust_generator
from .typescript import TypeScriptGenerator, create_typescript_generator

__all__ = [
    "CGenerator",
    "GoGenerator",
    "JavaGenerator",
    "RustGenerator",
    "TypeScriptGenerator",
    "create_c_generator",
    "create_go_generator",
    "create_java_generator",
    "create_rust_generator",
    "create_typescript_generator",
]
