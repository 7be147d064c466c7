"""
Go code generator module.

Generates Go type declarations with XML struct tags from XSD schema nodes.
"""

from .generator import GoGenerator, create_go_generator
from .naming import create_go_sanitizer, validate_go_package_name

__all__ = [
    "GoGenerator",
    "create_go_generator",
    "create_go_sanitizer",
    "validate_go_package_name",
]
