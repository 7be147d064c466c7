"""
TypeScript code generator module.

Generates TypeScript interfaces and type aliases from XSD schema nodes.
"""

from .generator import TypeScriptGenerator, create_typescript_generator

__all__ = ["TypeScriptGenerator", "create_typescript_generator"]
