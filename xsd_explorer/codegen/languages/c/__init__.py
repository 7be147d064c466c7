"""
C code generator module.

Generates C typedefs and structs from XSD schema nodes.
"""

from .generator import CGenerator, create_c_generator

__all__ = ["CGenerator", "create_c_generator"]
