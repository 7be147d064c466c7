"""
Rust code generator module.

Generates Rust structs, enums and type aliases from XSD schema nodes.
"""

from .generator import RustGenerator, create_rust_generator

__all__ = ["RustGenerator", "create_rust_generator"]
