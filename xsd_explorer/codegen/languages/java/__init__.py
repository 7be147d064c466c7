"""
Java code generator module.

Generates Java classes and enums from XSD schema nodes.
"""

from .generator import JavaGenerator, create_java_generator

__all__ = ["JavaGenerator", "create_java_generator"]
