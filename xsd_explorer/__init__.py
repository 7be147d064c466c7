"""
XSD Explorer - generate typed declarations from XML Schema documents.
"""

__version__ = "0.1.0"
