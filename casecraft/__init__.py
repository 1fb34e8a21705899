"""
casecraft - Text Transformation Engine

A catalog of named text transforms: case conversion, Unicode font
styles, text effects, cleanup and analysis, and simple encodings.
Every transform is a pure string-to-string function looked up by a
stable identifier.
"""

__version__ = "1.0.0"
