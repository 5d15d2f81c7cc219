"""
Types package for full-name parsing.

This package contains result types and the configuration class used
throughout the name parsing system.
"""

from nomina.types.config import NameParserConfig
from nomina.types.results import NameParseResult, ParsedName

__all__ = [
    "NameParseResult",
    "NameParserConfig",
    "ParsedName",
]
