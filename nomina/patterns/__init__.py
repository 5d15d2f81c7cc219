"""
Pattern registry for full-name parsing.

`PATTERN_TYPES` is the explicit, ordered set of patterns the parser tries.
Adding a heuristic means adding its class here. The order matters only when
two candidates tie on score: the earlier entry wins.
"""

from nomina.patterns.base import SCORE_BASE, SCORE_SPECIFIC, SCORE_STRONG, NamePattern
from nomina.patterns.compound import CompoundLastNamePattern
from nomina.patterns.inverted import LastCommaFirstPattern
from nomina.patterns.nickname import FirstNickLastNamePattern
from nomina.patterns.simple import (
    FirstLastNamePattern,
    FirstMiddleLastNamePattern,
    FirstNamePattern,
    TitleLastNamePattern,
)
from nomina.patterns.suffix import SuffixPattern
from nomina.types import NameParserConfig

PATTERN_TYPES: tuple[type[NamePattern], ...] = (
    FirstNamePattern,
    TitleLastNamePattern,
    FirstLastNamePattern,
    FirstMiddleLastNamePattern,
    FirstNickLastNamePattern,
    CompoundLastNamePattern,
    LastCommaFirstPattern,
    SuffixPattern,
)


def build_patterns(config: NameParserConfig) -> tuple[NamePattern, ...]:
    """Instantiate every registered pattern against one config, in registry order."""
    return tuple(pattern_type(config) for pattern_type in PATTERN_TYPES)


__all__ = [
    "PATTERN_TYPES",
    "SCORE_BASE",
    "SCORE_SPECIFIC",
    "SCORE_STRONG",
    "CompoundLastNamePattern",
    "FirstLastNamePattern",
    "FirstMiddleLastNamePattern",
    "FirstNamePattern",
    "FirstNickLastNamePattern",
    "LastCommaFirstPattern",
    "NamePattern",
    "SuffixPattern",
    "TitleLastNamePattern",
    "build_patterns",
]
