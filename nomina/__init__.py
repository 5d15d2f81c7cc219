"""
Nomina: Full Name Parsing Library

Splits free-form person names ("Mr Giovanni Van Der Hutte", "Pasquale (Pat) Vacoturo")
into title, first/middle/last name, nickname and suffix by letting several
independent patterns compete on confidence.
"""

from functools import cache

__version__ = "0.1.0"

__all__ = ["FullNameParser", "NameParseResult", "NameParserConfig", "parse_name"]


@cache
def _default_parser():
    from .parser import FullNameParser
    return FullNameParser()


def parse_name(full_name):
    """Parse one name with a shared parser using the default config."""
    return _default_parser().parse(full_name)


def __getattr__(name):
    """Lazy import to keep `import nomina` cheap."""
    if name == "FullNameParser":
        from .parser import FullNameParser
        return FullNameParser
    if name == "NameParseResult":
        from .types import NameParseResult
        return NameParseResult
    if name == "NameParserConfig":
        from .types import NameParserConfig
        return NameParserConfig
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
