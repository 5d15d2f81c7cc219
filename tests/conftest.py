"""Shared fixtures for the name parsing test suite."""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import nomina
sys.path.insert(0, str(Path(__file__).parent.parent))

from nomina import FullNameParser


@pytest.fixture(scope="session")
def parser():
    return FullNameParser()


def fields(result):
    """(title, first, middle, last, nick, suffix) of a NameParseResult."""
    return (
        result.title,
        result.first_name,
        result.middle_name,
        result.last_name,
        result.nick_name,
        result.suffix,
    )
