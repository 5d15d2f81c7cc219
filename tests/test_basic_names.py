"""
Basic Name Test Suite

This module contains tests for the common person-name shapes:
- Given name only, title + family name
- Given/family name with and without a title
- Middle names and initials
- Nicknames in parentheses or quotes
- Particle family names ("Van Der Hutte")
- Inverted "Last, First" input
- Generational and professional suffixes
"""

from conftest import fields

from nomina import parse_name

# (input, (title, first, middle, last, nick, suffix))
PERSON_NAME_TEST_CASES = [
    ("Mr Jack Johnson", ("Mr", "Jack", None, "Johnson", None, None)),
    ("Jack Johnson", (None, "Jack", None, "Johnson", None, None)),
    ("Jack", (None, "Jack", None, None, None, None)),
    ("Pasquale (Pat) Vacoturo", (None, "Pasquale", None, "Vacoturo", "Pat", None)),
    ("Mr Giovanni Van Der Hutte", ("Mr", "Giovanni", None, "Van Der Hutte", None, None)),
    ("Giovanni Van Der Hutte", (None, "Giovanni", None, "Van Der Hutte", None, None)),
    # Titles and middle initials
    ("Mr Johnson", ("Mr", None, None, "Johnson", None, None)),
    ("Dr. Jack B. Johnson", ("Dr.", "Jack", "B.", "Johnson", None, None)),
    ("Jack Bradley Johnson", (None, "Jack", "Bradley", "Johnson", None, None)),
    # Hyphens and apostrophes stay inside the token
    ("Mary Smith-Jones", (None, "Mary", None, "Smith-Jones", None, None)),
    ("Patrick O'Neil", (None, "Patrick", None, "O'Neil", None, None)),
    # Scripts that use combining marks
    ("राम शर्मा", (None, "राम", None, "शर्मा", None, None)),
    ("สมชาย ใจดี", (None, "สมชาย", None, "ใจดี", None, None)),
    # Nicknames
    ('Robert "Bob" Smith', (None, "Robert", None, "Smith", "Bob", None)),
    ("Mrs Margaret (Peggy Sue) Carter", ("Mrs", "Margaret", None, "Carter", "Peggy Sue", None)),
    ("Pasquale (Pat) Van Der Hutte", (None, "Pasquale", None, "Van Der Hutte", "Pat", None)),
    # Particles
    ("Ludwig van Beethoven", (None, "Ludwig", None, "van Beethoven", None, None)),
    ("Jack De Johnson", (None, "Jack", None, "De Johnson", None, None)),
    ("Jack De La Cruz", (None, "Jack", None, "De La Cruz", None, None)),
    ("Dr Giovanni van der Hutte", ("Dr", "Giovanni", None, "van der Hutte", None, None)),
    # Inverted order
    ("Johnson, Jack", (None, "Jack", None, "Johnson", None, None)),
    ("Van Der Hutte, Giovanni", (None, "Giovanni", None, "Van Der Hutte", None, None)),
    ("Johnson, Dr Jack B. Jr", ("Dr", "Jack", "B.", "Johnson", None, "Jr")),
    # Suffixes
    ("Jack Johnson Jr", (None, "Jack", None, "Johnson", None, "Jr")),
    ("Jack Johnson, Jr.", (None, "Jack", None, "Johnson", None, "Jr.")),
    ("Mr Jack B. Johnson III", ("Mr", "Jack", "B.", "Johnson", None, "III")),
    ("Giovanni Van Der Hutte Sr.", (None, "Giovanni", None, "Van Der Hutte", None, "Sr.")),
]

DISPLAY_NAME_TEST_CASES = [
    ("Mr Jack Johnson", "Mr Jack Johnson"),
    ("Jack   Johnson", "Jack Johnson"),
    ("Pasquale (Pat) Vacoturo", "Pasquale Vacoturo"),
    ("Mrs Margaret (Peggy) Carter", "Mrs Margaret Carter"),
    ("Johnson, Jack", "Jack Johnson"),
    ("Johnson, Dr Jack B. Jr", "Dr Jack B. Johnson Jr"),
    ("Jack Johnson, Jr.", "Jack Johnson, Jr."),
]


def test_person_names(parser):
    """Test that each shape is split into the expected components."""
    passed = 0
    failed = 0

    for input_name, expected in PERSON_NAME_TEST_CASES:
        result = parser.parse(input_name)
        if fields(result) == expected and result.matched:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{input_name}': expected {expected}, got {fields(result)}")

    assert failed == 0, f"Person name tests: {failed} failures out of {len(PERSON_NAME_TEST_CASES)} tests"
    print(f"Person name tests: {passed} passed, {failed} failed")


def test_display_names(parser):
    for input_name, expected in DISPLAY_NAME_TEST_CASES:
        assert parser.parse(input_name).display_name == expected, input_name


def test_empty_input_short_circuits(parser):
    for value in (None, ""):
        result = parser.parse(value)
        assert result.display_name == value
        assert fields(result) == (None,) * 6
        assert not result.matched


def test_unrecognised_input_keeps_original_display_name(parser):
    unrecognised = ["   ", "12345", "Jack 42 Johnson", "Mr", 'Jack (Pat" Smith', "Jack “Pat) Smith", "Johann Sebastian de la Cruz"]
    for value in unrecognised:
        result = parser.parse(value)
        assert not result.matched
        assert result.display_name == value
        assert fields(result) == (None,) * 6


def test_winning_score_is_exposed(parser):
    assert parser.parse("Jack Johnson").score is not None
    assert parser.parse("Pasquale (Pat) Vacoturo").score > parser.parse("Jack Johnson").score


def test_as_dict():
    result = parse_name("Mr Jack Johnson")
    assert result.as_dict() == {
        "title": "Mr",
        "first_name": "Jack",
        "middle_name": None,
        "last_name": "Johnson",
        "nick_name": None,
        "suffix": None,
        "display_name": "Mr Jack Johnson",
        "score": result.score,
    }


def test_module_level_parse_name_matches_parser(parser):
    for input_name, _ in PERSON_NAME_TEST_CASES:
        assert parse_name(input_name) == parser.parse(input_name)
