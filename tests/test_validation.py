import pytest

from caromtournament.exceptions import MalformedScoreInputException
from caromtournament.utils.validation import (
    parse_score_text,
    validate_name,
    validate_score_text,
)


@pytest.mark.parametrize("text, expected", [("", None), ("0", 0), ("42", 42), ("0009", 9)])
def test_valid_score_text(text, expected):
    result = validate_score_text(text)

    assert result
    assert result.sanitized_value == expected


@pytest.mark.parametrize("text", ["-3", "+3", "3.0", "three", "1 2", "٣"])
def test_invalid_score_text(text):
    assert not validate_score_text(text)
    with pytest.raises(MalformedScoreInputException):
        parse_score_text(text)


def test_validate_name():
    assert validate_name("  Team  ").sanitized_value == "Team"
    assert not validate_name("   ")
    assert validate_name("", required=False)
