"""Validation utilities for Carom Tournament.

This module provides reusable validation functions with consistent error handling.
"""

import re
from typing import Optional

from caromtournament.exceptions import MalformedScoreInputException
from caromtournament.type_hints import Score, ScoreText

# Plain ASCII digits only; str.isdigit() would also accept superscripts
_SCORE_PATTERN = re.compile(r"[0-9]+")


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[object] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Score Validation ==========


def validate_score_text(text: Optional[ScoreText]) -> ValidationResult:
    """Validate one side of a score edit.

    An empty string means "unset" and is valid with a ``None`` value.
    Anything else must be a run of decimal digits.

    Args:
        text: Score text as typed

    Returns:
        ValidationResult whose sanitized_value is the parsed int or None

    Example:
        >>> validate_score_text("12").sanitized_value
        12
        >>> bool(validate_score_text("1a"))
        False
    """
    if text is None or text == "":
        return ValidationResult(is_valid=True, sanitized_value=None)

    if _SCORE_PATTERN.fullmatch(text):
        return ValidationResult(is_valid=True, sanitized_value=int(text))

    return ValidationResult(
        is_valid=False,
        error_message=f"Invalid score: {text!r} (digits only)",
    )


def parse_score_text(text: Optional[ScoreText]) -> Score:
    """Parse score text and raise if invalid.

    Args:
        text: Score text as typed

    Returns:
        The score, or None for an empty string

    Raises:
        MalformedScoreInputException: If the text is not empty or all digits
    """
    result = validate_score_text(text)
    if not result.is_valid:
        raise MalformedScoreInputException(result.error_message)
    return result.sanitized_value


# ========== Name Validation ==========


def validate_name(name: Optional[str], required: bool = True) -> ValidationResult:
    """Validate a team or tournament name.

    Args:
        name: Name to validate
        required: Whether an empty name is an error

    Returns:
        ValidationResult with the stripped name
    """
    if not name or not name.strip():
        if required:
            return ValidationResult(is_valid=False, error_message="Name is required")
        return ValidationResult(is_valid=True, sanitized_value=None)

    return ValidationResult(is_valid=True, sanitized_value=name.strip())
