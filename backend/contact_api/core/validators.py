"""Field Validators — format predicates for contact fields.

Invariants:
    - Every predicate takes one value and returns bool, never raises
    - Non-string input is invalid
    - Whole-string match: no trimming, no normalisation
"""

import re

# ECMAScript \s: Python's Unicode \s also matches \x1c-\x1f and \x85
_WS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_TEXT = re.compile(rf"[A-Za-z0-9{_WS}]+")
_EMAIL = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}")
_ZIP_CODE = re.compile(rf"[0-9]{{5}}(?:[-{_WS}][0-9]{{4}})?")
_PERSONAL_NUMBER = re.compile(r"[0-9]{6}-[0-9]{4}")


def _matches(pattern: re.Pattern, value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_text(text: object) -> bool:
    """Letters, digits and whitespace only; at least one character."""
    return _matches(_TEXT, text)


def validate_email(email: object) -> bool:
    return _matches(_EMAIL, email)


def validate_zip_code(zip_code: object) -> bool:
    """12345, 12345-6789 or 12345 6789."""
    return _matches(_ZIP_CODE, zip_code)


def validate_personal_number(personal_number: object) -> bool:
    """123456-7890."""
    return _matches(_PERSONAL_NUMBER, personal_number)
