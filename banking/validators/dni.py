"""Spanish national identity number (DNI) and foreigner number (NIE) checks.

A DNI is eight digits followed by a control letter; a NIE is ``X``, ``Y``
or ``Z`` followed by seven digits and a control letter. The control letter
is ``CONTROL_LETTERS[number % 23]``, where for a NIE the leading letter is
first replaced by ``0``, ``1`` or ``2``.
"""

import re

CONTROL_LETTERS = "TRWAGMYFPDXBNJZSQVHLCKE"

_DNI_PATTERN = re.compile(r"^[0-9]{8}[A-Z]$")
_NIE_PATTERN = re.compile(r"^[XYZ][0-9]{7}[A-Z]$")
_NIE_PREFIX_DIGITS = {"X": "0", "Y": "1", "Z": "2"}
_SEPARATORS = re.compile(r"[\s\-]")


class InvalidDNIError(ValueError):
    """The value is not a well-formed DNI/NIE or its control letter is wrong."""


def normalize(value: str) -> str:
    """Upper-case *value* and strip spaces and hyphens."""
    return _SEPARATORS.sub("", value).upper()


def is_nie(value: str) -> bool:
    return bool(_NIE_PATTERN.match(value.upper()))


def control_letter(value: str) -> str | None:
    """Return the expected control letter, or ``None`` if *value* has no usable number."""
    digits = value.upper()
    if is_nie(digits):
        digits = _NIE_PREFIX_DIGITS[digits[0]] + digits[1:]
    if not re.match(r"^[0-9]{8}", digits):
        return None
    return CONTROL_LETTERS[int(digits[:8]) % 23]


def validate(value: str) -> str:
    """Return the normalized DNI/NIE.

    Raises:
        InvalidDNIError: On a bad format or a wrong control letter.
    """
    normalized = normalize(value)
    if not (_DNI_PATTERN.match(normalized) or _NIE_PATTERN.match(normalized)):
        raise InvalidDNIError("invalid DNI/NIE format")
    if control_letter(normalized) != normalized[-1]:
        raise InvalidDNIError("invalid DNI/NIE control letter")
    return normalized


def is_valid_national_id(value: str) -> bool:
    try:
        validate(value)
    except InvalidDNIError:
        return False
    return True


def mask(value: str) -> str:
    """Hide all but the tail of the ID, e.g. ``*****678Z`` or ``X****67L``.

    Safe to put in logs.
    """
    try:
        normalized = validate(value)
    except InvalidDNIError:
        return "***INVALID***"
    if is_nie(normalized):
        return normalized[0] + "****" + normalized[6:]
    return "*****" + normalized[5:]
