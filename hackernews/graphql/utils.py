import logging
import re

from hackernews.core.exceptions import InputValidationError

logger = logging.getLogger(__name__)

IDENTIFIER_REGEX = re.compile(r"[0-9]+", re.ASCII)
# Primary keys are 32-bit signed INTEGER columns
MAX_IDENTIFIER = 2**31 - 1

TAKE_MINIMUM = 1
TAKE_MAXIMUM = 50
TAKE_DEFAULT = 30


def parse_identifier(value: str) -> int | None:
    """Parses a database identifier sent as a GraphQL ID.

    Returns the integer only if ``value`` is made entirely of decimal digits
    and fits the primary key column; returns None otherwise. Leading zeros
    are accepted ("007" is 7).
    """
    if not IDENTIFIER_REGEX.fullmatch(value):
        return None
    identifier = int(value)
    if identifier > MAX_IDENTIFIER:
        return None
    return identifier


def validate_take(take: int | None) -> int:
    """Returns the page size to use, rejecting values outside [1, 50]."""
    if take is None:
        return TAKE_DEFAULT
    if take < TAKE_MINIMUM or take > TAKE_MAXIMUM:
        logger.debug("Rejected feed page size", extra={"props": {"take": take}})
        raise InputValidationError(
            f"'take' argument value '{take}' is outside the valid range of "
            f"'{TAKE_MINIMUM}' to '{TAKE_MAXIMUM}'.",
            field="take",
        )
    return take


def validate_skip(skip: int | None) -> int:
    if skip is None:
        return 0
    if skip < 0:
        raise InputValidationError(
            f"'skip' argument value '{skip}' must not be negative.", field="skip"
        )
    return skip
