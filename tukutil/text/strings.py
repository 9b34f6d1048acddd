"""String parsing helpers for XDW keys, XDS author fields and numeric strings."""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

NHS_ID_LENGTH = 10
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ParsedInt:
    """Integer parse result. ``parsed`` is False when ``value`` is the zero default."""

    value: int
    parsed: bool


def parse_int(text: str) -> ParsedInt:
    """Parse a base-10 integer, reporting whether the input was actually numeric."""
    if isinstance(text, str) and _INT_PATTERN.fullmatch(text):
        return ParsedInt(int(text), True)
    return ParsedInt(0, False)


def get_int_from_string(text: str) -> int:
    """Return the integer value of ``text``, or 0 if it is not numeric."""
    return parse_int(text).value


def get_string_from_int(value: int) -> str:
    return str(value)


def substr(text: str, start: int, length: int) -> str:
    """
    Return ``length`` characters of ``text`` from ``start``.

    Out-of-range requests are clamped instead of failing: a start past the end
    gives an empty string and a length running past the end is shortened.
    """
    start = max(start, 0)
    if start >= len(text) or length <= 0:
        return ""
    return text[start:start + length]


def split_xdw_key(xdw_key: str) -> tuple[str, str]:
    """
    Split an XDW key into its pathway and NHS id.

    The key is the pathway name immediately followed by the 10 digit NHS id.
    Keys of 10 characters or fewer yield two empty strings.
    """
    pathway = ""
    nhs_id = ""
    if len(xdw_key) > NHS_ID_LENGTH:
        logger.debug("Parsing XDW key for pathway and NHS id")
        pathway = xdw_key[:-NHS_ID_LENGTH]
        nhs_id = xdw_key[-NHS_ID_LENGTH:]
    logger.info("Pathway = %s NHS ID = %s", pathway, nhs_id)
    return pathway, nhs_id


def pretty_author_institution(institution: str) -> str:
    """Return the organisation name from an XDS Author.Institution (XON) value."""
    if "^" in institution:
        return institution.split("^")[0] + ","
    return institution


def pretty_author_person(author: str) -> str:
    """Return "family given" from an XDS Author.Person (XCN) value."""
    if "^" in author:
        parts = author.split("^")
        if len(parts) > 2:
            return parts[1] + " " + parts[2]
        if len(parts) > 1:
            return parts[1]
    return author
