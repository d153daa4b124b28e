"""Placeholder password generation.

This module turns the text typed into the length field into an integer and
builds a password of that length from a small fixed alphabet. It is a
demonstration routine, not a secure password generator.
"""

import logging
import random
import string
from typing import Optional

# Module-level logger
logger = logging.getLogger(__name__)

# Characters a generated password may contain
ALPHABET = ("a", "b", "c", "d", "e", "*", "!", "-", "1", "9")

# Longest password generate() will build.
MAX_PASSWORD_LENGTH = 100

_INT64_MAX = 2 ** 63 - 1
_INT64_MIN = -(2 ** 63)


def parse_length(text: str) -> int:
    """Parse a requested length out of free-form input text.

    Behaves like C's ``strtoll(text, NULL, 10)``: leading whitespace is
    skipped, an optional sign is accepted and the longest run of decimal
    digits that follows is converted. Anything after the digits is ignored.

    Args:
        text: Raw text from the length input field

    Returns:
        The parsed integer, or 0 if the text does not start with a number
    """
    stripped = text.lstrip(string.whitespace)

    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]

    digits = []
    for ch in stripped:
        if ch not in string.digits:
            break
        digits.append(ch)

    if not digits:
        return 0

    value = sign * int("".join(digits))
    return max(_INT64_MIN, min(value, _INT64_MAX))


class PasswordGenerator:
    """Build random strings from a fixed alphabet.

    Each character is drawn independently and uniformly from the alphabet.
    Requests longer than ``max_length`` are refused softly: a warning is
    logged and an empty string is returned.

    Usage:
        generator = PasswordGenerator()
        password = generator.generate(8)
    """

    def __init__(
        self,
        alphabet=ALPHABET,
        max_length: int = MAX_PASSWORD_LENGTH,
        rng: Optional[random.Random] = None
    ):
        """Initialize the generator.

        Args:
            alphabet: Sequence of characters to sample from
            max_length: Longest password that will be generated
            rng: Random source; defaults to the shared ``random`` module state
        """
        self.alphabet = tuple(alphabet)
        self.max_length = max_length
        self._rng = rng if rng is not None else random

        logger.debug(
            f"PasswordGenerator initialized: {len(self.alphabet)} characters, "
            f"max length {self.max_length}"
        )

    def random_character(self) -> str:
        """Return one character picked uniformly from the alphabet."""
        return self.alphabet[self._rng.randrange(len(self.alphabet))]

    def generate(self, length: int) -> str:
        """Generate a password of the requested length.

        Args:
            length: Desired number of characters

        Returns:
            A string of exactly ``length`` alphabet characters, or an empty
            string if ``length`` is negative or greater than ``max_length``
        """
        if length < 0:
            logger.warning(f"Won't generate passwords of negative length (got {length})")
            return ""

        if length > self.max_length:
            logger.warning(
                f"Won't generate passwords greater than {self.max_length} "
                f"characters (got {length})"
            )
            return ""

        password = "".join(self.random_character() for _ in range(length))
        logger.debug(f"Generated password of {len(password)} characters")
        return password


# Shared generator used by the module-level helper
_default_generator = PasswordGenerator()


def generate_password(length: int) -> str:
    """Generate a password with the default alphabet and ceiling."""
    return _default_generator.generate(length)
