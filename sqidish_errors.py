#! /usr/bin/env python3

"""Errors raised while configuring, encoding or decoding sqids.

Every error derives from SqidsError so callers may catch the family,
while the builtin bases (ValueError, OverflowError) keep working for
code that does not know about this module.
"""

class SqidsError(Exception):
    """Base class for all sqid failures"""


class ConfigurationError(SqidsError, ValueError):
    """Bad alphabet, minimum length or blocklist; raised at construction"""


class InvalidInputError(SqidsError, ValueError):
    """Numbers given to encode are empty, negative or out of range"""


class InvalidCharacterError(SqidsError, ValueError):
    """Text given to decode holds a character outside the alphabet"""


class NumberOverflowError(SqidsError, OverflowError):
    """Decoded value does not fit within MAX_VALUE"""


class EncodingExhaustedError(SqidsError):
    """Every retry produced a blocked id.

    Signals a blocklist that covers the whole output space of a small
    alphabet, so treat it as a configuration bug.
    """
