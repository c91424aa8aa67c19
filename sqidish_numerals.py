#! /usr/bin/env python3

"""Convert a non-negative integer to a numeral over an arbitrary
alphabet, and decode it.

The radix is the alphabet length and each character stands for its
own index, so "ABC" behaves like base 3 with digits A=0, B=1, C=2.
"""

from sqidish_errors import InvalidCharacterError, NumberOverflowError

# Signed 64-bit range:
MAX_VALUE = 2**63 - 1

def to_id(integer, alphabet):
    """Returns INTEGER encoded with ALPHABET, most significant digit first"""
    assert integer >= 0, 'Number must be non-negative'
    length = len(alphabet)
    if integer < length:
        return alphabet[integer]
    digits = []
    while integer != 0:
        integer, remainder = divmod(integer, length)
        digits.append(alphabet[remainder])

    return ''.join(reversed(digits))

def to_number(encoded_string, alphabet):
    """Returns ENCODED_STRING decoded with ALPHABET as an integer.
    May raise InvalidCharacterError or NumberOverflowError"""
    length = len(alphabet)
    integer = 0
    for char in encoded_string:
        digit = alphabet.find(char)
        if digit < 0:
            raise InvalidCharacterError('Character {!r} is not part of'
                                        ' the alphabet'.format(char))
        integer = integer * length + digit
        if integer > MAX_VALUE:
            raise NumberOverflowError('Value of {!r} exceeds {}'
                                      .format(encoded_string, MAX_VALUE))

    return integer
