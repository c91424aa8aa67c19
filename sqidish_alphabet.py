#! /usr/bin/env python3

"""Validate an alphabet, and shuffle it deterministically.

The same input alphabet always yields the same shuffled alphabet,
which is what lets decode retrace the steps taken by encode.
"""

from sqidish_errors import ConfigurationError

DEFAULT_ALPHABET = ('abcdefghijklmnopqrstuvwxyz'
                    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
                    '0123456789')
MIN_ALPHABET_LENGTH = 3

# Printable ASCII without space:
FIRST_ALLOWED = '!'
LAST_ALLOWED = '~'

def validate(alphabet):
    """Returns ALPHABET unchanged if usable, else raises ConfigurationError"""
    if not isinstance(alphabet, str):
        raise ConfigurationError('Alphabet must be a string, not {}'
                                 .format(type(alphabet).__name__))
    for char in alphabet:
        if not FIRST_ALLOWED <= char <= LAST_ALLOWED:
            raise ConfigurationError('Alphabet contains unsupported'
                                     ' character {!r}'.format(char))
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise ConfigurationError('Alphabet length must be at least {}'
                                 .format(MIN_ALPHABET_LENGTH))
    if len(set(alphabet)) != len(alphabet):
        raise ConfigurationError('Alphabet must contain unique characters')
    return alphabet

def shuffle(alphabet):
    """Returns a permutation of ALPHABET seeded only by ALPHABET itself.
    Walks two indices toward the middle, swapping the left one with a
    pivot derived from both bounding characters and the indices.
    """
    chars = list(alphabet)
    length = len(chars)
    i = 0
    j = length - 1
    while j > 0:
        pivot = (i * j + ord(chars[i]) + ord(chars[j])) % length
        chars[i], chars[pivot] = chars[pivot], chars[i]
        i += 1
        j -= 1

    return ''.join(chars)
