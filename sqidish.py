#! /usr/bin/env python3

"""Encode lists of non-negative integers as short ids, and decode them.

Ids are reversible without stored state, look non-sequential, and avoid
blocklisted words.  This is obfuscation, not encryption: anyone holding
the alphabet can decode an id.

    >>> sqids = Sqids()
    >>> sqids.encode([1, 2, 3])
    '86Rf07'
    >>> sqids.decode('86Rf07')
    [1, 2, 3]
"""

import sqidish_alphabet
import sqidish_blocklist
import sqidish_numerals
import sqidish_pool
from sqidish_alphabet import DEFAULT_ALPHABET
from sqidish_errors import (ConfigurationError, EncodingExhaustedError,
                            InvalidCharacterError, InvalidInputError)
from sqidish_numerals import MAX_VALUE

MIN_LENGTH_LIMIT = 255

class Configuration:
    """Settings an encoder is built from; see Sqids for their meaning"""

    __slots__ = ('alphabet', 'min_length', 'blocklist')

    def __init__(self, alphabet=DEFAULT_ALPHABET, min_length=0, blocklist=None):
        self.alphabet = alphabet
        self.min_length = min_length
        self.blocklist = blocklist

    def __repr__(self):
        return ('Configuration(alphabet={!r}, min_length={!r}, blocklist={!r})'
                .format(self.alphabet, self.min_length, self.blocklist))


class Sqids:
    """Stateless encoder/decoder over a fixed configuration.

    ALPHABET is shuffled once here and then only read, so one instance
    may serve any number of threads.  MIN_LENGTH pads short ids.
    BLOCKLIST defaults to the curated list; pass an empty set to turn
    filtering off.  POOL supplies scratch buffers and defaults to a
    pool owned by this instance.
    """

    __slots__ = ('alphabet', 'min_length', 'blocklist', 'pool')

    def __init__(self, alphabet=DEFAULT_ALPHABET, min_length=0, blocklist=None,
                 pool=None):
        sqidish_alphabet.validate(alphabet)
        if (not isinstance(min_length, int) or isinstance(min_length, bool)
                or not 0 <= min_length <= MIN_LENGTH_LIMIT):
            raise ConfigurationError('Minimum length has to be between 0'
                                     ' and {}, not {!r}'
                                     .format(MIN_LENGTH_LIMIT, min_length))
        if blocklist is None:
            blocklist = sqidish_blocklist.DEFAULT_BLOCKLIST
        elif isinstance(blocklist, str):
            raise ConfigurationError('Blocklist must be a collection of'
                                     ' words, not a string')

        self.alphabet = sqidish_alphabet.shuffle(alphabet)
        self.min_length = min_length
        self.blocklist = sqidish_blocklist.filter_blocklist(blocklist, alphabet)
        self.pool = pool if pool is not None else sqidish_pool.BufferPool()

    def encode(self, numbers):
        """Returns NUMBERS encoded as a single id.
        May raise InvalidInputError or EncodingExhaustedError"""
        try:
            numbers = list(numbers)
        except TypeError:
            raise InvalidInputError('Expected a sequence of integers, not {!r}'
                                    .format(numbers))
        if not numbers:
            raise InvalidInputError('Nothing to encode')
        for number in numbers:
            if not isinstance(number, int) or isinstance(number, bool):
                raise InvalidInputError('Expected an integer, not {!r}'
                                        .format(number))
            if not 0 <= number <= MAX_VALUE:
                raise InvalidInputError('Encoding supports numbers between'
                                        ' 0 and {}, not {}'
                                        .format(MAX_VALUE, number))

        # Each increment rotates the starting alphabet by one more step;
        # after a full turn every possible rotation has been tried.
        for increment in range(len(self.alphabet) + 1):
            candidate = self._encode_numbers(numbers, increment)
            if not sqidish_blocklist.is_blocked(candidate, self.blocklist):
                return candidate

        raise EncodingExhaustedError('Reached max attempts to re-generate'
                                     ' an id for {}'.format(numbers))

    def _encode_numbers(self, numbers, increment):
        alphabet = self.alphabet
        length = len(alphabet)
        offset = sum(ord(alphabet[number % length]) + index
                     for index, number in enumerate(numbers))
        offset = (len(numbers) + offset + increment) % length
        working = alphabet[offset:] + alphabet[:offset]
        anchor = working[0]
        working = working[::-1]

        with self.pool.rented() as buffer:
            buffer.append(anchor)
            last = len(numbers) - 1
            for index, number in enumerate(numbers):
                # First character is reserved as separator:
                buffer.append(sqidish_numerals.to_id(number, working[1:]))
                if index < last:
                    buffer.append(working[0])
                    working = sqidish_alphabet.shuffle(working)

            if len(buffer) < self.min_length:
                buffer.append(working[0])
                while len(buffer) < self.min_length:
                    working = sqidish_alphabet.shuffle(working)
                    buffer.append(working[:min(self.min_length - len(buffer),
                                               length)])

            return buffer.getvalue()

    def decode(self, text):
        """Returns list of integers encoded within TEXT.
        Empty TEXT gives an empty list.  Text that encode did not
        produce yields a best-effort list, or raises
        InvalidCharacterError or NumberOverflowError"""
        numbers = []
        if text == '':
            return numbers
        for char in text:
            if char not in self.alphabet:
                raise InvalidCharacterError('Character {!r} is not part of'
                                            ' the alphabet'.format(char))

        offset = self.alphabet.index(text[0])
        working = self.alphabet[offset:] + self.alphabet[:offset]
        working = working[::-1]
        remaining = text[1:]
        while remaining:
            separator = working[0]
            chunk, found, remaining = remaining.partition(separator)
            if chunk == '':
                # Padding begins with a separator
                break
            numbers.append(sqidish_numerals.to_number(chunk, working[1:]))
            if found:
                working = sqidish_alphabet.shuffle(working)

        return numbers


def new_encoder(configuration):
    """Returns Sqids built from CONFIGURATION.
    May raise ConfigurationError"""
    return Sqids(alphabet=configuration.alphabet,
                 min_length=configuration.min_length,
                 blocklist=configuration.blocklist)
