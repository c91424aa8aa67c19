#! /usr/bin/env python3

"""Sqid encoder

Encode numbers or decode ids given on the command line, hash text into
an id, or serve both operations over HTTP when no values are given.
"""

import argparse
import re
import sys

import cityhash

import listener
from sqidish import MAX_VALUE, Configuration, new_encoder
from sqidish_alphabet import DEFAULT_ALPHABET
from sqidish_errors import SqidsError

NUMBER_RE = re.compile('^[0-9]+$')

class SqidTool:

    __slots__ = ('address', 'port', 'alphabet', 'min_length',
                 'blocklist_file', 'use_blocklist', 'digest', 'values',
                 'out')

    def __init__(self, out=None):
        # See also .configure() when changing these values:
        self.address = ''       # Leave blank for wildcard address
        self.port = 8000
        self.alphabet = DEFAULT_ALPHABET
        self.min_length = 0
        self.blocklist_file = None
        self.use_blocklist = True
        self.digest = None      # text to hash then encode
        self.values = []        # numbers to encode, or ids to decode
        self.out = out or sys.stdout

    def main(self, argv=None):
        """Returns process exit status"""
        self.configure(argv)
        try:
            encoder = new_encoder(self.make_configuration())
        except (OSError, SqidsError) as error:
            print("error=configuration reason={}".format(error),
                  file=sys.stderr)
            return 2

        if self.digest is not None:
            return self.encode_digest(encoder, self.digest)
        elif self.values and all(NUMBER_RE.match(value) for value in self.values):
            return self.encode(encoder, [int(value) for value in self.values])
        elif self.values:
            return self.decode(encoder, self.values)
        else:
            self.serve_http_requests_forever(encoder)
            return 0

    def configure(self, argv=None):
        args = self.parse_args(argv)
        # See also .__init__() when changing these values:
        self.address = args.address
        self.port = int(args.port)
        self.alphabet = args.alphabet
        self.min_length = args.min_length
        self.blocklist_file = args.blocklist_file
        self.use_blocklist = not args.no_blocklist
        self.digest = args.digest
        self.values = args.values

    def parse_args(self, argv=None):
        parser = argparse.ArgumentParser(
            description="Sqid encoder HTTP app and command-line interface",
            epilog='Without any values, listens using defaults.'
            '  Values made only of digits are always encoded as numbers,'
            ' so an id consisting solely of digits cannot be decoded here.')
        parser.add_argument('-a', dest='address',
                            default=self.address,
                            help='Listen on IP interface bound to host address;'
                            ' Leave blank for wildcard address')
        parser.add_argument('-p', dest='port',
                            default=self.port,
                            help='Listen on this IP port number')
        parser.add_argument('--alphabet', dest='alphabet',
                            default=self.alphabet,
                            help='Characters that ids are made of')
        parser.add_argument('--min-length', dest='min_length', type=int,
                            default=self.min_length,
                            help='Pad ids shorter than this many characters')
        parser.add_argument('--blocklist', dest='blocklist_file',
                            default=self.blocklist_file,
                            help='File of words, one per line, that ids must'
                            ' avoid; replaces the built-in list')
        parser.add_argument('--no-blocklist', dest='no_blocklist',
                            action='store_true',
                            help='Allow any word within ids')
        parser.add_argument('--digest', dest='digest',
                            help='Hash this text and print its id')
        parser.add_argument('values', nargs='*',
                            help='Numbers to be encoded as one id'
                            ' or ids to be decoded')
        return parser.parse_args(argv)

    def make_configuration(self):
        """Returns Configuration from current settings.
        May raise OSError when reading blocklist file"""
        blocklist = None
        if not self.use_blocklist:
            blocklist = set()
        elif self.blocklist_file:
            blocklist = read_blocklist(self.blocklist_file)
        return Configuration(alphabet=self.alphabet,
                             min_length=self.min_length,
                             blocklist=blocklist)

    def encode(self, encoder, numbers):
        try:
            sqid = encoder.encode(numbers)
        except SqidsError as error:
            print("error=invalid-input numbers={} reason={}"
                  .format(numbers, error), file=sys.stderr)
            return 1
        print(sqid, file=self.out)
        return 0

    def encode_digest(self, encoder, text):
        """Encode 63-bit CityHash of TEXT"""
        hashed = cityhash.CityHash64(text.encode('utf-8')) & MAX_VALUE
        print("digest hash={} text={!r}".format(hashed, text), file=sys.stderr)
        return self.encode(encoder, [hashed])

    def decode(self, encoder, sqids):
        status = 0
        for sqid in sqids:
            try:
                numbers = encoder.decode(sqid)
            except SqidsError as error:
                print("error=undecodable sqid={} reason={}"
                      .format(sqid, error), file=sys.stderr)
                status = 1
                continue
            print(','.join(str(number) for number in numbers), file=self.out)
        return status

    def serve_http_requests_forever(self, encoder):
        """Start HTTP service.
        SIDE-EFFECTS: never returns but handles KeyboardInterrupt
        """
        print('Listening on {}:{} ...'.format(self.address or '*', self.port))
        try:
            listener.run(encoder, address=self.address, port=self.port)
        except KeyboardInterrupt:
            print("\nCaught keyboard interrupt.  Exiting.")

def read_blocklist(pathname):
    """Returns set of words in PATHNAME, skipping blanks and # comments"""
    words = set()
    with open(pathname, encoding='utf-8') as file:
        for line in file:
            word = line.strip()
            if word and not word.startswith('#'):
                words.add(word)
    return words

def main():
    sys.exit(SqidTool().main())

if __name__ == '__main__':
    main()
