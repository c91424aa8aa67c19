#! /usr/bin/env python3

import io
import os
import tempfile
import unittest

import cityhash

import sqidish_cli
from sqidish import MAX_VALUE, Sqids

class TestSqidTool(unittest.TestCase):

    def run_tool(self, *argv):
        out = io.StringIO()
        status = sqidish_cli.SqidTool(out=out).main(list(argv))
        return status, out.getvalue()

    def test_encode(self):
        self.assertEqual(self.run_tool('1', '2', '3'), (0, '86Rf07\n'))

    def test_decode(self):
        self.assertEqual(self.run_tool('86Rf07', 'Uk'), (0, '1,2,3\n1\n'))

    def test_decode_invalid(self):
        status, output = self.run_tool('86Rf07!', 'Uk')
        self.assertEqual(status, 1)
        self.assertEqual(output, '1\n')

    def test_non_ascii_digits_are_decoded(self):
        status, output = self.run_tool('\u00b2')
        self.assertEqual((status, output), (1, ''))

    def test_min_length(self):
        self.assertEqual(self.run_tool('--min-length', '10', '1', '2', '3'),
                         (0, '86Rf07xd4z\n'))

    def test_no_blocklist(self):
        self.assertEqual(self.run_tool('--no-blocklist', '4572721'),
                         (0, 'aho1e\n'))

    def test_blocklist_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.txt', delete=False,
                                         encoding='utf-8') as file:
            file.write('# custom words\n\nArUO\n')
        self.addCleanup(os.remove, file.name)
        self.assertEqual(self.run_tool('--blocklist', file.name, '100000'),
                         (0, 'QyG4\n'))
        self.assertEqual(sqidish_cli.read_blocklist(file.name), {'ArUO'})

    def test_digest(self):
        expected = Sqids().encode(
            [cityhash.CityHash64('hello'.encode('utf-8')) & MAX_VALUE])
        self.assertEqual(self.run_tool('--digest', 'hello'),
                         (0, expected + '\n'))

    def test_bad_alphabet(self):
        self.assertEqual(self.run_tool('--alphabet', 'aa', '1'), (2, ''))

    def test_missing_blocklist_file(self):
        status, _output = self.run_tool('--blocklist', '/nonexistent/words',
                                        '1')
        self.assertEqual(status, 2)

if __name__ == '__main__':
    unittest.main()
