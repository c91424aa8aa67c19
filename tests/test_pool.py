#! /usr/bin/env python3

import threading
import unittest

import sqidish_pool
from sqidish import Sqids

class TestBufferPool(unittest.TestCase):

    def test_acquire_returns_empty_buffer(self):
        pool = sqidish_pool.BufferPool(initial_capacity=1)
        buffer = pool.acquire()
        self.assertEqual(len(buffer), 0)
        self.assertEqual(buffer.getvalue(), '')
        buffer.append('abc')
        buffer.append('de')
        self.assertEqual(len(buffer), 5)
        self.assertEqual(buffer.getvalue(), 'abcde')

    def test_release_clears_and_reuses(self):
        pool = sqidish_pool.BufferPool(initial_capacity=0)
        buffer = pool.acquire()
        buffer.append('leftover')
        pool.release(buffer)
        self.assertEqual(len(pool), 1)
        again = pool.acquire()
        self.assertIs(again, buffer)
        self.assertEqual(again.getvalue(), '')

    def test_grows_when_depleted(self):
        pool = sqidish_pool.BufferPool(initial_capacity=1)
        first = pool.acquire()
        second = pool.acquire()
        self.assertIsNot(first, second)
        pool.release(first)
        pool.release(second)
        self.assertEqual(len(pool), 2)

    def test_double_release_is_harmless(self):
        pool = sqidish_pool.BufferPool(initial_capacity=0)
        buffer = pool.acquire()
        pool.release(buffer)
        pool.release(buffer)
        self.assertEqual(len(pool), 1)

    def test_rented_releases_on_error(self):
        pool = sqidish_pool.BufferPool(initial_capacity=2)
        with self.assertRaises(RuntimeError):
            with pool.rented() as buffer:
                buffer.append('partial')
                self.assertEqual(len(pool), 1)
                raise RuntimeError('boom')
        self.assertEqual(len(pool), 2)

    def test_negative_capacity(self):
        with self.assertRaises(ValueError):
            sqidish_pool.BufferPool(initial_capacity=-1)

    def test_engine_returns_buffers(self):
        pool = sqidish_pool.BufferPool(initial_capacity=4)
        sqids = Sqids(min_length=20, pool=pool)
        sqids.encode([1, 2, 3])
        self.assertEqual(len(pool), 4)

    def test_engine_returns_buffers_when_exhausted(self):
        pool = sqidish_pool.BufferPool(initial_capacity=4)
        sqids = Sqids('abc', 3, {'cab', 'abc', 'bca'}, pool=pool)
        with self.assertRaises(Exception):
            sqids.encode([0])
        self.assertEqual(len(pool), 4)

    def test_shared_pool_across_threads(self):
        pool = sqidish_pool.BufferPool(initial_capacity=2)
        sqids = Sqids(min_length=10, pool=pool)
        expected = {n: sqids.encode([n, n + 1]) for n in range(200)}
        failures = []

        def work():
            for n in range(200):
                sqid = sqids.encode([n, n + 1])
                if sqid != expected[n] or sqids.decode(sqid) != [n, n + 1]:
                    failures.append(n)

        threads = [threading.Thread(target=work) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertEqual(failures, [])
        for _ in range(len(pool)):
            self.assertEqual(pool.acquire().getvalue(), '')

if __name__ == '__main__':
    unittest.main()
