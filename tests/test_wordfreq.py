import io
import unittest
from collections import Counter
from unittest import mock

import wordfreq


class TokenizeTest(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(wordfreq.tokenize(''), [])

    def test_plain(self):
        self.assertEqual(wordfreq.tokenize('This is a string'), ['This', 'is', 'a', 'string'])

    def test_weird(self):
        self.assertEqual(wordfreq.tokenize('32There38 is* !something∆∑ weird:)here.'),
                         ['There', 'is', 'something', 'weird', 'here'])


class CountTest(unittest.TestCase):
    def test_read_text_stops_at_terminator(self):
        stream = io.StringIO('one two\ntwo, three!\n999\nfour\n')
        self.assertEqual(wordfreq.read_text(stream), ['one', 'two', 'two', 'three'])

    def test_words_do_not_span_lines(self):
        self.assertEqual(wordfreq.read_text(io.StringIO('ab\ncd')), ['ab', 'cd'])

    def test_count_words(self):
        self.assertEqual(wordfreq.count_words(['a', 'b', 'a']), Counter({'a': 2, 'b': 1}))

    def test_rank(self):
        counts = wordfreq.count_words(['b', 'a', 'b', 'c', 'a', 'b'])
        self.assertEqual(wordfreq.rank(counts), [('b', 3), ('a', 2), ('c', 1)])

    def test_rank_empty(self):
        self.assertEqual(wordfreq.rank(Counter()), [])

    def test_format_entry(self):
        self.assertEqual(wordfreq.format_entry('hello', 3), 'hello  3')


class MainTest(unittest.TestCase):
    def test_main(self):
        stdin = io.TextIOWrapper(io.BytesIO(b'hello world, hello\nword hello world\n999\nhello\n'))
        stdout = io.StringIO()
        with mock.patch('sys.stdin', stdin), mock.patch('sys.stdout', stdout):
            self.assertEqual(wordfreq.main([]), 0)
        self.assertEqual(stdout.getvalue(), 'hello  3\nworld  2\nword  1\n')


if __name__ == '__main__':
    unittest.main(verbosity=2)
