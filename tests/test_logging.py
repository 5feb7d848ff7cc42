import io
import unittest

from chomsky.logging import (
    FileLogger, LogParseError, MemoryLogger, NullLogger, parse_log_line,
    read_log_file)

class TestFileLogger(unittest.TestCase):

    def test_write_and_read(self):
        fout = io.StringIO()
        events = FileLogger(fout)
        events.log('pass', { 'name' : 'introduce_s0', 'rules_after' : 3 })
        events.log('done')
        lines = fout.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith('pass '))
        self.assertTrue(lines[0].endswith(' {"name":"introduce_s0","rules_after":3}'))
        first, second = read_log_file(io.StringIO(fout.getvalue()))
        self.assertEqual(first.type, 'pass')
        self.assertEqual(first.data, { 'name' : 'introduce_s0', 'rules_after' : 3 })
        self.assertEqual(second.type, 'done')
        self.assertIsNone(second.data)
        self.assertLessEqual(first.timestamp, second.timestamp)

    def test_parse_errors(self):
        for line in ['pass', 'pass notatime', 'pass 1.5 {not json}']:
            with self.subTest(line=line):
                with self.assertRaises(LogParseError):
                    parse_log_line(line)

class TestMemoryLogger(unittest.TestCase):

    def test_events(self):
        events = MemoryLogger()
        events.log('a', { 'x' : 1 })
        events.log('b')
        events.log('a', { 'x' : 2 })
        self.assertEqual([e.type for e in events.events], ['a', 'b', 'a'])
        self.assertEqual(
            [e.data for e in events.events_of_type('a')],
            [{ 'x' : 1 }, { 'x' : 2 }])

    def test_null_logger(self):
        NullLogger().log('a', { 'x' : 1 })

if __name__ == '__main__':
    unittest.main()
