import argparse
import contextlib
import io
import pathlib
import tempfile
import unittest

from chomsky.formal_models.cfg_tools import PassSummary
from chomsky.logging import read_log_file
from chomsky.pretty_table import align, summary_table
from cnf_demo.convert import main
from cnf_demo.grammar_util import (
    EXAMPLE_GRAMMARS, add_grammar_arguments, parse_grammar)

class TestGrammarArguments(unittest.TestCase):

    def parse(self, argv):
        parser = argparse.ArgumentParser()
        add_grammar_arguments(parser)
        args = parser.parse_args(argv)
        return parse_grammar(parser, args)

    def test_single_grammar(self):
        example, = self.parse(['--grammar', 'unit'])
        self.assertEqual(example.name, 'unit')
        self.assertEqual(example.grammar.start, '<S>')

    def test_all_grammars(self):
        examples = self.parse([])
        self.assertEqual([e.name for e in examples], list(EXAMPLE_GRAMMARS))

    def test_fresh_nonterminal_format(self):
        example, = self.parse([
            '--grammar', 'unit', '--fresh-nonterminal-format', 'N{}'])
        self.assertEqual(example.grammar.new_nonterminal(), 'N0')
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                self.parse(['--fresh-nonterminal-format', 'N'])

class TestConvert(unittest.TestCase):

    def test_main(self):
        with tempfile.TemporaryDirectory() as dirname:
            log_file = pathlib.Path(dirname) / 'events.log'
            out = io.StringIO()
            with contextlib.redirect_stdout(out):
                main(['--grammar', 'unit', '--log-file', str(log_file)])
            with log_file.open() as fin:
                events = list(read_log_file(fin))
        output = out.getvalue()
        self.assertIn('Old start symbol is: <S>', output)
        self.assertIn("<S> -> <A>\n<A> -> 'a'", output)
        self.assertIn('New start symbol is: <Z0>', output)
        self.assertIn("New Chomsky Normal Form rules are:\n<Z0> -> 'a'\n", output)
        self.assertIn('introduce_s0', output)
        self.assertEqual(
            [e.type for e in events],
            ['grammar'] + ['pass'] * 6 + ['cnf'])
        self.assertEqual(events[0].data, { 'name' : 'unit' })
        self.assertEqual(events[-1].data['start'], '<Z0>')

class TestPrettyTable(unittest.TestCase):

    def test_align(self):
        lines = []
        align([['a', 'bb'], ['ccccc', 'd', 'e']], print=lines.append)
        self.assertEqual(lines, [
            'a     bb',
            'ccccc d    e'
        ])

    def test_summary_table(self):
        rows = summary_table([PassSummary('introduce_s0', 2, 3, 2, 3, 1, 1)])
        self.assertEqual(rows, [
            ['pass', 'rules', 'nonterminals', 'terminals'],
            ['introduce_s0', '2 -> 3', '2 -> 3', '1 -> 1']
        ])

if __name__ == '__main__':
    unittest.main()
