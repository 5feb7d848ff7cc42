import argparse
import contextlib
import logging
import pathlib
import sys

from chomsky.formal_models.cfg_tools import to_cnf
from chomsky.logging import FileLogger, NullLogger
from chomsky.pretty_table import align, summary_table
from cnf_demo.grammar_util import add_grammar_arguments, parse_grammar

def main(argv=None):

    logger = logging.getLogger('main')
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.setLevel(logging.INFO)

    parser = argparse.ArgumentParser(
        description=
        'Convert one or more example context-free grammars to Chomsky '
        'normal form and print each grammar before and after.'
    )
    add_grammar_arguments(parser)
    parser.add_argument('--log-file', type=pathlib.Path,
        help='Write a structured event for every conversion step to this '
             'file.')
    parser.add_argument('--no-summary', action='store_true', default=False,
        help='Do not print the table of grammar sizes after each step.')
    args = parser.parse_args(argv)

    examples = parse_grammar(parser, args)

    with contextlib.ExitStack() as stack:
        if args.log_file is not None:
            fout = stack.enter_context(args.log_file.open('w'))
            events = FileLogger(fout, flush=True)
        else:
            events = NullLogger()
        for example in examples:
            grammar = example.grammar
            logger.info(f'converting grammar: {example.name}')
            events.log('grammar', { 'name' : example.name })
            print(f'Old start symbol is: {grammar.start}')
            print('Old Backus-Naur Form rules are:')
            print(grammar)
            print()
            summaries = to_cnf(grammar, events)
            print(f'New start symbol is: {grammar.start}')
            print('New Chomsky Normal Form rules are:')
            print(grammar)
            print()
            if not args.no_summary:
                align(summary_table(summaries))
                print()

if __name__ == '__main__':
    main()
