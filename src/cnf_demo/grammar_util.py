import attr

from .grammars.bnf import BNFGrammar
from .grammars.epsilon import EpsilonGrammar, OptionalGrammar
from .grammars.mixed import MixedGrammar
from .grammars.splitting import SplittingGrammar
from .grammars.terminal import TerminalGrammar
from .grammars.unit import UnitGrammar

EXAMPLE_GRAMMARS = {
    'mixed' : MixedGrammar,
    'terminal' : TerminalGrammar,
    'splitting' : SplittingGrammar,
    'unit' : UnitGrammar,
    'epsilon' : EpsilonGrammar,
    'optional' : OptionalGrammar,
    'bnf' : BNFGrammar
}

def add_grammar_arguments(parser):
    group = parser.add_argument_group('Grammar options')
    group.add_argument('--grammar',
        choices=list(EXAMPLE_GRAMMARS) + ['all'],
        default='all',
        help='Which example grammar to convert. Use all to convert every '
             'example in turn.')
    group.add_argument('--fresh-nonterminal-format', default='<Z{}>',
        help='Format string used to name the nonterminals introduced during '
             'the conversion. {} is replaced with an index.')

@attr.s
class NamedGrammar:
    name = attr.ib()
    grammar = attr.ib()

def parse_grammar(parser, args):
    fresh_format = args.fresh_nonterminal_format
    if '{}' not in fresh_format:
        parser.error('--fresh-nonterminal-format must contain {}')
    if args.grammar == 'all':
        names = list(EXAMPLE_GRAMMARS)
    else:
        names = [args.grammar]
    return [
        NamedGrammar(
            name,
            EXAMPLE_GRAMMARS[name](fresh_nonterminal_format=fresh_format))
        for name in names
    ]
