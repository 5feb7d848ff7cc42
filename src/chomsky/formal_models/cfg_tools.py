import itertools

import attr
import more_itertools

from ..logging import NullLogger
from .cfg import Rule

def eliminate_terminals(grammar):
    """
    Replace every terminal that appears in a right side of length 2 or more
    with a new nonterminal that derives only that terminal.
    """

    def is_mixed(rule):
        return len(rule.right) >= 2 and any(map(grammar.is_terminal, rule.right))

    def eliminate(rule):
        terminal = next(X for X in rule.right if grammar.is_terminal(X))
        Z = _add_new_nonterminal(grammar)
        grammar.add_rule(Rule(Z, (terminal,)))
        for old_rule in grammar.rules:
            if len(old_rule.right) >= 2 and terminal in old_rule.right:
                new_right = tuple(Z if X == terminal else X for X in old_rule.right)
                grammar.add_rule(old_rule.replaced(right=new_right))
                grammar.delete_rule(old_rule)

    _eliminate_rules_of_type(grammar, is_mixed, eliminate)

def eliminate_multiples(grammar):
    """
    Split every rule with more than two symbols on the right side into a
    chain of rules with two symbols each.
    """

    def is_long(rule):
        return len(rule.right) > 2

    def eliminate(rule):
        grammar.delete_rule(rule)
        Z = _add_new_nonterminal(grammar)
        grammar.add_rule(Rule(rule.left, (rule.right[0], Z)))
        # The tail may still be too long. It is split on a later scan.
        grammar.add_rule(Rule(Z, rule.right[1:]))

    _eliminate_rules_of_type(grammar, is_long, eliminate)

def introduce_s0(grammar):
    """
    Add a new start symbol whose only rule derives the old start symbol.
    """
    Z = _add_new_nonterminal(grammar)
    grammar.add_rule(Rule(Z, (grammar.start,)))
    grammar.set_start_symbol(Z)

def eliminate_epsilons(grammar):
    """
    Remove every rule A -> epsilon where A is not the start symbol, adding
    the rules needed to keep the language the same.

    For each such A, every rule gets a copy for each way of dropping some of
    the occurrences of A from its right side. This is exponential in the
    number of occurrences of A in a single rule.
    """
    # Nonterminals whose epsilon rule has already been removed. Their
    # nullability has already been propagated, so their epsilon rules are
    # not added back.
    eliminated = set()

    def is_epsilon(rule):
        return rule.is_epsilon and rule.left != grammar.start

    def eliminate(rule):
        A = rule.left
        eliminated.add(A)
        for other_rule in grammar.rules:
            for right in _epsilon_replacements(other_rule.right, A):
                if right == (other_rule.left,):
                    continue
                if not right and other_rule.left in eliminated:
                    continue
                new_rule = other_rule.replaced(right=right)
                if not grammar.has_rule(new_rule):
                    grammar.add_rule(new_rule)
        grammar.delete_rule(rule)

    _eliminate_rules_of_type(grammar, is_epsilon, eliminate)

def eliminate_units(grammar):
    """
    Remove every rule of the form A -> B where B is a nonterminal, giving A
    a copy of each of B's rules.
    """
    # Unit rules that have already been removed are never added back, or
    # else cycles like A -> B, B -> C, C -> A would never finish.
    eliminated = set()

    def is_unit(rule):
        return len(rule.right) == 1 and grammar.is_nonterminal(rule.right[0])

    def eliminate(rule):
        A = rule.left
        B, = rule.right
        eliminated.add(rule)
        for B_rule in grammar.rules_for(B):
            if B_rule.right == (A,):
                continue
            new_rule = Rule(A, B_rule.right)
            if new_rule not in eliminated and not grammar.has_rule(new_rule):
                grammar.add_rule(new_rule)
        grammar.delete_rule(rule)

    _eliminate_rules_of_type(grammar, is_unit, eliminate)

def eliminate_uselesses(grammar):
    """
    Remove nonterminals that have no rules, nonterminals that cannot be
    reached from the start symbol, and terminals that no rule uses.
    """
    # Deleting a nonterminal's rules can leave other nonterminals without
    # rules, so repeat until there are none. The start symbol always stays.
    while True:
        ruleless = [
            A for A in grammar.ruleless_nonterminals()
            if A != grammar.start
        ]
        if not ruleless:
            break
        for A in ruleless:
            grammar.delete_rules(grammar.rules_referencing(A))
            grammar.delete_nonterminal(A)
    unreachable = grammar.unreachable_nonterminals()
    for A in unreachable:
        grammar.delete_rules(grammar.rules_for(A))
    grammar.delete_nonterminals(unreachable)
    grammar.delete_terminals(grammar.unreferenced_terminals())

CNF_PASSES = (
    ('eliminate_terminals', eliminate_terminals),
    ('eliminate_multiples', eliminate_multiples),
    ('introduce_s0', introduce_s0),
    ('eliminate_epsilons', eliminate_epsilons),
    ('eliminate_units', eliminate_units),
    ('eliminate_uselesses', eliminate_uselesses)
)

@attr.s
class PassSummary:
    name = attr.ib()
    rules_before = attr.ib()
    rules_after = attr.ib()
    nonterminals_before = attr.ib()
    nonterminals_after = attr.ib()
    terminals_before = attr.ib()
    terminals_after = attr.ib()

def to_cnf(grammar, events=None):
    """
    Convert a grammar to Chomsky normal form in place.

    Parameters
    ----------
    grammar : chomsky.formal_models.cfg.Grammar
        The grammar to convert. It is modified in place.
    events : chomsky.logging.Logger, optional
        Receives one ``pass`` event per step and a final ``cnf`` event.

    Returns
    -------
    list of PassSummary
        The size of the grammar before and after each step, in order.
    """
    if events is None:
        events = NullLogger()
    summaries = []
    # Each step relies on what the previous ones did, so the order is fixed.
    for name, transform in CNF_PASSES:
        rules_before = len(grammar.rules)
        nonterminals_before = len(grammar.nonterminals)
        terminals_before = len(grammar.terminals)
        transform(grammar)
        summary = PassSummary(
            name=name,
            rules_before=rules_before,
            rules_after=len(grammar.rules),
            nonterminals_before=nonterminals_before,
            nonterminals_after=len(grammar.nonterminals),
            terminals_before=terminals_before,
            terminals_after=len(grammar.terminals)
        )
        events.log('pass', attr.asdict(summary))
        summaries.append(summary)
    events.log('cnf', {
        'start' : str(grammar.start),
        'rules' : len(grammar.rules),
        'is_cnf' : is_cnf(grammar)
    })
    return summaries

def is_cnf(grammar):
    return all(_is_cnf_rule(grammar, rule) for rule in grammar.rules)

def _is_cnf_rule(grammar, rule):
    n = len(rule.right)
    if n == 0:
        return rule.left == grammar.start
    elif n == 1:
        return grammar.is_terminal(rule.right[0])
    elif n == 2:
        return all(map(grammar.is_nonterminal, rule.right))
    else:
        return False

def _eliminate_rules_of_type(grammar, predicate, eliminate):
    # Find the first offending rule, fix it, and start over from the top,
    # since fixing it changes the rule list.
    while True:
        for rule in grammar.rules:
            if predicate(rule):
                break
        else:
            break
        eliminate(rule)

def _add_new_nonterminal(grammar):
    Z = grammar.new_nonterminal()
    grammar.add_nonterminal(Z)
    return Z

def _epsilon_replacements(sequence, symbol):
    # Every way of dropping one or more occurrences of symbol. Keeping all of
    # them would only reproduce the original rule.
    indexes = [i for i, X in enumerate(sequence) if X == symbol]
    for dropped in itertools.islice(more_itertools.powerset(indexes), 1, None):
        dropped = set(dropped)
        yield tuple(X for i, X in enumerate(sequence) if i not in dropped)
