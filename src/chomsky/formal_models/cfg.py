import itertools

from ..util import group_by, to_tuple

EPSILON_STR = 'epsilon'

class GrammarError(ValueError):
    pass

class Rule:

    def __init__(self, left, right):
        if isinstance(right, list):
            right = tuple(right)
        elif not isinstance(right, tuple):
            raise TypeError(
                'right side must be a list or tuple of symbols, not %r' % (right,))
        self.left = left
        self.right = right

    @property
    def is_epsilon(self):
        return len(self.right) == 0

    def replaced(self, **kwargs):
        _kwargs = self._get_kwargs()
        _kwargs.update(kwargs)
        return type(self)(**_kwargs)

    def _get_kwargs(self):
        return dict(left=self.left, right=self.right)

    def _key(self):
        return (self.left, self.right)

    def __hash__(self):
        return hash(self._key())

    def __eq__(self, other):
        return type(self) == type(other) and self._key() == other._key()

    def __str__(self):
        if self.right:
            right_str = ' '.join(map(str, self.right))
        else:
            right_str = EPSILON_STR
        return '%s -> %s' % (self.left, right_str)

    def __repr__(self):
        return 'Rule(%r, %r)' % (self.left, self.right)

class Grammar:
    """
    A context-free grammar that can be modified in place.

    Whether a symbol is a terminal or a nonterminal depends only on which of
    the grammar's two symbol sets it belongs to. Every mutating method checks
    its preconditions before changing anything and raises GrammarError if
    the change would break one of these invariants:

    * the terminals and nonterminals are disjoint,
    * every symbol used in a rule is a terminal or nonterminal,
    * no two rules are equal,
    * the start symbol is a nonterminal.
    """

    def __init__(self, start, terminals=(), nonterminals=(), rules=(),
            fresh_nonterminal_format='<Z{}>'):
        # Dicts are used as insertion-ordered sets.
        self._terminals = {}
        self._nonterminals = {}
        self._rules = {}
        self._start = None
        self.fresh_nonterminal_format = fresh_nonterminal_format
        self.add_nonterminal(start)
        self.set_start_symbol(start)
        self.add_terminals(terminals)
        self.add_nonterminals(nonterminals)
        self.add_rules(rules)

    @property
    def start(self):
        return self._start

    @property
    def terminals(self):
        return tuple(self._terminals)

    @property
    def nonterminals(self):
        return tuple(self._nonterminals)

    @property
    def symbols(self):
        return self.terminals + self.nonterminals

    @property
    def rules(self):
        return tuple(self._rules)

    def is_terminal(self, symbol):
        return symbol in self._terminals

    def is_nonterminal(self, symbol):
        return symbol in self._nonterminals

    def has_rule(self, rule):
        return rule in self._rules

    def add_terminal(self, terminal):
        if not isinstance(terminal, str):
            raise TypeError(
                'cannot add terminal %r: terminals must be strings' % (terminal,))
        if terminal in self._terminals:
            raise GrammarError(
                'cannot add terminal %r: already a terminal' % (terminal,))
        if terminal in self._nonterminals:
            raise GrammarError(
                'cannot add terminal %r: already a nonterminal' % (terminal,))
        self._terminals[terminal] = None

    def add_terminals(self, terminals):
        for terminal in to_tuple(terminals, 'terminals'):
            self.add_terminal(terminal)

    def delete_terminal(self, terminal):
        if terminal not in self._terminals:
            raise GrammarError(
                'cannot delete terminal %r: not a terminal' % (terminal,))
        if self.references_terminal(terminal):
            raise GrammarError(
                'cannot delete terminal %r: a rule references it' % (terminal,))
        del self._terminals[terminal]

    def delete_terminals(self, terminals):
        for terminal in to_tuple(terminals, 'terminals'):
            self.delete_terminal(terminal)

    def add_nonterminal(self, nonterminal):
        if nonterminal in self._terminals:
            raise GrammarError(
                'cannot add nonterminal %r: already a terminal' % (nonterminal,))
        if nonterminal in self._nonterminals:
            raise GrammarError(
                'cannot add nonterminal %r: already a nonterminal' % (nonterminal,))
        self._nonterminals[nonterminal] = None

    def add_nonterminals(self, nonterminals):
        for nonterminal in to_tuple(nonterminals, 'nonterminals'):
            self.add_nonterminal(nonterminal)

    def delete_nonterminal(self, nonterminal):
        if nonterminal not in self._nonterminals:
            raise GrammarError(
                'cannot delete nonterminal %r: not a nonterminal' % (nonterminal,))
        if nonterminal == self._start:
            raise GrammarError(
                'cannot delete nonterminal %r: it is the start symbol' % (nonterminal,))
        if self.references_nonterminal(nonterminal):
            raise GrammarError(
                'cannot delete nonterminal %r: a rule references it' % (nonterminal,))
        del self._nonterminals[nonterminal]

    def delete_nonterminals(self, nonterminals):
        for nonterminal in to_tuple(nonterminals, 'nonterminals'):
            self.delete_nonterminal(nonterminal)

    def add_rule(self, rule):
        if not isinstance(rule, Rule):
            raise TypeError('cannot add rule %r: not a Rule' % (rule,))
        if rule.left not in self._nonterminals:
            raise GrammarError(
                'cannot add rule %s: left symbol %r is not a nonterminal' % (rule, rule.left))
        for symbol in rule.right:
            if symbol not in self._terminals and symbol not in self._nonterminals:
                raise GrammarError(
                    'cannot add rule %s: right symbol %r is not a terminal or '
                    'nonterminal' % (rule, symbol))
        if rule in self._rules:
            raise GrammarError('cannot add rule %s: already exists' % (rule,))
        self._rules[rule] = None

    def add_rules(self, rules):
        for rule in to_tuple(rules, 'rules'):
            self.add_rule(rule)

    def delete_rule(self, rule):
        if rule not in self._rules:
            raise GrammarError('cannot delete rule %s: does not exist' % (rule,))
        del self._rules[rule]

    def delete_rules(self, rules):
        for rule in to_tuple(rules, 'rules'):
            self.delete_rule(rule)

    def set_start_symbol(self, start):
        if start not in self._nonterminals:
            raise GrammarError(
                'cannot set start symbol to %r: not a nonterminal' % (start,))
        self._start = start

    def new_nonterminal(self):
        """
        Return the first symbol generated by fresh_nonterminal_format that
        is not already used in the grammar. The symbol is not added.
        """
        for i in itertools.count():
            symbol = self.fresh_nonterminal_format.format(i)
            if symbol not in self._terminals and symbol not in self._nonterminals:
                return symbol

    def references_terminal(self, terminal):
        return any(terminal in rule.right for rule in self._rules)

    def references_nonterminal(self, nonterminal):
        return any(
            rule.left == nonterminal or nonterminal in rule.right
            for rule in self._rules
        )

    def rules_for(self, nonterminal):
        if nonterminal not in self._nonterminals:
            raise GrammarError(
                'cannot get rules for %r: not a nonterminal' % (nonterminal,))
        return [rule for rule in self._rules if rule.left == nonterminal]

    def rules_referencing(self, symbol):
        if symbol not in self._terminals and symbol not in self._nonterminals:
            raise GrammarError(
                'cannot get rules referencing %r: not a terminal or '
                'nonterminal' % (symbol,))
        return [rule for rule in self._rules if symbol in rule.right]

    def ruleless_nonterminals(self):
        lefts = { rule.left for rule in self._rules }
        return [A for A in self._nonterminals if A not in lefts]

    def reachable_nonterminals(self):
        rules_by_left = group_by(self._rules, key=lambda r: r.left)
        reachable = [self._start]
        visited = { self._start }
        index = 0
        while index < len(reachable):
            for rule in rules_by_left.get(reachable[index], ()):
                for symbol in rule.right:
                    if symbol in self._nonterminals and symbol not in visited:
                        visited.add(symbol)
                        reachable.append(symbol)
            index += 1
        return reachable

    def unreachable_nonterminals(self):
        reachable = set(self.reachable_nonterminals())
        return [A for A in self._nonterminals if A not in reachable]

    def referenced_terminals(self):
        return [a for a in self._terminals if self.references_terminal(a)]

    def unreferenced_terminals(self):
        return [a for a in self._terminals if not self.references_terminal(a)]

    def copy(self):
        start = self._start
        return Grammar(
            start,
            self.terminals,
            [A for A in self._nonterminals if A != start],
            self.rules,
            fresh_nonterminal_format=self.fresh_nonterminal_format
        )

    def format_symbol(self, symbol):
        if symbol in self._terminals:
            return "'%s'" % (symbol,)
        elif symbol in self._nonterminals:
            return str(symbol)
        else:
            raise GrammarError('symbol %r is not a terminal or nonterminal' % (symbol,))

    def format_rule(self, rule):
        if rule.right:
            right_str = ' '.join(map(self.format_symbol, rule.right))
        else:
            right_str = EPSILON_STR
        return '%s -> %s' % (self.format_symbol(rule.left), right_str)

    def __str__(self):
        return '\n'.join(map(self.format_rule, self._rules))

    def __repr__(self):
        return 'Grammar(%r, %r, %r, %r)' % (
            self._start, self.terminals, self.nonterminals, self.rules)
