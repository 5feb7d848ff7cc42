import unittest

from chomsky.formal_models.cfg import Grammar, GrammarError, Rule

S = '<S>'
A = '<A>'
B = '<B>'
C = '<C>'
D = '<D>'

class TestAnalysisQueries(unittest.TestCase):

    def construct_grammar(self):
        # <C> has no rules, <D> cannot be reached and 'e' is never used.
        return Grammar(S, ['a', 'b', 'd', 'e'], [A, B, C, D], [
            Rule(S, [A, B]),
            Rule(S, ['a']),
            Rule(A, [B, 'a']),
            Rule(A, [C]),
            Rule(B, ['b']),
            Rule(D, ['d', S])
        ])

    def test_references(self):
        G = self.construct_grammar()
        self.assertTrue(G.references_terminal('a'))
        self.assertTrue(G.references_terminal('d'))
        self.assertFalse(G.references_terminal('e'))
        self.assertTrue(G.references_nonterminal(S))
        self.assertTrue(G.references_nonterminal(C))
        # Only used as a left side.
        self.assertTrue(G.references_nonterminal(D))
        G.delete_rule(Rule(D, ['d', S]))
        self.assertFalse(G.references_nonterminal(D))

    def test_rules_for(self):
        G = self.construct_grammar()
        self.assertEqual(G.rules_for(S), [Rule(S, [A, B]), Rule(S, ['a'])])
        self.assertEqual(G.rules_for(C), [])
        with self.assertRaises(GrammarError):
            G.rules_for('a')
        with self.assertRaises(GrammarError):
            G.rules_for('<X>')

    def test_rules_referencing(self):
        G = self.construct_grammar()
        self.assertEqual(
            G.rules_referencing('a'),
            [Rule(S, ['a']), Rule(A, [B, 'a'])])
        self.assertEqual(
            G.rules_referencing(B),
            [Rule(S, [A, B]), Rule(A, [B, 'a'])])
        self.assertEqual(G.rules_referencing(D), [])
        with self.assertRaises(GrammarError):
            G.rules_referencing('z')

    def test_ruleless_nonterminals(self):
        G = self.construct_grammar()
        self.assertEqual(G.ruleless_nonterminals(), [C])

    def test_reachable_nonterminals(self):
        G = self.construct_grammar()
        self.assertEqual(G.reachable_nonterminals(), [S, A, B, C])
        self.assertEqual(G.unreachable_nonterminals(), [D])

    def test_reachability_follows_cycles(self):
        G = Grammar(S, [], [A, B], [
            Rule(S, [A]),
            Rule(A, [B, S]),
            Rule(B, [A])
        ])
        self.assertEqual(G.reachable_nonterminals(), [S, A, B])
        self.assertEqual(G.unreachable_nonterminals(), [])

    def test_start_symbol_change_changes_reachability(self):
        G = self.construct_grammar()
        G.set_start_symbol(B)
        self.assertEqual(G.reachable_nonterminals(), [B])
        self.assertEqual(G.unreachable_nonterminals(), [S, A, C, D])

    def test_terminals(self):
        G = self.construct_grammar()
        self.assertEqual(G.referenced_terminals(), ['a', 'b', 'd'])
        self.assertEqual(G.unreferenced_terminals(), ['e'])

if __name__ == '__main__':
    unittest.main()
