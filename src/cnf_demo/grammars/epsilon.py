from chomsky.formal_models.cfg import Grammar, Rule

class EpsilonGrammar(Grammar):

    S = '<S>'
    A = '<A>'

    def __init__(self, **kwargs):
        S = self.S
        A = self.A
        super().__init__(S, ['a'], [A], [
            Rule(S, [A, A]),
            Rule(A, []),
            Rule(A, ['a'])
        ], **kwargs)

class OptionalGrammar(Grammar):
    """<A> only ever derives the empty string."""

    S = '<S>'
    A = '<A>'
    B = '<B>'

    def __init__(self, **kwargs):
        S = self.S
        A = self.A
        B = self.B
        super().__init__(S, ['a', 'b', 'c'], [A, B], [
            Rule(S, [A, 'b', A]),
            Rule(S, [B]),
            Rule(B, ['b']),
            Rule(B, ['c']),
            Rule(A, [])
        ], **kwargs)
