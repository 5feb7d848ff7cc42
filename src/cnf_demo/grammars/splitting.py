from chomsky.formal_models.cfg import Grammar, Rule

class SplittingGrammar(Grammar):

    S = '<S>'
    A = '<A>'
    B = '<B>'
    C = '<C>'

    def __init__(self, **kwargs):
        S = self.S
        A = self.A
        B = self.B
        C = self.C
        super().__init__(S, ['a', 'b', 'c'], [A, B, C], [
            Rule(S, [A, B, C]),
            Rule(A, ['a']),
            Rule(B, ['b']),
            Rule(C, ['c'])
        ], **kwargs)
