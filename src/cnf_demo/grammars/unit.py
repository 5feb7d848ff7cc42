from chomsky.formal_models.cfg import Grammar, Rule

class UnitGrammar(Grammar):

    S = '<S>'
    A = '<A>'

    def __init__(self, **kwargs):
        S = self.S
        A = self.A
        super().__init__(S, ['a'], [A], [
            Rule(S, [A]),
            Rule(A, ['a'])
        ], **kwargs)
