from chomsky.formal_models.cfg import Grammar, Rule

class TerminalGrammar(Grammar):

    S = '<S>'
    A = '<A>'

    def __init__(self, **kwargs):
        S = self.S
        A = self.A
        super().__init__(S, ['a', 'b', 'c'], [A], [
            Rule(S, [A, 'c']),
            Rule(A, ['a']),
            Rule(A, ['b'])
        ], **kwargs)
