from chomsky.formal_models.cfg import Grammar, Rule

class MixedGrammar(Grammar):
    """
    A grammar that needs every conversion step: terminals mixed with
    nonterminals, long rules, unit rules and epsilon rules.
    """

    S = '<S>'
    A = '<A>'
    B = '<B>'

    zero = '0'
    one = '1'

    def __init__(self, **kwargs):
        S = self.S
        A = self.A
        B = self.B
        zero = self.zero
        one = self.one
        super().__init__(S, [zero, one], [A, B], [
            Rule(S, [A, B, B, A]),
            Rule(S, [B]),
            Rule(A, []),
            Rule(A, [zero, A, zero]),
            Rule(A, [one]),
            Rule(B, [B, S]),
            Rule(B, [A, A, A]),
            Rule(B, [zero, zero])
        ], **kwargs)
