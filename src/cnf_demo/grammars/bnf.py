from chomsky.formal_models.cfg import Grammar, Rule

class BNFGrammar(Grammar):
    """
    A rough approximation of the syntax of Backus-Naur form, limited to the
    letters a-d.
    """

    S = '<S>'
    rule = '<rule>'
    expression = '<expression>'
    list_ = '<list>'
    term = '<term>'
    ruleref = '<ruleref>'
    rulename = '<rulename>'
    alpha = '<alpha>'
    literal = '<literal>'
    text = '<text>'
    whitespace = '<whitespace>'

    LETTERS = 'abcd'
    TERMINALS = ('\n', ':', '=', '|', '<', '>') + tuple(LETTERS) + ('"', ' ')

    def __init__(self, **kwargs):
        S = self.S
        rule = self.rule
        expression = self.expression
        list_ = self.list_
        term = self.term
        ruleref = self.ruleref
        rulename = self.rulename
        alpha = self.alpha
        literal = self.literal
        text = self.text
        whitespace = self.whitespace
        rules = [
            Rule(S, []),
            Rule(S, [whitespace, rule, S]),
            Rule(rule, ['\n']),
            Rule(rule, [
                ruleref, whitespace, ':', ':', '=', whitespace, list_,
                expression, '\n'
            ]),
            Rule(expression, []),
            Rule(expression, ['|', whitespace, list_, expression]),
            Rule(list_, []),
            Rule(list_, [term, whitespace, list_]),
            Rule(term, [ruleref]),
            Rule(term, [literal]),
            Rule(ruleref, ['<', rulename, '>']),
            Rule(rulename, []),
            Rule(rulename, [alpha, rulename])
        ]
        for letter in self.LETTERS:
            rules.append(Rule(alpha, [letter]))
        rules.extend([
            Rule(literal, ['"', text, '"']),
            Rule(text, []),
            Rule(text, [alpha, text]),
            Rule(whitespace, []),
            Rule(whitespace, [' ', whitespace])
        ])
        super().__init__(
            S,
            self.TERMINALS,
            [
                rule, expression, list_, term, ruleref, rulename, alpha,
                literal, text, whitespace
            ],
            rules,
            **kwargs)
