def align(table, min_col_width=4, print=print):
    """Print a table of values with left-aligned, space-separated columns."""
    table = [
        [str(item) for item in row]
        for row in table
    ]
    if not table:
        return
    num_cols = max(map(len, table))
    for row in table:
        while len(row) < num_cols:
            row.append('')
    widths = [
        max(max(len(row[j]) for row in table), min_col_width)
        for j in range(num_cols)
    ]
    for row in table:
        print(' '.join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())

def summary_table(summaries):
    header = ['pass', 'rules', 'nonterminals', 'terminals']
    rows = [header]
    for s in summaries:
        rows.append([
            s.name,
            _change(s.rules_before, s.rules_after),
            _change(s.nonterminals_before, s.nonterminals_after),
            _change(s.terminals_before, s.terminals_after)
        ])
    return rows

def _change(before, after):
    return '{} -> {}'.format(before, after)
