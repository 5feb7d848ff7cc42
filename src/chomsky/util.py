import collections

def group_by(iterable, key):
    result = collections.defaultdict(list)
    for value in iterable:
        result[key(value)].append(value)
    return result

def to_tuple(values, what):
    # A str is iterable, but it is never a valid collection of symbols or
    # rules here.
    if isinstance(values, str):
        raise TypeError(f'{what} must be a collection, not the string {values!r}')
    try:
        return tuple(values)
    except TypeError:
        raise TypeError(f'{what} must be a collection, not {values!r}')
