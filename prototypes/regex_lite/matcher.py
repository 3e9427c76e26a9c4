# coding: utf-8
"""
    regex_lite.matcher
    ~~~~~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD, see LICENSE.rst
"""
from regex_lite.ast import INVALID


def code_points(string):
    """
    Returns `string` as a sequence of code points, `bytes` are decoded as
    UTF-8.
    """
    if isinstance(string, bytes):
        return string.decode("utf-8")
    if isinstance(string, str):
        return string
    raise TypeError(
        "expected str or bytes, got %s" % string.__class__.__name__
    )


class MatcherBase(object):
    def __init__(self, pattern):
        self.pattern = pattern

    def matches(self, string):
        """
        Returns `True` if the pattern accounts for all of `string`.
        """
        raise NotImplementedError()

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.pattern)


class TableMatcher(MatcherBase):
    """
    Decides a match by filling in a table, where ``table[i][j]`` is `True` if
    the first `i` atoms match the first `j` characters. Only the latest row
    is kept, so a match takes ``O(len(pattern) * len(string))`` time and
    ``O(len(string))`` space regardless of how many atoms are repeatable.
    """
    def matches(self, string):
        if self.pattern is INVALID:
            return False
        string = code_points(string)
        if not string:
            return self.pattern.is_nullable
        row = [True] + [False] * len(string)
        for atom in self.pattern:
            row = self.next_row(atom, row, string)
            # no later row can recover from this
            if not any(row):
                return False
        return row[-1]

    def next_row(self, atom, previous, string):
        hits = atom.matches_all(string)
        if not atom.repeatable:
            return [False] + [
                before and hit for before, hit in zip(previous, hits)
            ]
        row = [previous[0]]
        for before, hit in zip(previous[1:], hits):
            row.append(before or (hit and row[-1]))
        return row


def matches(pattern, string):
    """
    Returns `True` if `pattern` matches all of `string`, an invalid pattern
    matches nothing.
    """
    return TableMatcher(pattern).matches(string)
