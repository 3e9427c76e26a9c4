# coding: utf-8
"""
    regex_lite
    ~~~~~~~~~~

    A matcher for a small subset of regular expressions: literal characters,
    ``.`` matching any single character and ``*`` matching zero or more of
    the preceding one. A pattern always has to match the entire string.

    Matching never backtracks, it takes time proportional to the length of
    the pattern times the length of the string, no matter how many ``*`` a
    pattern contains. Invalid patterns, those where ``*`` has nothing to
    repeat, match nothing.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD, see LICENSE.rst
"""
from regex_lite.parser import parse
from regex_lite.matcher import matches, code_points


def is_match(pattern, string):
    """
    Returns `True` if `pattern` matches all of `string`.
    """
    return matches(parse(code_points(pattern)), string)
