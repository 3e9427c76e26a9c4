# coding: utf-8
"""
    regex_lite.fa
    ~~~~~~~~~~~~~

    Matching by simulating the automaton a pattern describes. A state is the
    number of atoms consumed so far, a repeatable atom is an epsilon move to
    the next state and a loop on itself. All reachable states are tracked at
    once, so no state is explored twice for the same character.

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
from regex_lite.ast import INVALID
from regex_lite.matcher import MatcherBase, code_points


class StateSetMatcher(MatcherBase):
    """
    Transitions are cached in `movements` for the duration of a single call
    to :meth:`matches`, which starts with an empty cache.
    """
    def __init__(self, pattern):
        MatcherBase.__init__(self, pattern)
        self.movements = {}

    @property
    def final(self):
        return len(self.pattern)

    def contains_final(self, states):
        return self.final in states

    def epsilon_closure(self, states):
        closure = set()
        for state in states:
            while state not in closure:
                closure.add(state)
                if state == self.final or not self.pattern[state].repeatable:
                    break
                state += 1
        return frozenset(closure)

    def transition(self, states, character):
        key = states, character
        if key not in self.movements:
            moved = []
            for state in states:
                if state == self.final:
                    continue
                atom = self.pattern[state]
                if atom.matches(character):
                    moved.append(state if atom.repeatable else state + 1)
            self.movements[key] = self.epsilon_closure(moved)
        return self.movements[key]

    def matches(self, string):
        if self.pattern is INVALID:
            return False
        self.movements = {}
        states = self.epsilon_closure([0])
        for character in code_points(string):
            states = self.transition(states, character)
            if not states:
                return False
        return self.contains_final(states)
