# coding: utf-8
"""
    regex_lite.parser
    ~~~~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""
import logging

from regex_lite.ast import Wildcard, Literal, Pattern, INVALID


logger = logging.getLogger(__name__)


class RegexException(Exception):
    pass


class ParserError(RegexException):
    def __init__(self, reason, annotation=None):
        RegexException.__init__(self, reason, annotation)
        self.reason = reason
        self.annotation = annotation

    def __str__(self):
        if self.annotation is None:
            return self.reason
        return "%s\n%s" % (self.reason, self.annotation)


class Language(object):
    def __init__(self, any=".", zero_or_more="*"):
        for name, character in [("any", any), ("zero_or_more", zero_or_more)]:
            if len(character) != 1:
                raise ValueError(
                    "%s must be a single character, got %r" % (name, character)
                )
        if any == zero_or_more:
            raise ValueError(
                "any and zero_or_more must differ, both are %r" % any
            )
        self.any = any
        self.zero_or_more = zero_or_more

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, self.__class__):
            return (
                self.any == other.any and
                self.zero_or_more == other.zero_or_more
            )
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.any) ^ hash(self.zero_or_more)

    @property
    def special_characters(self):
        return frozenset([self.any, self.zero_or_more])

    def to_string(self, pattern):
        """
        Renders a parsed `pattern` back to pattern text.
        """
        if pattern is INVALID:
            raise ValueError("an invalid pattern cannot be rendered")
        result = []
        for atom in pattern:
            if isinstance(atom, Wildcard):
                result.append(self.any)
            elif isinstance(atom, Literal):
                # there is no escape, so these cannot be written as literals
                if atom.raw in self.special_characters:
                    raise ValueError(
                        "%r cannot be rendered as a literal" % atom.raw
                    )
                result.append(atom.raw)
            else:
                raise NotImplementedError(atom)
            if atom.repeatable:
                result.append(self.zero_or_more)
        return "".join(result)

    def __repr__(self):
        return "%s(any=%r, zero_or_more=%r)" % (
            self.__class__.__name__,
            self.any,
            self.zero_or_more
        )


DEFAULT_LANGUAGE = Language()


class Input(object):
    def __init__(self, string):
        self.string = string
        self.characters = iter(self.string)
        self.position = -1

    def __iter__(self):
        return self

    def __next__(self):
        result = next(self.characters)
        self.position += 1
        return result

    def annotated(self, position=None):
        position = self.position if position is None else position
        annotation = [" "] * (position + 1)
        annotation[position] = "^"
        return "%s\n%s" % (self.string, "".join(annotation))


class Parser(object):
    """
    Turns pattern text into a :class:`~regex_lite.ast.Pattern`.

    :meth:`parse` raises :exc:`ParserError` on invalid patterns, use the
    module level :func:`parse` to get :data:`~regex_lite.ast.INVALID`
    instead.
    """
    def __init__(self, language=DEFAULT_LANGUAGE):
        self.language = language

    def parse(self, string):
        input = Input(string)
        atoms = []
        for character in input:
            if character == self.language.zero_or_more:
                atoms.append(self.parse_repetition(input, atoms))
            elif character == self.language.any:
                atoms.append(Wildcard())
            else:
                atoms.append(Literal(character))
        return Pattern(atoms)

    def parse_repetition(self, input, atoms):
        character = self.language.zero_or_more
        if not atoms:
            raise ParserError(
                "%s is not preceded by a repeatable expression" % character,
                input.annotated()
            )
        # the marker applies to the latest atom, which may carry at most one
        if atoms[-1].repeatable:
            raise ParserError(
                "%s is preceded by another %s" % (character, character),
                input.annotated()
            )
        return atoms.pop().repeated()


def parse(string, language=DEFAULT_LANGUAGE):
    """
    Returns a :class:`~regex_lite.ast.Pattern` or
    :data:`~regex_lite.ast.INVALID` if `string` is not a valid pattern.
    """
    try:
        return Parser(language).parse(string)
    except ParserError as error:
        logger.debug("rejected pattern %r: %s", string, error.reason)
        return INVALID
