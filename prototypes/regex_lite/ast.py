# coding: utf-8
"""
    regex_lite.ast
    ~~~~~~~~~~~~~~

    :copyright: 2012 by Daniel Neuhäuser
    :license: BSD
"""


class Atom(object):
    """
    A single unit of a pattern. Atoms are immutable, `repeatable` is set if
    the atom was followed by the repeat marker.
    """
    __slots__ = ("repeatable",)

    def __init__(self, repeatable=False):
        object.__setattr__(self, "repeatable", repeatable)

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def matches(self, character):
        raise NotImplementedError()

    def matches_all(self, string):
        """
        Returns a list with the result of :meth:`matches` for each character
        in `string`.
        """
        return [self.matches(character) for character in string]

    def repeated(self):
        """
        Returns a copy of this atom that may be repeated.
        """
        raise NotImplementedError()

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.repeatable == other.repeatable
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.__class__, self.repeatable))

    def __repr__(self):
        return "%s(repeatable=%r)" % (self.__class__.__name__, self.repeatable)


class Wildcard(Atom):
    __slots__ = ()

    def matches(self, character):
        return True

    def matches_all(self, string):
        return [True] * len(string)

    def repeated(self):
        return Wildcard(repeatable=True)


class Literal(Atom):
    __slots__ = ("raw",)

    def __init__(self, raw, repeatable=False):
        if len(raw) != 1:
            raise ValueError("expected a single code point, got %r" % raw)
        object.__setattr__(self, "raw", raw)
        Atom.__init__(self, repeatable)

    def matches(self, character):
        return self.raw == character

    def matches_all(self, string):
        raw = self.raw
        return [character == raw for character in string]

    def repeated(self):
        return Literal(self.raw, repeatable=True)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (
                self.raw == other.raw and
                self.repeatable == other.repeatable
            )
        return NotImplemented

    def __hash__(self):
        return hash(self.raw) ^ Atom.__hash__(self)

    def __repr__(self):
        return "%s(%r, repeatable=%r)" % (
            self.__class__.__name__,
            self.raw,
            self.repeatable
        )


class Pattern(object):
    """
    An ordered, immutable sequence of :class:`Atom` objects.
    """
    __slots__ = ("atoms",)

    def __init__(self, atoms=()):
        object.__setattr__(self, "atoms", tuple(atoms))

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)

    def __len__(self):
        return len(self.atoms)

    def __iter__(self):
        return iter(self.atoms)

    def __getitem__(self, index):
        return self.atoms[index]

    @property
    def is_nullable(self):
        """
        `True` if the pattern matches the empty string.
        """
        return all(atom.repeatable for atom in self.atoms)

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.atoms == other.atoms
        return NotImplemented

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.atoms)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, list(self.atoms))


class _Invalid(object):
    """
    Result of parsing a syntactically invalid pattern. There is only one
    instance, :data:`INVALID`.
    """
    __slots__ = ()

    def __repr__(self):
        return "INVALID"


INVALID = _Invalid()
