"""
Glob patterns: notations with wildcards and whole-pattern negation.

    'billing.account.*'   everything beneath billing.account
    'billing.*.id'        id of every member of billing
    'items[*].name'       name of every list item
    '!billing.account'    exclude billing.account
"""
import itertools

import pyparsing as pp

from . import grammar
from . import elements as el
from .errors import InvalidSyntaxError
from .paths import parse as parse_notation
from .results import Notation, assemble


class Glob:
    """
    A parsed glob. Positive globs drop redundant trailing wildcards
    (`a.*.*` selects the same as `a`). Negated globs keep them: `!a.*`
    empties `a` while `!a` removes it, so `reduced` and `empty_type`
    record the trailing wildcard for filtering.
    """
    def __init__(self, glob):
        if isinstance(glob, Glob):
            negated, notes = glob.is_negated, glob.notes
        elif isinstance(glob, Notation):
            negated, notes = False, glob.notes
        else:
            negated, notes = _parse(glob)
        self._init(negated, notes)

    @classmethod
    def from_notes(cls, notes, negated=False):
        self = cls.__new__(cls)
        self._init(negated, notes)
        return self

    def _init(self, negated, notes):
        notes = list(notes)
        if not negated:
            while len(notes) > 1 and notes[-1].is_wildcard():
                notes.pop()
        self.is_negated = bool(negated)
        self.notes = tuple(notes)
        self.reduced = self.notes
        self.empty_type = None
        if negated and len(notes) > 1 and notes[-1].is_wildcard():
            self.reduced = self.notes[:-1]
            self.empty_type = list if notes[-1].is_index() else dict

    @property
    def abs_glob(self):
        return assemble(self.notes)

    @property
    def glob(self):
        return ('!' if self.is_negated else '') + self.abs_glob

    @property
    def first(self):
        return self.notes[0].raw

    @property
    def last(self):
        return self.notes[-1].raw

    @property
    def parent(self):
        """
        Parent glob notation (without negation), or None
        >>> Glob('*.x.*').parent
        '*'
        """
        if len(self.notes) < 2:
            return None
        return assemble(self.notes[:-1])

    @property
    def wildcard_count(self):
        return sum(1 for n in self.reduced if n.is_wildcard())

    def has_wildcard(self):
        return any(n.is_wildcard() for n in self.reduced)

    def is_wildcard_only(self):
        """
        True for a bare positive `*` or `[*]`
        """
        return not self.is_negated and len(self.notes) == 1 and self.notes[0].is_wildcard()

    def is_negate_all(self):
        """
        True for `!*` or `![*]`
        """
        return self.is_negated and len(self.notes) == 1 and self.notes[0].is_wildcard()

    def is_reverse_of(self, other):
        return self.is_negated != other.is_negated and self.notes == other.notes

    def covers(self, other):
        return covers(self, other)

    def test(self, notation):
        """
        True if the concrete `notation` is matched by this glob
        >>> Glob('!prop.*.name').test('prop.account.name')
        True
        """
        return covers(self, Glob.from_notes(parse_notation(notation).notes))

    def __repr__(self):
        return f'{self.__class__.__name__}({self.glob!r})'

    def __str__(self):
        return self.glob

    def __hash__(self):
        return hash((self.is_negated, self.notes))

    def __eq__(self, other):
        if not isinstance(other, Glob):
            return NotImplemented
        return self.is_negated == other.is_negated and self.notes == other.notes


def _parse(glob):
    if not isinstance(glob, str):
        raise InvalidSyntaxError(glob, 'glob')
    try:
        results = grammar.glob.parse_string(glob, parse_all=True)
    except pp.ParseException as e:
        raise InvalidSyntaxError(glob, 'glob') from e
    return bool(results.get('negated')), results['notes'].as_list()


def create(glob):
    return glob if isinstance(glob, Glob) else Glob(glob)


def is_valid(glob):
    """
    >>> is_valid('!a.*[*]'), is_valid('a.!b')
    (True, False)
    """
    try:
        create(glob)
    except InvalidSyntaxError:
        return False
    return True


def covers(a, b):
    """
    True if glob `a` matches everything glob `b` matches. A negated `a`
    never covers a shorter `b`: `!x.*.*` only excludes grandchildren.
    >>> covers('*.y', 'x.y'), covers('x[*].y', 'x[*]')
    (True, False)
    """
    a, b = create(a), create(b)
    if a.is_negated and len(a.notes) > len(b.notes):
        return False
    return all(
        na.covers(nb)
        for na, nb in itertools.zip_longest(a.notes, b.notes[:len(a.notes)]))


def intersect(a, b):
    """
    Glob matching what both `a` and `b` match, negated if either is;
    None when they cannot overlap.
    >>> intersect('!x.*', '*.y')
    Glob('!x.y')
    >>> intersect('x.y', '*.b') is None
    True
    """
    a, b = create(a), create(b)
    notes = []
    for na, nb in itertools.zip_longest(a.notes, b.notes):
        n = el.intersect_note(na, nb)
        if n is None:
            return None
        notes.append(n)
    return Glob.from_notes(notes, a.is_negated or b.is_negated)
