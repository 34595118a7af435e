"""
Path engine: parse, validate and derive notation strings.
"""
import itertools

import pyparsing as pp

from . import elements as el
from . import grammar
from .errors import InvalidSyntaxError
from .results import Notation, assemble
from .utypes import STOP


def parse(notation):
    """
    Parse a notation string into a Notation
    >>> parse('car.colors[0]')
    Notation([car, colors, [0]])
    """
    if isinstance(notation, Notation):
        return notation
    if not isinstance(notation, str):
        raise InvalidSyntaxError(notation)
    try:
        results = grammar.notation.parse_string(notation, parse_all=True)
    except pp.ParseException as e:
        raise InvalidSyntaxError(notation) from e
    return Notation(results.as_list())


def is_valid(notation):
    """
    True if notation is a valid, wildcard-free notation string
    >>> is_valid('a.b["c d"][2]')
    True
    >>> is_valid('a.*')
    False
    """
    try:
        parse(notation)
    except InvalidSyntaxError:
        return False
    return True


def split(notation):
    """
    Split into raw note strings
    >>> split('a.b[0]["x"]')
    ['a', 'b', '[0]', '["x"]']
    """
    return [n.raw for n in parse(notation)]


def _notes(item):
    if isinstance(item, el.Note):
        return (item,)
    if isinstance(item, Notation):
        return item.notes
    return parse(item).notes


def join(notes):
    """
    Join notes (raw strings, notations or Note objects) into one notation
    >>> join(['a', '[0]', 'b.c'])
    'a[0].b.c'
    """
    return assemble(itertools.chain.from_iterable(_notes(n) for n in notes if n is not None))


def count_notes(notation):
    return len(parse(notation))


def first(notation):
    """
    >>> first('[0].a.b')
    '[0]'
    """
    return parse(notation).first.raw


def last(notation):
    """
    >>> last('a.b[1]')
    '[1]'
    """
    return parse(notation).last.raw


def parent(notation):
    """
    Parent notation string, or None for a single-note notation
    >>> parent('a.b[1]')
    'a.b'
    >>> parent('a') is None
    True
    """
    p = parse(notation).parent()
    return None if p is None else p.assemble()


def each_note(notation, visitor):
    """
    Call visitor(level_notation, note, index, notes) for each successively
    longer prefix; a visitor returning False stops the iteration.
    """
    ops = parse(notation)
    notes = [n.raw for n in ops]
    for idx, level in enumerate(ops.prefixes()):
        if visitor(level.assemble(), notes[idx], idx, notes) is STOP:
            return
