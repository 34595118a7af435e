"""
Filter pipeline: project a tree through a list of globs.
"""
import logging

from . import engine
from . import globs as gl
from . import utils
from .errors import IntegrityError
from .glob import Glob, covers
from .results import Notation, assemble
from .utypes import INSERT, OVERWRITE

logger = logging.getLogger(__name__)


def _integrity_error(g, notation, expected, actual):
    return IntegrityError(
        f"Integrity failed for glob '{g.glob}'. Cannot set empty {expected.__name__} "
        f"for '{notation}' which has a type of '{actual}'.")


def _position(g):
    """
    Position key of a glob; wildcards and higher list indices sort last.
    """
    return tuple(
        (n.is_wildcard(), n.is_index(),
         n.value if n.is_index() and not n.is_wildcard() else -1, str(n.value))
        for n in g.reduced)


def _apply_exact(source, filtered, g):
    """
    Apply a wildcard-free glob directly.
    """
    notation = assemble(g.reduced)
    if not g.is_negated:
        result = source.inspect_get(notation)
        if result.has:
            filtered.set(notation, utils.clone_deep(result.value), OVERWRITE)
        return

    result = filtered.inspect_remove(notation)
    if g.empty_type is None:
        return
    # `!a.b.*` empties a.b rather than removing it
    expected = utils.type_of(g.empty_type())
    is_set = result.value is not None
    if (is_set and result.type != expected) or (not is_set and filtered.strict):
        raise _integrity_error(g, notation, g.empty_type, result.type or 'none')
    if not is_set:
        return
    spliced = result.parent_is_array and not filtered.options['preserve_indices']
    filtered.set(notation, g.empty_type(), INSERT if spliced else OVERWRITE)


def _apply_walk(source, filtered, g):
    """
    Apply a wildcard glob to every matching leaf of source, highest list
    index first so removals don't shift pending indices.
    """
    scope = Glob.from_notes(g.reduced)
    expected = utils.type_of(g.empty_type()) if g.empty_type else None
    for notes, value in engine.walk(source.value, reverse=True):
        leaf = Glob.from_notes(notes)
        if not covers(scope, leaf):
            continue
        if (filtered.strict and expected and len(notes) == len(g.reduced)
                and utils.type_of(value) != expected):
            raise _integrity_error(g, assemble(notes), g.empty_type, utils.type_of(value))
        if not g.is_negated:
            filtered.set(Notation(notes), utils.clone_deep(value), OVERWRITE)
            continue
        for prefix in Notation(notes).prefixes():
            if covers(g, Glob.from_notes(prefix.notes)):
                # removing an ancestor removes the rest of this leaf's levels
                filtered.inspect_remove(prefix)
                break


def filter_tree(tree, globs):
    """
    Return a new tree holding what `globs` select from tree's source.
    The source is left untouched.
    """
    normalized = gl.normalize_globs(globs)
    empty = [] if tree.is_array else {}
    if gl.selects_nothing(normalized):
        return empty

    cloned = utils.clone_deep(tree.value)
    if len(normalized) == 1 and normalized[0].is_wildcard_only():
        return cloned

    if normalized[0].is_wildcard_only():
        filtered = tree.__class__(cloned, tree.options)
        normalized = normalized[1:]
    else:
        filtered = tree.__class__(empty, tree.options)

    # negations run highest position first so a splice never shifts a pending index
    positives = [g for g in normalized if not g.is_negated]
    negated = sorted((g for g in normalized if g.is_negated), key=_position, reverse=True)
    for g in positives + negated:
        logger.debug('filter: applying %s', g.glob)
        if g.has_wildcard():
            _apply_walk(tree, filtered, g)
        else:
            _apply_exact(tree, filtered, g)
    return filtered.value
