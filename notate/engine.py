"""
Deep traversal over trees.
"""
from . import elements as el
from . import utils
from .results import Notation, assemble


def walk(node, reverse=False, _prefix=()):
    """
    Yield (notes, value) for every leaf under node. Leaves are scalars and
    empty containers. Mappings go in insertion order; lists in index order,
    or highest index first when `reverse` is set so callers can remove list
    items while walking.
    """
    keyed = utils.is_dict_like(node)
    for k, v in utils.own_items(node, reverse=reverse):
        # map keys are always addressed as strings
        notes = _prefix + (el.concrete(str(k) if keyed else k),)
        if utils.is_collection(v) and len(v):
            yield from walk(v, reverse, notes)
        else:
            yield notes, v


def each(node, visitor, reverse=False):
    """
    Call visitor(notation, note, value, node) for each leaf; a visitor
    returning False halts the whole traversal.
    """
    for notes, value in walk(node, reverse):
        if visitor(assemble(notes), notes[-1].raw, value, node) is False:
            return False
    return True


def notations(node, reverse=False):
    """
    Yield a Notation for each leaf under node.
    """
    return (Notation(notes) for notes, _ in walk(node, reverse))
