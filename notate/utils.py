"""
Shared type-checking, cloning and quoting helpers.
"""
import collections.abc
import copy
import datetime
import decimal
import re


_IDENT_RE = re.compile(r'[A-Za-z_$][A-Za-z0-9_$]*\Z')

# Leaf types copied by clone_deep(); anything else is shared by reference.
_CLONEABLE = (
    datetime.datetime, datetime.date, datetime.time, datetime.timedelta,
    decimal.Decimal, bytearray, set, frozenset, tuple,
)


def is_dict_like(node):
    """
    True if node is a mutable mapping.
    """
    return isinstance(node, collections.abc.MutableMapping)


def is_list_like(node):
    """
    True if node is a mutable sequence (not str/bytes).
    """
    return (
        isinstance(node, collections.abc.MutableSequence)
        and not isinstance(node, (str, bytes, bytearray))
    )


def is_collection(node):
    """
    True if node is a container notate can address into.
    """
    return is_dict_like(node) or is_list_like(node)


def type_of(value):
    """
    Coarse type name of a tree value
    >>> type_of({}), type_of([]), type_of(None), type_of(1.5)
    ('dict', 'list', 'none', 'float')
    """
    if is_dict_like(value):
        return 'dict'
    if is_list_like(value):
        return 'list'
    if value is None:
        return 'none'
    return type(value).__name__


def own_items(node, reverse=False):
    """
    Yield (key, value) for the node's own items; list indices are ints.
    Items are snapshotted so callers may mutate the node while iterating.
    """
    if is_dict_like(node):
        items = list(node.items())
    else:
        items = list(enumerate(node))
    return reversed(items) if reverse and is_list_like(node) else iter(items)


def has_own(node, key):
    """
    True if key is an own item of node. Int keys only address lists,
    str keys only address mappings.
    """
    if is_list_like(node):
        return isinstance(key, int) and 0 <= key < len(node)
    if is_dict_like(node):
        return isinstance(key, str) and key in node
    return False


def clone_deep(value):
    """
    Deep copy containers and recognized built-in value types; share the rest.
    """
    if is_dict_like(value):
        out = value.__class__()
        for k, v in value.items():
            out[k] = clone_deep(v)
        return out
    if is_list_like(value):
        return value.__class__(clone_deep(v) for v in value)
    if isinstance(value, _CLONEABLE):
        return copy.deepcopy(value)
    return value


def is_identifier(s):
    return isinstance(s, str) and bool(_IDENT_RE.match(s))


def quote_str(s):
    """
    Wrap a string in single quotes, escaping backslashes and single quotes.
    """
    s = s.replace('\\', '\\\\').replace("'", "\\'")
    return f"'{s}'"
