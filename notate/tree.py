"""
Tree accessor: get/set/remove/inspect values of a dict or list by notation,
plus bulk operations built from those.
"""
import logging

from . import engine
from . import filters
from . import utils
from .errors import (
    InsertOnNonListError, InvalidDestinationError, InvalidNotationsObjectError,
    InvalidSourceError, InvalidSyntaxError, TypeMismatchError, missing)
from .paths import parse
from .results import InspectResult, Notation
from .utypes import (
    DEFAULT_OPTIONS, INSERT, NO_OVERWRITE, OVERWRITE, RESERVED_KEYS, SET_MODES, STOP, marker)

logger = logging.getLogger(__name__)


def _set_mode(mode):
    if mode is True:
        return OVERWRITE
    if mode is False:
        return NO_OVERWRITE
    if mode not in SET_MODES:
        raise ValueError(f'Invalid set mode: {mode!r}')
    return mode


def _target(obj):
    """
    Unwrap a Tree or validate a raw container used as copy/move target.
    """
    if isinstance(obj, Tree):
        return obj
    if not utils.is_collection(obj):
        raise InvalidDestinationError()
    return Tree(obj)


class Tree:
    """
    Binds notation operations to one source dict or list. The source is
    mutated in place; mutating methods return the Tree for chaining.

    >>> t = Tree({'car': {'brand': 'Dodge', 'model': 'Charger', 'year': 1970}})
    >>> t.get('car.model')
    'Charger'
    >>> t.remove('car.model').set('car.color', 'red').value
    {'car': {'brand': 'Dodge', 'year': 1970, 'color': 'red'}}
    """
    def __init__(self, source=None, options=None):
        if source is None:
            source = {}
        if not utils.is_collection(source):
            raise InvalidSourceError()
        self._source = source
        self._options = dict(DEFAULT_OPTIONS)
        self._flat_kind = None
        self.options = options

    @property
    def options(self):
        return self._options

    @options.setter
    def options(self, value):
        value = dict(value or {})
        unknown = set(value) - set(DEFAULT_OPTIONS)
        if unknown:
            raise TypeError(f'Unknown options: {", ".join(sorted(unknown))}')
        self._options = {**self._options, **value}

    @property
    def strict(self):
        return bool(self._options['strict'])

    @property
    def value(self):
        return self._source

    @property
    def is_array(self):
        return utils.is_list_like(self._source)

    def _empty(self):
        return [] if self.is_array else {}

    # ---- inspection ----

    def inspect_get(self, notation):
        """
        Resolve notation note by note, stopping at the first absent member.
        """
        ops = parse(notation)
        notation = ops.assemble()
        level = self._source
        result = None
        for idx, note in enumerate(ops):
            key = note.value
            parent_is_array = utils.is_list_like(level)
            if not utils.has_own(level, key):
                return InspectResult(
                    notation, has=False, level=idx + 1, last_note=note.raw,
                    last_note_normalized=key, parent_is_array=parent_is_array)
            level = level[key]
            result = InspectResult(
                notation, has=True, value=level, type=utils.type_of(level),
                level=idx + 1, last_note=note.raw, last_note_normalized=key,
                parent_is_array=parent_is_array)
        return result

    def inspect_remove(self, notation):
        """
        Remove the member at notation and report what was there. List items
        are spliced out unless preserve_indices is set, which leaves None.
        """
        ops = parse(notation)
        notation = ops.assemble()
        parent_ops = ops.parent()
        parent = self._source if parent_ops is None else self.get(parent_ops, None)
        parent_is_array = utils.is_list_like(parent)
        note = ops.last
        key = note.value
        if not utils.has_own(parent, key):
            return InspectResult(
                notation, has=False, level=len(ops), last_note=note.raw,
                last_note_normalized=key, parent_is_array=parent_is_array)
        value = parent[key]
        if parent_is_array and not self._options['preserve_indices']:
            del parent[key]
        elif parent_is_array:
            parent[key] = None
        else:
            del parent[key]
        return InspectResult(
            notation, has=True, value=value, type=utils.type_of(value),
            level=len(ops), last_note=note.raw, last_note_normalized=key,
            parent_is_array=parent_is_array)

    def has(self, notation):
        return self.inspect_get(notation).has

    def has_defined(self, notation):
        """
        True if notation exists and its value is not None
        """
        result = self.inspect_get(notation)
        return result.has and result.value is not None

    def get(self, notation, default=marker):
        """
        Value at notation. A missing member returns `default` (None if
        omitted), or raises in strict mode when no default is given.
        """
        result = self.inspect_get(notation)
        if result.has:
            return result.value
        if default is marker:
            if self.strict:
                raise missing(result.notation, result.parent_is_array)
            return None
        return default

    # ---- mutation ----

    def set(self, notation, value, mode=OVERWRITE):
        """
        Set value at notation, creating intermediate containers: a list when
        the next note is an index, else a dict.
        """
        if isinstance(notation, str) and not notation.strip():
            raise InvalidSyntaxError(notation)
        mode = _set_mode(mode)
        ops = parse(notation)
        level = self._source
        last_idx = len(ops) - 1
        for idx, note in enumerate(ops):
            is_last = idx == last_idx
            key = note.value
            where = ops.assemble(stop=idx) or 'source'
            if utils.is_list_like(level):
                if not note.is_index():
                    raise TypeMismatchError(f"Cannot set string key '{note.raw}' on list {where}")
            elif utils.is_dict_like(level):
                if note.is_index():
                    raise TypeMismatchError(f"Cannot set index '{note.raw}' on dict {where}")
            else:
                raise TypeMismatchError(
                    f"Cannot set '{note.raw}' on {utils.type_of(level)} at {where}")

            exists = utils.has_own(level, key)
            if is_last:
                if mode == INSERT:
                    if not utils.is_list_like(level):
                        raise InsertOnNonListError(ops.assemble())
                    if key > len(level):
                        self._assign(level, key, value)
                    else:
                        level.insert(key, value)
                elif mode == OVERWRITE or not exists:
                    self._assign(level, key, value)
                break
            if not exists or level[key] is None:
                self._assign(level, key, [] if ops[idx + 1].is_index() else {})
            level = level[key]
        return self

    @staticmethod
    def _assign(level, key, value):
        if utils.is_list_like(level) and key >= len(level):
            level.extend([None] * (key - len(level)))
            level.append(value)
        else:
            level[key] = value

    def remove(self, notation):
        """
        Remove the member at notation; strict mode raises if it is missing.
        """
        result = self.inspect_remove(notation)
        if self.strict and not result.has:
            raise missing(result.notation, result.parent_is_array)
        return self

    delete = remove

    def merge(self, notations, overwrite=True):
        """
        Set each notation -> value of a (flat or nested-key) mapping.
        Notations naming a reserved key are skipped.
        """
        if not utils.is_dict_like(notations):
            raise InvalidNotationsObjectError('Invalid notations object. Expected a dict.')
        for notation, value in notations.items():
            ops = parse(notation)
            if any(n.value in RESERVED_KEYS for n in ops if not n.is_index()):
                logger.debug('merge: skipping reserved notation %r', notation)
                continue
            self.set(ops, value, overwrite)
        return self

    def separate(self, notations):
        """
        Remove each notation from the source; return a new Tree holding the
        removed members at the same notations.
        """
        if not isinstance(notations, (list, tuple)):
            raise InvalidNotationsObjectError('Invalid notations object. Expected a list.')
        removed = self.__class__(self._empty(), self._options)
        for notation in notations:
            result = self.inspect_remove(notation)
            if result.has:
                removed.set(notation, result.value)
        return removed

    def filter(self, globs):
        """
        Replace the source with a new tree holding only what `globs` select.
        """
        self._source = filters.filter_tree(self, globs)
        return self

    # ---- traversal ----

    def each(self, visitor):
        """
        Call visitor(notation, note, value, source) for each leaf; returning
        False stops the traversal.
        """
        engine.each(self._source, visitor)
        return self

    def each_value(self, notation, visitor):
        """
        Call visitor(value, level_notation, note, index, notes) for each level
        of notation; value is None past the first missing member.
        """
        ops = parse(notation)
        notes = [n.raw for n in ops]
        level = self._source
        for idx, prefix in enumerate(ops.prefixes()):
            key = ops[idx].value
            level = level[key] if utils.has_own(level, key) else None
            if visitor(level, prefix.assemble(), notes[idx], idx, notes) is STOP:
                break
        return self

    def get_notations(self):
        return [n.assemble() for n in engine.notations(self._source)]

    # ---- whole-tree transforms ----

    def clone(self):
        self._source = utils.clone_deep(self._source)
        return self

    def flatten(self):
        """
        Replace the source with a one-level dict of notation -> leaf value
        >>> Tree({'a': {'b': [1, 2]}}).flatten().value
        {'a.b[0]': 1, 'a.b[1]': 2}
        """
        flat = {}
        for notes, value in engine.walk(self._source):
            flat[Notation(notes).assemble()] = value
        self._flat_kind = list if self.is_array else dict
        self._source = flat
        return self

    def expand(self):
        """
        Rebuild nesting from a flat notation -> value dict
        >>> Tree({'a.b[0]': 1, 'a.b[1]': 2}).expand().value
        {'a': {'b': [1, 2]}}
        """
        flat = self._source
        if not utils.is_dict_like(flat):
            raise InvalidNotationsObjectError('Invalid notations object. Expected a dict.')
        first = next(iter(flat), None)
        if first is not None:
            as_list = parse(first).first.is_index()
        else:
            as_list = self._flat_kind is list
        self._source = self.__class__([] if as_list else {}, self._options).merge(flat).value
        self._flat_kind = None
        return self

    aggregate = expand

    # ---- copy & move ----

    def copy_to(self, destination, notation, new_notation=None, overwrite=True):
        dest = _target(destination)
        result = self.inspect_get(notation)
        if result.has:
            dest.set(new_notation or notation, result.value, overwrite)
        return self

    def copy_from(self, target, notation, new_notation=None, overwrite=True):
        src = _target(target)
        result = src.inspect_get(notation)
        if result.has:
            self.set(new_notation or notation, result.value, overwrite)
        return self

    def move_to(self, destination, notation, new_notation=None, overwrite=True):
        dest = _target(destination)
        result = self.inspect_remove(notation)
        if result.has:
            dest.set(new_notation or notation, result.value, overwrite)
        return self

    def move_from(self, target, notation, new_notation=None, overwrite=True):
        src = _target(target)
        result = src.inspect_remove(notation)
        if result.has:
            self.set(new_notation or notation, result.value, overwrite)
        return self

    def rename(self, notation, new_notation, overwrite=True):
        return self.move_to(self, notation, new_notation, overwrite)

    renote = rename

    def extract(self, notation, new_notation=None):
        """
        Copy the member at notation into a new dict
        """
        out = {}
        self.copy_to(out, notation, new_notation)
        return out

    copy_to_new = extract

    def extrude(self, notation, new_notation=None):
        """
        Move the member at notation into a new dict
        """
        out = {}
        self.move_to(out, notation, new_notation)
        return out

    move_to_new = extrude

    def __repr__(self):
        return f'{self.__class__.__name__}({self._source!r})'
