"""
Address, transform and filter nested dicts and lists with string notations
such as `car.colors[0]` and globs such as `!car.*`.
"""
from .api import (
    clone, compare, count_notes, create, each, each_note, expand, filter, first,
    flatten, get, has, has_defined, inspect_get, inspect_remove, is_glob,
    is_valid, join, last, merge, normalize, notations, parent, parse, remove,
    separate, set, sort, split, test, union)
from .errors import (
    InsertOnNonListError, IntegrityError, InvalidDestinationError,
    InvalidNotationsObjectError, InvalidSourceError, InvalidSyntaxError,
    MissingIndexError, MissingPropertyError, NotationError, TypeMismatchError)
from .glob import Glob, covers, intersect
from .results import InspectResult, Notation
from .tree import Tree