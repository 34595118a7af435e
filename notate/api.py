"""
Main api
"""
from . import globs as gl
from . import paths
from .glob import Glob, is_valid as is_glob
from .tree import Tree
from .utypes import OVERWRITE, marker

parse = paths.parse
is_valid = paths.is_valid
split = paths.split
join = paths.join
parent = paths.parent
first = paths.first
last = paths.last
count_notes = paths.count_notes
each_note = paths.each_note

compare = gl.compare
sort = gl.sort
normalize = gl.normalize
union = gl.union


def create(obj=None, **options):
    """
    Tree over obj with the given options (strict, preserve_indices)
    """
    return Tree(obj, options)


def get(obj, notation, default=marker, **options):
    """
    Get the value at notation
    >>> d = {'car': {'colors': ['black', 'white']}}
    >>> get(d, 'car.colors[1]')
    'white'
    >>> get(d, 'car.year', 1970)
    1970
    """
    return Tree(obj, options).get(notation, default)


def has(obj, notation):
    """
    >>> has({'a': None}, 'a'), has({'a': None}, 'b')
    (True, False)
    """
    return Tree(obj).has(notation)


def has_defined(obj, notation):
    return Tree(obj).has_defined(notation)


def inspect_get(obj, notation):
    return Tree(obj).inspect_get(notation)


def inspect_remove(obj, notation, **options):
    return Tree(obj, options).inspect_remove(notation)


def set(obj, notation, value, mode=OVERWRITE, **options):
    """
    Set value at notation, building intermediate containers; returns obj
    >>> set({}, 'a.b[0].c', 1)
    {'a': {'b': [{'c': 1}]}}
    >>> set({'x': [1, 3]}, 'x[1]', 2, mode='insert')
    {'x': [1, 2, 3]}
    """
    return Tree(obj, options).set(notation, value, mode).value


def remove(obj, notation, **options):
    """
    Remove the member at notation; returns obj
    >>> remove({'car': {'colors': ['black', 'white']}}, 'car.colors[0]')
    {'car': {'colors': ['white']}}
    >>> remove([1, 2, 3], '[0]', preserve_indices=True)
    [None, 2, 3]
    """
    return Tree(obj, options).remove(notation).value


def merge(obj, notations, overwrite=True):
    """
    >>> merge({'a': 1}, {'b.c': 2, 'a': 3})
    {'a': 3, 'b': {'c': 2}}
    """
    return Tree(obj).merge(notations, overwrite).value


def separate(obj, notations):
    """
    Remove notations from obj; return the removed members as a new tree
    >>> d = {'a': 1, 'b': {'c': 2, 'd': 3}}
    >>> separate(d, ['a', 'b.c'])
    {'a': 1, 'b': {'c': 2}}
    >>> d
    {'b': {'d': 3}}
    """
    return Tree(obj).separate(notations).value


def flatten(obj):
    """
    One-level dict of notation -> leaf value; obj is left untouched
    >>> flatten({'a': [1, {'b': 2}], 'c d': {}})
    {'a[0]': 1, 'a[1].b': 2, "['c d']": {}}
    """
    return Tree(obj).flatten().value


def expand(flat):
    """
    Inverse of flatten
    >>> expand({'a[0]': 1, 'a[1].b': 2})
    {'a': [1, {'b': 2}]}
    """
    return Tree(flat).expand().value


def filter(obj, globs, **options):
    """
    New tree holding only what globs select; obj is left untouched
    >>> d = {'brand': 'Ford', 'model': {'name': 'Mustang', 'year': 1970}}
    >>> filter(d, ['*', '!model.year'])
    {'brand': 'Ford', 'model': {'name': 'Mustang'}}
    >>> filter([1, 2], [])
    []
    """
    return Tree(obj, options).filter(globs).value


def clone(obj):
    return Tree(obj).clone().value


def each(obj, visitor):
    Tree(obj).each(visitor)
    return obj


def notations(obj):
    """
    >>> notations({'a': {'b': 1, 'c': [2]}})
    ['a.b', 'a.c[0]']
    """
    return Tree(obj).get_notations()


def test(glob, notation):
    """
    True if concrete notation matches glob
    >>> test('*.name', 'user.name')
    True
    """
    return Glob(glob).test(notation)
