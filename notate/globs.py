"""
Set operations over glob lists: priority order, normalization and union.

A normalized list reads as "select what any positive glob covers, except
what any negated glob covers", applied in priority order so that shallow,
loose and positive globs come first and narrower negations override them.
"""
import functools
import logging

from .glob import Glob, covers, create, intersect

logger = logging.getLogger(__name__)


def _ensure_list(globs):
    if globs is None:
        return []
    if isinstance(globs, (str, Glob)):
        return [globs]
    return list(globs)


def _key(g):
    return (len(g.reduced), -g.wildcard_count, g.is_negated, g.abs_glob)


def compare(a, b):
    """
    Compare two globs by priority; -1 if `a` applies first
    >>> compare('prop.*.name', 'prop.*')
    1
    >>> compare('id', '!id')
    -1
    """
    a, b = create(a), create(b)
    if a == b or (a.is_wildcard_only() and b.is_wildcard_only()):
        return 0
    ka, kb = _key(a), _key(b)
    return (ka > kb) - (ka < kb)


def sort_globs(globs):
    return sorted((create(g) for g in globs), key=functools.cmp_to_key(compare))


def sort(globs):
    """
    Sort globs by priority
    >>> sort(['!prop.*.name', 'prop.*', 'prop.id'])
    ['prop', 'prop.id', '!prop.*.name']
    """
    return [g.glob for g in sort_globs(_ensure_list(globs))]


def _strictly_covers(a, b):
    return covers(a, b) and not covers(b, a)


def normalize_globs(globs):
    items = [create(g) for g in _ensure_list(globs)]
    if any(g.is_negate_all() for g in items):
        return []

    unique = list(dict.fromkeys(items))
    negated = [g for g in unique if g.is_negated]
    # a positive with an exact negated counterpart loses to it
    positives = [g for g in unique
                 if not g.is_negated and not any(g.is_reverse_of(n) for n in negated)]

    kept_pos = [
        p for p in positives
        if not any(_strictly_covers(q, p) for q in positives if q is not p)
        and not any(covers(n, p) for n in negated)
    ]
    kept_neg = [
        n for n in negated
        if not any(_strictly_covers(m, n) for m in negated if m is not n)
    ]
    if not kept_pos:
        result = sort_globs(kept_neg)
        logger.debug('normalized %s -> %s (nothing selected)',
                     [g.glob for g in items], [g.glob for g in result])
        return result

    neg = []
    for n in kept_neg:
        if any(covers(p, n) for p in kept_pos):
            neg.append(n)
            continue
        # only the part of n some positive selects needs excluding
        for p in kept_pos:
            i = intersect(n, p)
            if i is not None:
                neg.append(i)
    neg = list(dict.fromkeys(neg))
    neg = [n for n in neg if not any(_strictly_covers(m, n) for m in neg if m is not n)]

    result = sort_globs(kept_pos + neg)
    logger.debug('normalized %s -> %s', [g.glob for g in items], [g.glob for g in result])
    return result


def normalize(globs):
    """
    Reduce globs to a minimal, duplicate-free, priority-sorted list
    >>> normalize(['*', '!id', 'name', 'car.model', '!car.*', 'id', 'name', 'age'])
    ['*', '!car.*', '!id']
    >>> normalize(['car.*', '!car.model'])
    ['car', '!car.model']
    >>> normalize(['a.b', '!a'])
    ['!a']
    >>> normalize(['!*'])
    []
    """
    return [g.glob for g in normalize_globs(globs)]


def selects_nothing(globs):
    """
    True if a normalized glob list has no positive glob left
    """
    return all(g.is_negated for g in globs)


def _compare_union(xs, ys, acc):
    """
    Add xs to acc: positives as they are, negations narrowed so that they
    never exclude what ys selects. A negation ys selects only part of
    cannot be narrowed by another glob and is dropped.
    """
    pos = [y for y in ys if not y.is_negated]
    neg = [y for y in ys if y.is_negated]
    for g in xs:
        if g in acc:
            continue
        if not g.is_negated:
            acc.append(g)
            continue
        overlapping = [p for p in pos if intersect(g, p) is not None]
        if not overlapping:
            acc.append(g)
        elif any(covers(p, g) for p in overlapping):
            # ys selects g's region except what its own negations exclude
            acc.extend(i for i in (intersect(g, n) for n in neg) if i is not None)
        else:
            logger.debug('union: dropping %s, it overlaps %s', g.glob, [p.glob for p in overlapping])
    return acc


def union_globs(a, b):
    la, lb = normalize_globs(a), normalize_globs(b)
    if selects_nothing(la):
        return lb
    if selects_nothing(lb):
        return la
    acc = _compare_union(la, lb, [])
    acc = _compare_union(lb, la, acc)
    return normalize_globs(acc)


def union(a, b):
    """
    Glob list selecting everything either list selects. Where no glob list
    selects exactly that, the result selects more, never less.
    >>> union(['*', 'name'], ['email'])
    ['*']
    >>> union(['!id'], ['id'])
    ['id']
    >>> union(['!user.id', 'user.name'], ['user.*'])
    ['user']
    >>> union(['*', '!*.x'], ['*', '!a.*'])
    ['*', '!a.x']
    """
    return [g.glob for g in union_globs(a, b)]
