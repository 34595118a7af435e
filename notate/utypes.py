"""
Sentinels, option defaults and reserved names shared across notate.
"""
import types

# Sentinel used as a "missing" marker, e.g. for an omitted default.
marker = object()

# Visitors return this to halt a traversal.
STOP = False

DEFAULT_OPTIONS = types.MappingProxyType({
    'strict': False,
    'preserve_indices': False,
})

OVERWRITE = 'overwrite'
INSERT = 'insert'
NO_OVERWRITE = 'no-overwrite'
SET_MODES = frozenset((OVERWRITE, INSERT, NO_OVERWRITE))

# Key names merge() never writes.
RESERVED_KEYS = frozenset(('__proto__', 'prototype', 'constructor', '__class__', '__dict__'))
