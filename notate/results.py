"""
Parsed notation model and inspection results.
"""
import itertools


class Notation:
    """
    Immutable, validated sequence of notes, root to leaf.
    """
    def __init__(self, notes):
        self.notes = tuple(notes)
    def assemble(self, start=0, stop=None):
        return assemble(self.notes, start, stop)
    def __repr__(self):
        return f'{self.__class__.__name__}({list(self.notes)})'
    def __str__(self):
        return self.assemble()
    def __hash__(self):
        return hash(self.notes)
    def __len__(self):
        return len(self.notes)
    def __iter__(self):
        return iter(self.notes)
    def __eq__(self, ops):
        if not isinstance(ops, Notation):
            return NotImplemented
        return self.notes == ops.notes
    def __getitem__(self, key):
        return self.notes[key]
    @property
    def first(self):
        return self.notes[0]
    @property
    def last(self):
        return self.notes[-1]
    def parent(self):
        """
        Notation of the parent level, or None at the root
        """
        if len(self.notes) < 2:
            return None
        return Notation(self.notes[:-1])
    def prefixes(self):
        """
        Yield successively longer prefix notations, ending with self.
        """
        for idx in range(1, len(self.notes) + 1):
            yield Notation(self.notes[:idx])


def assemble(notes, start=0, stop=None):
    """
    Join notes into a notation string; the first note never takes a dot.
    """
    parts = []
    top = True
    for note in itertools.islice(notes, start, stop):
        parts.append(note.operator(top))
        top = False
    return ''.join(parts)


class InspectResult:
    """
    Outcome of resolving a notation against a tree. `has` distinguishes an
    absent member from one present with a None value.
    """
    __slots__ = ('notation', 'has', 'value', 'type', 'level', 'last_note',
                 'last_note_normalized', 'parent_is_array')

    def __init__(self, notation, has=False, value=None, type=None, level=0,
                 last_note=None, last_note_normalized=None, parent_is_array=False):
        self.notation = notation
        self.has = has
        self.value = value
        self.type = type
        self.level = level
        self.last_note = last_note
        self.last_note_normalized = last_note_normalized
        self.parent_is_array = parent_is_array

    def as_dict(self):
        return {k: getattr(self, k) for k in self.__slots__}

    def __eq__(self, other):
        if isinstance(other, InspectResult):
            return self.as_dict() == other.as_dict()
        return NotImplemented

    def __repr__(self):
        fields = ', '.join(f'{k}={getattr(self, k)!r}' for k in self.__slots__)
        return f'{self.__class__.__name__}({fields})'
