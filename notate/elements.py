"""
Note variants: the addressing units a notation is built from.
"""
import pyparsing as pp

from . import utils


def quoted_string(unquote=True):
    """
    Single or double quoted string with backslash escapes. With `unquote`
    the result is the unescaped content, else the text as written.
    """
    return (
        pp.QuotedString('"', esc_char='\\', unquote_results=unquote,
                        multiline=True, convert_whitespace_escapes=False)
        | pp.QuotedString("'", esc_char='\\', unquote_results=unquote,
                          multiline=True, convert_whitespace_escapes=False)
    ).parse_with_tabs()


unquoted = quoted_string()


class Op:
    def __init__(self, *args):
        if len(args) == 3 and isinstance(args[2], pp.ParseResults):
            self.args = tuple(args[2].as_list())
        else:
            self.args = tuple(args)


class Note(Op):
    """
    One addressing unit. `raw` is the text as written, `value` the
    normalized key (int for indices, str for keys).
    """
    @property
    def raw(self):
        return self.args[0]
    @property
    def value(self):
        return self.args[0]
    def is_index(self):
        return False
    def is_wildcard(self):
        return False
    def operator(self, top=False):
        return self.raw
    def __repr__(self):
        return self.raw
    def __str__(self):
        return self.raw
    def __hash__(self):
        return hash((self.is_index(), self.is_wildcard(), self.value))
    def __eq__(self, op):
        if not isinstance(op, Note):
            return NotImplemented
        return (self.is_index() == op.is_index()
                and self.is_wildcard() == op.is_wildcard()
                and self.value == op.value)
    def covers(self, op):
        """
        True if this note matches everything `op` matches. `op` may be None
        when the other path is shorter.
        """
        return op is not None and self == op


class Identifier(Note):
    def operator(self, top=False):
        return self.raw if top else '.' + self.raw


class QuotedKey(Note):
    """
    Bracketed, quoted key: ['a b'] or ["a b"]
    """
    def __init__(self, *args):
        super().__init__(*args)
        self._value = unquoted.parse_string(self.args[0], parse_all=True)[0]
    @property
    def raw(self):
        return f'[{self.args[0]}]'
    @property
    def value(self):
        return self._value


class Index(Note):
    @property
    def raw(self):
        return f'[{self.args[0]}]'
    @property
    def value(self):
        return int(self.args[0])
    def is_index(self):
        return True


class Wildcard(Identifier):
    """
    `*`: matches any one key (not an index).
    """
    @property
    def value(self):
        return '*'
    def is_wildcard(self):
        return True
    def covers(self, op):
        return op is None or not op.is_index()


class IndexWildcard(Note):
    """
    `[*]`: matches any one list index.
    """
    @property
    def raw(self):
        return '[*]'
    @property
    def value(self):
        return '*'
    def is_index(self):
        return True
    def is_wildcard(self):
        return True
    def covers(self, op):
        return op is None or op.is_index()


def concrete(key):
    """
    Build the note addressing `key` in a container
    >>> concrete(2), concrete('name'), concrete('a b')
    ([2], name, ['a b'])
    """
    if isinstance(key, int) and not isinstance(key, bool):
        return Index(str(key))
    key = str(key)
    if utils.is_identifier(key):
        return Identifier(key)
    return QuotedKey(utils.quote_str(key))


def intersect_note(a, b):
    """
    Conjoin two notes at the same position; None if incompatible.
    """
    if a is None:
        return b
    if b is None:
        return a
    if a == b:
        return a
    if a.is_wildcard() and a.covers(b):
        return b
    if b.is_wildcard() and b.covers(a):
        return a
    return None
