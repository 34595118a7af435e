import pytest
import notate
from notate import elements as el


PATHS = [
    'a',
    'a.b.c',
    'car.colors[0]',
    '[0]',
    '[12].x',
    "['my key'].x",
    '["a.b"][2]',
    "a['it\\'s']",
    '$ref._id',
    'a[0][1][2]',
]


@pytest.mark.parametrize('path', PATHS)
def test_join_split_roundtrip(path):
    assert notate.join(notate.split(path)) == path


@pytest.mark.parametrize('path', PATHS)
def test_valid(path):
    assert notate.is_valid(path)


@pytest.mark.parametrize('path', [
    '', ' ', '.a', 'a.', 'a..b', 'a b', ' a', 'a ', '1a', 'a.1', 'a[x]',
    'a[-1]', 'a[]', "a['x]", 'a.*', 'a[*]', '!a', 'a.[0]',
    'a\n', '\ta', 'a.b ', "a['x'] ", 'a[0]\r\n',
])
def test_invalid(path):
    assert not notate.is_valid(path)
    with pytest.raises(notate.InvalidSyntaxError):
        notate.parse(path)


def test_invalid_syntax_is_value_error():
    with pytest.raises(ValueError):
        notate.parse('a..b')


def test_non_string_is_invalid():
    assert not notate.is_valid(None)
    assert not notate.is_valid(3)


def test_split():
    assert notate.split('a.b[0]["x y"]') == ['a', 'b', '[0]', '["x y"]']


def test_join_mixed():
    assert notate.join(['a', '[0]', 'b.c']) == 'a[0].b.c'
    assert notate.join([notate.parse('a.b'), '["c d"]']) == 'a.b["c d"]'
    assert notate.join([el.Identifier('x'), el.Index('3')]) == 'x[3]'


def test_join_skips_none():
    assert notate.join(['a', None, 'b']) == 'a.b'


def test_parent():
    assert notate.parent('a.b[1]') == 'a.b'
    assert notate.parent("['x'].y") == "['x']"
    assert notate.parent('a') is None


def test_first_last():
    assert notate.first('[0].a.b') == '[0]'
    assert notate.last('a.b[1]') == '[1]'
    assert notate.last('a') == 'a'


def test_count_notes():
    assert notate.count_notes('a') == 1
    assert notate.count_notes('a.b[0]["c"]') == 4


def test_note_kinds():
    n = notate.parse('a[0]["b"]')
    assert isinstance(n[0], el.Identifier)
    assert isinstance(n[1], el.Index)
    assert isinstance(n[2], el.QuotedKey)
    assert [x.value for x in n] == ['a', 0, 'b']


def test_note_equality_is_normalized():
    assert notate.parse('a') == notate.parse("['a']")
    assert notate.parse('[1]') == notate.parse('[01]')
    assert notate.parse('[1]') != notate.parse("['1']")


def test_quoted_escapes():
    n = notate.parse('["say \\"hi\\""]')
    assert n.first.value == 'say "hi"'


class TestEachNote:
    def test_visits_prefixes(self):
        seen = []
        notate.each_note('a.b[0]', lambda *args: seen.append(args))
        notes = ['a', 'b', '[0]']
        assert seen == [
            ('a', 'a', 0, notes),
            ('a.b', 'b', 1, notes),
            ('a.b[0]', '[0]', 2, notes),
        ]

    def test_stop(self):
        seen = []

        def visitor(level, note, index, notes):
            seen.append(level)
            return index < 1
        notate.each_note('a.b.c.d', visitor)
        assert seen == ['a', 'a.b']

    def test_invalid(self):
        with pytest.raises(notate.InvalidSyntaxError):
            notate.each_note('a.', lambda *args: None)


def test_surrounding_whitespace_is_not_a_key():
    t = notate.Tree({'a': 1})
    with pytest.raises(notate.InvalidSyntaxError):
        t.get('a\n')
    with pytest.raises(notate.InvalidSyntaxError):
        t.set('a ', 2)
    assert t.value == {'a': 1}


def test_quoted_backslashes():
    n = notate.parse("['a\\\\b']['it\\'s']")
    assert [x.value for x in n] == ['a\\b', "it's"]
    assert notate.split("['a\\\\b']") == ["['a\\\\b']"]


@pytest.mark.parametrize('key', ['a b', 'tab\there', 'line\nbreak', "it's", 'back\\slash', '"'])
def test_quoted_keys_roundtrip(key):
    flat = notate.flatten({key: 1})
    assert notate.get({key: 1}, list(flat)[0]) == 1
    assert notate.expand(flat) == {key: 1}
