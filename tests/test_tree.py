import pytest
import notate
from notate import Tree


def car():
    return {'car': {'brand': 'Dodge', 'model': 'Charger', 'year': 1970}}


def test_get_and_chain():
    t = Tree(car())
    assert t.get('car.model') == 'Charger'
    r = t.remove('car.model').set('car.color', 'red').value
    assert r == {'car': {'brand': 'Dodge', 'year': 1970, 'color': 'red'}}


def test_source_is_mutated_in_place():
    d = car()
    Tree(d).set('car.year', 1971)
    assert d['car']['year'] == 1971


def test_default_source():
    assert Tree().value == {}


@pytest.mark.parametrize('source', ['x', 1, 2.5, True, ('a',), b'ab'])
def test_invalid_source(source):
    with pytest.raises(notate.InvalidSourceError) as e:
        Tree(source)
    assert e.value.kind == 'InvalidSource'


class TestOptions:
    def test_defaults(self):
        assert Tree().options == {'strict': False, 'preserve_indices': False}

    def test_merge(self):
        t = Tree({}, {'strict': True})
        t.options = {'preserve_indices': True}
        assert t.options == {'strict': True, 'preserve_indices': True}

    def test_unknown(self):
        with pytest.raises(TypeError):
            Tree({}, {'bogus': 1})


class TestGet:
    def test_list_index(self):
        d = {'car': {'colors': ['black', 'white']}}
        assert notate.get(d, 'car.colors[1]') == 'white'
        assert notate.get(d, 'car.colors[2]') is None

    def test_quoted(self):
        d = {'my key': {'a.b': 1}}
        assert notate.get(d, "['my key'][\"a.b\"]") == 1

    def test_default(self):
        assert notate.get({}, 'a.b', 5) == 5
        assert notate.get({}, 'a.b', None) is None

    def test_present_none(self):
        assert notate.get({'a': None}, 'a', 5) is None

    def test_index_on_dict_is_absent(self):
        assert not notate.has({0: 'x', '0': 'y'}, '[0]')

    def test_key_on_list_is_absent(self):
        assert not notate.has(['a'], "['0']")

    def test_list_root(self):
        assert notate.get([{'a': 1}], '[0].a') == 1

    def test_through_scalar(self):
        assert notate.get({'a': 1}, 'a.b') is None

    def test_invalid(self):
        with pytest.raises(notate.InvalidSyntaxError):
            notate.get({}, 'a.')


class TestInspect:
    def test_found(self):
        r = notate.inspect_get({'a': {'b': [1, 2]}}, 'a.b[1]')
        assert r.has is True
        assert r.value == 2
        assert r.type == 'int'
        assert r.level == 3
        assert r.last_note == '[1]'
        assert r.last_note_normalized == 1
        assert r.parent_is_array is True

    def test_missing(self):
        r = notate.inspect_get({'a': {'b': 1}}, 'a.c.d')
        assert r.has is False
        assert r.value is None
        assert r.type is None
        assert r.level == 2
        assert r.last_note == 'c'
        assert r.parent_is_array is False

    def test_types(self):
        d = {'a': {}, 'b': [], 'c': None, 'd': 's', 'e': 1.5, 'f': True}
        t = Tree(d)
        assert [t.inspect_get(k).type for k in 'abcdef'] == \
            ['dict', 'list', 'none', 'str', 'float', 'bool']

    def test_as_dict(self):
        r = notate.inspect_get({'a': 1}, 'a')
        assert r.as_dict()['value'] == 1


class TestHas:
    def test_has(self):
        d = {'a': None, 'b': [0]}
        assert notate.has(d, 'a')
        assert notate.has(d, 'b[0]')
        assert not notate.has(d, 'b[1]')
        assert not notate.has(d, 'c')

    def test_has_defined(self):
        d = {'a': None, 'b': 0}
        assert not notate.has_defined(d, 'a')
        assert notate.has_defined(d, 'b')
        assert not notate.has_defined(d, 'c')


class TestSet:
    def test_creates_containers(self):
        assert notate.set({}, 'a.b[0].c', 1) == {'a': {'b': [{'c': 1}]}}

    def test_list_root(self):
        assert notate.set([], '[0][1]', 'x') == [[None, 'x']]

    def test_pads_with_none(self):
        assert notate.set({'a': [1]}, 'a[3]', 4) == {'a': [1, None, None, 4]}

    def test_replaces_none_intermediate(self):
        assert notate.set({'a': None}, 'a.b', 1) == {'a': {'b': 1}}

    def test_overwrite(self):
        assert notate.set({'a': 1}, 'a', 2) == {'a': 2}
        assert notate.set({'a': 1}, 'a', 2, mode=True) == {'a': 2}

    def test_no_overwrite(self):
        assert notate.set({'a': 1}, 'a', 2, mode='no-overwrite') == {'a': 1}
        assert notate.set({'a': 1}, 'a', 2, mode=False) == {'a': 1}
        assert notate.set({}, 'a', 2, mode='no-overwrite') == {'a': 2}

    def test_insert(self):
        assert notate.set({'x': [1, 3]}, 'x[1]', 2, mode='insert') == {'x': [1, 2, 3]}
        assert notate.set([1], '[1]', 2, mode='insert') == [1, 2]

    def test_insert_past_end_pads(self):
        t = notate.Tree({'a': [1]})
        t.set('a[5]', 2, 'insert')
        assert t.value == {'a': [1, None, None, None, None, 2]}
        assert t.get('a[5]') == 2

    def test_insert_on_non_list(self):
        with pytest.raises(notate.InsertOnNonListError) as e:
            notate.set({'a': {}}, "a['0']", 1, mode='insert')
        assert e.value.kind == 'InsertOnNonList'

    def test_bad_mode(self):
        with pytest.raises(ValueError):
            notate.set({}, 'a', 1, mode='sideways')

    def test_key_on_list(self):
        with pytest.raises(notate.TypeMismatchError) as e:
            notate.set({'a': []}, 'a.b', 1)
        assert e.value.kind == 'TypeMismatch'

    def test_index_on_dict(self):
        with pytest.raises(notate.TypeMismatchError):
            notate.set({'a': {}}, 'a[0]', 1)

    def test_through_scalar(self):
        with pytest.raises(notate.TypeMismatchError):
            notate.set({'a': 1}, 'a.b', 1)

    @pytest.mark.parametrize('path', ['', '   '])
    def test_empty_path(self, path):
        with pytest.raises(notate.InvalidSyntaxError):
            notate.set({}, path, 1)

    @pytest.mark.parametrize('path,value', [
        ('a', 1),
        ('a.b.c', [1, 2]),
        ('x[2].y', {'z': None}),
        ("['odd key'][0]", 'v'),
        ('a', None),
    ])
    def test_set_then_get(self, path, value):
        t = Tree({'a': {'q': 1}, 'x': []})
        t.set(path, value)
        assert t.get(path) is value


class TestRemove:
    def test_inspect_remove_splices(self):
        t = Tree({'car': {'colors': ['black', 'white']}})
        r = t.inspect_remove('car.colors[0]')
        assert r.has is True
        assert r.value == 'black'
        assert r.parent_is_array is True
        assert t.value == {'car': {'colors': ['white']}}

    def test_preserve_indices(self):
        t = Tree({'a': [1, 2, 3]}, {'preserve_indices': True})
        t.remove('a[0]')
        assert t.value == {'a': [None, 2, 3]}

    def test_dict_key(self):
        assert notate.remove({'a': 1, 'b': 2}, 'a') == {'b': 2}

    def test_idempotent(self):
        t = Tree({'a': {'b': 1}})
        assert t.inspect_remove('a.b').has is True
        r = t.inspect_remove('a.b')
        assert r.has is False
        t.remove('a.b')
        assert t.value == {'a': {}}

    def test_missing_parent(self):
        t = Tree({'a': 1})
        assert t.inspect_remove('x.y.z').has is False
        assert t.value == {'a': 1}

    def test_delete_alias(self):
        assert Tree({'a': 1}).delete('a').value == {}


class TestEachValue:
    def test_levels(self):
        seen = []
        d = {'a': {'b': [7]}}
        Tree(d).each_value('a.b[0].c', lambda *args: seen.append(args[:4]))
        assert seen == [
            ({'b': [7]}, 'a', 'a', 0),
            ([7], 'a.b', 'b', 1),
            (7, 'a.b[0]', '[0]', 2),
            (None, 'a.b[0].c', 'c', 3),
        ]

    def test_stop(self):
        seen = []

        def visitor(value, level, note, index, notes):
            seen.append(level)
            return False
        Tree({'a': {'b': 1}}).each_value('a.b', visitor)
        assert seen == ['a']
