from au import get, keys, vals, contains_key, contains_value

from hypothesis import given, strategies as st

import collections
import types

def test_get():
	assert get({'a': 1}, 'a') == 1
	assert get({'a': 1}, 'b') is None
	assert get({'a': 1}, 'b', 3) == 3
	assert get({'a': 1}, 'a', 3) == 1

def test_get_falsy():
	assert get({'a': 0}, 'a', 3) == 0
	assert get({'a': False}, 'a', 3) is False
	assert get({'a': None}, 'a', 3) == 3
	assert get({'a': None}, 'a') is None
	assert get({}, 'a', 0) == 0

@given(st.dictionaries(st.text(), st.integers()), st.text())
def test_get_missing(items, key):
	if key in items:
		assert get(items, key) == items[key]
	else:
		assert get(items, key) is None
		assert get(items, key, 'default') == 'default'

@given(st.dictionaries(st.integers(), st.integers()))
def test_keys_vals(items):
	assert set(keys(items)) == set(items)
	assert len(keys(items)) == len(items)
	assert collections.Counter(vals(items)) == collections.Counter(items.values())
	assert isinstance(keys(items), list)
	assert isinstance(vals(items), list)

def test_mapping_types():
	proxy = types.MappingProxyType({'a': 1})
	assert keys(proxy) == ['a']
	assert vals(proxy) == [1]
	assert get(proxy, 'b', 2) == 2
	assert contains_key(proxy, 'a')

@given(st.dictionaries(st.integers(0, 10), st.integers(0, 10)), st.integers(0, 10))
def test_contains(items, value):
	assert contains_key(items, value) == (value in items)
	assert contains_value(items, value) == (value in items.values())

def test_contains_none():
	assert contains_key({'a': None}, 'a')
	assert contains_value({'a': None}, None)
	assert not contains_value({'a': 0}, None)
