from au import reduce, reduce_key_value

from hypothesis import given, strategies as st

import operator
import pytest

def recorder():
	calls = []
	def fn(*args):
		calls.append(args)
		return args[0]
	return fn, calls

@given(st.lists(st.integers(), min_size=1))
def test_reduce_seed(items):
	assert reduce(items, operator.add) \
		== reduce(items[1:], operator.add, items[0]) == sum(items)

@given(st.lists(st.integers()), st.integers())
def test_reduce_init(items, init):
	assert reduce(items, operator.add, init) == init + sum(items)

@given(st.lists(st.integers()))
def test_reduce_order(items):
	assert reduce(items, lambda acc, x: acc + [x], []) == items
	assert reduce(items, lambda acc, x: [x] + acc, []) == items[::-1]

@given(st.lists(st.integers()))
def test_reduce_calls(items):
	fn, calls = recorder()
	reduce(items, fn)
	assert len(calls) == max(len(items) - 1, 0)
	fn, calls = recorder()
	reduce(items, fn, 'init')
	assert len(calls) == len(items)

def test_reduce_empty():
	fn, calls = recorder()
	assert reduce([], fn) is None
	assert reduce([], fn, 7) == 7
	assert reduce([5], fn) == 5
	assert reduce([None], fn) is None
	assert calls == []

def test_reduce_falsy_init():
	assert reduce([1, 2], operator.add, 0) == 3
	assert reduce([1, 2], lambda acc, x: acc + [x], []) == [1, 2]
	assert reduce(['a'], operator.add, '') == 'a'
	assert reduce([True, True], operator.and_, False) is False

def test_reduce_none_init():
	assert reduce([1, 2, 3], operator.add, None) == 6

def test_reduce_mixed_types():
	assert reduce(['a', 'bb', 'ccc'], lambda acc, x: acc + len(x), 0) == 6
	assert reduce([None, 1], lambda acc, x: (acc, x)) == (None, 1)

@given(st.lists(st.integers()))
def test_reduce_indexed(items):
	pairs = reduce(items, lambda acc, x, i: acc + [(i, x)], [], indexed=True)
	assert pairs == list(enumerate(items))
	indices = []
	reduce(items, lambda acc, x, i: indices.append(i) or acc, indexed=True)
	assert indices == list(range(1, len(items)))

@given(st.lists(st.integers()))
def test_reduce_iterator(items):
	assert reduce(iter(items), operator.add, 0) == sum(items)
	assert reduce((x for x in items), operator.add) == (sum(items) if items else None)

@given(st.lists(st.integers()))
def test_reduce_unchanged(items):
	copy = list(items)
	reduce(items, lambda acc, x: acc + [x], [])
	assert items == copy

def test_reduce_not_callable():
	with pytest.raises(TypeError):
		reduce([1, 2], None)
	with pytest.raises(TypeError):
		reduce(None, operator.add)

@given(st.dictionaries(st.text(), st.integers()), st.integers())
def test_reduce_key_value(items, init):
	assert reduce_key_value(items, lambda acc, k, v: acc + v, init) \
		== init + sum(items.values())
	assert reduce_key_value(items, lambda acc, k, v: acc | {(k, v)}, frozenset()) \
		== frozenset(items.items())

@given(st.dictionaries(st.integers(), st.integers()))
def test_reduce_key_value_calls(items):
	fn, calls = recorder()
	reduce_key_value(items, fn, None)
	assert sorted((k, v) for _, k, v in calls) == sorted(items.items())

def test_reduce_key_value_empty():
	init = object()
	fn, calls = recorder()
	assert reduce_key_value({}, fn, init) is init
	assert reduce_key_value({}, None, init) is init
	assert calls == []

def test_reduce_key_value_falsy_init():
	assert reduce_key_value({'a': 1}, lambda acc, k, v: acc + [k], []) == ['a']
	assert reduce_key_value({'a': 1}, lambda acc, k, v: (acc, k, v), None) == (None, 'a', 1)
