from __future__ import annotations
from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar, Tuple, overload

from ._utility import NOTHING, none

T = TypeVar('T')
A = TypeVar('A')
K = TypeVar('K')
V = TypeVar('V')

@overload
def reduce(coll:Iterable[T], fn:Callable[..., T]) -> Optional[T]: ...
@overload
def reduce(coll:Iterable[T], fn:Callable[..., A], init:A, *, indexed:bool=...) -> A: ...
@overload
def reduce(coll:Iterable[T], fn:Callable[..., T], *, indexed:bool) -> Optional[T]: ...
def reduce(coll, fn, init=None, *, indexed=False):
	r'''
	Fold ``coll`` from left to right with ``fn``

	Starting from ``init``, the accumulator is replaced by
	``fn(acc, elem)`` for every element in order,
	or ``fn(acc, elem, index)`` when ``indexed=True``.

	When ``init`` is absent the first element is the starting accumulator
	and the fold continues from the second element.
	An empty ``coll`` then gives ``None``,
	and a single element is returned as is.
	``fn`` is not called in either case.

	:math:`O(n)`

	>>> reduce([1, 2, 3, 4], lambda acc, x: acc + x)
	10
	>>> reduce([1, 2, 3, 4], lambda acc, x: acc + [x], [])
	[1, 2, 3, 4]
	>>> reduce('abc', lambda acc, x, i: acc + x * i, indexed=True)
	'abcc'
	>>> reduce([], lambda acc, x: acc + x) is None
	True
	>>> reduce([], lambda acc, x: acc + x, 0)
	0
	'''
	items = enumerate(coll)
	result = init
	if none(result):
		first = next(items, NOTHING)
		if first is NOTHING:
			return None
		_, result = first
	for i, elem in items:
		if indexed:
			result = fn(result, elem, i)
		else:
			result = fn(result, elem)
	return result

def reduce_key_value(tbl:Mapping[K,V], fn:Callable[[A,K,V],A], init:A) -> A:
	r'''
	Fold the entries of ``tbl`` with ``fn``

	The accumulator starts at ``init`` and is replaced by
	``fn(acc, key, value)`` for every entry.
	Entries are visited in unspecified order,
	so ``fn`` should not depend on it.

	:math:`O(n)`

	>>> reduce_key_value({'a': 1, 'b': 2}, lambda acc, k, v: acc + v, 0)
	3
	>>> reduce_key_value({}, None, 'init')
	'init'
	'''
	result = init
	for key, value in tbl.items():
		result = fn(result, key, value)
	return result

__all__: Tuple[str, ...] = ('reduce', 'reduce_key_value')
