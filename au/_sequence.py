from __future__ import annotations
from typing import Any, Callable, Dict, Hashable, Iterable, List, TypeVar, Tuple

from ._utility import some, call
from ._function import complement

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K', bound=Hashable)

# Every function taking ``fn`` calls it as ``fn(elem)``,
# or as ``fn(elem, index)`` with the 0-based position when ``indexed=True``.

def each(coll:Iterable[T], fn:Callable[..., Any], *, indexed:bool=False) -> None:
	r'''
	Call ``fn`` on every element of ``coll`` for its side effects

	>>> each([1, 2], print)
	1
	2
	>>> each(['a', 'b'], print, indexed=True)
	a 0
	b 1
	'''
	for i, elem in enumerate(coll):
		call(fn, elem, i, indexed)

def contains(coll:Iterable[T], x:Any) -> bool:
	r'''
	Check if any element of ``coll`` is equal to ``x``

	:math:`O(n)`

	>>> contains([1, 2, 3], 2)
	True
	>>> contains([], None)
	False
	'''
	for elem in coll:
		if elem == x:
			return True
	return False

def filter(coll:Iterable[T], fn:Callable[..., Any], *, indexed:bool=False) -> List[T]:
	r'''
	Create a list of the elements for which ``fn`` is truthy

	:math:`O(n)`

	>>> filter([1, 2, 3, 4], lambda x: x % 2)
	[1, 3]
	>>> filter('abcd', lambda x, i: i > 1, indexed=True)
	['c', 'd']
	'''
	result = []
	for i, elem in enumerate(coll):
		if call(fn, elem, i, indexed):
			result.append(elem)
	return result

def remove(coll:Iterable[T], fn:Callable[..., Any], *, indexed:bool=False) -> List[T]:
	r'''
	Create a list of the elements for which ``fn`` is falsy

	The opposite of :func:`filter`.

	>>> remove([1, 2, 3, 4], lambda x: x % 2)
	[2, 4]
	'''
	return filter(coll, complement(fn), indexed=indexed)

def keep(coll:Iterable[T], fn:Callable[..., Any], *, indexed:bool=False) -> List[T]:
	r'''
	Create a list of the elements for which ``fn`` does not return ``None``

	Unlike :func:`filter`, falsy results such as ``0`` or ``False`` keep the element.

	>>> keep([1, 2, 3], {1: 0, 2: None, 3: False}.get)
	[1, 3]
	>>> filter([1, 2, 3], {1: 0, 2: None, 3: False}.get)
	[]
	'''
	result = []
	for i, elem in enumerate(coll):
		if some(call(fn, elem, i, indexed)):
			result.append(elem)
	return result

def any(coll:Iterable[T], fn:Callable[..., Any], *, indexed:bool=False) -> bool:
	r'''
	Check if ``fn`` is truthy for at least one element, stopping at the first

	>>> any([1, 2, 3], lambda x: x > 2)
	True
	>>> any([], lambda x: True)
	False
	'''
	for i, elem in enumerate(coll):
		if call(fn, elem, i, indexed):
			return True
	return False

def every(coll:Iterable[T], fn:Callable[..., Any], *, indexed:bool=False) -> bool:
	r'''
	Check if ``fn`` is truthy for all elements, stopping at the first failure

	>>> every([1, 2, 3], lambda x: x > 0)
	True
	>>> every([], lambda x: False)
	True
	'''
	for i, elem in enumerate(coll):
		if not call(fn, elem, i, indexed):
			return False
	return True

def map(coll:Iterable[T], fn:Callable[..., U], *, indexed:bool=False) -> List[U]:
	r'''
	Create a list of ``fn`` applied to every element

	>>> map([1, 2, 3], lambda x: x * 10)
	[10, 20, 30]
	>>> map('ab', lambda x, i: x * (i + 1), indexed=True)
	['a', 'bb']
	'''
	return [call(fn, elem, i, indexed) for i, elem in enumerate(coll)]

def map_to(coll:Iterable[K], fn:Callable[..., U], *, indexed:bool=False) -> Dict[K,U]:
	r'''
	Create a dict mapping each element to ``fn(elem)``

	Repeated elements keep the result of their last occurrence.

	>>> map_to(['a', 'bb'], len) == {'a': 1, 'bb': 2}
	True
	'''
	result = {}
	for i, elem in enumerate(coll):
		result[elem] = call(fn, elem, i, indexed)
	return result

def map_by(coll:Iterable[T], fn:Callable[..., K], *, indexed:bool=False) -> Dict[K,T]:
	r'''
	Create a dict mapping ``fn(elem)`` to each element

	When ``fn`` gives the same key twice the later element wins.

	>>> map_by([1, 2], lambda x: x % 2) == {1: 1, 0: 2}
	True
	>>> map_by([1, 2, 3], lambda x: x % 2) == {1: 3, 0: 2}
	True
	'''
	result = {}
	for i, elem in enumerate(coll):
		result[call(fn, elem, i, indexed)] = elem
	return result

def group_by(coll:Iterable[T], fn:Callable[..., K], *, indexed:bool=False) -> Dict[K,List[T]]:
	r'''
	Partition ``coll`` by the result of ``fn``

	Each distinct key maps to the elements that produced it,
	in their original relative order.
	Only keys that actually occur are present.
	The order of the keys themselves is unspecified.

	:math:`O(n)`

	>>> group_by([1, 1, 1, 1, 2, 3, 4, 5], lambda x: x == 1) == {True: [1, 1, 1, 1], False: [2, 3, 4, 5]}
	True
	>>> group_by([], len)
	{}
	'''
	result: Dict[K,List[T]] = {}
	for i, elem in enumerate(coll):
		group = call(fn, elem, i, indexed)
		if group not in result:
			result[group] = []
		result[group].append(elem)
	return result

__all__: Tuple[str, ...] = ('each', 'contains', 'filter', 'remove', 'keep',
	'any', 'every', 'map', 'map_to', 'map_by', 'group_by')
