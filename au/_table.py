from __future__ import annotations
from typing import Any, Hashable, List, Mapping, Optional, TypeVar, Tuple, overload

from ._utility import some, none

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')

@overload
def get(tbl:Mapping[K,V], key:K) -> Optional[V]: ...
@overload
def get(tbl:Mapping[K,V], key:K, default:V) -> V: ...
def get(tbl, key, default=None):
	r'''
	Look up ``key`` in ``tbl``

	Returns ``default`` when the key is missing or maps to ``None``.
	A missing key without a default gives ``None``, not :class:`python:KeyError`.

	:math:`O(1)` for hash maps

	>>> get({'a': 1}, 'a')
	1
	>>> get({'a': 1}, 'b') is None
	True
	>>> get({'a': 1}, 'b', 3)
	3
	>>> get({'a': None}, 'a', 3)
	3
	'''
	result = tbl.get(key)
	if none(result) and some(default):
		return default
	return result

def keys(tbl:Mapping[K,V]) -> List[K]:
	r'''
	List the keys of ``tbl``, in unspecified order

	>>> sorted(keys({'a': 1, 'b': 2}))
	['a', 'b']
	'''
	return [key for key in tbl]

def vals(tbl:Mapping[K,V]) -> List[V]:
	r'''
	List the values of ``tbl``, in unspecified order

	>>> sorted(vals({'a': 1, 'b': 2}))
	[1, 2]
	'''
	return [value for _, value in tbl.items()]

def contains_key(tbl:Mapping[K,V], key:Any) -> bool:
	'''
	>>> contains_key({'a': None}, 'a')
	True
	'''
	return key in tbl

def contains_value(tbl:Mapping[K,V], value:Any) -> bool:
	r'''
	Check if any key of ``tbl`` maps to ``value``

	:math:`O(n)`

	>>> contains_value({'a': 1}, 1)
	True
	>>> contains_value({'a': 1}, 'a')
	False
	'''
	return any(value == v for v in tbl.values())

__all__: Tuple[str, ...] = ('get', 'keys', 'vals', 'contains_key', 'contains_value')
