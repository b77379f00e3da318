from __future__ import annotations
from typing import Any, Callable, TypeVar, Tuple

from ._utility import Addable, Subtractable

T = TypeVar('T')
A = TypeVar('A', bound=Addable)
S = TypeVar('S', bound=Subtractable)

def identity(x:T) -> T:
	r'''
	Return the argument unchanged

	>>> identity(3)
	3
	'''
	return x

def inc(x:A) -> A:
	'''
	>>> inc(1)
	2
	'''
	return x + 1

def dec(x:S) -> S:
	'''
	>>> dec(1)
	0
	'''
	return x - 1

def add(a:A, b:A) -> A:
	'''
	>>> add(1, 2)
	3
	'''
	return a + b

def sub(a:S, b:S) -> S:
	'''
	>>> sub(3, 2)
	1
	'''
	return a - b

def equals(a:Any, b:Any) -> bool:
	r'''
	Compare two values with ``==``

	See :func:`equal_to` for the curried form.

	>>> equals(1, 1)
	True
	>>> equals(1, '1')
	False
	'''
	return a == b

def equal_to(a:Any) -> Callable[[Any], bool]:
	r'''
	Create a predicate testing its argument for equality with ``a``

	>>> equal_to(1)(1)
	True
	>>> [x for x in [1, 2, 1] if equal_to(1)(x)]
	[1, 1]
	'''
	def equal(b:Any) -> bool:
		return a == b
	return equal

def constantly(x:T) -> Callable[..., T]:
	r'''
	Create a function ignoring its arguments and always returning ``x``

	>>> constantly(5)()
	5
	>>> constantly(5)(1, 2, key=3)
	5
	'''
	def constant(*args:Any, **kwargs:Any) -> T:
		return x
	return constant

def complement(fn:Callable[..., Any]) -> Callable[..., bool]:
	r'''
	Create a function returning the logical negation of ``fn``

	>>> complement(bool)(0)
	True
	>>> complement(lambda x, y: x < y)(1, 2)
	False
	'''
	def negated(*args:Any, **kwargs:Any) -> bool:
		return not fn(*args, **kwargs)
	return negated

__all__: Tuple[str, ...] = ('identity', 'inc', 'dec', 'add', 'sub',
	'equals', 'equal_to', 'constantly', 'complement')
