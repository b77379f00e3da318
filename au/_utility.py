from abc import abstractmethod
from typing import Any, cast
from typing_extensions import Protocol

import builtins

NOTHING = cast(Any, object())

class Addable(Protocol):
	@abstractmethod
	def __add__(self, other: Any) -> Any: ...

class Subtractable(Protocol):
	@abstractmethod
	def __sub__(self, other: Any) -> Any: ...

def some(x:Any) -> bool:
	r'''
	Check if a value is present

	Falsy values such as ``0``, ``False`` and ``''`` are present,
	only ``None`` is absent.

	>>> some(0)
	True
	>>> some(None)
	False
	'''
	return x is not None

def none(x:Any) -> bool:
	r'''
	Check if a value is absent

	>>> none(None)
	True
	>>> none(False)
	False
	'''
	return x is None

def call(fn, elem, index:int, indexed:bool):
	if indexed: return fn(elem, index)
	return fn(elem)

sphinx_build: bool = getattr(builtins, '__sphinx_build__', False)
