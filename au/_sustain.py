from __future__ import annotations
from typing import Iterator, Optional, TypeVar, Tuple, Union, overload

from ._utility import some, none, sphinx_build

T = TypeVar('T')
D = TypeVar('D')

class Sustain(Iterator[T]):
	r'''
	Producer repeating a single value

	Do not instantiate directly, instead use the factory
	function :func:`sustain` to create an instance.

	The :class:`Sustain` implements the :class:`python:typing.Iterator`
	protocol, so it can be used in a ``for`` loop or with :mod:`python:itertools`.
	It is also callable with no arguments,
	returning ``None`` instead of raising :class:`python:StopIteration`
	once it runs out, the same way :func:`python:iter` expects a producer.

	A bounded producer gives its value ``bound`` times and stays exhausted
	afterwards. An unbounded producer never runs out,
	bounding the consumption is up to the caller.

	Each producer keeps its own count.
	Producers are not safe to share between threads.

	>>> xs = sustain('a', 2)
	>>> xs
	sustain('a', 2)
	>>> next(xs)
	'a'
	>>> xs
	sustain('a', 1)
	>>> list(xs)
	['a']
	>>> next(xs)
	Traceback (most recent call last):
	...
	StopIteration
	>>> list(iter(sustain(5, 3), None))
	[5, 5, 5]
	'''

	__slots__ = ('_value', '_bound', '_count')

	if not sphinx_build:
		_value: T
		_bound: Optional[int]
		_count: int

	def __new__(cls, _value, _bound, _count):
		self = super().__new__(cls)
		self._value = _value
		self._bound = _bound
		self._count = _count
		return self

	def __next__(self) -> T:
		r'''
		Produce the value, or raise :class:`python:StopIteration`
		once the bound is reached

		:math:`O(1)`

		>>> xs = sustain(5, 1)
		>>> next(xs)
		5
		>>> next(xs, 'done')
		'done'
		'''
		if self.exhausted:
			raise StopIteration
		self._count += 1
		return self._value

	@overload
	def __call__(self) -> Optional[T]: ...
	@overload
	def __call__(self, default:D) -> Union[T,D]: ...
	def __call__(self, default=None):
		r'''
		Produce the value, or ``default`` once the bound is reached

		:math:`O(1)`

		>>> xs = sustain(5, 3)
		>>> [xs(), xs(), xs(), xs()]
		[5, 5, 5, None]
		>>> sustain(5, 0)('empty')
		'empty'
		'''
		return next(self, default)

	def __length_hint__(self) -> int:
		remaining = self.remaining
		if none(remaining): return NotImplemented
		return remaining

	def __repr__(self) -> str:
		if none(self._bound):
			return 'sustain({!r})'.format(self._value)
		return 'sustain({!r}, {!r})'.format(self._value, self.remaining)

	def __reduce__(self):
		r'''
		Support method for :mod:`python:pickle`

		The count is kept, so the copy resumes where the original left off.

		>>> import pickle
		>>> xs = sustain(5, 3)
		>>> next(xs)
		5
		>>> pickle.loads(pickle.dumps(xs))
		sustain(5, 2)
		'''
		return Sustain, (self._value, self._bound, self._count)

	@property
	def value(self) -> T:
		'''
		The value being repeated
		'''
		return self._value

	@property
	def bound(self) -> Optional[int]:
		'''
		The total number of values to produce, ``None`` for no limit
		'''
		return self._bound

	@property
	def count(self) -> int:
		r'''
		The number of values produced so far

		>>> xs = sustain(5)
		>>> xs(), xs()
		(5, 5)
		>>> xs.count
		2
		'''
		return self._count

	@property
	def remaining(self) -> Optional[int]:
		r'''
		The number of values left, ``None`` for an unbounded producer

		>>> sustain(5, 3).remaining
		3
		>>> sustain(5).remaining is None
		True
		'''
		if none(self._bound): return None
		return self._bound - self._count

	@property
	def exhausted(self) -> bool:
		r'''
		Check if the producer has run out

		>>> sustain(5, 0).exhausted
		True
		>>> sustain(5).exhausted
		False
		'''
		return some(self._bound) and self._count >= self._bound

def sustain(value:T, bound:Optional[int]=None) -> Sustain[T]:
	r'''
	Create a :class:`Sustain` producing ``value`` indefinitely,
	or ``bound`` times when given

	:raises TypeError: if ``bound`` is not an integer
	:raises ValueError: if ``bound`` is negative

	>>> import itertools
	>>> list(sustain(5, 3))
	[5, 5, 5]
	>>> list(itertools.islice(sustain(5), 4))
	[5, 5, 5, 5]
	>>> list(sustain(5, 0))
	[]
	>>> sustain(5, -1)
	Traceback (most recent call last):
	...
	ValueError: bound must be non-negative: -1
	'''
	if some(bound):
		if isinstance(bound, bool) or not isinstance(bound, int):
			raise TypeError('bound must be an integer, not ' + type(bound).__name__)
		if bound < 0:
			raise ValueError('bound must be non-negative: ' + str(bound))
	return Sustain(value, bound, 0)

__all__: Tuple[str, ...] = ('sustain', 'Sustain')
