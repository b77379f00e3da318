from __future__ import annotations

from typing import *

from ._utility import NOTHING, none
from ._sustain import Sustain, sustain

from lenses import hooks

T = TypeVar('T')

@hooks.to_iter.register(Sustain)
def _sustain_to_iter(self:Sustain[T]) -> Iterator[T]:
	remaining = self.remaining
	if none(remaining):
		raise TypeError('cannot list the values of an unbounded sustain')
	return iter([self.value] * remaining)

@hooks.from_iter.register(Sustain)
def _sustain_from_iter(self:Sustain[Any], items:Iterable[T]) -> Sustain[T]:
	items = iter(items)
	value = next(items, NOTHING)
	if value is NOTHING:
		return sustain(self.value, 0)
	count = 1
	for item in items:
		if item != value:
			raise ValueError('sustain needs identical values: {!r} != {!r}'.format(item, value))
		count += 1
	return sustain(value, count)
