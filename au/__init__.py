from typing import Tuple

from ._version import __version__
from ._utility import some, none, Addable, Subtractable
from ._function import identity, inc, dec, add, sub, \
	equals, equal_to, constantly, complement
from ._table import get, keys, vals, contains_key, contains_value
from ._sequence import each, contains, filter, remove, keep, \
	any, every, map, map_to, map_by, group_by
from ._sustain import sustain, Sustain
from ._reduce import reduce, reduce_key_value

from . import _function, _table, _sequence, _sustain, _reduce
from ._utility import sphinx_build

__all__: Tuple[str, ...] = ('some', 'none') \
	+ _function.__all__ + _table.__all__ + _sequence.__all__ \
	+ _sustain.__all__ + _reduce.__all__
if sphinx_build: __all__ += ('Addable', 'Subtractable')
