import au._utility
import au._function
import au._table
import au._sequence
import au._sustain
import au._reduce

import doctest
import pytest

@pytest.mark.parametrize('module', [
	au._utility, au._function, au._table,
	au._sequence, au._sustain, au._reduce,
])
def test_doctest(module):
	failures, _ = doctest.testmod(module)
	assert failures == 0
