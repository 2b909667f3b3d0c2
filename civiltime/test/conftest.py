"""
# Contention fixture for the civiltime tests.

# Test functions receive a &Test instance named `test` and state their
# expectations with the true division operator:

#!syntax/python
	def test_feature(test):
		test/library.weekday_monday_start(0) == 4
		with test/core.OutOfRange as exc:
			conversion.fields_to_instant(2023, 2, 29, 0, 0, 0)
		test/exc().field == 'day'
"""
import builtins
import operator
import functools

import pytest

class Absurdity(AssertionError):
	"""
	# Raised by &Contention instances when the stated comparison does not hold.
	"""

	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter):
		super().__init__(operator, former, latter)
		self.operator = operator
		self.former = former
		self.latter = latter

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		return ' '.join((repr(self.former), opchars, repr(self.latter)))

class Contention(object):
	"""
	# Comparison subject constructed by `test/subject`.

	# Comparisons with the subject raise &Absurdity when they are false.
	# As a context manager, the subject is the exception type to trap and
	# the bound accessor returns the trapped exception.
	"""
	__slots__ = ('test', 'object', 'storage')

	def __init__(self, test, object):
		self.test = test
		self.object = object

	def _check(self, ob, opname, op):
		if not op(self.object, ob):
			raise self.test.Absurdity(opname, self.object, ob)

	__eq__ = functools.partialmethod(_check, opname='__eq__', op=operator.eq)
	__ne__ = functools.partialmethod(_check, opname='__ne__', op=operator.ne)
	__lt__ = functools.partialmethod(_check, opname='__lt__', op=operator.lt)
	__gt__ = functools.partialmethod(_check, opname='__gt__', op=operator.gt)
	__le__ = functools.partialmethod(_check, opname='__le__', op=operator.le)
	__ge__ = functools.partialmethod(_check, opname='__ge__', op=operator.ge)
	__mod__ = functools.partialmethod(_check, opname='__mod__', op=operator.is_)
	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		self.storage = val
		if not isinstance(val, self.object):
			raise self.test.Absurdity("isinstance", val, self.object)
		return True # Trapped.

class Test(object):
	"""
	# Constructs &Contention instances for the test named by &identifier.
	"""
	__slots__ = ('identifier',)

	Absurdity = Absurdity
	Contention = Contention

	def __init__(self, identifier):
		self.identifier = identifier

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def isinstance(self, object, types):
		if not builtins.isinstance(object, types):
			raise self.Absurdity("isinstance", object, types)

@pytest.fixture
def test(request):
	return Test(request.node.nodeid)
