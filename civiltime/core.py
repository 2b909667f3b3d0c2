"""
# Constants, value types, and exceptions shared by the civil time modules.

# [ Elements ]

# /Fields/
	# The civil fields of an instant under an offset.
# /Conversion/
	# The result of converting civil fields into an instant.
# /RawFields/
	# The calendar and clock fields read from a string by &.format.
# /OutOfRange/
	# A calendar or clock field, or a week index, outside of its legal domain.
# /ParseError/
	# Base class of the errors raised by the parsers in &.format.
"""
import typing

#: Seconds in a minute.
minute_seconds = 60

#: Seconds in an hour.
hour_seconds = 60 * minute_seconds

#: Seconds in an Earth-day.
day_seconds = 24 * hour_seconds

#: Seconds in a week.
week_seconds = 7 * day_seconds

#: Year of the epoch; instant zero is January first of this year at midnight.
epoch_year = 1970

#: Limits of the representable calendar years.
minimum_year = 1
maximum_year = 9999

class Fields(typing.NamedTuple):
	"""
	# The civil moment of an instant. (&year, &month, &day, &hour, &minute, &second)
	# and (&day_of_year, &second_of_day) are two encodings of the same moment and
	# are always produced together.
	"""
	year: int
	month: int
	day: int
	hour: int
	minute: int
	second: int
	day_of_year: int
	second_of_day: int

	@property
	def date(self):
		return (self.year, self.month, self.day)

	@property
	def timeofday(self):
		return (self.hour, self.minute, self.second)

	@property
	def datetime(self):
		return self[:6]

class Conversion(typing.NamedTuple):
	instant: int
	day_of_year: int
	second_of_day: int

class RawFields(typing.NamedTuple):
	year: int = 0
	month: int = 0
	day: int = 0
	hour: int = 0
	minute: int = 0
	second: int = 0

class Error(Exception):
	"""
	# Base class for civil time errors.
	"""

class RangeError(Error, ValueError):
	"""
	# A value given to a conversion or query was outside of its domain.
	"""

class OutOfRange(RangeError):
	"""
	# The named &field was assigned a &value outside of its legal domain.
	"""

	def __init__(self, field, value):
		super().__init__(field, value)
		self.field = field
		self.value = value

	def __str__(self):
		return "out of range %s=%r" % (self.field, self.value)

class ParseError(Error, ValueError):
	"""
	# The &text could not be read using the &template.

	# &position is the index of the template character being processed
	# when the failure was identified.
	"""
	description = "could not parse"

	def __init__(self, text, template, position=None):
		super().__init__(text, template, position)
		self.text = text
		self.template = template
		self.position = position

	def __str__(self):
		return "%s %r with %r at template position %r" % (
			self.description, self.text, self.template, self.position
		)

class InsufficientLength(ParseError):
	description = "text exhausted before the directive's width was read"

class NotNumeric(ParseError):
	description = "non-digit characters in the directive's field"

class SeparatorMismatch(ParseError):
	description = "literal template character not found"

class JumpMismatch(ParseError):
	description = "separator gap does not match the template"

class NumberNotFound(ParseError):
	description = "no digits for the directive"

class UnknownDirective(ParseError):
	description = "directive cannot be parsed"

class InvalidCalendarValue(ParseError):
	description = "parsed fields are not a valid date and time"
