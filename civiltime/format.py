"""
# Format and parse datetime strings using `%` directive templates.

# Primarily this module exposes &render, for producing strings from civil fields,
# and &parse, for reading civil fields from strings. Parsing has two modes:
# &Mode.strict requires fixed width, zero padded fields, and &Mode.extended
# tolerates variable width fields guided by the template's separators.

# While rendering can occur without error, parsing strings can result in a variety of
# errors. The parsers raise subclasses of &.core.ParseError.

# [ Directives ]

# /`%Y`/
	# Four digit year.
# /`%y`/
	# Two digit year.
# /`%m`/
	# Two digit month.
# /`%d`/
	# Two digit day of month.
# /`%H`/
	# Two digit hour of a 24-hour clock.
# /`%I`/
	# Two digit hour of a 12-hour clock.
# /`%M`/
	# Two digit minute.
# /`%S`/
	# Two digit second.
# /`%j`/
	# Three digit day of the year.
# /`%p`/
	# `AM` or `PM`.
# /`%U`/
	# Two digit week of the year; weeks start on Sunday.
# /`%W`/
	# Two digit week of the year; weeks start on Monday.
# /`%w`/
	# Weekday; Sunday is zero.
# /`%%`/
	# Literal percent sign.

# Only the year, month, day, hour, minute, and second directives can be parsed.
# Unknown directives are rendered as the directive character itself, but cause
# &core.UnknownDirective to be raised by the parsers.
"""
import enum
import functools

from . import core
from . import gregorian
from . import conversion
from . import week

#: The canonical template.
standard = "%Y/%m/%d %H:%M:%S"

class Directive(enum.Enum):
	year = 'Y'
	short_year = 'y'
	month = 'm'
	day = 'd'
	hour = 'H'
	hour12 = 'I'
	minute = 'M'
	second = 'S'
	day_of_year = 'j'
	meridiem = 'p'
	week_sunday = 'U'
	week_monday = 'W'
	weekday_sunday = 'w'
	percent = '%'

class Mode(enum.Enum):
	strict = 'strict'
	extended = 'extended'

#: Character to &Directive.
directives = {x.value: x for x in Directive}

#: Maximum digits read and the padding applied to rendered numbers.
widths = {
	Directive.year: 4,
	Directive.short_year: 2,
	Directive.month: 2,
	Directive.day: 2,
	Directive.hour: 2,
	Directive.hour12: 2,
	Directive.minute: 2,
	Directive.second: 2,
	Directive.day_of_year: 3,
	Directive.week_sunday: 2,
	Directive.week_monday: 2,
	Directive.weekday_sunday: 1,
}

#: Directives that can be parsed and the &core.RawFields field that they assign.
parseable = {
	Directive.year: 'year',
	Directive.month: 'month',
	Directive.day: 'day',
	Directive.hour: 'hour',
	Directive.minute: 'minute',
	Directive.second: 'second',
}

#: Directives that require the instant in order to be rendered.
derived = frozenset((
	Directive.week_sunday,
	Directive.week_monday,
	Directive.weekday_sunday,
))

def pad(value, width):
	"""
	# Zero pad the decimal representation of &value to &width characters.
	"""
	if value < 0:
		return '-' + str(-value).rjust(width - 1, '0')
	return str(value).rjust(width, '0')

def _hour12(hour):
	return (hour % 12) or 12

renderers = {
	Directive.year: lambda f, i, o: pad(f.year, 4),
	Directive.short_year: lambda f, i, o: pad(f.year % 100, 2),
	Directive.month: lambda f, i, o: pad(f.month, 2),
	Directive.day: lambda f, i, o: pad(f.day, 2),
	Directive.hour: lambda f, i, o: pad(f.hour, 2),
	Directive.hour12: lambda f, i, o: pad(_hour12(f.hour), 2),
	Directive.minute: lambda f, i, o: pad(f.minute, 2),
	Directive.second: lambda f, i, o: pad(f.second, 2),
	Directive.day_of_year: lambda f, i, o: pad(f.day_of_year, 3),
	Directive.meridiem: lambda f, i, o: 'AM' if f.hour < 12 else 'PM',
	Directive.week_sunday: lambda f, i, o: pad(week.week_number(i, o, week.sunday), 2),
	Directive.week_monday: lambda f, i, o: pad(week.week_number(i, o, week.monday), 2),
	Directive.weekday_sunday: lambda f, i, o: pad(week.weekday_sunday_start(i, o), 1),
	Directive.percent: lambda f, i, o: '%',
}

def scan(template, len=len):
	"""
	# Produce the tokens of the &template: `(position, Directive)` pairs for
	# recognized directives, `(position, str)` pairs for literal characters, and
	# `(position, None)` pairs for unknown directives.

	# A trailing lone `%` produces no token.
	"""
	length = len(template)
	i = 0
	while i < length:
		c = template[i]
		if c == '%':
			if i + 1 == length:
				break
			yield (i, directives.get(template[i+1]))
			i += 2
		else:
			yield (i, c)
			i += 1

def render(fields:core.Fields, template:str=standard, instant=None, offset=0) -> str:
	"""
	# Render the civil &fields using the &template.

	# The week directives are derived from the &instant and &offset. When &instant
	# is &None, it is recovered from &fields if the template needs it.
	"""
	out = []
	for position, token in scan(template):
		if token is None:
			# Pass-through unknown directive characters.
			out.append(template[position+1])
		elif isinstance(token, str):
			out.append(token)
		else:
			if instant is None and token in derived:
				days = conversion.days_from_date(fields.year, fields.month, fields.day)
				instant = (days * core.day_seconds) + fields.second_of_day - offset
			out.append(renderers[token](fields, instant, offset))
	return ''.join(out)

def _check(raw, text, template):
	try:
		gregorian.validate(*raw)
	except core.OutOfRange as err:
		raise core.InvalidCalendarValue(text, template, len(template)) from err
	return raw

def _directive(token, position, text, template):
	if token is None or (token is not Directive.percent and token not in parseable):
		raise core.UnknownDirective(text, template, position)
	return token

def parse_strict(text:str, template:str=standard) -> core.RawFields:
	"""
	# Read the fields of &text using the &template requiring each directive to
	# occupy exactly its width and each literal to be present.
	"""
	fields = {}
	pos = 0
	tlen = len(text)

	for position, token in scan(template):
		if not isinstance(token, str):
			token = _directive(token, position, text, template)
			if token is Directive.percent:
				token = '%'

		if isinstance(token, str):
			if pos >= tlen or text[pos] != token:
				raise core.SeparatorMismatch(text, template, position)
			pos += 1
			continue

		end = pos + widths[token]
		if end > tlen:
			raise core.InsufficientLength(text, template, position)

		digits = text[pos:end]
		if not (digits.isascii() and digits.isdigit()):
			raise core.NotNumeric(text, template, position)

		fields[parseable[token]] = int(digits)
		pos = end

	return _check(core.RawFields(**fields), text, template)

class Digits(object):
	"""
	# Cursor reading runs of ASCII digits from a string.
	"""
	__slots__ = ('text', 'position')

	def __init__(self, text, position=0):
		self.text = text
		self.position = position

	@staticmethod
	def isdigit(c):
		return '0' <= c <= '9'

	def seek(self):
		"""
		# The index of the next digit at or after the cursor; &None if there is none.
		"""
		text = self.text
		for i in range(self.position, len(text)):
			if self.isdigit(text[i]):
				return i
		return None

	def read(self, start, width=0):
		"""
		# Consume the digits at &start, at most &width of them when non-zero,
		# and move the cursor after them.
		"""
		text = self.text
		end = start
		while end < len(text) and self.isdigit(text[end]) and (not width or end - start < width):
			end += 1
		self.position = end
		return int(text[start:end])

	def next(self, width=0):
		"""
		# The next number in the text or &None if no digits remain.
		"""
		start = self.seek()
		if start is None:
			return None
		return self.read(start, width)

	def numbers(self):
		"""
		# Consume all the remaining numbers.
		"""
		return list(iter(self.next, None))

def parse_extended(text:str, template:str=standard) -> core.RawFields:
	"""
	# Read the fields of &text using the &template permitting fields of variable width.

	# Literal characters are not compared; rather, the count of literals preceding a
	# directive is the exact number of characters that must precede its digits.
	# Without preceding literals, any non-digit characters are skipped.
	"""
	fields = {}
	digits = Digits(text)
	jump = 0

	for position, token in scan(template):
		if not isinstance(token, str):
			token = _directive(token, position, text, template)
			if token is Directive.percent:
				token = '%'

		if isinstance(token, str):
			jump += 1
			continue

		start = digits.seek()
		if start is None:
			raise core.NumberNotFound(text, template, position)
		if jump and start - digits.position != jump:
			raise core.JumpMismatch(text, template, position)

		fields[parseable[token]] = digits.read(start, widths[token])
		jump = 0

	return _check(core.RawFields(**fields), text, template)

parsers = {
	Mode.strict: parse_strict,
	Mode.extended: parse_extended,
}

def parse(text:str, template:str=standard, mode:Mode=Mode.strict) -> core.RawFields:
	"""
	# Read the fields of &text using the parser of the given &mode.
	"""
	return parsers[mode](text, template)

def parser(template=standard, mode=Mode.strict):
	"""
	# Given a template and a mode, return the function that can be used to parse
	# strings into &core.RawFields.
	"""
	return functools.partial(parsers[mode], template=template)

def formatter(template=standard):
	"""
	# Given a template, return the function that can be used to render &core.Fields.
	"""
	return functools.partial(render, template=template)
