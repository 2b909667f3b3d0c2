"""
# Owned point in time with cached civil fields.

# A &Moment pairs an instant with an offset and keeps the fields of the pair.
# The fields are recomputed only when the instant or offset changes, and changes
# only occur through the update methods; there is no process wide moment.

#!python
	m = moment.Moment.now(offset=0)
	m.refresh()
	print(m.standard(), m.weekday())
"""
from . import core
from . import clock
from . import conversion
from . import format
from . import week
from . import library

class Moment(object):
	"""
	# Instant, offset, and the civil fields of the pair.
	"""
	__slots__ = ('instant', 'offset', 'fields')

	def __init__(self, instant=0, offset=0):
		self.instant = instant
		self.offset = offset
		self.fields = conversion.instant_to_fields(instant, offset)

	def __repr__(self):
		return "%s(%r, %r)" % (self.__class__.__name__, self.instant, self.offset)

	def __eq__(self, operand):
		if not isinstance(operand, Moment):
			return NotImplemented
		return (self.instant, self.offset) == (operand.instant, operand.offset)

	__hash__ = None

	@classmethod
	def now(Class, offset=None, source=clock.system):
		"""
		# Construct the moment of the &source clock's current instant.
		# When &offset is &None, the host's current offset is used.
		"""
		if offset is None:
			offset = clock.local_offset()
		return Class(source.real()[0], offset)

	@classmethod
	def of(Class, year, month, day, hour=0, minute=0, second=0, offset=0):
		"""
		# Construct the moment from civil fields observed under &offset.
		"""
		m = Class.__new__(Class)
		m.offset = offset
		m.instant = None
		m.update_fields(year, month, day, hour, minute, second)
		return m

	@classmethod
	def parse(Class, text, template=format.standard, offset=0, mode=format.Mode.strict):
		"""
		# Construct the moment from &text written using &template.
		"""
		return Class.of(*format.parse(text, template, mode), offset=offset)

	def update(self, instant):
		"""
		# Move the moment to &instant.
		"""
		if instant != self.instant:
			self.instant = instant
			self.fields = conversion.instant_to_fields(instant, self.offset)
		return self

	def refresh(self, source=clock.system):
		"""
		# Move the moment to the current instant of the &source clock.
		"""
		return self.update(source.real()[0])

	def update_fields(self, year, month, day, hour=0, minute=0, second=0):
		"""
		# Move the moment to the instant of the given fields.
		# Raises &core.OutOfRange and leaves the moment unchanged if a field is invalid.
		"""
		c = conversion.fields_to_instant(year, month, day, hour, minute, second, self.offset)
		if c.instant != self.instant:
			self.instant = c.instant
			self.fields = core.Fields(year, month, day, hour, minute, second, c.day_of_year, c.second_of_day)
		return self

	def update_text(self, text, template=format.standard, mode=format.Mode.strict):
		"""
		# Move the moment to the instant read from &text.
		"""
		return self.update_fields(*format.parse(text, template, mode))

	def localize(self, offset):
		"""
		# Observe the same instant under a different &offset.
		"""
		if offset != self.offset:
			self.offset = offset
			self.fields = conversion.instant_to_fields(self.instant, offset)
		return self

	def select(self, *names):
		"""
		# Retrieve the named fields as a tuple.
		"""
		return tuple(getattr(self.fields, x) for x in names)

	@property
	def year(self):
		return self.fields.year

	@property
	def month(self):
		return self.fields.month

	@property
	def day(self):
		return self.fields.day

	@property
	def hour(self):
		return self.fields.hour

	@property
	def minute(self):
		return self.fields.minute

	@property
	def second(self):
		return self.fields.second

	@property
	def day_of_year(self):
		return self.fields.day_of_year

	@property
	def second_of_day(self):
		return self.fields.second_of_day

	def render(self, template):
		return format.render(self.fields, template, self.instant, self.offset)

	def standard(self):
		return self.render(format.standard)

	def weekday(self, start=week.monday):
		return week.weekday(self.instant, self.offset, start)

	def week_number(self, start=week.monday):
		return week.week_number(self.instant, self.offset, start)

	def day_number(self):
		return week.day_number(self.instant, self.offset)

	def year_start(self):
		return library.year_start(self.instant, self.offset)

	def month_start(self):
		return library.month_start(self.instant, self.offset)

	def day_start(self):
		return library.day_start(self.instant, self.offset)

	def hour_start(self):
		return library.hour_start(self.instant)

	def days_ahead(self, days, hour=0, minute=0, second=0):
		return library.days_ahead(self.instant, days, hour, minute, second, self.offset)

	def next_weekday(self, week, hour=0, minute=0, second=0, start=week.monday):
		return library.next_weekday(self.instant, week, hour, minute, second, self.offset, start)

	def future_weekday(self, week, hour=0, minute=0, second=0, start=week.monday):
		return library.future_weekday(self.instant, week, hour, minute, second, self.offset, start)
