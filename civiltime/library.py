"""
# Primary public module.

# Provides the conversion and formatting functions along with the queries built
# on them: period starts and weekday searches.

#!python
	from civiltime import library as libcivil

	ts = libcivil.parse_instant("2021/06/09 14:30:00", offset=3600)
	assert libcivil.canonical(libcivil.day_start(ts, 3600), 3600) == "2021/06/09 00:00:00"

	# The coming Monday, at nine.
	monday = libcivil.future_weekday(ts, 1, 9, 0, 0, offset=3600)
"""
from . import core
from . import calendar
from . import gregorian

from .core import Fields, Conversion, RawFields, Error, RangeError, OutOfRange, ParseError
from .conversion import fields_to_instant, instant_to_fields
from .format import Mode, render, parse
from .format import standard as standard_template
from .week import monday, sunday, check_weekday, weekday, weekday_monday_start, weekday_sunday_start
from .week import day_number, week_number, week_number_monday_start, week_number_sunday_start

__shortname__ = 'libcivil'

def year_start(instant, offset=0, day_seconds=core.day_seconds):
	"""
	# The instant of the local midnight starting the year containing &instant.
	"""
	f = instant_to_fields(instant, offset)
	return instant - (((f.day_of_year - 1) * day_seconds) + f.second_of_day)

def month_start(instant, offset=0, day_seconds=core.day_seconds):
	"""
	# The instant of the local midnight starting the month containing &instant.
	"""
	f = instant_to_fields(instant, offset)
	return instant - (((f.day - 1) * day_seconds) + f.second_of_day)

def day_start(instant, offset=0, split=calendar.floor_divmod):
	"""
	# The instant of the local midnight starting the day containing &instant.
	"""
	return instant - split(instant + offset, core.day_seconds)[1]

def hour_start(instant, split=calendar.floor_divmod):
	"""
	# The instant starting the hour containing &instant.

	# The truncation is applied to the instant directly; no offset is taken.
	"""
	return instant - split(instant, core.hour_seconds)[1]

def _clock(hour, minute, second):
	gregorian.validate_clock(hour, minute, second)
	return (hour * core.hour_seconds) + (minute * core.minute_seconds) + second

def this_day(instant, hour, minute, second, offset=0):
	"""
	# The given time of day on the local day containing &instant.
	"""
	return day_start(instant, offset) + _clock(hour, minute, second)

def days_ahead(instant, days, hour, minute, second, offset=0):
	"""
	# The given time of day on the local day &days after the one containing &instant.
	"""
	tod = _clock(hour, minute, second)
	return day_start(instant, offset) + (days * core.day_seconds) + tod

def next_weekday(instant, week, hour=0, minute=0, second=0, offset=0, start=monday):
	"""
	# The time of day on the given weekday of the week following the one
	# containing &instant.

	# &week is numbered according to the &start convention. The result is never
	# on the day of &instant, even when its weekday is &week.
	"""
	check_weekday(week, start)
	tod = _clock(hour, minute, second)
	days = week - weekday(instant, offset, start)
	return day_start(instant, offset) + core.week_seconds + (days * core.day_seconds) + tod

def future_weekday(instant, week, hour=0, minute=0, second=0, offset=0, start=monday):
	"""
	# The nearest instant after &instant falling on the given weekday at the
	# given time of day.

	# When &instant is on the requested weekday, the result is on the same day if the
	# time of day has not yet passed; otherwise, it is a week later.
	"""
	check_weekday(week, start)
	tod = _clock(hour, minute, second)
	days = week - weekday(instant, offset, start)

	target = day_start(instant, offset) + (days * core.day_seconds) + tod
	if days < 0 or (days == 0 and target <= instant):
		target += core.week_seconds
	return target

def next_weekday_monday_start(instant, week, hour=0, minute=0, second=0, offset=0):
	return next_weekday(instant, week, hour, minute, second, offset, monday)

def next_weekday_sunday_start(instant, week, hour=0, minute=0, second=0, offset=0):
	return next_weekday(instant, week, hour, minute, second, offset, sunday)

def future_weekday_monday_start(instant, week, hour=0, minute=0, second=0, offset=0):
	return future_weekday(instant, week, hour, minute, second, offset, monday)

def future_weekday_sunday_start(instant, week, hour=0, minute=0, second=0, offset=0):
	return future_weekday(instant, week, hour, minute, second, offset, sunday)

def format_instant(instant, offset=0, template=standard_template) -> str:
	"""
	# Render the &instant observed under &offset using &template.
	"""
	return render(instant_to_fields(instant, offset), template, instant, offset)

def canonical(instant, offset=0) -> str:
	"""
	# Render the &instant using the canonical template, `%Y/%m/%d %H:%M:%S`.
	"""
	return format_instant(instant, offset, standard_template)

def parse_instant(text, template=standard_template, offset=0, mode=Mode.strict) -> int:
	"""
	# Read the instant from &text written using &template and observed under &offset.
	"""
	return fields_to_instant(*parse(text, template, mode), offset=offset).instant
