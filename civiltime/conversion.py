"""
# Conversion between instants and civil fields.

# Instants are integer seconds relative to &core.epoch_year; civil fields are the
# proleptic gregorian date and time of day after the offset has been applied.

#!python
	c = conversion.fields_to_instant(1970, 1, 2, 0, 0, 0, offset=3600)
	assert c.instant == 86400 - 3600
	assert conversion.instant_to_fields(c.instant, 3600).date == (1970, 1, 2)
"""
from . import core
from . import calendar
from . import gregorian

#: Days from the gregorian datum to the epoch.
epoch_days = gregorian.days_from_year(core.epoch_year)

def days_from_date(year, month, day, epoch=epoch_days):
	"""
	# Number of days between the epoch and the given date; negative before the epoch.
	"""
	return gregorian.days_from_year(year) - epoch + gregorian.days_before_month(year, month) + day - 1

def date_from_days(days, epoch=epoch_days):
	"""
	# The `(year, month, day, day_of_year)` of the given days relative to the epoch.
	"""
	year, day_of_year = gregorian.year_from_days(days + epoch)
	month, day = gregorian.month_from_day(year, day_of_year)
	return (year, month, day, day_of_year + 1)

def fields_to_instant(year, month, day, hour, minute, second, offset=0,
		day_seconds=core.day_seconds,
		hour_seconds=core.hour_seconds,
		minute_seconds=core.minute_seconds,
	) -> core.Conversion:
	"""
	# Convert civil fields observed under &offset into an instant.

	# Raises &core.OutOfRange when a field is not valid; the error names the field.

	# [ Returns ]
	# &core.Conversion holding the instant, the one-based day of the year,
	# and the second of the day.
	"""
	gregorian.validate(year, month, day, hour, minute, second)

	day_of_year = gregorian.days_before_month(year, month) + day
	days = gregorian.days_from_year(year) - epoch_days + day_of_year - 1
	second_of_day = (hour * hour_seconds) + (minute * minute_seconds) + second

	local = (days * day_seconds) + second_of_day
	return core.Conversion(local - offset, day_of_year, second_of_day)

def instant_to_fields(instant, offset=0,
		split=calendar.floor_divmod,
		day_seconds=core.day_seconds,
		hour_seconds=core.hour_seconds,
		minute_seconds=core.minute_seconds,
		Fields=core.Fields,
	) -> core.Fields:
	"""
	# Convert the &instant into the civil fields observed under &offset.

	# Every integer maps to a field set; days before the epoch are
	# resolved with floor division so the second of the day is never negative.
	"""
	days, second_of_day = split(instant + offset, day_seconds)
	year, month, day, day_of_year = date_from_days(days)

	hour, remainder = divmod(second_of_day, hour_seconds)
	minute, second = divmod(remainder, minute_seconds)

	return Fields(year, month, day, hour, minute, second, day_of_year, second_of_day)
