"""
# Week based measures of time: days of seven.

# Two numbering conventions are supported. With the &monday convention, days are
# numbered from Monday, 1, through Sunday, 7. With the &sunday convention, days are
# numbered from Sunday, 0, through Saturday, 6.
"""
from . import core
from . import calendar
from . import conversion

#: Total number of a days in a week.
days_in_week = 7

#: Weekday number of the epoch's day, Thursday, under the &monday convention.
epoch_weekday = 4

#: Conventions identifying the first day of the week.
monday = 'monday'
sunday = 'sunday'

#: The weekday number of the day anchoring week one under each convention.
week_anchors = {
	monday: 1,
	sunday: 0,
}

#: The weekday numbers valid for each convention.
weekday_ranges = {
	monday: range(1, 8),
	sunday: range(0, 7),
}

def weekday_monday_start(instant, offset=0,
		split=calendar.floor_divmod,
		week_seconds=core.week_seconds,
		day_seconds=core.day_seconds,
	):
	"""
	# The day of the week observed under &offset; Monday is 1, Sunday is 7.
	"""
	_w, position = split(instant + offset, week_seconds)
	weekday = (position // day_seconds) + epoch_weekday
	if weekday > days_in_week:
		weekday -= days_in_week
	return weekday

def weekday_sunday_start(instant, offset=0):
	"""
	# The day of the week observed under &offset; Sunday is 0, Saturday is 6.
	"""
	weekday = weekday_monday_start(instant, offset)
	if weekday == days_in_week:
		return 0
	return weekday

conventions = {
	monday: weekday_monday_start,
	sunday: weekday_sunday_start,
}

def weekday(instant, offset=0, start=monday):
	"""
	# The day of the week according to the convention identified by &start.
	"""
	return conventions[start](instant, offset)

def day_number(instant, offset=0, split=calendar.floor_divmod):
	"""
	# Days since the epoch observed under &offset; negative before the epoch.
	"""
	return split(instant + offset, core.day_seconds)[0]

def week_number(instant, offset=0, start=monday,
		day_seconds=core.day_seconds,
		week_seconds=core.week_seconds,
	):
	"""
	# The week of the year containing &instant.

	# Days before the first anchor weekday of the year are in week zero.
	# A year starting on the anchor weekday starts in week one.
	"""
	fields = conversion.instant_to_fields(instant, offset)
	elapsed = ((fields.day_of_year - 1) * day_seconds) + fields.second_of_day
	first = instant - elapsed
	shift = (weekday(first, offset, start) - week_anchors[start]) or days_in_week
	return (elapsed + (shift * day_seconds)) // week_seconds

def week_number_monday_start(instant, offset=0):
	return week_number(instant, offset, monday)

def week_number_sunday_start(instant, offset=0):
	return week_number(instant, offset, sunday)

def check_weekday(week, start=monday):
	"""
	# Raise &core.OutOfRange when &week is not a weekday number of the convention.
	"""
	if week not in weekday_ranges[start]:
		raise core.OutOfRange('week', week)
