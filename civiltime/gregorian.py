"""
# Gregorian calendar functions and data.

# Years are counted from the proleptic datum, year zero, which is aligned with the
# start of a four hundred year cycle.
"""
import operator
from . import calendar as callib
from . import core

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: number of months in a year.
months_in_year = 12

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

common_year_days = sum(calendar_year)
leap_year_days = sum(calendar_leap)

### Gregorian Cycle
# After calculation, nodes take the form:
# (title, multiplier, (years, days), (total_years, total_days), sub)
leap_cycle = (leap_year_days,) + (common_year_days,) * 3

cycle = (
	'gregorian-cycle', 1, (
		# First century; normal leap cycle throughout.
		('first-century', 25, leap_cycle),

		# Subsequent three centuries in the cycle.
		# First year in century is leap exception.
		('centuries', 3, (
			('first-years-exception', 1, (common_year_days,) * 4),
			('regular-cycle', 24, leap_cycle),
		)),
	)
)

calendar = callib.aggregate(cycle)

#: Total number of days in a Gregorian cycle.
days_in_cycle = calendar[-1][1]

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def month_lengths(year):
	"""
	# The days in each month of the given &year.
	"""
	if year_is_leap(year):
		return calendar_leap
	return calendar_year

def validate_date(year, month, day):
	"""
	# Raise &core.OutOfRange naming the first field that is not a valid
	# component of a date between the first and the ten thousandth year.
	"""
	if year < core.minimum_year or year > core.maximum_year:
		raise core.OutOfRange('year', year)
	if month < 1 or month > months_in_year:
		raise core.OutOfRange('month', month)
	if day < 1 or day > month_lengths(year)[month-1]:
		raise core.OutOfRange('day', day)

def validate_clock(hour, minute, second):
	"""
	# Raise &core.OutOfRange naming the first invalid time of day field.
	"""
	if hour < 0 or hour > 23:
		raise core.OutOfRange('hour', hour)
	if minute < 0 or minute > 59:
		raise core.OutOfRange('minute', minute)
	if second < 0 or second > 59:
		raise core.OutOfRange('second', second)

def validate(year, month, day, hour, minute, second):
	validate_date(year, month, day)
	validate_clock(hour, minute, second)

def resolve_by_years(years,
	_select_years = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return callib.resolve((_select_years, _select_days), years, _calendar)

def resolve_by_days(days,
	_select_years = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return callib.resolve((_select_days, _select_years), days, _calendar)

def days_from_year(year, _resolver=resolve_by_years):
	"""
	# Convert the given year to the number of Earth-days leading up to its first day.
	"""
	cycles, day_of_cycle, _r, _d = _resolver(year)
	return (cycles * days_in_cycle) + day_of_cycle

def year_from_days(days, _resolver=resolve_by_days):
	"""
	# Convert the given Earth-days into the year containing the day and the
	# zero-based day of that year: `(year, day)`.
	"""
	cycles, year_of_cycle, day, _d = _resolver(days)
	return ((cycles * years_in_cycle) + year_of_cycle, day)

def days_before_month(year, month):
	"""
	# The days in the &year preceding the first of &month.
	"""
	return sum(month_lengths(year)[:month-1])

def month_from_day(year, day):
	"""
	# Scan the month table of the &year with the zero-based &day of the year
	# and return the `(month, day)` pair; both one-based.
	"""
	remainder = day + 1
	for month, length in enumerate(month_lengths(year), 1):
		if remainder <= length:
			return (month, remainder)
		remainder -= length
	raise core.OutOfRange('day_of_year', day + 1)
