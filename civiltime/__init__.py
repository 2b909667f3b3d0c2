"""
# [ About ]

# civiltime converts between instants, signed integer seconds relative to
# 1970-01-01T00:00:00, and the civil fields observed under a fixed offset in
# seconds. The calendar rules are computed directly; the standard library's
# datetime module is not used.

# Calendar Support:

	# - Proleptic Gregorian, years one through 9999.

# The surface functionality is provided by &.library:

#!/pl/python
	from civiltime import library as libcivil

# [ Conversion ]

#!/pl/python
	c = libcivil.fields_to_instant(2000, 2, 29, 12, 0, 0, offset=-18000)
	f = libcivil.instant_to_fields(c.instant, -18000)
	assert f.datetime == (2000, 2, 29, 12, 0, 0)
	assert f.day_of_year == c.day_of_year == 60

# Invalid fields are not normalized; &.core.OutOfRange is raised naming the field.

# [ Formatting ]

#!/pl/python
	text = libcivil.canonical(0)
	assert text == "1970/01/01 00:00:00"
	assert libcivil.parse_instant(text) == 0

	# Variable width fields.
	libcivil.parse("2020/1/1 0:1:1", mode=libcivil.Mode.extended)

# [ Queries ]

#!/pl/python
	assert libcivil.weekday_monday_start(0) == 4 # Thursday
	midnight = libcivil.day_start(ts, offset)
	friday = libcivil.future_weekday(ts, 5, 17, 0, 0, offset)

# [ Moments ]

# &.moment.Moment keeps the fields of an instant and refreshes them on request:

#!/pl/python
	from civiltime import moment
	m = moment.Moment.now()
	m.refresh()
	print(m.standard())
"""
