from .. import core
from .. import conversion
from .. import format as module

#: 2021-01-03T13:05:09, a Sunday.
sunday = 1609679109

def test_standard(test):
	test/module.standard == "%Y/%m/%d %H:%M:%S"
	f = conversion.instant_to_fields(sunday)
	test/module.render(f) == "2021/01/03 13:05:09"
	test/module.render(conversion.instant_to_fields(-1)) == "1969/12/31 23:59:59"

def test_render_directives(test):
	f = conversion.instant_to_fields(sunday)
	template = "%Y %y %m %d %H %I %M %S %j %p %U %W %w %%"
	expected = "2021 21 01 03 13 01 05 09 003 PM 01 00 0 %"
	test/module.render(f, template, sunday) == expected
	# Instant recovered from the fields.
	test/module.render(f, template) == expected

def test_render_twelve_hour_clock(test):
	midnight = conversion.instant_to_fields(sunday - 47109)
	test/module.render(midnight, "%I:%M %p") == "12:00 AM"
	noon = conversion.instant_to_fields(sunday - 47109 + 43200)
	test/module.render(noon, "%I:%M %p") == "12:00 PM"
	evening = conversion.instant_to_fields(sunday - 47109 + (23 * 3600))
	test/module.render(evening, "%H %I %p") == "23 11 PM"

def test_render_offset(test):
	f = conversion.instant_to_fields(sunday, -50400)
	test/module.render(f, "%Y-%m-%d %H %w", sunday, -50400) == "2021-01-02 23 6"

def test_render_unknown_directive(test):
	f = conversion.instant_to_fields(sunday)
	test/module.render(f, "%Q-%Y") == "Q-2021"
	test/module.render(f, "[%Y]%") == "[2021]"
	test/module.render(f, "%") == ""
	test/module.render(f, "") == ""

def test_render_unbounded_years(test):
	"""
	# Fields outside years 1 through 9999 render the week directives
	# without an instant.
	"""
	template = "%Y %U %W %w"
	# 10000-01-01, a Saturday.
	after = 253402300800
	f = conversion.instant_to_fields(after)
	test/module.render(f, template) == "10000 00 00 6"
	test/module.render(f, template) == module.render(f, template, after)

	# 0000-12-31T23:59:59 observed at +01:00.
	before = -62135596800 - 3601
	f = conversion.instant_to_fields(before, 3600)
	test/f.year == 0
	test/module.render(f, template, offset=3600) == module.render(f, template, before, 3600)

def test_render_exhaustive(test):
	"""
	# Every directive has a renderer.
	"""
	test/set(module.renderers) == set(module.Directive)
	test/set(module.parseable) <= set(module.Directive)

def test_scan(test):
	tokens = list(module.scan("%Y-%q%"))
	test/tokens == [(0, module.Directive.year), (2, '-'), (3, None)]

def test_strict(test):
	r = module.parse_strict("2020/01/02 03:04:05")
	test/r == (2020, 1, 2, 3, 4, 5)
	test/module.parse_strict("20200102030405", "%Y%m%d%H%M%S") == r
	test/module.parse_strict("03:04:05 2020-01-02", "%H:%M:%S %Y-%m-%d") == r
	test/module.parse_strict("100% 2020-01-02 03:04:05", "100%% %Y-%m-%d %H:%M:%S") == r

def test_strict_round_trip(test):
	for instant in range(-62135596800, 253402300799, 7777777777):
		f = conversion.instant_to_fields(instant)
		text = module.render(f)
		test/module.parse_strict(text) == f[:6]

def test_strict_errors(test):
	samples = [
		(core.InsufficientLength, "2020/01/0"),
		(core.InsufficientLength, "202"),
		(core.NotNumeric, "2020/1/1 0:1:1"),
		(core.NotNumeric, "2020/0a/01 00:00:00"),
		(core.NotNumeric, "2020/+1/01 00:00:00"),
		(core.SeparatorMismatch, "2020-01-01 00:00:00"),
		(core.SeparatorMismatch, "2020/01/01"),
		(core.InvalidCalendarValue, "2023/02/29 00:00:00"),
		(core.InvalidCalendarValue, "2020/01/01 24:00:00"),
	]
	for error, text in samples:
		with test/error as exc:
			module.parse_strict(text)
		test/exc().text == text

def test_strict_error_details(test):
	with test/core.InvalidCalendarValue as exc:
		module.parse_strict("2023/02/29 00:00:00")
	cause = exc().__cause__
	test.isinstance(cause, core.OutOfRange)
	test/cause.field == 'day'

	with test/core.NotNumeric as exc:
		module.parse_strict("2020/1/1 0:1:1")
	test/exc().position == 3
	test/exc().template == module.standard

	with test/core.UnknownDirective as exc:
		module.parse_strict("2020 001", "%Y %j")
	test/exc().position == 3

	# Parse errors are value errors.
	with test/ValueError:
		module.parse_strict("")

def test_extended(test):
	r = module.parse_extended("2020/1/1 0:1:1")
	test/r == (2020, 1, 1, 0, 1, 1)
	test/module.parse_extended("2020/01/01 00:01:01") == r
	test/module.parse_extended("2020/12/31 23:59:59") == (2020, 12, 31, 23, 59, 59)
	test/module.parse_extended("20200102", "%Y%m%d") == (2020, 1, 2, 0, 0, 0)
	test/module.parse_extended("on 2020.1.2", "%Y.%m.%d") == (2020, 1, 2, 0, 0, 0)

def test_extended_errors(test):
	samples = [
		(core.JumpMismatch, "2020//1/1 0:1:1"),
		(core.JumpMismatch, "2020/1/1  0:1:1"),
		(core.NumberNotFound, "2020/1/1 0:1"),
		(core.NumberNotFound, ""),
		(core.InvalidCalendarValue, "2023/2/29 0:0:0"),
		(core.InvalidCalendarValue, "2020/13/1 0:0:0"),
	]
	for error, text in samples:
		with test/error:
			module.parse_extended(text)

	with test/core.UnknownDirective:
		module.parse_extended("2020/1", "%Y/%q")
	with test/core.UnknownDirective:
		module.parse_extended("2020 PM", "%Y %p")

def test_parse_modes(test):
	text = "2020/1/1 0:1:1"
	test/module.parse(text, mode=module.Mode.extended) == (2020, 1, 1, 0, 1, 1)
	with test/core.NotNumeric:
		module.parse(text)
	with test/core.NotNumeric:
		module.parse(text, module.standard, module.Mode.strict)

def test_parser_formatter(test):
	p = module.parser("%Y-%m-%d", module.Mode.extended)
	test/p("1999-2-3") == (1999, 2, 3, 0, 0, 0)
	fmt = module.formatter("%d.%m.%Y")
	test/fmt(conversion.instant_to_fields(sunday)) == "03.01.2021"

def test_digits(test):
	d = module.Digits("a12b3 45")
	test/d.numbers() == [12, 3, 45]
	test/d.next() == None

	d = module.Digits("x2020123")
	test/d.seek() == 1
	test/d.read(1, 4) == 2020
	test/d.position == 5
	test/d.next() == 123
	test/module.Digits("none").seek() == None
