"""
# Arbitrary Calendar Cycle Resolution

# Used internally by &.gregorian in order to work with the nested leap year cycles
# of the gregorian calendar.

# A cycle is described by nodes of the form `(title, repeat, sub)` where `sub` is
# either a sequence of inner nodes or, at the leaves, a sequence of year lengths in days.
"""
import itertools

def floor_divmod(numerator, denominator):
	"""
	# Divide the &numerator by the positive &denominator rounding the quotient towards
	# negative infinity. The remainder is always within `[0, denominator)`.
	"""
	if numerator < 0:
		magnitude = -numerator
		quotient = magnitude // denominator
		remainder = magnitude - (quotient * denominator)
		if remainder:
			return (-quotient - 1, denominator - remainder)
		return (-quotient, 0)
	else:
		quotient = numerator // denominator
		return (quotient, numerator - (quotient * denominator))

##
# Year and day totals of a cycle, consumed by resolve().
def aggregate(node,
		chain=itertools.chain,
		accumulate=itertools.accumulate,
		isinstance=isinstance, int=int,
		tuple=tuple, range=range,
		len=len, sum=sum,
	):
	"""
	# Count the years and days of one repetition of &node and of all its repetitions.

	# A leaf lists year lengths, so its aggregate is the pair of running offsets:
	# year indexes `0..n` and the day on which each of those years begins.
	# Inner nodes aggregate their children and sum the children's totals.

	# [ Returns ]
	# `(title, repeat, aggregates, (years, days), (repeat * years, repeat * days))`
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		# first day of each year, and the day after the last
		day_accum = tuple(accumulate(chain((0,), sub)))
		year_accum = tuple(range(len(sub) + 1))
		agg = (year_accum, day_accum)
		year_value = len(sub)
		day_value = day_accum[-1]
	else:
		agg = tuple([aggregate(x) for x in sub])
		year_value = sum([y[-1][0] for y in agg])
		day_value = sum([y[-1][1] for y in agg])

	return (
		title, repeat, agg,
		(year_value, day_value),
		(repeat * year_value, repeat * day_value),
	)

##
# Search an aggregated calendar cycle for the appropriate address.
# Returns (cycles, address, remainder, difference) where
#  Cycles is the number of whole cycles preceding the address; negative before the datum.
#  Address is the resolved address of years or days within the cycle.
#  Remainder is the input quantity not consumed. (day of year)
#  Difference is the difference between final address part and the next. (days in year)

def resolve(selectors, iaddress, calendar,
		split=floor_divmod,
		divmod=divmod, isinstance=isinstance,
		range=range, len=len, int=int,
	):
	sipart, sopart = selectors
	oaddress = 0

	# align on a cycle; iaddress is non-negative afterwards
	cycles, iaddress = split(iaddress, sipart(calendar[-1]))

	current = calendar
	while not isinstance(current[2][0][0], int):
		for sub in current[2]:
			title, repeat, inner, fragments, totals = sub
			itotal = sipart(totals)
			if iaddress >= itotal:
				iaddress -= itotal
				oaddress += sopart(totals)
			else:
				parts, iaddress = divmod(iaddress, sipart(fragments))
				oaddress += parts * sopart(fragments)
				current = sub
				break
		else:
			raise RuntimeError("out of bounds")

	iparts = sipart(current[2])
	oparts = sopart(current[2])
	for i in range(len(iparts) - 1):
		if iparts[i+1] > iaddress:
			break

	return (cycles, oaddress + oparts[i], iaddress - iparts[i], oparts[i+1] - oparts[i])
