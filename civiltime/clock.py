"""
# Real clock access.

# The conversion functions never read the host's clock. Applications that need
# the current instant read it through a &Clock instance, normally &system, and
# pass the result to the conversion and query functions. Tests and simulations
# substitute a &FixedClock.
"""
import time

class Clock(object):
	"""
	# Source of the real, wall clock, time.
	"""
	__slots__ = ()

	def real(self):
		"""
		# The seconds since the epoch and the nanoseconds within the second.
		"""
		raise NotImplementedError("clock does not provide real time")

class SystemClock(Clock):
	"""
	# &Clock reading the host's real time clock.
	"""
	__slots__ = ()

	def real(self, time_ns=time.time_ns):
		return divmod(time_ns(), 1000000000)

class FixedClock(Clock):
	"""
	# &Clock reporting a configured point in time.
	"""
	__slots__ = ('seconds', 'nanoseconds')

	def __init__(self, seconds, nanoseconds=0):
		self.seconds = seconds
		self.nanoseconds = nanoseconds

	def set(self, seconds, nanoseconds=0):
		self.seconds = seconds
		self.nanoseconds = nanoseconds

	def elapse(self, seconds):
		self.seconds += seconds

	def real(self):
		return (self.seconds, self.nanoseconds)

#: Process wide &SystemClock.
system = SystemClock()

def unix(clock=system) -> int:
	"""
	# Current instant in seconds.
	"""
	return clock.real()[0]

def unix_ms(clock=system) -> int:
	"""
	# Current instant in milliseconds.
	"""
	s, ns = clock.real()
	return (s * 1000) + (ns // 1000000)

def unix_ns(clock=system) -> int:
	"""
	# Current instant in nanoseconds.
	"""
	s, ns = clock.real()
	return (s * 1000000000) + ns

def local_offset(localtime=time.localtime) -> int:
	"""
	# The offset, in seconds, of the host's configured time zone at the current time.
	"""
	return localtime().tm_gmtoff
