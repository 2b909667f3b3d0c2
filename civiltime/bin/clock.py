"""
# Print the current date and time.

# The first argument is the template, defaulting to `%Y/%m/%d %H:%M:%S`.
# The second is the offset in seconds, defaulting to the host's offset.
"""
import sys
from .. import clock
from .. import format
from .. import moment

def main(argv, source=clock.system):
	template = argv[0] if argv else format.standard
	if len(argv) > 1:
		offset = int(argv[1])
	else:
		offset = None

	m = moment.Moment.now(offset, source)
	sys.stdout.write(m.render(template) + "\n")

if __name__ == '__main__':
	main(sys.argv[1:])
