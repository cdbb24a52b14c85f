import sys

from ComplexNumbers.Console import main


if __name__ == '__main__':
	sys.exit(main())
