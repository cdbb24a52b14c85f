from __future__ import annotations

import math
import re
import numpy

from .. import Exceptions
from ..Decorators import Overload


EPSILON: float = math.ulp(0.0)
__STANDARD_SPECIFIER__: re.Pattern = re.compile(r'^([FfEeNnPpGg])(\d{0,2})$')


@Overload
def exp(x: float) -> float:
	"""
	Calculates e^x with IEEE-754 semantics
	Overflow yields inf instead of raising
	:param x: The exponent
	:return: e^x
	"""

	with numpy.errstate(all='ignore'):
		return float(numpy.exp(numpy.float64(x)))


@Overload
def log(x: float) -> float:
	"""
	Calculates the natural logarithm with IEEE-754 semantics
	If X is 0, returns -inf
	If X is negative, returns NaN
	:param x: The input value
	:return: ln(x)
	"""

	with numpy.errstate(all='ignore'):
		return float(numpy.log(numpy.float64(x)))


@Overload
def power(base: float, exponent: float) -> float:
	"""
	Raises a real number to a real power with IEEE-754 semantics
	0^0 is 1, 0^-n is inf, overflow yields inf
	:param base: The base
	:param exponent: The exponent
	:return: base^exponent
	"""

	with numpy.errstate(all='ignore'):
		return float(numpy.power(numpy.float64(base), numpy.float64(exponent)))


@Overload
def square_root(x: float) -> float:
	"""
	:param x: The input value
	:return: The square root of 'x' or NaN if 'x' is negative
	"""

	with numpy.errstate(all='ignore'):
		return float(numpy.sqrt(numpy.float64(x)))


@Overload
def sine(x: float) -> float:
	"""
	:param x: The angle in radians
	:return: sin(x) or NaN if 'x' is infinite
	"""

	with numpy.errstate(all='ignore'):
		return float(numpy.sin(numpy.float64(x)))


@Overload
def cosine(x: float) -> float:
	"""
	:param x: The angle in radians
	:return: cos(x) or NaN if 'x' is infinite
	"""

	with numpy.errstate(all='ignore'):
		return float(numpy.cos(numpy.float64(x)))


@Overload
def arc_tangent2(y: float, x: float) -> float:
	"""
	:param y: The ordinate
	:param x: The abscissa
	:return: The angle of (x, y) in the range (-pi, pi]
	"""

	with numpy.errstate(all='ignore'):
		return float(numpy.arctan2(numpy.float64(y), numpy.float64(x)))


@Overload
def is_near(a: float, b: float) -> bool:
	"""
	Checks whether two numbers are indistinguishable at machine precision
	:param a: First operand
	:param b: Second operand
	:return: Whether |a - b| is smaller than the smallest positive double
	"""

	return abs(a - b) < EPSILON


@Overload
def format_real(value: float, format_spec: str) -> str:
	"""
	Formats a single real number
	'G', 'g' or '' - Shortest round-trip text without a trailing '.0'; the exponent marker follows the specifier case ('' as 'G')
	'G<n>' - 'n' significant digits
	'F<n>' - Fixed point with 'n' decimals (default 2)
	'E<n>' - Exponent notation with 'n' decimals (default 6)
	'N<n>' - Fixed point with thousands separators (default 2)
	'P<n>' - Percentage (default 2)
	Anything else is treated as a standard python format specifier
	:param value: The value to format
	:param format_spec: The format specifier
	:return: The formatted value
	:raises InvalidFormatError: If the format specifier is not usable
	"""

	match: re.Match | None = __STANDARD_SPECIFIER__.fullmatch(format_spec)

	if len(format_spec) == 0 or format_spec in ('G', 'g'):
		text: str = repr(float(value))
		text = text[:-2] if text.endswith('.0') else text
		return text if format_spec == 'g' else text.replace('e', 'E')
	elif match is not None:
		kind, digits = match.groups()
		upper: bool = kind.isupper()
		kind = kind.upper()

		if kind == 'G':
			python_spec: str = f'.{max(1, int(digits))}{"G" if upper else "g"}'
		elif kind == 'E':
			python_spec: str = f'.{6 if len(digits) == 0 else int(digits)}{"E" if upper else "e"}'
		else:
			precision: int = 2 if len(digits) == 0 else int(digits)
			python_spec: str = f',.{precision}f' if kind == 'N' else f'.{precision}%' if kind == 'P' else f'.{precision}f'

		return format(value, python_spec)

	try:
		return format(value, format_spec)
	except ValueError:
		raise Exceptions.InvalidFormatError(format_spec, 'Invalid numeric format specifier') from None
