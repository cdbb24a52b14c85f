from __future__ import annotations

import collections.abc
import typing

from .. import Exceptions
from .. import Misc
from . import Functions


def __widen__(value: typing.Any) -> typing.Optional[Complex]:
	"""
	INTERNAL FUNCTION; DO NOT USE
	Converts a complex or real operand into a Complex instance
	:param value: The operand
	:return: The widened operand or None if the operand is not a number
	"""

	if isinstance(value, Complex):
		return value
	elif Misc.is_real(value):
		return Complex(float(value), 0)
	elif isinstance(value, complex):
		return Complex(value.real, value.imag)
	else:
		return None


class Complex(typing.SupportsComplex, typing.SupportsAbs[float], collections.abc.Hashable):
	"""
	Class representing an immutable complex number 'a + bi'
	Equality is tolerance based; two values are equal if both parts differ by less than 'Complex.TOLERANCE'
	The hash is computed from the exact parts, so values equal within tolerance may still hash differently
	"""

	__slots__ = ('__real__', '__imaginary__')
	TOLERANCE: typing.Final[float] = 1e-10
	Zero: typing.ClassVar[Complex]
	One: typing.ClassVar[Complex]
	ImaginaryOne: typing.ClassVar[Complex]

	@classmethod
	def from_real(cls: type[Complex], real: float) -> Complex:
		"""
		Widens a real number into a complex number with imaginary part 0
		:param real: The real number
		:return: The complex number 'real + 0i'
		:raises InvalidArgumentException: If 'real' is not a real number
		"""

		return cls(real, 0)

	@classmethod
	def from_polar(cls: type[Complex], magnitude: float, phase: float) -> Complex:
		"""
		Creates a complex number from polar coordinates
		:param magnitude: The magnitude (modulus)
		:param phase: The phase (argument) in radians
		:return: The complex number 'magnitude * e^(i * phase)'
		:raises InvalidArgumentException: If 'magnitude' or 'phase' is not a real number
		"""

		Misc.raise_ifn(Misc.is_real(magnitude), Exceptions.InvalidArgumentException(cls.from_polar, 'magnitude', type(magnitude), (int, float)))
		Misc.raise_ifn(Misc.is_real(phase), Exceptions.InvalidArgumentException(cls.from_polar, 'phase', type(phase), (int, float)))
		magnitude = float(magnitude)
		return cls(magnitude * Functions.cosine(phase), magnitude * Functions.sine(phase))

	@classmethod
	def parse(cls: type[Complex], text: str) -> Complex:
		"""
		Parses the 'a+bi' notation into a complex number
		:param text: The text to parse
		:return: The parsed complex number
		:raises InvalidFormatError: If the text does not match the notation
		:raises InvalidArgumentException: If 'text' is not a string
		"""

		from ..Parser import ComplexParser
		return ComplexParser.parse(text)

	@staticmethod
	def sqrt(value: Complex | float) -> Complex:
		"""
		Computes the principal square root
		:param value: The complex number
		:return: The root whose phase is half the principal phase of 'value'
		:raises InvalidArgumentException: If 'value' is not a number
		"""

		value: Complex = Complex.__operand__(Complex.sqrt, 'value', value)
		return Complex.from_polar(Functions.square_root(value.magnitude), value.phase / 2)

	@staticmethod
	def pow(value: Complex | float, exponent: float) -> Complex:
		"""
		Raises a complex number to a real power using its polar form
		The magnitude follows IEEE-754 'pow': 0^0 is 1 and 0^-n is inf
		:param value: The complex number
		:param exponent: The real exponent
		:return: value^exponent
		:raises InvalidArgumentException: If 'value' is not a number or 'exponent' is not a real number
		"""

		value: Complex = Complex.__operand__(Complex.pow, 'value', value)
		Misc.raise_ifn(Misc.is_real(exponent), Exceptions.InvalidArgumentException(Complex.pow, 'exponent', type(exponent), (int, float)))
		exponent = float(exponent)
		return Complex.from_polar(Functions.power(value.magnitude, exponent), value.phase * exponent)

	@staticmethod
	def exp(value: Complex | float) -> Complex:
		"""
		Computes the complex exponential
		:param value: The complex number
		:return: e^value
		:raises InvalidArgumentException: If 'value' is not a number
		"""

		value: Complex = Complex.__operand__(Complex.exp, 'value', value)
		scale: float = Functions.exp(value.__real__)
		return Complex(scale * Functions.cosine(value.__imaginary__), scale * Functions.sine(value.__imaginary__))

	@staticmethod
	def log(value: Complex | float) -> Complex:
		"""
		Computes the principal natural logarithm
		The logarithm of zero has a real part of -inf
		:param value: The complex number
		:return: ln|value| + i * phase(value)
		:raises InvalidArgumentException: If 'value' is not a number
		"""

		value: Complex = Complex.__operand__(Complex.log, 'value', value)
		return Complex(Functions.log(value.magnitude), value.phase)

	@staticmethod
	def __operand__(caller: typing.Callable, name: str, value: typing.Any) -> Complex:
		widened: typing.Optional[Complex] = __widen__(value)
		Misc.raise_if(widened is None, Exceptions.InvalidArgumentException(caller, name, type(value), (Complex, int, float, complex)))
		return widened

	def __init__(self, real: float, imaginary: float = 0):
		"""
		Class representing an immutable complex number 'a + bi'
		- Constructor -
		:param real: The real part
		:param imaginary: The imaginary part
		:raises InvalidArgumentException: If either part is not a real number
		"""

		if not Misc.is_real(real):
			raise Exceptions.InvalidArgumentException(Complex.__init__, 'real', type(real), (int, float))
		elif not Misc.is_real(imaginary):
			raise Exceptions.InvalidArgumentException(Complex.__init__, 'imaginary', type(imaginary), (int, float))

		object.__setattr__(self, '__real__', float(real))
		object.__setattr__(self, '__imaginary__', float(imaginary))

	def __setattr__(self, name: str, value: typing.Any) -> None:
		raise AttributeError(f'\'{Complex.__name__}\' instances are immutable; cannot set \'{name}\'')

	def __delattr__(self, name: str) -> None:
		raise AttributeError(f'\'{Complex.__name__}\' instances are immutable; cannot delete \'{name}\'')

	def __reduce__(self) -> tuple[type[Complex], tuple[float, float]]:
		return Complex, (self.__real__, self.__imaginary__)

	def __add__(self, other: Complex | complex | float) -> Complex:
		other: typing.Optional[Complex] = __widen__(other)

		if other is None:
			return NotImplemented

		return Complex(self.__real__ + other.__real__, self.__imaginary__ + other.__imaginary__)

	def __sub__(self, other: Complex | complex | float) -> Complex:
		other: typing.Optional[Complex] = __widen__(other)

		if other is None:
			return NotImplemented

		return Complex(self.__real__ - other.__real__, self.__imaginary__ - other.__imaginary__)

	def __mul__(self, other: Complex | complex | float) -> Complex:
		"""
		Multiplies two complex numbers
		(a + bi) * (c + di) = (ac - bd) + (ad + bc)i
		:param other: The complex or real number to multiply by
		:return: The product
		"""

		other: typing.Optional[Complex] = __widen__(other)

		if other is None:
			return NotImplemented

		a, b = self.__real__, self.__imaginary__
		c, d = other.__real__, other.__imaginary__
		return Complex(a * c - b * d, a * d + b * c)

	def __truediv__(self, other: Complex | complex | float) -> Complex:
		"""
		Divides this complex number by another
		(a + bi) / (c + di) = ((ac + bd) + (bc - ad)i) / (c^2 + d^2)
		:param other: The complex or real divisor
		:return: The quotient
		:raises DivisionByZeroError: If c^2 + d^2 is smaller than the smallest positive double
		"""

		other: typing.Optional[Complex] = __widen__(other)

		if other is None:
			return NotImplemented

		return Complex.__divide__(self, other)

	def __radd__(self, other: complex | float) -> Complex:
		other: typing.Optional[Complex] = __widen__(other)
		return NotImplemented if other is None else other + self

	def __rsub__(self, other: complex | float) -> Complex:
		other: typing.Optional[Complex] = __widen__(other)
		return NotImplemented if other is None else other - self

	def __rmul__(self, other: complex | float) -> Complex:
		other: typing.Optional[Complex] = __widen__(other)
		return NotImplemented if other is None else other * self

	def __rtruediv__(self, other: complex | float) -> Complex:
		other: typing.Optional[Complex] = __widen__(other)
		return NotImplemented if other is None else Complex.__divide__(other, self)

	def __pow__(self, exponent: float, modulo: None = None) -> Complex:
		"""
		Raises this complex number to a real power
		:param exponent: The real exponent
		:return: this^exponent
		"""

		if modulo is not None or not Misc.is_real(exponent):
			return NotImplemented

		return Complex.pow(self, exponent)

	def __neg__(self) -> Complex:
		"""
		:return: Returns the negation of this complex number "-z"
		"""

		return Complex(-self.__real__, -self.__imaginary__)

	def __pos__(self) -> Complex:
		"""
		:return: Returns a copy of this complex number "+z"
		"""

		return Complex(self.__real__, self.__imaginary__)

	def __eq__(self, other: Complex | complex | float) -> bool:
		"""
		Checks for equality within 'Complex.TOLERANCE'
		:param other: The complex or real number to compare with
		:return: Whether both parts differ by less than the tolerance
		"""

		other: typing.Optional[Complex] = __widen__(other)
		return other is not None and Misc.is_approximately_zero(self.__real__ - other.__real__, self.__imaginary__ - other.__imaginary__, Complex.TOLERANCE)

	def __ne__(self, other: Complex | complex | float) -> bool:
		return not (self == other)

	def __hash__(self) -> int:
		# Exact parts; agrees with int, float and complex but not with the tolerance band of '__eq__'
		return hash(complex(self.__real__, self.__imaginary__))

	def __bool__(self) -> bool:
		"""
		:return: Whether this is not the exact zero complex number
		"""

		return self.__real__ != 0 or self.__imaginary__ != 0

	def __abs__(self) -> float:
		"""
		:return: Returns the magnitude of this complex number "|z|"
		"""

		return self.magnitude

	def __complex__(self) -> complex:
		return complex(self.__real__, self.__imaginary__)

	def __iter__(self) -> typing.Iterator[float]:
		return iter((self.__real__, self.__imaginary__))

	def __repr__(self) -> str:
		return f'{Complex.__name__}({self.__real__!r}, {self.__imaginary__!r})'

	def __str__(self) -> str:
		return self.to_string()

	def __format__(self, format_spec: str) -> str:
		return self.to_string(format_spec)

	@staticmethod
	def __divide__(left: Complex, right: Complex) -> Complex:
		denominator: float = right.__real__ * right.__real__ + right.__imaginary__ * right.__imaginary__

		if abs(denominator) < Functions.EPSILON:
			raise Exceptions.DivisionByZeroError()

		real: float = (left.__real__ * right.__real__ + left.__imaginary__ * right.__imaginary__) / denominator
		imaginary: float = (left.__imaginary__ * right.__real__ - left.__real__ * right.__imaginary__) / denominator
		return Complex(real, imaginary)

	def to_string(self, format_spec: str = 'G') -> str:
		"""
		Renders this complex number in canonical form
		'0' for zero, '<real>' for real numbers, 'i', '-i' or '<imag>i' for imaginary numbers, '<real> + <imag>i' or '<real> - <imag>i' otherwise
		An imaginary coefficient of magnitude 1 is omitted
		:param format_spec: The numeric format specifier applied to each part (see 'Functions.format_real')
		:return: The formatted string
		:raises InvalidArgumentException: If 'format_spec' is not a string
		:raises InvalidFormatError: If 'format_spec' is not a usable numeric format specifier
		"""

		Misc.raise_ifn(isinstance(format_spec, str), Exceptions.InvalidArgumentException(self.to_string, 'format_spec', type(format_spec), (str,)))
		format_spec = format_spec if len(format_spec) else 'G'
		real: float = self.__real__
		imaginary: float = self.__imaginary__

		if abs(real) < Functions.EPSILON and abs(imaginary) < Functions.EPSILON:
			return '0'
		elif abs(imaginary) < Functions.EPSILON:
			return Functions.format_real(real, format_spec)
		elif abs(real) < Functions.EPSILON:
			if Functions.is_near(imaginary, 1):
				return 'i'
			elif Functions.is_near(imaginary, -1):
				return '-i'
			else:
				return f'{Functions.format_real(imaginary, format_spec)}i'

		sign: str = ' + ' if imaginary > 0 else ' - '
		coefficient: str = '' if Functions.is_near(abs(imaginary), 1) else Functions.format_real(abs(imaginary), format_spec)
		return f'{Functions.format_real(real, format_spec)}{sign}{coefficient}i'

	@property
	def real(self) -> float:
		"""
		:return: The real part
		"""

		return self.__real__

	@property
	def imaginary(self) -> float:
		"""
		:return: The imaginary part
		"""

		return self.__imaginary__

	@property
	def magnitude(self) -> float:
		"""
		:return: The magnitude (modulus) sqrt(real^2 + imaginary^2)
		"""

		return Functions.square_root(self.__real__ * self.__real__ + self.__imaginary__ * self.__imaginary__)

	@property
	def phase(self) -> float:
		"""
		:return: The phase (argument) in radians, in the principal range (-pi, pi]
		"""

		return Functions.arc_tangent2(self.__imaginary__, self.__real__)

	@property
	def conjugate(self) -> Complex:
		"""
		:return: The complex conjugate 'real - imaginary * i'
		"""

		return Complex(self.__real__, -self.__imaginary__)


Complex.Zero = Complex(0, 0)
Complex.One = Complex(1, 0)
Complex.ImaginaryOne = Complex(0, 1)

from_real = Complex.from_real
from_polar = Complex.from_polar
sqrt = Complex.sqrt
pow = Complex.pow
exp = Complex.exp
log = Complex.log
