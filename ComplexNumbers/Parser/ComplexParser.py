from __future__ import annotations

import re
import typing

from .. import Exceptions
from ..Math.Complex import Complex


__REAL_LITERAL__: re.Pattern = re.compile(r'[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|nan)')


class ParseResult:
	"""
	Class representing the outcome of parsing the 'a+bi' notation
	Holds either the parsed value or the format error
	"""

	@classmethod
	def succeeded(cls: type[ParseResult], value: Complex) -> ParseResult:
		"""
		:param value: The parsed value
		:return: A successful parse result
		"""

		return cls(value, None)

	@classmethod
	def failed(cls: type[ParseResult], text: str, what: str = 'Invalid format') -> ParseResult:
		"""
		:param text: The text that failed to parse
		:param what: The failure reason
		:return: A failed parse result
		"""

		return cls(None, Exceptions.InvalidFormatError(text, what))

	def __init__(self, value: typing.Optional[Complex], error: typing.Optional[Exceptions.InvalidFormatError]):
		"""
		Class representing the outcome of parsing the 'a+bi' notation
		- Constructor -
		SHOULD NOT BE CALLED DIRECTLY; USE 'ParseResult.succeeded' OR 'ParseResult.failed'
		:param value: The parsed value or None on failure
		:param error: The format error or None on success
		"""

		assert (value is None) != (error is None), 'Expected exactly one of value or error'
		self.__value__: typing.Optional[Complex] = value
		self.__error__: typing.Optional[Exceptions.InvalidFormatError] = error

	def __bool__(self) -> bool:
		return self.__error__ is None

	def __repr__(self) -> str:
		return f'<{ParseResult.__name__} {"OK" if self else "FAILED"}: {self.__value__ if self else self.__error__}>'

	def unwrap(self) -> Complex:
		"""
		:return: The parsed value
		:raises InvalidFormatError: If parsing failed
		"""

		if self.__error__ is not None:
			raise self.__error__

		return self.__value__

	@property
	def success(self) -> bool:
		"""
		:return: Whether parsing succeeded
		"""

		return self.__error__ is None

	@property
	def value(self) -> typing.Optional[Complex]:
		"""
		:return: The parsed value or None if parsing failed
		"""

		return self.__value__

	@property
	def error(self) -> typing.Optional[Exceptions.InvalidFormatError]:
		"""
		:return: The format error or None if parsing succeeded
		"""

		return self.__error__


def __parse_real__(text: str) -> typing.Optional[float]:
	return float(text) if __REAL_LITERAL__.fullmatch(text) is not None else None


def __strip_unit__(text: str) -> typing.Optional[str]:
	# Exactly one trailing 'i'
	if not text.endswith('i') or 'i' in text[:-1]:
		return None

	return text[:-1]


def try_parse(text: str) -> ParseResult:
	"""
	Parses the 'a+bi' notation into a complex number
	Whitespace is ignored and the text is case-insensitive
	Accepted forms: '<real>', 'i', '-i', '<imag>i', '<real>+<imag>i', '<real>-<imag>i', '<real>+i', '<real>-i'
	The separator is the last '+' or the last '-' that is not the leading sign
	:param text: The text to parse
	:return: The parse result; never raises for malformed text
	:raises InvalidArgumentException: If 'text' is not a string
	"""

	if not isinstance(text, str):
		raise Exceptions.InvalidArgumentException(try_parse, 'text', type(text), (str,))

	normalized: str = ''.join(text.split()).lower()

	if 'i' not in normalized:
		real: typing.Optional[float] = __parse_real__(normalized)
		return ParseResult.failed(text) if real is None else ParseResult.succeeded(Complex(real))
	elif normalized == 'i':
		return ParseResult.succeeded(Complex.ImaginaryOne)
	elif normalized == '-i':
		return ParseResult.succeeded(-Complex.ImaginaryOne)

	last_plus: int = normalized.rfind('+')
	last_minus: int = normalized.rfind('-', 1)

	if last_plus == -1 and last_minus == -1:
		coefficient: typing.Optional[str] = __strip_unit__(normalized)
		imaginary: typing.Optional[float] = None if coefficient is None else __parse_real__(coefficient)
		return ParseResult.failed(text) if imaginary is None else ParseResult.succeeded(Complex(0, imaginary))

	split: int = max(last_plus, last_minus)

	if split <= 0:
		return ParseResult.failed(text, 'Missing real part before separator')

	real_text: str = normalized[:split]
	imaginary_text: typing.Optional[str] = __strip_unit__(normalized[split:])

	if imaginary_text is None:
		return ParseResult.failed(text, 'Imaginary term must end with \'i\'')
	elif imaginary_text in ('+', '-'):
		imaginary_text += '1'

	real: typing.Optional[float] = __parse_real__(real_text)
	imaginary: typing.Optional[float] = __parse_real__(imaginary_text)

	if real is None or imaginary is None:
		return ParseResult.failed(text)

	return ParseResult.succeeded(Complex(real, imaginary))


def parse(text: str) -> Complex:
	"""
	Parses the 'a+bi' notation into a complex number
	:param text: The text to parse
	:return: The parsed complex number
	:raises InvalidFormatError: If the text does not match the notation
	:raises InvalidArgumentException: If 'text' is not a string
	"""

	if not isinstance(text, str):
		raise Exceptions.InvalidArgumentException(parse, 'text', type(text), (str,))

	return try_parse(text).unwrap()
