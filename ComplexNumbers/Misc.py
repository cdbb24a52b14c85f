import numbers
import typing

from . import Exceptions


def raise_if(expression: bool, exception: BaseException = AssertionError('Assertion Failed')) -> None:
	"""
	Raises an exception if the expression evaluates to True
	:param expression: The expression to evaluate
	:param exception: The exception to raise
	"""

	if not isinstance(exception, BaseException):
		raise Exceptions.InvalidArgumentException(raise_if, 'exception', type(exception), (BaseException,))
	elif expression:
		raise exception


def raise_ifn(expression: bool, exception: BaseException = AssertionError('Assertion Failed')) -> None:
	"""
	Raises an exception if the expression evaluates to False
	:param expression: The expression to evaluate
	:param exception: The exception to raise
	"""

	if not isinstance(exception, BaseException):
		raise Exceptions.InvalidArgumentException(raise_ifn, 'exception', type(exception), (BaseException,))
	elif not expression:
		raise exception


def is_real(value: typing.Any) -> bool:
	"""
	:param value: The value to check
	:return: Whether 'value' is a real number (int, float, numpy scalar, ...)
	"""

	return isinstance(value, numbers.Real)


def is_approximately_zero(real: float, imaginary: float, tolerance: float = 1e-10) -> bool:
	"""
	:param real: The real part
	:param imaginary: The imaginary part
	:param tolerance: The tolerance band
	:return: Whether both parts lie strictly inside the tolerance band around 0
	"""

	return abs(real) < tolerance and abs(imaginary) < tolerance
