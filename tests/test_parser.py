import math

import pytest

from ComplexNumbers import Exceptions
from ComplexNumbers.Math.Complex import Complex
from ComplexNumbers.Parser import ComplexParser


@pytest.mark.parametrize('text, expected', [
	('3+4i', Complex(3, 4)),
	('3-4i', Complex(3, -4)),
	('-3-4i', Complex(-3, -4)),
	('-3+4i', Complex(-3, 4)),
	('3 + 4i', Complex(3, 4)),
	('  3\t-\t4 I ', Complex(3, -4)),
	('2.5+0.5i', Complex(2.5, 0.5)),
	('1e-5+2i', Complex(1e-5, 2)),
	('3+i', Complex(3, 1)),
	('3-i', Complex(3, -1)),
	('i', Complex(0, 1)),
	('I', Complex(0, 1)),
	('-i', Complex(0, -1)),
	('3i', Complex(0, 3)),
	('-3i', Complex(0, -3)),
	('.5i', Complex(0, 0.5)),
	('5', Complex(5, 0)),
	('-5.25', Complex(-5.25, 0)),
	('2.5e3', Complex(2500, 0)),
	('0', Complex.Zero),
])
def test_parses_notation(text, expected):
	assert ComplexParser.parse(text) == expected


@pytest.mark.parametrize('value', [Complex(3, 4), Complex(0, 1), Complex(-3, -4), Complex(5, 0)])
def test_round_trips_canonical_format(value):
	assert ComplexParser.parse(str(value)) == value
	assert Complex.parse(value.to_string()) == value


@pytest.mark.parametrize('text', ['', '   ', 'abc', '+', '-', '+3i', '3+', '1+2', '3i5', '3ii', 'i3', '3+4j', '1_000', '--i', '3+4i+5i', '1+2e-3i'])
def test_rejects_malformed_input(text):
	result = ComplexParser.try_parse(text)
	assert not result.success
	assert result.value is None
	assert isinstance(result.error, Exceptions.InvalidFormatError)
	assert result.error.text == text

	with pytest.raises(Exceptions.InvalidFormatError):
		ComplexParser.parse(text)


def test_invalid_format_is_a_value_error():
	with pytest.raises(ValueError):
		Complex.parse('abc')


def test_try_parse_success():
	result = ComplexParser.try_parse('1-2i')
	assert result
	assert result.success
	assert result.error is None
	assert result.value == Complex(1, -2)
	assert result.unwrap() == Complex(1, -2)


def test_unwrap_raises_the_format_error():
	result = ComplexParser.try_parse('abc')

	with pytest.raises(Exceptions.InvalidFormatError) as info:
		result.unwrap()

	assert info.value is result.error


def test_separator_position_is_reported():
	assert 'Missing real part' in str(ComplexParser.try_parse('+3i').error)


def test_nan_literal():
	assert math.isnan(ComplexParser.parse('NaN').real)


def test_non_string_is_rejected():
	with pytest.raises(Exceptions.InvalidArgumentException):
		ComplexParser.try_parse(None)

	with pytest.raises(TypeError):
		ComplexParser.parse(3)
