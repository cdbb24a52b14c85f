import copy
import math
import pickle

import pytest

from ComplexNumbers import Exceptions
from ComplexNumbers.Math import Complex as ComplexMath
from ComplexNumbers.Math.Complex import Complex


class TestConstruction:
	def test_real_and_imaginary(self):
		value = Complex(3.5, -2.1)
		assert value.real == 3.5
		assert value.imaginary == -2.1

	def test_real_only_defaults_imaginary_to_zero(self):
		value = Complex(5)
		assert value.real == 5.0
		assert value.imaginary == 0.0
		assert isinstance(value.real, float)

	def test_from_real(self):
		assert Complex.from_real(42) == Complex(42, 0)
		assert ComplexMath.from_real(3.14).imaginary == 0.0

	def test_non_finite_parts_are_accepted(self):
		value = Complex(math.inf, math.nan)
		assert value.real == math.inf
		assert math.isnan(value.imaginary)

	def test_non_number_is_rejected(self):
		with pytest.raises(Exceptions.InvalidArgumentException):
			Complex('3', 4)

		with pytest.raises(TypeError):
			Complex(3, None)

	def test_constants(self):
		assert (Complex.Zero.real, Complex.Zero.imaginary) == (0.0, 0.0)
		assert (Complex.One.real, Complex.One.imaginary) == (1.0, 0.0)
		assert (Complex.ImaginaryOne.real, Complex.ImaginaryOne.imaginary) == (0.0, 1.0)

	def test_instances_are_immutable(self):
		value = Complex(3, 4)

		with pytest.raises(AttributeError):
			value.__real__ = 9

		with pytest.raises(AttributeError):
			value.extra = 1

		with pytest.raises(AttributeError):
			del value.__imaginary__

		with pytest.raises(AttributeError):
			value.real = 9

		assert value == Complex(3, 4)

	def test_copies_keep_their_parts(self):
		value = Complex(3, -4)
		assert copy.copy(value) == value
		assert pickle.loads(pickle.dumps(value)) == value


class TestArithmetic:
	a = Complex(3, 4)
	b = Complex(1, 2)

	def test_addition(self):
		assert self.a + self.b == Complex(4, 6)

	def test_subtraction(self):
		assert self.a - self.b == Complex(2, 2)

	def test_multiplication(self):
		assert self.a * self.b == Complex(-5, 10)

	def test_division(self):
		assert self.a / self.b == Complex(2.2, -0.4)

	def test_negation(self):
		assert -self.a == Complex(-3, -4)
		assert +self.a == self.a

	def test_operands_are_not_mutated(self):
		result = self.a + self.b
		assert result is not self.a
		assert (self.a.real, self.a.imaginary) == (3.0, 4.0)
		assert (self.b.real, self.b.imaginary) == (1.0, 2.0)

	def test_chained_operations(self):
		assert (self.a + self.b) * Complex(2, 1) - Complex.One == Complex(1, 16)

	def test_division_by_zero(self):
		with pytest.raises(Exceptions.DivisionByZeroError):
			self.a / Complex.Zero

		with pytest.raises(ZeroDivisionError):
			self.a / 0

	def test_division_by_underflowing_divisor(self):
		with pytest.raises(Exceptions.DivisionByZeroError):
			Complex.One / Complex(1e-200, 0)

	def test_power_operator(self):
		assert Complex.ImaginaryOne ** 2 == Complex(-1, 0)

	def test_power_with_modulo_is_unsupported(self):
		with pytest.raises(TypeError):
			pow(Complex(1, 1), 2, 3)


class TestWidening:
	value = Complex(2, 3)

	def test_real_on_the_right(self):
		assert self.value + 5 == Complex(7, 3)
		assert self.value - 1.5 == Complex(0.5, 3)
		assert self.value * 2 == Complex(4, 6)
		assert self.value / 2 == Complex(1, 1.5)

	def test_real_on_the_left(self):
		assert 5 + self.value == Complex(7, 3)
		assert 10 - self.value == Complex(8, -3)
		assert 2.5 * self.value == Complex(5, 7.5)
		assert 1 / Complex.ImaginaryOne == Complex(0, -1)

	def test_builtin_complex(self):
		assert complex(1, 1) + self.value == Complex(3, 4)
		assert self.value * 1j == Complex(-3, 2)
		assert complex(self.value) == complex(2, 3)

	def test_reflected_division_by_zero(self):
		with pytest.raises(Exceptions.DivisionByZeroError):
			1 / Complex.Zero

	def test_unsupported_operand(self):
		with pytest.raises(TypeError):
			self.value + 'x'

		with pytest.raises(TypeError):
			[] * self.value

	def test_equality_with_real(self):
		assert Complex(5) == 5
		assert Complex(5, 1) != 5
		assert Complex(5) != 'five'


class TestProperties:
	@pytest.mark.parametrize('real, imaginary, magnitude', [(3, 4, 5), (5, 12, 13), (1, 0, 1), (0, 1, 1), (0, 0, 0)])
	def test_magnitude(self, real, imaginary, magnitude):
		assert Complex(real, imaginary).magnitude == pytest.approx(magnitude)
		assert abs(Complex(real, imaginary)) == pytest.approx(magnitude)

	@pytest.mark.parametrize('real, imaginary, phase', [(1, 0, 0), (0, 1, math.pi / 2), (-1, 0, math.pi), (0, -1, -math.pi / 2), (1, 1, math.pi / 4)])
	def test_phase(self, real, imaginary, phase):
		assert Complex(real, imaginary).phase == pytest.approx(phase)

	def test_conjugate(self):
		assert Complex(3, 4).conjugate == Complex(3, -4)

	def test_bool(self):
		assert not Complex.Zero
		assert Complex(0, 1e-300)

	def test_unpacking(self):
		real, imaginary = Complex(1, 2)
		assert (real, imaginary) == (1.0, 2.0)

	def test_repr(self):
		assert repr(Complex(3, -4)) == 'Complex(3.0, -4.0)'


class TestTranscendental:
	def test_from_polar(self):
		value = Complex.from_polar(2, math.pi / 4)
		assert value == Complex(math.sqrt(2), math.sqrt(2))
		assert value.magnitude == pytest.approx(2)
		assert value.phase == pytest.approx(math.pi / 4)

	def test_sqrt_of_negative_one(self):
		assert ComplexMath.sqrt(Complex(-1)) == Complex.ImaginaryOne

	def test_sqrt_is_principal(self):
		root = Complex.sqrt(Complex(-4, -1e-300))
		assert root.imaginary < 0
		assert root * root == Complex(-4, 0)

	@pytest.mark.parametrize('exponent, expected', [(0, Complex(1, 0)), (1, Complex(0, 1)), (2, Complex(-1, 0)), (3, Complex(0, -1)), (4, Complex(1, 0))])
	def test_de_moivre(self, exponent, expected):
		assert ComplexMath.pow(Complex.ImaginaryOne, exponent) == expected

	def test_pow_of_zero(self):
		assert Complex.pow(Complex.Zero, 0) == Complex.One
		assert Complex.pow(Complex.Zero, 2) == Complex.Zero
		assert Complex.pow(Complex.Zero, -1).real == math.inf

	def test_pow_rejects_complex_exponent(self):
		with pytest.raises(Exceptions.InvalidArgumentException):
			Complex.pow(Complex.One, Complex.One)

	def test_euler_identity(self):
		assert ComplexMath.exp(Complex(0, math.pi)) + Complex.One == Complex.Zero

	def test_exp(self):
		assert Complex.exp(Complex(1, math.pi / 2)) == Complex(0, math.e)

	def test_exp_overflow_is_infinite(self):
		assert Complex.exp(Complex(1000, 0)).real == math.inf

	def test_log(self):
		assert ComplexMath.log(Complex(math.e)) == Complex.One
		assert Complex.log(Complex(-1)) == Complex(0, math.pi)

	def test_log_of_zero(self):
		result = Complex.log(Complex.Zero)
		assert result.real == -math.inf
		assert result.imaginary == 0.0

	def test_functions_accept_reals(self):
		assert Complex.sqrt(-9) == Complex(0, 3)
		assert Complex.exp(0) == Complex.One


class TestEquality:
	def test_tolerance_boundary(self):
		base = Complex(1, 1)
		assert base == Complex(1 + 5e-11, 1 + 5e-11)
		assert base != Complex(1 + 5e-9, 1 + 5e-9)

	def test_each_part_is_checked(self):
		assert Complex(1, 1) != Complex(1, 1 + 5e-9)
		assert Complex(1, 1) != Complex(1 + 5e-9, 1)

	def test_nan_is_never_equal(self):
		assert Complex(math.nan, 0) != Complex(math.nan, 0)

	def test_hash_of_identical_values(self):
		assert hash(Complex(1, 2)) == hash(Complex(1.0, 2.0))
		assert len({Complex(1, 2), Complex(1, 2), Complex(2, 1)}) == 2

	def test_hash_uses_exact_parts(self):
		a = Complex(1, 1)
		b = Complex(1 + 5e-11, 1)
		assert a == b
		assert hash(a) != hash(b)

	def test_hash_agrees_with_builtin_numbers(self):
		assert hash(Complex(5)) == hash(5)
		assert hash(Complex(2.5)) == hash(2.5)
		assert hash(Complex(1, 2)) == hash(1 + 2j)

	def test_mixes_with_builtin_numbers_in_containers(self):
		assert {5: 'x'}[Complex(5)] == 'x'
		assert Complex(5) in {5}
		assert Complex(1, 2) in {1 + 2j}


class TestFormatting:
	@pytest.mark.parametrize('value, expected', [
		(Complex(3, 4), '3 + 4i'),
		(Complex(3, -4), '3 - 4i'),
		(Complex(3, 1), '3 + i'),
		(Complex(3, -1), '3 - i'),
		(Complex(0, 1), 'i'),
		(Complex(0, -1), '-i'),
		(Complex(5, 0), '5'),
		(Complex(0, 0), '0'),
		(Complex(0, 2), '2i'),
		(Complex(-0.5, 0), '-0.5'),
		(Complex(0, -2.5), '-2.5i'),
		(Complex(-3, -4), '-3 - 4i'),
		(Complex(1.5, 0.25), '1.5 + 0.25i'),
	])
	def test_canonical_table(self, value, expected):
		assert str(value) == expected

	def test_negative_zero_is_zero(self):
		assert str(Complex(-0.0, -0.0)) == '0'

	def test_custom_format(self):
		value = Complex(3.14159, -2.71828)
		assert value.to_string('F2') == '3.14 - 2.72i'
		assert f'{value:F3}' == '3.142 - 2.718i'
		assert format(value, '.1f') == '3.1 - 2.7i'

	def test_custom_format_keeps_unit_rule(self):
		assert Complex(3, 1).to_string('F2') == '3.00 + i'
		assert Complex(0, -1).to_string('F2') == '-i'

	def test_empty_format_is_general(self):
		assert format(Complex(1.5, 2)) == '1.5 + 2i'
		assert Complex(1.5, 2).to_string('') == '1.5 + 2i'

	def test_invalid_format(self):
		with pytest.raises(Exceptions.InvalidFormatError):
			Complex(1, 1).to_string('Q?')

		with pytest.raises(Exceptions.InvalidArgumentException):
			Complex(1, 1).to_string(2)
