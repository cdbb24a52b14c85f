from __future__ import annotations

import argparse
import io
import math
import operator
import sys
import traceback
import typing

from . import Exceptions
from .Configuration import Configuration
from .Logger import Logger
from .Math import Complex as ComplexMath
from .Math.Complex import Complex
from .Parser import ComplexParser


OPERATIONS: typing.Final[dict[str, typing.Callable[[Complex, Complex], Complex]]] = {
	'+': operator.add,
	'-': operator.sub,
	'*': operator.mul,
	'/': operator.truediv,
}


def __section__(output: typing.TextIO, title: str) -> None:
	print(title, file=output)
	print('-' * len(title), file=output)


def demonstrate_construction(output: typing.TextIO = sys.stdout) -> None:
	__section__(output, '1. CONSTRUCTION AND BASIC REPRESENTATION')
	print(f'Complex(3, 4) = {Complex(3, 4)}', file=output)
	print(f'Complex(5) = {Complex(5)}', file=output)
	print(f'Complex.Zero = {Complex.Zero}', file=output)
	print(f'Complex.One = {Complex.One}', file=output)
	print(f'Complex.ImaginaryOne = {Complex.ImaginaryOne}', file=output)
	print(file=output)


def demonstrate_arithmetic(output: typing.TextIO = sys.stdout) -> None:
	__section__(output, '2. ARITHMETIC OPERATIONS')
	a: Complex = Complex(3, 4)
	b: Complex = Complex(1, 2)
	c: Complex = Complex(2, 1)
	print(f'a = {a}', file=output)
	print(f'b = {b}', file=output)
	print(f'a + b = {a + b}', file=output)
	print(f'a - b = {a - b}', file=output)
	print(f'a * b = {a * b}', file=output)
	print(f'a / b = {a / b}', file=output)
	print(f'-a = {-a}', file=output)
	print(file=output)
	print(f'((a + b) * c) - 1 = {(a + b) * c - Complex.One}', file=output)
	print(file=output)


def demonstrate_properties(output: typing.TextIO = sys.stdout) -> None:
	__section__(output, '3. PROPERTIES')
	c: Complex = Complex(3, 4)
	print(f'c = {c}', file=output)
	print(f'Real part: {c.real:g}', file=output)
	print(f'Imaginary part: {c.imaginary:g}', file=output)
	print(f'Magnitude: {c.magnitude:g}', file=output)
	print(f'Phase (radians): {c.phase}', file=output)
	print(f'Phase (degrees): {math.degrees(c.phase)}°', file=output)
	print(f'Conjugate: {c.conjugate}', file=output)
	print(file=output)


def demonstrate_conversions(output: typing.TextIO = sys.stdout) -> None:
	__section__(output, '4. NUMERIC WIDENING')
	c: Complex = Complex(2, 3)
	print(f'Complex from float (3.14): {Complex.from_real(3.14)}', file=output)
	print(f'Complex from int (42): {Complex.from_real(42)}', file=output)
	print(f'(2 + 3i) + 5 = {c + 5}', file=output)
	print(f'2.5 * (2 + 3i) = {2.5 * c}', file=output)
	print(file=output)


def demonstrate_static_methods(output: typing.TextIO = sys.stdout) -> None:
	__section__(output, '5. STATIC METHODS')
	polar: Complex = ComplexMath.from_polar(2, math.pi / 4)
	print(f'FromPolar(2, π/4) = {polar}', file=output)
	print(f'Verification: magnitude = {polar.magnitude:.4f}, phase = {polar.phase:.4f}', file=output)
	print(file=output)
	print(f'√(-1) = {ComplexMath.sqrt(Complex(-1))}', file=output)
	print(file=output)

	for exponent in range(5):
		print(f'i^{exponent} = {ComplexMath.pow(Complex.ImaginaryOne, exponent)}', file=output)

	print(file=output)
	print(f'e^(1 + iπ/2) = {ComplexMath.exp(Complex(1, math.pi / 2))}', file=output)
	print(f'ln(e) = {ComplexMath.log(Complex(math.e))}', file=output)
	print(file=output)


def run_demonstrations(output: typing.TextIO = sys.stdout) -> None:
	"""
	Prints every demonstration section
	:param output: The stream to print to
	"""

	print('==============================================', file=output)
	print('   Complex Number Class Demonstration', file=output)
	print('==============================================\n', file=output)
	demonstrate_construction(output)
	demonstrate_arithmetic(output)
	demonstrate_properties(output)
	demonstrate_conversions(output)
	demonstrate_static_methods(output)


def __prompt__(input_stream: typing.TextIO, output: typing.TextIO, prompt: str) -> typing.Optional[str]:
	output.write(prompt)
	output.flush()
	line: str = input_stream.readline()
	return None if len(line) == 0 else line.rstrip('\r\n')


def run_interactive_calculator(input_stream: typing.TextIO = sys.stdin, output: typing.TextIO = sys.stdout, configuration: typing.Optional[Configuration] = None, logger: typing.Optional[Logger] = None) -> int:
	"""
	Runs the read-evaluate-print loop of the calculator
	Each round reads the first operand, the operator and the second operand, then prints the result
	Unparsable operands, unknown operators and division by zero print a message and restart the round
	The loop ends on the quit keyword (case-insensitive) or at end of input
	:param input_stream: The stream to read lines from
	:param output: The stream to print to
	:param configuration: The shell settings or None for defaults
	:param logger: The session log or None to skip logging
	:return: The number of successful calculations
	"""

	configuration = Configuration() if configuration is None else configuration
	number_format: str = configuration.number_format
	calculations: int = 0

	def log(level: str, message: str) -> None:
		if logger is not None:
			getattr(logger, level)(message)

	__section__(output, '6. INTERACTIVE CALCULATOR')
	print('Enter complex numbers in the format \'a+bi\' or \'a-bi\'', file=output)
	print(f'Type \'{configuration.quit_keyword}\' to exit\n', file=output)

	while True:
		first_text: typing.Optional[str] = __prompt__(input_stream, output, f'Enter first complex number (or \'{configuration.quit_keyword}\'): ')

		if first_text is None or first_text.strip().lower() == configuration.quit_keyword.lower():
			break

		first: ComplexParser.ParseResult = ComplexParser.try_parse(first_text)

		if not first:
			print('Invalid format. Try again.', file=output)
			log('warn', first.error)
			continue

		operation: typing.Optional[str] = __prompt__(input_stream, output, 'Enter operation (+, -, *, /): ')
		second_text: typing.Optional[str] = None if operation is None else __prompt__(input_stream, output, 'Enter second complex number: ')

		if second_text is None:
			break

		second: ComplexParser.ParseResult = ComplexParser.try_parse(second_text)
		operation = operation.strip()

		if not second:
			print('Invalid format. Try again.', file=output)
			log('warn', second.error)
			continue
		elif operation not in OPERATIONS:
			print('Invalid operation. Try again.\n', file=output)
			log('warn', f'Unknown operation \'{operation}\'')
			continue

		try:
			result: Complex = OPERATIONS[operation](first.value, second.value)
		except Exceptions.DivisionByZeroError as e:
			print('Cannot divide by zero. Try again.\n', file=output)
			log('error', f'{first.value!r} / {second.value!r}: {e}')
			continue

		line: str = f'{first.value:{number_format}} {operation} {second.value:{number_format}} = {result:{number_format}}'
		print(f'Result: {line}\n', file=output)
		log('info', line)
		calculations += 1

	print('\nThank you for using the Complex Number Calculator!', file=output)
	return calculations


def main(argv: typing.Optional[typing.Sequence[str]] = None, input_stream: typing.Optional[typing.TextIO] = None, output: typing.Optional[typing.TextIO] = None) -> int:
	"""
	Entry point of the calculator shell
	:param argv: The command line arguments or None to use 'sys.argv'
	:param input_stream: The stream to read from or None for stdin
	:param output: The stream to print to or None for stdout
	:return: The process exit code
	"""

	input_stream = sys.stdin if input_stream is None else input_stream
	output = sys.stdout if output is None else output
	parser: argparse.ArgumentParser = argparse.ArgumentParser(prog='complex-calculator', description='Complex number demonstration and interactive calculator')
	parser.add_argument('--config', default=None, help='Path to a \'.kvp\' configuration file')
	parser.add_argument('--no-demo', action='store_true', help='Skip the demonstration sections')
	args: argparse.Namespace = parser.parse_args(argv)

	try:
		configuration: Configuration = Configuration.load(args.config)
	except (Exceptions.ConfigurationError, OSError) as e:
		sys.stderr.write(f'Configuration error: {e}\n')
		return 2

	stream: typing.Optional[io.IOBase] = None

	try:
		stream = io.StringIO() if configuration.log_file is None else open(configuration.log_file, 'a', encoding='utf-8')
		logger: Logger = Logger(stream, level=configuration.log_level)
	except OSError as e:
		if stream is not None:
			stream.close()

		sys.stderr.write(f'Configuration error: cannot open log file \'{configuration.log_file}\': {e}\n')
		return 2

	try:
		logger.info(f'Session started with {configuration!r}')

		if configuration.show_demonstrations and not args.no_demo:
			run_demonstrations(output)

		calculations: int = run_interactive_calculator(input_stream, output, configuration, logger)
		logger.info(f'Session ended after {calculations} calculation(s)')
		return 0
	except KeyboardInterrupt:
		print('USER_OVERRIDE', file=output)
		logger.warn('Session interrupted by user')
		return 130
	except Exception as e:
		logger.critical(''.join(traceback.format_exception(e)))
		raise
	finally:
		logger.close()
