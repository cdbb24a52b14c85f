from __future__ import annotations

import os
import typing

from . import Exceptions
from . import Misc
from .Logger import LogLevel
from .Math import Functions


class Configuration:
	"""
	Class holding the calculator shell settings
	Settings are read from defaults, then a '.kvp' file of 'key = value' lines, then 'COMPLEX_*' environment variables
	"""

	ENVIRONMENT_PREFIX: typing.Final[str] = 'COMPLEX_'
	__KEYS__: typing.Final[tuple[str, ...]] = ('number_format', 'quit_keyword', 'show_demonstrations', 'log_file', 'log_level')

	@classmethod
	def load(cls: type[Configuration], path: typing.Optional[str] = None, environment: typing.Optional[typing.Mapping[str, str]] = None) -> Configuration:
		"""
		Builds a configuration from all sources
		:param path: The '.kvp' file to read or None to skip the file
		:param environment: The environment mapping or None to use 'os.environ'
		:return: The merged configuration
		:raises ConfigurationError: If any source holds a malformed line, unknown key or invalid value
		:raises FileNotFoundError: If 'path' does not exist
		"""

		configuration: Configuration = cls()

		if path is not None:
			with open(path, 'r') as f:
				configuration = configuration.merged(cls.parse_kvp(f.read()))

		environment = os.environ if environment is None else environment
		prefix: int = len(cls.ENVIRONMENT_PREFIX)
		overrides: dict[str, str] = {key[prefix:].lower(): value for key, value in environment.items() if key.startswith(cls.ENVIRONMENT_PREFIX) and key[prefix:].lower() in cls.__KEYS__}
		return configuration.merged(overrides)

	@classmethod
	def parse_kvp(cls: type[Configuration], data: str) -> dict[str, str]:
		"""
		Parses 'key = value' lines
		Blank lines and lines starting with '#' are ignored
		:param data: The file contents
		:return: The key/value pairs
		:raises ConfigurationError: If a line has no '=' or names an unknown key
		"""

		pairs: dict[str, str] = {}

		for line_number, line in enumerate(data.splitlines()):
			line = line.strip()

			if len(line) == 0 or line.startswith('#'):
				continue
			elif '=' not in line:
				raise Exceptions.ConfigurationError(f'Expected \'key = value\' - LINE.{line_number + 1} {line}')

			key, value = (x.strip() for x in line.split('=', 1))
			Misc.raise_ifn(key in cls.__KEYS__, Exceptions.ConfigurationError(f'Unknown configuration key \'{key}\' - LINE.{line_number + 1} {line}'))
			pairs[key] = value

		return pairs

	@staticmethod
	def __parse_bool__(key: str, value: str) -> bool:
		lowered: str = value.strip().lower()

		if lowered in ('true', 'yes', 'on', '1'):
			return True
		elif lowered in ('false', 'no', 'off', '0'):
			return False

		raise Exceptions.ConfigurationError(f'Expected a boolean for \'{key}\'; got \'{value}\'')

	@staticmethod
	def __parse_level__(value: str) -> LogLevel:
		try:
			return LogLevel[value.strip().upper()]
		except KeyError:
			raise Exceptions.ConfigurationError(f'Unknown log level \'{value}\'; expected one of {", ".join(x.name for x in LogLevel)}') from None

	def __init__(self, number_format: str = 'G', quit_keyword: str = 'quit', show_demonstrations: bool = True, log_file: typing.Optional[str] = None, log_level: LogLevel = LogLevel.INFO):
		"""
		Class holding the calculator shell settings
		- Constructor -
		:param number_format: The numeric format specifier used to print results
		:param quit_keyword: The keyword ending the interactive calculator
		:param show_demonstrations: Whether to print the demonstration sections before the calculator
		:param log_file: The file to append the session log to or None to discard it
		:param log_level: The minimum level written to the log
		:raises ConfigurationError: If 'quit_keyword' is empty or 'number_format' is not a usable numeric format specifier
		"""

		Misc.raise_ifn(len(quit_keyword.strip()) > 0, Exceptions.ConfigurationError('Quit keyword must not be empty'))

		try:
			Functions.format_real(1.0, number_format if len(number_format) else 'G')
		except Exceptions.InvalidFormatError as e:
			raise Exceptions.ConfigurationError(f'Invalid number format \'{number_format}\'') from e

		self.__number_format__: str = number_format
		self.__quit_keyword__: str = quit_keyword.strip()
		self.__show_demonstrations__: bool = bool(show_demonstrations)
		self.__log_file__: typing.Optional[str] = log_file if log_file else None
		self.__log_level__: LogLevel = log_level

	def __repr__(self) -> str:
		return f'<{Configuration.__name__} format={self.__number_format__!r} quit={self.__quit_keyword__!r} demonstrations={self.__show_demonstrations__} log={self.__log_file__!r} level={self.__log_level__.name}>'

	def merged(self, overrides: typing.Mapping[str, str]) -> Configuration:
		"""
		Creates a new configuration with the specified textual values applied
		:param overrides: The key/value pairs to apply
		:return: The new configuration
		:raises ConfigurationError: If a key is unknown or a value is invalid
		"""

		settings: dict[str, typing.Any] = {
			'number_format': self.__number_format__,
			'quit_keyword': self.__quit_keyword__,
			'show_demonstrations': self.__show_demonstrations__,
			'log_file': self.__log_file__,
			'log_level': self.__log_level__,
		}

		for key, value in overrides.items():
			if key not in settings:
				raise Exceptions.ConfigurationError(f'Unknown configuration key \'{key}\'')
			elif key == 'show_demonstrations':
				settings[key] = Configuration.__parse_bool__(key, value)
			elif key == 'log_level':
				settings[key] = Configuration.__parse_level__(value)
			else:
				settings[key] = value

		return Configuration(**settings)

	@property
	def number_format(self) -> str:
		return self.__number_format__

	@property
	def quit_keyword(self) -> str:
		return self.__quit_keyword__

	@property
	def show_demonstrations(self) -> bool:
		return self.__show_demonstrations__

	@property
	def log_file(self) -> typing.Optional[str]:
		return self.__log_file__

	@property
	def log_level(self) -> LogLevel:
		return self.__log_level__
