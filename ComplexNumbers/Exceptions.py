import typing
import types


class InvalidArgumentException(TypeError):
	"""
	[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
	"""

	def __init__(self, caller: typing.Callable | types.FunctionType | types.MethodType | types.LambdaType = None, parameter_name: str = None, argument_type: type = None, parameter_types: typing.Iterable[type | str] = None):
		"""
		[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
		- Constructor -
		:param caller: (CALLABLE) The callable that raised this exception
		:param parameter_name: (str) The name of the parameter
		:param argument_type: (type) The type of the argument passed in
		:param parameter_types: (ITERABLE[type]) The types this parameter accepts or '<UNKNOWN>' if None
		"""

		if caller is None or parameter_name is None or argument_type is None:
			super().__init__()
			return

		if parameter_types is None:
			type_list: str = '<UNKNOWN>'
		else:
			names: tuple[str, ...] = tuple(f"'{x.__name__ if isinstance(x, type) else x}'" for x in parameter_types)
			type_list: str = f'either {", ".join(names[:-1])} or {names[-1]}' if len(names) > 1 else names[0]

		qualname: str = getattr(caller, '__qualname__', str(caller))
		code: typing.Optional[types.CodeType] = getattr(caller, '__code__', None)
		parameters: str = ', '.join(code.co_varnames[:code.co_argcount]) if code is not None else '...'
		callable_type: str = 'Lambda' if '<lambda>' in qualname else 'Method' if '.' in qualname else 'Function' if isinstance(caller, types.FunctionType) else 'Callable'
		super().__init__(f'{callable_type} {qualname.replace(".", "::")}({parameters}) - parameter \'{parameter_name}\' must be {type_list}; got \'{argument_type.__name__}\'')


class CorruptError(RuntimeError):
	"""
	[CorruptError(RuntimeError)] - Exception representing invalid data or state
	"""

	def __init__(self, what: str = ''):
		"""
		[CorruptError(RuntimeError)] - Exception representing invalid data or state
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)


class AmbiguousError(ValueError):
	"""
	[AmbiguousError(ValueError)] - Exception representing ambiguous data or state
	"""

	def __init__(self, what: str = ''):
		"""
		[AmbiguousError(ValueError)] - Exception representing ambiguous data or state
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)


class DivisionByZeroError(ZeroDivisionError):
	"""
	[DivisionByZeroError(ZeroDivisionError)] - Exception representing a division by the zero complex number
	"""

	def __init__(self, what: str = 'Cannot divide by zero complex number.'):
		"""
		[DivisionByZeroError(ZeroDivisionError)] - Exception representing a division by the zero complex number
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)


class InvalidFormatError(ValueError):
	"""
	[InvalidFormatError(ValueError)] - Exception representing text or a format specifier that does not match the expected grammar
	"""

	def __init__(self, text: str = '', what: str = 'Invalid format'):
		"""
		[InvalidFormatError(ValueError)] - Exception representing text or a format specifier that does not match the expected grammar
		- Constructor -
		:param text: The offending text
		:param what: The message
		"""

		super().__init__(f'{what}: \'{text}\'')
		self.__text__: str = text

	@property
	def text(self) -> str:
		"""
		:return: The text that failed to parse
		"""

		return self.__text__


class ConfigurationError(ValueError):
	"""
	[ConfigurationError(ValueError)] - Exception representing a malformed configuration source
	"""

	def __init__(self, what: str = ''):
		"""
		[ConfigurationError(ValueError)] - Exception representing a malformed configuration source
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)
