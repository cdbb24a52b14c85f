from __future__ import annotations

import inspect
import typing
import types
import typeguard

from . import Exceptions
from . import Misc


def __deduce_annotation__(annotation: typing.Any) -> tuple[typing.Any, ...]:
	"""
	INTERNAL FUNCTION; DO NOT USE
	Splits a type hint into the tuple of types it allows
	"""

	if annotation is inspect.Parameter.empty or annotation is typing.Any:
		return typing.Any,
	elif isinstance(annotation, (type, typing._GenericAlias, types.GenericAlias)):
		return annotation,
	elif isinstance(annotation, types.UnionType) or typing.get_origin(annotation) is typing.Union:
		return typing.get_args(annotation)
	elif annotation is None:
		return type(None),
	else:
		raise TypeError(f'Non-standard type hint: \'{annotation}\' ({type(annotation)})')


def __can_cast__(value: typing.Any, type_: typing.Any) -> bool:
	"""
	INTERNAL FUNCTION; DO NOT USE
	Checks whether 'value' is convertible to 'type_' through the type's constructor
	"""

	if type_ is typing.Any or isinstance(value, type_):
		return True
	elif not isinstance(type_, type) or isinstance(value, (str, bytes)) and type_ is not str:
		return False

	try:
		type_(value)
		return True
	except (TypeError, ValueError, OverflowError, NotImplementedError):
		return False


def __match_type__(value: typing.Any, annotation: tuple[typing.Any, ...]) -> int:
	"""
	INTERNAL FUNCTION; DO NOT USE
	Scores how well 'value' fits a set of types
	2 - Exact match, 1 - Castable match, 0 - No match
	"""

	match: int = 0

	for annotate in annotation:
		if annotate is typing.Any:
			return 2
		elif isinstance(annotate, type):
			match = max(match, 2 if type(value) is annotate else 1 if __can_cast__(value, annotate) else 0)
		else:
			try:
				typeguard.check_type(value, annotate)
				match = 2
			except typeguard.TypeCheckError:
				pass

	return match


class __OverloadCaller__:
	"""
	INTERNAL CLASS; DO NOT USE
	Class for handling function overloads and delegation
	"""

	__FunctionOverloads: dict[str, __OverloadCaller__] = {}

	@classmethod
	def new(cls, function: typing.Callable, strict_only: bool = False) -> __OverloadCaller__:
		"""
		Creates and stores a new function overload
		:param function: (CALLABLE) The function to overload
		:param strict_only: (bool) Whether the function should only allow strict matches
		:return: (__OverloadCaller) The delegator
		"""

		key: str = f'{function.__module__}.{function.__qualname__}'

		if key not in cls.__FunctionOverloads:
			cls.__FunctionOverloads[key] = cls(key)

		caller: __OverloadCaller__ = cls.__FunctionOverloads[key]
		caller.register(function, strict_only)
		return caller

	def __init__(self, qualified_name: str):
		"""
		INTERNAL CLASS; DO NOT USE
		[__OverloadCaller] - Class for handling function overloads and delegation
		- Constructor -
		SHOULD NOT BE CALLED DIRECTLY; USE '__OverloadCaller.new'
		:param qualified_name: (str) The module qualified name of the overloaded function
		"""

		self.__qualified_name__: str = qualified_name
		self.__overloads__: dict[typing.Callable, tuple[bool, inspect.Signature, dict[str, tuple[typing.Any, ...]]]] = {}

	def __call__(self, *args, **kwargs) -> typing.Any:
		"""
		Calls the overloaded function based on argument types
		:param args: The arguments to call with
		:param kwargs: The keyword arguments to call with
		:return: (ANY) The function result
		:raises CorruptError: If multiple strict matches are found
		:raises AmbiguousError: If multiple matches are found
		:raises TypeError: If no matches are found
		"""

		strict_match: list[tuple[typing.Callable, inspect.Signature, inspect.BoundArguments, dict[str, tuple[typing.Any, ...]]]] = []
		soft_match: list[tuple[typing.Callable, inspect.Signature, inspect.BoundArguments, dict[str, tuple[typing.Any, ...]]]] = []

		for function, (strict_only, signature, annotations) in self.__overloads__.items():
			try:
				bound: inspect.BoundArguments = signature.bind(*args, **kwargs)
			except TypeError:
				continue

			score: int = 2

			for name, value in bound.arguments.items():
				if name not in annotations:
					continue

				parameter: inspect.Parameter = signature.parameters[name]
				values: tuple[typing.Any, ...] = tuple(value) if parameter.kind == parameter.VAR_POSITIONAL else tuple(value.values()) if parameter.kind == parameter.VAR_KEYWORD else (value,)
				score = min(score, min((__match_type__(v, annotations[name]) for v in values), default=2))

			if score == 2:
				strict_match.append((function, signature, bound, annotations))
			elif score == 1 and not strict_only:
				soft_match.append((function, signature, bound, annotations))

		if len(strict_match) > 1:
			raise Exceptions.CorruptError(f'Multiple strict matches found for function \'{self.__qualified_name__}\'')
		elif len(strict_match) == 1:
			function, _, bound, annotations = strict_match[0]
			return self.__return__(function(*bound.args, **bound.kwargs), annotations)
		elif len(soft_match) > 1:
			raise Exceptions.AmbiguousError(f'Multiple matches found for function \'{self.__qualified_name__}\'')
		elif len(soft_match) == 1:
			function, signature, bound, annotations = soft_match[0]

			for name, value in tuple(bound.arguments.items()):
				parameter: inspect.Parameter = signature.parameters[name]

				if name in annotations and parameter.kind not in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
					bound.arguments[name] = self.__cast__(value, annotations[name])

			return self.__return__(function(*bound.args, **bound.kwargs), annotations)
		else:
			received: str = ', '.join([*(type(x).__name__ for x in args), *(f'{x}={type(y).__name__}' for x, y in kwargs.items())])
			accepted: str = '\n'.join(f' - {signature}' for _, signature, _ in self.__overloads__.values())
			raise TypeError(f'No matches found for function \'{self.__qualified_name__}\' with arguments ({received}); accepted:\n{accepted}')

	@staticmethod
	def __cast__(value: typing.Any, types_: tuple[typing.Any, ...]) -> typing.Any:
		for type_ in types_:
			if type_ is typing.Any or isinstance(type_, type) and isinstance(value, type_):
				return value

		for type_ in types_:
			if isinstance(type_, type) and __can_cast__(value, type_):
				return type_(value)

		raise TypeError(f'Uncastable [{type(value)} >> {types_}]')

	@staticmethod
	def __return__(result: typing.Any, annotations: dict[str, tuple[typing.Any, ...]]) -> typing.Any:
		if 'return' not in annotations:
			return result

		returns: tuple[typing.Any, ...] = annotations['return']

		if __match_type__(result, returns) == 2 or any(isinstance(x, type) and isinstance(result, x) for x in returns):
			return result

		for rtype in returns:
			if isinstance(rtype, type) and __can_cast__(result, rtype):
				return rtype(result)

		raise TypeError(f'Failed to cast function return ({type(result)}) to one of type(s) \'{returns}\'')

	def register(self, function: typing.Callable, strict_only: bool) -> None:
		"""
		Adds an overload to this caller, replacing any overload with identical annotations
		The signature and resolved type hints are computed once here and reused on every call
		:param function: The overload
		:param strict_only: Whether to allow only strict matches
		"""

		for existing in tuple(self.__overloads__):
			if existing.__annotations__ == function.__annotations__:
				del self.__overloads__[existing]

		annotations: dict[str, tuple[typing.Any, ...]] = {name: __deduce_annotation__(hint) for name, hint in typing.get_type_hints(function).items()}
		self.__overloads__[function] = (strict_only, inspect.signature(function), annotations)


def Overload(*function: typing.Callable, strict: bool = False) -> typing.Callable:
	"""
	Decorator for overloading functions
	Function parameters must be type hinted (or typing.Any is assumed)
	Type hints are resolved when the decorator is applied
	This decorator is not suitable for pickling
	:param function: The function to decorate
	:param strict: Whether to only allow exact types (defaults to False)
	:return: None or binder if used as a decorator
	:raises InvalidArgumentException: If callback is not callable
	"""

	def binder(callback: typing.Callable) -> typing.Callable:
		Misc.raise_ifn(callable(callback), Exceptions.InvalidArgumentException(Overload, 'function', type(callback)))
		caller: __OverloadCaller__ = __OverloadCaller__.new(callback, strict)
		redirect: typing.Callable = lambda *args, __caller=caller, **kwargs: __caller(*args, **kwargs)
		redirect.__doc__ = callback.__doc__
		redirect.__name__ = callback.__name__
		return redirect

	if len(function) == 0:
		return binder
	elif callable(function[0]):
		return binder(function[0])
	else:
		raise Exceptions.InvalidArgumentException(Overload, 'function', type(function[0]))
