"""
This module defines the specialized value-types that the tree-walker operates in terms of.
Basic primitive values play themselves, but functions need more help.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable as PyCallable, Sequence
from . import syntax
from .environment import InnerEnv
from .runtime import ReturnValue

class Callable(ABC):
	""" A run-time object that can be applied with arguments. """
	@abstractmethod
	def arity(self) -> int: pass
	@abstractmethod
	def invoke(self, interpreter, arguments:Sequence[Any]) -> Any: pass

class UserFunction(Callable):
	""" The run-time manifestation of a function declaration: tied to its natal environment. """

	def __init__(self, declaration:syntax.Function, closure:InnerEnv):
		self._declaration = declaration
		self._closure = closure

	def arity(self) -> int: return self._declaration.arity()

	def invoke(self, interpreter, arguments:Sequence[Any]) -> Any:
		# Parent is where the function was written, not where it was called from.
		frame = InnerEnv(self._closure)
		for param, arg in zip(self._declaration.params, arguments):
			frame.define(param.lexeme, arg)
		outcome = interpreter.execute_block(self._declaration.body, frame)
		if isinstance(outcome, ReturnValue): return outcome.value

	def __str__(self): return "<fn %s>" % self._declaration.name.lexeme

class NativeFunction(Callable):
	""" Something the host provides. The operation gets the interpreter and the argument list. """

	def __init__(self, name:str, arity:int, operation:PyCallable[[Any, Sequence[Any]], Any]):
		self.name = name
		self._arity = arity
		self._operation = operation

	def arity(self) -> int: return self._arity

	def invoke(self, interpreter, arguments:Sequence[Any]) -> Any:
		return self._operation(interpreter, arguments)

	def __str__(self): return "<native fn %s>" % self.name
