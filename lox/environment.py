"""
Simplest possible environment concept.

This is the canonical list-structured search: each scope knows its own
bindings and the scope it was created within. Closures keep their scope
alive just by holding a reference to it.
"""
from typing import Any
import abc
from .tokens import Token
from .runtime import LoxRuntimeError

class _Uninitialized:
	def __repr__(self): return "<uninitialized>"

# What a variable holds between "var x;" and its first assignment. Not the same as nil.
UNINITIALIZED = _Uninitialized()

class Environment(abc.ABC):
	@abc.abstractmethod
	def get(self, name:Token) -> Any: pass
	@abc.abstractmethod
	def assign(self, name:Token, value:Any) -> None: pass

class NullEnv(Environment):
	""" Beyond the global scope, where nothing is defined. """
	def get(self, name:Token) -> Any: raise _undefined(name)
	def assign(self, name:Token, value:Any) -> None: raise _undefined(name)
	def __repr__(self): return "<null env>"
null_env = NullEnv()

def _undefined(name:Token):
	return LoxRuntimeError(name, "Undefined variable '%s'." % name.lexeme)

class InnerEnv(Environment):
	def __init__(self, static_link:Environment = null_env):
		self._bindings = {}
		self._static_link = static_link

	def define(self, name:str, value:Any):
		""" Shadows any outer binding of the same name; overwrites any binding in this same scope. """
		self._bindings[name] = value

	def get(self, name:Token) -> Any:
		try: value = self._bindings[name.lexeme]
		except KeyError: return self._static_link.get(name)
		if value is UNINITIALIZED:
			raise LoxRuntimeError(name, "Variable '%s' has not been properly initialized." % name.lexeme)
		return value

	def assign(self, name:Token, value:Any) -> None:
		if name.lexeme in self._bindings: self._bindings[name.lexeme] = value
		else: self._static_link.assign(name, value)

	def __repr__(self):
		return "<env %s / %r>" % (sorted(self._bindings), self._static_link)
