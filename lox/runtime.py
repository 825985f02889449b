"""
The rules of the road for run-time values.

Lox values play themselves as Python objects:
	nil is None, booleans are bool, numbers are float, strings are str,
	and functions are instances of values.Callable.
Watch out: Python's bool is a kind of int, so type tests here are exact.

Numbers print as Python's shortest round-trip repr, less any trailing ".0".
That means very large and very small magnitudes come out in exponent form,
e.g. 1e+22 and 1e-07, while 3.0 prints as 3.
"""
import math
from typing import Any
from .tokens import Token

class LoxRuntimeError(Exception):
	""" The one kind of failure a running program can have. It blames a token. """
	def __init__(self, token:Token, message:str):
		super().__init__(message)
		self.token = token
		self.message = message

###############################################################################
#  What becomes of executing a statement. Only these three things can happen,
#  short of a run-time error.

class Outcome:
	pass

class _Normal(Outcome):
	def __repr__(self): return "NORMAL"

class _Break(Outcome):
	def __repr__(self): return "BREAK"

NORMAL = _Normal()
BREAK = _Break()

class ReturnValue(Outcome):
	""" Carries a value out through any number of blocks, as far as the nearest call. """
	def __init__(self, value:Any): self.value = value
	def __repr__(self): return "<return %s>" % stringify(self.value)

###############################################################################

def is_number(x) -> bool: return type(x) is float

def is_truthy(x) -> bool:
	# Zero and the empty string are true. Only nil and false are not.
	if x is None: return False
	if type(x) is bool: return x
	return True

def is_equal(a, b) -> bool:
	if a is None: return b is None
	return type(a) is type(b) and a == b

def stringify(x) -> str:
	if x is None: return "nil"
	if type(x) is bool: return "true" if x else "false"
	if type(x) is float:
		text = repr(x)
		return text[:-2] if text.endswith(".0") else text
	return str(x)

###############################################################################

def _check_number_operand(operator:Token, operand):
	if not is_number(operand):
		raise LoxRuntimeError(operator, "Operand must be a number.")

def _check_number_operands(operator:Token, left, right):
	if not (is_number(left) and is_number(right)):
		raise LoxRuntimeError(operator, "Operands must be numbers.")

def _check_divisor(operator:Token, right):
	if right == 0:
		raise LoxRuntimeError(operator, "Can't divide by zero.")

def _numeric(fn):
	def op(operator, left, right):
		_check_number_operands(operator, left, right)
		return fn(left, right)
	return op

def _divisive(fn):
	def op(operator, left, right):
		_check_number_operands(operator, left, right)
		_check_divisor(operator, right)
		return fn(left, right)
	return op

def _plus(operator:Token, left, right):
	if type(left) is str and type(right) is str: return left + right
	if type(left) is str or type(right) is str: return stringify(left) + stringify(right)
	if is_number(left) and is_number(right): return left + right
	raise LoxRuntimeError(operator, "Operands must be two numbers or two strings.")

BINARY = {
	"+"  : _plus,
	"-"  : _numeric(lambda a, b: a - b),
	"*"  : _numeric(lambda a, b: a * b),
	"/"  : _divisive(lambda a, b: a / b),
	"%"  : _divisive(math.fmod),  # Truncated, so the sign follows the dividend.
	">"  : _numeric(lambda a, b: a > b),
	">=" : _numeric(lambda a, b: a >= b),
	"<"  : _numeric(lambda a, b: a < b),
	"<=" : _numeric(lambda a, b: a <= b),
	"==" : lambda operator, a, b: is_equal(a, b),
	"!=" : lambda operator, a, b: not is_equal(a, b),
}

def _negate(operator:Token, right):
	_check_number_operand(operator, right)
	return -right

UNARY = {
	"-" : _negate,
	"!" : lambda operator, right: not is_truthy(right),
}

# Short-circuit operators: the left operand's truthiness at which evaluation stops early.
SHORTCUT = {
	"OR" : True,
	"AND" : False,
}
