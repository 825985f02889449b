"""
The tree-walking evaluator.

Expressions evaluate to values. Statements execute to an Outcome:
NORMAL, BREAK, or a ReturnValue. Composite statements look at what
their parts produced and pass anything unusual straight up the line,
so break and return never need to be exceptions. Only run-time
errors unwind the Python stack.
"""
import sys
from typing import Any, Sequence
from boozetools.support.foundation import Visitor
from . import syntax
from .diagnostics import Report
from .environment import InnerEnv, UNINITIALIZED
from .primitive import install_natives
from .runtime import (
	LoxRuntimeError, Outcome, NORMAL, BREAK, ReturnValue,
	is_truthy, stringify, BINARY, UNARY, SHORTCUT,
)
from .tokens import END, synthetic
from .values import Callable, UserFunction

class Interpreter(Visitor):
	globals: InnerEnv

	def __init__(self, report:Report, out=None):
		self._report = report
		self._out = out
		self.globals = InnerEnv()
		install_natives(self.globals)
		self._environment = self.globals

	def interpret(self, statements:Sequence[syntax.Stmt]) -> bool:
		"""
		Run a program, or one line of one. The first run-time error ends the run
		and goes to the report. Returns whether the run went the distance.
		"""
		try:
			for stmt in statements:
				# A stray break or return at the top just has nothing to leave.
				self.execute(stmt)
		except LoxRuntimeError as ex:
			self._report.runtime_error(ex)
			return False
		except RecursionError:
			# Deep nesting that involves no call. Blame the statement as a whole.
			where = syntax.first_token(stmt) or synthetic(END, "", 0)
			self._report.runtime_error(LoxRuntimeError(where, "Stack overflow."))
			return False
		return True

	def emit(self, text:str):
		""" The output sink, for print statements and the print native alike. """
		print(text, file=self._out or sys.stdout)

	def evaluate(self, expr:syntax.Expr) -> Any:
		return self.visit(expr)

	def execute(self, stmt:syntax.Stmt) -> Outcome:
		return self.visit(stmt)

	def execute_block(self, statements:Sequence[syntax.Stmt], environment:InnerEnv) -> Outcome:
		previous = self._environment
		self._environment = environment
		try:
			for stmt in statements:
				outcome = self.execute(stmt)
				if outcome is not NORMAL: return outcome
			return NORMAL
		finally:
			self._environment = previous

	###############################################################################
	# Expressions

	def visit_Literal(self, expr:syntax.Literal): return expr.value

	def visit_Grouping(self, expr:syntax.Grouping): return self.evaluate(expr.expression)

	def visit_Unary(self, expr:syntax.Unary):
		right = self.evaluate(expr.right)
		return UNARY[expr.operator.kind](expr.operator, right)

	def visit_Binary(self, expr:syntax.Binary):
		left = self.evaluate(expr.left)
		right = self.evaluate(expr.right)
		return BINARY[expr.operator.kind](expr.operator, left, right)

	def visit_Logical(self, expr:syntax.Logical):
		left = self.evaluate(expr.left)
		if is_truthy(left) == SHORTCUT[expr.operator.kind]: return left
		return self.evaluate(expr.right)

	def visit_Variable(self, expr:syntax.Variable):
		return self._environment.get(expr.name)

	def visit_Assign(self, expr:syntax.Assign):
		value = self.evaluate(expr.value)
		self._environment.assign(expr.name, value)
		return value

	def visit_Call(self, expr:syntax.Call):
		callee = self.evaluate(expr.callee)
		if not isinstance(callee, Callable):
			raise LoxRuntimeError(expr.paren, "Can only call functions and classes.")
		arguments = [self.evaluate(a) for a in expr.arguments]
		if len(arguments) != callee.arity():
			message = "Expected %d arguments but got %d." % (callee.arity(), len(arguments))
			raise LoxRuntimeError(expr.paren, message)
		try:
			return callee.invoke(self, arguments)
		except RecursionError:
			raise LoxRuntimeError(expr.paren, "Stack overflow.") from None

	###############################################################################
	# Statements

	def visit_Expression(self, stmt:syntax.Expression):
		self.evaluate(stmt.expression)
		return NORMAL

	def visit_Print(self, stmt:syntax.Print):
		self.emit(stringify(self.evaluate(stmt.expression)))
		return NORMAL

	def visit_Var(self, stmt:syntax.Var):
		value = UNINITIALIZED if stmt.initializer is None else self.evaluate(stmt.initializer)
		self._environment.define(stmt.name.lexeme, value)
		return NORMAL

	def visit_Block(self, stmt:syntax.Block):
		return self.execute_block(stmt.statements, InnerEnv(self._environment))

	def visit_If(self, stmt:syntax.If):
		if is_truthy(self.evaluate(stmt.condition)):
			return self.execute(stmt.then_branch)
		elif stmt.else_branch is not None:
			return self.execute(stmt.else_branch)
		return NORMAL

	def visit_While(self, stmt:syntax.While):
		while is_truthy(self.evaluate(stmt.condition)):
			outcome = self.execute(stmt.body)
			if outcome is BREAK: break
			if outcome is not NORMAL: return outcome
		return NORMAL

	def visit_Break(self, stmt:syntax.Break): return BREAK

	def visit_Function(self, stmt:syntax.Function):
		# The closure is the current environment, which is also where the name goes.
		# That is how a function gets to call itself.
		self._environment.define(stmt.name.lexeme, UserFunction(stmt, self._environment))
		return NORMAL

	def visit_Return(self, stmt:syntax.Return):
		value = None if stmt.value is None else self.evaluate(stmt.value)
		return ReturnValue(value)
