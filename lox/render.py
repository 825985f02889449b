"""
Render syntax trees in a parenthesized prefix notation.
Mainly for looking at what the parser made of things.
"""
from boozetools.support.foundation import Visitor
from . import syntax
from .runtime import stringify

class Render(Visitor):

	def _paren(self, head:str, *parts):
		return "(%s)" % " ".join([head, *(self.visit(p) for p in parts)])

	def program(self, statements) -> str:
		return "\n".join(self.visit(s) for s in statements)

	def visit_Literal(self, expr:syntax.Literal):
		if isinstance(expr.value, str): return '"%s"' % expr.value
		return stringify(expr.value)

	def visit_Grouping(self, expr:syntax.Grouping): return self._paren("group", expr.expression)
	def visit_Unary(self, expr:syntax.Unary): return self._paren(expr.operator.lexeme, expr.right)
	def visit_Binary(self, expr:syntax.Binary): return self._paren(expr.operator.lexeme, expr.left, expr.right)
	def visit_Logical(self, expr:syntax.Logical): return self._paren(expr.operator.lexeme, expr.left, expr.right)
	def visit_Variable(self, expr:syntax.Variable): return expr.name.lexeme
	def visit_Assign(self, expr:syntax.Assign): return "(= %s %s)" % (expr.name.lexeme, self.visit(expr.value))
	def visit_Call(self, expr:syntax.Call): return self._paren("call", expr.callee, *expr.arguments)

	def visit_Expression(self, stmt:syntax.Expression): return self._paren(";", stmt.expression)
	def visit_Print(self, stmt:syntax.Print): return self._paren("print", stmt.expression)
	def visit_Block(self, stmt:syntax.Block): return self._paren("block", *stmt.statements)
	def visit_Break(self, stmt:syntax.Break): return "(break)"

	def visit_Var(self, stmt:syntax.Var):
		if stmt.initializer is None: return "(var %s)" % stmt.name.lexeme
		return "(var %s %s)" % (stmt.name.lexeme, self.visit(stmt.initializer))

	def visit_If(self, stmt:syntax.If):
		if stmt.else_branch is None: return self._paren("if", stmt.condition, stmt.then_branch)
		return self._paren("if", stmt.condition, stmt.then_branch, stmt.else_branch)

	def visit_While(self, stmt:syntax.While): return self._paren("while", stmt.condition, stmt.body)

	def visit_Function(self, stmt:syntax.Function):
		params = "(%s)" % " ".join(p.lexeme for p in stmt.params)
		return self._paren("fun %s %s" % (stmt.name.lexeme, params), *stmt.body)

	def visit_Return(self, stmt:syntax.Return):
		if stmt.value is None: return "(return)"
		return self._paren("return", stmt.value)
