"""
The set of parse-nodes in simple form.
The parser builds these top-down. Later passes dispatch on the class name,
by way of boozetools' Visitor, so each kind of node is its own class.
"""
from typing import Optional, Any, Sequence
from .tokens import Token

class Expr:
	""" Anything that evaluates to a value. """
	def __repr__(self):
		from .render import Render
		return Render().visit(self)

class Stmt:
	""" Anything that executes for effect. """
	def __repr__(self):
		from .render import Render
		return Render().visit(self)

###############################################################################

class Literal(Expr):
	def __init__(self, value:Any): self.value = value

class Grouping(Expr):
	def __init__(self, expression:Expr): self.expression = expression

class Unary(Expr):
	def __init__(self, operator:Token, right:Expr):
		self.operator, self.right = operator, right

class Binary(Expr):
	def __init__(self, left:Expr, operator:Token, right:Expr):
		self.left, self.operator, self.right = left, operator, right

class Logical(Expr):
	""" Like Binary, but only evaluates the right side if it must. """
	def __init__(self, left:Expr, operator:Token, right:Expr):
		self.left, self.operator, self.right = left, operator, right

class Variable(Expr):
	def __init__(self, name:Token): self.name = name

class Assign(Expr):
	def __init__(self, name:Token, value:Expr):
		self.name, self.value = name, value

class Call(Expr):
	# The paren is the closing parenthesis, which is where run-time errors get blamed.
	def __init__(self, callee:Expr, paren:Token, arguments:Sequence[Expr]):
		self.callee, self.paren, self.arguments = callee, paren, arguments

###############################################################################

class Expression(Stmt):
	def __init__(self, expression:Expr): self.expression = expression

class Print(Stmt):
	def __init__(self, expression:Expr): self.expression = expression

class Var(Stmt):
	def __init__(self, name:Token, initializer:Optional[Expr]):
		self.name, self.initializer = name, initializer

class Block(Stmt):
	def __init__(self, statements:Sequence[Stmt]): self.statements = statements

class If(Stmt):
	def __init__(self, condition:Expr, then_branch:Stmt, else_branch:Optional[Stmt]):
		self.condition, self.then_branch, self.else_branch = condition, then_branch, else_branch

class While(Stmt):
	def __init__(self, condition:Expr, body:Stmt):
		self.condition, self.body = condition, body

class Break(Stmt):
	def __init__(self, keyword:Token): self.keyword = keyword

class Function(Stmt):
	def __init__(self, name:Token, params:Sequence[Token], body:Sequence[Stmt]):
		self.name, self.params, self.body = name, params, body
	def arity(self): return len(self.params)

class Return(Stmt):
	def __init__(self, keyword:Token, value:Optional[Expr]):
		self.keyword, self.value = keyword, value

###############################################################################

def first_token(node) -> Optional[Token]:
	"""
	The leftmost token anywhere within a tree, for blaming the tree as a whole.
	Trees can be very deep, so this keeps its own agenda rather than recursing.
	"""
	agenda = [node]
	while agenda:
		item = agenda.pop()
		if isinstance(item, Token): return item
		if isinstance(item, (Expr, Stmt)): agenda.extend(reversed(list(vars(item).values())))
		elif isinstance(item, (list, tuple)): agenda.extend(reversed(item))
	return None
