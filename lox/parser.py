"""
Recursive-descent parser for Lox: one method per grammar rule.

	program     -> declaration* END
	declaration -> funDecl | varDecl | statement
	statement   -> exprStmt | forStmt | ifStmt | printStmt | returnStmt
	             | whileStmt | breakStmt | block
	expression  -> assignment
	assignment  -> IDENTIFIER "=" assignment | logic_or
	logic_or    -> logic_and ( "or" logic_and )*
	logic_and   -> equality ( "and" equality )*
	equality    -> comparison ( ( "!=" | "==" ) comparison )*
	comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
	term        -> factor ( ( "-" | "+" ) factor )*
	factor      -> unary ( ( "/" | "*" | "%" ) unary )*
	unary       -> ( "!" | "-" ) unary | call
	call        -> primary ( "(" arguments? ")" )*
	primary     -> "true" | "false" | "nil" | NUMBER | STRING | IDENTIFIER | "(" expression ")"

When something does not fit, the parser makes a note in the report,
skips ahead to what looks like the start of the next statement, and carries on.
"""
from typing import Optional
from boozetools.parsing.interface import ParseError
from . import syntax
from .tokens import Token, IDENTIFIER, NUMBER, STRING, STATEMENT_STARTERS
from .diagnostics import Report
from .scanner import scan

MAX_ARGUMENTS = 255

class LoxParseError(ParseError):
	""" Unwinds to the nearest declaration, which then resynchronizes. """
	pass

class Parser:
	def __init__(self, tokens:list[Token], report:Report):
		assert tokens and tokens[-1].is_end()
		self._tokens = tokens
		self._report = report
		self._current = 0
		self._loop_depth = 0
		self._function_depth = 0

	def parse(self) -> list[syntax.Stmt]:
		statements = []
		while not self._at_end():
			try: stmt = self._declaration()
			except RecursionError:
				self._report.error_at(self._peek(), "Expression nesting is too deep.")
				self._synchronize()
				continue
			if stmt is not None: statements.append(stmt)
		return statements

	# Token-stream plumbing

	def _peek(self) -> Token: return self._tokens[self._current]
	def _previous(self) -> Token: return self._tokens[self._current - 1]
	def _at_end(self) -> bool: return self._peek().is_end()
	def _check(self, kind:str) -> bool: return self._peek().kind == kind

	def _advance(self) -> Token:
		if not self._at_end(): self._current += 1
		return self._previous()

	def _match(self, *kinds:str) -> bool:
		if self._peek().kind in kinds:
			self._advance()
			return True
		return False

	def _consume(self, kind:str, message:str) -> Token:
		if self._check(kind): return self._advance()
		raise self._error(self._peek(), message)

	def _error(self, token:Token, message:str) -> LoxParseError:
		self._report.error_at(token, message)
		return LoxParseError(token, message)

	def _synchronize(self):
		self._advance()
		while not self._at_end():
			if self._previous().kind == ";": return
			if self._peek().kind in STATEMENT_STARTERS: return
			self._advance()

	# Declarations

	def _declaration(self) -> Optional[syntax.Stmt]:
		try:
			if self._match("FUN"): return self._function("function")
			if self._match("VAR"): return self._var_declaration()
			return self._statement()
		except LoxParseError:
			self._synchronize()
			return None

	def _function(self, kind:str) -> syntax.Function:
		name = self._consume(IDENTIFIER, "Expect %s name." % kind)
		self._consume("(", "Expect '(' after %s name." % kind)
		params = []
		if not self._check(")"):
			while True:
				if len(params) >= MAX_ARGUMENTS:
					self._error(self._peek(), "Can't have more than %d parameters." % MAX_ARGUMENTS)
				params.append(self._consume(IDENTIFIER, "Expect parameter name."))
				if not self._match(","): break
		self._consume(")", "Expect ')' after parameters.")
		self._consume("{", "Expect '{' before %s body." % kind)
		# A loop outside the function is no loop to the body inside it.
		outer_loops, self._loop_depth = self._loop_depth, 0
		self._function_depth += 1
		try:
			body = self._block()
		finally:
			self._loop_depth = outer_loops
			self._function_depth -= 1
		return syntax.Function(name, params, body)

	def _var_declaration(self) -> syntax.Var:
		name = self._consume(IDENTIFIER, "Expect variable name.")
		initializer = self._expression() if self._match("=") else None
		self._consume(";", "Expect ';' after variable declaration.")
		return syntax.Var(name, initializer)

	# Statements

	def _statement(self) -> syntax.Stmt:
		if self._match("FOR"): return self._for_statement()
		if self._match("IF"): return self._if_statement()
		if self._match("PRINT"): return self._print_statement()
		if self._match("RETURN"): return self._return_statement()
		if self._match("WHILE"): return self._while_statement()
		if self._match("BREAK"): return self._break_statement()
		if self._match("{"): return syntax.Block(self._block())
		return self._expression_statement()

	def _for_statement(self) -> syntax.Stmt:
		self._consume("(", "Expect '(' after 'for'.")
		if self._match(";"): initializer = None
		elif self._match("VAR"): initializer = self._var_declaration()
		else: initializer = self._expression_statement()

		condition = None if self._check(";") else self._expression()
		self._consume(";", "Expect ';' after loop condition.")
		increment = None if self._check(")") else self._expression()
		self._consume(")", "Expect ')' after for clauses.")

		body = self._loop_body()
		if increment is not None:
			body = syntax.Block([body, syntax.Expression(increment)])
		if condition is None:
			condition = syntax.Literal(True)
		body = syntax.While(condition, body)
		if initializer is not None:
			body = syntax.Block([initializer, body])
		return body

	def _loop_body(self) -> syntax.Stmt:
		self._loop_depth += 1
		try: return self._statement()
		finally: self._loop_depth -= 1

	def _if_statement(self) -> syntax.If:
		self._consume("(", "Expect '(' after 'if'.")
		condition = self._expression()
		self._consume(")", "Expect ')' after if condition.")
		then_branch = self._statement()
		else_branch = self._statement() if self._match("ELSE") else None
		return syntax.If(condition, then_branch, else_branch)

	def _print_statement(self) -> syntax.Print:
		value = self._expression()
		self._consume(";", "Expect ';' after value.")
		return syntax.Print(value)

	def _return_statement(self) -> syntax.Return:
		keyword = self._previous()
		if not self._function_depth:
			self._error(keyword, "Can't return from top-level code.")
		value = None if self._check(";") else self._expression()
		self._consume(";", "Expect ';' after return value.")
		return syntax.Return(keyword, value)

	def _while_statement(self) -> syntax.While:
		self._consume("(", "Expect '(' after 'while'.")
		condition = self._expression()
		self._consume(")", "Expect ')' after condition.")
		return syntax.While(condition, self._loop_body())

	def _break_statement(self) -> syntax.Break:
		keyword = self._previous()
		if not self._loop_depth:
			self._error(keyword, "Can't use 'break' outside of a loop.")
		self._consume(";", "Expect ';' after 'break'.")
		return syntax.Break(keyword)

	def _block(self) -> list[syntax.Stmt]:
		statements = []
		while not self._check("}") and not self._at_end():
			stmt = self._declaration()
			if stmt is not None: statements.append(stmt)
		self._consume("}", "Expect '}' after block.")
		return statements

	def _expression_statement(self) -> syntax.Expression:
		expr = self._expression()
		self._consume(";", "Expect ';' after expression.")
		return syntax.Expression(expr)

	# Expressions

	def _expression(self) -> syntax.Expr:
		return self._assignment()

	def _assignment(self) -> syntax.Expr:
		expr = self._or()
		if self._match("="):
			equals = self._previous()
			value = self._assignment()
			if isinstance(expr, syntax.Variable):
				return syntax.Assign(expr.name, value)
			# Noted, but the parser is not confused, so no need to synchronize.
			self._error(equals, "Invalid assignment target.")
		return expr

	def _or(self) -> syntax.Expr:
		expr = self._and()
		while self._match("OR"):
			expr = syntax.Logical(expr, self._previous(), self._and())
		return expr

	def _and(self) -> syntax.Expr:
		expr = self._equality()
		while self._match("AND"):
			expr = syntax.Logical(expr, self._previous(), self._equality())
		return expr

	def _left_associative(self, operand, *kinds:str) -> syntax.Expr:
		expr = operand()
		while self._match(*kinds):
			expr = syntax.Binary(expr, self._previous(), operand())
		return expr

	def _equality(self): return self._left_associative(self._comparison, "!=", "==")
	def _comparison(self): return self._left_associative(self._term, ">", ">=", "<", "<=")
	def _term(self): return self._left_associative(self._factor, "-", "+")
	def _factor(self): return self._left_associative(self._unary, "/", "*", "%")

	def _unary(self) -> syntax.Expr:
		if self._match("!", "-"):
			operator = self._previous()
			return syntax.Unary(operator, self._unary())
		return self._call()

	def _call(self) -> syntax.Expr:
		expr = self._primary()
		while self._match("("):
			expr = self._finish_call(expr)
		return expr

	def _finish_call(self, callee:syntax.Expr) -> syntax.Call:
		arguments = []
		if not self._check(")"):
			while True:
				if len(arguments) >= MAX_ARGUMENTS:
					self._error(self._peek(), "Can't have more than %d arguments." % MAX_ARGUMENTS)
				arguments.append(self._expression())
				if not self._match(","): break
		paren = self._consume(")", "Expect ')' after arguments.")
		return syntax.Call(callee, paren, arguments)

	def _primary(self) -> syntax.Expr:
		if self._match("FALSE"): return syntax.Literal(False)
		if self._match("TRUE"): return syntax.Literal(True)
		if self._match("NIL"): return syntax.Literal(None)
		if self._match(NUMBER, STRING): return syntax.Literal(self._previous().literal)
		if self._match(IDENTIFIER): return syntax.Variable(self._previous())
		if self._match("PRINT"):
			# In the middle of an expression, "print" means the native function.
			return syntax.Variable(self._previous())
		if self._match("("):
			expr = self._expression()
			self._consume(")", "Expect ')' after expression.")
			return syntax.Grouping(expr)
		raise self._error(self._peek(), "Expect expression.")

def parse(tokens:list[Token], report:Report) -> list[syntax.Stmt]:
	return Parser(tokens, report).parse()

def parse_text(text:str, report:Report) -> list[syntax.Stmt]:
	""" Scan, then parse. Check the report before trusting the result. """
	tokens = scan(text, report)
	report.info("Scanned %d tokens." % len(tokens))
	statements = parse(tokens, report)
	report.info("Parsed %d top-level statements." % len(statements))
	return statements
