"""
Tokens are the one thing every stage agrees on.

A token's kind is a plain (interned) string:
	* Punctuation and operators are their own glyph, e.g. "(" or "!=".
	* Reserved words are upper-cased, e.g. "WHILE".
	* Everything else is "identifier", "number", or "string".
	* The scanner always finishes with a single END token.
"""
import sys
from typing import NamedTuple, Any

IDENTIFIER = "identifier"
NUMBER = "number"
STRING = "string"
END = "<END>"

KEYWORDS = {
	word: sys.intern(word.upper())
	for word in "and break else false for fun if nil or print return true var while".split()
}

# Reserved words that begin a statement or declaration; the parser resynchronizes at these.
STATEMENT_STARTERS = frozenset(["FUN", "VAR", "FOR", "IF", "WHILE", "PRINT", "RETURN", "BREAK"])

class Token(NamedTuple):
	kind: str
	lexeme: str
	literal: Any
	line: int
	offset: int = None  # Index into the source text, for illustrating errors.

	def __repr__(self):
		if self.literal is None: return "<%s %r @%d>" % (self.kind, self.lexeme, self.line)
		return "<%s %r=%r @%d>" % (self.kind, self.lexeme, self.literal, self.line)

	def is_end(self): return self.kind == END

def synthetic(kind:str, lexeme:str, line:int=0) -> Token:
	""" A token that came from nowhere in particular, as for built-ins and hand-made trees. """
	return Token(sys.intern(kind), lexeme, None, line)
