"""
Scanner for Lox, built on a booze-tools miniscan definition.

The longest match wins; among equally-long matches, the earlier rule wins.
That is why the catch-all rules come last.
Mistakes go to the report; the scanner just keeps going.
"""
import sys
from boozetools.scanning.miniscan import Definition
from boozetools.scanning.engine import IterableScanner
from .tokens import Token, KEYWORDS, IDENTIFIER, NUMBER, STRING, END
from .diagnostics import Report

LEXICON = Definition("Lox")

class Scanner(IterableScanner):
	""" Not restartable: Make a new one for each text. """

	def __init__(self, source:str, report:Report):
		super().__init__(source, LEXICON.get_dfa(), LEXICON, start=None)
		self.source = source
		self.report = report
		self.line = 1

	def emit(self, kind:str, literal=None):
		self.token(kind, Token(kind, self.match(), literal, self.line, self.left))

	def complain(self, message:str):
		self.report.error(self.line, message, offset=self.left)

	def scan_tokens(self) -> list[Token]:
		tokens = [token for kind, token in self]
		tokens.append(Token(END, "", None, self.line, len(self.source)))
		return tokens

@LEXICON.on(r"[(){},.;+*%/!=<>\-]")
def scan_punctuation(yy: Scanner):
	yy.emit(sys.intern(yy.match()))

@LEXICON.on(r"[!=<>]=")
def scan_comparison(yy: Scanner):
	yy.emit(sys.intern(yy.match()))

@LEXICON.on(r"\d+(\.\d+)?")
def scan_number(yy: Scanner): yy.emit(NUMBER, float(yy.match()))

@LEXICON.on(r"[_\l]\w*")
def scan_word(yy: Scanner):
	yy.emit(KEYWORDS.get(yy.match(), IDENTIFIER))

@LEXICON.on(r'"[^"]*"')
def scan_string(yy: Scanner):
	text = yy.match()
	yy.emit(STRING, text[1:-1])
	yy.line += text.count("\n")

@LEXICON.on(r'"[^"]*')
def scan_unterminated_string(yy: Scanner):
	yy.complain("Unterminated string.")
	yy.line += yy.match().count("\n")

@LEXICON.on(r"\/\/.*")
def scan_comment(yy: Scanner): pass

@LEXICON.on(r"[\ \t\r]+")
def scan_blank(yy: Scanner): pass

@LEXICON.on(r"\n")
def scan_newline(yy: Scanner): yy.line += 1

@LEXICON.on(r"{ANY}")
def scan_stray(yy: Scanner): yy.complain("Unexpected character.")

def scan(source:str, report:Report) -> list[Token]:
	""" Scan the whole text eagerly. The last token is always the END token. """
	return Scanner(source, report).scan_tokens()
