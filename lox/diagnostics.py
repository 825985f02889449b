"""
Collect complaints about a program and, eventually, show them to a human.

Scanning and parsing keep going after a mistake, so their issues pile up here.
A run-time error ends the run, so there is at most one of those per run.
"""
import sys
from typing import NamedTuple, Optional
from boozetools.support.failureprone import SourceText, illustration

from .tokens import Token

SCAN, PARSE, RUNTIME = "scan", "parse", "runtime"

class Issue(NamedTuple):
	phase: str
	line: int
	where: str
	message: str
	offset: Optional[int] = None
	width: int = 1

	def headline(self) -> str:
		if self.phase == RUNTIME:
			return "%s\n[line %d]" % (self.message, self.line)
		return "[line %d] Error%s: %s" % (self.line, self.where, self.message)

class Report:
	_issues : list[Issue]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._text = ""
		self._source = None

	@property
	def issues(self) -> list[Issue]: return self._issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	def had_syntax_error(self): return any(i.phase != RUNTIME for i in self._issues)
	def had_runtime_error(self): return any(i.phase == RUNTIME for i in self._issues)

	def reset(self):
		self._issues.clear()

	def attach_source(self, text:str, filename:str=None):
		""" Illustrations need the text. Without it, you just get the headline. """
		self._text = text
		self._source = SourceText(text, filename=filename)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	# Methods the scanner calls:
	def error(self, line:int, message:str, *, offset:int=None):
		self._issues.append(Issue(SCAN, line, "", message, offset))

	# Methods the parser calls:
	def error_at(self, token:Token, message:str):
		if token.is_end(): where = " at end"
		else: where = " at '%s'" % token.lexeme
		self._issues.append(Issue(PARSE, token.line, where, message, token.offset, len(token.lexeme)))

	# Methods the evaluator calls:
	def runtime_error(self, ex):
		token = ex.token
		self._issues.append(Issue(RUNTIME, token.line, "", ex.message, token.offset, len(token.lexeme)))

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		for issue in self._issues:
			print(issue.headline(), file=sys.stderr)
			picture = self._illustrate(issue)
			if picture: print(picture, file=sys.stderr)
		sys.stderr.flush()

	def _illustrate(self, issue:Issue) -> Optional[str]:
		if self._source is None or issue.offset is None: return None
		# The end token sits past the last character; keep it on the last line.
		offset = min(issue.offset, len(self._text.rstrip("\r\n")))
		row, col = self._source.find_row_col(offset)
		single_line = self._source.line_of_text(row)
		return illustration(single_line, col, issue.width, prefix='% 6d |' % row)
