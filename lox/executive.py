"""
The overall control for one run: text in, side effects out.
Scanning and parsing finish completely before anything is evaluated,
and nothing is evaluated at all if either of them found a problem.
"""
from typing import Optional
from . import syntax
from .diagnostics import Report
from .evaluator import Interpreter
from .parser import parse_text

def run_text(text:str, interpreter:Interpreter, report:Report) -> Optional[list[syntax.Stmt]]:
	statements = parse_text(text, report)
	if report.had_syntax_error():
		report.info("Not running: %d issue(s) found." % len(report.issues))
		return None
	interpreter.interpret(statements)
	return statements
