"""
This is an interpreter for the Lox programming language.

For example:

    lox program.lox

will run program.lox if possible, or else try to explain why not.

    lox

with no program starts a prompt: type a line, and it runs.

    lox -h

will explain all the arguments.
"""
import sys, argparse

# Exit codes, in the tradition of sysexits.h
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70

# Each Lox call costs a handful of Python frames.
RECURSION_LIMIT = 5_000

parser = argparse.ArgumentParser(
	prog="lox",
	description="Interpreter for the Lox programming language.",
	epilog="With no program, lox reads and runs one line at a time.",
)
parser.add_argument("program", nargs="?", help="a Lox source file; omit for an interactive prompt.")
parser.add_argument('-c', "--check", action="store_true", help="Scan and parse the program, but do not run it.")
parser.add_argument('-a', "--ast", action="store_true", help="Print the syntax tree instead of running the program.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on, on stderr.")

def run_file(args) -> int:
	from .diagnostics import Report
	from .evaluator import Interpreter
	from .parser import parse_text
	from .render import Render
	report = Report(verbose=args.verbose)
	try:
		with open(args.program, "r", encoding="utf-8") as fh:
			text = fh.read()
	except OSError as ex:
		print("Could not read %s: %s" % (args.program, ex.strerror), file=sys.stderr)
		return EX_NOINPUT
	report.attach_source(text, filename=args.program)
	report.info("Read %d characters from %s" % (len(text), args.program))
	statements = parse_text(text, report)
	if report.sick():
		report.complain_to_console()
		return EX_DATAERR
	if args.ast:
		print(Render().program(statements))
	elif args.check:
		print("Looks plausible to me.", file=sys.stderr)
	elif not Interpreter(report).interpret(statements):
		report.complain_to_console()
		return EX_SOFTWARE
	return 0

def run_prompt(args) -> int:
	from .diagnostics import Report
	from .evaluator import Interpreter
	from .executive import run_text
	report = Report(verbose=args.verbose)
	interpreter = Interpreter(report)
	while True:
		try: line = input("> ")
		except EOFError:
			print()
			return 0
		report.attach_source(line)
		run_text(line, interpreter, report)
		report.complain_to_console()
		report.reset()

def run(args) -> int:
	sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))
	if args.program is None: return run_prompt(args)
	return run_file(args)

def main():
	sys.exit(run(parser.parse_args()))
