import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lox import cmdline

def _run(*argv):
	""" Run the command line; return the exit code, stdout, and stderr. """
	with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
		with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
			code = cmdline.run(cmdline.parser.parse_args(list(argv)))
	return code, stdout.getvalue(), stderr.getvalue()

class RunFile(unittest.TestCase):

	def setUp(self) -> None:
		self._tmp = tempfile.TemporaryDirectory()
		self.folder = Path(self._tmp.name)

	def tearDown(self) -> None:
		self._tmp.cleanup()

	def program(self, text:str) -> str:
		path = self.folder / "program.lox"
		path.write_text(text, encoding="utf-8")
		return str(path)

	def test_good_program(self):
		path = self.program('fun greet(who) { return "Hello, " + who; }\nprint greet("world");\n')
		self.assertEqual((0, "Hello, world\n", ""), _run(path))

	def test_syntax_errors_exit_65(self):
		path = self.program("print 1;\nvar = 2;\nprint ;\n")
		code, out, err = _run(path)
		self.assertEqual(cmdline.EX_DATAERR, code)
		self.assertEqual("", out)
		self.assertIn("[line 2] Error at '=': Expect variable name.", err)
		self.assertIn("[line 3] Error at ';': Expect expression.", err)

	def test_runtime_error_exits_70(self):
		path = self.program('print "first";\nprint -"second";\nprint "third";\n')
		code, out, err = _run(path)
		self.assertEqual(cmdline.EX_SOFTWARE, code)
		self.assertEqual("first\n", out)
		self.assertIn("Operand must be a number.\n[line 2]", err)

	def test_deep_nesting_is_reported_not_raised(self):
		path = self.program("print " + " + ".join(["1"] * 3000) + ";\n")
		code, out, err = _run(path)
		self.assertEqual((cmdline.EX_SOFTWARE, ""), (code, out))
		self.assertIn("Stack overflow.\n[line 1]", err)
		path = self.program("print " + "(" * 2000 + "1" + ")" * 2000 + ";\n")
		code, out, err = _run(path)
		self.assertEqual((cmdline.EX_DATAERR, ""), (code, out))
		self.assertIn("Expression nesting is too deep.", err)

	def test_missing_file_exits_66(self):
		code, out, err = _run(str(self.folder / "nowhere.lox"))
		self.assertEqual(cmdline.EX_NOINPUT, code)
		self.assertIn("Could not read", err)

	def test_check_only(self):
		path = self.program('print "never";')
		self.assertEqual((0, "", "Looks plausible to me.\n"), _run("--check", path))

	def test_print_the_tree(self):
		path = self.program("var x = 1 + 2 * 3;\nprint x;")
		self.assertEqual((0, "(var x (+ 1 (* 2 3)))\n(print x)\n", ""), _run("-a", path))

	def test_verbose_talks_on_stderr(self):
		path = self.program("print 1;")
		code, out, err = _run("-v", path)
		self.assertEqual((0, "1\n"), (code, out))
		self.assertIn("Scanned 4 tokens.", err)

class Prompt(unittest.TestCase):

	def test_lines_share_one_interpreter(self):
		lines = ["var a = 1;", "print a + 1;", "print nope;", "print a;"]
		with mock.patch("builtins.input", side_effect=lines + [EOFError()]):
			code, out, err = _run()
		self.assertEqual(0, code)
		self.assertEqual("2\n1\n\n", out)
		self.assertIn("Undefined variable 'nope'.", err)

	def test_syntax_error_does_not_end_the_session(self):
		lines = ["print ;", "print 3;"]
		with mock.patch("builtins.input", side_effect=lines + [EOFError()]):
			code, out, err = _run()
		self.assertEqual("3\n\n", out)
		self.assertIn("Expect expression.", err)

if __name__ == '__main__':
	unittest.main()
