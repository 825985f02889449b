import io
import unittest
from unittest import mock

from lox.diagnostics import Report, SCAN, PARSE, RUNTIME
from lox.runtime import LoxRuntimeError, stringify
from lox.tokens import Token, END

class ReportTests(unittest.TestCase):

	def test_headlines(self):
		report = Report()
		report.error(4, "Unexpected character.")
		report.error_at(Token("+", "+", None, 5, 10), "Expect expression.")
		report.error_at(Token(END, "", None, 6, 20), "Expect ';' after value.")
		report.runtime_error(LoxRuntimeError(Token("/", "/", None, 7, 30), "Can't divide by zero."))
		self.assertEqual([SCAN, PARSE, PARSE, RUNTIME], [i.phase for i in report.issues])
		self.assertEqual([
			"[line 4] Error: Unexpected character.",
			"[line 5] Error at '+': Expect expression.",
			"[line 6] Error at end: Expect ';' after value.",
			"Can't divide by zero.\n[line 7]",
		], [i.headline() for i in report.issues])

	def test_status(self):
		report = Report()
		assert report.ok() and not report.sick()
		report.error(1, "Unexpected character.")
		assert report.sick() and report.had_syntax_error() and not report.had_runtime_error()
		report.reset()
		assert report.ok()

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_complain_to_console(self, stderr):
		report = Report()
		report.attach_source("var a = 1;\nprint a +;\n", filename="sample.lox")
		report.error_at(Token(";", ";", None, 2, 20), "Expect expression.")
		report.complain_to_console()
		self.assertIn("[line 2] Error at ';': Expect expression.", stderr.getvalue())

	@mock.patch("sys.stderr", new_callable=io.StringIO)
	def test_info_only_when_verbose(self, stderr):
		Report().info("quiet")
		Report(verbose=1).info("loud")
		self.assertEqual("loud\n", stderr.getvalue())

class StringifyTests(unittest.TestCase):

	def test_stringify(self):
		for value, text in [
			(None, "nil"),
			(True, "true"),
			(False, "false"),
			(3.0, "3"),
			(-2.5, "-2.5"),
			("text", "text"),
			("", ""),
			(1e22, "1e+22"),
			(1e-7, "1e-07"),
			(123456789.0, "123456789"),
		]:
			with self.subTest(value=value):
				self.assertEqual(text, stringify(value))

if __name__ == '__main__':
	unittest.main()
