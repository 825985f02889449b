import unittest

from lox.environment import InnerEnv, UNINITIALIZED, null_env
from lox.runtime import LoxRuntimeError
from lox.tokens import synthetic

def _name(text): return synthetic("identifier", text, 3)

class EnvironmentTests(unittest.TestCase):

	def setUp(self) -> None:
		self.outer = InnerEnv()
		self.outer.define("x", 1.0)
		self.inner = InnerEnv(self.outer)

	def test_lookup_walks_outward(self):
		self.assertEqual(1.0, self.inner.get(_name("x")))
		self.assertEqual(1.0, InnerEnv(self.inner).get(_name("x")))

	def test_define_shadows(self):
		self.inner.define("x", "shadow")
		self.assertEqual("shadow", self.inner.get(_name("x")))
		self.assertEqual(1.0, self.outer.get(_name("x")))

	def test_assign_updates_the_nearest_binding(self):
		self.inner.define("y", 0.0)
		self.inner.assign(_name("x"), 2.0)
		self.inner.assign(_name("y"), 3.0)
		self.assertEqual(3.0, self.inner.get(_name("y")))
		with self.assertRaises(LoxRuntimeError):
			self.outer.get(_name("y"))
		self.assertEqual(2.0, self.outer.get(_name("x")))

	def test_unknown_names(self):
		for attempt in (
			lambda: self.inner.get(_name("nope")),
			lambda: self.inner.assign(_name("nope"), None),
			lambda: null_env.get(_name("nope")),
		):
			with self.assertRaises(LoxRuntimeError) as cm:
				attempt()
			self.assertEqual("Undefined variable 'nope'.", cm.exception.message)
			self.assertEqual(3, cm.exception.token.line)

	def test_uninitialized_is_not_nil(self):
		self.inner.define("y", UNINITIALIZED)
		self.assertIsNotNone(UNINITIALIZED)
		with self.assertRaises(LoxRuntimeError) as cm:
			self.inner.get(_name("y"))
		self.assertEqual("Variable 'y' has not been properly initialized.", cm.exception.message)
		self.inner.assign(_name("y"), None)
		self.assertIsNone(self.inner.get(_name("y")))

if __name__ == '__main__':
	unittest.main()
