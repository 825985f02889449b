"""
Build the primitive namespace.
There are only two natives: a clock and a way to print.
"""
import time
from .environment import InnerEnv
from .runtime import stringify
from .values import NativeFunction

def _clock(interpreter, arguments):
	return time.time()

def _print(interpreter, arguments):
	interpreter.emit(stringify(arguments[0]))

NATIVES = [
	NativeFunction("clock", 0, _clock),
	NativeFunction("print", 1, _print),
]

def install_natives(env:InnerEnv):
	for native in NATIVES:
		env.define(native.name, native)
