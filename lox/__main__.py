"""
Run the Lox interpreter with:

    py -m lox program.lox

or, for a prompt:

    py -m lox
"""
from lox.cmdline import main

main()
