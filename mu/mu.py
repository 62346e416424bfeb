"""Runs the whole Mu pipeline: lexing, parsing, then interpreting. Executed directly, evaluates a sample program."""

from mu.lang.error import ErrorHandler
from mu.lang.interpreter import Interpreter
from mu.lang.lexical import tokenize
from mu.lang.parser import Parser


def run(expr):
    """Returns the integer value of Mu program expr. Raises UnexpectedToken or UnknownOperator."""
    tokens = tokenize(expr)
    tree = Parser(tokens, expr).parse()
    return Interpreter.eval(tree)


if __name__ == "__main__":
    with ErrorHandler():
        program = "(s (s 4 5) 4)"
        print(f"{program} = {run(program)}")
