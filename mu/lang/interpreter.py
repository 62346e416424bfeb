"""Tree-walking interpreter for the Mu language. Reduces an expression tree to a single integer by evaluating both
operands (first, then second) and applying the expression's operator to them.

The parser accepts any operator token, so this module is the only authority on what an operator means. Integers are
Python ints, so sums never overflow.
"""

import operator

from mu.lang.error import MuException, UnknownOperator
from mu.lang.parser import Expression, Nested, NumberLiteral


class Interpreter:
    """Evaluates Mu expression trees."""
    OPERATORS = {"s": operator.add}  # operator code: binary function

    @staticmethod
    def eval(node):
        """Returns integer value of node, which is an Expression, Nested, or NumberLiteral."""
        if isinstance(node, NumberLiteral):
            return node.value
        elif isinstance(node, Nested):
            return Interpreter.eval(node.expression)
        elif isinstance(node, Expression):
            first = Interpreter.eval(node.first)
            second = Interpreter.eval(node.second)

            if node.operator not in Interpreter.OPERATORS:
                raise UnknownOperator(node.operator)
            return Interpreter.OPERATORS[node.operator](first, second)

        raise MuException("cannot evaluate '{}'", repr(node), internal=True)
