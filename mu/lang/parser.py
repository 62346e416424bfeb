"""Recursive descent parser for the Mu language. Builds an expression tree from a sequence of tokens.

Formally, Mu can be defined as

```
<expression> ::= "(" <operator> <primary> <primary> ")"   ; operators are binary
<primary>    ::= <number>                                 ; single digit, 0 through 9
               | <expression>                             ; nesting is unbounded
<operator>   ::= <char>                                   ; any operator token is accepted here, the interpreter
                                                          ; decides whether it means anything
```

Parsing stops at the first token that does not fit and never looks past the end of the first complete expression:
trailing tokens are silently ignored.
"""

from dataclasses import dataclass

from mu.lang.error import UnexpectedToken
from mu.lang.lexical import Number, Operator, ParenClose, ParenOpen


class Node:
    """Superclass for Mu expression tree nodes."""

    @property
    def nodes(self):
        """Child nodes, in evaluation order."""
        return []

    def display(self, indents=0):
        """Recursively displays tree with readable format.

        Format:
        <Node>(expr='<expr>', nodes=[
            <Node>(expr='<expr>', nodes=[
                ...
                <Node>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"


@dataclass(frozen=True)
class NumberLiteral(Node):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Nested(Node):
    expression: "Expression"

    @property
    def nodes(self):
        return [self.expression]

    def __str__(self):
        return str(self.expression)


@dataclass(frozen=True)
class Expression(Node):
    """Binary operation: operator applied to first and second, in that order."""
    operator: str
    first: Node
    second: Node

    @property
    def nodes(self):
        return [self.first, self.second]

    def __str__(self):
        return f"({self.operator} {self.first} {self.second})"


class Parser:
    """Holds the cursor for a single parse over tokens. source, if given, is the text tokens were lexed from and is
    only used for error messages.
    """

    def __init__(self, tokens, source=""):
        self.tokens = list(tokens)
        self.source = source
        self.index = 0

    def peek(self, expected="a token"):
        """Returns token at the cursor without advancing. expected describes what the caller is looking for, in case
        the cursor is already past the last token.
        """
        if self.index >= len(self.tokens):
            raise UnexpectedToken(None, self.index, expected, self.source)
        return self.tokens[self.index]

    def advance(self, expected="a token"):
        """Returns token at the cursor and moves the cursor forward by one."""
        token = self.peek(expected)
        self.index += 1
        return token

    def expect(self, token_type, expected):
        """Consumes the next token, raising UnexpectedToken if it is not a token_type."""
        index = self.index
        token = self.advance(expected)
        if not isinstance(token, token_type):
            raise UnexpectedToken(token, index, expected, self.source)
        return token

    def parse_primary(self):
        """<primary> ::= <number> | <expression>"""
        token = self.peek("number or '('")

        if isinstance(token, Number):
            self.advance("number")
            return NumberLiteral(token.value)
        elif isinstance(token, ParenOpen):
            return Nested(self.parse_expression())  # parse_expression consumes the paren itself

        raise UnexpectedToken(token, self.index, "number or '('", self.source)

    def parse_expression(self):
        """<expression> ::= "(" <operator> <primary> <primary> ")" """
        self.expect(ParenOpen, "'('")
        operator = self.expect(Operator, "operator").code

        first = self.parse_primary()
        second = self.parse_primary()

        self.expect(ParenClose, "')'")
        return Expression(operator, first, second)

    def parse(self):
        """Parses one expression starting at the first token. Unconsumed trailing tokens are ignored."""
        self.index = 0
        return self.parse_expression()
