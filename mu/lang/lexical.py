"""Lexical analysis for the Mu language: turns a string of characters into a flat sequence of tokens. The lexer never
fails; any character it does not recognize (whitespace included) is silently dropped, and validation is left to the
parser.

Token vocabulary:

```
"("          -> ParenOpen
")"          -> ParenClose
"s"          -> Operator("s")      ; sum, the only operator the lexer produces
"0" .. "9"   -> Number(0 .. 9)     ; single decimal digits only
```
"""

from dataclasses import dataclass, field


class Token:
    """Superclass for every Mu token. column is the index of the character the token was lexed from, and is ignored
    when comparing tokens.
    """
    column: int

    @property
    def lexeme(self):
        """Source text this token stands for."""
        raise NotImplementedError()

    def __str__(self):
        return self.lexeme


@dataclass(frozen=True)
class ParenOpen(Token):
    column: int = field(default=-1, compare=False, repr=False)

    @property
    def lexeme(self):
        return "("


@dataclass(frozen=True)
class ParenClose(Token):
    column: int = field(default=-1, compare=False, repr=False)

    @property
    def lexeme(self):
        return ")"


@dataclass(frozen=True)
class Operator(Token):
    code: str
    column: int = field(default=-1, compare=False, repr=False)

    @property
    def lexeme(self):
        return self.code


@dataclass(frozen=True)
class Number(Token):
    value: int
    column: int = field(default=-1, compare=False, repr=False)

    @property
    def lexeme(self):
        return str(self.value)


OPERATORS = ["s"]
DIGITS = "0123456789"


def tokenize(expr):
    """Returns list of Tokens lexed from expr, one per meaningful character."""
    tokens = []
    for column, char in enumerate(expr):
        if char == "(":
            tokens.append(ParenOpen(column))
        elif char == ")":
            tokens.append(ParenClose(column))
        elif char in OPERATORS:
            tokens.append(Operator(char, column))
        elif char in DIGITS:
            tokens.append(Number(int(char), column))
    return tokens
