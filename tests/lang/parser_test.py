import unittest

from mu.lang.error import UnexpectedToken
from mu.lang.lexical import Number, Operator, ParenOpen, tokenize
from mu.lang.parser import Expression, Nested, NumberLiteral, Parser


def parse(expr):
    return Parser(tokenize(expr), expr).parse()


class ParserTestCase(unittest.TestCase):

    def test_parse(self):
        cases = {
            "(s 4 5)": Expression("s", NumberLiteral(4), NumberLiteral(5)),
            "(s (s 4 5) 4)": Expression(
                "s", Nested(Expression("s", NumberLiteral(4), NumberLiteral(5))), NumberLiteral(4)
            ),
            "(s 4 (s 5 4))": Expression(
                "s", NumberLiteral(4), Nested(Expression("s", NumberLiteral(5), NumberLiteral(4)))
            ),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_operand_order(self):
        tree = parse("(s 1 2)")
        self.assertEqual(NumberLiteral(1), tree.first)
        self.assertEqual(NumberLiteral(2), tree.second)

    def test_str(self):
        cases = {"( s(s 4 5)4 )": "(s (s 4 5) 4)", "(s12)": "(s 1 2)"}
        for case, expected in cases.items():
            self.assertEqual(expected, str(parse(case)), case)

    def test_display(self):
        expected = ("Expression(expr='(s (s 1 2) 3)', nodes=[\n"
                    "    Nested(expr='(s 1 2)', nodes=[\n"
                    "        Expression(expr='(s 1 2)', nodes=[\n"
                    "            NumberLiteral(expr='1'),\n"
                    "            NumberLiteral(expr='2')\n"
                    "        ])\n"
                    "    ]),\n"
                    "    NumberLiteral(expr='3')\n"
                    "])")
        self.assertEqual(expected, parse("(s (s 1 2) 3)").display())

    def test_unexpected_token(self):
        should_raise = ["", "(x 1 2)", "(s 4", "s 1 2", "(s 1)", "(s 1 2 3)", ")", "(s s 1 2)", "(1 2)", "((s 1 2) 3)"]
        for case in should_raise:
            self.assertRaises(UnexpectedToken, parse, case)

    def test_missing_operator(self):
        with self.assertRaises(UnexpectedToken) as context:
            parse("(x 1 2)")

        error = context.exception
        self.assertEqual(Number(1), error.token)
        self.assertEqual(1, error.index)
        self.assertEqual("operator", error.expected)
        self.assertEqual(3, error.start)

    def test_truncated(self):
        with self.assertRaises(UnexpectedToken) as context:
            parse("(s 4")

        error = context.exception
        self.assertIsNone(error.token)
        self.assertEqual(3, error.index)
        self.assertEqual(4, error.start)
        self.assertIn("end of input", str(error))

    def test_trailing_tokens_ignored(self):
        parser = Parser(tokenize("(s 1 2)(s 3 4)"))
        self.assertEqual(Expression("s", NumberLiteral(1), NumberLiteral(2)), parser.parse())
        self.assertEqual(5, parser.index)

    def test_peek_advance(self):
        parser = Parser([ParenOpen(), Operator("s")])
        self.assertEqual(ParenOpen(), parser.peek())
        self.assertEqual(ParenOpen(), parser.advance())
        self.assertEqual(Operator("s"), parser.advance())
        self.assertRaises(UnexpectedToken, parser.peek)
        self.assertRaises(UnexpectedToken, parser.advance)

    def test_no_source(self):
        with self.assertRaises(UnexpectedToken) as context:
            Parser(tokenize("(s 1")).parse()
        self.assertFalse(context.exception.diagnosis)


if __name__ == '__main__':
    unittest.main()
