import unittest

from tinylang.lang.error import ParseError
from tinylang.lang.lexical import TokenType, tokenize
from tinylang.lang.parser import Parser
from tinylang.lang.syntax import Assign, BinaryAdd, Number, PrintStmt, Variable


def parser(source):
    return Parser(tokenize(source))


class ParserTestCase(unittest.TestCase):

    def test_parse_term(self):
        cases = {"5": Number(5), "x": Variable("x")}
        for case, result in cases.items():
            self.assertEqual(result, parser(case).parse_term(), case)

        should_raise = ["=", "+", "print", "\n", ""]
        for case in should_raise:
            self.assertRaises(ParseError, parser(case).parse_term)

    def test_parse_expr_associates_left(self):
        expected = BinaryAdd(BinaryAdd(Variable("a"), Variable("b")), Variable("c"))
        self.assertEqual(expected, parser("a + b + c").parse_expr())

    def test_parse_expr_stops_at_statement_end(self):
        p = parser("1 + 2\nprint 3")
        self.assertEqual(BinaryAdd(Number(1), Number(2)), p.parse_expr())
        self.assertIs(TokenType.NEWLINE, p.current.type)

        self.assertRaises(ParseError, parser("1 +").parse_expr)
        self.assertRaises(ParseError, parser("1 + + 2").parse_expr)

    def test_parse_assign(self):
        self.assertEqual(Assign("x", BinaryAdd(Number(2), Number(3))), parser("x = 2 + 3").parse_assign())

        should_raise = ["5 = 1", "x 5", "x = ", "x == 1"]
        for case in should_raise:
            self.assertRaises(ParseError, parser(case).parse_assign)

    def test_parse_print(self):
        self.assertEqual(PrintStmt(Variable("x")), parser("print x").parse_print())
        self.assertRaises(ParseError, parser("x").parse_print)
        self.assertRaises(ParseError, parser("print").parse_print)

    def test_parse_stmt_skips_newlines(self):
        p = parser("\n\n\nx = 1\nprint x\n")
        self.assertEqual(Assign("x", Number(1)), p.parse_stmt())
        self.assertEqual(PrintStmt(Variable("x")), p.parse_stmt())
        p.advance()
        self.assertTrue(p.at_end())

    def test_parse_stmt_errors(self):
        should_raise = ["5", "+ 1", "= 1", "", "\n\n"]
        for case in should_raise:
            self.assertRaises(ParseError, parser(case).parse_stmt)

    def test_error_location(self):
        p = parser("x = 1\ny 5")
        p.parse_stmt()
        with self.assertRaises(ParseError) as cm:
            p.parse_stmt()
        self.assertEqual("expected '=' after identifier 'y'", str(cm.exception))
        self.assertEqual((2, 0), (cm.exception.line_num, cm.exception.start))

        with self.assertRaises(ParseError) as cm:
            parser("x = 1 +\n").parse_stmt()
        self.assertEqual("unexpected token '\\n'", str(cm.exception))
        self.assertEqual((1, 7), (cm.exception.line_num, cm.exception.start))

    def test_display_addition_chain(self):
        stmt = parser("print a + 1 + b").parse_stmt()
        expected = ("PrintStmt('print', nodes=[\n"
                    "    BinaryAdd('+', nodes=[\n"
                    "        Variable('a'),\n"
                    "        Number(1),\n"
                    "        Variable('b')\n"
                    "    ])\n"
                    "])")
        self.assertEqual(expected, stmt.display())

        terms = " + ".join(["1"] * 3000)
        self.assertEqual(3000, len(parser(terms).parse_expr().nodes))

    def test_cursor_stays_at_eof(self):
        p = parser("x")
        p.advance()
        p.advance()
        self.assertTrue(p.at_end())
        self.assertFalse(p.match(TokenType.PLUS))
        self.assertTrue(p.match(TokenType.EOF))
        self.assertTrue(p.at_end())

    def test_display(self):
        stmt = parser("x = a + 1").parse_stmt()
        expected = ("Assign('x', nodes=[\n"
                    "    BinaryAdd('+', nodes=[\n"
                    "        Variable('a'),\n"
                    "        Number(1)\n"
                    "    ])\n"
                    "])")
        self.assertEqual(expected, stmt.display())


if __name__ == '__main__':
    unittest.main()
