"""Recursive-descent parser for tinylang. Builds one syntax tree per statement from a token list, with one token of
lookahead. The cursor only moves forward and never moves past the EOF token.
"""

from tinylang.lang.error import ParseError
from tinylang.lang.lexical import TokenType
from tinylang.lang.syntax import Assign, BinaryAdd, Number, PrintStmt, Variable


class Parser:
    """Converts tokens into syntax trees, one statement at a time."""

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self):
        return self.tokens[self.pos]

    def at_end(self):
        return self.current.type is TokenType.EOF

    def advance(self):
        if not self.at_end():
            self.pos += 1

    def match(self, type):
        """Consumes current token and returns True if it is of type type."""
        if self.current.type is type:
            self.advance()
            return True
        return False

    def parse_term(self):
        """<term> ::= <number> | <identifier>"""
        token = self.current

        if token.type is TokenType.NUMBER:
            node = Number(token.value)
        elif token.type is TokenType.IDENTIFIER:
            node = Variable(token.lexeme, token)
        else:
            raise self._error("unexpected token '{}'", token)

        self.advance()
        return node

    def parse_expr(self):
        """<expr> ::= <term> ("+" <term>)*"""
        left = self.parse_term()

        while self.match(TokenType.PLUS):
            left = BinaryAdd(left, self.parse_term())

        return left

    def parse_assign(self):
        """<assign> ::= <identifier> "=" <expr>"""
        token = self.current
        if token.type is not TokenType.IDENTIFIER:
            raise self._error("expected identifier, got '{}'", token)
        self.advance()

        if not self.match(TokenType.EQUALS):
            raise self._error("expected '=' after identifier '{}'", token)

        return Assign(token.lexeme, self.parse_expr())

    def parse_print(self):
        """<print> ::= "print" <expr>"""
        if not self.match(TokenType.PRINT):
            raise self._error("expected 'print', got '{}'", self.current)

        return PrintStmt(self.parse_expr())

    def parse_stmt(self):
        """Skips leading newlines, then parses an assignment or print statement. The caller should not call this
        method when only EOF remains.
        """
        while self.current.type is TokenType.NEWLINE:
            self.advance()

        token = self.current
        if token.type is TokenType.IDENTIFIER:
            return self.parse_assign()
        elif token.type is TokenType.PRINT:
            return self.parse_print()

        raise self._error("unexpected token '{}'", token)

    @staticmethod
    def _error(msg, token):
        start = token.column - 1
        return ParseError(msg, str(token), line_num=token.line, start=start, end=start + max(len(token.lexeme), 1))
