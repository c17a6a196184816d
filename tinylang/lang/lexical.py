"""Lexical analysis for tinylang. Converts raw source text into a list of Tokens, which is read forward-only by the
parser.

Lexical grammar, applied left to right:

```
<newline>    ::= "\n"                       ; statement separator, emitted as its own token
<number>     ::= <digit>+                   ; lexeme is the canonical rendering of the value ("007" -> "7")
<print>      ::= "print"                    ; matched on the first five characters of any letter run (*)
<identifier> ::= <letter> (<letter> | <digit>)*
<equals>     ::= "="
<plus>       ::= "+"
```

Other whitespace is skipped. Whitespace, letters and digits are ASCII only; anything else is a LexError. Exactly one
EndOfInput token is appended after the last character.

(*) A run such as `printer` is lexed as `print` followed by the identifier `er`. This is kept for compatibility with
existing programs, but the lexer warns about it if given an ErrorHandler.
"""

import string
from dataclasses import dataclass
from enum import Enum, auto

from tinylang.lang.error import LexError


LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
ALPHANUMERICS = LETTERS | DIGITS
WHITESPACE = frozenset(string.whitespace)


class TokenType(Enum):
    NUMBER = auto()
    IDENTIFIER = auto()
    EQUALS = auto()
    PLUS = auto()
    PRINT = auto()
    EOF = auto()
    NEWLINE = auto()


@dataclass(frozen=True)
class Token:
    """Smallest lexical unit. value is only set for NUMBER tokens; line and column are 1-based."""
    type: TokenType
    lexeme: str
    value: int = None
    line: int = 1
    column: int = 1

    def __str__(self):
        return repr(self.lexeme)[1:-1]  # escapes "\n"


class Lexer:
    """Breaks down source code into tokens."""
    KEYWORD = "print"
    SYMBOLS = {"=": TokenType.EQUALS, "+": TokenType.PLUS}

    def __init__(self, text, error_handler=None, line=1):
        self.text = text
        self.error_handler = error_handler  # only used for warnings
        self.pos = 0
        self.line = line
        self.column = 1
        self.tokens = []

    def tokenize(self):
        """Tokenizes all of self.text. Raises LexError on the first unrecognized character."""
        while self.pos < len(self.text):
            char = self.text[self.pos]

            if char == "\n":
                self._add(TokenType.NEWLINE, "\n", length=1)
                self.line += 1
                self.column = 1
            elif char in WHITESPACE:
                self._skip(1)
            elif char in DIGITS:
                lexeme = self._run(DIGITS)
                value = int(lexeme)
                self._add(TokenType.NUMBER, str(value), value, length=len(lexeme))
            elif char in LETTERS:
                self._word()
            elif char in Lexer.SYMBOLS:
                self._add(Lexer.SYMBOLS[char], char, length=1)
            else:
                raise LexError("unexpected character '{}'", char, line_num=self.line, start=self.column - 1)

        self.tokens.append(Token(TokenType.EOF, "EOF", line=self.line, column=self.column))
        return self.tokens

    def _word(self):
        """Handles a run starting with a letter: either the print keyword or an identifier."""
        if self.text.startswith(Lexer.KEYWORD, self.pos):
            run = self._run(ALPHANUMERICS)
            if run != Lexer.KEYWORD and self.error_handler:
                msg = "'{}' is lexed as keyword 'print' followed by '{}'"
                self.error_handler.warn(msg, (run, run[len(Lexer.KEYWORD):]), line_num=self.line,
                                        start=self.column - 1, end=self.column - 1 + len(run))
            self._add(TokenType.PRINT, Lexer.KEYWORD, length=len(Lexer.KEYWORD))
        else:
            lexeme = self._run(ALPHANUMERICS)
            self._add(TokenType.IDENTIFIER, lexeme, length=len(lexeme))

    def _add(self, type, lexeme, value=None, length=0):
        """Appends a token starting at the current position, then skips length characters."""
        self.tokens.append(Token(type, lexeme, value, self.line, self.column))
        self._skip(length)

    def _skip(self, length):
        self.pos += length
        self.column += length

    def _run(self, chars):
        """Returns the run of chars at the current position without consuming it."""
        end = self.pos
        while end < len(self.text) and self.text[end] in chars:
            end += 1
        return self.text[self.pos:end]


def tokenize(source, error_handler=None):
    """Returns list of Tokens in source, always ending with a single EOF token."""
    return Lexer(source, error_handler).tokenize()
