"""Session control for tinylang. Reads a source file, tokenizes it, then parses and evaluates it one statement at a
time: each statement is evaluated as soon as it is parsed, before the next one is parsed.
"""

import sys
from enum import Enum, auto

from tinylang.lang.error import ReadError
from tinylang.lang.evaluator import Evaluator
from tinylang.lang.lexical import Lexer, TokenType
from tinylang.lang.parser import Parser


class State(Enum):
    SCANNING = auto()  # before tokenization
    RUNNING = auto()   # parsing and evaluating statements
    DONE = auto()      # reached EOF


class Session:
    """Governs a tinylang session, which owns the variable store shared by every statement it runs."""
    SH_FILE = "<in>"             # command-line interpreter filename
    MAX_SOURCE_SIZE = 1 << 20    # in bytes

    def __init__(self, error_handler, path, cmd_line=False, debug=False):
        self.error_handler = error_handler

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.debug = debug        # whether or not to display syntax trees

        self.store = {}    # dict of variable name: value
        self.results = []  # values of evaluated statements, in order
        self.state = State.SCANNING
        self.evaluator = Evaluator(self.store)

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            self.source = Session.read(path)
        elif not cmd_line:
            raise ReadError("'{}' is a reserved filename", path, diagnosis=False)
        else:
            self.source = ""

        self.error_handler.register_file(path, self.source)

    @staticmethod
    def read(path):
        """Returns full contents of path. The file is closed before anything is lexed."""
        try:
            with open(path, "rb") as file:
                data = file.read(Session.MAX_SOURCE_SIZE + 1)
        except OSError as e:
            raise ReadError("'{}' could not be opened: {}", (path, e.strerror), diagnosis=False)

        if len(data) > Session.MAX_SOURCE_SIZE:
            msg = "'{}' is larger than {} bytes"
            raise ReadError(msg, (path, Session.MAX_SOURCE_SIZE), diagnosis=False)

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            raise ReadError("'{}' is not valid UTF-8", path, diagnosis=False)

    def add(self, line, line_num):
        """Runs line in command-line mode, continuing from the current variable store."""
        self.source = line
        self.error_handler.register_file(self.path, "\n" * (line_num - 1) + line)
        self.state = State.SCANNING
        self.run(first_line=line_num)

    def run(self, first_line=1):
        """Tokenizes self.source, then parses and evaluates each statement in turn. Will raise any errors that are
        encountered.
        """
        tokens = Lexer(self.source, self.error_handler, line=first_line).tokenize()
        parser = Parser(tokens)
        self.state = State.RUNNING

        while self.state is State.RUNNING:
            token = parser.current

            if token.type is TokenType.EOF:
                self.state = State.DONE
            elif token.type is TokenType.NEWLINE:
                parser.advance()
            else:
                self.error_handler.register_line(token.line)  # in case error is raised
                stmt = parser.parse_stmt()

                if self.debug:
                    print(stmt.display(), file=sys.stderr)

                self.results.append(self.evaluator.evaluate(stmt))
                self.error_handler.remove_line()  # error was not raised

        return self.results
