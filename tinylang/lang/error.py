"""Error handling for tinylang. Only GenericExceptions should be encountered during running: if another type of error
is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Every tinylang error is fatal when running a file. The lexer, parser and evaluator only raise; reporting and exiting
is left to ErrorHandler, which wraps the driver.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a tinylang error/warning. msg is a format
    string whose '{}' slots are filled with exprs (bolded in the displayed message, plain in str(exception)).
    """

    def __init__(self, msg, exprs=None, line_num=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning. start and end are the column span of the offending lexeme
        within line line_num (0-based, end exclusive).
        """
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        super().__init__(msg.format(*exprs))
        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending lexeme
        self.end = end if end != -1 else start + len(self.expr)

        self.line_num = line_num
        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal


class UsageError(GenericException):
    """Missing or invalid command-line argument."""


class ReadError(GenericException):
    """Source file could not be opened or read."""


class LexError(GenericException):
    """Unrecognized character in source."""


class ParseError(GenericException):
    """Unexpected token at some grammar point."""


class EvalError(GenericException):
    """Reference to an undefined variable."""


class ErrorHandler:
    """Context manager that will report tinylang errors/warnings on stderr and, if fatal, exit with status 1."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.path = None
        self.lines = []
        self.line_num = None  # line of the statement being run, used if an error carries no location

    def register_file(self, path, source=""):
        """Registers path and its source text, used to locate and diagnose errors."""
        self.path = path
        self.lines = source.split("\n")  # counted the same way as the lexer counts lines

    def register_line(self, line_num):
        """Registers line of the statement about to be run. Should be called prior to Session evaluation."""
        self.line_num = line_num

    def remove_line(self):
        """Removes current line. Should be called after successful Session evaluation."""
        self.line_num = None

    def source_line(self, line_num):
        """Returns text of line line_num (1-based) of the registered source, or None."""
        if line_num is None or not 0 < line_num <= len(self.lines):
            return None
        return self.lines[line_num - 1].rstrip("\r")

    @staticmethod
    def diagnose(line, error, warning=False):
        """Returns offending part of line highlighted and bolded, with a marker underneath."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        start = min(error.start, len(line))
        end = min(max(error.end, start + 1), len(line))

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], color, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def report(self, error, warning=False):
        """Returns full report of error: location, severity, message and (if possible) diagnosis."""
        line_num = error.line_num if error.line_num is not None else self.line_num

        location = ""
        if self.path:
            location = self.path + ":"
            if line_num is not None:
                location += f"{line_num}:"
                if error.line_num is not None:
                    location += f"{error.start + 1}:"
            location += " "

        report = colored(location, attrs=["bold"]) if location else ""
        if error.internal:
            report += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        if warning:
            report += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        else:
            report += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg

        line = self.source_line(error.line_num)
        if not error.internal and error.diagnosis and line is not None:
            report += "\n" + ErrorHandler.diagnose(line, error, warning)

        return report

    def warn(self, *args, **kwargs):
        """Generates and prints warning message based on args."""
        print(self.report(GenericException(*args, **kwargs), warning=True), file=sys.stderr)

    def throw(self, error):
        """Prints error, which must be a GenericException. Exits with status 1 if this handler is fatal."""
        print(self.report(error), file=sys.stderr)

        if self.fatal:
            sys.exit(1)
        self.line_num = None  # if error occurred, reset current line (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("expression nested too deeply", diagnosis=False))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
