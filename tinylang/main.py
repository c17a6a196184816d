"""Runs tinylang source files, or the interactive shell. Called from the tinylang console script. Also uses error
handling context manager: any tinylang error exits with status 1.
"""

import argparse
import sys

from tinylang.lang.error import ErrorHandler, UsageError
from tinylang.lang.session import Session
from tinylang.lang.shell import Shell


class ArgumentParser(argparse.ArgumentParser):
    """argparse would exit with status 2 on bad arguments; tinylang reports them like any other error."""

    def error(self, message):
        self.print_usage(sys.stderr)
        raise UsageError("{}", message, diagnosis=False)


def main(argv=None):
    """Runs tinylang interpreter. argv defaults to sys.argv[1:]."""
    assert sys.version_info >= (3, 7), "tinylang cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = ArgumentParser(prog="tinylang", description="tiny interpreter for integer assignments and prints")
        parser.add_argument("file", help="file to interpret and run", nargs="?")
        parser.add_argument("-i", "--interactive", action="store_true", help="run the interactive shell")
        parser.add_argument("--debug", action="store_true", help="display each statement's syntax tree on stderr")
        args = parser.parse_args(argv)

        if args.interactive:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, debug=args.debug)).cmdloop()
        elif args.file is None:
            parser.error("the following arguments are required: file")
        else:
            Session(error_handler, args.file, debug=args.debug).run()


if __name__ == "__main__":
    main()
