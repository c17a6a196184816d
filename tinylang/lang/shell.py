"""Handles interactive/command-line mode for tinylang interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """tinylang interpreter shell."""
    intro = "tinylang interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    COMMANDS = ("exit", "help", "?", "EOF")

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def onecmd(self, line):
        """Only bare shell commands are dispatched as such, so that statements like `exit = 1` still run."""
        if line.strip() in Shell.COMMANDS:
            return super().onecmd(line.strip())
        elif not line.strip():
            return self.emptyline()

        self.default(line)
        return False

    def default(self, line):
        """Executes arbitrary tinylang statement(s)."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            self.sess.add(line, self.line_num)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the tinylang interpreter!\n\n"
              "tinylang has integer variables, addition and a print statement. Try it out by \n"
              "typing 'x = 2 + 3'. This will bind 5 to 'x'. Next, try typing 'print x + 10', \n"
              "which will print 15. Variables last until you exit.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
