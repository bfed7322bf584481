"""Control flow signals that must pass through command execution untouched"""


class ShellExit(Exception):
    """
    Raised by the `exit` builtin.

    Process.execute() never converts this into a failed result; it travels
    up to whoever owns the execution unit (the REPL or a background
    worker), which then ends the process.
    """

    def __init__(self, exit_code: int = 0):
        super().__init__(exit_code)
        self.exit_code = exit_code
