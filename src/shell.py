""" Interactive loop: read a line, split it, run it. """
import sys

import runner
from constants import PARSE_ERROR_STATUS
from exceptions import ShellExit, UnmatchedQuoteError
from lexer import parse
from shell_builtins import BUILTINS
from shell_state import ShellState


def read_command(prompt="$ ", escape_char="\\"):
    """ Read a command with support for line continuation. """
    lines = []
    while True:
        line = input(prompt)
        trailing = len(line) - len(line.rstrip(escape_char))
        if trailing % 2 == 1:
            # keep escape + newline; the lexer treats the pair as a continuation
            lines.append(line + "\n")
            prompt = "> "
        else:
            lines.append(line)
            break
    return "".join(lines)


def execute_line(line: str, state: ShellState) -> int:
    """ Run one command line and return its status. """
    try:
        cmd = parse(line, state.profile)
    except UnmatchedQuoteError as e:
        print(f"syntax error: {e}", file=sys.stderr)
        return PARSE_ERROR_STATUS

    if not cmd.tokens:
        return state.last_status

    if cmd.program in BUILTINS and not cmd.requires_shell:
        return BUILTINS[cmd.program](cmd.args, state) or 0

    result = runner.execute(cmd, shell_state=state)
    if result.stdout:
        print(result.stdout, end="")
    if result.stderr:
        print(result.stderr, end="", file=sys.stderr)
    return result.returncode


class Shell:
    def __init__(self, state: ShellState | None = None):
        self.state = state or ShellState()

    def run(self):
        while True:
            try:
                line = read_command(escape_char=self.state.profile.escape_char)
                status = execute_line(line, self.state)
                self.state.set_status(status)
            except ShellExit as e:
                return e.status

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
