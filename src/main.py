""" Command-line entry point. """
import argparse
import logging
import sys

import runner
from constants import PARSE_ERROR_STATUS
from exceptions import UnmatchedQuoteError
from lexer import parse
from platform_profile import get_profile
from shell import Shell
from shell_state import ShellState

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shellcmd",
        description="Split a command line the way a shell would, and optionally run it"
    )
    platform = parser.add_mutually_exclusive_group()
    platform.add_argument("--windows", dest="is_windows", action="store_true", default=None,
                          help="use cmd.exe quoting rules")
    platform.add_argument("--posix", dest="is_windows", action="store_false",
                          help="use POSIX shell quoting rules")
    parser.set_defaults(is_windows=None)
    parser.add_argument("--split", action="store_true",
                        help="print the tokens instead of running the command")
    parser.add_argument("--shell", action="store_true", default=None,
                        help="always run through the shell")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    parser.add_argument("command", nargs=argparse.REMAINDER,
                        help="command line (starts an interactive shell when omitted)")
    return parser


def print_split(text: str, state: ShellState) -> int:
    cmd = parse(text, state.profile)
    for tok in cmd.tokens:
        print(tok)
    print(f"# requires shell: {'yes' if cmd.requires_shell else 'no'}")
    return 0


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    state = ShellState(profile=get_profile(args.is_windows))
    logger.debug("Profile: %s", state.profile)

    if not args.command:
        return Shell(state).run()

    text = " ".join(args.command)
    try:
        if args.split:
            return print_split(text, state)
        result = runner.run(text, shell_state=state, run_in_shell=args.shell)
    except UnmatchedQuoteError as e:
        print(f"shellcmd: {e}", file=sys.stderr)
        return PARSE_ERROR_STATUS

    if result.stdout:
        print(result.stdout, end="")
    if result.stderr:
        print(result.stderr, end="", file=sys.stderr)
    return result.returncode


if __name__ == "__main__":
    raise SystemExit(main())
