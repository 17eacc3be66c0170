""" Registry of builtin commands for the interactive shell. """
import os
import sys

from command import to_display
from exceptions import ShellExit
from path_resolver import which

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("cd")
def builtin_cd(args, state):
    if len(args) == 0:
        target = state.environ.get("HOME", "/")
    else:
        target = args[0]

    try:
        os.chdir(target)
        return 0
    except FileNotFoundError:
        print(f"cd: no such file or directory: {target}", file=sys.stderr)
    except NotADirectoryError:
        print(f"cd: not a directory: {target}", file=sys.stderr)
    return 1


@builtin("exit")
def builtin_exit(args, state):
    try:
        status = int(args[0]) if args else 0
    except ValueError:
        print("exit: numeric argument required", file=sys.stderr)
        status = 2
    raise ShellExit(status)


@builtin("which")
def builtin_which(args, state):
    rc = 0
    for name in args:
        path = which(name, environ=state.environ, is_windows=state.is_windows)
        if path:
            print(path)
        else:
            print(f"which: no {name} in PATH", file=sys.stderr)
            rc = 1
    return rc


@builtin("shell")
def builtin_shell(args, state):
    """
    shell            (prints the current shell)
    shell -r         (back to the default shell)
    shell PROG ARGS  (use PROG ARGS for commands that need a shell)
    """
    if args == ["-r"]:
        state.reset_shell()
    elif args:
        state.set_shell(to_display(args[0], args[1:], state.profile))
    shell = state.get_shell()
    print(to_display(shell.program, shell.args, state.profile))
    return 0


@builtin("split")
def builtin_split(args, state):
    """ Show how the line was split, one argument per line. """
    for arg in args:
        print(arg)
    return 0
