""" Execute a parsed command, directly or through the current shell. """
import asyncio
import contextlib
import locale
import logging
import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass

from command import ParsedCommand
from constants import (COMMAND_NOT_FOUND_STATUS, TEMP_SCRIPT_PREFIX, TEMP_SCRIPT_SUFFIX,
                       WINDOWS_LINE_BREAK)
from lexer import parse
from shell_state import ShellState

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""


def to_script(text: str) -> str:
    """ Wrap text as a batch script that returns the last error level. """
    nl = WINDOWS_LINE_BREAK
    return f"@echo off{nl}{text}{nl}exit /B %errorlevel%{nl}"


def delete_temp_script(script_path: str | None):
    """ Remove a script made by temp_script() along with its directory. """
    if not script_path:
        return
    tmpdir = os.path.dirname(script_path)
    try:
        shutil.rmtree(tmpdir)
    except OSError:
        logger.warning("Failed to remove temp script directory %s", tmpdir, exc_info=True)


@contextlib.contextmanager
def temp_script(text: str):
    """ Write text into a batch file inside a fresh temp directory, removed on exit. """
    tmpdir = tempfile.mkdtemp(prefix=TEMP_SCRIPT_PREFIX)
    script_path = os.path.join(tmpdir, TEMP_SCRIPT_PREFIX + TEMP_SCRIPT_SUFFIX)
    try:
        with open(script_path, "w", encoding="utf-8", newline="") as f:
            f.write(to_script(text))
        logger.debug("Wrote temp script %s", script_path)
        yield script_path
    finally:
        delete_temp_script(script_path)


@contextlib.contextmanager
def prepare_argv(command: ParsedCommand, shell_state: ShellState, run_in_shell: bool):
    """ Yield the argv to spawn, holding any temp script until the caller is done. """
    if not run_in_shell:
        yield [command.program] + command.args
        return

    shell = shell_state.get_shell()
    if shell_state.is_windows:
        # cmd.exe only runs multi-line text from a script file
        with temp_script(command.raw_text) as script_path:
            yield [shell.program] + shell.args + [script_path]
    else:
        yield [shell.program] + shell.args + [command.raw_text]


def _not_found(name: str) -> CommandResult:
    return CommandResult(COMMAND_NOT_FOUND_STATUS, "", f"{name}: command not found\n")


def _has_work(command, run_in_shell):
    if run_in_shell:
        return bool(command.raw_text.strip())
    return bool(command.program)


def _resolve(command, shell_state, run_in_shell):
    if shell_state is None:
        shell_state = ShellState()
    if run_in_shell is None:
        run_in_shell = command.requires_shell
    return shell_state, run_in_shell


def execute(command: ParsedCommand, *, cwd=None, env=None, shell_state: ShellState | None = None,
            run_in_shell: bool | None = None) -> CommandResult:
    """ Run command to completion and capture its output. """
    shell_state, run_in_shell = _resolve(command, shell_state, run_in_shell)
    if not _has_work(command, run_in_shell):
        return CommandResult(1)

    with prepare_argv(command, shell_state, run_in_shell) as argv:
        logger.debug("Running %r (shell=%s)", argv, run_in_shell)
        try:
            completed = subprocess.run(argv, cwd=cwd, env=env, capture_output=True, text=True)
        except FileNotFoundError:
            return _not_found(argv[0])
    return CommandResult(completed.returncode, completed.stdout, completed.stderr)


async def execute_async(command: ParsedCommand, *, cwd=None, env=None,
                        shell_state: ShellState | None = None,
                        run_in_shell: bool | None = None) -> CommandResult:
    """ Same as execute(), without blocking the event loop while the process runs. """
    shell_state, run_in_shell = _resolve(command, shell_state, run_in_shell)
    if not _has_work(command, run_in_shell):
        return CommandResult(1)

    with prepare_argv(command, shell_state, run_in_shell) as argv:
        logger.debug("Running %r asynchronously (shell=%s)", argv, run_in_shell)
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                cwd=cwd,
                env=env,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            return _not_found(argv[0])
        out, err = await proc.communicate()

    encoding = locale.getpreferredencoding(False)
    return CommandResult(
        proc.returncode,
        out.decode(encoding, errors="replace"),
        err.decode(encoding, errors="replace"),
    )


def run(text: str, *, shell_state: ShellState | None = None, **kwargs) -> CommandResult:
    """ Parse text and execute it. Raises UnmatchedQuoteError on bad quoting. """
    if shell_state is None:
        shell_state = ShellState()
    return execute(parse(text, shell_state.profile), shell_state=shell_state, **kwargs)


async def run_async(text: str, *, shell_state: ShellState | None = None, **kwargs) -> CommandResult:
    if shell_state is None:
        shell_state = ShellState()
    return await execute_async(parse(text, shell_state.profile), shell_state=shell_state, **kwargs)
