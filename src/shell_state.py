""" Shell used to run commands that cannot be started directly. """
import logging
import os

from command import ParsedCommand
from constants import (POSIX_SHELL, POSIX_SHELL_ARGS, POSIX_SHELL_ENV_KEY, WINDOWS_SHELL,
                       WINDOWS_SHELL_ARGS, WINDOWS_SHELL_ENV_KEY)
from lexer import parse
from platform_profile import PlatformProfile, default_profile

logger = logging.getLogger(__name__)


class ShellState:
    def __init__(self, profile: PlatformProfile | None = None, environ=None):
        self.profile = profile or default_profile()
        self.environ = os.environ if environ is None else environ
        self.shell = ParsedCommand()
        self.last_status = 0

    @property
    def is_windows(self) -> bool:
        return not self.profile.is_posix_like

    def default_shell(self) -> ParsedCommand:
        """ Shell named by SHELL (COMSPEC on Windows), or the stock one. """
        if self.is_windows:
            program = self.environ.get(WINDOWS_SHELL_ENV_KEY) or WINDOWS_SHELL
            args = WINDOWS_SHELL_ARGS
        else:
            program = self.environ.get(POSIX_SHELL_ENV_KEY) or POSIX_SHELL
            args = POSIX_SHELL_ARGS
        return ParsedCommand.from_parsed(program, list(args))

    def get_shell(self) -> ParsedCommand:
        if not self.shell.program:
            self.shell.copy_from(self.default_shell())
            logger.debug("Using default shell %r", self.shell.program)
        return self.shell

    def set_shell(self, command: str | None = None, force: bool = False) -> ParsedCommand:
        """
        Choose the shell. A command string is split and used as is;
        without one, the default is picked if forced or nothing is set yet.
        """
        if command:
            self.shell.copy_from(parse(command, self.profile))
            self.shell.requires_shell = False
            logger.debug("Shell set to %r %r", self.shell.program, self.shell.args)
        elif force or not self.shell.program:
            self.shell.copy_from(self.default_shell())
        return self.shell

    def reset_shell(self) -> ParsedCommand:
        return self.set_shell(force=True)

    def clear(self):
        self.shell.clear()

    def set_status(self, status: int):
        self.last_status = int(status) if status is not None else 0
