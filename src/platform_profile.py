""" Platform-specific character sets used by the lexer. """
import os
from dataclasses import dataclass

from constants import (POSIX_COMMENT_CHAR, POSIX_ESCAPE_CHAR, POSIX_FORCE_SHELL_CHARS,
                       WINDOWS_ESCAPE_CHAR, WINDOWS_FORCE_SHELL_CHARS)


@dataclass(frozen=True)
class PlatformProfile:
    escape_char: str
    comment_start_char: str | None
    force_shell_chars: frozenset
    is_posix_like: bool


POSIX_PROFILE = PlatformProfile(
    escape_char=POSIX_ESCAPE_CHAR,
    comment_start_char=POSIX_COMMENT_CHAR,
    force_shell_chars=POSIX_FORCE_SHELL_CHARS,
    is_posix_like=True,
)

WINDOWS_PROFILE = PlatformProfile(
    escape_char=WINDOWS_ESCAPE_CHAR,
    comment_start_char=None,
    force_shell_chars=WINDOWS_FORCE_SHELL_CHARS,
    is_posix_like=False,
)


def host_is_windows() -> bool:
    return os.name == "nt"


def get_profile(is_windows: bool | None = None) -> PlatformProfile:
    """ Select a profile; None means the host platform. """
    if is_windows is None:
        is_windows = host_is_windows()
    return WINDOWS_PROFILE if is_windows else POSIX_PROFILE


DEFAULT_PROFILE = get_profile()


def set_default_profile(profile: PlatformProfile | None = None) -> PlatformProfile:
    """
    Replace the module-wide default profile (meant for tests).
    Swapping it while other threads are parsing has undefined results;
    pass a profile explicitly to parse() instead.
    """
    global DEFAULT_PROFILE
    DEFAULT_PROFILE = profile if profile is not None else get_profile()
    return DEFAULT_PROFILE


def default_profile() -> PlatformProfile:
    return DEFAULT_PROFILE
