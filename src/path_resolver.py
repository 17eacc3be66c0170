""" Locate executables along PATH. """
import logging
import ntpath
import os
import posixpath

from constants import WINDOWS_DEFAULT_PATHEXT
from platform_profile import host_is_windows

logger = logging.getLogger(__name__)


def search_dirs_and_exts(file_name: str, environ, is_windows: bool):
    """ Split PATH (and PATHEXT on Windows) into lists to try. """
    pathmod = ntpath if is_windows else posixpath
    separator = ";" if is_windows else ":"
    stem, ext = pathmod.splitext(file_name)

    dirs = [d for d in environ.get("PATH", "").split(separator) if d]

    if not is_windows:
        return stem, dirs, [ext]

    exts = [ext] if ext else []
    pathext = environ.get("PATHEXT", WINDOWS_DEFAULT_PATHEXT)
    exts.extend(e for e in pathext.split(separator) if e and e not in exts)
    return stem, dirs, exts


def which(file_name: str, environ=None, is_windows: bool | None = None) -> str:
    """
    Return the full path of file_name, or "" when it is not on PATH.
    Names that already carry a directory are only made absolute.
    """
    if environ is None:
        environ = os.environ
    if is_windows is None:
        is_windows = host_is_windows()
    pathmod = ntpath if is_windows else posixpath

    if not file_name:
        return ""
    if pathmod.basename(file_name) != file_name:
        return os.path.abspath(file_name)

    stem, dirs, exts = search_dirs_and_exts(file_name, environ, is_windows)
    for directory in dirs:
        for ext in exts:
            full_path = os.path.join(directory, stem + ext)
            if os.path.isfile(full_path):
                logger.debug("Resolved %r to %s", file_name, full_path)
                return full_path

    logger.debug("%r not found on PATH", file_name)
    return ""
