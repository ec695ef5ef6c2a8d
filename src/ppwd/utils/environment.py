"""
Process environment lookups.

Kept apart from the compressor so the algorithm itself never touches the
real environment or filesystem.
"""

import os
from collections.abc import Mapping

from ..config.constants import HOME_ENV_VAR, PWD_ENV_VAR
from ..errors import EnvironmentUnavailableError


def get_home_directory(environ: Mapping[str, str] | None = None) -> str | None:
    """Return $HOME, or None when it is unset."""
    if environ is None:
        environ = os.environ
    return environ.get(HOME_ENV_VAR)


def get_current_directory(
    physical: bool = True, environ: Mapping[str, str] | None = None
) -> str:
    """
    Return the current working directory.

    Logical mode follows the shell's ``pwd -L``: $PWD is used when it is an
    absolute path naming the same directory as the physical one, so symlinked
    paths are shown as the user typed them.

    Args:
        physical: Resolve symlinks (``pwd -P``) instead of trusting $PWD
        environ: Environment mapping (defaults to os.environ)

    Raises:
        EnvironmentUnavailableError: The directory was removed or is unreadable
    """
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise EnvironmentUnavailableError(e) from e

    if physical:
        return cwd

    if environ is None:
        environ = os.environ
    logical = environ.get(PWD_ENV_VAR)
    if not logical or not os.path.isabs(logical):
        return cwd
    if os.path.normpath(logical) != logical.rstrip("/") and logical != "/":
        # Contains "." or ".." components
        return cwd

    try:
        if os.path.samefile(logical, cwd):
            return logical
    except OSError:
        pass
    return cwd
