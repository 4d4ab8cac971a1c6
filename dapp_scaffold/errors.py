"""Exception hierarchy for dapp-scaffold.

Validation and precondition errors are raised before anything touches the
filesystem.  Generation errors are raised from inside the generation boundary
after the partially-written destination has been cleaned up.
"""

from __future__ import annotations

import errno
import json


class ScaffoldError(Exception):
    """Base class for every error that should end a run with exit code 1."""

    show_help_hint: bool = True


class InvalidOptionError(ScaffoldError):
    """Raised for a bad project name, chain, wallet provider or CLI flag."""


class IncompatibleProviderError(InvalidOptionError):
    """Raised when a wallet provider does not support the selected chain."""

    def __init__(self, wallet: str, chain: str, available: list[str]) -> None:
        self.wallet = wallet
        self.chain = chain
        self.available = available
        super().__init__(
            f"{wallet} doesn't support {chain}.\n"
            f"  Available providers for {chain}: {', '.join(available)}"
        )


class PreconditionError(ScaffoldError):
    """Raised when the destination cannot be written safely."""


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template directory required for generation is missing."""

    show_help_hint = False


class GenerationError(ScaffoldError):
    """Raised when generation fails mid-way.

    Attributes:
        category: One of ``permission``, ``disk_space``, ``not_found``,
            ``invalid_manifest`` or ``unknown``.
        cause: The underlying exception.
    """

    show_help_hint = False

    def __init__(self, message: str, category: str = "unknown", cause: BaseException | None = None) -> None:
        self.category = category
        self.cause = cause
        super().__init__(message)


_ERRNO_CATEGORIES: dict[int, str] = {
    errno.EACCES: "permission",
    errno.EPERM: "permission",
    errno.EROFS: "permission",
    errno.ENOSPC: "disk_space",
    errno.ENOENT: "not_found",
}


def categorize_error(exc: BaseException) -> str:
    """Derive a category hint from an exception's type, errno or message."""
    if isinstance(exc, json.JSONDecodeError):
        return "invalid_manifest"
    if isinstance(exc, PermissionError):
        return "permission"
    if isinstance(exc, FileNotFoundError):
        return "not_found"
    if isinstance(exc, OSError) and exc.errno in _ERRNO_CATEGORIES:
        return _ERRNO_CATEGORIES[exc.errno]

    message = str(exc)
    if "EACCES" in message or "permission" in message.lower():
        return "permission"
    if "ENOSPC" in message:
        return "disk_space"
    if "ENOENT" in message:
        return "not_found"
    return "unknown"
