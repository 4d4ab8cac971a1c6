"""Project name validation.

The project name becomes the ``name`` field of the generated
``package.json``, so it has to satisfy the npm package naming rules.  All
violations are collected (not short-circuited) so the user can fix every
problem at once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

MAX_NAME_LENGTH = 214

_SCOPED_NAME = re.compile(r"^@([^/]+)/([^/]+)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")

BLOCKLIST: frozenset[str] = frozenset({"node_modules", "favicon.ico"})

CORE_MODULE_NAMES: frozenset[str] = frozenset({
    "assert", "buffer", "child_process", "cluster", "console", "constants",
    "crypto", "dgram", "dns", "domain", "events", "fs", "http", "http2",
    "https", "module", "net", "os", "path", "perf_hooks", "process",
    "punycode", "querystring", "readline", "repl", "stream", "string_decoder",
    "sys", "timers", "tls", "tty", "url", "util", "v8", "vm", "worker_threads",
    "zlib",
})


@dataclass(frozen=True)
class NameValidation:
    """Result of :func:`validate_project_name`.

    ``problems`` is ``None`` when the name is valid, otherwise an ordered,
    non-empty list of human-readable messages.
    """

    valid: bool
    problems: list[str] | None = None


def _segment_problems(segment: str) -> list[str]:
    problems: list[str] = []
    if segment.startswith("."):
        problems.append("name cannot start with a period")
    if segment.startswith("_"):
        problems.append("name cannot start with an underscore")
    if quote(segment, safe="") != segment:
        problems.append("name can only contain URL-friendly characters")
    return problems


def validate_project_name(name: str) -> NameValidation:
    """Validate *name* against the npm package naming rules."""
    if not name or not name.strip():
        return NameValidation(False, ["name length must be greater than zero"])

    problems: list[str] = []

    if name != name.strip():
        problems.append("name cannot contain leading or trailing spaces")
    if len(name) > MAX_NAME_LENGTH:
        problems.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")
    if name.lower() != name:
        problems.append("name can no longer contain capital letters")
    if name.lower() in BLOCKLIST:
        problems.append(f"{name} is a blocklisted name")
    if name.lower() in CORE_MODULE_NAMES:
        problems.append(f"{name} is a core module name")

    if name.startswith("@"):
        match = _SCOPED_NAME.match(name)
        if match is None:
            problems.append("scoped name must have the form @scope/package")
            segments = [name[1:]]
        else:
            segments = [match.group(1), match.group(2)]
    else:
        segments = [name]

    if _SPECIAL_CHARACTERS.search(segments[-1]):
        problems.append("name can no longer contain special characters (\"~'!()*\")")

    for segment in segments:
        for problem in _segment_problems(segment):
            if problem not in problems:
                problems.append(problem)

    if problems:
        return NameValidation(False, problems)
    return NameValidation(True)
