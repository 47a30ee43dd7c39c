"""Parsing of ``git status --short`` output."""

from typing import List

from ..schemas import StatusLine

# Single-character escapes git uses when quoting a path
_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}
_OCTAL = "01234567"


def unquote_path(path: str) -> str:
    """
    Undo git's C-style quoting of a path.

    git wraps paths containing spaces, control characters or non-ASCII bytes
    in double quotes and escapes them (``"caf\\303\\251 menu.txt"``). Anything
    not wrapped in quotes is returned unchanged.
    """
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path

    body = path[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            octal = body[i + 1 : i + 4]
            if len(octal) == 3 and all(c in _OCTAL for c in octal):
                out.append(int(octal, 8) & 0xFF)
                i += 4
                continue
            if body[i + 1] in _ESCAPES:
                out.append(_ESCAPES[body[i + 1]])
                i += 2
                continue
        if ch == '"':
            # Two quoted paths, as in a rename line
            return path
        out.extend(ch.encode("utf-8", "surrogateescape"))
        i += 1
    return out.decode("utf-8", "surrogateescape")


def parse_status_lines(stdout: str) -> List[StatusLine]:
    """
    Split short-form status output into records.

    Blank lines (including the one left by a trailing newline) are skipped.
    Each remaining line is trimmed and split on its first run of whitespace
    into tag and path; a line without whitespace gets an empty path. Quoted
    paths are unquoted; rename lines (``old -> new``) are kept verbatim.
    """
    lines = []
    for raw in stdout.splitlines():
        line = raw.strip()
        if not line:
            continue
        parts = line.split(maxsplit=1)
        tag = parts[0]
        path = unquote_path(parts[1]) if len(parts) > 1 else ""
        lines.append(StatusLine(tag=tag, path=path, raw=raw))
    return lines
