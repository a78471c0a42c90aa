"""String utilities: character translation, regex substitution, pruning,
comparison and date/time conversion."""

from __future__ import annotations

import re
import time
from typing import Iterable, Mapping, Union

_TIME_FORMAT = "%m/%d/%Y %H:%M:%S"


def chr_replace(s: str, fromlist: str, tolist: str) -> str:
    """Translate characters of ``s`` in the manner of Perl's ``tr//``.

    Each character equal to ``fromlist[k]`` becomes ``tolist[k]``; when
    ``tolist`` is shorter than ``fromlist`` the unmatched characters are
    deleted. The first occurrence of a character in ``fromlist`` wins.
    """
    table: dict[str, str] = {}
    for k, ch in enumerate(fromlist):
        if ch not in table:
            table[ch] = tolist[k] if k < len(tolist) else ""
    return "".join(table.get(ch, ch) for ch in s)


def _parse_replacement(replacement: str) -> list[Union[str, int]]:
    """Split a replacement into literal text and group references.

    ``\\c`` stands for the character ``c`` and ``$d`` for captured group ``d``.
    """
    parts: list[Union[str, int]] = []
    literal: list[str] = []
    chars = iter(replacement)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, None)
            if nxt is None:
                raise ValueError(
                    "Error in replacement string. Missing character following '\\'."
                )
            literal.append(nxt)
        elif ch == "$":
            nxt = next(chars, None)
            if nxt is None:
                raise ValueError(
                    "Error in replacement string. "
                    "Missing subexpression number following '$'."
                )
            if not "0" <= nxt <= "9":
                raise ValueError("Error in captured subexpression specification.")
            if literal:
                parts.append("".join(literal))
                literal = []
            parts.append(int(nxt))
        else:
            literal.append(ch)
    if literal:
        parts.append("".join(literal))
    return parts


def _expand(parts: list[Union[str, int]], match: re.Match[str]) -> str:
    out = []
    ngroups = match.re.groups
    for part in parts:
        if isinstance(part, int):
            text = match.group(part) if part <= ngroups else None
            out.append(text or "")
        else:
            out.append(part)
    return "".join(out)


def regex_replace(
    s: str, pattern: str, replacement: str, options: str = ""
) -> tuple[str, int]:
    """Substitute matches of ``pattern`` in ``s`` like Perl's ``s///``.

    ``replacement`` may refer to captured groups as ``$0`` to ``$9`` and
    escape any character with a backslash. ``options`` may hold ``"i"``
    (ignore case) and ``"g"`` (replace every match, not only the first).
    Returns the new string and the number of substitutions made.
    Raises ValueError for an invalid pattern or replacement.
    """
    flags = re.IGNORECASE if "i" in options else 0
    is_global = "g" in options
    try:
        regex = re.compile(pattern, flags)
    except re.error as exc:
        raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc

    parts: list[Union[str, int]] | None = None
    pieces: list[str] = []
    offset = 0
    nmatches = 0
    while True:
        rest = s[offset:]
        match = regex.search(rest)
        if match is None:
            pieces.append(rest)
            break

        if parts is None:
            parts = _parse_replacement(replacement)
        nmatches += 1
        pieces.append(rest[: match.start()])
        pieces.append(_expand(parts, match))
        end = match.end()
        offset += end

        if not is_global:
            pieces.append(s[offset:])
            break
        if end == 0:
            # An empty match at the current position: step over one character.
            if offset >= len(s):
                break
            pieces.append(s[offset])
            offset += 1

    return "".join(pieces), nmatches


def tail_prune(s: str, rmlist: str) -> str:
    """Remove trailing characters of ``s`` that appear in ``rmlist``."""
    return s.rstrip(rmlist)


def head_prune(s: str, rmlist: str) -> str:
    """Remove leading characters of ``s`` that appear in ``rmlist``."""
    return s.lstrip(rmlist)


def equal_ignore_case(s1: str, s2: str) -> bool:
    """Return whether two strings are equal when case is ignored."""
    if len(s1) != len(s2):
        return False
    return all(a.lower() == b.lower() for a, b in zip(s1, s2))


def reverse_compare(s1: str, s2: str) -> int:
    """Compare two strings as if both were reversed.

    Returns a negative number, zero or a positive number when ``s1`` is
    respectively less than, equal to or greater than ``s2``.
    """
    for a, b in zip(reversed(s1), reversed(s2)):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) < len(s2):
        return -1
    if len(s1) > len(s2):
        return 1
    return 0


def time_to_str(t: float) -> str:
    """Format a POSIX timestamp as local ``mm/dd/yyyy hh:mm:ss``."""
    return time.strftime(_TIME_FORMAT, time.localtime(t))


def str_to_time(s: str) -> int:
    """Parse a local ``mm/dd/yyyy hh:mm:ss`` string into a POSIX timestamp.

    Times before the epoch are clamped to 0. Raises ValueError when the
    string does not have that form.
    """
    try:
        parsed = time.strptime(s, _TIME_FORMAT)
    except ValueError as exc:
        raise ValueError(f"cannot parse time {s!r}") from exc
    try:
        rtime = int(time.mktime(parsed))
    except (OverflowError, ValueError):
        return 0
    return max(rtime, 0)


def get_string_id(
    strmap: Union[Mapping[str, int], Iterable[tuple[str, int]]], key: str
) -> int:
    """Return the id of the first name in ``strmap`` equal to ``key`` ignoring case.

    ``strmap`` is a mapping from names to ids or an iterable of
    ``(name, id)`` pairs. Raises KeyError when no name matches.
    """
    pairs = strmap.items() if isinstance(strmap, Mapping) else strmap
    for name, ident in pairs:
        if equal_ignore_case(key, name):
            return ident
    raise KeyError(key)