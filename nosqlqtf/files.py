"""Reading of query test framework configuration and data files."""

from __future__ import annotations

import json
import logging
import os

logger = logging.getLogger(__name__)


class QtfError(Exception):
    """Raised when test framework files are missing or malformed."""


def get_subdirs(path: str, dirs: bool) -> list[str]:
    """Return the names of the sub-directories (``dirs`` true) or files in ``path``."""
    try:
        with os.scandir(path) as entries:
            names = [entry.name for entry in entries if entry.is_dir() == dirs]
    except OSError as exc:
        raise QtfError(f"Error reading directory '{path}': {exc}") from exc
    return sorted(names)


def _iter_raw_lines(filename: str):
    with open(filename, "rb") as handle:
        for raw in handle:
            raw = raw.rstrip(b"\n")
            if raw.endswith(b"\r"):
                raw = raw[:-1]
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError:
                continue


def read_lines_from_file(filename: str, strip_comments: bool, strip_empty: bool) -> list[str]:
    """Read a file line by line, optionally dropping comments and blank lines.

    Lines starting with ``#`` or ``//`` are dropped and ``//`` comments are cut
    from the end of lines when ``strip_comments`` is set.
    """
    lines: list[str] = []
    try:
        for line in _iter_raw_lines(filename):
            if strip_comments:
                if line.startswith("#") or line.startswith("//"):
                    continue
                index = line.find("//")
                if index >= 0:
                    line = line[:index]
            if strip_empty and not line.strip():
                continue
            lines.append(line)
    except OSError as exc:
        raise QtfError(f"Error reading file '{filename}': {exc}") from exc
    return lines


def read_blocks_from_file(filename: str) -> list[str]:
    """Read blocks of text separated by empty lines, each joined into one line."""
    blocks: list[str] = []
    current: list[str] = []
    for line in read_lines_from_file(filename, False, False):
        text = line.strip()
        if not text:
            if current:
                blocks.append(" ".join(current))
                current = []
            continue
        if text.startswith("//") or text.startswith("#"):
            continue
        current.append(text)
    if current:
        blocks.append(" ".join(current))
    return blocks


def num_curly_brace_unmatched(s: str) -> int:
    """Return the count of unmatched curly braces outside of quoted strings."""
    in_quotes = False
    prev = " "
    count = 0
    for ch in s:
        if ch == "{" and not in_quotes:
            count += 1
        elif ch == "}" and not in_quotes:
            count -= 1
        elif ch == '"' and prev != "\\":
            in_quotes = not in_quotes
        prev = ch
    return count


def read_data_file(file: str) -> dict[str, list[dict]]:
    """Read the initial table data from a data file.

    The file holds ``table: <name>`` lines, each followed by JSON objects that
    may span several lines. Returns a mapping of table name to its rows.
    """
    data: dict[str, list[dict]] = {}
    table = ""
    values: list[dict] = []
    depth = 0
    pending = ""

    for line in read_lines_from_file(file, True, False):
        stripped = line.strip()
        if not stripped:
            if depth != 0:
                pending += line
            continue

        if stripped.lower().startswith("table"):
            parts = stripped.split(":", 1)
            if len(parts) == 2:
                if table:
                    data[table] = values
                values = []
                table = parts[1].strip()
            continue

        pending += line
        depth += num_curly_brace_unmatched(line)
        if depth == 0:
            try:
                parsed = json.loads(pending)
            except json.JSONDecodeError as exc:
                logger.warning(
                    "error converting expected value to json in %s record %d: %s; json: %s",
                    file,
                    len(values),
                    exc,
                    pending,
                )
            else:
                if not isinstance(parsed, dict):
                    raise QtfError(f"expected a JSON object in {file}, got: {pending}")
                values.append(parsed)
            pending = ""

    if table and values:
        data[table] = values
    return data


def parse_excluded_tests(filename: str) -> dict[str, dict[str, bool]]:
    """Read the list of excluded suites and test cases.

    Lines are ``suite``, ``suite/dir`` (whole suite, stored as ``*``) or
    ``suite/dir/case.q``.
    """
    excluded: dict[str, dict[str, bool]] = {}
    for line in read_lines_from_file(filename, True, True):
        parts = line.split("/")
        suite = parts[0]
        case = "*" if len(parts) <= 2 else parts[2]
        excluded.setdefault(suite, {})[case] = True
    return excluded