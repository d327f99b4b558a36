"""Column-name helpers for prediction matrices."""

from __future__ import annotations

import keyword
import re
from collections.abc import Iterable


_INVALID_CHARS = re.compile(r"[^0-9A-Za-z_.]")
_VALID_START = re.compile(r"^([A-Za-z]|\.(?![0-9]))")


def make_valid_name(name: object) -> str:
    """Turn ``name`` into a syntactic column name.

    Invalid characters become ``.``; names that do not start with a letter, or
    a dot not followed by a digit, get an ``X`` prefix. Python keywords get a
    trailing ``.``.
    """
    text = _INVALID_CHARS.sub(".", str(name))
    if not _VALID_START.match(text):
        text = f"X{text}"
    if keyword.iskeyword(text):
        text = f"{text}."
    return text


def make_valid_names(names: Iterable[object]) -> list[str]:
    """Vectorised make_valid_name()."""
    return [make_valid_name(n) for n in names]


def make_unique_names(names: Iterable[str], sep: str = ".") -> list[str]:
    """
    Deduplicate names by appending a counter to repeats.

    The first occurrence keeps its name; later ones get ``{name}{sep}1``,
    ``{name}{sep}2``, ... skipping candidates already taken.

    Example:
        make_unique_names(["rf", "rf", "glm", "rf"]) -> ["rf", "rf.1", "glm", "rf.2"]
    """
    names = list(names)
    taken = set()
    counters: dict[str, int] = {}
    result = []

    # originals win over generated suffixes
    reserved = set(names)

    for name in names:
        if name not in taken:
            taken.add(name)
            result.append(name)
            continue

        count = counters.get(name, 0)
        while True:
            count += 1
            candidate = f"{name}{sep}{count}"
            if candidate not in taken and candidate not in reserved:
                break
        counters[name] = count
        taken.add(candidate)
        result.append(candidate)

    return result
