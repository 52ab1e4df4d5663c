# SPDX-License-Identifier: MIT
"""Named segment extraction and wildcard matching for version strings.

Templates are plain strings with ``{name}`` placeholders, e.g.
``"{major}.{minor}-{preType}"``. Everything outside a placeholder is matched
literally, and a placeholder never spans a ``.`` or ``-`` separator.

Example:
    >>> extract_segments("1.2-beta", ["{major}.{minor}-{preType}", "{major}.{minor}"])
    {'major': '1', 'minor': '2', 'preType': 'beta'}
    >>> glob_match("1.2.13", "1.?.1?")
    True
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Mapping, Optional

_PLACEHOLDER = re.compile(r"\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)\}")

# Default fragment for a placeholder: anything up to the next separator
_DEFAULT_FRAGMENT = r"[^.\-]+"


@lru_cache(maxsize=128)
def _compile_template(template: str, constraints: tuple[tuple[str, str], ...]) -> re.Pattern[str]:
    """Compile a ``{name}`` template into an anchored regex."""
    fragments = dict(constraints)
    parts: list[str] = []
    position = 0

    for match in _PLACEHOLDER.finditer(template):
        parts.append(re.escape(template[position : match.start()]))
        name = match.group("name")
        parts.append(f"(?P<{name}>{fragments.get(name, _DEFAULT_FRAGMENT)})")
        position = match.end()

    parts.append(re.escape(template[position:]))
    return re.compile("".join(parts))


def extract_segments(
    text: str,
    templates: Iterable[str],
    constraints: Optional[Mapping[str, str]] = None,
) -> Optional[dict[str, str]]:
    """Extract named values from text using the first matching template.

    Args:
        text: The string to take apart
        templates: Candidate templates, tried in order
        constraints: Optional regex fragments restricting individual placeholders
            (e.g. ``{"preType": "alpha|beta"}``)

    Returns:
        A mapping of placeholder name to the matched substring, or None when no
        template matches. Placeholders absent from the matched template are
        absent from the mapping.
    """
    frozen = tuple(sorted((constraints or {}).items()))
    for template in templates:
        match = _compile_template(template, frozen).fullmatch(text)
        if match:
            return match.groupdict()
    return None


@lru_cache(maxsize=128)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    for char in pattern:
        if char == "*":
            parts.append(r"\d*")
        elif char == "?":
            parts.append(r"\d")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts))


def glob_match(text: str, pattern: str) -> bool:
    """Check whether text matches a wildcard pattern.

    ``*`` matches a run of digits and ``?`` exactly one digit. Since neither
    wildcard matches a dot, each wildcard stays within its dot-separated
    component. The whole string must match.

    Examples:
        >>> glob_match("1.2.13", "1.*.13")
        True
        >>> glob_match("1.2.13", "1.?.?")
        False
    """
    return _compile_glob(pattern).fullmatch(text) is not None
