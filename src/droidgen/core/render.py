"""Placeholder substitution for template file contents."""

from __future__ import annotations

from collections.abc import Mapping

from droidgen.core.config import delimit


def render_content(raw: bytes, table: Mapping[str, str]) -> bytes:
    """Replace every ``{{TOKEN}}`` known to *table* with its value.

    Substitution is literal. Bracketed sequences that are not in the table are
    left untouched.
    """
    rendered = raw
    for name, value in table.items():
        rendered = rendered.replace(delimit(name).encode("utf-8"), value.encode("utf-8"))
    return rendered
