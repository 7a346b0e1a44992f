"""Destination path mapping for template entries.

Template paths are slash-separated and relative to the template root. Entries
below :data:`~droidgen.core.constants.ANCHOR_BASE` that sit inside the
placeholder package directory are relocated to the user's package directory.
The placeholder package's own parent directories are dropped when the package
changes, so the output holds no empty leftovers from the template.
"""

from __future__ import annotations

import logging
from typing import Final

from droidgen.core.constants import ANCHOR, ANCHOR_BASE, PLACEHOLDER_PACKAGE
from droidgen.core.errors import InvalidTemplatePathError

logger = logging.getLogger(__name__)

SKIP: Final = None


def package_to_path(package_name: str) -> str:
    """``com.example.myapp`` -> ``com/example/myapp``."""
    return package_name.replace(".", "/")


def validate_template_path(path: str) -> None:
    """Raise :class:`InvalidTemplatePathError` unless *path* is a clean relative path."""
    if not path:
        raise InvalidTemplatePathError(path, "empty path")
    if path.startswith("/"):
        raise InvalidTemplatePathError(path, "absolute path")
    if "\\" in path:
        raise InvalidTemplatePathError(path, "backslash separator")
    for segment in path.split("/"):
        if segment in ("", ".", ".."):
            raise InvalidTemplatePathError(path, f"bad segment {segment!r}")


def is_anchor_ancestor(path: str) -> bool:
    """Whether *path* is a directory strictly between the anchor base and the anchor.

    For the anchor ``com/example/rockstarcompose`` these are
    ``app/src/main/java/com`` and ``app/src/main/java/com/example``.
    """
    if not path.startswith(ANCHOR_BASE):
        return False
    rest = path[len(ANCHOR_BASE) :]
    return bool(rest) and ANCHOR.startswith(rest + "/")


def map_path(path: str, package_name: str) -> str | None:
    """Compute the destination of a template entry.

    Args:
        path: Template-relative path using ``/`` separators.
        package_name: Target application id, e.g. ``org.foo.bar``.

    Returns:
        The destination path relative to the output directory, or :data:`SKIP`
        (``None``) when no filesystem entry should be created for *path*.

    Raises:
        InvalidTemplatePathError: If *path* is empty, absolute, or contains
            ``.``, ``..`` or empty segments.
    """
    validate_template_path(path)

    if not path.startswith(ANCHOR_BASE):
        return path

    idx = path.find(ANCHOR)
    if idx != -1:
        return path[:idx] + package_to_path(package_name) + path[idx + len(ANCHOR) :]

    if package_name != PLACEHOLDER_PACKAGE and is_anchor_ancestor(path):
        logger.debug("Skipping placeholder package parent %s", path)
        return SKIP

    return path
