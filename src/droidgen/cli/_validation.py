"""Validation of user answers. Each validator returns an error message or None."""

from __future__ import annotations

import re

from droidgen.core.constants import MIN_SDK_LEVELS

PACKAGE_NAME_RE = re.compile(r"^[a-z][a-z0-9_]*(\.[a-z][a-z0-9_]*)*$")


def validate_app_name(value: str) -> str | None:
    if not value.strip():
        return "App name is required."
    if "{{" in value or "}}" in value:
        return "App name must not contain '{{' or '}}'."
    if value.strip() in (".", "..") or "/" in value or "\\" in value:
        return "App name must not contain path separators or be '.' or '..'."
    return None


def validate_package_name(value: str) -> str | None:
    if not value:
        return "Package name is required."
    if not PACKAGE_NAME_RE.fullmatch(value):
        return "Invalid package name format. Use: com.example.appname"
    return None


def validate_min_sdk(value: str) -> str | None:
    if value not in MIN_SDK_LEVELS:
        lo, hi = MIN_SDK_LEVELS[0], MIN_SDK_LEVELS[-1]
        return f"Unsupported minimum SDK {value!r}. Choose one of {lo}-{hi}."
    return None
