"""Toolchain discovery for the pre-flight environment report."""

from __future__ import annotations

import os
import shutil


def find_java() -> str | None:
    """Path of the ``java`` executable on PATH."""
    return shutil.which("java")


def find_sdk() -> str | None:
    """Android SDK location from ``ANDROID_HOME``, falling back to ``ANDROID_SDK_ROOT``."""
    return os.environ.get("ANDROID_HOME") or os.environ.get("ANDROID_SDK_ROOT") or None


def find_gradle() -> str | None:
    """Path of a globally installed ``gradle``; the generated wrapper works without it."""
    return shutil.which("gradle")
