"""README for generated projects."""

from __future__ import annotations

from droidgen.core.config import RenderConfig


def readme_md(config: RenderConfig) -> str:
    """Build instructions written next to the generated sources."""
    pkg = config.package_name
    return f"""\
# {config.app_name}

Generated by droidgen.

## To build this project

1. Make sure you have the Android SDK installed.
2. Then, set ANDROID_HOME to the path you installed SDK on.
3. Run:
   ./gradlew build
4. adb shell am start -n {pkg}/.MainActivity
   or
   adb shell monkey -p {pkg} -c android.intent.category.LAUNCHER 1
"""
