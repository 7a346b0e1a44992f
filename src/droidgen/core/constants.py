"""Fixed build-tool versions and template layout constants."""

from __future__ import annotations

from typing import Final

AGP_VERSION: Final = "8.13.2"
KOTLIN_VERSION: Final = "2.3.0"
GRADLE_VERSION: Final = "9.2.1"
COMPOSE_BOM_VERSION: Final = "2025.12.01"

DEFAULT_MIN_SDK: Final = "24"
MIN_SDK_LEVELS: Final[tuple[str, ...]] = tuple(str(level) for level in range(21, 37))

# Package-structured sources live below ANCHOR_BASE; the template's own
# package directory is ANCHOR.
ANCHOR_BASE: Final = "app/src/main/java/"
ANCHOR: Final = "com/example/rockstarcompose"
PLACEHOLDER_PACKAGE: Final = "com.example.app"

LAUNCHER_SCRIPT: Final = "gradlew"

DIR_MODE: Final = 0o755
FILE_MODE: Final = 0o644
EXECUTABLE_MODE: Final = 0o755
