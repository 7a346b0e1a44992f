"""Render configuration and placeholder substitution table."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from droidgen.core.constants import (
    AGP_VERSION,
    COMPOSE_BOM_VERSION,
    DEFAULT_MIN_SDK,
    GRADLE_VERSION,
    KOTLIN_VERSION,
)

TOKEN_OPEN = "{{"
TOKEN_CLOSE = "}}"


def delimit(name: str) -> str:
    """Return the in-template form of a placeholder token, e.g. ``{{APP_NAME}}``."""
    return f"{TOKEN_OPEN}{name}{TOKEN_CLOSE}"


@dataclass(frozen=True, kw_only=True)
class RenderConfig:
    """
    Answers that drive a single materialization run.

    Values are expected to be validated by the caller; nothing here re-checks them.

    Attributes:
        app_name: Human-readable application name, also used as the theme prefix.
        package_name: Dot-separated application id, e.g. ``com.example.myapp``.
        min_sdk: Minimum Android API level as a string.
    """

    app_name: str
    package_name: str
    min_sdk: str = DEFAULT_MIN_SDK


class PlaceholderTable(Mapping[str, str]):
    """
    Immutable mapping from token name to replacement value.

    Raises:
        ValueError: If a replacement value contains the delimited form of any
            token in the table, which would make substitution order-dependent.
    """

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = dict(values)
        for name, value in self._values.items():
            for other in self._values:
                if delimit(other) in value:
                    raise ValueError(
                        f"Replacement for {name!r} contains placeholder {delimit(other)!r}."
                    )

    @classmethod
    def from_config(cls, config: RenderConfig) -> PlaceholderTable:
        return cls(
            {
                "APP_NAME": config.app_name,
                "PACKAGE_NAME": config.package_name,
                "MIN_SDK": config.min_sdk,
                "GRADLE_VERSION": GRADLE_VERSION,
                "AGP_VERSION": AGP_VERSION,
                "KOTLIN_VERSION": KOTLIN_VERSION,
                "CBOM_VERSION": COMPOSE_BOM_VERSION,
            }
        )

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PlaceholderTable({self._values!r})"
