"""Materialize a template tree into an output directory."""

from __future__ import annotations

import logging
from pathlib import Path

from droidgen.core.config import PlaceholderTable, RenderConfig
from droidgen.core.constants import DIR_MODE, EXECUTABLE_MODE, FILE_MODE, LAUNCHER_SCRIPT
from droidgen.core.errors import (
    DirectoryCreationError,
    InvalidTemplatePathError,
    TemplateReadError,
    TemplateWriteError,
)
from droidgen.core.paths import SKIP, map_path
from droidgen.core.render import render_content
from droidgen.core.source import TemplateSource

logger = logging.getLogger(__name__)


def file_mode(name: str) -> int:
    """Permission bits for an output file with base name *name*."""
    return EXECUTABLE_MODE if name == LAUNCHER_SCRIPT else FILE_MODE


def _make_dir(dest: Path) -> None:
    try:
        dest.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(str(dest), e) from e


def _write(dest: Path, content: bytes, mode: int) -> None:
    _make_dir(dest.parent)
    try:
        dest.write_bytes(content)
        # write_bytes keeps the mode of an existing file
        dest.chmod(mode)
    except OSError as e:
        raise TemplateWriteError(str(dest), e) from e


def materialize(source: TemplateSource, output_dir: Path, config: RenderConfig) -> list[str]:
    """
    Write every entry of *source* below *output_dir*, renamed and rendered for *config*.

    Entries are processed in lexical path order. The first error aborts the run;
    files written before it are left in place.

    Args:
        source: Template tree to read from.
        output_dir: Existing directory receiving the generated project.
        config: Answers used for path mapping and placeholder substitution.

    Returns:
        Destination paths, relative to *output_dir*, of every directory and file
        created, in the order they were processed.

    Raises:
        DirectoryCreationError: If *output_dir* does not exist or a directory
            cannot be created.
        TemplateReadError: If a template file cannot be read.
        TemplateWriteError: If an output file cannot be written.
        InvalidTemplatePathError: If a template path is malformed, or two
            template files map to the same destination.
    """
    output_dir = Path(output_dir)
    if not output_dir.is_dir():
        raise DirectoryCreationError(
            str(output_dir), FileNotFoundError(f"Output directory {output_dir} does not exist")
        )

    table = PlaceholderTable.from_config(config)
    origins: dict[str, str] = {}
    created: list[str] = []

    for entry in source.entries():
        dest_rel = map_path(entry.path, config.package_name)
        if dest_rel is SKIP:
            continue

        dest = output_dir.joinpath(*dest_rel.split("/"))

        if entry.is_dir:
            _make_dir(dest)
            logger.debug("Created directory %s", dest_rel)
        else:
            if dest_rel in origins:
                raise InvalidTemplatePathError(
                    entry.path, f"destination {dest_rel} already written from {origins[dest_rel]}"
                )
            origins[dest_rel] = entry.path

            try:
                raw = source.read_bytes(entry.path)
            except OSError as e:
                raise TemplateReadError(entry.path, e) from e

            mode = file_mode(entry.name)
            _write(dest, render_content(raw, table), mode)
            logger.debug("Wrote %s (mode %o)", dest_rel, mode)

        created.append(dest_rel)

    logger.info("Materialized %d entries into %s", len(created), output_dir)
    return created
