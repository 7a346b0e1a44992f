"""Template materialization engine."""

from droidgen.core.config import PlaceholderTable, RenderConfig, delimit
from droidgen.core.errors import (
    DirectoryCreationError,
    DroidgenError,
    InvalidTemplatePathError,
    MaterializationError,
    TemplateReadError,
    TemplateWriteError,
)
from droidgen.core.materialize import file_mode, materialize
from droidgen.core.paths import SKIP, is_anchor_ancestor, map_path, package_to_path
from droidgen.core.render import render_content
from droidgen.core.source import (
    MappingTemplateSource,
    TemplateEntry,
    TemplateSource,
    TraversableTemplateSource,
    bundled_templates,
)

__all__ = [
    "SKIP",
    "DirectoryCreationError",
    "DroidgenError",
    "InvalidTemplatePathError",
    "MappingTemplateSource",
    "MaterializationError",
    "PlaceholderTable",
    "RenderConfig",
    "TemplateEntry",
    "TemplateReadError",
    "TemplateSource",
    "TemplateWriteError",
    "TraversableTemplateSource",
    "bundled_templates",
    "delimit",
    "file_mode",
    "is_anchor_ancestor",
    "map_path",
    "materialize",
    "package_to_path",
    "render_content",
]
