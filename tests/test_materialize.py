"""Tests for writing a template tree to disk."""

from __future__ import annotations

import stat
import sys
from pathlib import Path

import pytest

from droidgen.core import (
    DirectoryCreationError,
    InvalidTemplatePathError,
    MappingTemplateSource,
    RenderConfig,
    TemplateReadError,
    TemplateWriteError,
    TraversableTemplateSource,
    bundled_templates,
    file_mode,
    materialize,
)

MAIN_ACTIVITY = "app/src/main/java/com/example/rockstarcompose/MainActivity.kt"

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


class TestScenarios:
    def test_package_rename(
        self, tmp_path: Path, synthetic_source: MappingTemplateSource, mad_config: RenderConfig
    ) -> None:
        materialize(synthetic_source, tmp_path, mad_config)

        activity = tmp_path / "app/src/main/java/com/example/myapp/MainActivity.kt"
        content = activity.read_text()
        assert "package com.example.myapp" in content
        assert "import com.example.myapp.ui.theme.MadTheme" in content
        assert "{{PACKAGE_NAME}}" not in content
        assert (tmp_path / "app/src/main/java/com/example/myapp/ui/theme/Theme.kt").is_file()
        assert not (tmp_path / "app/src/main/java/com/example/rockstarcompose").exists()

    def test_placeholder_package_keeps_ancestors(
        self, tmp_path: Path, synthetic_source: MappingTemplateSource
    ) -> None:
        config = RenderConfig(app_name="Mad", package_name="com.example.app")
        created = materialize(synthetic_source, tmp_path, config)

        assert "app/src/main/java/com" in created
        assert "app/src/main/java/com/example" in created
        assert (tmp_path / "app/src/main/java/com/example/app/MainActivity.kt").is_file()

    def test_other_top_level_segment_drops_ancestors(
        self, tmp_path: Path, synthetic_source: MappingTemplateSource
    ) -> None:
        config = RenderConfig(app_name="Mad", package_name="org.foo.bar")
        created = materialize(synthetic_source, tmp_path, config)

        assert "app/src/main/java/com" not in created
        assert "app/src/main/java/com/example" not in created
        assert not (tmp_path / "app/src/main/java/com").exists()
        assert "app/src/main/java/org/foo/bar/MainActivity.kt" in created
        assert (tmp_path / "app/src/main/java/org/foo/bar/MainActivity.kt").is_file()

    def test_unanchored_files_keep_their_path(
        self, tmp_path: Path, synthetic_source: MappingTemplateSource, mad_config: RenderConfig
    ) -> None:
        materialize(synthetic_source, tmp_path, mad_config)

        assert (tmp_path / "settings.gradle.kts").read_text() == 'rootProject.name = "Mad"\n'
        assert (tmp_path / "app/build.gradle.kts").read_text() == (
            'applicationId = "com.example.myapp"\nminSdk = 24\n'
        )
        assert (tmp_path / "app/src/main/res/values/strings.xml").is_file()

    def test_skipped_directory_children_are_still_processed(self, tmp_path: Path) -> None:
        # A file sitting directly in a suppressed ancestor still gets written
        source = MappingTemplateSource({"app/src/main/java/com/Note.txt": b"n"})
        config = RenderConfig(app_name="Mad", package_name="org.foo.bar")

        created = materialize(source, tmp_path, config)

        assert "app/src/main/java/com" not in created
        assert (tmp_path / "app/src/main/java/com/Note.txt").read_bytes() == b"n"


@posix_only
class TestPermissions:
    def test_launcher_is_executable_regardless_of_source_mode(
        self, tmp_path: Path, mad_config: RenderConfig
    ) -> None:
        template = tmp_path / "template"
        template.mkdir()
        (template / "gradlew").write_bytes(b"#!/bin/sh\n")
        (template / "gradlew").chmod(0o600)
        (template / "run.sh").write_bytes(b"#!/bin/sh\n")
        (template / "run.sh").chmod(0o777)
        out = tmp_path / "out"
        out.mkdir()

        materialize(TraversableTemplateSource(template), out, mad_config)

        assert _mode(out / "gradlew") == 0o755
        assert _mode(out / "run.sh") == 0o644

    def test_existing_file_gets_mode_reset(self, tmp_path: Path, mad_config: RenderConfig) -> None:
        existing = tmp_path / "gradlew"
        existing.write_bytes(b"old")
        existing.chmod(0o600)

        materialize(MappingTemplateSource({"gradlew": b"new"}), tmp_path, mad_config)

        assert existing.read_bytes() == b"new"
        assert _mode(existing) == 0o755

    def test_file_mode(self) -> None:
        assert file_mode("gradlew") == 0o755
        assert file_mode("gradlew.bat") == 0o644
        assert file_mode("MainActivity.kt") == 0o644


class TestFailures:
    def test_missing_output_dir(self, tmp_path: Path, mad_config: RenderConfig) -> None:
        missing = tmp_path / "nope"
        with pytest.raises(DirectoryCreationError) as exc_info:
            materialize(MappingTemplateSource({"a.txt": b"a"}), missing, mad_config)

        assert exc_info.value.path == str(missing)
        assert not missing.exists()

    def test_write_failure_halts_walk(self, tmp_path: Path, mad_config: RenderConfig) -> None:
        source = MappingTemplateSource({"a.txt": b"a", "b.txt": b"b", "c.txt": b"c"})
        # A directory squatting on the destination makes the write fail
        (tmp_path / "b.txt").mkdir()

        with pytest.raises(TemplateWriteError) as exc_info:
            materialize(source, tmp_path, mad_config)

        assert exc_info.value.path == str(tmp_path / "b.txt")
        assert isinstance(exc_info.value.cause, OSError)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert (tmp_path / "a.txt").read_bytes() == b"a"
        assert not (tmp_path / "c.txt").exists()

    def test_directory_creation_failure(self, tmp_path: Path, mad_config: RenderConfig) -> None:
        source = MappingTemplateSource({}, directories=["app"])
        (tmp_path / "app").write_bytes(b"not a directory")

        with pytest.raises(DirectoryCreationError) as exc_info:
            materialize(source, tmp_path, mad_config)

        assert exc_info.value.path == str(tmp_path / "app")

    def test_read_failure(self, tmp_path: Path, mad_config: RenderConfig) -> None:
        class Unreadable(MappingTemplateSource):
            def read_bytes(self, path: str) -> bytes:
                raise PermissionError(path)

        with pytest.raises(TemplateReadError) as exc_info:
            materialize(Unreadable({"a.txt": b"a"}), tmp_path, mad_config)

        assert exc_info.value.path == "a.txt"
        assert "a.txt" in str(exc_info.value)

    def test_invalid_template_path(self, tmp_path: Path, mad_config: RenderConfig) -> None:
        with pytest.raises(InvalidTemplatePathError):
            materialize(MappingTemplateSource({"../evil.txt": b"x"}), tmp_path, mad_config)

        assert not (tmp_path.parent / "evil.txt").exists()

    def test_colliding_destinations(self, tmp_path: Path) -> None:
        source = MappingTemplateSource(
            {
                MAIN_ACTIVITY: b"anchored",
                "app/src/main/java/org/foo/bar/MainActivity.kt": b"literal",
            }
        )
        config = RenderConfig(app_name="Mad", package_name="org.foo.bar")

        with pytest.raises(InvalidTemplatePathError, match="already written"):
            materialize(source, tmp_path, config)


class TestBundledTemplate:
    @pytest.mark.parametrize("package", ["com.example.myapp", "org.foo.bar", "com.example.app"])
    def test_no_residual_placeholders(self, tmp_path: Path, package: str) -> None:
        config = RenderConfig(app_name="Mad", package_name=package, min_sdk="26")
        created = materialize(bundled_templates(), tmp_path, config)

        pkg_dir = tmp_path / "app/src/main/java" / package.replace(".", "/")
        assert (pkg_dir / "MainActivity.kt").is_file()
        assert (pkg_dir / "ui/theme/Theme.kt").is_file()

        for rel in created:
            path = tmp_path / rel
            if path.is_file():
                assert b"{{" not in path.read_bytes(), rel

    def test_gradle_files_receive_versions(self, tmp_path: Path, mad_config: RenderConfig) -> None:
        materialize(bundled_templates(), tmp_path, mad_config)

        catalog = (tmp_path / "gradle/libs.versions.toml").read_text()
        assert 'agp = "8.13.2"' in catalog
        assert 'kotlin = "2.3.0"' in catalog
        assert 'composeBom = "2025.12.01"' in catalog
        wrapper = (tmp_path / "gradle/wrapper/gradle-wrapper.properties").read_text()
        assert "gradle-9.2.1-bin.zip" in wrapper
        app_build = (tmp_path / "app/build.gradle.kts").read_text()
        assert "minSdk = 24" in app_build
        assert 'applicationId = "com.example.myapp"' in app_build

    @posix_only
    def test_gradlew_is_executable(self, tmp_path: Path, mad_config: RenderConfig) -> None:
        materialize(bundled_templates(), tmp_path, mad_config)
        assert _mode(tmp_path / "gradlew") == 0o755
        assert _mode(tmp_path / "gradlew.bat") == 0o644
