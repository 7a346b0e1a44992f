"""Shared fixtures for the droidgen test suite."""

import pytest

from droidgen.core import MappingTemplateSource, RenderConfig

MAIN_ACTIVITY = "app/src/main/java/com/example/rockstarcompose/MainActivity.kt"
THEME = "app/src/main/java/com/example/rockstarcompose/ui/theme/Theme.kt"


@pytest.fixture
def synthetic_source() -> MappingTemplateSource:
    return MappingTemplateSource(
        {
            "settings.gradle.kts": b'rootProject.name = "{{APP_NAME}}"\n',
            "gradlew": b"#!/bin/sh\nexec gradle-{{GRADLE_VERSION}} \"$@\"\n",
            "app/build.gradle.kts": b'applicationId = "{{PACKAGE_NAME}}"\nminSdk = {{MIN_SDK}}\n',
            "app/src/main/res/values/strings.xml": b"<string>{{APP_NAME}}</string>\n",
            MAIN_ACTIVITY: (
                b"package {{PACKAGE_NAME}}\n\nimport {{PACKAGE_NAME}}.ui.theme.{{APP_NAME}}Theme\n"
            ),
            THEME: b"package {{PACKAGE_NAME}}.ui.theme\n",
        }
    )


@pytest.fixture
def mad_config() -> RenderConfig:
    return RenderConfig(app_name="Mad", package_name="com.example.myapp", min_sdk="24")
