"""Typer CLI application for droidgen."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import Annotated

from rich.console import Console
from typer import Exit, Option, Typer

import droidgen
from droidgen.cli._environment import find_gradle, find_java, find_sdk
from droidgen.cli._logging import setup_logging
from droidgen.cli._prompts import (
    confirm_overwrite,
    prompt_app_name,
    prompt_min_sdk,
    prompt_package_name,
)
from droidgen.cli._readme import readme_md
from droidgen.cli._validation import validate_app_name, validate_min_sdk, validate_package_name
from droidgen.core import MaterializationError, RenderConfig, bundled_templates, materialize
from droidgen.core.constants import AGP_VERSION, DIR_MODE, GRADLE_VERSION, KOTLIN_VERSION

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


@app.callback()
def main() -> None:
    """droidgen: scaffolding tool for Android Jetpack Compose projects."""


def _print_environment() -> None:
    java = find_java()
    sdk = find_sdk()
    gradle = find_gradle()

    _console.print("[bold cyan]◆[/]  Checking environment")
    _console.print("[dim]│[/]")
    if java:
        _console.print(f"[dim]│[/]  [green]✔[/] Java: {java}")
    else:
        _console.print("[dim]│[/]  [yellow]![/] Java: Not Found")
    if sdk:
        _console.print(f"[dim]│[/]  [green]✔[/] Android SDK: {sdk}")
    else:
        _console.print("[dim]│[/]  [yellow]![/] Android SDK: Not Found (Check ANDROID_HOME)")
    if gradle:
        _console.print(f"[dim]│[/]  [green]✔[/] Gradle: {gradle}")
    else:
        _console.print("[dim]│[/]  [dim]i[/] Gradle: Not Found (Will use Wrapper)")
    _console.print("[dim]│[/]")
    _console.print(f"[dim]│[/]  Target AGP: {AGP_VERSION}")
    _console.print(f"[dim]│[/]  Target Kotlin: {KOTLIN_VERSION}")
    _console.print(f"[dim]│[/]  Target Gradle Wrapper: {GRADLE_VERSION}")
    _console.print("[dim]│[/]")


def _echo_answer(question: str, answer: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _console.print("[dim]│[/]")


def _check(error: str | None) -> None:
    if error is not None:
        _console.print(f"[bold red]Error:[/] {error}")
        raise Exit(code=2)


def _build_command() -> str:
    if sys.platform == "win32":
        return "gradle buildDebug"
    return "./gradlew buildDebug"


@app.command()
def create(
    name: Annotated[
        str | None, Option("--name", "-n", help="Application name", show_default=False)
    ] = None,
    package: Annotated[
        str | None,
        Option(
            "--package", "-p", help="Application id, e.g. com.example.myapp", show_default=False
        ),
    ] = None,
    min_sdk: Annotated[
        str | None, Option("--min-sdk", "-m", help="Minimum Android API level", show_default=False)
    ] = None,
    output: Annotated[
        Path, Option("--output", "-o", help="Directory in which the project folder is created")
    ] = Path("."),
    force: Annotated[
        bool, Option("--force", "-f", help="Overwrite an existing project directory")
    ] = False,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log every generated entry")] = False,
) -> None:
    """Create a new Android Compose project."""
    setup_logging(verbose)

    # Validate flags before prompting for anything
    if name is not None:
        name = name.strip()
        _check(validate_app_name(name))
    if package is not None:
        _check(validate_package_name(package))
    if min_sdk is not None:
        _check(validate_min_sdk(min_sdk))

    _console.print()
    _console.print(f"[bold cyan]●[/]  droidgen v{droidgen.__version__}")
    _console.print("[dim]│[/]")

    _print_environment()

    if name is None:
        name = prompt_app_name()
    else:
        _echo_answer("What is the App Name?", name)

    if package is None:
        package = prompt_package_name()
    else:
        _echo_answer("Package Name?", package)

    if min_sdk is None:
        min_sdk = prompt_min_sdk()
    else:
        _echo_answer("Select minimum SDK", f"API {min_sdk}")

    config = RenderConfig(app_name=name, package_name=package, min_sdk=min_sdk)
    project_dir = output / name

    if project_dir.resolve().parent != output.resolve():
        _console.print(
            f"[bold red]Error:[/] Project directory {project_dir} is not inside {output}."
        )
        raise Exit(code=2)

    if project_dir.exists():
        if not force and not confirm_overwrite(project_dir):
            _console.print("[bold red]✖[/]  Operation cancelled.")
            raise Exit(code=1)
        if project_dir.is_dir():
            shutil.rmtree(project_dir)
        else:
            project_dir.unlink()

    _console.print(f"[bold green]◇[/]  Generating {name} in {project_dir}/...")

    try:
        project_dir.mkdir(mode=DIR_MODE, parents=True)
    except OSError as e:
        _console.print(f"[bold red]Error:[/] Failed to create project directory: {e}")
        raise Exit(code=1) from None

    try:
        created = materialize(bundled_templates(), project_dir, config)
    except MaterializationError as e:
        _console.print(f"[bold red]Error:[/] Failed to generate project: {e}")
        raise Exit(code=1) from None

    try:
        (project_dir / "README.md").write_text(readme_md(config), encoding="utf-8")
    except OSError as e:
        _console.print(f"[bold red]Error:[/] Failed to write README.md: {e}")
        raise Exit(code=1) from None

    _console.print(f"[dim]│[/]  {len(created)} entries written, plus README.md")
    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done!")
    _console.print(f"   $ cd {project_dir.resolve()}")
    _console.print(f"   $ {_build_command()}")
    _console.print()
