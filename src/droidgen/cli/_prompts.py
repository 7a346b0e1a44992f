"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from rich.console import Console
from simple_term_menu import TerminalMenu

from droidgen.cli._validation import validate_app_name, validate_package_name
from droidgen.core.constants import DEFAULT_MIN_SDK, MIN_SDK_LEVELS

_console = Console()

T = TypeVar("T")

DEFAULT_APP_NAME = "Mad"
DEFAULT_PACKAGE_NAME = "com.example.myapp"


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _select(question: str, options: list[T], labels: list[str], default: int = 0) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        cursor_index=default,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {labels[index]}")
    _print_bar()

    return selected


def _text(question: str, default: str, validate: Callable[[str], str | None]) -> str:
    """Display a clack-style text prompt, re-asking until *validate* accepts the answer."""
    error: str | None = None
    while True:
        _console.print(f"[bold cyan]◆[/]  {question}")
        _print_bar()
        if error is not None:
            _console.print(f"[dim]│[/]  [yellow]{error}[/]")
        _console.print("[dim]│[/]  ", end="")
        answer = input(f"({default}) ").strip() or default

        # Overwrite the ◆ question, the bar, the optional error and the input line
        _clear_lines(3 if error is None else 4)

        error = validate(answer)
        if error is None:
            break

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {answer}")
    _print_bar()

    return answer


def _confirm(question: str, default: bool = True) -> bool:
    """Display a clack-style yes/no prompt."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    _console.print("[dim]│[/]  ", end="")
    answer = input(suffix).strip().lower()

    result = default if answer == "" else answer in ("y", "yes")

    display = "Yes" if result else "No"

    _clear_lines(3)

    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _print_bar()

    return result


def prompt_app_name() -> str:
    """Prompt user for the application name."""
    return _text("What is the App Name?", DEFAULT_APP_NAME, validate_app_name)


def prompt_package_name() -> str:
    """Prompt user for the application id."""
    return _text("Package Name?", DEFAULT_PACKAGE_NAME, validate_package_name)


def prompt_min_sdk() -> str:
    """Prompt user to choose the minimum SDK level."""
    levels = list(MIN_SDK_LEVELS)
    labels = [f"API {level}" for level in levels]
    return _select("Select minimum SDK", levels, labels, default=levels.index(DEFAULT_MIN_SDK))


def confirm_overwrite(project_dir: Path) -> bool:
    """Ask whether an existing project directory may be replaced."""
    return _confirm(f"Directory '{project_dir}' already exists. Overwrite?", default=False)
