"""Shared types for a11y-tool: Check, Report, ThemeSpec, ColourPair, TouchTarget."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from a11y_checker.core.policy import DEFAULT_POLICY, ContrastPolicy


@dataclass
class ColourPair:
    """A foreground/background pair to check, from a theme file or derived from its tokens."""

    label: str
    fg: str  # token name or literal colour
    bg: str
    size: str = 'normal'  # 'normal' | 'large'


@dataclass
class TouchTarget:
    """A declared interactive element size from the theme file."""

    name: str
    width: float
    height: float


@dataclass
class ThemeSpec:
    """Parsed theme token file."""

    name: str
    colours: dict[str, str] = field(default_factory=dict)
    pairs: list[ColourPair] = field(default_factory=list)
    targets: list[TouchTarget] = field(default_factory=list)
    level: str | None = None  # theme-requested WCAG level, CLI flag wins
    policy: ContrastPolicy = DEFAULT_POLICY
    path: str | None = None

    def resolve(self, ref: str) -> str:
        """Token name → colour value. Anything not in the token table is treated as a literal."""
        return self.colours.get(ref, ref)


class Check:
    """A self-registering audit check.

    Usage in a check module:

        check = Check(name='contrast', help='Foreground/background pairs against WCAG')

        @check.run
        def run(theme, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, theme: ThemeSpec, report: Report, args: Any) -> None:
        """Execute the check's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Check {self.name} has no run function')
        self._run_fn(theme, report, args)


@dataclass
class Report:
    """Accumulates results from checks for text/JSON output."""

    theme_name: str = ''
    theme_path: str | None = None
    level: str = 'AA'
    items: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, item_name: str, check_name: str, data: dict[str, Any]) -> None:
        """Add check results for an item (a pair, a target, a token)."""
        if item_name not in self.items:
            self.items[item_name] = {}
        self.items[item_name][check_name] = data

    def record(self, item_name: str, passed: bool) -> None:
        if passed:
            self.pass_count += 1
        else:
            self.fail_count += 1

    @property
    def total(self) -> int:
        return self.pass_count + self.fail_count
