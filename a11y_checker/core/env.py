"""Environment and .env configuration for a11y-tool.

Load order (first wins):
  1. Existing OS environment variables are never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  A11Y_LEVEL            default WCAG level for checks (AA | AAA, default AA)
  A11Y_MIN_TOUCH_SIZE   minimum touch target edge in dp/pt (default 44)
  A11Y_LOCALE           locale for `a11y-tool number` (default en_US)

Command-line flags always override these.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from a11y_checker.core.numbers import DEFAULT_LOCALE
from a11y_checker.core.policy import IOS_MIN_TOUCH_SIZE


@dataclass(frozen=True)
class Settings:
    level: str = 'AA'
    min_touch_size: float = IOS_MIN_TOUCH_SIZE
    locale: str = DEFAULT_LOCALE

    @classmethod
    def from_env(cls) -> 'Settings':
        """Read settings from os.environ. Bad values fall back to defaults."""
        level = os.environ.get('A11Y_LEVEL', 'AA').strip().upper()
        if level not in ('AA', 'AAA'):
            level = 'AA'

        raw_size = os.environ.get('A11Y_MIN_TOUCH_SIZE', '')
        try:
            min_touch_size = float(raw_size) if raw_size.strip() else IOS_MIN_TOUCH_SIZE
        except ValueError:
            min_touch_size = IOS_MIN_TOUCH_SIZE

        locale = os.environ.get('A11Y_LOCALE', '').strip() or DEFAULT_LOCALE
        return cls(level=level, min_touch_size=min_touch_size, locale=locale)


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value, KEY="value" and `export KEY=value`."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path
