"""Parser for theme token files (JSON).

Extracts the theme name, colour tokens, the pairs to contrast-check, touch
target declarations and an optional brand colour table.

If the file has no "pairs" list, pairs are derived from DaisyUI-style
token names: base-content against base-100/base-200, and <role>-content
against <role> for each semantic role, falling back to base-content and
then black when a -content token is missing.
"""

import json

from a11y_checker.core.policy import DEFAULT_POLICY, ContrastPolicy
from a11y_checker.core.types import ColourPair, ThemeSpec, TouchTarget

ROLES = ('neutral', 'primary', 'secondary', 'accent', 'info', 'success', 'warning', 'error')
BASE_SURFACES = ('base-100', 'base-200')
FALLBACK_CONTENT = '#000000'


class ThemeParseError(ValueError):
    """Raised when a theme file cannot be read or has the wrong shape."""


def parse_theme_file(path: str) -> ThemeSpec:
    """Parse a theme file from disk."""
    try:
        with open(path, encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise ThemeParseError(f'cannot read theme file {path}: {e.strerror}') from e
    theme = parse_theme_string(text)
    theme.path = path
    return theme


def parse_theme_string(text: str) -> ThemeSpec:
    """Parse a theme from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ThemeParseError(f'invalid JSON: {e.msg} (line {e.lineno})') from e
    if not isinstance(data, dict):
        raise ThemeParseError('theme must be a JSON object')

    colours = _extract_colours(data)
    pairs = _extract_pairs(data, colours)
    return ThemeSpec(
        name=str(data.get('name') or 'unknown'),
        colours=colours,
        pairs=pairs,
        targets=_extract_targets(data),
        level=_extract_level(data),
        policy=_extract_policy(data),
    )


def _extract_colours(data: dict) -> dict[str, str]:
    raw = data.get('colors', data.get('colours', {}))
    if not isinstance(raw, dict):
        raise ThemeParseError('"colors" must be an object of token → colour')
    # Non-string values (nested scales, numbers) are not colour tokens
    return {str(k): v for k, v in raw.items() if isinstance(v, str)}


def _extract_pairs(data: dict, colours: dict[str, str]) -> list[ColourPair]:
    raw = data.get('pairs')
    if raw is None:
        return derive_pairs(colours)
    if not isinstance(raw, list):
        raise ThemeParseError('"pairs" must be a list')

    pairs = []
    seen: set[str] = set()
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or 'fg' not in entry or 'bg' not in entry:
            raise ThemeParseError(f'pairs[{i}] needs "fg" and "bg"')
        fg, bg = str(entry['fg']), str(entry['bg'])
        size = entry.get('size', 'normal')
        if size not in ('normal', 'large'):
            raise ThemeParseError(f'pairs[{i}].size must be "normal" or "large", got {size!r}')
        label = str(entry.get('label') or f'{fg} vs {bg}')
        # Report items are keyed by label
        if label in seen:
            raise ThemeParseError(f'pairs[{i}] duplicates label {label!r}')
        seen.add(label)
        pairs.append(ColourPair(label=label, fg=fg, bg=bg, size=size))
    return pairs


def derive_pairs(colours: dict[str, str]) -> list[ColourPair]:
    """Build the default content-on-surface pairs from the token names present."""
    pairs = []
    base_content = 'base-content' if 'base-content' in colours else FALLBACK_CONTENT

    for surface in BASE_SURFACES:
        if surface in colours:
            pairs.append(ColourPair(label=f'base-content vs {surface}', fg=base_content, bg=surface))

    for role in ROLES:
        if role not in colours:
            continue
        content = f'{role}-content'
        fg = content if content in colours else base_content
        pairs.append(ColourPair(label=f'{content} vs {role}', fg=fg, bg=role))
    return pairs


def _extract_targets(data: dict) -> list[TouchTarget]:
    raw = data.get('targets', [])
    if not isinstance(raw, list):
        raise ThemeParseError('"targets" must be a list')

    targets = []
    for i, entry in enumerate(raw):
        try:
            targets.append(
                TouchTarget(
                    name=str(entry.get('name') or f'target-{i}'),
                    width=float(entry['width']),
                    height=float(entry['height']),
                )
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ThemeParseError(f'targets[{i}] needs numeric "width" and "height"') from e
    return targets


def _extract_level(data: dict) -> str | None:
    level = data.get('level')
    if level is None:
        return None
    if level not in ('AA', 'AAA'):
        raise ThemeParseError(f'"level" must be "AA" or "AAA", got {level!r}')
    return level


def _extract_policy(data: dict) -> ContrastPolicy:
    raw = data.get('brand_colours', data.get('brand_colors'))
    if raw is None:
        return DEFAULT_POLICY
    if not isinstance(raw, list) or not all(isinstance(c, str) for c in raw):
        raise ThemeParseError('"brand_colours" must be a list of colour strings')
    return ContrastPolicy.with_brand_colours(raw)
