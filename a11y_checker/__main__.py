"""a11y-tool: accessibility checks for UI theme tokens.

Usage: a11y-tool <check> <theme.json> [options]

Checks are auto-discovered from a11y_checker/checks/.
Each check module's docstring is its documentation.
Run `a11y-tool help <check>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, a11y-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import json
import os
import sys

from a11y_checker import registry
from a11y_checker.core.colour import ColourParseError
from a11y_checker.core.env import Settings, load_env
from a11y_checker.core.numbers import format_number_for_screen_reader
from a11y_checker.core.policy import evaluate_contrast
from a11y_checker.core.report import format_json, format_text
from a11y_checker.core.theme_parser import ThemeParseError, parse_theme_file
from a11y_checker.core.types import Report


def _load_check_module(name: str) -> object:
    """Load the raw module for a check (for docstring access)."""
    return importlib.import_module(f'a11y_checker.checks.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_check_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    checks = registry.all_checks()

    epilog = (
        'Examples:\n'
        '  a11y-tool contrast theme.json\n'
        '  a11y-tool all theme.json --json\n'
        '  a11y-tool all theme.json --level AAA --fail-on-violation\n'
        '  a11y-tool targets theme.json --min-size 48\n'
        '  a11y-tool swatches theme.json --out-dir ./swatches\n'
        "  a11y-tool ratio '#FFFFFF' '#007AFF'\n"
        '  a11y-tool number 1500000\n'
        '  a11y-tool help contrast\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  A11Y_LEVEL=AA|AAA  A11Y_MIN_TOUCH_SIZE=44  A11Y_LOCALE=en_US\n'
    )
    parser = argparse.ArgumentParser(
        prog='a11y-tool',
        description='Accessibility checks for UI theme tokens: contrast, touch targets, colour formats.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Check to run')

    # Auto-register each check as a subcommand using module docstring
    for name, found in sorted(checks.items()):
        p = sub.add_parser(name, help=_short_doc(name, found.help))
        p.add_argument('theme', help='Path to theme token file (JSON)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-l', '--level', choices=['AA', 'AAA'], default=None, help='WCAG level (default: AA)')
        p.add_argument('-m', '--min-size', type=float, default=None, metavar='N', help='Minimum touch target size')
        p.add_argument('-o', '--out-dir', default=None, metavar='DIR', help='Output directory for swatches')
        p.add_argument(
            '-f',
            '--fail-on-violation',
            action='store_true',
            help='Exit 1 if any item fails (CI gating)',
        )

    # `ratio`: contrast of a single pair
    ratio_parser = sub.add_parser('ratio', help='Contrast ratio of one foreground/background pair')
    ratio_parser.add_argument('fg', help='Foreground colour')
    ratio_parser.add_argument('bg', help='Background colour')
    ratio_parser.add_argument('-l', '--level', choices=['AA', 'AAA'], default=None)
    ratio_parser.add_argument('-s', '--size', choices=['normal', 'large'], default='normal')
    ratio_parser.add_argument('-j', '--json', action='store_true')

    # `number`: screen-reader rendering of a number
    number_parser = sub.add_parser('number', help='Render a number as a screen reader should announce it')
    number_parser.add_argument('value', type=float, help='Number to format')
    mode = number_parser.add_mutually_exclusive_group()
    mode.add_argument('-c', '--currency', metavar='CODE', help='ISO 4217 currency code')
    mode.add_argument('-p', '--percentage', action='store_true')
    mode.add_argument('-r', '--ordinal', action='store_true')
    number_parser.add_argument('--locale', default=None)

    # `help` prints full module docstring for a check
    help_parser = sub.add_parser('help', help='Print full docs for a check')
    help_parser.add_argument('topic', nargs='?', help='Check name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a check."""
    checks = registry.all_checks()

    if topic is None:
        print('Available checks:\n')
        for name, found in sorted(checks.items()):
            print(f'  {name:<10} {_short_doc(name, found.help)}')
        print('\nRun: a11y-tool help <check> for full docs.')
        return

    if topic not in checks:
        print(f'Unknown check: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(checks))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_check_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _fail(message: str) -> None:
    print(f'a11y-tool: error: {message}', file=sys.stderr)
    sys.exit(1)


def _run_ratio(args: argparse.Namespace, settings: Settings) -> None:
    level = args.level or settings.level
    try:
        result = evaluate_contrast(args.fg, args.bg, level=level, size=args.size)
    except ColourParseError as e:
        _fail(str(e))
        return

    if args.json:
        data = {'fg': args.fg, 'bg': args.bg, 'level': level, 'size': args.size}
        data.update(result.to_dict())
        print(json.dumps(data, indent=2))
        return
    mark = '✓' if result.is_valid else '✗'
    print(f'{args.fg} on {args.bg}: {result.ratio:.2f}:1 (needs {result.required:g}:1, {level} {args.size})  {mark}')


def _run_number(args: argparse.Namespace, settings: Settings) -> None:
    value = int(args.value) if args.value.is_integer() else args.value
    print(
        format_number_for_screen_reader(
            value,
            currency=args.currency,
            percentage=args.percentage,
            ordinal=args.ordinal,
            locale=args.locale or settings.locale,
        )
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'a11y-tool: loaded {env_path}', file=sys.stderr)
    settings = Settings.from_env()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return
    if args.command == 'ratio':
        _run_ratio(args, settings)
        return
    if args.command == 'number':
        _run_number(args, settings)
        return

    if not os.path.isfile(args.theme):
        _fail(f'theme file not found: {args.theme}')

    try:
        theme = parse_theme_file(args.theme)
    except ThemeParseError as e:
        _fail(f'{args.theme}: {e}')
        return

    # Flag > theme file > environment
    args.level = args.level or theme.level or settings.level
    if args.min_size is None:
        args.min_size = settings.min_touch_size

    report = Report(theme_name=theme.name, theme_path=args.theme, level=args.level)
    registry.get(args.command).execute(theme, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate runs after output so the report is still printed
    if args.fail_on_violation and report.fail_count:
        print(f'\nFAIL: {report.fail_count} item(s) did not meet the requirements')
        sys.exit(1)


if __name__ == '__main__':
    main()
