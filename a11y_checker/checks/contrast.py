"""Contrast-check each foreground/background pair in the theme.

Pairs come from the theme's "pairs" list, or are derived from DaisyUI-style
token names (<role>-content on <role>, base-content on base-100/200).
Each pair is evaluated at the requested WCAG level for its text size:

    AA   normal 4.5:1   large 3:1
    AAA  normal 7:1     large 4.5:1

Brand backgrounds listed in the theme's "brand_colours" (default: the iOS
system blue/red/green set) only need 3:1 for AA normal text.

Level: --level, else the theme's "level", else A11Y_LEVEL, else AA.

Example:
    a11y-tool contrast theme.json --level AAA
    a11y-tool contrast theme.json --json --fail-on-violation
"""

from a11y_checker.core.colour import ColourParseError
from a11y_checker.core.policy import evaluate_contrast
from a11y_checker.core.types import Check, Report, ThemeSpec

check = Check(
    name='contrast',
    help='Contrast-check foreground/background pairs against WCAG AA/AAA.',
)


@check.run
def run(theme: ThemeSpec, report: Report, args) -> None:
    level = getattr(args, 'level', None) or theme.level or 'AA'
    for pair in theme.pairs:
        fg = theme.resolve(pair.fg)
        bg = theme.resolve(pair.bg)
        try:
            result = evaluate_contrast(fg, bg, level=level, size=pair.size, policy=theme.policy)
        except ColourParseError as e:
            report.add(pair.label, 'contrast', {'fg': fg, 'bg': bg, 'error': str(e)})
            report.record(pair.label, False)
            continue

        data = {'fg': fg, 'bg': bg, 'size': pair.size, 'level': level}
        data.update(result.to_dict())
        data['ratio'] = round(result.ratio, 2)
        report.add(pair.label, 'contrast', data)
        report.record(pair.label, result.is_valid)
