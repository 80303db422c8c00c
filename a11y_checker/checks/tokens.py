"""Check that every colour token in the theme parses.

Accepted forms: #rgb, #rrggbb (the '#' is optional), rgb()/rgba(),
hsl()/hsla(), and the names white/black. Each token is reported with its
normalised hex value, or with the parse error and a FAIL.

Example:
    a11y-tool tokens theme.json
"""

from a11y_checker.core.colour import ColourParseError, parse_colour, rgb_to_hex
from a11y_checker.core.types import Check, Report, ThemeSpec

check = Check(
    name='tokens',
    help='Validate that every colour token parses. Report normalised hex values.',
)


@check.run
def run(theme: ThemeSpec, report: Report, args) -> None:
    for token, value in theme.colours.items():
        try:
            rgb = parse_colour(value)
        except ColourParseError as e:
            report.add(token, 'tokens', {'value': value, 'error': str(e)})
            report.record(token, False)
            continue
        report.add(token, 'tokens', {'value': value, 'hex': rgb_to_hex(rgb)})
        report.record(token, True)
