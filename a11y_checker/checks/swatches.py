"""Render one PNG swatch per contrast pair for visual review.

Each swatch is the background colour with sample text drawn in the
foreground colour, labelled with the measured ratio. Files are saved to
<out_dir>/<pair-label>.png.

Requires --out-dir. Skipped by `all` unless --out-dir is given.

Example:
    a11y-tool swatches theme.json --out-dir ./swatches
"""

import os
import re
import sys

from PIL import Image, ImageDraw

from a11y_checker.core.colour import try_parse_colour
from a11y_checker.core.contrast import contrast_ratio
from a11y_checker.core.types import Check, Report, ThemeSpec

check = Check(
    name='swatches',
    help='Render a PNG swatch per contrast pair (needs --out-dir).',
)

SWATCH_SIZE = (240, 72)


def _slug(label: str) -> str:
    return re.sub(r'[^a-z0-9]+', '-', label.lower()).strip('-') or 'pair'


@check.run
def run(theme: ThemeSpec, report: Report, args) -> None:
    out_dir = getattr(args, 'out_dir', None)
    if not out_dir:
        print('swatches: --out-dir required', file=sys.stderr)
        return

    os.makedirs(out_dir, exist_ok=True)
    for pair in theme.pairs:
        fg = try_parse_colour(theme.resolve(pair.fg))
        bg = try_parse_colour(theme.resolve(pair.bg))
        if fg is None or bg is None:
            continue

        image = Image.new('RGB', SWATCH_SIZE, bg)
        draw = ImageDraw.Draw(image)
        draw.text((12, 14), 'Aa Sample text', fill=fg)
        draw.text((12, 42), f'{contrast_ratio(fg, bg):.2f}:1', fill=fg)

        path = os.path.join(out_dir, f'{_slug(pair.label)}.png')
        image.save(path)
        report.add(pair.label, 'swatches', {'file': path, 'width': image.width, 'height': image.height})
