"""Compute the full contrast matrix of the theme palette.

Every parseable colour token is contrasted against every other in one
vectorised numpy pass. For each token, reports its best partner (highest
ratio) and how many partners reach 4.5:1 (AA normal text).

Informational only: adds no PASS/FAIL counts. Unparseable tokens are
skipped; run `tokens` to see them.

Example:
    a11y-tool matrix theme.json --json
"""

import numpy as np

from a11y_checker.core.colour import try_parse_colour
from a11y_checker.core.contrast import contrast_matrix
from a11y_checker.core.types import Check, Report, ThemeSpec

check = Check(
    name='matrix',
    help='Pairwise contrast matrix of all colour tokens (numpy). Informational.',
)

AA_NORMAL = 4.5


@check.run
def run(theme: ThemeSpec, report: Report, args) -> None:
    names = []
    colours = []
    for token, value in theme.colours.items():
        rgb = try_parse_colour(value)
        if rgb is not None:
            names.append(token)
            colours.append(rgb)

    if len(colours) < 2:
        return

    ratios = contrast_matrix(colours)
    # Mask the diagonal so a colour is never its own best partner
    others = ratios.copy()
    np.fill_diagonal(others, -np.inf)

    for i, token in enumerate(names):
        best = int(np.argmax(others[i]))
        report.add(
            token,
            'matrix',
            {
                'best_partner': names[best],
                'best_ratio': round(float(others[i, best]), 2),
                'aa_partners': int(np.count_nonzero(others[i] >= AA_NORMAL)),
            },
        )
