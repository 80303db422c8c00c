"""Run every check, combine into a single report.

Runs: tokens, contrast, targets, matrix.
Runs swatches too if --out-dir is provided.

Example:
    a11y-tool all theme.json
    a11y-tool all theme.json --json --fail-on-violation
    a11y-tool all theme.json --out-dir ./swatches
"""

from a11y_checker.core.types import Check, Report, ThemeSpec

check = Check(
    name='all',
    help='Run every check. Combine into a single report.',
)

# Checks never run automatically
SKIP = {'all'}


@check.run
def run(theme: ThemeSpec, report: Report, args) -> None:
    from a11y_checker.registry import all_checks

    has_out_dir = bool(getattr(args, 'out_dir', None))
    for name, found in sorted(all_checks().items()):
        if name in SKIP:
            continue
        if name == 'swatches' and not has_out_dir:
            continue
        found.execute(theme, report, args)
