"""Validate declared touch targets against a minimum size.

Both width and height must reach the minimum on their own; wide or tall
rectangles are fine. The default minimum is 44 (iOS HIG). Use
--min-size 48 for Android Material, or set A11Y_MIN_TOUCH_SIZE.

Example:
    a11y-tool targets theme.json --min-size 48
"""

from a11y_checker.core.policy import IOS_MIN_TOUCH_SIZE, validate_touch_target_size
from a11y_checker.core.types import Check, Report, ThemeSpec

check = Check(
    name='targets',
    help='Validate declared touch targets: width and height must both reach the minimum.',
)


@check.run
def run(theme: ThemeSpec, report: Report, args) -> None:
    min_size = getattr(args, 'min_size', None)
    if min_size is None:
        min_size = IOS_MIN_TOUCH_SIZE
    for target in theme.targets:
        result = validate_touch_target_size(target.width, target.height, min_size)
        report.add(target.name, 'targets', result.to_dict())
        report.record(target.name, result.is_valid)
