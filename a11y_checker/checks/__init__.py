"""Auto-discovery of check modules.

Every .py file in this package that defines a `check` object is
auto-registered by a11y_checker.registry.discover().

The explicit imports below keep the modules visible to bundlers that
cannot walk the package at runtime.
"""

# Keep this list in sync with the check modules
import a11y_checker.checks.all as _all  # noqa: F401
import a11y_checker.checks.contrast as _contrast  # noqa: F401
import a11y_checker.checks.matrix as _matrix  # noqa: F401
import a11y_checker.checks.swatches as _swatches  # noqa: F401
import a11y_checker.checks.targets as _targets  # noqa: F401
import a11y_checker.checks.tokens as _tokens  # noqa: F401
