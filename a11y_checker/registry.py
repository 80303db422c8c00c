"""Check auto-discovery and registration.

Scans a11y_checker/checks/ for modules that define a `check` object of
type Check. Collects them into a dict keyed by name.

Falls back to the explicit module list when pkgutil cannot see the
package contents (zipapps, frozen binaries).
"""

import importlib
import pkgutil

from a11y_checker.core.types import Check

_registry: dict[str, Check] = {}

# Fallback when pkgutil.iter_modules finds nothing
_CHECK_MODULES = [
    'all',
    'contrast',
    'matrix',
    'swatches',
    'targets',
    'tokens',
]


def discover() -> dict[str, Check]:
    """Import all check modules and return the registry."""
    if _registry:
        return _registry

    import a11y_checker.checks as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _CHECK_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'a11y_checker.checks.{modname}')
        found = getattr(module, 'check', None)
        if isinstance(found, Check):
            _registry[found.name] = found

    return _registry


def get(name: str) -> Check:
    """Get a check by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown check: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_checks() -> dict[str, Check]:
    """Return all registered checks."""
    return discover()
