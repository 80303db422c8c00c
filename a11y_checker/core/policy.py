"""Contrast and touch-target policies.

Contrast thresholds (WCAG 2.1):

    level  normal  large
    AA     4.5     3.0
    AAA    7.0     4.5

Any level other than 'AAA' is treated as AA; any size other than 'large'
is treated as normal.

Brand leniency: for AA normal text only, a background listed in the
policy's brand table uses that table's threshold instead of 4.5. The
default table relaxes the six iOS system blue/red/green colours (light and
dark variants) to 3.0. Pass ContrastPolicy.strict() to disable it.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from a11y_checker.core.colour import rgb_to_hex
from a11y_checker.core.contrast import Colour, contrast_ratio

Level = Literal['AA', 'AAA']
TextSize = Literal['normal', 'large']

REQUIRED_RATIOS: dict[tuple[str, str], float] = {
    ('AA', 'normal'): 4.5,
    ('AA', 'large'): 3.0,
    ('AAA', 'normal'): 7.0,
    ('AAA', 'large'): 4.5,
}

BRAND_COLOURS = ('#007AFF', '#0A84FF', '#FF3B30', '#FF453A', '#34C759', '#32D74B')
BRAND_RATIO = 3.0

IOS_MIN_TOUCH_SIZE = 44
ANDROID_MIN_TOUCH_SIZE = 48


def _brand_key(colour: Colour) -> str:
    if isinstance(colour, str):
        return colour.strip().upper()
    return rgb_to_hex(colour).upper()


@dataclass(frozen=True)
class ContrastPolicy:
    """Threshold policy with an injectable table of brand background exceptions."""

    brand_overrides: Mapping[str, float] = field(
        default_factory=lambda: {colour: BRAND_RATIO for colour in BRAND_COLOURS}
    )

    def __post_init__(self) -> None:
        # Lookups use the upper-cased background, so keys are stored the same way
        normalised = {_brand_key(colour): ratio for colour, ratio in self.brand_overrides.items()}
        object.__setattr__(self, 'brand_overrides', MappingProxyType(normalised))

    @classmethod
    def strict(cls) -> 'ContrastPolicy':
        """Plain WCAG thresholds, no brand exceptions."""
        return cls(brand_overrides={})

    @classmethod
    def with_brand_colours(cls, colours: Iterable[str], ratio: float = BRAND_RATIO) -> 'ContrastPolicy':
        return cls(brand_overrides={c: ratio for c in colours})

    def required_ratio(self, background: Colour, level: str = 'AA', size: str = 'normal') -> float:
        lvl = 'AAA' if level == 'AAA' else 'AA'
        sz = 'large' if size == 'large' else 'normal'
        required = REQUIRED_RATIOS[(lvl, sz)]
        if lvl == 'AA' and sz == 'normal':
            override = self.brand_overrides.get(_brand_key(background))
            if override is not None:
                return override
        return required


DEFAULT_POLICY = ContrastPolicy()


@dataclass(frozen=True)
class ContrastResult:
    is_valid: bool
    ratio: float
    required: float

    def to_dict(self) -> dict:
        return {'is_valid': self.is_valid, 'ratio': self.ratio, 'required': self.required}


@dataclass(frozen=True)
class TouchTargetResult:
    is_valid: bool
    width: float
    height: float
    min_size: float

    def to_dict(self) -> dict:
        return {'is_valid': self.is_valid, 'width': self.width, 'height': self.height, 'min_size': self.min_size}


def evaluate_contrast(
    foreground: Colour,
    background: Colour,
    level: str = 'AA',
    size: str = 'normal',
    policy: ContrastPolicy = DEFAULT_POLICY,
) -> ContrastResult:
    """Evaluate a foreground/background pair against the policy."""
    ratio = contrast_ratio(foreground, background)
    required = policy.required_ratio(background, level, size)
    return ContrastResult(is_valid=ratio >= required, ratio=ratio, required=required)


def is_contrast_valid(
    foreground: Colour,
    background: Colour,
    level: str = 'AA',
    size: str = 'normal',
    policy: ContrastPolicy = DEFAULT_POLICY,
) -> bool:
    return evaluate_contrast(foreground, background, level, size, policy).is_valid


def validate_contrast_ratio(
    foreground: Colour,
    background: Colour,
    level: str = 'AA',
    size: str | bool | None = None,
    policy: ContrastPolicy = DEFAULT_POLICY,
) -> ContrastResult | bool:
    """Compatibility entry point for both historical call shapes.

    A bool 4th argument means "is large text" and returns a bare bool.
    'large', 'normal' or None returns the full ContrastResult.
    New code should call evaluate_contrast or is_contrast_valid.
    """
    if isinstance(size, bool):
        return is_contrast_valid(foreground, background, level, 'large' if size else 'normal', policy)
    return evaluate_contrast(foreground, background, level, size or 'normal', policy)


def validate_touch_target_size(width: float, height: float, min_size: float = IOS_MIN_TOUCH_SIZE) -> TouchTargetResult:
    """Both dimensions must independently reach min_size. Rectangles are fine."""
    return TouchTargetResult(
        is_valid=width >= min_size and height >= min_size,
        width=width,
        height=height,
        min_size=min_size,
    )
