"""Platform-neutral accessibility descriptors for interactive components.

A descriptor bundles label, hint, role, state and value. Optional parts are
omitted entirely when not supplied: state and value collapse to None when
none of their fields were given, and to_props() leaves their keys out.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Literal

Checked = bool | Literal['mixed']

ROLE_MAP: dict[str, str] = {
    'button': 'button',
    'link': 'link',
    'text': 'text',
    'image': 'image',
    'header': 'header',
    'list': 'list',
    'listitem': 'none',  # no native list-item role
    'tab': 'tab',
    'tablist': 'tablist',
}


def _present(obj: Any) -> dict[str, Any]:
    return {f.name: getattr(obj, f.name) for f in fields(obj) if getattr(obj, f.name) is not None}


@dataclass(frozen=True)
class AccessibilityState:
    disabled: bool | None = None
    selected: bool | None = None
    checked: Checked | None = None
    busy: bool | None = None
    expanded: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _present(self)


@dataclass(frozen=True)
class AccessibilityValue:
    min: float | None = None
    max: float | None = None
    now: float | str | None = None
    text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _present(self)


@dataclass(frozen=True)
class AccessibilityDescriptor:
    label: str
    hint: str | None = None
    role: str | None = None
    state: AccessibilityState | None = None
    value: AccessibilityValue | None = None

    def to_props(self) -> dict[str, Any]:
        """Render as the camelCase props mapping components spread onto elements."""
        props: dict[str, Any] = {'accessibilityLabel': self.label}
        if self.hint is not None:
            props['accessibilityHint'] = self.hint
        if self.role is not None:
            props['accessibilityRole'] = self.role
        if self.state is not None:
            props['accessibilityState'] = self.state.to_dict()
        if self.value is not None:
            props['accessibilityValue'] = self.value.to_dict()
        return props


def create_accessibility_state(
    disabled: bool | None = None,
    selected: bool | None = None,
    checked: Checked | None = None,
    busy: bool | None = None,
    expanded: bool | None = None,
) -> AccessibilityState | None:
    """Keep only the fields that were given. None if nothing was."""
    state = AccessibilityState(disabled=disabled, selected=selected, checked=checked, busy=busy, expanded=expanded)
    return state if state.to_dict() else None


def create_accessibility_value(
    *,
    min: float | None = None,
    max: float | None = None,
    now: float | str | None = None,
    text: str | None = None,
) -> AccessibilityValue | None:
    """Options form: create_accessibility_value(min=0, max=100, now=75)."""
    value = AccessibilityValue(min=min, max=max, now=now, text=text)
    return value if value.to_dict() else None


def accessibility_value_from_range(
    now: float | str | None,
    min: float | None = None,
    max: float | None = None,
    text: str | None = None,
) -> AccessibilityValue | None:
    """Positional form: accessibility_value_from_range(50, 0, 100)."""
    return create_accessibility_value(min=min, max=max, now=now, text=text)


def build_descriptor(
    label: str,
    hint: str | None = None,
    role: str | None = None,
    state: Mapping[str, Any] | None = None,
    value: Mapping[str, Any] | None = None,
) -> AccessibilityDescriptor:
    return AccessibilityDescriptor(
        label=label,
        hint=hint,
        role=role,
        state=create_accessibility_state(**state) if state else None,
        value=create_accessibility_value(**value) if value else None,
    )


def create_accessibility_props(
    label: str,
    hint: str | None = None,
    role: str | None = None,
    state: Mapping[str, Any] | None = None,
    value: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Descriptor props for a component, with absent parts left out."""
    return build_descriptor(label, hint=hint, role=role, state=state, value=value).to_props()


def generate_accessibility_label(text: str, context: str | None = None) -> str:
    parts = [p for p in (text, context) if p]
    return ' '.join(parts).strip()


def generate_accessibility_hint(action: str, obj: str | None = None) -> str:
    hint = f'Double tap to {action}'
    if obj:
        hint += f' {obj}'
    return hint


def get_accessibility_role(component_type: str, interactive: bool = False) -> str:
    if component_type == 'text' and interactive:
        return 'button'
    return ROLE_MAP.get(component_type, 'none')
