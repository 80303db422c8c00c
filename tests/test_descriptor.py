"""Tests for a11y_checker.core.descriptor (descriptor composition and helpers)."""

import pytest
from a11y_checker.core.descriptor import (
    AccessibilityDescriptor,
    AccessibilityState,
    AccessibilityValue,
    accessibility_value_from_range,
    build_descriptor,
    create_accessibility_props,
    create_accessibility_state,
    create_accessibility_value,
    generate_accessibility_hint,
    generate_accessibility_label,
    get_accessibility_role,
)


class TestGenerateLabel:
    def test_text_only(self):
        assert generate_accessibility_label('Submit') == 'Submit'
        assert generate_accessibility_label('Save Changes') == 'Save Changes'

    def test_with_context(self):
        assert generate_accessibility_label('Delete', 'item') == 'Delete item'
        assert generate_accessibility_label('Edit', 'profile') == 'Edit profile'

    def test_empty_parts(self):
        assert generate_accessibility_label('') == ''
        assert generate_accessibility_label('', 'context') == 'context'

    def test_trims(self):
        assert generate_accessibility_label(' Open ', None) == 'Open'


class TestGenerateHint:
    def test_with_object(self):
        assert generate_accessibility_hint('submit', 'form') == 'Double tap to submit form'
        assert generate_accessibility_hint('open', 'menu') == 'Double tap to open menu'

    def test_action_only(self):
        assert generate_accessibility_hint('close') == 'Double tap to close'
        assert generate_accessibility_hint('navigate', '') == 'Double tap to navigate'


class TestGetRole:
    @pytest.mark.parametrize('kind', ['button', 'link', 'text', 'image', 'header', 'list', 'tab', 'tablist'])
    def test_identity_roles(self, kind):
        assert get_accessibility_role(kind) == kind

    def test_listitem_has_no_native_role(self):
        assert get_accessibility_role('listitem') == 'none'

    def test_interactive_text_becomes_button(self):
        assert get_accessibility_role('text', True) == 'button'
        assert get_accessibility_role('button', True) == 'button'
        assert get_accessibility_role('image', True) == 'image'

    def test_unknown(self):
        assert get_accessibility_role('carousel') == 'none'


class TestCreateState:
    def test_single_fields(self):
        assert create_accessibility_state(disabled=True).to_dict() == {'disabled': True}
        assert create_accessibility_state(selected=True).to_dict() == {'selected': True}
        assert create_accessibility_state(checked=True).to_dict() == {'checked': True}

    def test_false_is_kept(self):
        assert create_accessibility_state(disabled=False).to_dict() == {'disabled': False}

    def test_mixed_checked(self):
        assert create_accessibility_state(checked='mixed').to_dict() == {'checked': 'mixed'}

    def test_combines(self):
        state = create_accessibility_state(disabled=True, selected=True, expanded=False)
        assert state.to_dict() == {'disabled': True, 'selected': True, 'expanded': False}

    def test_nothing_given_is_none(self):
        assert create_accessibility_state() is None


class TestCreateValue:
    def test_options_form(self):
        value = create_accessibility_value(min=0, max=100, now=75, text='75 percent')
        assert value.to_dict() == {'min': 0, 'max': 100, 'now': 75, 'text': '75 percent'}

    def test_positional_form(self):
        assert accessibility_value_from_range(50, 0, 100).to_dict() == {'min': 0, 'max': 100, 'now': 50}

    def test_positional_with_text(self):
        value = accessibility_value_from_range('Medium', 0, 100, 'Volume level')
        assert value.to_dict() == {'min': 0, 'max': 100, 'now': 'Medium', 'text': 'Volume level'}

    def test_forms_agree(self):
        assert accessibility_value_from_range(5, 1, 10, 'five') == create_accessibility_value(
            now=5, min=1, max=10, text='five'
        )

    def test_zero_is_kept(self):
        assert create_accessibility_value(now=0).to_dict() == {'now': 0}

    def test_nothing_given_is_none(self):
        assert create_accessibility_value() is None
        assert accessibility_value_from_range(None) is None


class TestCreateProps:
    def test_interactive_element(self):
        props = create_accessibility_props(
            label='Submit form',
            hint='Double tap to submit the form',
            role='button',
            state={'disabled': False},
            value=None,
        )
        assert props == {
            'accessibilityLabel': 'Submit form',
            'accessibilityHint': 'Double tap to submit the form',
            'accessibilityRole': 'button',
            'accessibilityState': {'disabled': False},
        }

    def test_form_control(self):
        props = create_accessibility_props(
            label='Volume slider',
            hint='Adjust volume level',
            role='adjustable',
            value={'min': 0, 'max': 100, 'now': 75, 'text': '75 percent'},
        )
        assert props == {
            'accessibilityLabel': 'Volume slider',
            'accessibilityHint': 'Adjust volume level',
            'accessibilityRole': 'adjustable',
            'accessibilityValue': {'min': 0, 'max': 100, 'now': 75, 'text': '75 percent'},
        }

    def test_selected_tab(self):
        props = create_accessibility_props(label='Home tab', role='tab', state={'selected': True})
        assert props == {
            'accessibilityLabel': 'Home tab',
            'accessibilityRole': 'tab',
            'accessibilityState': {'selected': True},
        }

    def test_minimal_has_only_label(self):
        assert create_accessibility_props(label='Simple text') == {'accessibilityLabel': 'Simple text'}

    def test_empty_state_and_value_are_omitted(self):
        props = create_accessibility_props(label='x', state={}, value={'text': None})
        assert props == {'accessibilityLabel': 'x'}

    def test_unknown_state_key_raises(self):
        with pytest.raises(TypeError):
            create_accessibility_props(label='x', state={'pressed': True})

    def test_does_not_mutate_inputs(self):
        state = {'disabled': True}
        value = {'now': 3}
        create_accessibility_props(label='x', state=state, value=value)
        assert state == {'disabled': True}
        assert value == {'now': 3}


class TestBuildDescriptor:
    def test_typed_parts(self):
        descriptor = build_descriptor('Slider', value={'min': 0, 'max': 100, 'now': 50})
        assert descriptor == AccessibilityDescriptor(
            label='Slider', value=AccessibilityValue(min=0, max=100, now=50)
        )
        assert descriptor.state is None

    def test_state_type(self):
        descriptor = build_descriptor('Toggle', role='button', state={'checked': 'mixed'})
        assert descriptor.state == AccessibilityState(checked='mixed')

    def test_to_props_roundtrip_keys(self):
        descriptor = AccessibilityDescriptor(label='Save', hint='Double tap to save')
        assert set(descriptor.to_props()) == {'accessibilityLabel', 'accessibilityHint'}
