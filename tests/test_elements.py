"""Tests for element and attribute models."""

from typing import TYPE_CHECKING

import pydantic
import pytest

from issue_forms.schema import (
    CheckBoxes,
    DropDown,
    DropDownAttributes,
    Markdown,
    MultiLineText,
    MultiLineTextAttributes,
    SingleLineText,
)

if TYPE_CHECKING:
    from re import Pattern


@pytest.mark.parametrize('model, content, except_message', (
    pytest.param(
        Markdown,
        {'type': 'markdown', 'attributes': {'value': '## Welcome'}},
        None,
        id='markdown',
    ),
    pytest.param(
        Markdown,
        {'type': 'markdown', 'attributes': {'value': ''}},
        r'^1 validation error for Markdown',
        id='markdown with empty value',
    ),
    pytest.param(
        Markdown,
        {'type': 'markdown', 'id': 'intro', 'attributes': {'value': 'Hello'}},
        r'Extra inputs are not permitted',
        id='markdown with id',
    ),
    pytest.param(
        SingleLineText,
        {'type': 'input', 'id': 'name', 'attributes': {'label': 'Your name'}},
        None,
        id='single line text',
    ),
    pytest.param(
        SingleLineText,
        {'type': 'input', 'id': 'bad id!', 'attributes': {'label': 'Your name'}},
        r'String should match pattern',
        id='single line text with invalid id',
    ),
    pytest.param(
        SingleLineText,
        {'type': 'input', 'attributes': {'label': 42}},
        r'Input should be a valid string',
        id='single line text with numeric label',
    ),
    pytest.param(
        SingleLineText,
        {'type': 'textarea', 'attributes': {'label': 'Your name'}},
        r"Input should be 'input'",
        id='single line text with foreign type',
    ),
    pytest.param(
        MultiLineText,
        {'type': 'textarea', 'attributes': {'label': 'Logs', 'render': ''}},
        r'^1 validation error for MultiLineText',
        id='multi line text with empty render',
    ),
    pytest.param(
        DropDown,
        {'type': 'dropdown', 'attributes': {'label': 'OS', 'options': []}},
        r'List should have at least 1 item',
        id='dropdown without options',
    ),
    pytest.param(
        DropDown,
        {'type': 'dropdown', 'attributes': {'label': 'OS', 'options': ['A', 'A']}},
        r"Duplicate option 'A'",
        id='dropdown with duplicate options',
    ),
    pytest.param(
        DropDown,
        {'type': 'dropdown', 'attributes': {'label': 'OS', 'options': ['A'], 'default': True}},
        r'Input should be a valid integer',
        id='dropdown with boolean default',
    ),
    pytest.param(
        DropDown,
        {'type': 'dropdown', 'attributes': {'label': 'OS', 'options': ['A'], 'default': -1}},
        r'greater than or equal to 0',
        id='dropdown with negative default',
    ),
    pytest.param(
        CheckBoxes,
        {'type': 'checkboxes', 'attributes': {'label': 'Terms'}},
        None,
        id='checkboxes without options',
    ),
    pytest.param(
        CheckBoxes,
        {'type': 'checkboxes', 'attributes': {'label': 'Terms', 'options': [{'label': ''}]}},
        r'^1 validation error for CheckBoxes',
        id='checkboxes with empty label',
    ),
    pytest.param(
        CheckBoxes,
        {
            'type': 'checkboxes',
            'attributes': {'label': 'Terms', 'options': [{'label': 'OK'}]},
            'validations': {'required': 'yes'},
        },
        r'Input should be a valid boolean',
        id='checkboxes with string required flag',
    ),
))
def test_element_model(model: type[pydantic.BaseModel], content: dict,
                       except_message: 'Pattern | None') -> None:
    """Validate element variant models."""
    if except_message is not None:
        with pytest.raises(pydantic.ValidationError, match=except_message):
            model.model_validate(content)
        return

    model.model_validate(content)


@pytest.mark.parametrize('default, is_valid', (
    pytest.param(0, True, id='first'),
    pytest.param(2, True, id='last'),
    pytest.param(3, False, id='one past last'),
))
def test_dropdown_default_range(default: int, is_valid: bool) -> None:
    """Accept only defaults pointing into the options list."""
    content = {'label': 'Browser', 'options': ['Firefox', 'Chrome', 'Safari'], 'default': default}

    if not is_valid:
        with pytest.raises(pydantic.ValidationError, match=r'out of range for 3 options'):
            DropDownAttributes.model_validate(content)
        return

    assert DropDownAttributes.model_validate(content).default == default


@pytest.mark.parametrize('sentinel', ('n/a', 'None'))
def test_dropdown_reserved_options(sentinel: str) -> None:
    """Reject reserved options only when a default is set."""
    content = {'label': 'Browser', 'options': ['Firefox', sentinel]}

    assert DropDownAttributes.model_validate(content).options == ['Firefox', sentinel]

    with pytest.raises(pydantic.ValidationError, match=r'can not be used with a default'):
        DropDownAttributes.model_validate({**content, 'default': 0})


def test_dropdown_reserved_options_case_sensitive() -> None:
    """Treat differently cased sentinels as regular options."""
    attributes = DropDownAttributes.model_validate({
        'label': 'Browser',
        'options': ['N/A', 'none'],
        'default': 1,
    })

    assert attributes.default == 1


def test_multi_line_text_code_block() -> None:
    """Expose whether a text area renders as a code block."""
    assert MultiLineTextAttributes(label='Logs', render='shell').is_code_block
    assert not MultiLineTextAttributes(label='Logs').is_code_block


def test_element_is_immutable() -> None:
    """Forbid changes of constructed elements."""
    element = SingleLineText.model_validate({
        'type': 'input',
        'attributes': {'label': 'Your name'},
    })

    with pytest.raises(pydantic.ValidationError, match=r'frozen'):
        element.id = 'name'  # type: ignore[misc]
