"""Attribute records of issue form elements.

Every element variant carries an `attributes` payload whose shape is
fixed by the variant. Records are layered the way the variants relate:
text inputs extend the common input record, multi-line text extends
single-line text, and so on.
"""

from typing import Annotated, Self

from pydantic import Field, StrictBool, StrictInt, StrictStr, ValidationInfo, field_validator, model_validator

from issue_forms.errors import FieldValueError
from issue_forms.models import SchemaModel
from issue_forms.names import RESERVED_OPTIONS


def reserved_option_index(options: list[str]) -> int | None:
    """Find the first reserved sentinel among dropdown options.

    Args:
        options: Dropdown option labels.

    Returns:
        Position of the first `n/a` or `None` option, or None.
    """
    for index, option in enumerate(options):
        if option in RESERVED_OPTIONS:
            return index

    return None


class Validations(SchemaModel):
    """Submission checks attached to an input."""

    required: StrictBool | None = Field(
        default=None,
        title='Required flag',
        description='Prevents submission until the input is filled in or checked.',
    )


class MarkdownAttributes(SchemaModel):
    """Attributes of a markdown block."""

    value: StrictStr = Field(
        min_length=1,
        title='Markdown text',
        description='Markdown rendered as-is in the form. It is not submitted.',
    )


class InputAttributes(SchemaModel):
    """Attributes shared by all input elements."""

    label: StrictStr = Field(
        min_length=1,
        title='Input label',
        description='Brief description of the expected user input.',
        json_schema_extra={
            'x-ref': 'ElementLabel',
        },
    )
    description: StrictStr | None = Field(
        default=None,
        title='Input description',
        description='Additional context or guidance rendered below the label.',
        json_schema_extra={
            'x-ref': 'ElementDescription',
        },
    )


class TextAttributes(InputAttributes):
    """Attributes of a single-line text input."""

    placeholder: StrictStr | None = Field(
        default=None,
        title='Placeholder',
        description='Semi-opaque hint rendered while the input is empty.',
    )
    value: StrictStr | None = Field(
        default=None,
        title='Prefilled value',
        description='Text prefilled in the input.',
    )


class MultiLineTextAttributes(TextAttributes):
    """Attributes of a multi-line text area."""

    render: Annotated[StrictStr, Field(min_length=1)] | None = Field(
        default=None,
        title='Render language',
        description=(
            'Syntax highlighting language of the submitted text.\n'
            'When set, the text is rendered as a code block and the area '
            'does not accept Markdown or file attachments.'
        ),
        examples=[
            'shell',
            'python',
        ],
    )

    @property
    def is_code_block(self) -> bool:
        """Whether the submitted text renders as a code block."""
        return self.render is not None


class DropDownAttributes(InputAttributes):
    """Attributes of a dropdown menu.

    The `default` field precedes `options` so that the option list can
    be checked against the reserved sentinels when a default is set.
    """

    multiple: StrictBool | None = Field(
        default=None,
        title='Multiple selections',
        description='Allows selecting more than one option.',
    )
    default: Annotated[StrictInt, Field(ge=0)] | None = Field(
        default=None,
        title='Default option',
        description='Index of the option preselected in the menu.',
    )
    options: list[StrictStr] = Field(
        min_length=1,
        title='Options',
        description=(
            'Unique option labels.\n'
            'When a default is set, the reserved `n/a` and `None` '
            'labels must not be used.'
        ),
    )

    @field_validator('options', mode='after')
    @classmethod
    def check_options(cls, value: list[str], info: ValidationInfo) -> list[str]:
        """Check distinctness of options and absence of reserved labels.

        Args:
            value: Option labels.
            info: Validation info with the already validated fields.

        Returns:
            Option labels unchanged.

        Raises:
            FieldValueError: If an option repeats or a reserved label is
                used while a default option is set.
        """
        seen = set()
        for index, option in enumerate(value):
            if option in seen:
                raise FieldValueError(f'Duplicate option {option!r}', index)
            seen.add(option)

        if info.data.get('default') is None:
            return value

        if (index := reserved_option_index(value)) is not None:
            raise FieldValueError(
                f'Reserved option {value[index]!r} can not be used with a default',
                index,
            )

        return value

    @model_validator(mode='after')
    def check_default_range(self) -> Self:
        """Check that the default option points into the options list.

        Returns:
            Self.

        Raises:
            FieldValueError: If the default is not a valid option index.
        """
        if self.default is None or self.default < len(self.options):
            return self

        raise FieldValueError(
            f'Default {self.default} is out of range for {len(self.options)} options',
            'default',
        )


class CheckBoxAttributes(Validations):
    """A single checkbox of a checkbox group."""

    label: StrictStr = Field(
        min_length=1,
        title='Checkbox label',
        description='Text rendered next to the checkbox.',
    )


class CheckBoxesAttributes(InputAttributes):
    """Attributes of a checkbox group."""

    options: list[CheckBoxAttributes] | None = Field(
        default=None,
        title='Checkboxes',
        description='Checkboxes of the group, in display order.',
    )
