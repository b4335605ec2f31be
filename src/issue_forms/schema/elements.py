"""Element variants of an issue form.

An element is one of five closed variants selected by its `type`
discriminator. All variants except markdown collect user input and
share an optional identifier and submission validations.
"""

from typing import Annotated, Literal

from pydantic import Field

from issue_forms.models import SchemaModel
from issue_forms.names import Identifier  # noqa: TC001

from .attributes import (
    CheckBoxesAttributes,
    DropDownAttributes,
    MarkdownAttributes,
    MultiLineTextAttributes,
    TextAttributes,
    Validations,
)


class Markdown(SchemaModel):
    """Static markdown block rendered between inputs."""

    #: Element type marker. Always `markdown` for markdown blocks.
    type: Literal['markdown']

    attributes: MarkdownAttributes = Field(
        title='Markdown attributes',
    )


class BaseInput(SchemaModel):
    """Base class for elements collecting user input."""

    id: Identifier | None = Field(
        default=None,
        title='Input identifier',
        description=(
            'Identifier of the input within the form.\n'
            'Must be unique across all inputs of the form.'
        ),
    )

    validations: Validations | None = Field(
        default=None,
        title='Input validations',
        description='Checks applied before the form is submitted.',
    )


class SingleLineText(BaseInput):
    """Single-line text field."""

    #: Element type marker. Always `input` for single-line text.
    type: Literal['input']

    attributes: TextAttributes = Field(
        title='Text input attributes',
    )


class MultiLineText(BaseInput):
    """Multi-line text area."""

    #: Element type marker. Always `textarea` for multi-line text.
    type: Literal['textarea']

    attributes: MultiLineTextAttributes = Field(
        title='Text area attributes',
    )


class DropDown(BaseInput):
    """Dropdown menu with a fixed list of options."""

    #: Element type marker. Always `dropdown` for dropdown menus.
    type: Literal['dropdown']

    attributes: DropDownAttributes = Field(
        title='Dropdown attributes',
    )


class CheckBoxes(BaseInput):
    """Group of checkboxes."""

    #: Element type marker. Always `checkboxes` for checkbox groups.
    type: Literal['checkboxes']

    attributes: CheckBoxesAttributes = Field(
        title='Checkbox group attributes',
    )


#: Any element of a form.
Element = Annotated[
    Markdown | SingleLineText | MultiLineText | DropDown | CheckBoxes,
    Field(discriminator='type'),
]

#: Any element collecting user input.
Input = Annotated[
    SingleLineText | MultiLineText | DropDown | CheckBoxes,
    Field(discriminator='type'),
]

#: Element models by type discriminator.
ELEMENT_MODELS: dict[str, type[SchemaModel]] = {
    'markdown': Markdown,
    'input': SingleLineText,
    'textarea': MultiLineText,
    'dropdown': DropDown,
    'checkboxes': CheckBoxes,
}
