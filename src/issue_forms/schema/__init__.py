"""Issue form schema.

Defines immutable Pydantic models describing issue form elements,
their attribute records and the rules which must hold for a form to be
accepted. The models are consumed by loaders feeding decoded documents
in and by renderers reading validated elements out.
"""

from .attributes import (
    CheckBoxAttributes,
    CheckBoxesAttributes,
    DropDownAttributes,
    InputAttributes,
    MarkdownAttributes,
    MultiLineTextAttributes,
    TextAttributes,
    Validations,
)
from .elements import (
    ELEMENT_MODELS,
    BaseInput,
    CheckBoxes,
    DropDown,
    Element,
    Input,
    Markdown,
    MultiLineText,
    SingleLineText,
)
from .form import Form, IssueTemplate

__all__ = (
    'ELEMENT_MODELS',
    'BaseInput',
    'CheckBoxAttributes',
    'CheckBoxes',
    'CheckBoxesAttributes',
    'DropDown',
    'DropDownAttributes',
    'Element',
    'Form',
    'Input',
    'InputAttributes',
    'IssueTemplate',
    'Markdown',
    'MarkdownAttributes',
    'MultiLineText',
    'MultiLineTextAttributes',
    'SingleLineText',
    'TextAttributes',
    'Validations',
)
