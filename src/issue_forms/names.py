"""Identifier patterns and reserved values of the issue form schema.

The rules defined here form part of the public form contract and are
relied upon by element models, validation passes and JSON Schema export.
"""

from typing import Annotated

from pydantic import Field

#: Element type discriminators, in the order they are documented.
ELEMENT_TYPES = ('markdown', 'input', 'textarea', 'dropdown', 'checkboxes')

#: Dropdown options only meaningful in the absence of a default.
#: Compared case-sensitively.
RESERVED_OPTIONS = ('n/a', 'None')

_ID_CHARSET = r'[a-zA-Z0-9_\-]'


Identifier = Annotated[
    str, Field(
        strict=True,
        pattern=rf'^{_ID_CHARSET}+$',
        title='Input identifier',
        description=(
            'Identifier of an input element. '
            'Must be unique within the form and may only contain '
            'ASCII letters, digits, hyphens, and underscores.'
        ),
        examples=[
            'name',
            'os-version',
            'steps_to_reproduce',
        ],
        json_schema_extra={
            'x-ref': 'ElementId',
        },
    ),
]
