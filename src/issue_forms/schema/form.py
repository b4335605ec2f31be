"""Forms and issue form templates.

A form is an ordered list of elements rendered top to bottom. An issue
template wraps a form (its `body`) together with the metadata GitHub
uses to name the template and prefill the created issue.
"""

from collections.abc import Iterator
from typing import Annotated, Any, Self

from pydantic import (
    ConfigDict,
    Field,
    RootModel,
    StrictStr,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

from issue_forms.errors import FormError
from issue_forms.models import SchemaModel

from . import checks
from .elements import Element, Input, Markdown


class Form(RootModel[list[Element]]):
    """Ordered sequence of form elements.

    A constructed form is always valid: cross-element rules are checked
    right after the elements themselves, and the form can not be changed
    afterwards. Paths of errors raised by a form start with the element
    position; the enclosing document adds its own root key.
    """

    model_config = ConfigDict(
        frozen=True,
    )

    root: list[Element] = Field(
        default_factory=list,
        title='Form elements',
        description='Elements of the form in display order.',
    )

    @model_validator(mode='after')
    def check_elements(self) -> Self:
        """Run cross-element checks.

        Returns:
            Self.

        Raises:
            DuplicateId: If two inputs share an identifier.
            ConstraintViolation: If a dropdown default is inconsistent
                with its options.
        """
        checks.check_unique_ids(self.root)
        checks.check_dropdown_defaults(self.root)

        return self

    def __iter__(self) -> Iterator[Element]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Element:
        return self.root[index]

    @property
    def inputs(self) -> list[Input]:
        """Elements collecting user input, in display order."""
        return [
            element
            for element in self.root
            if not isinstance(element, Markdown)
        ]

    def dump(self) -> list[dict[str, Any]]:
        """Serialize the form back to a generic document tree.

        Optional fields which are not set are omitted.

        Returns:
            A list of plain mappings, one per element.
        """
        return self.model_dump(mode='python', exclude_none=True)


def _split_names(value: Any) -> Any:  # noqa: ANN401
    """Split a comma-separated string of names into a list.

    Args:
        value: Raw field value.

    Returns:
        A list of stripped names if the value is a string, otherwise
        the value unchanged.
    """
    if not isinstance(value, str):
        return value

    return [
        name.strip()
        for name in value.split(',')
        if name.strip()
    ]


class IssueTemplate(SchemaModel):
    """Issue form template document.

    Describes a complete template file as stored under
    `.github/ISSUE_TEMPLATE`: template metadata, defaults applied to
    created issues, and the form body.
    """

    name: StrictStr = Field(
        min_length=1,
        title='Template name',
        description='Name of the template shown in the template chooser.',
    )
    description: StrictStr = Field(
        min_length=1,
        title='Template description',
        description='Description of the template shown in the template chooser.',
    )

    title: StrictStr | None = Field(
        default=None,
        title='Issue title',
        description='Default title prefilled in the created issue.',
    )
    labels: list[Annotated[StrictStr, Field(min_length=1)]] | None = Field(
        default=None,
        title='Issue labels',
        description=(
            'Labels added to the created issue.\n'
            'May be given as a list or as a comma-separated string.'
        ),
    )
    assignees: list[Annotated[StrictStr, Field(min_length=1)]] | None = Field(
        default=None,
        title='Issue assignees',
        description=(
            'Users assigned to the created issue.\n'
            'May be given as a list or as a comma-separated string.'
        ),
    )
    projects: list[Annotated[StrictStr, Field(min_length=1)]] | None = Field(
        default=None,
        title='Issue projects',
        description='Projects the created issue is added to, as `OWNER/NUMBER`.',
    )

    body: Form = Field(
        title='Form body',
        description='Elements of the form in display order.',
    )

    @field_validator('labels', 'assignees', mode='before')
    @classmethod
    def split_names(cls, value: Any) -> Any:  # noqa: ANN401
        """Accept comma-separated strings for name lists."""
        return _split_names(value)

    @field_validator('body', mode='wrap')
    @classmethod
    def locate_body_errors(cls, value: Any,  # noqa: ANN401
                           handler: ValidatorFunctionWrapHandler) -> Form:
        """Report cross-element errors under the `body` key.

        Raises:
            FormError: If the form body breaks a cross-element rule.
        """
        try:
            return handler(value)
        except FormError as error:
            raise error.relocate('body') from error

    def dump(self) -> dict[str, Any]:
        """Serialize the template back to a generic document tree.

        Returns:
            A plain mapping with unset optional fields omitted.
        """
        return self.model_dump(mode='python', exclude_none=True)
