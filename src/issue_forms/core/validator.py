"""Validation of decoded issue form documents.

The validator takes a generic tree of mappings, lists and scalars
produced by an external loader and turns it into immutable form models.
Validation is a single pass: every element is classified by its `type`
and checked against its variant model, then cross-element rules run
over the whole form. The first failure is raised as a `FormError`
naming the offending field path.
"""

from typing import Any
from warnings import warn

from pydantic import ValidationError

from issue_forms.errors import (
    ConstraintViolation,
    ErrorContext,
    FormError,
    FormWarning,
    TypeMismatch,
    UnknownElementType,
)
from issue_forms.models import SchemaModel  # noqa: TC001
from issue_forms.names import ELEMENT_TYPES
from issue_forms.schema import ELEMENT_MODELS, Form, IssueTemplate
from issue_forms.settings import ValidatorSettings

#: Root key of a bare form in reported paths.
FORM_ROOT = 'elements'

#: Root key of a template form body in reported paths.
TEMPLATE_ROOT = 'body'


class FormValidator:
    """Stateless validator of issue form documents.

    The validator keeps no state between calls apart from its settings,
    so a single instance may be shared between threads.
    """

    def __init__(self, settings: ValidatorSettings | None = None) -> None:
        """Initialize the validator.

        Args:
            settings: Validation policy. Resolved from the environment
                when not provided.
        """
        self.settings = settings if settings is not None else ValidatorSettings()

    def validate(self, data: Any, *,  # noqa: ANN401
                 root: str = FORM_ROOT,
                 filename: str | None = None,
                 context: ErrorContext | None = None) -> Form:
        """Validate a decoded form.

        Args:
            data: Decoded list of elements.
            root: Name of the form in reported paths.
            filename: Name of the source file, used in error messages.
            context: Error context to report with. Built from `data`
                when not provided.

        Returns:
            A validated form.

        Raises:
            FormError: If the form is not well-formed.
        """
        if context is None:
            context = ErrorContext(filename=filename, document={root: data})

        if not isinstance(data, list):
            raise TypeMismatch('Form must be a list of elements', path=(root,), context=context)

        elements = [
            self.classify(item, path=(root, position), context=context)
            for position, item in enumerate(data)
        ]
        if not elements:
            self.check_empty(root, context)

        try:
            return Form(elements)
        except FormError as error:
            raise error.relocate(root, context=context) from error

    def validate_template(self, data: Any, *,  # noqa: ANN401
                          filename: str | None = None) -> IssueTemplate:
        """Validate a decoded issue form template.

        The form body is validated first, followed by template metadata.

        Args:
            data: Decoded template mapping.
            filename: Name of the source file, used in error messages.

        Returns:
            A validated issue template.

        Raises:
            FormError: If the template is not well-formed.
        """
        context = ErrorContext(filename=filename, document=data)

        if not isinstance(data, dict):
            raise TypeMismatch('Template must be a mapping', context=context)

        if TEMPLATE_ROOT in data:
            form = self.validate(data[TEMPLATE_ROOT], root=TEMPLATE_ROOT, context=context)
            data = {**data, TEMPLATE_ROOT: form}

        try:
            return IssueTemplate.model_validate(data)
        except ValidationError as base:
            raise FormError.from_pydantic_error(base, context=context) from base

    def classify(self, data: Any, *,  # noqa: ANN401
                 path: tuple[str | int, ...] = (),
                 context: ErrorContext | None = None) -> SchemaModel:
        """Classify a decoded element and validate it against its variant.

        Args:
            data: Decoded element mapping.
            path: Location of the element in the document.
            context: Error context to report with.

        Returns:
            A validated element of the variant selected by `type`.

        Raises:
            TypeMismatch: If the element is not a mapping.
            UnknownElementType: If `type` is missing or unknown.
            FormError: If the element does not match its variant.
        """
        if not isinstance(data, dict):
            raise TypeMismatch('Element must be a mapping', path=path, context=context)

        if 'type' not in data or data['type'] is None:
            raise UnknownElementType('Element type is missing', path=(*path, 'type'), context=context)

        element_type = data['type']
        model = ELEMENT_MODELS.get(element_type) if isinstance(element_type, str) else None
        if model is None:
            raise UnknownElementType(
                f'Unknown element type {element_type!r}, '
                f'expected one of: {', '.join(ELEMENT_TYPES)}',
                path=(*path, 'type'),
                context=context,
            )

        try:
            return model.model_validate(data)
        except ValidationError as base:
            raise FormError.from_pydantic_error(base, path=path, context=context) from base

    def check_empty(self, root: str, context: ErrorContext | None = None) -> None:
        """Apply the empty form policy.

        Args:
            root: Name of the form in reported paths.
            context: Error context to report with.

        Raises:
            ConstraintViolation: If empty forms are not allowed.
        """
        if not self.settings.allow_empty:
            raise ConstraintViolation('Form has no elements', path=(root,), context=context)

        if self.settings.warn_empty:
            warn(f'Form {root!r} has no elements', category=FormWarning, stacklevel=3)


def validate_form(data: Any, *, filename: str | None = None) -> Form:  # noqa: ANN401
    """Validate a decoded form with settings from the environment.

    Args:
        data: Decoded list of elements.
        filename: Name of the source file, used in error messages.

    Returns:
        A validated form.

    Raises:
        FormError: If the form is not well-formed.
    """
    return FormValidator().validate(data, filename=filename)


def validate_template(data: Any, *, filename: str | None = None) -> IssueTemplate:  # noqa: ANN401
    """Validate a decoded issue template with settings from the environment.

    Args:
        data: Decoded template mapping.
        filename: Name of the source file, used in error messages.

    Returns:
        A validated issue template.

    Raises:
        FormError: If the template is not well-formed.
    """
    return FormValidator().validate_template(data, filename=filename)
