"""Cross-element validation passes over a form.

These rules span more than a single field and run after every element
of a form has passed structural validation. Paths of raised errors are
relative to the form: they start with the element position.
"""

from collections.abc import Sequence

from issue_forms.errors import ConstraintViolation, DuplicateId
from issue_forms.models import SchemaModel  # noqa: TC001

from .attributes import reserved_option_index
from .elements import DropDown, Markdown


def check_unique_ids(elements: Sequence[SchemaModel]) -> None:
    """Check that input identifiers are unique within a form.

    Identifiers are compared case-sensitively, so `name` and `Name`
    do not collide.

    Args:
        elements: Structurally valid form elements.

    Raises:
        DuplicateId: At the second occurrence of a repeated identifier.
    """
    seen: dict[str, int] = {}

    for position, element in enumerate(elements):
        if isinstance(element, Markdown):
            continue

        identifier = getattr(element, 'id', None)
        if identifier is None:
            continue

        if identifier in seen:
            raise DuplicateId(
                f'Identifier {identifier!r} is already used by element {seen[identifier]}',
                path=(position, 'id'),
            )
        seen[identifier] = position


def check_dropdown_defaults(elements: Sequence[SchemaModel]) -> None:
    """Recheck the default option of every dropdown in a form.

    A default must point into the option list, and the list must not
    contain a reserved sentinel label while a default is set.

    Args:
        elements: Structurally valid form elements.

    Raises:
        ConstraintViolation: If a dropdown default is inconsistent with
            its options.
    """
    for position, element in enumerate(elements):
        if not isinstance(element, DropDown):
            continue

        attributes = element.attributes
        if attributes.default is None:
            continue

        if attributes.default >= len(attributes.options):
            raise ConstraintViolation(
                f'Default {attributes.default} is out of range '
                f'for {len(attributes.options)} options',
                path=(position, 'attributes', 'default'),
            )

        if (index := reserved_option_index(attributes.options)) is not None:
            raise ConstraintViolation(
                f'Reserved option {attributes.options[index]!r} can not be used with a default',
                path=(position, 'attributes', 'options', index),
            )
