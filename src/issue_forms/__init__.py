"""Schema model and validator for GitHub issue form definitions.

The `issue_forms` package describes issue forms (structured YAML
documents made of markdown blocks, text inputs, dropdowns and checkbox
groups) as immutable Pydantic models and checks candidate documents
against them.

Key features:
- a closed set of element variants with strict per-variant attributes;
- cross-element checks such as form-wide `id` uniqueness;
- structured errors naming the offending field path;
- JSON Schema export and a small command-line checker.
"""

from .core import DocumentParser, FormValidator, validate_form, validate_template
from .errors import (
    ConstraintViolation,
    DuplicateId,
    FormError,
    FormSyntaxError,
    FormWarning,
    MissingField,
    TypeMismatch,
    UnknownElementType,
)
from .schema import Element, Form, Input, IssueTemplate

__all__ = (
    'ConstraintViolation',
    'DocumentParser',
    'DuplicateId',
    'Element',
    'Form',
    'FormError',
    'FormSyntaxError',
    'FormValidator',
    'FormWarning',
    'Input',
    'IssueTemplate',
    'MissingField',
    'TypeMismatch',
    'UnknownElementType',
    'validate_form',
    'validate_template',
)
