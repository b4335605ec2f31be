"""Core exception hierarchy.

This module defines the error taxonomy reported by form validation.
Every failure names an error kind, the path of the offending field
(for example `elements[2].attributes.options[0]`) and a human-readable
message. Errors are never retried or recovered inside the model; they
are surfaced to the caller as-is.
"""

from os import linesep
from typing import TYPE_CHECKING, Any, ClassVar, TypedDict

from yaml import dump
from yaml.error import MarkedYAMLError

if TYPE_CHECKING:
    from typing import Self

if TYPE_CHECKING:
    from pydantic import ValidationError
    from pydantic_core import ErrorDetails

#: Location of a value inside a document: mapping keys and list indices.
type Path = tuple[str | int, ...]

SNIPPET_ELLIPSIS = f' ...{linesep}'
SNIPPET_INDENT = 2

FORMAT_FILENAME = '<unicode string>'
FORMAT_INDENT = 4

#: Pydantic error types reported as missing fields.
MISSING_ERRORS = frozenset({
    'missing',
})

#: Pydantic error types reported as primitive kind mismatches.
TYPE_ERRORS = frozenset({
    'int_from_float',
    'is_instance_of',
    'model_attributes_type',
})


def format_path(path: Path) -> str:
    """Render a document path in dotted form.

    Args:
        path: Sequence of mapping keys and list indices.

    Returns:
        A string such as `elements[2].attributes.options[0]`.
    """
    result = ''
    for key in path:
        if isinstance(key, int):
            result += f'[{key}]'
        elif result:
            result += f'.{key}'
        else:
            result = key

    return result


class ErrorContext(TypedDict, total=False):
    """Container describing contextual information for error formatting.

    All fields are optional; the formatter adapts output based on
    provided values.
    """

    #: Name of the source file where the error occurred.
    filename: str | None

    #: Line number in the source file.
    line_num: int | None
    #: Column number in the source file.
    column_num: int | None

    #: Underlying exception that triggered formatting.
    error: Exception | None

    #: Decoded document the error path refers to.
    document: Any


class FormWarning(UserWarning):
    """Warning emitted for accepted but suspicious form documents.

    Used for documents which pass validation yet are unlikely to be
    what the author meant, such as a form with no elements.
    """


class FieldValueError(ValueError):
    """Value error raised by a model validator for a nested field.

    Model-level validators only know the location of the model itself.
    This error carries the relative location of the offending field so
    that it can be appended to the reported path.
    """

    def __init__(self, message: str, *location: str | int) -> None:
        """Initialize a field value error.

        Args:
            message: Human-readable error description.
            location: Keys and indices of the field relative to the model.
        """
        self.location = location

        super().__init__(message)


class ErrorFormatter:
    """Utility class for formatting form errors.

    This formatter is responsible for producing human-readable error
    messages with the source location, the field path and a YAML
    snippet of the failing fragment.
    """

    @classmethod
    def format(cls, message: str, path: Path = (),
               context: ErrorContext | None = None) -> str:
        """Format an error message using contextual information.

        Args:
            message: Base human-readable error message.
            path: Location of the offending field.
            context: Optional error context with location and data.

        Returns:
            A fully formatted error message suitable for display.
        """
        if path:
            message = f'{format_path(path)}: {message}'

        if not context:
            return message

        message += linesep
        message += cls.get_location_string(context, indent=FORMAT_INDENT)
        message += cls.get_snippet_string(context, path, indent=FORMAT_INDENT * 2)

        return message.rstrip()

    @classmethod
    def get_location_string(cls, context: ErrorContext, *,
                            indent: str | int | None = None) -> str:
        """Format source location information.

        Args:
            context: Error context containing location metadata.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted location string including filename, line and
            column numbers when available.
        """
        indent = cls._ensure_indent(indent)

        filename = context.get('filename')
        if not filename:
            filename = FORMAT_FILENAME

        message = f'{indent}in "{filename}"'
        if (line_num := context.get('line_num')) is not None:
            line_num += 1
            message += f', line {line_num}'
            if (column_num := context.get('column_num')) is not None:
                column_num += 1
                message += f', column {column_num}'
        message += linesep

        return message

    @classmethod
    def get_snippet_string(cls, context: ErrorContext, path: Path = (), *,
                           indent: str | int | None = None) -> str:
        """Generate a formatted snippet illustrating the error context.

        Args:
            context: Error context containing document or exception data.
            path: Location of the offending field.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted multi-line snippet string, or an empty string
            if no snippet data is available.
        """
        indent = cls._ensure_indent(indent)

        if (error := context.get('error')) and isinstance(error, MarkedYAMLError):
            snippet = ''
            if error.problem_mark is not None:
                snippet = error.problem_mark.get_snippet(indent=0) or ''
            return cls._make_indent(snippet, indent)

        if (document := context.get('document')) is not None:
            fragment = cls.locate(document, path)
            if fragment is not None:
                return f'{indent}{SNIPPET_ELLIPSIS}{cls._make_yaml(fragment, indent)}{linesep}'

        return ''

    @staticmethod
    def locate(document: Any, path: Path) -> Any:  # noqa: ANN401
        """Locate the smallest fragment of a document covering a path.

        The path is walked as far as the document allows. The result is
        the last reached value wrapped in its key, so a snippet shows the
        field name alongside the failing value.

        Args:
            document: Decoded document.
            path: Location of the offending field.

        Returns:
            A mapping or a one-item list with the located value, the
            container of a missing key, or None for an empty path.
        """
        container, item = None, document
        last_key: str | int | None = None

        for key in path:
            if isinstance(item, list) and isinstance(key, int) and 0 <= key < len(item):
                container, item, last_key = item, item[key], key
            elif isinstance(item, dict) and key in item:
                container, item, last_key = item, item[key], key
            else:
                return item if isinstance(item, (dict, list)) else None

        if isinstance(container, list):
            return [item]
        if isinstance(container, dict) and last_key is not None:
            return {last_key: item}

        return None

    @classmethod
    def _make_yaml(cls, value: Any, indent: str = '') -> str:  # noqa: ANN401
        """Serialize a value to a YAML-formatted string.

        Args:
            value: Decoded document fragment.
            indent: Optional indentation prefix.

        Returns:
            A YAML-formatted string representation of the value.
        """
        data = dump(
            value,
            indent=SNIPPET_INDENT,
            sort_keys=False,
            allow_unicode=True,
        )

        return cls._make_indent(data, indent)

    @staticmethod
    def _make_indent(value: str, indent: str) -> str:
        """Apply indentation to a multi-line string.

        Empty or whitespace-only lines are omitted.

        Args:
            value: Original multi-line string.
            indent: Indentation prefix.

        Returns:
            Indented string.
        """
        if not indent:
            return value

        return linesep.join(
            f'{indent}{line}'
            for line in value.splitlines()
            if line.strip()
        )

    @staticmethod
    def _ensure_indent(indent: str | int | None = None) -> str:
        """Normalize indentation input.

        Args:
            indent: Indentation as string or number of spaces.

        Returns:
            A string consisting of spaces or the provided string.
        """
        if isinstance(indent, int) and indent > 0:
            return ' ' * indent

        if isinstance(indent, str):
            return indent

        return ''


class FormError(Exception, ErrorFormatter):
    """Base exception for all issue form errors.

    All custom exceptions raised by the library inherit from this class
    to allow unified error handling by callers.
    """

    #: Error kind reported to callers.
    kind: ClassVar[str] = 'FormError'

    def __init__(self, message: str, *, path: Path = (),
                 context: ErrorContext | None = None) -> None:
        """Initialize an error.

        Args:
            message: Human-readable error description.
            path: Location of the offending field.
            context: Error context containing optional source data.
        """
        self.message = message
        self.path = tuple(path)
        self.context = context

        super().__init__(message)

    def __str__(self) -> str:
        """String represenatation."""
        return self.format(self.message, self.path, self.context)

    @property
    def field_path(self) -> str:
        """Dotted representation of the error path."""
        return format_path(self.path)

    def relocate(self, *prefix: str | int,
                 context: ErrorContext | None = None) -> 'Self':
        """Copy the error with a path prefix and a new context.

        Args:
            prefix: Keys and indices to prepend to the path.
            context: Replacement error context. Keeps the current one
                when not provided.

        Returns:
            A new error instance of the same kind.
        """
        return type(self)(
            self.message,
            path=(*prefix, *self.path),
            context=context if context is not None else self.context,
        )

    @classmethod
    def from_pydantic_error(cls, error: 'ValidationError', *,
                            path: Path = (),
                            context: ErrorContext | None = None) -> 'FormError':
        """Create a form error from a Pydantic validation failure.

        A single issue is converted. Problems with present values are
        reported ahead of missing fields; among those, Pydantic order
        (field declaration order) decides, so the outcome is
        deterministic for a given document.

        Args:
            error: ValidationError raised by Pydantic.
            path: Location of the validated value inside the document.
            context: Error context containing optional source data.

        Returns:
            An error of the kind matching the Pydantic error type.
        """
        errors = [
            cls._convert_details(details, path, context)
            for details in error.errors(include_url=False, include_input=False)
        ]
        if not errors:  # pragma: no cover
            return ConstraintViolation('Validation error', path=path, context=context)

        for item in errors:
            if not isinstance(item, MissingField):
                return item

        return errors[0]

    @staticmethod
    def _convert_details(details: 'ErrorDetails', path: Path,
                         context: ErrorContext | None) -> 'FormError':
        """Convert a single Pydantic error entry.

        Args:
            details: Pydantic error details including location path.
            path: Location of the validated value inside the document.
            context: Error context containing optional source data.

        Returns:
            An error of the kind matching the Pydantic error type.
        """
        location = (*path, *details['loc'])
        message = details['msg']

        error_type = details['type']
        if error_type == 'value_error':
            origin = (details.get('ctx') or {}).get('error')
            if isinstance(origin, FieldValueError):
                location = (*location, *origin.location)
            if isinstance(origin, Exception):
                message = str(origin)

        error_class: type[FormError] = ConstraintViolation
        if error_type in MISSING_ERRORS:
            error_class = MissingField
        elif error_type in TYPE_ERRORS or error_type.endswith(('_type', '_parsing')):
            error_class = TypeMismatch

        return error_class(message, path=location, context=context)


class UnknownElementType(FormError):
    """Element `type` is missing or is not one of the known kinds."""

    kind = 'UnknownElementType'


class MissingField(FormError):
    """A required attribute is absent for the element's variant."""

    kind = 'MissingField'


class TypeMismatch(FormError):
    """A field is present but has the wrong primitive kind."""

    kind = 'TypeMismatch'


class ConstraintViolation(FormError):
    """A field is well-typed but fails a refinement predicate.

    Covers non-empty strings, identifier pattern, numeric range,
    distinctness of options, reserved sentinel exclusion and unknown
    keys.
    """

    kind = 'ConstraintViolation'


class DuplicateId(FormError):
    """Two or more inputs in the same form share an `id`."""

    kind = 'DuplicateId'


class FormSyntaxError(FormError):
    """Error raised when a document can not be decoded at all.

    Wraps failures of the YAML loader that feeds documents into the
    validator.
    """

    kind = 'FormSyntaxError'

    @classmethod
    def from_yaml_error(cls, error: MarkedYAMLError,
                        filename: str | None = None) -> 'Self':
        """Create a syntax error from a YAML parsing failure.

        Args:
            error: Exception raised by the YAML parser.
            filename: Name of the source file, when known.

        Returns:
            FormSyntaxError representing the YAML parsing failure.
        """
        error_context = ErrorContext(filename=filename, error=error)
        if (mark := error.problem_mark) is not None:
            error_context['filename'] = filename or mark.name
            error_context['line_num'] = mark.line
            error_context['column_num'] = mark.column

        message = 'Invalid YAML'
        if error.problem:
            message += f'{linesep}{' ' * FORMAT_INDENT}{error.problem}'

        return cls(message, context=error_context)
