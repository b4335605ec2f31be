"""YAML front end of the form validator.

Issue form templates are stored as YAML files. The parser loads a file
with a PyYAML loader and hands the decoded tree over to the validator.
A document holding a mapping is validated as a complete template, a
document holding a list as a bare form.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Any

from yaml import SafeLoader, YAMLError, load
from yaml.error import MarkedYAMLError

from issue_forms.errors import ErrorContext, FormSyntaxError

from .validator import FormValidator

if TYPE_CHECKING:
    from io import TextIOBase

if TYPE_CHECKING:
    from yaml import BaseLoader

if TYPE_CHECKING:
    from issue_forms.schema import Form, IssueTemplate
    from issue_forms.settings import ValidatorSettings


class DocumentParser:
    """Issue form YAML parser.

    The parser is stateless apart from its loader class and validator
    settings, so one instance can parse any number of documents.
    """

    def __init__(self, loader: type['BaseLoader'] = SafeLoader,
                 settings: 'ValidatorSettings | None' = None) -> None:
        """Initialize the document parser.

        Args:
            loader: YAML loader class used to decode documents.
            settings: Validation policy. Resolved from the environment
                when not provided.
        """
        self.loader = loader
        self.validator = FormValidator(settings)

    def load(self, content: 'TextIOBase | str', *,
             filename: str | None = None) -> Any:  # noqa: ANN401
        """Decode a single YAML document.

        Args:
            content: YAML content as a string or file-like object.
            filename: Name of the source file, used in error messages.

        Returns:
            The decoded document tree.

        Raises:
            FormSyntaxError: If the content is not valid YAML or can not
                be decoded as text.
        """
        try:
            return load(content, Loader=self.loader)  # noqa: S506

        except MarkedYAMLError as base:
            raise FormSyntaxError.from_yaml_error(base, filename) from base

        except YAMLError as base:
            raise FormSyntaxError(
                'Invalid YAML',
                context=ErrorContext(filename=filename, error=base),
            ) from base

        except UnicodeDecodeError as base:
            raise FormSyntaxError(
                f'Invalid encoding: {base.reason} at byte {base.start}',
                context=ErrorContext(filename=filename, error=base),
            ) from base

    def parse(self, content: 'TextIOBase | str', *,
              filename: str | None = None) -> 'IssueTemplate | Form':
        """Parse and validate an issue form document.

        Args:
            content: YAML content as a string or file-like object.
            filename: Name of the source file, used in error messages.

        Returns:
            A validated template if the document is a mapping, or a
            validated form if it is a list of elements.

        Raises:
            FormSyntaxError: If the content is not valid YAML.
            FormError: If the document is not a well-formed form.
        """
        document = self.load(content, filename=filename)

        if isinstance(document, list):
            return self.validator.validate(document, filename=filename)

        return self.validator.validate_template(document, filename=filename)

    def parse_file(self, path: Path | str) -> 'IssueTemplate | Form':
        """Parse and validate an issue form file.

        Args:
            path: Path to a YAML file.

        Returns:
            A validated template or form.

        Raises:
            FormSyntaxError: If the file is not valid UTF-8 encoded YAML.
            FormError: If the document is not a well-formed form.
        """
        path = Path(path)
        with path.open('rt', encoding='utf-8') as content:
            return self.parse(content, filename=path.as_posix())
