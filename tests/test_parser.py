"""Integration tests for YAML document parsing."""

from typing import TYPE_CHECKING

import pytest

from issue_forms.core import DocumentParser
from issue_forms.errors import ConstraintViolation, DuplicateId, FormSyntaxError, TypeMismatch
from issue_forms.schema import Form, IssueTemplate, MultiLineText
from issue_forms.settings import ValidatorSettings

if TYPE_CHECKING:
    from pathlib import Path

    from yaml import SafeLoader

BUG_REPORT = (
    'name: Bug report\n'
    'description: File a bug report\n'
    'labels: bug, triage\n'
    'body:\n'
    '  - type: markdown\n'
    '    attributes:\n'
    '      value: Thanks for taking the time!\n'
    '  - type: input\n'
    '    id: contact\n'
    '    attributes:\n'
    '      label: Contact details\n'
    '    validations:\n'
    '      required: false\n'
    '  - type: textarea\n'
    '    id: logs\n'
    '    attributes:\n'
    '      label: Relevant log output\n'
    '      render: shell\n'
)


@pytest.fixture
def parser(loader: 'type[SafeLoader]') -> DocumentParser:
    """Provide a parser with an isolated loader and default policy."""
    return DocumentParser(loader, settings=ValidatorSettings(warn_empty=False))


def test_parse_template(parser: DocumentParser) -> None:
    """Parse a complete issue form template."""
    template = parser.parse(BUG_REPORT)

    assert isinstance(template, IssueTemplate)
    assert template.name == 'Bug report'
    assert template.labels == ['bug', 'triage']
    assert len(template.body) == 3

    logs = template.body[2]

    assert isinstance(logs, MultiLineText)
    assert logs.attributes.is_code_block


def test_parse_bare_form(parser: DocumentParser) -> None:
    """Parse a document holding only a list of elements."""
    form = parser.parse(
        '- type: input\n'
        '  id: name\n'
        '  attributes:\n'
        '    label: Your name\n',
    )

    assert isinstance(form, Form)
    assert form[0].id == 'name'


@pytest.mark.parametrize('content, error_class, path', (
    pytest.param(
        (
            '- type: dropdown\n'
            '  attributes:\n'
            '    label: Version\n'
            '    options: [n/a, "1.0"]\n'
            '    default: 0\n'
        ),
        ConstraintViolation,
        'elements[0].attributes.options[0]',
        id='reserved option',
    ),
    pytest.param(
        (
            '- type: input\n'
            '  attributes:\n'
            '    label: 1.5\n'
        ),
        TypeMismatch,
        'elements[0].attributes.label',
        id='float label',
    ),
    pytest.param(
        '',
        TypeMismatch,
        '',
        id='empty document',
    ),
))
def test_parse_invalid(parser: DocumentParser, content: str,
                       error_class: type, path: str) -> None:
    """Report validation errors of parsed documents."""
    with pytest.raises(error_class) as error:
        parser.parse(content, filename='template.yml')

    assert error.value.field_path == path
    assert 'in "template.yml"' in str(error.value)


def test_parse_syntax_error(parser: DocumentParser) -> None:
    """Wrap YAML loader failures."""
    with pytest.raises(FormSyntaxError, match=r'^Invalid YAML') as error:
        parser.parse('body: [\n  - type: input\n', filename='broken.yml')

    assert error.value.context is not None
    assert error.value.context['filename'] == 'broken.yml'
    assert error.value.context['line_num'] is not None


def test_parse_file(parser: DocumentParser, tmp_path: 'Path') -> None:
    """Parse a template file from disk."""
    path = tmp_path / 'bug_report.yml'
    path.write_text(BUG_REPORT, encoding='utf-8')

    template = parser.parse_file(path)

    assert isinstance(template, IssueTemplate)
    assert [element.id for element in template.body.inputs] == ['contact', 'logs']


def test_parse_file_reports_filename(parser: DocumentParser, tmp_path: 'Path') -> None:
    """Attach the file name to validation errors."""
    path = tmp_path / 'bug_report.yml'
    path.write_text(BUG_REPORT.replace('id: logs', 'id: contact'), encoding='utf-8')

    with pytest.raises(DuplicateId, match=r'body\[2\]\.id: Identifier \'contact\'') as error:
        parser.parse_file(path)

    assert path.as_posix() in str(error.value)


def test_parse_file_invalid_encoding(parser: DocumentParser, tmp_path: 'Path') -> None:
    """Wrap decoding failures of files which are not UTF-8."""
    path = tmp_path / 'latin1.yml'
    path.write_bytes(b'name: \xff\n')

    with pytest.raises(FormSyntaxError, match=r'^Invalid encoding') as error:
        parser.parse_file(path)

    assert error.value.context is not None
    assert error.value.context['filename'] == path.as_posix()
    assert isinstance(error.value.__cause__, UnicodeDecodeError)
