"""Tests configurations and fixtures."""

from typing import Any

import pytest
import yaml

from issue_forms.core import FormValidator
from issue_forms.settings import ValidatorSettings


@pytest.fixture
def loader() -> type[yaml.SafeLoader]:
    """Provide an isolated YAML SafeLoader class for tests.

    Returns:
        A subclass of `yaml.SafeLoader` which can be extended without
        affecting other tests.
    """
    class Loader(yaml.SafeLoader):
        pass

    return Loader


@pytest.fixture
def validator() -> FormValidator:
    """Provide a validator with default policy and no environment lookup."""
    return FormValidator(ValidatorSettings(allow_empty=True, warn_empty=False))


@pytest.fixture
def bug_report() -> dict[str, Any]:
    """Provide a decoded, well-formed bug report template."""
    return {
        'name': 'Bug report',
        'description': 'File a bug report',
        'title': '[Bug]: ',
        'labels': ['bug', 'triage'],
        'body': [
            {
                'type': 'markdown',
                'attributes': {
                    'value': 'Thanks for taking the time to fill out this bug report!',
                },
            },
            {
                'type': 'input',
                'id': 'contact',
                'attributes': {
                    'label': 'Contact details',
                    'placeholder': 'ex. email@example.com',
                },
                'validations': {
                    'required': False,
                },
            },
            {
                'type': 'textarea',
                'id': 'what-happened',
                'attributes': {
                    'label': 'What happened?',
                    'value': 'A bug happened!',
                },
                'validations': {
                    'required': True,
                },
            },
            {
                'type': 'dropdown',
                'id': 'version',
                'attributes': {
                    'label': 'Version',
                    'options': ['1.0.2 (Default)', '1.0.3 (Edge)'],
                    'default': 0,
                },
            },
            {
                'type': 'textarea',
                'id': 'logs',
                'attributes': {
                    'label': 'Relevant log output',
                    'render': 'shell',
                },
            },
            {
                'type': 'checkboxes',
                'id': 'terms',
                'attributes': {
                    'label': 'Code of Conduct',
                    'options': [
                        {'label': 'I agree to follow the Code of Conduct', 'required': True},
                    ],
                },
            },
        ],
    }
