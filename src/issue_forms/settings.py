"""Validator runtime configuration.

Settings are resolved from environment variables prefixed with
`ISSUE_FORMS_`, for example `ISSUE_FORMS_ALLOW_EMPTY=false`.
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from issue_forms.models import SettingsModel


class ValidatorSettings(SettingsModel):
    """Policy switches of the form validator."""

    model_config = SettingsConfigDict(
        env_prefix='ISSUE_FORMS_',
        frozen=True,
        extra='ignore',
    )

    allow_empty: bool = Field(
        default=True,
        title='Allow empty forms',
        description=(
            'Accept forms without elements. '
            'When disabled, an empty form is a constraint violation.'
        ),
    )

    warn_empty: bool = Field(
        default=True,
        title='Warn on empty forms',
        description='Emit a FormWarning when an accepted form has no elements.',
    )
