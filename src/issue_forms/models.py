"""Base Pydantic models for issue form elements.

This module defines the foundational model classes used by all form
structures. It enforces immutability and strict schema validation so
that a validated form is a fixed value which renderers can consume
without re-checking it.
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaModel(BaseModel):
    """Base immutable model for all form elements.

    This class serves as the root for all Pydantic models representing
    issue form constructs such as elements, attribute records and the
    template header.

    Design principles enforced by this model:
        - Immutability: elements cannot be modified after creation.
          A form is built fresh per document and only read afterwards.
        - Strict schema validation: unknown or extra fields are rejected
          to avoid silent errors caused by typos in form definitions.

    All form models must inherit from this class.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )


class SettingsModel(BaseSettings):
    """Base immutable model for validator settings.

    Settings are resolved from environment variables. Unknown variables
    are ignored so the surrounding environment may contain unrelated
    values without breaking configuration resolution.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        extra='ignore',
    )
