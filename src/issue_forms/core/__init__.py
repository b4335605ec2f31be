"""Form validation and YAML document parsing.

It provides:
- classification of decoded elements into their variant models;
- conversion of Pydantic failures into the form error taxonomy;
- a YAML front end turning template files into validated models.

The primary public entry points are `FormValidator`, which checks
already decoded documents, and `DocumentParser`, which loads YAML
before validating it.
"""

from .parser import DocumentParser
from .validator import FormValidator, validate_form, validate_template

__all__ = (
    'DocumentParser',
    'FormValidator',
    'validate_form',
    'validate_template',
)
