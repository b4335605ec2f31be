"""JSON Schema management."""

from functools import cache
from json import dumps
from typing import TYPE_CHECKING

from pydantic.json_schema import GenerateJsonSchema, JsonSchemaValue

from issue_forms.schema import IssueTemplate

if TYPE_CHECKING:
    from pydantic_core import core_schema as core


class SchemaGenerator(GenerateJsonSchema):
    """Custom JSON Schema generator for issue form models.

    Fields tagged with an `x-ref` extension are hoisted into shared
    definitions, so repeated fragments such as element labels and
    identifiers are declared once and referenced everywhere else.
    """

    @classmethod
    @cache
    def make_schema(cls, indent: int | str | None = 4) -> str:
        """Generate the JSON Schema for issue form templates.

        Args:
            indent: Indentation level used for JSON formatting.

        Returns:
            Serialized JSON Schema string.
        """
        schema = {
            **IssueTemplate.model_json_schema(schema_generator=cls),
            'title': 'issue-forms',
            'description': 'JSON Schema for GitHub issue form templates',
            '$schema': cls.schema_dialect,
        }

        return dumps(
            schema,
            ensure_ascii=False,
            sort_keys=True,
            indent=indent,
        )

    def generate_inner(self, schema: 'core.CoreSchema') -> JsonSchemaValue:
        """Generates a JSON schema for a given core schema.

        Args:
            schema: The given core schema.

        Returns:
            The generated JSON schema.
        """
        json_schema = super().generate_inner(schema)

        if ref_id := json_schema.get('x-ref'):
            ref_def, ref_link = self.get_cache_defs_ref_schema(ref_id)
            self.definitions[ref_def] = json_schema
            return ref_link

        return json_schema
