"""Command-line utilities for issue form templates.

Prints the JSON Schema of issue form templates and checks template
files, reporting the first problem of every invalid file.
"""

from pathlib import Path

from click import Path as PathParam
from click import Context, argument, echo, group, option, pass_context

from issue_forms.core import DocumentParser
from issue_forms.errors import FormError
from issue_forms.jsonschema import SchemaGenerator
from issue_forms.settings import ValidatorSettings

InputFilepath = PathParam(
    exists=True,
    dir_okay=False,
    readable=True,
    path_type=Path,
)


@group(help='Command-line utilities for GitHub issue form templates.')
def cli() -> None:
    """Root CLI group for issue form tools."""
    return None


@cli.command(
    name='schema',
    help='Print the issue form template JSON Schema to standard output.',
)
def print_schema() -> None:
    """Generate and print the JSON Schema."""
    echo(SchemaGenerator.make_schema())


@cli.command(
    name='check',
    help='Validate issue form template files.',
)
@option(
    '--reject-empty',
    is_flag=True,
    default=False,
    help='Treat forms without elements as invalid.',
)
@argument(
    'files',
    type=InputFilepath,
    nargs=-1,
    required=True,
)
@pass_context
def check_files(ctx: Context, files: tuple[Path, ...], reject_empty: bool) -> None:
    """Validate template files and report problems.

    Args:
        ctx: Click context used to set the exit status.
        files: Paths of the files to validate.
        reject_empty: Override of the empty form policy.
    """
    settings = ValidatorSettings()
    if reject_empty:
        settings = settings.model_copy(update={'allow_empty': False})

    parser = DocumentParser(settings=settings)

    failed = 0
    for path in files:
        try:
            parser.parse_file(path)
        except FormError as error:
            failed += 1
            echo(f'{error.kind}: {error}', err=True)
            continue
        echo(f'ok: {path.as_posix()}')

    if failed:
        ctx.exit(1)


if __name__ == '__main__':
    cli()
