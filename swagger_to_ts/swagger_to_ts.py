import json
import logging

import click

from .config import OutputMode, TypeGenConfig
from .exceptions import TypeGenError
from .generator import TypeScriptGenerator


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--mode",
    "-m",
    default=None,
    type=click.Choice([m.value for m in OutputMode]),
    help="What to do with output files that already exist (default: error)",
)
@click.option(
    "--add-generation-comment",
    is_flag=True,
    default=False,
    help="Start each file with a comment recording how it was generated",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def swagger_to_ts(config, mode, add_generation_comment, verbose, path, output):
    """Generate TypeScript classes for the definitions of the Swagger file PATH into OUTPUT."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        swagger = json.load(f)

    if config is not None:
        with open(config) as f:
            config = TypeGenConfig.from_dict(json.load(f))
    else:
        config = TypeGenConfig()

    # CLI flags override the config file
    if mode is not None:
        config.output.mode = OutputMode(mode)
    if add_generation_comment:
        config.add_generation_comment = True

    try:
        codegen = TypeScriptGenerator.from_swagger(swagger, config)
        written = codegen.write(output)
    except (TypeGenError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Wrote {len(written)} file(s) to {output}")
