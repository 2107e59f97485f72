import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .pipeline import CodeGeneratorConfig, OutputMode, PipelineGenerator, SchemaGenError, UnresolvedRefPolicy
from .pipeline.analyzer import load_name_map


@click.command()
@click.option(
    "--name-map",
    "-m",
    default=None,
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Whitespace-separated '<raw_key> <replacement>' overrides, one per line",
)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--package", "-p", default=None, type=str, help="Go package name (default: openrtb)")
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False, resolve_path=True), help="Output file (default: stdout)")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing output file")
@click.option("--format", "format_code", is_flag=True, default=False, help="Run gofmt on the generated code")
@click.option(
    "--unresolved",
    default=None,
    type=click.Choice([policy.value for policy in UnresolvedRefPolicy]),
    help="How to treat fields that reference unknown types",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("schemas", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def json_schema_gen(name_map, config, package, output, force, format_code, unresolved, verbose, schemas):
    """Generate Go type declarations from JSON Schema files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        try:
            with open(config) as f:
                config = CodeGeneratorConfig.from_dict(json.load(f))
        except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
            raise click.ClickException(f"Invalid config file {config}: {e}") from e
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if package is not None:
        config.package_name = package
    if force:
        config.output.mode = OutputMode.FORCE
    if format_code:
        config.formatter.enabled = True
    if unresolved is not None:
        config.unresolved_ref_policy = UnresolvedRefPolicy(unresolved)
    config.generation_command = reconstruct_command_line(json_schema_gen)

    try:
        names = load_name_map(name_map) if name_map is not None else None
        codegen = PipelineGenerator(config, names)
        if output is None:
            click.echo(codegen.generate(schemas), nl=False)
        else:
            codegen.write(schemas, output)
    except SchemaGenError as e:
        raise click.ClickException(str(e)) from e
