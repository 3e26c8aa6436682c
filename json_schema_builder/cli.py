import importlib
import json
import logging

import click

from .base import BaseSchema
from .cli_utils import reconstruct_command_line
from .config import Config
from .engine import SchemaValidator
from .exceptions import SchemaLoadError, format_errors


def load_config(path):
    if path is None:
        return Config()
    with open(path) as f:
        return Config.from_dict(json.load(f))


def load_target(target: str) -> BaseSchema:
    """
    Resolve a `package.module:attribute` target to a schema builder.

    Args:
        target: Module path and attribute path separated by a colon

    Returns:
        The builder found at the target

    Raises:
        SchemaLoadError: If the module cannot be imported, the attribute does
            not exist or is not a schema builder
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise SchemaLoadError(f"Target must look like 'module:attribute', got {target!r}")
    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaLoadError(f"Cannot import module {module_name!r}: {e}") from e
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise SchemaLoadError(f"{module_name!r} has no attribute {attr_path!r}") from e
    if not isinstance(obj, BaseSchema):
        raise SchemaLoadError(f"{target!r} is a {type(obj).__name__}, not a schema builder")
    return obj


def _load_or_fail(target):
    try:
        return load_target(target)
    except SchemaLoadError as e:
        raise click.ClickException(str(e)) from e


@click.group(name="json_schema_builder")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug messages to stderr")
def json_schema_builder(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )


@json_schema_builder.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--indent", "-i", default=None, type=int, help="Overrides the configured indentation")
@click.argument("target", type=str)
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def dump(config, indent, target, output):
    """Write the JSON document of the schema at TARGET (module:attribute)."""
    config = load_config(config)
    document = _load_or_fail(target).to_dict()

    if config.output.add_generation_comment:
        document = {"$comment": f"Generated by {reconstruct_command_line(dump)}", **document}

    if indent is None:
        indent = config.output.indent
    out = json.dumps(document, indent=indent, sort_keys=config.output.sort_keys)

    if output is None:
        click.echo(out)
    else:
        with open(output, "w") as f:
            f.write(out + "\n")


@json_schema_builder.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("target", type=str)
@click.argument("data", type=click.Path(exists=True, resolve_path=True))
def validate(config, target, data):
    """Validate the JSON file DATA against the schema at TARGET."""
    config = load_config(config)
    schema = _load_or_fail(target)
    with open(data) as f:
        instance = json.load(f)

    # Custom keywords resolve against the registry the schema was built with
    validator = SchemaValidator(schema.registry, config.engine)
    valid, errors = validator.validate(schema, instance)
    if not valid:
        raise click.ClickException(format_errors(errors))
    click.echo("valid")
