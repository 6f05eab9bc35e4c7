import json
import logging
from pathlib import Path

import click

from .cli_utils import load_target
from .config import SchemaGeneratorConfig
from .errors import SchemaGenerationError
from .generator import SchemaGenerator
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--format", "-f", "output_format", default="json", type=click.Choice(["json", "markdown"]))
@click.option("--indent", default=None, type=int, help="JSON indentation (overrides config file)")
@click.option("--force", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("target", type=str)
@click.argument("output", type=click.Path(resolve_path=True))
def class_to_json_schema(config, output_format, indent, force, verbose, target, output):
    """Generate the JSON Schema of TARGET (package.module:ClassName) into OUTPUT."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if config is not None:
        with open(config) as f:
            config = SchemaGeneratorConfig.from_dict(json.load(f))
    else:
        config = SchemaGeneratorConfig()

    if indent is not None:
        config.indent = indent

    try:
        type_ = load_target(target)
        generator = SchemaGenerator(config)
        if output_format == "markdown":
            out = generator.to_markdown(type_)
        else:
            out = generator.to_json(type_)

        writer = AtomicWriter()
        if force:
            writer.write(Path(output), out, output_format)
        else:
            writer.write_if_not_exists(Path(output), out, output_format)
    except SchemaGenerationError as e:
        raise click.ClickException(str(e)) from e

    logger.info("Wrote %s schema of %s to %s", output_format, type_.__qualname__, output)
