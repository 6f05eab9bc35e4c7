"""
CLI utilities for command line reconstruction and target loading.
"""

import importlib
from pathlib import Path

import click

from .errors import SchemaGenerationError

COMMAND_NAME = "class_to_json_schema"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        return COMMAND_NAME

    if not cli_args:
        return COMMAND_NAME

    arguments = []
    options = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if not value:
            continue

        # Paths are shown by file name only
        if isinstance(param.type, click.Path):
            formatted_value = Path(str(value)).name
        else:
            formatted_value = str(value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)

        elif isinstance(param, click.Option):
            if value == param.default:
                continue

            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, formatted_value])

    return " ".join([COMMAND_NAME, *arguments, *options])


def load_target(target: str) -> type:
    """
    Import the class named by a ``package.module:ClassName`` string.

    Nested classes may be reached with dots after the colon
    (``module:Outer.Inner``).

    Raises:
        SchemaGenerationError: If the string is malformed, the attribute is
            missing or it is not a class
        ImportError: If the module cannot be imported
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise SchemaGenerationError(f"Target must look like 'package.module:ClassName', got '{target}'")

    obj = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise SchemaGenerationError(f"'{module_name}' has no attribute '{qualname}'") from e

    if not isinstance(obj, type):
        raise SchemaGenerationError(f"'{target}' is not a class")
    return obj
