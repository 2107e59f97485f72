"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROGRAM_NAME = "json_schema_gen"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    File paths are shortened to their names so the generated header does
    not depend on where the schemas live.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return PROGRAM_NAME

    if not cli_args:
        return PROGRAM_NAME

    cmd_parts = [PROGRAM_NAME]

    arguments = []  # For positional arguments
    options = []  # For optional arguments

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if not value:
            continue

        if isinstance(param, click.Argument):
            values = value if isinstance(value, (list, tuple)) else [value]
            arguments.extend(_format_value(v) for v in values)

        elif isinstance(param, click.Option):
            # Skip if it's the default value
            if value == param.default:
                continue
            # Output location and logging do not affect the generated code
            if param_name in ("output", "force", "verbose"):
                continue

            flag = param.opts[0] if param.opts else f"--{param_name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, _format_value(value)])

    cmd_parts.extend(arguments)
    cmd_parts.extend(options)

    return " ".join(cmd_parts)


def _format_value(value) -> str:
    """Convert file paths to just filenames for cleaner display."""
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)
