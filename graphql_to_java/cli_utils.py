"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROGRAM_NAME = "graphql_to_java"


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
        # No active context
        return PROGRAM_NAME

    if not cli_args:
        return PROGRAM_NAME

    arguments = []
    options = []

    for param in click_command.params:
        if param.name not in cli_args:
            continue

        value = cli_args[param.name]
        if value is None or value == () or value == "":
            continue
        if isinstance(param, click.Option) and value == param.default:
            continue

        if isinstance(value, (str, Path)):
            path_obj = Path(str(value))
            formatted_value = path_obj.name if path_obj.exists() else str(value)
        else:
            formatted_value = str(value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)
        elif isinstance(param, click.Option):
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                # Boolean flags carry no value; for --x/--no-x pairs pick the side in use
                if value is True:
                    options.append(flag)
                elif param.secondary_opts:
                    options.append(param.secondary_opts[0])
            else:
                options.extend([flag, formatted_value])

    return " ".join([PROGRAM_NAME, *arguments, *options])
