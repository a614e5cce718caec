# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from cmdmenu.errors import MenuGeneratorError
from cmdmenu.generator import MenuGenerator
from cmdmenu.logging import configure_logging
from cmdmenu.models import MenuEntry, MenuFromCommand, PromptSet
from cmdmenu.settings import Settings
from cmdmenu.style import style_helpers


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """cmdmenu command line interface."""


def _print_table(entries: list[MenuEntry], title: str | None) -> None:
    table = Table(title=title)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Label")
    table.add_column("Value", style="dim")
    for i, entry in enumerate(entries, 1):
        table.add_row(str(i), Text.from_ansi(entry.label), entry.value)
    Console().print(table)


@cli.command("generate")
@click.option("--filter", "filter_pattern", default="", help="Regex applied to each line.")
@click.option("--value-format", default="", help="Template for each entry's value.")
@click.option("--label-format", default="", help="Template for each entry's label.")
@click.option("--prompt-file", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--prompt", "prompt_name", default=None, help="Prompt name within --prompt-file.")
@click.option("--format", "output_format", type=click.Choice(["json", "table"]), default=None)
@click.option("--no-color", is_flag=True, help="Print labels without ANSI styling.")
def generate(
    filter_pattern: str,
    value_format: str,
    label_format: str,
    prompt_file: str | None,
    prompt_name: str | None,
    output_format: str | None,
    no_color: bool,
) -> None:
    """Read command output on stdin and print menu entries.

    Examples:
        git branch | cmdmenu generate --filter '\\*? *(?P<branch>\\S+)' --value-format '{{ branch }}'
        git branch | cmdmenu generate --prompt-file prompts.yaml --prompt branches --format table
    """
    settings = Settings()
    if no_color:
        settings.color = False
    configure_logging(settings)

    if prompt_file is not None:
        if not prompt_name:
            raise click.UsageError("--prompt is required with --prompt-file")
        try:
            prompt = PromptSet.from_yaml(prompt_file).get(prompt_name)
        except KeyError as e:
            raise click.BadParameter(str(e.args[0]), param_hint="--prompt") from e
    else:
        prompt = MenuFromCommand(filter=filter_pattern, value_format=value_format, label_format=label_format)

    generator = MenuGenerator(style_helpers(color=settings.color))
    try:
        entries = generator.generate_for(prompt, click.get_text_stream("stdin").read())
    except MenuGeneratorError as e:
        raise click.ClickException(str(e)) from e

    if (output_format or settings.output_format) == "table":
        _print_table(entries, prompt.title)
        return
    for entry in entries:
        click.echo(json.dumps(entry.model_dump()))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
