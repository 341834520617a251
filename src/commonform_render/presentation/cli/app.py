"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from commonform_render.presentation.cli.formatters import (
    console,
    error_message,
    json_panel,
    success_panel,
)

app = typer.Typer(
    name="commonform",
    help="📄 Render Common Form markup to Word (.docx) and HTML",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage renderer settings",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON settings file"),
]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _render(source: str, fmt_name: str, config: Optional[str]) -> None:
    from commonform_render.bootstrap import Container
    from commonform_render.domain.errors import ConfigurationError
    from commonform_render.domain.models.enums import OutputFormat

    try:
        container = Container(config_path=config)
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    _configure_logging(container.settings.reporting.log_level)
    try:
        uc = container.render_form()
        result = uc.execute(container.source_for(Path(source)), OutputFormat(fmt_name))
    finally:
        container.close()

    if not result.succeeded:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# commonform docx / html
# ---------------------------------------------------------------------------


@app.command()
def docx(
    source: Annotated[str, typer.Argument(help="Common Form markup file")],
    config: ConfigOption = None,
) -> None:
    """Write <name>.docx beside the source document."""
    _render(source, "docx", config)


@app.command()
def html(
    source: Annotated[str, typer.Argument(help="Common Form markup file")],
    config: ConfigOption = None,
) -> None:
    """Write <name>.html beside the source document."""
    _render(source, "html", config)


# ---------------------------------------------------------------------------
# commonform config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active settings (formatted)."""
    from commonform_render.config import get_config, load_config
    from commonform_render.domain.errors import ConfigurationError

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except ConfigurationError as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "commonform_config.json",
) -> None:
    """Copy the default settings to the current directory for editing."""
    from commonform_render.config.loader import _DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(_DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Settings copied to: [bold green]{dest}[/]\n\n"
        "Edit this file and use it with [bold]--config[/]:\n"
        f'  commonform docx lease.md --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="Path to the JSON settings file")],
) -> None:
    """Validate a JSON settings file."""
    from commonform_render.config import load_config
    from commonform_render.domain.errors import ConfigurationError

    path = Path(config_file)
    if not path.exists():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_config(path)
    except ConfigurationError as e:
        console.print(f"[bold red]❌ Validation error:[/]\n\n{e}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid settings\n\n"
        f"  Default title: [cyan]{cfg.default_title}[/]\n"
        f"  Default numbering: [cyan]{cfg.default_numbering}[/]\n"
        f"  Log file: [cyan]{cfg.reporting.log_file or 'platform default'}[/]",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
