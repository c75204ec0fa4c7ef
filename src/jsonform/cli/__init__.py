"""
CLI de jsonform - Intérprete de formularios declarativos.

Comandos:
- check: Verifica un documento de configuración y muestra su estructura
- validate: Valida un archivo de datos como lo haría un envío
- fill: Llena un formulario de forma interactiva
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from jsonform.cli.theme import CLITheme, ThemeName, get_console

# Crear aplicación principal
app = typer.Typer(
    name="jsonform",
    help="Intérprete de formularios definidos en JSON.",
    no_args_is_help=True,
)


def setup_logging(verbose: bool) -> None:
    """Configura logging con RichHandler; sin --verbose solo advertencias."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=get_console(), show_path=False)],
        force=True,
    )


def _register_commands():
    """Registra los comandos de forma diferida."""
    from jsonform.cli.check import check, validate
    from jsonform.cli.fill import fill

    app.command("check")(check)
    app.command("validate")(validate)
    app.command("fill")(fill)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Mostrar logs de depuración")] = False,
    theme: Annotated[ThemeName, typer.Option("--theme", help="Tema de colores")] = ThemeName.DEFAULT,
):
    """
    jsonform - Formularios declarativos en JSON.

    Valida configuraciones, revisa datos y llena formularios simples o
    wizards desde la terminal.
    """
    CLITheme.set_theme(theme)
    setup_logging(verbose)


_register_commands()


__all__ = [
    "app",
    "setup_logging",
]
