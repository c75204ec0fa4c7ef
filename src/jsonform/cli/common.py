"""
Utilidades compartidas por los comandos CLI.
"""

import importlib
import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer

from jsonform.config import FormConfig, load_config_file
from jsonform.exceptions import ConfigurationError
from jsonform.core.handlers import HandlerRegistry
from jsonform.cli.theme import print_error, get_console, get_palette

logger = logging.getLogger(__name__)


def load_config_or_exit(path: Path) -> FormConfig:
    """Carga la configuración o termina con código 1 mostrando los problemas."""
    try:
        return load_config_file(path)
    except ConfigurationError as e:
        report_configuration_error(e)
        raise typer.Exit(1)


def report_configuration_error(error: ConfigurationError) -> None:
    """Muestra un ConfigurationError con la lista de problemas."""
    console = get_console()
    p = get_palette()
    print_error(error.args[0] if error.args else "Configuración inválida")
    if len(error.errors) > 1 or (error.errors and error.errors[0] != error.args[0]):
        for problem in error.errors:
            console.print(f"    - {problem}", style=p.muted, highlight=False)


def load_data_or_exit(path: Path) -> dict[str, Any]:
    """Lee un archivo JSON de valores (debe ser un objeto)."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        print_error(f"No se encontró el archivo: {path}")
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        print_error(f"JSON inválido en {path}: {e}")
        raise typer.Exit(1)

    if not isinstance(data, dict):
        print_error("Los datos deben ser un objeto JSON")
        raise typer.Exit(1)
    return data


def write_json(path: Path, data: Any) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_handlers_or_exit(ref: Optional[str]) -> HandlerRegistry:
    """
    Importa un HandlerRegistry desde 'paquete.modulo:atributo'.

    Sin referencia retorna un registro vacío.
    """
    if not ref:
        return HandlerRegistry()

    module_name, _, attr = ref.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        print_error(f"No se pudo importar '{module_name}': {e}")
        raise typer.Exit(1)

    registry = getattr(module, attr or "handlers", None)
    if not isinstance(registry, HandlerRegistry):
        print_error(f"'{ref}' no es un HandlerRegistry")
        raise typer.Exit(1)
    logger.debug(
        "Handlers de %s: validadores=%s, step guards=%s",
        ref, registry.validator_names, registry.step_guard_names,
    )
    return registry
