"""
Comandos CLI para revisar configuraciones y validar datos.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.text import Text

from jsonform.config import FormConfig, FormField, EngineSettings
from jsonform.exceptions import ConfigurationError
from jsonform.core import FormOrchestrator, format_field_value
from jsonform.cli.common import (
    load_config_or_exit,
    load_data_or_exit,
    load_handlers_or_exit,
    report_configuration_error,
    write_json,
)
from jsonform.cli.theme import (
    print_header, print_section, print_field, print_banner,
    print_success, print_error, print_info,
    print_errors_table, print_values_table,
    create_results_table, get_console, get_palette,
)

logger = logging.getLogger(__name__)


def describe_rules(fld: FormField) -> str:
    """Resumen compacto de las reglas de un campo."""
    parts = []
    for rule in fld.rules:
        if rule.value is None or callable(rule.value):
            parts.append(rule.type.value)
        else:
            parts.append(f"{rule.type.value}={rule.value}")
    return ", ".join(parts) if parts else "-"


def describe_dependencies(fld: FormField) -> str:
    """Resumen compacto de las dependencias de un campo."""
    if not fld.dependencies:
        return "-"
    return ", ".join(
        f"{d.action.value} si {d.field}={d.value!r}" for d in fld.dependencies
    )


def print_fields_table(fields: list[FormField], title: str = None) -> None:
    """Imprime la tabla de campos de un grupo o paso."""
    p = get_palette()
    table = create_results_table(
        title=title,
        columns=[
            ("Id", "left"),
            ("Tipo", "left"),
            ("Req.", "center"),
            ("Reglas", "left"),
            ("Dependencias", "left"),
        ],
    )
    for fld in fields:
        required = Text("*", style=f"bold {p.required}") if fld.required else Text("")
        label = Text(fld.id, style=f"bold {p.value}")
        if fld.disabled:
            label.append(" (deshabilitado)", style=p.muted)
        table.add_row(
            label,
            fld.type.value,
            required,
            describe_rules(fld),
            describe_dependencies(fld),
        )
    get_console().print(table)


def print_config_summary(config: FormConfig) -> None:
    """Muestra encabezado, banners y campos del formulario."""
    print_header(config.title, config.subtitle)
    print_field("Id", config.id)
    print_field("Tipo", config.type.value)
    print_field("Endpoint", f"{config.method.value} {config.endpoint or '-'}")
    print_field("Campos", len(config.all_fields()))

    for banner in config.banners:
        print_banner(banner.type.value, banner.message, banner.title)

    if config.is_wizard:
        for i, step in enumerate(config.steps, start=1):
            print_section(f"Paso {i}: {step.title or step.id}", step.subtitle)
            if step.can_go_next is not None:
                guard = step.can_go_next if isinstance(step.can_go_next, str) else "callable"
                print_info(f"Condición de avance: {guard}")
            for group in step.groups:
                print_fields_table(group.fields, title=group.title or group.id)
    else:
        for group in config.groups:
            print_section(group.title or group.id, group.subtitle)
            print_fields_table(group.fields)


def check(
    config_path: Annotated[Path, typer.Argument(help="Archivo JSON de configuración")],
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Solo informar si es válido")] = False,
):
    """
    Verifica un documento de configuración y muestra su estructura.

    Ejemplo:
        jsonform check registro.json
    """
    config = load_config_or_exit(config_path)
    if not quiet:
        print_config_summary(config)
    print_success(f"Configuración válida: {config.id}")


def validate(
    config_path: Annotated[Path, typer.Argument(help="Archivo JSON de configuración")],
    data_path: Annotated[Path, typer.Argument(help="Archivo JSON con los valores")],
    skip_hidden: Annotated[bool, typer.Option(
        "--skip-hidden", help="No validar ni enviar campos ocultos por dependencias",
    )] = False,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Guardar datos aceptados")] = None,
    handlers_ref: Annotated[Optional[str], typer.Option(
        "--handlers", help="HandlerRegistry a importar (paquete.modulo:atributo)",
    )] = None,
):
    """
    Valida un archivo de datos contra el formulario, como lo haría un envío.

    Ejemplo:
        jsonform validate registro.json datos.json
        jsonform validate registro.json datos.json --skip-hidden -o salida.json
    """
    config = load_config_or_exit(config_path)
    data = load_data_or_exit(data_path)
    handlers = load_handlers_or_exit(handlers_ref)

    settings = EngineSettings(validate_hidden_fields=not skip_hidden)
    try:
        orchestrator = FormOrchestrator(
            config, initial_values=data, handlers=handlers, settings=settings,
        )
    except ConfigurationError as e:
        report_configuration_error(e)
        raise typer.Exit(1)

    result = orchestrator.submit()
    logger.debug("Validación de %s: %d errores", data_path, len(result.errors))
    if not result.ok:
        labels = {f.id: f.label for f in config.all_fields()}
        print_error(f"Envío rechazado: {len(result.errors)} campo(s) con error")
        print_errors_table(result.errors, labels)
        raise typer.Exit(1)

    rows = []
    for fld in config.all_fields():
        if fld.id in result.data:
            rows.append((fld.label or fld.id, format_field_value(fld, result.data[fld.id])))
    print_values_table(rows, title=config.title)
    print_success("Datos válidos")

    if output:
        write_json(output, result.data)
        print_info(f"Datos guardados en {output}")
