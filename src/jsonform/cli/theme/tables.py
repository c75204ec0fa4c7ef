"""
Funciones para crear e imprimir tablas Rich.
"""

from rich.table import Table
from rich.text import Text
from rich import box

from jsonform.cli.theme.palette import get_console, get_palette


def create_results_table(
    title: str = None,
    columns: list[tuple[str, str]] = None,  # [(nombre, justify), ...]
) -> Table:
    """Crea una tabla estilizada para resultados."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )

    if columns:
        for name, justify in columns:
            table.add_column(name, justify=justify)

    return table


def print_errors_table(errors: dict[str, str], labels: dict[str, str] = None) -> None:
    """Imprime el mapa de errores de un envío rechazado."""
    p = get_palette()
    labels = labels or {}
    table = create_results_table(
        title="Errores de validación",
        columns=[("Campo", "left"), ("Mensaje", "left")],
    )
    for field_id, message in errors.items():
        name = Text(labels.get(field_id) or field_id, style=p.label)
        table.add_row(name, Text(message, style=p.error))
    get_console().print(table)


def print_values_table(rows: list[tuple[str, str]], title: str = "Datos") -> None:
    """Imprime pares (etiqueta, valor formateado)."""
    p = get_palette()
    table = create_results_table(
        title=title,
        columns=[("Campo", "left"), ("Valor", "left")],
    )
    for label, value in rows:
        table.add_row(Text(label, style=p.label), Text(value, style=f"bold {p.value}"))
    get_console().print(table)
