"""
Funciones que imprimen directamente a la consola.
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from jsonform.cli.theme.palette import get_console, get_palette
from jsonform.cli.theme.styled import (
    styled_header, styled_label, styled_success, styled_warning,
    styled_error, styled_info,
)


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_section(title: str, subtitle: str = None) -> None:
    """Imprime título de sección."""
    console = get_console()
    p = get_palette()
    console.print()
    console.print(f"-- {title} --", style=f"bold {p.secondary}")
    if subtitle:
        console.print(f"   {subtitle}", style=p.muted)


def print_step(step_num: int, total: int, title: str) -> None:
    """Imprime indicador de paso del wizard con barra de progreso."""
    console = get_console()
    p = get_palette()

    bar_width = 30
    filled_width = int((step_num / total) * bar_width)
    empty_width = bar_width - filled_width
    percentage = int((step_num / total) * 100)

    progress_line = Text()
    progress_line.append("█" * filled_width, style=p.primary)
    progress_line.append("░" * empty_width, style=p.muted)
    progress_line.append(f"  {percentage}%", style=p.muted)

    step_title = Text()
    step_title.append(f" Paso {step_num} de {total}", style=f"bold {p.secondary}")

    panel = Panel(
        progress_line,
        title=step_title,
        subtitle=Text(title, style=f"italic {p.muted}"),
        subtitle_align="left",
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
        width=50,
    )

    console.print()
    console.print(panel)


def print_field(label: str, value, required: bool = False, indent: int = 2) -> None:
    """Imprime un campo con valor."""
    console = get_console()
    console.print(" " * indent, styled_label(label, value, required))


def print_success(text: str) -> None:
    get_console().print(styled_success(text))


def print_warning(text: str) -> None:
    get_console().print(styled_warning(text))


def print_error(text: str) -> None:
    get_console().print(styled_error(text))


def print_info(text: str) -> None:
    get_console().print(styled_info(text))


def print_banner(kind: str, message: str, title: str = None) -> None:
    """
    Imprime un banner del formulario.

    Args:
        kind: Tipo de banner: info, warning, error o success
        message: Texto del banner
        title: Título opcional
    """
    console = get_console()
    p = get_palette()
    color = {
        "info": p.info,
        "warning": p.warning,
        "error": p.error,
        "success": p.success,
    }.get(kind, p.info)

    panel = Panel(
        Text(message),
        title=Text(title, style=f"bold {color}") if title else None,
        title_align="left",
        border_style=color,
        box=box.ROUNDED,
        padding=(0, 1),
    )
    console.print(panel)
