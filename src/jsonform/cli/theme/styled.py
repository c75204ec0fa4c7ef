"""
Funciones para crear objetos Text estilizados (no imprimen directamente).
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from jsonform.cli.theme.palette import get_palette


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Crea un encabezado estilizado."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def styled_label(label: str, value, required: bool = False) -> Text:
    """Formatea una etiqueta con valor."""
    p = get_palette()
    text = Text()
    text.append(label, style=p.label)
    if required:
        text.append(" *", style=f"bold {p.required}")
    text.append(": ", style=p.label)
    text.append(str(value), style=f"bold {p.value}")
    return text


def styled_success(text: str) -> Text:
    """Texto de éxito."""
    p = get_palette()
    return Text(f"[+] {text}", style=p.success)


def styled_warning(text: str) -> Text:
    """Texto de advertencia."""
    p = get_palette()
    return Text(f"[!] {text}", style=p.warning)


def styled_error(text: str) -> Text:
    """Texto de error."""
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_info(text: str) -> Text:
    """Texto informativo."""
    p = get_palette()
    return Text(f"[i] {text}", style=p.info)


def styled_muted(text: str) -> Text:
    p = get_palette()
    return Text(text, style=p.muted)
