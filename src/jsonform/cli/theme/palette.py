"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from rich.console import Console
from rich.theme import Theme


class ThemeName(str, Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    NORD = "nord"
    MINIMAL = "minimal"


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, destacados
    secondary: str    # Subtítulos, encabezados de sección
    accent: str       # Marcador de pregunta, puntero

    # Colores semánticos
    success: str
    warning: str
    error: str
    info: str
    muted: str        # Texto secundario/atenuado

    # Colores para datos
    value: str        # Valores ingresados
    label: str        # Etiquetas de campos
    required: str     # Marca de campo requerido (*)

    # Bordes
    border: str


# Tema por defecto - colores pasteles
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    value="#d7af5f",        # Amarillo para valores
    label="#afafaf",        # Gris claro para etiquetas
    required="#d75f5f",     # Rojo para *
    border="#5f5f5f",       # Gris oscuro para bordes
)

# Tema Nord - colores fríos
THEME_NORD = ColorPalette(
    primary="#88c0d0",
    secondary="#81a1c1",
    accent="#b48ead",
    success="#a3be8c",
    warning="#ebcb8b",
    error="#bf616a",
    info="#5e81ac",
    muted="#4c566a",
    value="#d08770",
    label="#d8dee9",
    required="#bf616a",
    border="#3b4252",
)

# Tema Minimal - grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    info="#5fafff",
    muted="#606060",
    value="#ffffff",
    label="#909090",
    required="#ff8787",
    border="#404040",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.NORD: THEME_NORD,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Recrear console con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "label": p.label,
                "title": f"bold {p.primary}",
                "value": f"bold {p.value}",
                "required": f"bold {p.required}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console

    @classmethod
    def reset(cls) -> None:
        """Vuelve al tema por defecto (útil en tests)."""
        cls._palette = THEME_DEFAULT
        cls._console = None


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
