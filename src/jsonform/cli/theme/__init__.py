"""
Sistema de temas para la interfaz CLI de jsonform.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
- tables: Funciones para crear e imprimir tablas Rich
"""

from jsonform.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_NORD,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from jsonform.cli.theme.styled import (
    styled_header,
    styled_label,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_muted,
)

from jsonform.cli.theme.printing import (
    print_header,
    print_section,
    print_step,
    print_field,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_banner,
)

from jsonform.cli.theme.tables import (
    create_results_table,
    print_errors_table,
    print_values_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_NORD",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_header",
    "styled_label",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_muted",
    # printing
    "print_header",
    "print_section",
    "print_step",
    "print_field",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_banner",
    # tables
    "create_results_table",
    "print_errors_table",
    "print_values_table",
]
