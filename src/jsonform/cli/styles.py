"""
Estilo de questionary basado en el tema actual.
"""

from questionary import Style

from jsonform.cli.theme import get_palette


def get_form_style() -> Style:
    """Obtiene el estilo de questionary para los prompts del formulario."""
    p = get_palette()
    return Style([
        # Marcador de pregunta (?)
        ('qmark', f'fg:{p.accent} bold'),
        # Texto de la pregunta
        ('question', 'bold'),
        # Respuesta seleccionada/ingresada
        ('answer', f'fg:{p.success} bold'),
        # Puntero de selección
        ('pointer', f'fg:{p.accent} bold'),
        # Opción resaltada
        ('highlighted', f'fg:{p.primary} bold'),
        # Items seleccionados en checkbox
        ('selected', f'fg:{p.success} bold'),
        ('instruction', f'fg:{p.muted} italic'),
        ('text', ''),
        ('disabled', f'fg:{p.muted} italic'),
        ('separator', f'fg:{p.border}'),
    ])
