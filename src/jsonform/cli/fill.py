"""
Llenado interactivo de un formulario en la terminal.
"""

import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import questionary
import typer

from jsonform.config import EngineSettings, FieldType, FormField
from jsonform.exceptions import ConfigurationError
from jsonform.core import FormOrchestrator, StepResult, SubmitResult, coerce_value
from jsonform.cli.common import (
    load_config_or_exit,
    load_data_or_exit,
    load_handlers_or_exit,
    report_configuration_error,
    write_json,
)
from jsonform.cli.styles import get_form_style
from jsonform.cli.theme import (
    print_header, print_step, print_banner, print_section,
    print_success, print_warning, print_error, print_info,
    print_errors_table, styled_muted, get_console,
)

logger = logging.getLogger(__name__)

TEXT_TYPES = (
    FieldType.TEXT, FieldType.EMAIL, FieldType.PHONE,
    FieldType.DATE, FieldType.NUMBER, FieldType.TEXTAREA,
)


class FormFiller:
    """Recorre los campos con prompts y alimenta al orquestador."""

    def __init__(self, orchestrator: FormOrchestrator):
        self.orchestrator = orchestrator
        self.style = get_form_style()
        # Campos con error que el usuario no puede corregir (ocultos o deshabilitados)
        self.blocked: list[str] = []

    def is_answerable(self, fld: FormField) -> bool:
        """True si el campo se muestra y acepta entrada."""
        return self.orchestrator.is_visible(fld.id) and self.orchestrator.is_enabled(fld.id)

    def prompt(self, fld: FormField) -> Any:
        """
        Pide el valor de un campo.

        Returns:
            Valor ingresado o None si el usuario cancela
        """
        current = self.orchestrator.values.get(fld.id)
        message = fld.label or fld.id
        if fld.required:
            message += " *"

        if fld.type in TEXT_TYPES:
            default = "" if current is None else str(current)
            return questionary.text(
                message,
                default=default,
                multiline=fld.type == FieldType.TEXTAREA,
                instruction=fld.placeholder,
                style=self.style,
            ).ask()

        if fld.type == FieldType.PASSWORD:
            return questionary.password(message, style=self.style).ask()

        if fld.type in (FieldType.SELECT, FieldType.RADIO):
            choices = [questionary.Choice(title=o.label, value=o.value) for o in fld.options]
            values = [o.value for o in fld.options]
            return questionary.select(
                message,
                choices=choices,
                default=current if current in values else None,
                style=self.style,
            ).ask()

        if fld.type == FieldType.MULTISELECT:
            selected = current if isinstance(current, list) else []
            choices = [
                questionary.Choice(title=o.label, value=o.value, checked=o.value in selected)
                for o in fld.options
            ]
            return questionary.checkbox(message, choices=choices, style=self.style).ask()

        # checkbox / switch
        return questionary.confirm(message, default=bool(current), style=self.style).ask()

    def fill_fields(self, fields: list[FormField]) -> bool:
        """
        Pide cada campo visible y habilitado hasta que pase su validación.

        Returns:
            False si el usuario cancela
        """
        for fld in fields:
            # La visibilidad se reevalúa con cada respuesta
            if not self.orchestrator.is_visible(fld.id):
                continue
            if not self.orchestrator.is_enabled(fld.id):
                get_console().print(styled_muted(f"  {fld.label or fld.id} (deshabilitado)"))
                continue

            while True:
                answer = self.prompt(fld)
                if answer is None:
                    return False
                self.orchestrator.change_field(fld.id, coerce_value(fld, answer))
                error = self.orchestrator.blur_field(fld.id)
                if not error:
                    break
                print_error(error)
        return True

    def _show_rejection(self, result: SubmitResult) -> list[FormField]:
        """
        Muestra los errores de un envío rechazado.

        Returns:
            Campos con error que el usuario puede corregir. Si no queda
            ninguno, los ids bloqueantes quedan en self.blocked.
        """
        labels = {f.id: f.label for f in self.orchestrator.fields}
        print_error("El formulario tiene errores")
        print_errors_table(result.errors, labels)

        failing = [f for f in self.orchestrator.fields if f.id in result.errors]
        answerable = [f for f in failing if self.is_answerable(f)]
        if not answerable:
            self.blocked = [f.id for f in failing]
            logger.warning("Envío bloqueado por campos no editables: %s", self.blocked)
        return answerable

    def run_simple(self) -> Optional[SubmitResult]:
        if not self.fill_fields(self.orchestrator.fields):
            return None
        while True:
            result = self.orchestrator.submit()
            if result.ok:
                return result
            answerable = self._show_rejection(result)
            if not answerable or not self.fill_fields(answerable):
                return None

    def run_wizard(self) -> Optional[SubmitResult]:
        while True:
            progress = self.orchestrator.progress
            print_step(progress.number, progress.total, progress.title or "")
            if progress.subtitle:
                print_info(progress.subtitle)

            if not self.fill_fields(self.orchestrator.fields_for_current_step()):
                return None

            progress = self.orchestrator.progress
            choices = [questionary.Choice(title=progress.next_label, value="next")]
            if progress.can_go_back:
                choices.append(questionary.Choice(title=progress.previous_label, value="back"))
            choices.append(questionary.Choice(title="Cancelar", value="cancel"))

            action = questionary.select(
                "¿Qué desea hacer?", choices=choices, style=self.style,
            ).ask()

            if action == "next":
                result, submission = self.orchestrator.next_step()
                if result == StepResult.BLOCKED:
                    print_warning("Complete los campos requeridos para continuar")
                elif result == StepResult.SUBMIT:
                    if submission.ok:
                        return submission
                    if not self._show_rejection(submission):
                        return None
            elif action == "back":
                self.orchestrator.previous_step()
            else:
                return None

    def run(self) -> Optional[SubmitResult]:
        """Ejecuta el llenado completo; None si el usuario cancela."""
        config = self.orchestrator.config
        print_header(config.title, config.subtitle)
        for banner in config.banners:
            print_banner(banner.type.value, banner.message, banner.title)

        if self.orchestrator.navigator is not None:
            return self.run_wizard()
        return self.run_simple()


def print_submission(method: str, endpoint: str, data: dict) -> None:
    """Muestra el envío que haría la aplicación anfitriona."""
    print_section("Envío")
    print_info(f"{method} {endpoint or '-'}")
    get_console().print_json(data=data, default=str)


def fill(
    config_path: Annotated[Path, typer.Argument(help="Archivo JSON de configuración")],
    data_path: Annotated[Optional[Path], typer.Option(
        "--data", "-d", help="Valores iniciales (JSON)",
    )] = None,
    output: Annotated[Optional[Path], typer.Option(
        "--output", "-o", help="Guardar los datos enviados",
    )] = None,
    skip_hidden: Annotated[bool, typer.Option(
        "--skip-hidden", help="No validar ni enviar campos ocultos por dependencias",
    )] = False,
    handlers_ref: Annotated[Optional[str], typer.Option(
        "--handlers", help="HandlerRegistry a importar (paquete.modulo:atributo)",
    )] = None,
):
    """
    Llena un formulario de forma interactiva.

    Ejemplo:
        jsonform fill registro.json
        jsonform fill encuesta.json --data borrador.json -o respuesta.json
    """
    config = load_config_or_exit(config_path)
    initial = load_data_or_exit(data_path) if data_path else None
    handlers = load_handlers_or_exit(handlers_ref)

    def on_submit(data: dict) -> None:
        print_submission(config.method.value, config.endpoint, data)

    settings = EngineSettings(validate_hidden_fields=not skip_hidden)
    try:
        orchestrator = FormOrchestrator(
            config, initial_values=initial, on_submit=on_submit,
            handlers=handlers, settings=settings,
        )
    except ConfigurationError as e:
        report_configuration_error(e)
        raise typer.Exit(1)

    filler = FormFiller(orchestrator)
    result = filler.run()
    if result is None and filler.blocked:
        print_error(
            "No se puede enviar: campos ocultos o deshabilitados con error: "
            + ", ".join(filler.blocked)
        )
        raise typer.Exit(1)
    if result is None:
        logger.debug("Llenado de %s cancelado", config.id)
        print_warning("Formulario cancelado")
        return

    print_success("Formulario enviado")
    if output:
        write_json(output, result.data)
        print_info(f"Datos guardados en {output}")
