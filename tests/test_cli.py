"""
Tests para la CLI - Comandos check, validate y fill.
"""

import json
import logging
from unittest.mock import patch

import pytest
import typer
from typer.testing import CliRunner

from jsonform.cli import app
from jsonform.cli.check import describe_dependencies, describe_rules
from jsonform.cli.common import load_handlers_or_exit
from jsonform.cli.fill import FormFiller
from jsonform.cli.theme import CLITheme, THEME_NORD
from jsonform.config import load_config
from jsonform.core import FormOrchestrator, HandlerRegistry


runner = CliRunner()


HANDLERS_MODULE = '''
from jsonform.core import HandlerRegistry

handlers = HandlerRegistry()


@handlers.validator("sin_numeros")
def sin_numeros(value, data):
    return not any(c.isdigit() for c in str(value or "")) or "Sin números"


otro = "no es un registro"
'''


@pytest.fixture
def handlers_module(tmp_path, monkeypatch):
    """Módulo importable con un HandlerRegistry."""
    (tmp_path / "mis_handlers.py").write_text(HANDLERS_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "mis_handlers"


class TestCheck:
    """Tests para comando check."""

    def test_valid_config(self, write_json, registration_config):
        path = write_json("registro.json", registration_config)
        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 0
        assert "Configuración válida: registro" in result.output
        assert "Registro" in result.output
        assert "Datos reales" in result.output

    def test_wizard_config(self, write_json, wizard_config):
        path = write_json("alta.json", wizard_config)
        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 0
        assert "Paso 1" in result.output
        assert "Paso 2" in result.output

    def test_quiet(self, write_json, simple_config):
        path = write_json("contacto.json", simple_config)
        result = runner.invoke(app, ["check", str(path), "--quiet"])

        assert result.exit_code == 0
        assert "Configuración válida" in result.output
        assert "Endpoint" not in result.output

    def test_invalid_config(self, write_json, simple_config):
        del simple_config["groups"]
        path = write_json("roto.json", simple_config)
        result = runner.invoke(app, ["check", str(path)])

        assert result.exit_code == 1
        assert "inválida" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["check", str(tmp_path / "nada.json")])
        assert result.exit_code == 1
        assert "No se encontró" in result.output

    def test_theme_option(self, write_json, simple_config):
        path = write_json("contacto.json", simple_config)
        result = runner.invoke(app, ["--theme", "nord", "check", str(path)])

        assert result.exit_code == 0
        assert CLITheme.get_palette() == THEME_NORD


class TestDescribe:
    """Tests para los resúmenes de reglas y dependencias."""

    def test_describe_rules(self, registration_config):
        config = load_config(registration_config)
        assert describe_rules(config.get_field("email")) == "required, email"
        assert describe_rules(config.get_field("age")) == "min=18, max=120"
        assert describe_rules(config.get_field("plan")) == "-"

    def test_describe_dependencies(self, registration_config):
        config = load_config(registration_config)
        assert describe_dependencies(config.get_field("company")) == "show si plan='pro'"
        assert describe_dependencies(config.get_field("email")) == "-"


class TestValidate:
    """Tests para comando validate."""

    def test_valid_data(self, write_json, simple_config, tmp_path):
        config = write_json("contacto.json", simple_config)
        data = write_json("datos.json", {"name": "Ada"})
        output = tmp_path / "salida.json"

        result = runner.invoke(app, ["validate", str(config), str(data), "-o", str(output)])

        assert result.exit_code == 0
        assert "Datos válidos" in result.output
        assert json.loads(output.read_text(encoding="utf-8")) == {"name": "Ada"}

    def test_rejected_data(self, write_json, simple_config):
        config = write_json("contacto.json", simple_config)
        data = write_json("datos.json", {"name": ""})

        result = runner.invoke(app, ["validate", str(config), str(data)])

        assert result.exit_code == 1
        assert "Envío rechazado: 1 campo(s) con error" in result.output
        assert "El nombre es obligatorio" in result.output

    def test_hidden_field_blocks_by_default(self, write_json, registration_config):
        config = write_json("registro.json", registration_config)
        data = write_json("datos.json", {"email": "a@b.co"})

        result = runner.invoke(app, ["validate", str(config), str(data)])
        assert result.exit_code == 1
        assert "Empresa requerida" in result.output

        result = runner.invoke(app, ["validate", str(config), str(data), "--skip-hidden"])
        assert result.exit_code == 0

    def test_data_must_be_object(self, write_json, simple_config):
        config = write_json("contacto.json", simple_config)
        data = write_json("datos.json", ["Ada"])

        result = runner.invoke(app, ["validate", str(config), str(data)])
        assert result.exit_code == 1
        assert "objeto JSON" in result.output

    def test_with_handlers(self, write_json, simple_config, handlers_module):
        simple_config["groups"][0]["fields"][0]["validation"].append(
            {"type": "custom", "value": "sin_numeros", "message": "x"}
        )
        config = write_json("contacto.json", simple_config)
        data = write_json("datos.json", {"name": "Ada 2"})

        result = runner.invoke(
            app, ["validate", str(config), str(data), "--handlers", handlers_module],
        )
        assert result.exit_code == 1
        assert "Sin números" in result.output

    def test_unregistered_handler(self, write_json, simple_config):
        simple_config["groups"][0]["fields"][0]["validation"].append(
            {"type": "custom", "value": "sin_numeros", "message": "x"}
        )
        config = write_json("contacto.json", simple_config)
        data = write_json("datos.json", {"name": "Ada"})

        result = runner.invoke(app, ["validate", str(config), str(data)])
        assert result.exit_code == 1
        assert "sin_numeros" in result.output


class TestLoadHandlers:
    """Tests para load_handlers_or_exit."""

    def test_empty_reference(self):
        assert isinstance(load_handlers_or_exit(None), HandlerRegistry)

    def test_default_attribute(self, handlers_module, caplog):
        with caplog.at_level(logging.DEBUG, logger="jsonform.cli.common"):
            registry = load_handlers_or_exit(handlers_module)
        assert registry.validator_names == ["sin_numeros"]
        assert registry.step_guard_names == []
        assert "sin_numeros" in caplog.text

    def test_not_a_registry(self, handlers_module):
        with pytest.raises(typer.Exit):
            load_handlers_or_exit(f"{handlers_module}:otro")

    def test_missing_module(self):
        with pytest.raises(typer.Exit):
            load_handlers_or_exit("modulo_que_no_existe_xyz")


class TestFill:
    """Tests para comando fill con prompts simulados."""

    def test_simple_form(self, write_json, simple_config, tmp_path):
        config = write_json("contacto.json", simple_config)
        output = tmp_path / "respuesta.json"

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.side_effect = ["Ada"]
            result = runner.invoke(app, ["fill", str(config), "-o", str(output)])

        assert result.exit_code == 0
        assert "Formulario enviado" in result.output
        assert "POST /api/contacto" in result.output
        assert json.loads(output.read_text(encoding="utf-8")) == {"name": "Ada"}

    def test_retries_until_valid(self, write_json, simple_config):
        config = write_json("contacto.json", simple_config)

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.side_effect = ["", "Ada"]
            result = runner.invoke(app, ["fill", str(config)])

        assert result.exit_code == 0
        assert "El nombre es obligatorio" in result.output
        assert q.text.return_value.ask.call_count == 2

    def test_cancel(self, write_json, simple_config):
        config = write_json("contacto.json", simple_config)

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.return_value = None
            result = runner.invoke(app, ["fill", str(config)])

        assert result.exit_code == 0
        assert "Formulario cancelado" in result.output

    def test_wizard(self, write_json, wizard_config):
        config = write_json("alta.json", wizard_config)

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.side_effect = ["ana@example.com", "sin notas"]
            q.select.return_value.ask.side_effect = ["next", "next"]
            result = runner.invoke(app, ["fill", str(config)])

        assert result.exit_code == 0
        assert "Paso 1 de 2" in result.output
        assert "Paso 2 de 2" in result.output
        assert "Formulario enviado" in result.output

    def test_initial_data(self, write_json, simple_config):
        config = write_json("contacto.json", simple_config)
        data = write_json("borrador.json", {"name": "Ada"})

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.side_effect = ["Ada Lovelace"]
            result = runner.invoke(app, ["fill", str(config), "--data", str(data)])

        assert result.exit_code == 0
        assert q.text.call_args.kwargs["default"] == "Ada"

    def test_hidden_required_field_exits(self, write_json, registration_config):
        """Test un requerido oculto termina con código 1 en lugar de repetir."""
        config = write_json("registro.json", registration_config)

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.side_effect = ["a@b.co", "30"]
            q.select.return_value.ask.return_value = "free"
            result = runner.invoke(app, ["fill", str(config)])

        assert result.exit_code == 1
        assert "No se puede enviar" in result.output
        assert "company" in result.output

    def test_skip_hidden(self, write_json, registration_config, tmp_path):
        config = write_json("registro.json", registration_config)
        output = tmp_path / "respuesta.json"

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.side_effect = ["a@b.co", "30"]
            q.select.return_value.ask.return_value = "free"
            result = runner.invoke(
                app, ["fill", str(config), "--skip-hidden", "-o", str(output)],
            )

        assert result.exit_code == 0
        assert "Formulario enviado" in result.output
        assert json.loads(output.read_text(encoding="utf-8")) == {
            "email": "a@b.co", "age": 30, "plan": "free",
        }


class TestFormFiller:
    """Tests para FormFiller."""

    def test_skips_hidden_fields(self, registration_config):
        form = FormOrchestrator(registration_config)
        filler = FormFiller(form)
        answers = {"email": "a@b.co", "age": 30, "plan": "free"}

        with patch.object(FormFiller, "prompt", side_effect=lambda fld: answers[fld.id]):
            assert filler.fill_fields(form.fields)

        assert form.values == {"email": "a@b.co", "age": 30, "plan": "free"}

    def test_hidden_required_field_stops_retry(self, registration_config):
        """Test un error en campo oculto no vuelve a enviar sin fin."""
        form = FormOrchestrator(registration_config)
        filler = FormFiller(form)
        answers = {"email": "a@b.co", "age": 30, "plan": "free"}

        with patch.object(FormFiller, "prompt", side_effect=lambda fld: answers[fld.id]), \
                patch.object(form, "submit", wraps=form.submit) as submit:
            assert filler.run_simple() is None

        assert submit.call_count == 1
        assert filler.blocked == ["company"]

    def test_disabled_required_field_stops_retry(self, simple_config):
        """Test un error en campo deshabilitado no vuelve a enviar sin fin."""
        simple_config["groups"][0]["fields"].append({
            "id": "codigo",
            "type": "text",
            "disabled": True,
            "validation": [{"type": "required", "message": "Código requerido"}],
        })
        form = FormOrchestrator(simple_config)
        filler = FormFiller(form)

        with patch.object(FormFiller, "prompt", return_value="Ada") as prompt, \
                patch.object(form, "submit", wraps=form.submit) as submit:
            assert filler.run_simple() is None

        assert prompt.call_count == 1
        assert submit.call_count == 1
        assert filler.blocked == ["codigo"]

    def test_wizard_hidden_required_field(self, wizard_config):
        """Test wizard: un requerido oculto en el último paso corta el llenado."""
        wizard_config["steps"][1]["groups"][0]["fields"].append({
            "id": "motivo",
            "type": "text",
            "validation": [{"type": "required", "message": "Motivo requerido"}],
            "dependencies": [{"field": "notes", "value": "otro", "action": "show"}],
        })
        form = FormOrchestrator(wizard_config)
        filler = FormFiller(form)

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.side_effect = ["a@b.co", "nada"]
            q.select.return_value.ask.side_effect = ["next", "next"]
            assert filler.run() is None

        assert filler.blocked == ["motivo"]
        assert q.select.return_value.ask.call_count == 2

    def test_coerces_numbers(self, registration_config):
        form = FormOrchestrator(registration_config)
        filler = FormFiller(form)

        with patch.object(FormFiller, "prompt", return_value="42"):
            filler.fill_fields([form.get_field("age")])

        assert form.values["age"] == 42

    def test_wizard_back(self, wizard_config):
        form = FormOrchestrator(wizard_config)
        filler = FormFiller(form)

        with patch("jsonform.cli.fill.questionary") as q:
            q.text.return_value.ask.side_effect = ["a@b.co", "", "a@b.co", "fin"]
            q.select.return_value.ask.side_effect = ["next", "back", "next", "next"]
            result = filler.run()

        assert result.ok
        assert result.data == {"email": "a@b.co", "notes": "fin"}
