"""Configuración de pytest para tests de jsonform."""

import json

import pytest

from jsonform.cli.theme import CLITheme


@pytest.fixture(autouse=True)
def reset_theme():
    """Cada test parte del tema por defecto."""
    CLITheme.reset()
    yield
    CLITheme.reset()


@pytest.fixture
def simple_config():
    """Formulario simple con un campo requerido 'name'."""
    return {
        "id": "contacto",
        "title": "Contacto",
        "type": "simple",
        "endpoint": "/api/contacto",
        "method": "POST",
        "groups": [
            {
                "id": "basico",
                "title": "Datos básicos",
                "fields": [
                    {
                        "id": "name",
                        "type": "text",
                        "label": "Nombre",
                        "required": True,
                        "validation": [
                            {"type": "required", "message": "El nombre es obligatorio"},
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def registration_config():
    """Formulario simple con reglas variadas y dependencias."""
    return {
        "id": "registro",
        "title": "Registro",
        "subtitle": "Alta de usuario",
        "type": "simple",
        "endpoint": "/api/registro",
        "method": "PUT",
        "banners": [
            {"id": "aviso", "type": "warning", "title": "Atención", "message": "Datos reales"},
        ],
        "groups": [
            {
                "id": "cuenta",
                "title": "Cuenta",
                "fields": [
                    {
                        "id": "email",
                        "type": "email",
                        "label": "Correo",
                        "required": True,
                        "validation": [
                            {"type": "required", "message": "Correo requerido"},
                            {"type": "email", "message": "Correo inválido"},
                        ],
                    },
                    {
                        "id": "age",
                        "type": "number",
                        "label": "Edad",
                        "validation": [
                            {"type": "min", "value": 18, "message": "Mínimo 18"},
                            {"type": "max", "value": 120, "message": "Máximo 120"},
                        ],
                    },
                    {
                        "id": "plan",
                        "type": "select",
                        "label": "Plan",
                        "options": [
                            {"value": "free", "label": "Gratis"},
                            {"value": "pro", "label": "Profesional"},
                        ],
                        "defaultValue": "free",
                    },
                ],
            },
            {
                "id": "empresa",
                "title": "Empresa",
                "fields": [
                    {
                        "id": "company",
                        "type": "text",
                        "label": "Empresa",
                        "required": True,
                        "validation": [
                            {"type": "required", "message": "Empresa requerida"},
                        ],
                        "dependencies": [
                            {"field": "plan", "value": "pro", "action": "show"},
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def wizard_config():
    """Wizard de dos pasos; el primero tiene un email requerido."""
    return {
        "id": "alta",
        "title": "Alta paciente",
        "type": "wizard",
        "endpoint": "/api/pacientes",
        "submitButtonText": "Finalizar",
        "steps": [
            {
                "id": "paso1",
                "title": "Contacto",
                "nextButtonText": "Continuar",
                "groups": [
                    {
                        "id": "g1",
                        "title": "Contacto",
                        "fields": [
                            {
                                "id": "email",
                                "type": "email",
                                "required": True,
                                "validation": [
                                    {"type": "required", "message": "Correo requerido"},
                                    {"type": "email", "message": "Correo inválido"},
                                ],
                            },
                        ],
                    },
                ],
            },
            {
                "id": "paso2",
                "title": "Detalles",
                "groups": [
                    {
                        "id": "g2",
                        "title": "Detalles",
                        "fields": [
                            {"id": "notes", "type": "textarea"},
                        ],
                    },
                ],
            },
        ],
    }


@pytest.fixture
def write_json(tmp_path):
    """Escribe un objeto como archivo JSON temporal y retorna la ruta."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
