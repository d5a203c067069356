"""
Schemas base - Lectura de la API y entrada de formularios
"""
from marshmallow import Schema, EXCLUDE, pre_load, post_dump


class ApiSchema(Schema):
    """Lectura de cuerpos de la API: las claves desconocidas se ignoran"""

    class Meta:
        unknown = EXCLUDE


class InputSchema(Schema):
    """
    Entrada de formularios.
    Los textos se recortan y una cadena vacía equivale a un campo ausente;
    los valores None no se envían a la API.
    Las claves de `no_strip` se conservan tal cual (contraseñas).
    """
    no_strip = ()

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def strip_strings(self, data, **kwargs):
        if not isinstance(data, dict):
            return data

        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = (value if key in self.no_strip else value.strip()) or None
            cleaned[key] = value
        return cleaned

    @post_dump
    def drop_none(self, data, **kwargs):
        return {key: value for key, value in data.items() if value is not None}
