"""
Schemas User - Usuario, autenticación y registro
"""
from marshmallow import fields, post_load, validates_schema, ValidationError

from inventario.models.user import User, AuthResponse
from inventario.schemas.base import ApiSchema, InputSchema

MIN_PASSWORD_LENGTH = 5
PASSWORD_KEYS = ('password', 'confirmPassword')


class UserSchema(ApiSchema):
    """Schema de lectura de un usuario"""
    id = fields.Int(required=True)
    email = fields.Str(required=True)
    display_name = fields.Str(data_key='displayName', allow_none=True, load_default=None)
    is_email_verified = fields.Bool(data_key='isEmailVerified', load_default=False)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True, load_default=None)
    updated_at = fields.DateTime(data_key='updatedAt', allow_none=True, load_default=None)

    @post_load
    def make_user(self, data, **kwargs):
        return User(**data)


class AuthResponseSchema(ApiSchema):
    """Schema de la respuesta de login/registro"""
    user = fields.Nested(UserSchema, required=True)
    access_token = fields.Str(required=True)

    @post_load
    def make_auth_response(self, data, **kwargs):
        return AuthResponse(**data)


class LoginSchema(InputSchema):
    """Schema del formulario de login"""
    no_strip = PASSWORD_KEYS
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True)


class RegisterSchema(InputSchema):
    """Schema del formulario de registro"""
    no_strip = PASSWORD_KEYS
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True)
    confirm_password = fields.Str(data_key='confirmPassword', required=True, load_only=True)
    display_name = fields.Str(data_key='displayName', allow_none=True, load_default=None)

    @validates_schema
    def validate_passwords(self, data, **kwargs):
        if data['password'] != data['confirm_password']:
            raise ValidationError('Las contraseñas no coinciden', field_name='confirmPassword')
        if len(data['password']) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f'La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres',
                field_name='password'
            )
