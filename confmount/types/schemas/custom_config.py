from marshmallow import fields, post_dump
from confmount.utils.helpers import camel_to_snake
from confmount.types.base import BaseSchema
from confmount.types.models import KeyToPath, ConfigMapConfig, CustomConfig


class KeyToPathSchema(BaseSchema):
    """Schema for KeyToPath."""

    __model__ = KeyToPath
    key = fields.String(required=True, allow_none=False)
    path = fields.String(required=True, allow_none=False)
    mode = fields.Integer(allow_none=True, load_default=None)


class ConfigMapConfigSchema(BaseSchema):
    """Schema for ConfigMap config."""

    __model__ = ConfigMapConfig
    name = fields.String(
        data_key="name",
        allow_none=True,
        load_default=None,
    )
    items = fields.List(
        fields.Nested(KeyToPathSchema()),
        allow_none=True,
        load_default=list,
        data_key="items",
    )

    @post_dump
    def camel_to_snake_dump(self, data, **kwargs):
        """Convert data keys from camelCase to snake_case."""
        return camel_to_snake(data)


class CustomConfigSchema(BaseSchema):
    """Schema for Custom Config."""

    __model__ = CustomConfig
    config_data = fields.String(
        data_key="configData",
        allow_none=True,
        load_default=None,
    )
    config_map = fields.Nested(
        ConfigMapConfigSchema(),
        data_key="configMap",
        allow_none=True,
        load_default=None,
    )

    @post_dump
    def camel_to_snake_dump(self, data, **kwargs):
        """Convert data keys from camelCase to snake_case."""
        return camel_to_snake(data)
