from marshmallow import fields, post_dump
from confmount.utils.helpers import camel_to_snake
from confmount.types.base import BaseSchema
from confmount.types.models import MountIdentity


class MountIdentitySchema(BaseSchema):
    __model__ = MountIdentity

    volume_name = fields.Str(
        data_key="volumeName",
        required=True,
        allow_none=False,
    )
    mount_path = fields.Str(
        data_key="mountPath",
        required=True,
        allow_none=False,
    )
    default_source_name = fields.Str(
        data_key="defaultSourceName",
        required=True,
        allow_none=False,
    )
    read_only = fields.Bool(
        data_key="readOnly",
        required=False,
        load_default=True,
    )
    default_sub_path = fields.Str(
        data_key="defaultSubPath",
        required=False,
        load_default="",
    )

    @post_dump
    def camel_to_snake_dump(self, data, **kwargs):
        """Convert data keys from camelCase to snake_case."""
        return camel_to_snake(data)
