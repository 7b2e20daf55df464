from .custom_config import (
    KeyToPathSchema,
    ConfigMapConfigSchema,
    CustomConfigSchema,
)
from .mount_identity import MountIdentitySchema

__all__ = [
    "KeyToPathSchema",
    "ConfigMapConfigSchema",
    "CustomConfigSchema",
    "MountIdentitySchema",
]
