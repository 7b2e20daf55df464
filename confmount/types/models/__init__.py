from .custom_config import KeyToPath, ConfigMapConfig, CustomConfig
from .mount_identity import MountIdentity

__all__ = [
    "KeyToPath",
    "ConfigMapConfig",
    "CustomConfig",
    "MountIdentity",
]
