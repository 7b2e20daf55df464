from typing import Optional, List
from confmount.types.base import BaseModel


class KeyToPath(BaseModel):
    key: str
    path: str
    mode: Optional[int] = None


class ConfigMapConfig(BaseModel):
    """Reference to a ConfigMap projected into the agent filesystem.

    An empty ``name`` defers to the caller supplied default ConfigMap name.
    """

    name: Optional[str] = None
    items: Optional[List[KeyToPath]] = None


class CustomConfig(BaseModel):
    """Operator supplied override of a default configuration projection.

    ``config_data`` is materialized by the storage subsystem under the default
    ConfigMap name, so only ``config_map`` can rename the backing object.
    """

    config_data: Optional[str] = None
    config_map: Optional[ConfigMapConfig] = None
