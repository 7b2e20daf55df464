from typing import Optional
from confmount.types.models import CustomConfig


class ConfigResources:
    """Encapsulates the naming scheme used for the ConfigMaps and volumes that back
    agent configuration mounts."""

    @classmethod
    def config_name(self, owner_name: str, default_name: str):
        return f"{owner_name}-{default_name}"

    @classmethod
    def conf_name(
        self, owner_name: str, custom_config: Optional[CustomConfig], default_name: str
    ):
        """Name of the ConfigMap backing a custom config.

        An override only renames the ConfigMap when it references one by name.
        """
        if (
            custom_config is not None
            and custom_config.config_map is not None
            and custom_config.config_map.name
        ):
            return custom_config.config_map.name
        return self.config_name(owner_name, default_name)

    @classmethod
    def volume_name(self, check_name: str):
        return f"{check_name}-config"
