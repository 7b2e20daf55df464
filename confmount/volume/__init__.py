from .resolver import (
    confd_mount_path,
    host_path_volumes,
    empty_dir_volumes,
    custom_config_volumes,
    config_map_volumes,
    resolve_config_mount,
    volume_from_custom_config,
    volume_mount_from_custom_config,
    volume_from_config_map_config,
    volume_mount_from_config_map_config,
)

__all__ = [
    "confd_mount_path",
    "host_path_volumes",
    "empty_dir_volumes",
    "custom_config_volumes",
    "config_map_volumes",
    "resolve_config_mount",
    "volume_from_custom_config",
    "volume_mount_from_custom_config",
    "volume_from_config_map_config",
    "volume_mount_from_config_map_config",
]
