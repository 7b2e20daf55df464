"""Resolution of configuration sources into volume and volume mount pairs.

Each function returns a freshly built ``V1Volume`` / ``V1VolumeMount`` pair
sharing the same name. Host path and empty dir mounts honor the caller's
``read_only`` flag, while ConfigMap backed mounts are always read-only.
"""
import logging
from typing import Optional, Tuple
from kubernetes_asyncio.client import (
    V1Volume,
    V1VolumeMount,
    V1HostPathVolumeSource,
    V1EmptyDirVolumeSource,
    V1ConfigMapVolumeSource,
)
from confmount.types.settings import Settings
from confmount.types.models import ConfigMapConfig, CustomConfig, MountIdentity
from confmount.utils.errors import require_present

logger = logging.getLogger(__name__)


def confd_mount_path(config_folder: str, conf: Settings = None) -> str:
    """Path of a check configuration folder, e.g. /etc/datadog-agent/conf.d/ksm."""
    conf = conf or Settings()
    return f"{conf.config_volume_path}{conf.confd_volume_path}/{config_folder}"


def host_path_volumes(
    volume_name: str, host_path: str, mount_path: str, read_only: bool
) -> Tuple[V1Volume, V1VolumeMount]:
    """Build a volume and volume mount for a host path."""
    volume = V1Volume(
        name=volume_name,
        host_path=V1HostPathVolumeSource(path=host_path),
    )
    volume_mount = V1VolumeMount(
        name=volume_name,
        mount_path=mount_path,
        sub_path="",
        read_only=read_only,
    )
    return volume, volume_mount


def empty_dir_volumes(
    volume_name: str, mount_path: str, read_only: bool
) -> Tuple[V1Volume, V1VolumeMount]:
    """Build a volume (with an empty dir) and volume mount."""
    volume = V1Volume(
        name=volume_name,
        empty_dir=V1EmptyDirVolumeSource(),
    )
    volume_mount = V1VolumeMount(
        name=volume_name,
        mount_path=mount_path,
        sub_path="",
        read_only=read_only,
    )
    return volume, volume_mount


def custom_config_volumes(
    custom_config: Optional[CustomConfig],
    volume_name: str,
    default_config_map_name: str,
    config_folder: str,
    conf: Settings = None,
) -> Tuple[V1Volume, V1VolumeMount]:
    """Build the volume and volume mount of a check configuration folder.

    When ``custom_config`` is given it replaces the default projection.
    Otherwise the ``default_config_map_name`` ConfigMap is mounted whole.
    """
    mount_path = confd_mount_path(config_folder, conf)
    if custom_config is not None:
        volume = volume_from_custom_config(
            custom_config, default_config_map_name, volume_name
        )
        volume_mount = volume_mount_from_custom_config(
            custom_config, volume_name, mount_path, ""
        )
    else:
        volume = _config_map_volume(volume_name, default_config_map_name)
        volume_mount = V1VolumeMount(
            name=volume_name,
            mount_path=mount_path,
            sub_path="",
            read_only=True,
        )
    return volume, volume_mount


def config_map_volumes(
    config_map: Optional[ConfigMapConfig],
    default_config_map_name: str,
    volume_name: str,
    mount_path: str,
) -> Tuple[V1Volume, V1VolumeMount]:
    """Build the volume and volume mount of a ConfigMap config at ``mount_path``."""
    volume = volume_from_config_map_config(
        config_map, default_config_map_name, volume_name
    )
    volume_mount = volume_mount_from_config_map_config(
        config_map, volume_name, mount_path, ""
    )
    return volume, volume_mount


def resolve_config_mount(
    identity: MountIdentity, custom_config: Optional[CustomConfig]
) -> Tuple[V1Volume, V1VolumeMount]:
    """Build the volume and volume mount of a ConfigMap backed mount identity.

    ``identity.read_only`` is not consulted, ConfigMap mounts are read-only.
    """
    config_map = custom_config.config_map if custom_config is not None else None
    volume = volume_from_config_map_config(
        config_map, identity.default_source_name, identity.volume_name
    )
    volume_mount = volume_mount_from_config_map_config(
        config_map,
        identity.volume_name,
        identity.mount_path,
        identity.default_sub_path,
    )
    return volume, volume_mount


def volume_from_custom_config(
    custom_config: CustomConfig, default_config_map_name: str, volume_name: str
) -> V1Volume:
    """Build the volume of a custom config.

    Raises:
        ContractViolationError: if ``custom_config`` is None. Callers must check
            for an override before asking for its volume.
    """
    custom_config = require_present(custom_config, "custom config")
    return volume_from_config_map_config(
        custom_config.config_map, default_config_map_name, volume_name
    )


def volume_mount_from_custom_config(
    custom_config: Optional[CustomConfig],
    volume_name: str,
    mount_path: str,
    default_sub_path: str,
) -> V1VolumeMount:
    """Build the volume mount of a custom config."""
    config_map = custom_config.config_map if custom_config is not None else None
    return volume_mount_from_config_map_config(
        config_map, volume_name, mount_path, default_sub_path
    )


def volume_from_config_map_config(
    config_map: Optional[ConfigMapConfig],
    default_config_map_name: str,
    volume_name: str,
) -> V1Volume:
    """Build the volume of a ConfigMap config."""
    config_map_name = default_config_map_name
    if config_map is not None and config_map.name:
        config_map_name = config_map.name
    else:
        logger.debug(
            f"Volume {volume_name} falls back to ConfigMap {default_config_map_name}"
        )
    return _config_map_volume(volume_name, config_map_name)


def volume_mount_from_config_map_config(
    config_map: Optional[ConfigMapConfig],
    volume_name: str,
    mount_path: str,
    default_sub_path: str,
) -> V1VolumeMount:
    """Build the volume mount of a ConfigMap config.

    Only the first item selects the sub path, later items are ignored.
    """
    sub_path = default_sub_path
    if config_map is not None and config_map.items:
        sub_path = config_map.items[0].path
    return V1VolumeMount(
        name=volume_name,
        mount_path=mount_path,
        sub_path=sub_path,
        read_only=True,
    )


def _config_map_volume(volume_name: str, config_map_name: str) -> V1Volume:
    return V1Volume(
        name=volume_name,
        config_map=V1ConfigMapVolumeSource(name=config_map_name),
    )
