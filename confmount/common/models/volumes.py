from typing import Tuple
from kubernetes_asyncio.client import V1Volume, V1VolumeMount
from confmount.types.settings import Settings
from confmount.volume.resolver import host_path_volumes, empty_dir_volumes


class AgentVolumes:
    """Names and paths of the volumes every agent container expects."""

    CONFIG_VOLUME_NAME = "config"
    CONFD_VOLUME_NAME = "confd"
    CHECKSD_VOLUME_NAME = "checksd"

    PROCDIR_VOLUME_NAME = "procdir"
    PROCDIR_HOST_PATH = "/proc"
    PROCDIR_MOUNT_PATH = "/host/proc"

    CGROUPS_VOLUME_NAME = "cgroups"
    CGROUPS_HOST_PATH = "/sys/fs/cgroup"
    CGROUPS_MOUNT_PATH = "/host/sys/fs/cgroup"

    LOG_DATADOG_VOLUME_NAME = "logdatadog"
    LOG_DATADOG_VOLUME_PATH = "/var/log/datadog"

    TMP_VOLUME_NAME = "tmp"
    TMP_VOLUME_PATH = "/tmp"

    @classmethod
    def procdir(cls) -> Tuple[V1Volume, V1VolumeMount]:
        return host_path_volumes(
            cls.PROCDIR_VOLUME_NAME, cls.PROCDIR_HOST_PATH, cls.PROCDIR_MOUNT_PATH, True
        )

    @classmethod
    def cgroups(cls) -> Tuple[V1Volume, V1VolumeMount]:
        return host_path_volumes(
            cls.CGROUPS_VOLUME_NAME, cls.CGROUPS_HOST_PATH, cls.CGROUPS_MOUNT_PATH, True
        )

    @classmethod
    def logs(cls) -> Tuple[V1Volume, V1VolumeMount]:
        return empty_dir_volumes(
            cls.LOG_DATADOG_VOLUME_NAME, cls.LOG_DATADOG_VOLUME_PATH, False
        )

    @classmethod
    def tmp(cls) -> Tuple[V1Volume, V1VolumeMount]:
        return empty_dir_volumes(cls.TMP_VOLUME_NAME, cls.TMP_VOLUME_PATH, False)

    @classmethod
    def config(cls, conf: Settings = None) -> Tuple[V1Volume, V1VolumeMount]:
        """Writable scratch copy of the agent configuration directory."""
        conf = conf or Settings()
        return empty_dir_volumes(cls.CONFIG_VOLUME_NAME, conf.config_volume_path, False)

    @classmethod
    def confd(cls, conf: Settings = None) -> Tuple[V1Volume, V1VolumeMount]:
        conf = conf or Settings()
        return empty_dir_volumes(cls.CONFD_VOLUME_NAME, conf.confd_path, True)

    @classmethod
    def checksd(cls, conf: Settings = None) -> Tuple[V1Volume, V1VolumeMount]:
        conf = conf or Settings()
        return empty_dir_volumes(cls.CHECKSD_VOLUME_NAME, conf.checksd_path, True)
