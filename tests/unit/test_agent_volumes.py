"""Unit tests for the well-known agent volumes and settings."""

import pytest
from confmount.common.models.volumes import AgentVolumes
from confmount.types.settings import Settings, _getenv


class TestAgentVolumes:
    """Tests for AgentVolumes."""

    def test_procdir(self):
        volume, volume_mount = AgentVolumes.procdir()
        assert volume.name == volume_mount.name == "procdir"
        assert volume.host_path.path == "/proc"
        assert volume_mount.mount_path == "/host/proc"
        assert volume_mount.read_only is True

    def test_cgroups(self):
        volume, volume_mount = AgentVolumes.cgroups()
        assert volume.host_path.path == "/sys/fs/cgroup"
        assert volume_mount.mount_path == "/host/sys/fs/cgroup"

    def test_logs_are_writable(self):
        volume, volume_mount = AgentVolumes.logs()
        assert volume.empty_dir is not None
        assert volume_mount.mount_path == "/var/log/datadog"
        assert volume_mount.read_only is False

    def test_tmp(self):
        volume, volume_mount = AgentVolumes.tmp()
        assert volume.name == "tmp"
        assert volume_mount.mount_path == "/tmp"

    def test_config_dirs(self):
        _, config_mount = AgentVolumes.config()
        _, confd_mount = AgentVolumes.confd()
        _, checksd_mount = AgentVolumes.checksd()
        assert config_mount.mount_path == "/etc/datadog-agent"
        assert config_mount.read_only is False
        assert confd_mount.mount_path == "/etc/datadog-agent/conf.d"
        assert checksd_mount.mount_path == "/etc/datadog-agent/checks.d"

    def test_config_dirs_follow_settings(self):
        conf = Settings(config_volume_path="/opt/agent")
        _, confd_mount = AgentVolumes.confd(conf)
        assert confd_mount.mount_path == "/opt/agent/conf.d"


class TestSettings:
    """Tests for Settings and environment lookup."""

    def test_defaults(self):
        conf = Settings()
        assert conf.config_volume_path == "/etc/datadog-agent"
        assert conf.confd_volume_path == "/conf.d"
        assert conf.checksd_volume_path == "/checks.d"

    def test_overrides_are_per_instance(self):
        conf = Settings(confd_volume_path="/confd")
        assert conf.confd_path == "/etc/datadog-agent/confd"
        assert Settings().confd_path == "/etc/datadog-agent/conf.d"

    def test_getenv(self, monkeypatch):
        monkeypatch.setenv("CONFMOUNT_TEST_VALUE", "/srv/agent")
        monkeypatch.setenv("CONFMOUNT_TEST_FLAG", "false")
        assert _getenv("CONFMOUNT_TEST_VALUE", "/etc") == "/srv/agent"
        assert _getenv("CONFMOUNT_TEST_FLAG", True) is False

    def test_getenv_default_and_missing(self, monkeypatch):
        monkeypatch.delenv("CONFMOUNT_TEST_MISSING", raising=False)
        assert _getenv("CONFMOUNT_TEST_MISSING", "/etc") == "/etc"
        with pytest.raises(KeyError):
            _getenv("CONFMOUNT_TEST_MISSING")
