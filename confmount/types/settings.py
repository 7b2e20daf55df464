import os
from typing import Any

_TRUE, _FALSE = {"True", "true", "yes", "1"}, {"False", "false", "no", "0"}


def _getenv(name: str, *default: Any) -> Any:
    try:
        v = os.environ[name]
        if v in _TRUE:
            return True
        elif v in _FALSE:
            return False
        else:
            return v
    except KeyError:
        pass
    if default:
        return default[0]
    raise KeyError(name)


# ------------------------------------------------
# ---- Defaults and environment variables ----
# ------------------------------------------------

#: Root of the agent configuration directory inside the container
CONFIG_VOLUME_PATH = str(_getenv("CONFIG_VOLUME_PATH", "/etc/datadog-agent"))

#: Check configuration segment, appended to CONFIG_VOLUME_PATH as-is
CONFD_VOLUME_PATH = str(_getenv("CONFD_VOLUME_PATH", "/conf.d"))

#: Custom check code segment, appended to CONFIG_VOLUME_PATH as-is
CHECKSD_VOLUME_PATH = str(_getenv("CHECKSD_VOLUME_PATH", "/checks.d"))


class Settings:
    """Mount resolution settings"""

    config_volume_path: str = CONFIG_VOLUME_PATH
    confd_volume_path: str = CONFD_VOLUME_PATH
    checksd_volume_path: str = CHECKSD_VOLUME_PATH

    def __init__(
        self,
        *args,
        config_volume_path: str = None,
        confd_volume_path: str = None,
        checksd_volume_path: str = None,
        **kwargs,
    ):
        if config_volume_path is not None:
            self.config_volume_path = config_volume_path

        if confd_volume_path is not None:
            self.confd_volume_path = confd_volume_path

        if checksd_volume_path is not None:
            self.checksd_volume_path = checksd_volume_path

    @property
    def confd_path(self) -> str:
        return f"{self.config_volume_path}{self.confd_volume_path}"

    @property
    def checksd_path(self) -> str:
        return f"{self.config_volume_path}{self.checksd_volume_path}"
