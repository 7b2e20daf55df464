try:
    import os
    from dotenv import load_dotenv, find_dotenv

    env_file = os.environ.get("ENV_FILE", ".env")
    path = find_dotenv(filename=env_file, raise_error_if_not_found=True)
    print(f"Loading environment variables from {path}")
    load_dotenv(dotenv_path=path)

except Exception:
    # No file to set environment variables
    pass

from confmount.volume import (  # noqa: E402
    confd_mount_path,
    host_path_volumes,
    empty_dir_volumes,
    custom_config_volumes,
    config_map_volumes,
    resolve_config_mount,
    volume_from_custom_config,
    volume_mount_from_custom_config,
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
]

__version__ = "0.1.0"
