from confmount.types.base import BaseModel


class MountIdentity(BaseModel):
    """Caller supplied parameters of a single logical mount point."""

    volume_name: str
    mount_path: str
    default_source_name: str
    read_only: bool = True
    default_sub_path: str = ""
