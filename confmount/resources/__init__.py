from .naming import ConfigResources

__all__ = ["ConfigResources"]
