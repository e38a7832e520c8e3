"""Reflink configuration."""

from .get_package_version import get_package_version
from .ReflinkConfig import ReflinkConfig
from .ReflinkConfigError import ReflinkConfigError

__all__ = ["ReflinkConfig", "ReflinkConfigError", "get_package_version"]
