"""mdreflink: convert inline Markdown links to shortcut reference links."""

from mdreflink.api.config.ReflinkConfig import ReflinkConfig
from mdreflink.api.reflink.transform import transform
from mdreflink.api.reflink.transform_text import transform_text
from mdreflink.api.reflink.TransformStats import TransformStats

__all__ = ["ReflinkConfig", "TransformStats", "transform", "transform_text"]
