"""Platform targeting exports."""

from .platform_models import Platform, detect_platform

__all__ = ["Platform", "detect_platform"]
