"""Descriptor loading exports."""

from .descriptor_models import ArgumentToken, DependencyEntry, Descriptor
from .descriptor_reader import (
    DescriptorLoadError,
    DescriptorNotFoundError,
    DescriptorParseError,
    descriptor_path,
    load_descriptor,
    parse_descriptor,
)

__all__ = [
    "ArgumentToken",
    "DependencyEntry",
    "Descriptor",
    "DescriptorLoadError",
    "DescriptorNotFoundError",
    "DescriptorParseError",
    "descriptor_path",
    "load_descriptor",
    "parse_descriptor",
]
