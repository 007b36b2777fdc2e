"""Target platform entities and host detection."""

from __future__ import annotations

import platform as host
from dataclasses import dataclass

_OS_NAMES = {
    "Linux": "linux",
    "Windows": "windows",
    "Darwin": "osx",
    "FreeBSD": "freebsd",
}

_ARCH_NAMES = {
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "armv7l": "arm32",
    "armv6l": "arm32",
}

_64_BIT_ARCHES = frozenset({"x86_64", "arm64"})


@dataclass(frozen=True)
class Platform:
    """Operating system and architecture a launch is resolved for."""

    name: str
    arch: str

    @property
    def arch_bits(self) -> str:
        """Code substituted for `${arch}` in native classifier templates."""
        return "64" if self.arch in _64_BIT_ARCHES else "32"

    @property
    def natives_label(self) -> str:
        return f"natives-{self.name}-{self.arch}"


def detect_platform() -> Platform:
    """Describe the running host using descriptor naming conventions."""
    system = host.system()
    machine = host.machine().lower()
    return Platform(
        name=_OS_NAMES.get(system, system.lower()),
        arch=_ARCH_NAMES.get(machine, machine),
    )
