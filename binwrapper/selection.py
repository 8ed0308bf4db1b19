"""Choosing the download source that fits the running platform."""

from __future__ import annotations

import platform
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "x86": "386",
    "386": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "arm": "arm",
}

_ARCH_ALIASES = {"386": "x86", "amd64": "x64"}

_SYSTEM_NAMES = {"win32": "windows", "cygwin": "windows"}


@dataclass
class Source:
    """A downloadable file, optionally tied to an OS, an architecture and a binary."""

    url: str = ""
    os: str = ""
    arch: str = ""
    exec_path: str = ""

    def matches(self, platforms: Sequence[str], arches: Sequence[str]) -> bool:
        """Tell whether this source suits one of the platforms and architectures."""
        os_ok = self.os in platforms
        arch_ok = self.arch in arches
        if os_ok and arch_ok:
            return True
        if os_ok and not self.arch:
            return True
        if arch_ok and not self.os:
            return True
        return not self.os and not self.arch


def current_platforms(system: str | None = None, machine: str | None = None) -> list[str]:
    """Return the platform names a source's ``os`` may use for this system.

    ``machine`` is accepted so both helpers can take the same ``platform.uname()``
    fields; it does not change the result.
    """
    if system is None:
        system = platform.system()
    name = system.lower()
    name = _SYSTEM_NAMES.get(name, name)
    platforms = [name]
    if name == "windows":
        platforms.append("win32")
    return platforms


def current_arches(machine: str | None = None) -> list[str]:
    """Return the architecture names a source's ``arch`` may use for this machine."""
    if machine is None:
        machine = platform.machine()
    name = machine.lower()
    name = _ARCH_NAMES.get(name, name)
    arches = [name]
    alias = _ARCH_ALIASES.get(name)
    if alias:
        arches.append(alias)
    return arches


def select_source(
    sources: Iterable[Source],
    platforms: Sequence[str] | None = None,
    arches: Sequence[str] | None = None,
) -> Source | None:
    """Return the first source matching the platform, or None."""
    if platforms is None:
        platforms = current_platforms()
    if arches is None:
        arches = current_arches()
    return next((source for source in sources if source.matches(platforms, arches)), None)