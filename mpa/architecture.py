"""Detection of the ARM architecture generation the library runs on."""

from __future__ import annotations

import enum
import platform
import re
from typing import Optional

_SIXTY_FOUR_BIT = {"aarch64", "aarch64_be", "arm64", "armv8b", "armv8l"}
_VERSION_RE = re.compile(r"armv(\d+)")


class Architecture(enum.Enum):
    """Architecture generations recognised by the library."""

    ARMV9 = "ARMv9"
    ARMV8 = "ARMv8"
    ARMV7 = "ARMv7"
    UNKNOWN = "unknown"


def _is_64_bit(machine: str) -> bool:
    return machine in _SIXTY_FOUR_BIT and machine not in {"armv8l"}


def detect_architecture(machine: str, arch_version: Optional[int]) -> Architecture:
    """Classify a machine name and ARM version number.

    When ``arch_version`` is ``None`` it is inferred from the machine name,
    with 64-bit machines taken to be at least ARMv8.
    """
    name = machine.strip().lower()
    is_64 = _is_64_bit(name)
    is_arm = is_64 or name.startswith("arm")
    if not is_arm:
        return Architecture.UNKNOWN

    if arch_version is None:
        match = _VERSION_RE.match(name)
        if match:
            arch_version = int(match.group(1))
        elif is_64:
            arch_version = 8
        else:
            return Architecture.UNKNOWN

    if is_64:
        if arch_version >= 9:
            return Architecture.ARMV9
        if arch_version >= 8:
            return Architecture.ARMV8
        return Architecture.UNKNOWN
    if arch_version >= 7:
        return Architecture.ARMV7
    return Architecture.UNKNOWN


def current_architecture() -> Architecture:
    """Classify the machine this interpreter runs on."""
    return detect_architecture(platform.machine(), None)


def describe(architecture: Architecture) -> str:
    """Return a one-line description of ``architecture``."""
    if architecture is Architecture.UNKNOWN:
        return "It is a non supported MPA architecture."
    return f"It is a {architecture.value} architecture."