from unittest import mock

import pytest

from mpa.architecture import (
    Architecture,
    current_architecture,
    describe,
    detect_architecture,
)


@pytest.mark.parametrize(
    "machine, version, expected",
    [
        ("aarch64", 9, Architecture.ARMV9),
        ("aarch64", 10, Architecture.ARMV9),
        ("aarch64", 8, Architecture.ARMV8),
        ("arm64", 8, Architecture.ARMV8),
        ("aarch64", None, Architecture.ARMV8),
        ("aarch64", 7, Architecture.UNKNOWN),
        ("armv7l", None, Architecture.ARMV7),
        ("armv7l", 7, Architecture.ARMV7),
        ("armv6l", None, Architecture.UNKNOWN),
        ("arm", None, Architecture.UNKNOWN),
        ("x86_64", 9, Architecture.UNKNOWN),
        ("x86_64", None, Architecture.UNKNOWN),
    ],
)
def test_detect(machine, version, expected):
    assert detect_architecture(machine, version) is expected


def test_detect_is_case_insensitive():
    assert detect_architecture("AARCH64", 9) is Architecture.ARMV9


@pytest.mark.parametrize(
    "arch, text",
    [
        (Architecture.ARMV9, "It is a ARMv9 architecture."),
        (Architecture.ARMV8, "It is a ARMv8 architecture."),
        (Architecture.ARMV7, "It is a ARMv7 architecture."),
        (Architecture.UNKNOWN, "It is a non supported MPA architecture."),
    ],
)
def test_describe(arch, text):
    assert describe(arch) == text


def test_current_architecture_uses_platform():
    with mock.patch("platform.machine", return_value="x86_64"):
        assert current_architecture() is Architecture.UNKNOWN
    with mock.patch("platform.machine", return_value="armv7l"):
        assert current_architecture() is Architecture.ARMV7