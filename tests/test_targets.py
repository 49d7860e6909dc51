import pytest

from rokit.targets import OS, Arch, Toolchain, is_word_separator, split_words


@pytest.mark.parametrize("char", ["-", "_", " ", "\t"])
def test_word_separators(char):
    assert is_word_separator(char) is True


@pytest.mark.parametrize("char", ["a", ".", "1", "/"])
def test_non_word_separators(char):
    assert is_word_separator(char) is False


def test_split_words():
    assert split_words("tool-v1.0.0_x86 linux") == ["tool", "v1.0.0", "x86", "linux"]


# OS


def test_current_os_round_trips():
    current = OS.current_system()
    assert OS.detect(current.as_str()) is current


@pytest.mark.parametrize(
    "text, expected",
    [
        ("APP-windows-ARCH-VER", OS.WINDOWS),
        ("APP-win32-ARCH-VER", OS.WINDOWS),
        ("APP-win64-ARCH-VER", OS.WINDOWS),
        ("APP-macos-ARCH-VER", OS.MACOS),
        ("APP-osx-ARCH-VER", OS.MACOS),
        ("APP-darwin-ARCH-VER", OS.MACOS),
        ("APP-apple-ARCH-VER", OS.MACOS),
        ("APP-linux-ARCH-VER", OS.LINUX),
        ("APP-ubuntu-ARCH-VER", OS.LINUX),
        ("APP-debian-ARCH-VER", OS.LINUX),
        ("APP-fedora-ARCH-VER", OS.LINUX),
    ],
)
def test_detect_os_valid(text, expected):
    assert OS.detect(text) is expected


@pytest.mark.parametrize(
    "text",
    [
        "APP-widows-ARCH-VER",
        "APP-macc_in_tosh-ARCH-VER",
        "APP-myOS-ARCH-VER",
        "APP-fedoooruhh-ARCH-VER",
        "APP-linucks-ARCH-VER",
    ],
)
def test_detect_os_invalid(text):
    assert OS.detect(text) is None


@pytest.mark.parametrize(
    "tool, expected",
    [
        ("stylua-linux-x86_64-musl", OS.LINUX),
        ("remodel-0.11.0-linux-x86_64", OS.LINUX),
        ("rojo-0.6.0-alpha.1-win64", OS.WINDOWS),
        ("lune-0.6.7-windows-aarch64", OS.WINDOWS),
        ("darklua-linux-aarch64", OS.LINUX),
        ("tarmac-0.7.5-macos", OS.MACOS),
        ("sentry-cli-Darwin-universal", OS.MACOS),
        ("sentry-cli-linux-i686-2.32.1", OS.LINUX),
        ("just-1.28.0-armv7-unknown-linux-musleabihf", OS.LINUX),
        ("just-1.28.0-arm-unknown-linux-musleabihf", OS.LINUX),
    ],
)
def test_os_real_tool_specs(tool, expected):
    assert OS.detect(tool) is expected


@pytest.mark.parametrize(
    "member, expected",
    [(OS.WINDOWS, "windows"), (OS.MACOS, "macos"), (OS.LINUX, "linux")],
)
def test_os_as_str(member, expected):
    assert member.as_str() == expected


def test_os_ordering():
    detected = [OS.detect("linux"), OS.detect("windows"), OS.detect("macos")]
    assert sorted(detected) == [OS.WINDOWS, OS.MACOS, OS.LINUX]


# Arch


def test_current_arch_round_trips():
    current = Arch.current_system()
    assert Arch.detect(current.as_str()) is current


@pytest.mark.parametrize(
    "text, expected",
    [
        ("APP-x86-64-VER", Arch.X64),
        ("APP-x86_64-VER", Arch.X64),
        ("APP-x64-VER", Arch.X64),
        ("APP-amd64-VER", Arch.X64),
        ("APP-x86-VER", Arch.X86),
        ("APP-i686-VER", Arch.X86),
        ("APP-arm64-VER", Arch.ARM64),
        ("APP-arm-VER", Arch.ARM32),
    ],
)
def test_detect_arch_valid(text, expected):
    assert Arch.detect(text) is expected


@pytest.mark.parametrize(
    "text",
    [
        "APP-x84-48-VER",
        "APP-x87-65-VER",
        "APP-x62-VER",
        "APP-nvidia4-VER",
        "APP-intel999-VER",
    ],
)
def test_detect_arch_invalid(text):
    assert Arch.detect(text) is None


def test_detect_arch_universal():
    assert Arch.detect("APP-macos-universal-VER") is Arch.X64


@pytest.mark.parametrize(
    "tool, expected",
    [
        ("stylua-linux-x86_64-musl", Arch.X64),
        ("remodel-0.11.0-linux-x86_64", Arch.X64),
        ("rojo-0.6.0-alpha.1-win64", Arch.X64),
        ("lune-0.6.7-windows-aarch64", Arch.ARM64),
        ("darklua-linux-aarch64", Arch.ARM64),
        ("tarmac-0.7.5-macos", None),
        ("sentry-cli-Darwin-universal", Arch.X64),
        ("sentry-cli-linux-i686-2.32.1", Arch.X86),
        ("just-1.28.0-armv7-unknown-linux-musleabihf", Arch.ARM32),
        ("just-1.28.0-arm-unknown-linux-musleabihf", Arch.ARM32),
    ],
)
def test_arch_real_tool_specs(tool, expected):
    assert Arch.detect(tool) is expected


@pytest.mark.parametrize(
    "member, expected",
    [
        (Arch.ARM64, "arm64"),
        (Arch.X64, "x64"),
        (Arch.ARM32, "arm32"),
        (Arch.X86, "x86"),
    ],
)
def test_arch_as_str(member, expected):
    assert member.as_str() == expected


def test_arch_ordering_prefers_arm():
    detected = [
        Arch.detect("x86"),
        Arch.detect("x64"),
        Arch.detect("armv7"),
        Arch.detect("aarch64"),
    ]
    assert sorted(detected) == [Arch.ARM64, Arch.X64, Arch.ARM32, Arch.X86]


# Toolchain


def test_toolchain_current_system_is_unknown():
    assert Toolchain.current_system() is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("msvc", Toolchain.MSVC),
        ("msvc-clang", Toolchain.MSVC),
        ("gnu", Toolchain.GNU),
        ("musl", Toolchain.MUSL),
        ("musl-gcc", Toolchain.MUSL),
    ],
)
def test_detect_toolchain_valid(text, expected):
    assert Toolchain.detect(text) is expected


@pytest.mark.parametrize("text", ["unknown", "msrv", "gnnuuu!", "muscle"])
def test_detect_toolchain_invalid(text):
    assert Toolchain.detect(text) is None


def test_toolchain_detection_is_case_insensitive():
    assert Toolchain.detect("Linux-MUSL") is Toolchain.MUSL


@pytest.mark.parametrize(
    "member, expected",
    [(Toolchain.MSVC, "msvc"), (Toolchain.GNU, "gnu"), (Toolchain.MUSL, "musl")],
)
def test_toolchain_as_str(member, expected):
    assert member.as_str() == expected