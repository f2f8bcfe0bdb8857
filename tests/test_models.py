import pytest

from src.models import PlatformOptions
from src.platforms import select_platform


def test_options_executables_read_only():
    opts = PlatformOptions(executables={"powershell": "pwsh"})
    with pytest.raises(TypeError):
        opts.executables["powershell"] = "evil.exe"
    assert opts.executable("powershell") == "pwsh"
    assert opts.executable("osascript") == "osascript"


def test_options_copy_caller_mapping():
    source = {"xdg-open": "/opt/bin/open-url"}
    plat = select_platform("linux", PlatformOptions(executables=source))
    source["xdg-open"] = "/tmp/other"
    assert plat.browser_command("u") == ["/opt/bin/open-url", "u"]


def test_options_hashable_and_comparable():
    a = PlatformOptions(executables={"open": "/usr/bin/open"}, sound_name="Glass")
    b = PlatformOptions(executables={"open": "/usr/bin/open"}, sound_name="Glass")
    assert a == b
    assert hash(a) == hash(b)
    assert a != PlatformOptions(executables={"open": "/bin/open"}, sound_name="Glass")
    assert hash(PlatformOptions()) == hash(PlatformOptions())
