import subprocess
from dataclasses import dataclass, field

import pytest


@dataclass
class ProcessSpy:
    """Records Popen/run calls instead of spawning processes.

    stderr is the raw byte output of the fake command; with text=True it is
    decoded as utf-8 using the caller's errors= handler, like subprocess does.
    """

    popen_calls: list[list[str]] = field(default_factory=list)
    popen_kwargs: list[dict] = field(default_factory=list)
    run_calls: list[list[str]] = field(default_factory=list)
    run_kwargs: list[dict] = field(default_factory=list)
    popen_error: OSError | None = None
    run_error: OSError | None = None
    returncode: int = 0
    stderr: bytes = b""

    def popen(self, argv, **kwargs):
        if self.popen_error is not None:
            raise self.popen_error
        self.popen_calls.append(list(argv))
        self.popen_kwargs.append(kwargs)
        return object()

    def run(self, argv, **kwargs):
        if self.run_error is not None:
            raise self.run_error
        self.run_calls.append(list(argv))
        self.run_kwargs.append(kwargs)
        stderr = self.stderr
        stdout = b""
        if kwargs.get("text"):
            errors = kwargs.get("errors") or "strict"
            stderr = stderr.decode("utf-8", errors)
            stdout = ""
        if kwargs.get("check") and self.returncode != 0:
            raise subprocess.CalledProcessError(self.returncode, argv, output=stdout, stderr=stderr)
        return subprocess.CompletedProcess(argv, self.returncode, stdout=stdout, stderr=stderr)

    @property
    def calls(self) -> list[list[str]]:
        return self.popen_calls + self.run_calls


@pytest.fixture
def spy(monkeypatch):
    proc = ProcessSpy()
    monkeypatch.setattr(subprocess, "Popen", proc.popen)
    monkeypatch.setattr(subprocess, "run", proc.run)
    return proc
