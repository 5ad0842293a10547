from pathlib import Path


class PossibleCpusError(Exception):
    """Base exception for errors while determining the number of possible CPUs."""


class CpuSpecError(PossibleCpusError, ValueError):
    """Raised when a CPU bitmap list string cannot be turned into a CPU count."""

    def __init__(self, message: str, spec: str):
        super().__init__(message)
        self.spec = spec


class CpuSpecFormatError(CpuSpecError):
    """Raised when the CPU spec is not of the form 'low-high' (or a single '0')."""


class CpuSpecRangeError(CpuSpecError):
    """Raised when the CPU range does not start at CPU 0."""


class CpuFileReadError(PossibleCpusError, OSError):
    """Raised when the possible-CPU file exists but cannot be read."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class NprocError(PossibleCpusError):
    """Base exception for failures of the processor-count command."""

    def __init__(self, message: str, command: list[str]):
        super().__init__(message)
        self.command = command


class NprocExecutionError(NprocError):
    """Raised when the processor-count command cannot be launched or exits non-zero."""

    def __init__(self, message: str, command: list[str], returncode: int | None = None, stderr: str | None = None):
        super().__init__(message, command)
        self.returncode = returncode
        self.stderr = stderr


class NprocOutputError(NprocError, ValueError):
    """Raised when the processor-count command prints something other than a positive integer."""

    def __init__(self, message: str, command: list[str], output: str):
        super().__init__(message, command)
        self.output = output
