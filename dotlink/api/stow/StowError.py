"""Errors raised by package linker backends."""


class StowError(Exception):
    """Base class for package linker errors."""

    def __init__(self, code: str, message: str, details: str = ""):
        self.code = code
        self.message = message
        self.details = details
        if details:
            super().__init__(f"[{code}] {message}: {details}")
        else:
            super().__init__(f"[{code}] {message}")


class ExternalToolMissing(StowError):
    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(
            code="DL2001",
            message="Package linker not found",
            details=f"Executable: {executable}",
        )


class ExternalToolInvocationFailed(StowError):
    def __init__(self, package: str, returncode: int | None, stderr: str = ""):
        self.package = package
        self.returncode = returncode
        self.stderr = stderr
        details = f"Package: {package}, exit code: {returncode}"
        if stderr.strip():
            details = f"{details} - {stderr.strip()}"
        super().__init__(
            code="DL2002",
            message="Package linker failed",
            details=details,
        )
