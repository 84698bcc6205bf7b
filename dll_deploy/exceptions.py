"""Custom exceptions for dll-deploy.

Every fatal condition has its own exit code so scripts driving ``deploy-dll``
can tell them apart.
"""


class DeployError(Exception):
    """Base exception for all deployment errors."""

    exit_code: int = 1


class InspectorError(DeployError):
    """Raised when the binary inspector cannot be run or exits non-zero."""

    exit_code = 1

    def __init__(self, command: list[str], reason: str, stderr: str = ""):
        self.command = command
        self.reason = reason
        self.stderr = stderr
        message = f"{' '.join(command)} failed: {reason}"
        if stderr:
            message += f"\nThe std error is: {stderr}"
        super().__init__(message)


class InspectorNotFoundError(DeployError):
    """Raised when ``[system]`` is requested but no objdump is on PATH."""

    exit_code = 2


class BuiltinInspectorNotFoundError(DeployError):
    """Raised when ``[builtin]`` is requested but no objdump ships beside the program."""

    exit_code = 3


class InspectorFileNotFoundError(DeployError):
    """Raised when an explicit objdump path does not exist."""

    exit_code = 4


class TargetNotFoundError(DeployError):
    """Raised when the binary to deploy for is not an existing file."""

    exit_code = 5


class FormatParseError(DeployError):
    """Raised when the file format cannot be read from inspector output."""

    exit_code = 6

    def __init__(self, path: str, output: str):
        self.path = path
        self.output = output
        super().__init__(
            f"Failed to parse file format of {path} from objdump output, it says: \n{output}"
        )


class DependencyNotFoundError(DeployError):
    """Raised when a required DLL cannot be found and missing ones are not allowed."""

    exit_code = 7

    def __init__(self, name: str, required_by: str):
        self.name = name
        self.required_by = required_by
        super().__init__(f'Failed to find dll "{name}", required by "{required_by}"')


class ImportParseError(DeployError):
    """Raised when an import line of inspector output is malformed."""

    exit_code = 8

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Failed to parse dll name from output {line}")


class CopyError(DeployError):
    """Raised when a found DLL cannot be copied into the deployment directory."""

    exit_code = 9
