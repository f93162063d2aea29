"""
Mind Errors

Error taxonomy for mind parsing, lookup and execution.

Only parsing raises (MindParseError, MindValidationError). Lookups, resource
reads and script runs report "not found" or failure through return values;
the remaining classes are used by the tool layer to describe those outcomes.
"""

from typing import Iterable, NamedTuple


class FieldError(NamedTuple):
    """One frontmatter violation: the key path and a readable message."""
    path: tuple[str, ...]
    message: str

    def format(self) -> str:
        path = ".".join(self.path) if self.path else "(root)"
        return f"{path}: {self.message}"


class MindError(Exception):
    """Base class for all mind errors."""


class MindNotFoundError(MindError):
    def __init__(self, mind_name: str, available_minds: list[str]):
        available = ", ".join(available_minds) or "none"
        super().__init__(f'Mind "{mind_name}" not found. Available minds: {available}')
        self.mind_name = mind_name
        self.available_minds = list(available_minds)


class MindParseError(MindError):
    """MIND.md is structurally malformed (delimiters, YAML)."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid MIND.md: {reason}")
        self.reason = reason


class MindValidationError(MindError):
    """Frontmatter violates the schema. Carries every violation, not just the first."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors = list(errors)
        lines = [e.format() for e in self.errors]
        super().__init__("Mind validation failed:\n" + "\n".join(lines))


class MindResourceNotFoundError(MindError):
    def __init__(self, mind_name: str, resource_path: str):
        super().__init__(f'Resource "{resource_path}" not found in mind "{mind_name}"')
        self.mind_name = mind_name
        self.resource_path = resource_path


class ScriptExecutionError(MindError):
    def __init__(self, script_path: str, exit_code: int, stdout: str, stderr: str):
        super().__init__(
            f'Script "{script_path}" failed with exit code {exit_code}.\nStderr: {stderr}'
        )
        self.script_path = script_path
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

    def get_suggestion(self) -> str:
        stderr = self.stderr.lower()
        if "command not found" in stderr or "no such file or directory" in stderr:
            return "Ensure the required interpreter is installed (bun, bash, python3)."
        if "permission denied" in stderr:
            return "Check that the script has execute permissions."
        if "cannot find module" in stderr or "modulenotfounderror" in stderr:
            return "Ensure all dependencies are installed."
        if "timed out" in stderr:
            return "The script exceeded its time limit; check for hangs or raise MINDS_SCRIPT_TIMEOUT."
        return "Check the script logs for more details."


class MindInitializationError(MindError):
    def __init__(self, reason: str):
        super().__init__(f"Failed to initialize mind registry: {reason}")
        self.reason = reason


class ProviderError(MindError):
    def __init__(self, provider_name: str, reason: str):
        super().__init__(f'Provider "{provider_name}" error: {reason}')
        self.provider_name = provider_name
        self.reason = reason


class SecurityError(MindError):
    def __init__(self, reason: str, path: str | None = None):
        suffix = f" (path: {path})" if path else ""
        super().__init__(f"Security violation: {reason}{suffix}")
        self.reason = reason
        self.path = path


def is_mind_error(error: BaseException) -> bool:
    return isinstance(error, MindError)


def get_error_suggestion(error: MindError) -> str:
    """Human-readable next step for an error, shown to agents alongside the message."""
    if isinstance(error, ScriptExecutionError):
        return error.get_suggestion()
    if isinstance(error, MindNotFoundError):
        available = ", ".join(error.available_minds) or "none"
        return f"Check that the mind name is correct and available. Available minds: {available}"
    if isinstance(error, (MindValidationError, MindParseError)):
        return "Review the MIND.md frontmatter and ensure all required fields are present and valid."
    if isinstance(error, SecurityError):
        return "Ensure all paths are within the mind directory and do not contain path traversal attempts."
    if isinstance(error, MindResourceNotFoundError):
        return "Check the resource path relative to the mind directory (e.g. references/guide.md)."
    return "Check the error message and logs for more details."
