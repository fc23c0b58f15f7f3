"""Exceptions raised while loading manuscripts and reading configuration.

Each error carries a short message plus optional context and a suggestion,
rendered together by str(). Editing preconditions (no cursor staged, no
chapter below to merge with) are reported through the edit session's notify
callback instead and never raise.
"""


class TxtChaptersError(Exception):
    """Base exception for txtchapters errors.

    Attributes:
        message: What went wrong
        suggestion: How the reader can fix it (optional)
        context: Extra detail such as the path or values involved (optional)
    """

    def __init__(self, message: str, suggestion: str | None = None, context: str | None = None):
        self.message = message
        self.suggestion = suggestion
        self.context = context
        super().__init__(self.render())

    def render(self) -> str:
        lines = [f"Error: {self.message}"]
        if self.context:
            lines.append(f"Context: {self.context}")
        if self.suggestion:
            lines.append(f"Suggestion: {self.suggestion}")
        return "\n".join(lines)


class ManuscriptError(TxtChaptersError):
    """A problem with the text file handed to the segmenter."""

    def __init__(self, file_path: str, message: str, suggestion: str, context: str | None = None):
        self.file_path = file_path
        super().__init__(message, suggestion=suggestion, context=context)


class SourceNotFoundError(ManuscriptError):
    """The text file does not exist or is not a regular file."""

    def __init__(self, file_path: str, file_type: str = "text file"):
        super().__init__(
            file_path,
            message=f"{file_type.capitalize()} not found: {file_path}",
            suggestion=f"Check that the {file_type} exists and the path is correct.",
        )


class InvalidFileFormatError(ManuscriptError):
    """The file is not a plain-text document."""

    def __init__(
        self,
        file_path: str,
        expected_formats: list[str],
        actual_format: str | None = None,
    ):
        self.expected_formats = expected_formats
        shown = f" '{actual_format}'" if actual_format else ""
        super().__init__(
            file_path,
            message=f"Unsupported file type{shown}: {file_path}",
            suggestion="Please upload a valid text file "
            f"({', '.join(expected_formats)}).",
        )


class TextDecodingError(ManuscriptError):
    """None of the configured encodings could decode the file."""

    def __init__(self, file_path: str, encodings: list[str]):
        self.encodings = encodings
        super().__init__(
            file_path,
            message=f"Could not decode {file_path}",
            suggestion="Add the file's encoding to 'encodings' in config.json.",
            context=f"Tried encodings: {', '.join(encodings)}",
        )


class ConfigurationError(TxtChaptersError):
    """A config.json value or command line argument is unusable."""

    def __init__(self, message: str, parameter: str | None = None):
        self.parameter = parameter
        if parameter:
            suggestion = f"Check the value of '{parameter}'."
        else:
            suggestion = "Check your command line arguments or config.json."
        super().__init__(message, suggestion=suggestion)


# Builtin errors that can escape file handling, with a hint for each
_BUILTIN_HINTS: list[tuple[type[BaseException], str, str]] = [
    (FileNotFoundError, "File not found", "Check that the file path is correct."),
    (PermissionError, "Permission denied", "Check the file permissions."),
    (UnicodeDecodeError, "Could not decode text", "Save the file as UTF-8 and try again."),
]


def format_error_for_user(error: Exception) -> str:
    """Render any exception as a message fit for the terminal or a TUI toast."""
    if isinstance(error, TxtChaptersError):
        return str(error)

    for error_type, label, hint in _BUILTIN_HINTS:
        if isinstance(error, error_type):
            return f"Error: {label} - {error}\nSuggestion: {hint}"

    return f"Error ({type(error).__name__}): {error}"
