from enum import Enum


class Color(str, Enum):
    SUCCESS = "\033[92m"
    ERROR = "\033[91m"
    INFO = "\033[94m"
    WARNING = "\033[93m"
    RESET = "\033[0m"


class LoadFailure(str, Enum):
    """Reason codes for a failed data load."""

    NOT_FOUND = "not_found"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    PARSE = "parse"
    INVALID = "invalid"


def colored(text: str, color: Color) -> str:
    return f"{color.value}{text}{Color.RESET.value}"


def echo(text: str, color: Color = Color.INFO) -> None:
    print(colored(text, color))


class DataLoadError(Exception):
    def __init__(self, document: str, reason: LoadFailure, detail: str):
        self.document = document
        self.reason = reason
        self.detail = detail
        super().__init__(f"Failed to load {document} ({reason.value}): {detail}")


class TemplateNotFoundError(FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"Page template not found: {path}")


class MissingContainerError(LookupError):
    def __init__(self, element_id: str):
        super().__init__(f"Page has no element with id: {element_id}")


class UnsupportedFormatError(ValueError):
    def __init__(self, path: str):
        super().__init__(f"Unsupported data format: {path}. Use .json or .yaml")


class InvalidSectionError(ValueError):
    def __init__(self, value: str):
        super().__init__(
            f"Invalid section geometry: {value}. Use ID:TOP:HEIGHT, e.g. about:0:800"
        )


def parse_section(value: str) -> tuple[str, float, float]:
    """Parse an ``id:top:height`` triple given on the command line."""
    parts = value.rsplit(":", 2)
    if len(parts) != 3 or not parts[0]:
        raise InvalidSectionError(value)
    try:
        return parts[0], float(parts[1]), float(parts[2])
    except ValueError as exc:
        raise InvalidSectionError(value) from exc
