from enum import Enum

from zenlib.util import colorize


class ServiceErrorKind(Enum):
    INVALID_SOURCE = "File does not exist or is not a regular file"
    OPEN_FAILED = "Could not open file"
    READ_FAILED = "Error reading file"
    MALFORMED_INPUT = "Malformed input"
    MISSING_PORT_PROTOCOL_FIELD = "Could not find port and protocol field"
    MALFORMED_PORT = "Malformed port"
    MISSING_PROTOCOL_FIELD = "Could not find protocol"


class ServicesError(Exception):
    """Base for all services database errors, self.kind is a ServiceErrorKind"""

    def __init__(self, kind):
        self.kind = kind

    @property
    def message(self):
        return self.kind.value


class ServiceLineError(ServicesError):
    def __init__(self, line, kind):
        super().__init__(kind)
        self.line = line

    def __str__(self):
        return f"{self.message}: {colorize(self.line, 'yellow')}"


class ServiceFileError(ServicesError):
    def __init__(self, path, kind):
        super().__init__(kind)
        self.path = path

    def __str__(self):
        return f"[{self.path}] {colorize(self.message, 'red')}"
