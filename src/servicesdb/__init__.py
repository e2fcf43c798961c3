from .errors import ServiceErrorKind, ServiceFileError, ServiceLineError, ServicesError
from .service_entry import ServiceEntry, parse_line
from .service_parser import (
    DEFAULT_SERVICES_FILE,
    ServiceParser,
    parse_default,
    parse_lines,
    parse_service_file,
    parse_source,
)

__all__ = [
    "DEFAULT_SERVICES_FILE",
    "ServiceEntry",
    "ServiceErrorKind",
    "ServiceFileError",
    "ServiceLineError",
    "ServiceParser",
    "ServicesError",
    "parse_default",
    "parse_line",
    "parse_lines",
    "parse_service_file",
    "parse_source",
]
