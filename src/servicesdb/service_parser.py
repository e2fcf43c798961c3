"""
Parses the system services database.
This is typically located at /etc/services
Blank lines and lines starting with '#' are skipped, every other line is parsed into a ServiceEntry.
"""

__version__ = "1.1.0"

from os.path import exists, isfile
from tomllib import load

from zenlib.logging import loggify
from zenlib.util import colorize

from .errors import ServiceErrorKind, ServiceFileError, ServiceLineError
from .service_entry import is_comment, parse_line

DEFAULT_SERVICES_FILE = "/etc/services"


def parse_lines(lines, ignore_errors=False):
    """Parses an iterable of lines and returns the list of ServiceEntries, in order.

    If ignore_errors is set, malformed lines are dropped,
    otherwise the ServiceLineError for the first malformed line is raised.
    """
    entries = []
    for line in lines:
        line = line.lstrip()
        if not line or is_comment(line):
            continue
        try:
            entries.append(parse_line(line))
        except ServiceLineError:
            if not ignore_errors:
                raise
    return entries


def _read_lines(service_file, f):
    """Yields lines from an open file, wrapping read errors"""
    try:
        yield from f
    except (OSError, UnicodeDecodeError) as e:
        raise ServiceFileError(service_file, ServiceErrorKind.READ_FAILED) from e


def parse_service_file(service_file, ignore_errors=False):
    """Parses the service file and returns the list of ServiceEntries.
    Read errors are always raised, ignore_errors only applies to malformed lines."""
    if not exists(service_file) or not isfile(service_file):
        raise ServiceFileError(service_file, ServiceErrorKind.INVALID_SOURCE)

    try:
        f = open(service_file, "r", encoding="utf-8")
    except OSError as e:
        raise ServiceFileError(service_file, ServiceErrorKind.OPEN_FAILED) from e

    with f:
        return parse_lines(_read_lines(service_file, f), ignore_errors)


def parse_default(ignore_errors=False):
    return parse_service_file(DEFAULT_SERVICES_FILE, ignore_errors)


parse_source = parse_service_file


@loggify
class ServiceParser:
    """Parses a services file into self.entries
    self.services maps protocol names to a dict of port numbers to service names.

    Settings can be loaded from a toml config file with the services_file and ignore_errors keys,
    arguments which are not None take precedence over the config.
    """

    def __init__(self, services_file=None, ignore_errors=None, config_file=None, *args, **kwargs):
        self.services_file = DEFAULT_SERVICES_FILE
        self.ignore_errors = False
        if config_file:
            self.load_config(config_file)
        if services_file is not None:
            self.services_file = services_file
        if ignore_errors is not None:
            self.ignore_errors = ignore_errors
        self.entries = self.parse_service_file()

    def load_config(self, config_file):
        with open(config_file, "rb") as f:
            self.config = load(f)

        for attr in ["services_file", "ignore_errors"]:
            if (value := self.config.get(attr)) is not None:
                self.logger.info(f"[{attr}] Setting from config: {value}")
                setattr(self, attr, value)

    def parse_service_file(self):
        self.logger.debug("Parsing services file: %s", self.services_file)
        entries = parse_service_file(self.services_file, self.ignore_errors)
        self.logger.info("[%s] Parsed %s service entries", self.services_file, colorize(len(entries), "green"))
        return entries

    @property
    def services(self):
        services = {}
        for entry in self.entries:
            services.setdefault(entry.protocol, {}).setdefault(entry.port, entry.name)
        return services

    def get_service(self, port, protocol):
        """Returns the service name for a port and protocol, or None"""
        return self.services.get(protocol, {}).get(port)

    def get_port(self, name, protocol):
        """Returns the port for a service name or alias and protocol, or None"""
        for entry in self.entries:
            if entry.protocol == protocol and name in entry.names:
                return entry.port

    def __str__(self):
        return f"ServiceParser(services_file={self.services_file}, ignore_errors={self.ignore_errors}, entries={len(self.entries)})"
