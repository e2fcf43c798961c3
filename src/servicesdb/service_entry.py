"""
A single line of the services database, see services(5).
Each entry holds the service name, then the port and protocol, then any aliases:
    http            80/tcp          www     # WorldWideWeb HTTP
"""

__version__ = "1.0.0"

from zenlib.types import validatedDataclass

from .errors import ServiceErrorKind, ServiceLineError

COMMENT_MARKER = "#"


def is_comment(token):
    return token.startswith(COMMENT_MARKER)


def parse_port(line, port):
    """Only plain ASCII digits are accepted, int() alone would allow signs, underscores and whitespace"""
    if not port.isascii() or not port.isdigit():
        raise ServiceLineError(line, ServiceErrorKind.MALFORMED_PORT)
    return int(port)


def parse_line(line):
    """Parses a single, non-empty, non-comment line into a ServiceEntry.

    Raises ServiceLineError with the matching ServiceErrorKind when the line is malformed.
    Tokens past the first one starting with '#' are the trailing comment and are discarded.
    """
    tokens = line.split()
    if not tokens:
        raise ValueError("Cannot parse a service entry from an empty line")

    name, *fields = tokens
    if is_comment(name):
        raise ServiceLineError(line, ServiceErrorKind.MALFORMED_INPUT)

    if not fields:
        raise ServiceLineError(line, ServiceErrorKind.MISSING_PORT_PROTOCOL_FIELD)
    port_protocol, *alias_tokens = fields

    port, separator, protocol = port_protocol.partition("/")
    if is_comment(port):
        raise ServiceLineError(line, ServiceErrorKind.MISSING_PORT_PROTOCOL_FIELD)
    port = parse_port(line, port)

    # "80" and "80/" both lack a protocol
    if not separator or not protocol or is_comment(protocol):
        raise ServiceLineError(line, ServiceErrorKind.MISSING_PROTOCOL_FIELD)

    aliases = []
    for alias in alias_tokens:
        if is_comment(alias):
            break
        aliases.append(alias)

    return ServiceEntry(name=name, port=port, protocol=protocol, aliases=tuple(aliases))


@validatedDataclass
class ServiceEntry:
    name: str
    port: int
    protocol: str
    aliases: tuple = ()

    @classmethod
    def from_line(cls, line):
        return parse_line(line)

    @property
    def names(self):
        """The service name followed by its aliases"""
        yield self.name
        yield from self.aliases
