#!/usr/bin/env python3

from logging import getLogger

from zenlib.util import get_kwargs

from . import ServiceParser, ServicesError


def main():
    args = [
        {"flags": ["services_file"], "nargs": "?", "help": "Path to the services file, defaults to /etc/services"},
        {"flags": ["-i", "--ignore-errors"], "action": "store_true", "default": None, "help": "Skip malformed lines"},
        {"flags": ["-c", "--config-file"], "help": "Path to the configuration file"},
        {"flags": ["-p", "--protocol"], "help": "Only show services using this protocol"},
    ]
    kwargs = get_kwargs(package="servicesdb", description="services(5) database parser", arguments=args)
    logger = kwargs.get("logger") or getLogger("servicesdb")
    protocol = kwargs.pop("protocol", None)

    try:
        parser = ServiceParser(**kwargs)
    except ServicesError as e:
        logger.error(e)
        raise SystemExit(1)

    for entry in parser.entries:
        if protocol and entry.protocol != protocol:
            continue
        print(f"{entry.name}\t{entry.port}/{entry.protocol}\t{' '.join(entry.aliases)}")


if __name__ == "__main__":
    main()
