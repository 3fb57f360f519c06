from .specs.base_configuration import configspec
from .resolve import resolve_configuration

from .exceptions import (
    ConfigFieldMissingException,
    ConfigValueCannotBeCoercedException,
    ConfigFileNotFoundException,
)


__all__ = [
    "configspec",
    "resolve_configuration",
    "ConfigFieldMissingException",
    "ConfigValueCannotBeCoercedException",
    "ConfigFileNotFoundException",
]
