"""Environment configuration helpers."""

from doomfire.utilities.env.diagnostics import LoggingConfiguration
from doomfire.utilities.env.host import HostConfiguration


class Configuration(HostConfiguration, LoggingConfiguration):
    """Aggregate environment configuration helpers."""
