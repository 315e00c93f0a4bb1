"""pv - derive RPM, Debian and archive version strings from an upstream version"""

from pv._version import __version__
from pv.core.version import ParseError, Version, parse_version

__all__ = ['__version__', 'ParseError', 'Version', 'parse_version']
