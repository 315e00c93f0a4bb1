"""
Version information for the pv package.

This file is the single source of truth for the package version.
It is read by pyproject.toml and can be updated programmatically
during the release process.
"""

__version__ = "0.3.0"

def _parse_version(version_string):
    """Numeric (major, minor, patch) tuple, ignoring any pre-release suffix."""
    parts = []
    for part in version_string.split('.')[:3]:
        digits = ''.join(char for char in part if char.isdigit())
        parts.append(int(digits) if digits else 0)
    while len(parts) < 3:
        parts.append(0)
    return tuple(parts)

__version_info__ = _parse_version(__version__)
