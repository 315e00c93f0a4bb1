#!/usr/bin/env python3
"""
Version parser and packaging formatters for pv

Turns an upstream version identifier (tag-style "v1.14.4-rc1" or bare
"1.14.0~d14b18f1") into the version/release fields expected by RPM spec
files, Debian changelogs and tar/zip archive names.
"""

import re
from typing import Dict, Optional

from .config import get_logger

logger = get_logger(__name__)

NIGHTLY = 'nightly'

# Build kinds
RELEASE = 'release'
RELEASE_CANDIDATE = 'rc'
SNAPSHOT = 'snapshot'

# RPM release rules for release candidates
RC_STYLE_NUMBERED = 'numbered'  # 1.14.0-rc2 -> 1.14.0-0.2.rc2
RC_STYLE_SIMPLE = 'simple'      # 1.14.0-rc2 -> 1.14.0-0.rc2
RC_STYLES = (RC_STYLE_NUMBERED, RC_STYLE_SIMPLE)
DEFAULT_RC_STYLE = RC_STYLE_NUMBERED

VERSION_RE = re.compile(
    r'v?(?P<version>[^.\s]+\.[^.\s]+\.[^-~\s]+)(?:-(?P<rc>\w+)|~(?P<hash>\w+))?', re.ASCII)
RC_NUMBER_RE = re.compile(r'(\d+)$', re.ASCII)


class ParseError(ValueError):
    """Raised when a string does not look like a version we can package"""

    def __init__(self, value: str):
        super().__init__(f"could not parse version: {value}")
        self.value = value


class Version:
    """
    A parsed upstream version.

    Exactly one of four kinds: a final release, a release candidate
    (``release_candidate`` set), a development snapshot (``content_hash``
    set) or the ``nightly`` sentinel. Instances are read-only.
    """

    __slots__ = ('_version', '_rc', '_hash', '_rc_style')

    def __init__(self, version: str, release_candidate: str = '', content_hash: str = '',
                 rc_style: str = DEFAULT_RC_STYLE):
        if release_candidate and content_hash:
            raise ValueError("a version cannot carry both a release candidate and a content hash")
        if version == NIGHTLY and (release_candidate or content_hash):
            raise ValueError("nightly builds carry no release candidate or content hash")
        if rc_style not in RC_STYLES:
            raise ValueError(f"unknown release candidate style: {rc_style} (expected one of: {', '.join(RC_STYLES)})")
        self._version = version
        self._rc = release_candidate or ''
        self._hash = content_hash or ''
        self._rc_style = rc_style

    def __setattr__(self, name, value):
        if hasattr(self, '_rc_style'):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __repr__(self):
        return (f"Version(version={self._version!r}, release_candidate={self._rc!r}, "
                f"content_hash={self._hash!r})")

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return (self._version, self._rc, self._hash) == (other._version, other._rc, other._hash)

    def __hash__(self):
        return hash((self._version, self._rc, self._hash))

    @property
    def version(self) -> str:
        return self._version

    @property
    def release_candidate(self) -> str:
        return self._rc

    @property
    def content_hash(self) -> str:
        return self._hash

    @property
    def rc_style(self) -> str:
        return self._rc_style

    @property
    def kind(self) -> str:
        if self._version == NIGHTLY:
            return NIGHTLY
        if self._rc:
            return RELEASE_CANDIDATE
        if self._hash:
            return SNAPSHOT
        return RELEASE

    @property
    def is_nightly(self) -> bool:
        return self._version == NIGHTLY

    # ------------------------------------------------------------------
    # RPM
    # ------------------------------------------------------------------

    def rpm_version(self) -> str:
        return self._version

    def rpm_release(self) -> str:
        kind = self.kind
        if kind == RELEASE:
            return '1'
        if kind == RELEASE_CANDIDATE and self._rc_style == RC_STYLE_NUMBERED:
            match = RC_NUMBER_RE.search(self._rc)
            if match:
                return f"0.{match.group(1)}"
        return '0'

    def rpm_extra_ver(self) -> str:
        return self._hash or self._rc

    def rpm_full_version(self) -> str:
        kind = self.kind
        if kind == NIGHTLY:
            return NIGHTLY
        if kind == RELEASE_CANDIDATE:
            return f"{self._version}-{self.rpm_release()}.{self._rc}"
        if kind == SNAPSHOT:
            return f"{self._version}~{self._hash}-{self.rpm_release()}"
        return f"{self._version}-{self.rpm_release()}"

    # ------------------------------------------------------------------
    # Debian
    # ------------------------------------------------------------------

    def deb_version(self) -> str:
        if not self._rc and not self._hash:
            return self._version
        # only one of the two is ever non-empty
        return f"{self._version}~{self._rc}{self._hash}"

    def deb_revision(self) -> str:
        return '0' if self._hash or self.is_nightly else '1'

    def deb_full_version(self) -> str:
        if self.is_nightly:
            return NIGHTLY
        return f"{self.deb_version()}-{self.deb_revision()}"

    # ------------------------------------------------------------------
    # Archives
    # ------------------------------------------------------------------

    def archive_full_version(self) -> str:
        """Version used in tarball and zip names; archives carry no packaging revision."""
        if self.is_nightly:
            return NIGHTLY
        return self.deb_version()

    tar_full_version = archive_full_version
    zip_full_version = archive_full_version

    # ------------------------------------------------------------------
    # Output variables
    # ------------------------------------------------------------------

    def variables(self) -> Dict[str, str]:
        """All output variables, in the order they are printed"""
        return {name: getattr(self, method)() for name, method in VARIABLES.items()}

    def get_variable(self, name: str) -> str:
        """
        Look up one output variable by name (case-insensitive).

        Raises:
            KeyError: if the name is not a known variable
        """
        method = VARIABLES.get(name.upper())
        if method is None:
            raise KeyError(name)
        return getattr(self, method)()


# Output name -> Version method, in print order
VARIABLES = {
    'RPM_VERSION': 'rpm_version',
    'RPM_RELEASE': 'rpm_release',
    'RPM_EXTRAVER': 'rpm_extra_ver',
    'RPM_FULL_VERSION': 'rpm_full_version',
    'DEB_VERSION': 'deb_version',
    'DEB_REVISION': 'deb_revision',
    'DEB_FULL_VERSION': 'deb_full_version',
    'TAR_FULL_VERSION': 'tar_full_version',
    'ZIP_FULL_VERSION': 'zip_full_version',
}


def parse_version(value: str, rc_style: Optional[str] = None) -> Version:
    """
    Parse an upstream version identifier.

    Accepts "nightly", or a dotted triple with an optional leading "v" and
    either a "-<label>" release candidate or a "~<hash>" snapshot suffix.

    Args:
        value: Raw version string, e.g. "v1.14.4-rc1" or "1.15.0~d14b18f1"
        rc_style: RPM release rule for release candidates ('numbered' or 'simple')

    Returns:
        Version

    Raises:
        ParseError: if the string does not match the version grammar
    """
    rc_style = rc_style or DEFAULT_RC_STYLE
    raw = value.strip()

    if raw == NIGHTLY:
        logger.debug(f"Parsed {value!r} as nightly build")
        return Version(NIGHTLY, rc_style=rc_style)

    match = VERSION_RE.fullmatch(raw)
    if match is None:
        raise ParseError(value)

    parsed = Version(match.group('version'), match.group('rc') or '', match.group('hash') or '',
                     rc_style=rc_style)
    logger.debug(f"Parsed {value!r} as {parsed.kind} build: {parsed!r}")
    return parsed
