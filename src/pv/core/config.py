#!/usr/bin/env python3
"""
pv core configuration - logging setup and environment-driven settings
"""

import os
import sys
import logging
from pathlib import Path
from typing import Dict, Optional


# ============================================================================
# LOGGING
# ============================================================================

def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the pv command.

    Logs always go to stderr so they never mix with the values printed on
    stdout, which packaging scripts capture.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional file path to write logs to
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    log_format = (
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        if verbose else
        '%(levelname)s: %(message)s'
    )

    handlers = [
        logging.StreamHandler(sys.stderr)
    ]
    handlers[0].setFormatter(logging.Formatter(log_format))

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        ))
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True  # Force reconfiguration if already configured
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def is_verbose_enabled() -> bool:
    """True if the root logger is set to DEBUG level"""
    return logging.getLogger().isEnabledFor(logging.DEBUG)


# ============================================================================
# CONFIG LOADER
# ============================================================================

class ConfigError(Exception):
    """Raised when a configuration value is invalid"""
    pass

class Config:
    """Configuration manager for pv"""

    # Default configuration values
    DEFAULTS = {
        'PV_RC_STYLE': 'numbered',
        'PV_VERBOSE': 'false',
        'PV_LOG_FILE': None,
    }

    def __init__(self):
        self._config: Dict[str, str] = {}
        self._loaded = False
        self.logger = get_logger(__name__)

    def load(self):
        """Load configuration from defaults and environment variables"""
        if self._loaded: return
        self._load_defaults()
        self._load_from_environment()
        self._loaded = True

    def _load_defaults(self):
        self._config = {k: v for k, v in self.DEFAULTS.items() if v is not None}

    def _load_from_environment(self):
        self._config.update({k: v for k, v in os.environ.items() if k in self.DEFAULTS and v != ''})

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a configuration value"""
        if not self._loaded: self.load()
        return self._config.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key)
        return value.lower() in ('true', '1', 'yes', 'on') if value is not None else default

    def get_path(self, key: str, default: Optional[str] = None) -> Optional[Path]:
        value = self.get(key, default)
        return Path(os.path.expandvars(os.path.expanduser(value))) if value else None

    def get_rc_style(self) -> str:
        # Local import: version.py imports this module for get_logger
        from .version import RC_STYLES
        value = self.get('PV_RC_STYLE').strip().lower()
        if value not in RC_STYLES:
            raise ConfigError(f"PV_RC_STYLE must be one of {', '.join(RC_STYLES)}, got: {value}")
        return value

    def print_config(self):
        """Log current configuration (for debugging)"""
        if not self._loaded: self.load()

        self.logger.debug("Current configuration:")
        for key in self.DEFAULTS:
            self.logger.debug(f"  {key}={self._config.get(key, '<NOT SET>')}")

# Global config instance
_config = Config()

def get_config() -> Config:
    """Get the global configuration instance"""
    return _config

def load_config():
    """Load configuration (safe to call multiple times)"""
    _config.load()

# Convenience functions
def get(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get a configuration value"""
    return _config.get(key, default)

def get_bool(key: str, default: bool = False) -> bool:
    return _config.get_bool(key, default)

def get_path(key: str, default: Optional[str] = None) -> Optional[Path]:
    return _config.get_path(key, default)

def get_rc_style() -> str:
    return _config.get_rc_style()
