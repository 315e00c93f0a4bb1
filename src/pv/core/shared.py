#!/usr/bin/env python3
import json
import sys
from typing import Dict

COLORS = {
    'BLUE': '\033[94m',
    'GREEN': '\033[92m',
    'YELLOW': '\033[93m',
    'RED': '\033[91m',
    'ENDC': '\033[0m',
    'BOLD': '\033[1m',
}

OUTPUT_FORMATS = ('env', 'json')

def colorize(text: str, color: str) -> str:
    return f"{COLORS.get(color, '')}{text}{COLORS['ENDC']}" if sys.stdout.isatty() else text

def error_exit(message: str, code: int = 1):
    """Print an error message in red and exit with the specified code.

    Args:
        message: The error message to display (without "Error: " prefix)
        code: Exit code (default: 1)
    """
    print(colorize(f"Error: {message}", 'RED'))
    sys.exit(code)

def format_variables(values: Dict[str, str], format_type: str = 'env', export: bool = False) -> str:
    """Render KEY=value pairs for shell consumption, or as a JSON object"""
    if format_type == 'json':
        return json.dumps(values, indent=2)
    prefix = 'export ' if export else ''
    return '\n'.join(f"{prefix}{key}={value}" for key, value in values.items())
