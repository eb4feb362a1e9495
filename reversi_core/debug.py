import os


def debug_enabled() -> bool:
    """True when REVERSI_DEBUG is set to 1/true/yes/on."""
    return os.getenv('REVERSI_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
