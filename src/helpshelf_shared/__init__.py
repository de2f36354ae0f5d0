"""
helpshelf_shared - shared models, constants, and configuration for helpshelf.

Usage:
    from helpshelf_shared.config import settings
    from helpshelf_shared.models import Resource
    from helpshelf_shared.store import read_resources, write_resources
    from helpshelf_shared.constants import SUPPORT_NEED_LABELS, FEELING_PRESETS
"""

__version__ = "0.1.0"
