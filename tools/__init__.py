"""
Tools — Command implementations.

Each command has its own module with the implementation logic.
cli.py provides thin argparse wrappers that call into these.

- fetch: Full folder listing to a JSON snapshot
- browse: Interactive folder navigation with multi-select
"""

from .fetch import do_fetch
from .browse import do_browse

__all__ = ["do_fetch", "do_browse"]
