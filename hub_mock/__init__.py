"""Mock server package (STX-HUB COA search + master-data import APIs).

Internal testing only: static/dummy responses mimic HUB behavior so callers
can exercise success, empty, partial and failure outcomes on demand.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
