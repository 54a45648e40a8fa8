"""aocharness: a command-line harness for daily puzzle solutions.

Pick a day, locate its input file, run the registered solution's parse and
part steps, and optionally time each of them.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
