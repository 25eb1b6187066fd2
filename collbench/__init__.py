"""
Micro-benchmark harness comparing list, map and set backings.

Run ``collbench --menu list|map|set`` and type a test number at the prompt.
"""

from .main import main

__all__ = ["main"]
