"""
Output of generated Java sources.
"""

from .writer import WriteResult, Writer

__all__ = ["WriteResult", "Writer"]
