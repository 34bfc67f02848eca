"""
SQL rendering for row types.
"""

from .maker import SqlMaker, Statement

__all__ = ["SqlMaker", "Statement"]
