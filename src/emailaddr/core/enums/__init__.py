"""Core enums package.

Usage:
    from emailaddr.core.enums import ErrorCode, Environment, GrammarLevel
"""

from emailaddr.core.enums.environment import Environment
from emailaddr.core.enums.error_code import ErrorCode
from emailaddr.core.enums.grammar_level import GrammarLevel

__all__ = ["ErrorCode", "Environment", "GrammarLevel"]
