"""
TorusSQL Compiler Options
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CompileOptions:
    """Settings shared by the parser and the compile entry points."""

    # Require a terminating ';' followed by end of input
    require_semicolon: bool = False
