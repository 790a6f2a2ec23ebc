"""matchkit.logic - Logic layer for matchkit.

Contains the matcher contract and the algorithms behind container matching.
"""

from matchkit.logic.matcher import Matcher, MatchPolicy, MatchResult
from matchkit.logic.support import MatchMatrix, edit_script

__all__ = [
    "Matcher",
    "MatchPolicy",
    "MatchResult",
    "MatchMatrix",
    "edit_script",
]
