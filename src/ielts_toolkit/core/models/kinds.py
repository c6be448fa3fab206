"""
Module: kinds

Purpose:
    Provides QuestionKind - the discriminator tag shared by every question
    variant, group marker and answer matcher. Also owns the mapping from the
    numeric ``question_type`` used by attempt payloads.

Key Functions:
    - QuestionKind.parse(value): Resolve a member, string value or wire index
    - QuestionKind.wire_index: Numeric tag used by the platform API

Dependencies:
    - enum (std)

Used By:
    - core.models.questions
    - core.models.groups
    - scoring.matcher
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class UnknownQuestionKindError(ValueError):
    """Raised when a question carries a kind tag outside the four known variants."""
    
    def __init__(self, value: object):
        super().__init__(f"Unknown question kind: {value!r}")
        self.value = value


class QuestionKind(str, Enum):
    """Kind of question. Groups are homogeneous in kind."""
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_IN_BLANK = "fill_in_blank"
    MATCHING = "matching"
    DRAG_AND_DROP = "drag_and_drop"
    
    def __str__(self) -> str:
        return self.value
    
    @property
    def wire_index(self) -> int:
        """Numeric ``question_type`` for this kind in attempt payloads."""
        return _WIRE_ORDER.index(self)
    
    @classmethod
    def parse(cls, value: Union[QuestionKind, str, int]) -> QuestionKind:
        """
        Resolve a kind from a member, its string value, or a wire index.
        
        Args:
            value: QuestionKind, e.g. "matching", or numeric tag 0-3
            
        Returns:
            Matching QuestionKind
            
        Raises:
            UnknownQuestionKindError: If value names no known kind
        
        Example:
            >>> QuestionKind.parse(3)
            <QuestionKind.DRAG_AND_DROP: 'drag_and_drop'>
        """
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True must not resolve to FILL_IN_BLANK
        if isinstance(value, int) and not isinstance(value, bool):
            if 0 <= value < len(_WIRE_ORDER):
                return _WIRE_ORDER[value]
            raise UnknownQuestionKindError(value)
        if isinstance(value, str):
            normalised = value.strip().lower()
            if normalised.isdigit():
                return cls.parse(int(normalised))
            if normalised in _ALIASES:
                return _ALIASES[normalised]
            for kind in cls:
                if kind.value == normalised:
                    return kind
        raise UnknownQuestionKindError(value)


# Order fixed by the platform API: 0=MC, 1=fill-in, 2=matching, 3=drag-and-drop
_WIRE_ORDER = (
    QuestionKind.MULTIPLE_CHOICE,
    QuestionKind.FILL_IN_BLANK,
    QuestionKind.MATCHING,
    QuestionKind.DRAG_AND_DROP,
)

# Spellings used by the content authoring API
_ALIASES = {
    "fill_in_the_blanks": QuestionKind.FILL_IN_BLANK,
    "fill_in_the_blank": QuestionKind.FILL_IN_BLANK,
}
