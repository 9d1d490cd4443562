"""Conditional quote mutations.

A mutation carries both the change and the precondition the store must
re-check while applying it. Repositories apply the pair as one indivisible
operation and report a failed precondition by returning ``None``.
"""

from typing import Literal, Union

from pydantic import Field

from quotevote.domain.value.common import ValueObject


class VoterSetChange(ValueObject):
    """Add or remove one voter and move the counter with it.

    Precondition: the username is absent (add) or present (remove).
    """

    kind: Literal["voter_set_change"] = "voter_set_change"
    username: str = Field(min_length=1)
    add: bool

    @property
    def delta(self) -> int:
        """Counter change applied together with the membership change."""
        return 1 if self.add else -1


class TextReplacement(ValueObject):
    """Replace the quote text.

    Precondition: the quote has no votes.
    """

    kind: Literal["text_replacement"] = "text_replacement"
    text: str = Field(min_length=1)


QuoteMutation = Union[VoterSetChange, TextReplacement]
