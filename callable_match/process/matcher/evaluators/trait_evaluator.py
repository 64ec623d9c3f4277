# Path: callable_match/process/matcher/evaluators/trait_evaluator.py
"""
Trait Matchers

Matchers for the boolean flags of a callable member: final, open,
abstract and suspendable. All four share one implementation that reads
the flag named in TRAIT_ATTRIBUTES.

No cross-flag validation happens here. A member reported as both final
and open is the loader's concern, not the matcher's.
"""

from typing import Union

from .base_evaluator import Matcher
from ..models.callable_descriptor import CallableDescriptor
from ..models.match_result import MatchResult
from ....constants import Messages, Trait, TRAIT_ATTRIBUTES


class TraitMatcher(Matcher):
    """
    Matches members that carry a boolean trait.

    Example:
        TraitMatcher(Trait.ABSTRACT).test(Shape.area).passed  # True
    """

    def __init__(self, trait: Union[Trait, str]):
        """
        Initialize matcher.

        Args:
            trait: Trait or its string value ('final', 'open', ...)
        """
        self.trait = Trait(trait)
        self.attribute = TRAIT_ATTRIBUTES[self.trait]
        super().__init__()

    @property
    def matcher_type(self) -> str:
        return self.trait.value

    def evaluate(self, descriptor: CallableDescriptor) -> MatchResult:
        return MatchResult(
            passed=bool(getattr(descriptor, self.attribute)),
            failure_message=Messages.TRAIT.format(
                member=descriptor, trait=self.trait.value
            ),
            negated_failure_message=Messages.NOT_TRAIT.format(
                member=descriptor, trait=self.trait.value
            ),
        )

    def __repr__(self) -> str:
        return f"TraitMatcher({self.trait.value!r})"


def be_final() -> TraitMatcher:
    """Matcher for members that cannot be overridden."""
    return TraitMatcher(Trait.FINAL)


def be_open() -> TraitMatcher:
    """Matcher for members that can be overridden."""
    return TraitMatcher(Trait.OPEN)


def be_abstract() -> TraitMatcher:
    """Matcher for abstract members."""
    return TraitMatcher(Trait.ABSTRACT)


def be_suspendable() -> TraitMatcher:
    """Matcher for coroutine functions."""
    return TraitMatcher(Trait.SUSPENDABLE)


__all__ = [
    'TraitMatcher',
    'be_final',
    'be_open',
    'be_abstract',
    'be_suspendable',
]
