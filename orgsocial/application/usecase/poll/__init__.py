"""Poll use cases."""

from .vote_on_poll import VoteOnPollRequest, VoteOnPollResponse, VoteOnPollUseCase

__all__ = [
    "VoteOnPollRequest",
    "VoteOnPollResponse",
    "VoteOnPollUseCase",
]
