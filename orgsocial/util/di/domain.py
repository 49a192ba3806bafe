"""Domain layer DI providers."""

from dishka import Scope, provide

from orgsocial.config import Settings
from orgsocial.domain.service import (
    ComposeService,
    FeedFetcher,
    FeedService,
    NotificationService,
    PollService,
    ThreadService,
)
from orgsocial.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services hold no per-request state, so one instance serves the
    whole application.
    """

    scope = Scope.APP

    @provide
    def get_thread_service(self) -> ThreadService:
        """Provide threading domain service."""
        return ThreadService()

    @provide
    def get_poll_service(self) -> PollService:
        """Provide poll domain service."""
        return PollService()

    @provide
    def get_notification_service(self) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService()

    @provide
    def get_feed_service(self, feed_fetcher: FeedFetcher) -> FeedService:
        """Provide feed domain service."""
        return FeedService(feed_fetcher=feed_fetcher)

    @provide
    def get_compose_service(self, settings: Settings) -> ComposeService:
        """Provide compose domain service."""
        return ComposeService(client_label=settings.compose.client_label)
