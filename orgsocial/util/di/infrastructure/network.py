"""Network infrastructure providers."""

from dishka import Scope, provide

from orgsocial.adapter.network.client import HttpxFeedFetcher
from orgsocial.config import Settings
from orgsocial.domain.service import FeedFetcher
from orgsocial.util.di.base import ProviderBase
from orgsocial.util.error import ConfigurationError


class NetworkProvider(ProviderBase):
    """Network component base."""

    __mock_component__ = "network"


class ProdNetworkProvider(NetworkProvider):
    """Production network provider fetching documents over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_feed_fetcher(self, settings: Settings) -> FeedFetcher:
        """Provide HTTP feed fetcher.

        Raises:
            ConfigurationError: If the configured timeout is not positive
        """
        timeout = settings.network.timeout_seconds
        if timeout is not None and timeout <= 0:
            raise ConfigurationError(
                "network.timeout_seconds", "must be positive or unset"
            )

        return HttpxFeedFetcher(
            user_agent=settings.network.user_agent,
            default_timeout=timeout,
            reparse_policy=settings.parsing.reparse_policy,
        )
