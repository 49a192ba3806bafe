"""Application layer DI providers."""

from dishka import Scope, provide

from orgsocial.application.usecase.document import (
    ParseDocumentUseCase,
    SerializeDocumentUseCase,
)
from orgsocial.application.usecase.notification import GetNotificationsUseCase
from orgsocial.application.usecase.poll import VoteOnPollUseCase
from orgsocial.application.usecase.post import CreatePostUseCase, CreateReplyUseCase
from orgsocial.application.usecase.timeline import GetThreadsUseCase
from orgsocial.config import Settings
from orgsocial.domain.repository import DocumentRepository
from orgsocial.domain.service import (
    ComposeService,
    FeedService,
    NotificationService,
    PollService,
    ThreadService,
)
from orgsocial.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Document use cases
    @provide(scope=Scope.REQUEST)
    def get_parse_document_use_case(self, settings: Settings) -> ParseDocumentUseCase:
        """Provide parse document use case."""
        return ParseDocumentUseCase(reparse_policy=settings.parsing.reparse_policy)

    @provide(scope=Scope.REQUEST)
    def get_serialize_document_use_case(self) -> SerializeDocumentUseCase:
        """Provide serialize document use case."""
        return SerializeDocumentUseCase()

    # Timeline use cases
    @provide(scope=Scope.REQUEST)
    def get_get_threads_use_case(
        self,
        document_repository: DocumentRepository,
        feed_service: FeedService,
        thread_service: ThreadService,
        poll_service: PollService,
        settings: Settings,
    ) -> GetThreadsUseCase:
        """Provide get threads use case."""
        return GetThreadsUseCase(
            document_repository=document_repository,
            feed_service=feed_service,
            thread_service=thread_service,
            poll_service=poll_service,
            default_timeout=settings.network.timeout_seconds,
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_get_notifications_use_case(
        self,
        document_repository: DocumentRepository,
        feed_service: FeedService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> GetNotificationsUseCase:
        """Provide get notifications use case."""
        return GetNotificationsUseCase(
            document_repository=document_repository,
            feed_service=feed_service,
            notification_service=notification_service,
            default_timeout=settings.network.timeout_seconds,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        compose_service: ComposeService,
        document_repository: DocumentRepository,
        settings: Settings,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            compose_service=compose_service,
            document_repository=document_repository,
            source=settings.document.source_url,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self,
        compose_service: ComposeService,
        document_repository: DocumentRepository,
        settings: Settings,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            compose_service=compose_service,
            document_repository=document_repository,
            source=settings.document.source_url,
        )

    # Poll use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_on_poll_use_case(
        self,
        compose_service: ComposeService,
        feed_service: FeedService,
        poll_service: PollService,
        document_repository: DocumentRepository,
        settings: Settings,
    ) -> VoteOnPollUseCase:
        """Provide vote on poll use case."""
        return VoteOnPollUseCase(
            compose_service=compose_service,
            feed_service=feed_service,
            poll_service=poll_service,
            document_repository=document_repository,
            source=settings.document.source_url,
            default_timeout=settings.network.timeout_seconds,
        )
