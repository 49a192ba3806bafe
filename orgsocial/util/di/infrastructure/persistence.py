"""Persistence infrastructure providers."""

from dishka import Scope, provide

from orgsocial.config import Settings
from orgsocial.domain.repository import DocumentRepository
from orgsocial.persistence.repository import FileDocumentRepository
from orgsocial.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider backed by the local document file."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_document_repository(self, settings: Settings) -> DocumentRepository:
        """Provide file document repository."""
        return FileDocumentRepository(
            path=settings.document.path,
            source=settings.document.source_url,
            reparse_policy=settings.parsing.reparse_policy,
        )
