"""Unit tests for GetThreadsUseCase."""

import pytest

from orgsocial.application.usecase.timeline import GetThreadsRequest, GetThreadsUseCase
from orgsocial.domain.error import NotFoundError
from orgsocial.domain.service import FeedService, PollService, ThreadService
from orgsocial.persistence.repository import FileDocumentRepository
from orgsocial.adapter.network.client import MockFeedFetcher
from tests.di.documents import HELLO_ID, OWN_SOURCE, POLL_ID
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetThreadsUseCase:
    """Tests for GetThreadsUseCase."""

    @pytest.mark.asyncio
    async def test_threads_own_and_followed_posts(self, unit_env):
        """Should thread followed replies under the user's posts."""
        # Arrange
        use_case = await unit_env.get(GetThreadsUseCase)

        # Act
        response = await use_case.execute(GetThreadsRequest())

        # Assert
        assert response.thread_count == 2
        assert response.total_posts == 4
        poll_thread, hello_thread = response.threads
        assert poll_thread.post.full_id == f"{OWN_SOURCE}#{POLL_ID}"
        assert hello_thread.post.full_id == f"{OWN_SOURCE}#{HELLO_ID}"
        assert hello_thread.children[0].post.author == "bob"
        assert hello_thread.children[0].depth == 1

    @pytest.mark.asyncio
    async def test_poll_tallied_from_replies(self, unit_env):
        """Should attach the tally of a poll's direct replies."""
        # Arrange
        use_case = await unit_env.get(GetThreadsUseCase)

        # Act
        response = await use_case.execute(GetThreadsRequest())

        # Assert
        poll = response.threads[0].poll
        assert poll is not None
        assert [(o.text, o.votes) for o in poll.options] == [("Emacs", 1), ("Vim", 0)]
        assert response.threads[1].poll is None

    @pytest.mark.asyncio
    async def test_own_posts_only(self, unit_env):
        """Should skip fetching when followed documents are excluded."""
        # Arrange
        use_case = await unit_env.get(GetThreadsUseCase)

        # Act
        response = await use_case.execute(GetThreadsRequest(include_followed=False))

        # Assert
        assert response.thread_count == 2
        assert response.total_posts == 2
        assert all(thread.children == [] for thread in response.threads)

    @pytest.mark.asyncio
    async def test_tokens_exposed(self, unit_env):
        """Should include the derived tokens of every post."""
        # Arrange
        use_case = await unit_env.get(GetThreadsUseCase)

        # Act
        response = await use_case.execute(GetThreadsRequest())

        # Assert
        hello = response.threads[1].post
        assert [token.kind for token in hello.tokens] == ["plain", "bold"]

    @pytest.mark.asyncio
    async def test_missing_document(self, tmp_path):
        """Should raise NotFoundError when the user's document is absent."""
        # Arrange
        use_case = GetThreadsUseCase(
            document_repository=FileDocumentRepository(tmp_path / "absent.org"),
            feed_service=FeedService(MockFeedFetcher()),
            thread_service=ThreadService(),
            poll_service=PollService(),
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadsRequest())
