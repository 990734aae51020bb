"""Shared pytest fixtures and configuration."""

import pytest

from s3kanban.board_store import Card, CardStatus


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def make_card():
    """Factory for cards with sensible defaults."""

    def _make(
        card_id: str,
        status: CardStatus = CardStatus.TODO,
        position: int = 0,
        title: str | None = None,
        description: str = "",
    ) -> Card:
        return Card(
            id=card_id,
            title=title if title is not None else f"Card {card_id}",
            description=description,
            status=status,
            position=position,
        )

    return _make
