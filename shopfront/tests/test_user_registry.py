from __future__ import annotations

from shopfront.domain.users.entities import User
from shopfront.infrastructure.repositories.memory import InMemoryUserRegistry


def test_lookup_by_username_and_email(users: list[User]) -> None:
    registry = InMemoryUserRegistry(users)

    assert len(registry) == 2
    assert registry.find_by_username("alice") is users[0]
    assert registry.find_by_email("bob@example.com") is users[1]
    assert registry.find_by_username("carol") is None
    assert registry.find_by_email("carol@example.com") is None


def test_duplicate_username_keeps_first_and_warns(log_messages: list[str]) -> None:
    first = User(username="alice", email="alice@example.com", password="secret")
    second = User(username="alice", email="other@example.com", password="other")

    registry = InMemoryUserRegistry([first, second])

    assert len(registry) == 1
    assert registry.find_by_username("alice") is first
    assert registry.find_by_email("other@example.com") is None
    assert any("duplicate username=alice" in m for m in log_messages)


def test_duplicate_email_resolves_to_first_user_and_warns(log_messages: list[str]) -> None:
    first = User(username="alice", email="shared@example.com", password="secret")
    second = User(username="carol", email="shared@example.com", password="pw")

    registry = InMemoryUserRegistry([first, second])

    assert len(registry) == 2
    assert registry.find_by_username("carol") is second
    assert registry.find_by_email("shared@example.com") is first
    assert any("duplicate email=shared@example.com" in m for m in log_messages)
