"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from oer.util.di import PROVIDERS, Component


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where swappable components default to mocks.

    Args:
        unmock: Components to run with production implementations. Unmocking
            "persistence" needs a migrated PostgreSQL at DATABASE__URL.

    Raises:
        ValueError: If unmock names an unknown component

    Examples:
        # Unit and E2E tests - in-memory repositories
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()

    known = {base.__mock_component__ for base in PROVIDERS if base.is_swappable()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        base.select(use_mock=base.__mock_component__ not in unmock)()
        if base.is_swappable()
        else base()
        for base in PROVIDERS
    ]
    # FastapiProvider lets the same container serve TestClient requests
    return make_async_container(*providers, FastapiProvider())
