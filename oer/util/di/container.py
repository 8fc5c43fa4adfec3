"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from oer.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Build the production container: PostgreSQL-backed repositories.

    Settings are read from the environment when first resolved.
    """
    providers = [base.select(use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve the app's ``FromDishka`` dependencies from ``container``."""
    setup_dishka(container, app)
