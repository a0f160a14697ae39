"""Runs one use case inside a freshly loaded session."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import click

from pizzapos.domain.exceptions import DomainException
from pizzapos.infrastructure.bootstrap import Session, open_session
from pizzapos.infrastructure.config import Settings

T = TypeVar("T")


def run_in_session(settings: Settings, use_case: Callable[[Session], Awaitable[T]]) -> T:
    async def _main() -> T:
        async with open_session(settings) as session:
            return await use_case(session)

    try:
        return asyncio.run(_main())
    except DomainException as exc:
        raise click.ClickException(str(exc))
