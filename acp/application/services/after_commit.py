"""Side effects (cache invalidation) that must follow a successful commit."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from acp.application.interfaces.services import ITransactionHooks


async def after_commit(
    hooks: ITransactionHooks | None, callback: Callable[[], Awaitable[Any]]
) -> None:
    """Defer callback to the transaction's commit; run it now when there is no transaction."""
    if hooks is None:
        await callback()
        return
    hooks.after_commit(callback)
