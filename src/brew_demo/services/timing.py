"""
Delay primitive used to simulate warm-up, brewing and pauses between orders.

`wait` takes milliseconds (the unit every recipe and setting uses) and
suspends the current task with asyncio.sleep. `scaled_wait` builds a variant
that stretches or shrinks every delay, so the whole demo can run faster.
"""

import asyncio
from functools import lru_cache

from brew_demo.domain.contracts import Wait


async def wait(ms: float) -> None:
    # Negative durations behave like zero.
    await asyncio.sleep(max(ms, 0) / 1000)


@lru_cache(maxsize=None)
def scaled_wait(time_scale: float) -> Wait:
    """Return a delay primitive that waits `ms * time_scale` milliseconds.

    The same scale always yields the same callable, so machines cached per
    delay primitive are reused across runs at that scale.
    """
    if time_scale <= 0:
        raise ValueError(f"time_scale must be positive, got {time_scale}")
    if time_scale == 1:
        return wait

    async def _scaled(ms: float) -> None:
        await wait(ms * time_scale)

    return _scaled
