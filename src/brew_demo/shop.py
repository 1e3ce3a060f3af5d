"""
CoffeeShop — serves customers on a shared machine and keeps order statistics.

The shop does not own the machine: it never powers it on or off outside of
`brew_coffee`, and other code may use the same machine between orders.
Orders are served one at a time, which is the only thing standing between
two customers and a double-booked machine.
"""

import logging
import math
import time
from collections import Counter

from brew_demo.domain.contracts import BrewingMachine, Wait
from brew_demo.domain.models import OrderRecord, Recipe, ShopStats
from brew_demo.orchestration import WARMUP_MS, brew_coffee, elapsed_ms_since
from brew_demo.services.timing import wait as default_wait

logger = logging.getLogger(__name__)


class CoffeeShop:
    """Records every served order and derives statistics from them.

    Failed brews are recorded like successful ones: `brew_coffee` contains
    the failure, and the customer still waited for it.
    """

    def __init__(
        self,
        machine: BrewingMachine,
        *,
        warmup_ms: float = WARMUP_MS,
        wait: Wait = default_wait,
    ) -> None:
        self.machine = machine
        self.warmup_ms = warmup_ms
        self.wait = wait
        self.orders: list[OrderRecord] = []

    async def serve_customer(self, recipe: Recipe) -> int:
        """Brew `recipe`, record the order and return its elapsed time in ms."""
        start = time.monotonic()
        await brew_coffee(self.machine, recipe, warmup_ms=self.warmup_ms, wait=self.wait)
        elapsed_ms = elapsed_ms_since(start)

        self.orders.append(OrderRecord(recipe=recipe, elapsed_ms=elapsed_ms))
        logger.debug("Recorded order #%d: %s in %dms", len(self.orders), recipe.get_name(), elapsed_ms)
        return elapsed_ms

    def get_stats(self) -> ShopStats:
        total_orders = len(self.orders)
        if total_orders:
            average = sum(order.elapsed_ms for order in self.orders) / total_orders
            # Round half up.
            average_time_ms = math.floor(average + 0.5)
        else:
            average_time_ms = 0

        popular = Counter(order.recipe.get_name() for order in self.orders)
        return ShopStats(
            total_orders=total_orders,
            average_time_ms=average_time_ms,
            popular_recipes=dict(popular),
        )
