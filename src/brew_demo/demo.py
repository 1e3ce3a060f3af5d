"""
Demo driver — a morning at the coffee shop.

Runs, strictly one step after another:
    1. the recipe preamble (descriptions, strong recipes, summaries)
    2. the error-handling demonstration (two deliberate brew failures)
    3. a single Espresso brew
    4. the morning rush: three customers served through CoffeeShop
    5. the morning-rush statistics, printed as JSON

Any failure that escapes the inner handlers is logged here, so the process
always exits normally.

Usage:
    # Reference timings:
    python -m brew_demo.demo

    # Ten times faster, with machine state transitions in the log:
    python -m brew_demo.demo --time-scale 0.1 --log-level DEBUG
"""

import asyncio
import logging
from collections.abc import Sequence

from brew_demo.catalog import by_name, default_recipes, recipe_summaries, strong_recipes
from brew_demo.config import DemoSettings, parse_settings
from brew_demo.domain.contracts import BrewingMachine, Wait
from brew_demo.domain.models import CustomerOrder, Recipe, ShopStats
from brew_demo.orchestration import brew_coffee, demonstrate_error_handling
from brew_demo.services.factory import MachineFactory
from brew_demo.services.timing import scaled_wait
from brew_demo.shop import CoffeeShop

logger = logging.getLogger(__name__)

# Customer -> recipe name, served in this order.
MORNING_RUSH = [
    ("Alice", "Espresso"),
    ("Bob", "Latte"),
    ("Charlie", "Americano"),
]


def log_recipe_overview(recipes: list[Recipe]) -> None:
    logger.info("Coffee recipes:")
    for recipe in recipes:
        logger.info("  %s", recipe.get_description())

    strong = strong_recipes(recipes)
    logger.info("Strong recipes (>75%%): %s", ", ".join(r.get_name() for r in strong))

    logger.info("Recipe statistics:")
    for summary in recipe_summaries(recipes):
        logger.info("  %s: %d%% strength, %s brew time", summary.name, summary.strength, summary.time)


async def morning_rush(
    shop: CoffeeShop,
    orders: Sequence[CustomerOrder],
    *,
    pause_ms: float,
    wait: Wait,
) -> ShopStats:
    """Serve `orders` one at a time, pausing after each, and return the stats."""
    logger.info("Morning rush starting...")

    # One machine, so orders are processed sequentially.
    for order in orders:
        logger.info("Order for %s: %s", order.customer, order.recipe.get_name())
        elapsed_ms = await shop.serve_customer(order.recipe)
        logger.info("%s's order completed in %dms", order.customer, elapsed_ms)
        await wait(pause_ms)

    stats = shop.get_stats()
    logger.info("Morning rush statistics:")
    print(stats.model_dump_json(indent=2))
    return stats


async def run_demo(settings: DemoSettings, machine: BrewingMachine | None = None) -> ShopStats:
    wait = scaled_wait(settings.time_scale)
    recipes = default_recipes()
    menu = by_name(recipes)

    log_recipe_overview(recipes)

    if machine is None:
        machine = MachineFactory.get_shared_machine(settings.machine_name, wait=wait)
    logger.info("%s is ready", machine.get_name())

    logger.info("Error handling:")
    await demonstrate_error_handling(
        machine,
        menu["Espresso"],
        make_machine=lambda name: MachineFactory.create_machine(name, wait=wait),
    )

    logger.info("Simple brew demonstration:")
    await brew_coffee(machine, menu["Espresso"], warmup_ms=settings.warmup_ms, wait=wait)

    shop = CoffeeShop(machine, warmup_ms=settings.warmup_ms, wait=wait)
    orders = [CustomerOrder(customer=customer, recipe=menu[name]) for customer, name in MORNING_RUSH]
    stats = await morning_rush(shop, orders, pause_ms=settings.pause_ms, wait=wait)

    logger.info("Demo completed!")
    return stats


async def run_demo_safely(settings: DemoSettings, machine: BrewingMachine | None = None) -> ShopStats | None:
    """Run the demo, logging (not raising) anything the inner steps let through."""
    try:
        return await run_demo(settings, machine)
    except Exception:
        logger.exception("Demo failed")
        return None


def main(argv: Sequence[str] | None = None) -> None:
    settings = parse_settings(argv)
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Coffee brewing simulation on %s", settings.machine_name)
    asyncio.run(run_demo_safely(settings))


if __name__ == "__main__":
    main()
