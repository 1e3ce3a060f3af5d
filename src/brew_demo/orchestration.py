"""
Brew orchestration — one brew attempt from power-on to power-off.

`brew_coffee` runs strictly in order:
    1. turn the machine on
    2. wait for the warm-up interval
    3. brew the recipe and measure how long it took
    4. turn the machine off (always, even when brewing failed)

Brew failures are contained here: they are logged and swallowed so callers
(CoffeeShop, the demo driver) never see them. Nothing in this module runs two
steps at once, so a machine is never asked to brew twice concurrently.

`demonstrate_error_handling` deliberately triggers the two classified brew
failures and checks that each one is raised and caught.
"""

import logging
import time
from collections.abc import Callable

from brew_demo.domain.contracts import BrewingMachine, Wait
from brew_demo.domain.errors import BrewError, MachineOffError, MissingRecipeError
from brew_demo.domain.models import Recipe
from brew_demo.services.factory import MachineFactory
from brew_demo.services.timing import wait as default_wait

logger = logging.getLogger(__name__)

WARMUP_MS = 500
TEST_MACHINE_NAME = "Test Machine"


def elapsed_ms_since(start: float) -> int:
    """Milliseconds elapsed since a `time.monotonic()` reading."""
    return max(round((time.monotonic() - start) * 1000), 0)


async def brew_coffee(
    machine: BrewingMachine,
    recipe: Recipe,
    *,
    warmup_ms: float = WARMUP_MS,
    wait: Wait = default_wait,
) -> str | None:
    """Run one full brew cycle on `machine`.

    Returns the machine's confirmation message, or None when brewing failed.
    Never raises: warm-up and brew failures are logged, and the machine is
    always turned off again.
    """
    logger.info("Preparing %s...", recipe.get_name())

    machine.turn_on()
    logger.info("Machine turned on")

    result: str | None = None
    try:
        await wait(warmup_ms)
        logger.info("Machine ready")

        logger.info("Brewing %s (%dms)...", recipe.get_name(), recipe.get_brew_time())
        start = time.monotonic()
        result = await machine.brew(recipe)
        logger.info("%s", result)
        logger.info("Brew time: %dms", elapsed_ms_since(start))
    except BrewError as exc:
        logger.warning("Brewing failed: %s", exc)
    except Exception:
        logger.exception("Brewing failed with an unexpected error")
    finally:
        machine.turn_off()
        logger.info("Machine turned off")

    return result


async def demonstrate_error_handling(
    machine: BrewingMachine,
    recipe: Recipe,
    *,
    make_machine: Callable[[str], BrewingMachine] = MachineFactory.create_machine,
) -> list[Exception]:
    """Trigger both classified brew failures and return the caught errors.

    1. A fresh machine, left powered off, is asked to brew `recipe`.
    2. The shared `machine` is powered on and asked to brew nothing.

    Each case is caught on its own so one cannot mask the other. Machines
    that raise unclassified errors (e.g. a native binding) are caught too.
    A case that unexpectedly succeeds is logged and contributes no error.
    """
    caught: list[Exception] = []

    try:
        test_machine = make_machine(TEST_MACHINE_NAME)
        await test_machine.brew(recipe)
        logger.warning("Expected %s to refuse brewing while powered off", test_machine.get_name())
    except Exception as exc:
        _record_caught(exc, MachineOffError, caught)

    try:
        machine.turn_on()
        await machine.brew(None)
        logger.warning("Expected %s to refuse brewing without a recipe", machine.get_name())
    except Exception as exc:
        _record_caught(exc, MissingRecipeError, caught)

    return caught


def _record_caught(exc: Exception, expected: type[BrewError], caught: list[Exception]) -> None:
    if isinstance(exc, expected):
        logger.info('Error correctly caught: "%s"', exc)
    elif not isinstance(exc, BrewError):
        logger.exception('Caught unclassified error instead of %s: "%s"', expected.__name__, exc)
    else:
        logger.warning('Caught %s instead of %s: "%s"', type(exc).__name__, expected.__name__, exc)
    caught.append(exc)
