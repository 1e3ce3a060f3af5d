"""
Simulated coffee machine.

This is the in-process stand-in for the machine controller that would
normally live in a host runtime or a native layer. It honours the
BrewingMachine contract: an explicit OFF/ON power state, and an async brew
that fails fast on a missing recipe, a powered-off machine or a brew already
in progress.

Brewing time is simulated with the injected delay primitive. Tests pass a
scaled or no-op wait instead of patching asyncio.sleep.
"""

import logging

from brew_demo.domain.contracts import Wait
from brew_demo.domain.errors import MachineBusyError, MachineOffError, MissingRecipeError
from brew_demo.domain.models import PowerState, Recipe
from brew_demo.services.timing import wait as default_wait

logger = logging.getLogger(__name__)


class CoffeeMachine:
    """Simulates a single-group coffee machine."""

    def __init__(self, name: str, wait: Wait = default_wait) -> None:
        self._name = name
        self._wait = wait
        self._power = PowerState.OFF
        self._brewing = False

    @property
    def power_state(self) -> PowerState:
        return self._power

    @property
    def is_brewing(self) -> bool:
        return self._brewing

    def get_name(self) -> str:
        return self._name

    def turn_on(self) -> None:
        if self._power is PowerState.OFF:
            logger.debug("%s: power OFF -> ON", self._name)
        self._power = PowerState.ON

    def turn_off(self) -> None:
        if self._power is PowerState.ON:
            logger.debug("%s: power ON -> OFF", self._name)
        self._power = PowerState.OFF
        self._brewing = False

    def can_brew(self) -> bool:
        return self._power is PowerState.ON and not self._brewing

    async def brew(self, recipe: Recipe | None) -> str:
        if recipe is None:
            raise MissingRecipeError(self._name)
        if self._power is PowerState.OFF:
            raise MachineOffError(self._name)
        if self._brewing:
            raise MachineBusyError(self._name, recipe.get_name())

        self._brewing = True
        logger.debug("%s: brewing %s for %dms", self._name, recipe.get_name(), recipe.get_brew_time())
        try:
            await self._wait(recipe.get_brew_time())
        finally:
            self._brewing = False
        return f"Coffee ready! Brewed {recipe.get_name()}"
