"""
Contracts the orchestration code depends on.

The orchestration (brew_coffee, CoffeeShop, the demo driver) never constructs
a machine itself. It receives anything that satisfies `BrewingMachine`:
the simulated CoffeeMachine, a native binding, or a test double.
Structural subtyping means no explicit inheritance is needed.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from brew_demo.domain.models import PowerState, Recipe

# Asynchronous delay primitive: `await wait(ms)` returns after at least `ms`
# milliseconds.
Wait = Callable[[float], Awaitable[None]]


class BrewingMachine(Protocol):
    """A coffee machine with on/off control and an asynchronous brew.

    `brew` must raise MissingRecipeError when `recipe` is None and
    MachineOffError while the machine is powered off. It never changes the
    power state itself.
    """

    @property
    def power_state(self) -> PowerState: ...

    def get_name(self) -> str: ...

    def turn_on(self) -> None: ...

    def turn_off(self) -> None: ...

    async def brew(self, recipe: Recipe | None) -> str: ...
