"""
Simple factory for coffee machines.

The demo driver asks `MachineFactory` for machines instead of instantiating
CoffeeMachine itself:
  - `get_shared_machine(name, wait)` returns the long-lived machine for that
    name and delay primitive, creating it on first use. Every later call with
    the same pair gets the same instance; a different `wait` (e.g. another
    time scale) gets its own machine, so brewing never runs at a stale speed.
  - `create_machine(name)` always returns a fresh, uncached machine. The
    error-handling demo uses one to show brewing while powered off.

`reset()` drops the cache so tests start from a clean slate.
"""

from brew_demo.domain.contracts import Wait
from brew_demo.services.machine import CoffeeMachine
from brew_demo.services.timing import wait as default_wait


class MachineFactory:
    """Lazily creates and caches shared machines (class-level registry)."""

    _shared: dict[tuple[str, Wait], CoffeeMachine] = {}

    @classmethod
    def get_shared_machine(cls, name: str, wait: Wait = default_wait) -> CoffeeMachine:
        key = (name, wait)
        if key not in cls._shared:
            cls._shared[key] = CoffeeMachine(name, wait=wait)
        return cls._shared[key]

    @classmethod
    def create_machine(cls, name: str, wait: Wait = default_wait) -> CoffeeMachine:
        return CoffeeMachine(name, wait=wait)

    @classmethod
    def reset(cls) -> None:
        cls._shared = {}
