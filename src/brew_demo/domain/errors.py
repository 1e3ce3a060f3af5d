class BrewError(Exception):
    """Base class for failures raised by a coffee machine while brewing."""


class MissingRecipeError(BrewError):
    """Raised when brew is called without a recipe."""

    def __init__(self, machine_name):
        self.machine_name = machine_name
        super().__init__("No recipe provided")


class MachineOffError(BrewError):
    """Raised when brew is called while the machine is powered off."""

    def __init__(self, machine_name):
        self.machine_name = machine_name
        super().__init__(f"Machine not ready to brew: {machine_name} is powered off")


class MachineBusyError(BrewError):
    """Raised when brew is called while another brew is still in progress."""

    def __init__(self, machine_name, recipe_name):
        self.machine_name = machine_name
        self.recipe_name = recipe_name
        super().__init__(
            f"Machine not ready to brew: {machine_name} is busy, cannot start {recipe_name}"
        )
