"""
The demo's recipe catalog plus a few list transformations over recipes.
"""

from collections.abc import Iterable

from brew_demo.domain.models import Recipe, RecipeSummary

STRONG_THRESHOLD = 75


def default_recipes() -> list[Recipe]:
    """The four recipes the demo brews, in menu order."""
    return [
        Recipe(name="Espresso", strength=100, water_amount=30, brew_time=2000),
        Recipe(name="Americano", strength=80, water_amount=150, brew_time=3000),
        Recipe(name="Latte", strength=70, water_amount=200, brew_time=4000),
        Recipe(name="Morning Special", strength=85, water_amount=180, brew_time=3500),
    ]


def by_name(recipes: Iterable[Recipe]) -> dict[str, Recipe]:
    return {recipe.get_name(): recipe for recipe in recipes}


def strong_recipes(recipes: Iterable[Recipe], threshold: int = STRONG_THRESHOLD) -> list[Recipe]:
    """Recipes whose strength is strictly greater than `threshold`, order kept."""
    return [recipe for recipe in recipes if recipe.get_strength() > threshold]


def format_seconds(ms: int) -> str:
    seconds = ms / 1000
    if seconds.is_integer():
        return f"{int(seconds)}s"
    return f"{seconds}s"


def recipe_summaries(recipes: Iterable[Recipe]) -> list[RecipeSummary]:
    return [
        RecipeSummary(
            name=recipe.get_name(),
            strength=recipe.get_strength(),
            time=format_seconds(recipe.get_brew_time()),
        )
        for recipe in recipes
    ]
