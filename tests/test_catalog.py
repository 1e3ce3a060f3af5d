from brew_demo.catalog import by_name, default_recipes, format_seconds, recipe_summaries, strong_recipes


def test_default_recipes_in_menu_order():
    names = [r.get_name() for r in default_recipes()]
    assert names == ["Espresso", "Americano", "Latte", "Morning Special"]


def test_strong_recipes_exclude_latte():
    strong = strong_recipes(default_recipes())
    assert [r.get_name() for r in strong] == ["Espresso", "Americano", "Morning Special"]
    assert {r.get_strength() for r in strong} == {100, 80, 85}


def test_strong_threshold_is_strict():
    menu = by_name(default_recipes())
    assert menu["Americano"] not in strong_recipes(default_recipes(), threshold=80)


def test_format_seconds():
    assert format_seconds(2000) == "2s"
    assert format_seconds(3500) == "3.5s"
    assert format_seconds(0) == "0s"


def test_recipe_summaries():
    summaries = recipe_summaries(default_recipes())
    assert [(s.name, s.strength, s.time) for s in summaries] == [
        ("Espresso", 100, "2s"),
        ("Americano", 80, "3s"),
        ("Latte", 70, "4s"),
        ("Morning Special", 85, "3.5s"),
    ]
