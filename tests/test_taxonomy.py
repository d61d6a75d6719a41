from pathlib import Path

import pytest

from miniakinator.domain.taxonomy import Category, NotFoundError, PriorityPath, Subcategory, Taxonomy
from tests.helpers.taxonomy_builders import load_sample_taxonomy


def test_priority_path_round_trips_through_string() -> None:
    assert str(PriorityPath("animals")) == "animals"
    assert str(PriorityPath("animals", "birds")) == "animals.birds"
    assert PriorityPath.parse("animals.birds") == PriorityPath("animals", "birds")
    assert PriorityPath.parse("animals") == PriorityPath("animals")


def test_lookup_of_unknown_ids_raises_not_found(tmp_path: Path) -> None:
    taxonomy = load_sample_taxonomy(tmp_path)

    with pytest.raises(NotFoundError):
        taxonomy.get_category("vehicles")
    with pytest.raises(NotFoundError):
        taxonomy.get_subcategory("animals", "reptiles")
    with pytest.raises(NotFoundError):
        taxonomy.increment_priority(PriorityPath("animals", "reptiles"))


def test_increment_priority_touches_only_target(tmp_path: Path) -> None:
    taxonomy = load_sample_taxonomy(tmp_path)
    before = taxonomy.priority_snapshot()

    assert taxonomy.increment_priority(PriorityPath("animals", "water")) == 1

    after = taxonomy.priority_snapshot()
    assert after["animals.water"] == before["animals.water"] + 1
    assert {k: v for k, v in after.items() if k != "animals.water"} == {
        k: v for k, v in before.items() if k != "animals.water"
    }


def test_priority_snapshot_covers_every_path(tmp_path: Path) -> None:
    snapshot = load_sample_taxonomy(tmp_path).priority_snapshot()

    assert snapshot == {
        "food": 5,
        "food.fruit": 0,
        "food.meals": 0,
        "animals": 2,
        "animals.mammals": 1,
        "animals.birds": 3,
        "animals.water": 0,
        "plants": 2,
        "plants.trees": 1,
        "plants.flowers": 0,
        "misc": 0,
    }


def test_apply_priorities_ignores_unknown_and_non_integer(tmp_path: Path) -> None:
    taxonomy = load_sample_taxonomy(tmp_path)

    taxonomy.apply_priorities({"animals": 9, "animals.birds": 0, "ghost": 4, "food": "high", "plants.cacti": 2})

    snapshot = taxonomy.priority_snapshot()
    assert snapshot["animals"] == 9
    assert snapshot["animals.birds"] == 0
    assert snapshot["food"] == 5


def test_words_for_unions_category_in_order_without_duplicates(tmp_path: Path) -> None:
    taxonomy = load_sample_taxonomy(tmp_path)

    assert taxonomy.words_for("food") == ["pear", "plum", "soup", "stew"]
    assert taxonomy.words_for("food", "meals") == ["soup", "stew", "pear"]
    assert taxonomy.words_for("misc") == []


def test_contains_word_is_case_insensitive(tmp_path: Path) -> None:
    taxonomy = load_sample_taxonomy(tmp_path)

    assert taxonomy.contains_word("LION")
    assert taxonomy.contains_word("Oak")
    assert not taxonomy.contains_word("zebra")


def test_hand_built_taxonomy_lowercases_words() -> None:
    taxonomy = Taxonomy(
        [
            Category(
                id="food",
                label="Food?",
                subcategories=[
                    Subcategory(id="fruit", label="Fruit?", words=["Pear", "pear", "PLUM"]),
                    Subcategory(id="sweets", label="Sweets?", words=["Cake", "plum"]),
                ],
            )
        ]
    )

    assert taxonomy.all_words() == ["pear", "plum", "cake"]
    assert taxonomy.words_for("food", "fruit") == ["pear", "pear", "plum"]
    assert taxonomy.contains_word("CAKE")
