import pytest

from models import Ingredient, Recipe


@pytest.fixture(scope="session")
def app():
    from app import app as flask_app
    from config import TestingConfig
    flask_app.config.from_object(TestingConfig)
    return flask_app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def pasta():
    return Recipe(
        id="pasta",
        name="Garlic Pasta",
        servings=4,
        ingredients=(
            Ingredient("Garlic", 2, "cloves", 0.20, "produce"),
            Ingredient("Spaghetti", 1, "lb", 1.50, "pantry"),
            Ingredient("Parmesan Cheese", 0.5, "cup", 2.00, "dairy"),
        ),
    )


@pytest.fixture
def stir_fry():
    return Recipe(
        id="stir-fry",
        name="Veggie Stir Fry",
        servings=2,
        ingredients=(
            Ingredient("garlic", 2, "cloves", 0.20, "produce"),
            Ingredient("Frozen Peas", 1, "cup", 0.80, "frozen"),
            Ingredient("Soy Sauce", 2, "tbsp", 0.30, "pantry"),
        ),
    )
