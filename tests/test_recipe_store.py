"""Tests for the document store layer."""

from bson import ObjectId
from mongoengine.connection import get_connection

from namcol.document_store import init_document_store
from namcol.errors import IngredientNotFoundError, NoProgressError, NotFoundError
from namcol.models.recipe import Recipe
from namcol.services.recipe_store import RecipeStore


class TestRecipeStore:
    """Tests for RecipeStore."""

    def test_get_recipe(self, recipe):
        found = RecipeStore().get_recipe(str(recipe.id))
        assert found.title == "Arepas"

    def test_get_recipe_missing(self):
        assert RecipeStore().get_recipe(str(ObjectId())) is None

    def test_get_recipe_malformed_id(self):
        assert RecipeStore().get_recipe("12345") is None

    def test_get_recipes_skips_bad_ids(self, make_recipe):
        first = make_recipe("Arepas")
        second = make_recipe("Ajiaco")

        found = RecipeStore().get_recipes([str(first.id), "junk", str(ObjectId()), str(second.id)])

        assert sorted(r.title for r in found) == ["Ajiaco", "Arepas"]

    def test_get_recipes_empty(self, recipe):
        assert RecipeStore().get_recipes([]) == []

    def test_ignores_unknown_fields(self):
        """Test documents written by other tools load despite extra fields."""
        collection = Recipe._get_collection()
        inserted = collection.insert_one(
            {
                "title": "Changua",
                "ingredients": [{"name": "milk", "quantity": 2, "unit": "cups"}],
                "steps": ["Boil"],
                "prep_minutes": 10,
            }
        )

        recipe = RecipeStore().get_recipe(str(inserted.inserted_id))

        assert recipe.to_dict() == {
            "_id": str(inserted.inserted_id),
            "title": "Changua",
            "description": None,
            "image_url": None,
            "steps": ["Boil"],
            "ingredients": [{"name": "milk", "quantity": 2}],
        }


def test_ingredient_names_are_distinct(make_recipe):
    recipe = make_recipe("Sopa", ingredients=[("salt", "1"), ("water", "2"), ("salt", "3")])
    assert recipe.ingredient_names == ["salt", "water"]


def test_init_document_store_keeps_existing_connection():
    """Test startup does not replace an already registered connection."""
    before = get_connection()
    init_document_store()
    assert get_connection() is before


def test_error_statuses():
    assert NoProgressError().status_code == 404
    assert isinstance(NoProgressError(), NotFoundError)
    error = IngredientNotFoundError("salt")
    assert error.message == "Ingredient not found: salt"
    assert error.status_code == 404
