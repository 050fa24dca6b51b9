"""Read-only access to recipe content in the document store."""

from collections.abc import Iterable

from bson import ObjectId

from namcol.models.recipe import Recipe


class RecipeStore:
    """Query interface over the recipes collection."""

    def list_recipes(self) -> list[Recipe]:
        return list(Recipe.objects)

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Get a recipe by id. Malformed ids are treated as missing."""
        if not ObjectId.is_valid(recipe_id):
            return None
        return Recipe.objects(id=ObjectId(recipe_id)).first()

    def get_recipes(self, recipe_ids: Iterable[str]) -> list[Recipe]:
        """Bulk fetch recipes; malformed or unknown ids are skipped."""
        object_ids = [ObjectId(rid) for rid in recipe_ids if ObjectId.is_valid(rid)]
        if not object_ids:
            return []
        return list(Recipe.objects(id__in=object_ids))
