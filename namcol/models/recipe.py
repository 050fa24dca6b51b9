"""Recipe document stored in the recipes collection.

Recipe content is owned by the document store; the API only reads it.
"""

from mongoengine import (
    DynamicField,
    EmbeddedDocument,
    EmbeddedDocumentListField,
    Document,
    ListField,
    StringField,
)


class RecipeIngredient(EmbeddedDocument):
    """Ingredient entry within a recipe."""

    meta = {"strict": False}

    name = StringField(required=True)
    quantity = DynamicField()


class Recipe(Document):
    """Recipe content: title, description, image, steps and ingredients."""

    # Documents written by other tools may carry keys this model does not declare
    meta = {"collection": "recipes", "strict": False}

    title = StringField(required=True)
    description = StringField()
    image_url = StringField()
    steps = ListField()
    ingredients = EmbeddedDocumentListField(RecipeIngredient)

    @property
    def ingredient_names(self) -> list[str]:
        """Distinct ingredient names in recipe order."""
        seen: dict[str, None] = {}
        for ingredient in self.ingredients:
            seen.setdefault(ingredient.name, None)
        return list(seen)

    def to_dict(self) -> dict:
        """Serialize to the JSON shape the frontend expects (id as ``_id``)."""
        return {
            "_id": str(self.id),
            "title": self.title,
            "description": self.description,
            "image_url": self.image_url,
            "steps": list(self.steps),
            "ingredients": [
                {"name": ingredient.name, "quantity": ingredient.quantity}
                for ingredient in self.ingredients
            ],
        }
