"""
Sound recipes grouped by theme. RECIPE_TABLE lists (emoji, recipe) pairs in
registration order; an emoji listed twice keeps its last recipe.
"""
from sfx_engine.recipes import (
    actions,
    animals,
    emotions,
    food,
    games,
    misc,
    nature,
    objects,
    technology,
    vehicles,
)
from sfx_engine.recipes.misc import generic_playful

THEMES = {
    "animals": animals.RECIPES,
    "vehicles": vehicles.RECIPES,
    "objects": objects.RECIPES,
    "emotions": emotions.RECIPES,
    "nature": nature.RECIPES,
    "actions": actions.RECIPES,
    "food": food.RECIPES,
    "technology": technology.RECIPES,
    "games": games.RECIPES,
    "misc": misc.RECIPES,
}

RECIPE_TABLE = [pair for recipes in THEMES.values() for pair in recipes]

__all__ = ["RECIPE_TABLE", "THEMES", "generic_playful"]
