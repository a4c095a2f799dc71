"""Infer the animal group a feed product targets from its name."""

from ..models.ad import AnimalCategory

# Checked in order; the first category with a matching keyword wins.
KEYWORD_TABLE: tuple[tuple[AnimalCategory, tuple[str, ...]], ...] = (
    (AnimalCategory.CHICKENS, ("chicken", "poultry", "layer", "broiler", "chick")),
    (AnimalCategory.CATTLE, ("cattle", "cow", "dairy", "beef")),
    (AnimalCategory.PIGS, ("pig", "swine", "pork")),
    (AnimalCategory.GOATS_AND_SHEEP, ("goat", "sheep", "lamb")),
    (AnimalCategory.FISH, ("fish", "aqua")),
    (AnimalCategory.RABBITS, ("rabbit",)),
    (AnimalCategory.DUCKS, ("duck", "goose")),
    (AnimalCategory.HORSES, ("horse",)),
)


def classify(product_name: str) -> AnimalCategory:
    """Map a product name to an animal category by case-insensitive substring match."""
    lower = product_name.lower()
    for category, keywords in KEYWORD_TABLE:
        if any(keyword in lower for keyword in keywords):
            return category
    return AnimalCategory.FARM_ANIMALS
