def format_location(city: str, region: str) -> str:
    """Display string for a place, e.g. ``"Coeur d'Alene, ID"``. Inputs pass through untouched."""
    return f"{city}, {region}"
