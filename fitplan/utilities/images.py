"""Illustrative image links for meals.

The link only depends on the meal name, so re-parsing the same plan renders the
same pictures. Swap ``IMAGE_BASE_URL`` to point at another image service.
"""
from urllib.parse import quote

from fitplan.utilities.constants import IMAGE_BASE_URL


def image_url_for(meal_name: str) -> str:
    """Return a placeholder food picture URL for ``meal_name``."""
    query = quote(f"{meal_name.strip()} food")
    return f"{IMAGE_BASE_URL}?{query}"
