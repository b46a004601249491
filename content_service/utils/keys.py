import re


def snake_key(text: str, max_length: int = 50) -> str:
    """"Place an Order" -> "place_an_order"."""
    return re.sub(r"[^a-z0-9]+", "_", (text or "").lower()).strip("_")[:max_length]
