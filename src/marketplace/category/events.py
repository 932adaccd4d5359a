"""Domain events for the Category aggregate."""

from protean.fields import Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Category")
class CategoryCreated:
    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    emoji: String()
