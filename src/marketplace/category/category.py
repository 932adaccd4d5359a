"""Category aggregate root for food categories."""

import json
from datetime import datetime

from protean.fields import DateTime, String, Text

from marketplace.domain import marketplace


@marketplace.aggregate
class Category:
    """A kind of food (Pizza, Bakery, ...) shown as a filter chip on the map.

    Keeps an ordered list of the products listed under it so a chip can be
    resolved to its member products with one batched lookup.
    """

    name: String(required=True, max_length=100)
    emoji: String(max_length=16)
    product_ids: Text()  # JSON array of product ids, in listing order
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, emoji=None):
        from marketplace.category.events import CategoryCreated

        now = datetime.now()
        category = cls(
            name=name,
            emoji=emoji,
            product_ids=json.dumps([]),
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                emoji=emoji,
            )
        )
        return category

    @property
    def members(self) -> list[str]:
        if not self.product_ids:
            return []
        return json.loads(self.product_ids)

    def add_product(self, product_id):
        """Append a product to this category. Adding it twice keeps one entry."""
        members = self.members
        if str(product_id) in members:
            return
        members.append(str(product_id))
        self.product_ids = json.dumps(members)
        self.updated_at = datetime.now()

    def to_public_dict(self) -> dict:
        return {
            "_id": str(self.id),
            "name": self.name,
            "emoji": self.emoji,
            "product_ids": self.members,
        }
