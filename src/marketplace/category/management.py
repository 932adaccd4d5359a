"""Category management: commands, handlers and chip ordering."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from marketplace.category.category import Category
from marketplace.domain import marketplace


@marketplace.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    emoji: String(max_length=16)


@marketplace.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        existing = repo._dao.query.filter(name=command.name).all().items
        if existing:
            raise ValidationError({"name": [f"Category '{command.name}' already exists"]})

        category = Category.create(name=command.name, emoji=command.emoji)
        repo.add(category)
        return str(category.id)


def all_categories() -> list[Category]:
    """Every category, ordered by name."""
    items = current_domain.repository_for(Category)._dao.query.all().items
    return sorted(items, key=lambda c: c.name.lower())


def chip_categories(category_id: str | None = None) -> list[Category]:
    """Categories for the chip bar, with ``category_id`` (when known) moved to the front.

    The first entry is the chip the client selects by default.
    """
    categories = all_categories()
    if not category_id:
        return categories

    selected = [c for c in categories if str(c.id) == str(category_id)]
    others = [c for c in categories if str(c.id) != str(category_id)]
    return selected + others
