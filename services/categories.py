"""Category service for the in-memory store."""

from typing import Dict, Optional, Tuple

from models.category import Category, CategoryType, CategoryUpdate
from services.records import RecordService, merge, patch_fields
from services.validation import raise_if_errors, require_enum, require_text


class CategoryService(RecordService):
    """Service for managing categories."""

    table = "categories"
    entity = "Category"

    async def find_by_name(
        self, name: str, category_type: Optional[CategoryType] = None
    ) -> Optional[Category]:
        """Get a single category by name.

        Category names are only unique within a type, so pass the type when
        it is known.

        Args:
            name: The category name to find.
            category_type: Optional type the category must have.

        Returns:
            The first matching Category (lowest id), None if not found.
        """
        matches = await self._select(
            lambda category: category.name == name
            and (category_type is None or category.type == category_type)
        )
        return matches[0] if matches else None

    async def find_by_type(self, category_type: CategoryType) -> Tuple[Category, ...]:
        """Get all categories of one type, ordered by id."""
        return await self._select(lambda category: category.type == category_type)

    async def create(
        self,
        name: str,
        category_type,
        icon: str = "Tag",
        color: str = "#6B7280",
    ) -> Category:
        """Create a new category.

        Args:
            name: Category name, must not be blank.
            category_type: CategoryType or its value ("income", "expense").
            icon: Icon reference for the presentation layer.
            color: Hex color used in breakdowns.

        Returns:
            The created Category object with id populated.

        Raises:
            ValidationError: If any field is rejected, or a category with the
                same name and type already exists.
        """
        fields = _validate(
            {"name": name, "type": category_type, "icon": icon, "color": color}
        )
        await self.store.simulate_latency()
        self._check_unique(fields["name"], fields["type"])
        return self._insert(lambda category_id: Category(id=category_id, **fields))

    async def update(self, category_id: int, patch: CategoryUpdate) -> Category:
        """Apply a patch to an existing category.

        Raises:
            ValidationError: If any patched field is rejected.
            NotFoundError: If the category does not exist.
        """
        changes = _validate(patch_fields(patch))
        await self.store.simulate_latency()
        updated = merge(self._current(category_id), changes)
        self._check_unique(updated.name, updated.type, exclude_id=category_id)
        return self._store(updated)

    def _check_unique(self, name: str, category_type: CategoryType, exclude_id=None):
        with self.store.connect() as tables:
            for category in tables[self.table].values():
                if (
                    category.id != exclude_id
                    and category.name == name
                    and category.type == category_type
                ):
                    raise_if_errors(
                        {"name": f"Category '{name}' already exists for {category_type.value}"}
                    )


def _validate(changes: Dict[str, object]) -> Dict[str, object]:
    errors: Dict[str, str] = {}
    result = dict(changes)

    if "name" in changes:
        result["name"] = require_text(errors, "name", changes["name"], "Category name")
    if "type" in changes:
        result["type"] = require_enum(errors, "type", changes["type"], CategoryType)
    if "icon" in changes:
        result["icon"] = require_text(errors, "icon", changes["icon"], "Icon")
    if "color" in changes:
        result["color"] = require_text(errors, "color", changes["color"], "Color")

    raise_if_errors(errors)
    return result
