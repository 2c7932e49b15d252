"""
Category tree for organizing help output.

Categories are purely organizational: they group commands in help listings
and carry no routing authority. A category is identified by its path, the
space-joined names from the root down to it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import DuplicateCategoryError, UnknownParentError
from .registry import CommandRegistry, HandlerDescriptor, canonical


@dataclass(frozen=True)
class Category:
    """A named grouping node in the help tree."""

    name: str
    title: str = ""
    description: str = ""
    parent: str | None = None

    @property
    def path(self) -> str:
        """Space-joined path from the root to this category."""
        return f"{self.parent} {self.name}" if self.parent else self.name

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self.path.split(" "))


@dataclass
class CategoryListing:
    """Immediate children of a category (or of the root)."""

    categories: list[Category] = field(default_factory=list)
    commands: list[HandlerDescriptor] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.categories or self.commands)

    def __len__(self) -> int:
        return len(self.categories) + len(self.commands)


class CategoryTree:
    """Forest of categories keyed by path."""

    def __init__(self) -> None:
        self._categories: dict[str, Category] = {}

    def add_category(
        self,
        name: str,
        title: str = "",
        description: str = "",
        parent: str | None = None,
    ) -> Category:
        """
        Add a category under an optional parent.

        Args:
            name: Category name (lowercased, whitespace-normalized)
            title: One-line display title
            description: Longer description shown in category help
            parent: Path of an existing parent category

        Returns:
            The created Category

        Raises:
            UnknownParentError: If parent is given but not registered
            DuplicateCategoryError: If the name repeats within the parent
        """
        key = canonical(name)
        parent_key = canonical(parent) if parent else None
        if parent_key is not None and parent_key not in self._categories:
            raise UnknownParentError(key, parent_key)

        category = Category(
            name=key,
            title=title or key,
            description=description,
            parent=parent_key,
        )
        if category.path in self._categories:
            raise DuplicateCategoryError(category.path)

        self._categories[category.path] = category
        return category

    def get(self, path: str) -> Category | None:
        """Get a category by its path."""
        return self._categories.get(canonical(path))

    def parent_of(self, category: Category) -> Category | None:
        """Look up a category's parent."""
        return self._categories.get(category.parent) if category.parent else None

    def home_of(self, command_tokens: tuple[str, ...]) -> str | None:
        """
        Path of the deepest category whose path is a proper prefix of a command.

        Returns None when the command sits at the root.
        """
        for length in range(len(command_tokens) - 1, 0, -1):
            path = " ".join(command_tokens[:length])
            if path in self._categories:
                return path
        return None

    def children_of(
        self, registry: CommandRegistry, path: str | None = None
    ) -> CategoryListing:
        """
        List immediate sub-categories and commands of a category.

        Sub-categories come in registration order; commands are sorted by
        canonical name so the listing does not depend on the order commands
        were registered in.

        Args:
            registry: Command registry to draw commands from
            path: Category path, or None for the root

        Returns:
            CategoryListing, empty if the category has no children
        """
        key = canonical(path) if path else None
        listing = CategoryListing()
        listing.categories = [c for c in self if c.parent == key]
        listing.commands = sorted(
            (d for d in registry if self.home_of(d.tokens) == key),
            key=lambda d: d.name,
        )
        return listing

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories.values())

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and canonical(path) in self._categories
