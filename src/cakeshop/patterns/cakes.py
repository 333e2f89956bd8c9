"""
Fixed vocabularies of the cake shop: cake kinds, sizes and decorations
"""
import enum
from typing import Type, TypeVar

E = TypeVar("E", bound=enum.Enum)


class CakeKind(enum.Enum):
    APPLE = "apple"
    CHEESE = "cheese"
    CHOCOLATE = "chocolate"

    @property
    def display_name(self) -> str:
        return f"{self.value.title()} Cake"

    @property
    def code(self) -> str:
        """Three-letter code used in order identifiers"""
        return self.value[:3].upper()


class CakeSize(enum.Enum):
    # Declaration order is the size order
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def display_name(self) -> str:
        return self.value.title()

    @property
    def code(self) -> str:
        return self.value[0].upper()


class DecorationKind(enum.Enum):
    CHOCOLATE_CHIPS = "chocolate_chips"
    CREAM = "cream"
    SKITTLES = "skittles"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


def coerce_member(enum_cls: Type[E], value) -> E:
    """
    Resolves a member from the member itself, its name or its value.

    Strings are matched case-insensitively and may use spaces or dashes
    instead of underscores ("Chocolate Chips", "chocolate-chips").
    Raises ValueError when nothing matches.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace(" ", "_").replace("-", "_")
        for member in enum_cls:
            if normalized in (member.value, member.name.lower()):
                return member
    raise ValueError(f"{value!r} is not a valid {enum_cls.__name__}")
