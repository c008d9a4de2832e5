# connectify/core/render.py

from dataclasses import dataclass
from typing import Tuple, assert_never

from .entities import Company, Entity, Person


@dataclass(frozen=True)
class EntityCard:
    """What a list cell shows for one entity, independent of the toolkit drawing it."""
    index: int
    kind: str
    title: str
    badges: Tuple[str, ...]
    lines: Tuple[str, ...]

    @property
    def heading(self) -> str:
        return f"{self.index}. {self.title}"


def render_entity(entity: Entity, index: int) -> EntityCard:
    """
    Builds the card for a person or a company at 1-based position ``index``.

    This is the only place that looks at which kind of entity it has; the GUI
    list cells and the CLI tables both draw whatever card it returns.
    """
    match entity:
        case Person(name=name, phone=phone, email=email, address=address, note=note, tags=tags):
            lines = tuple(line for line in (
                phone and f"Phone: {phone}",
                email and f"Email: {email}",
                address and f"Address: {address}",
                note and f"Note: {note}",
            ) if line)
            return EntityCard(index, "Person", name, ("Person",) + tags, lines)
        case Company(name=name, industry=industry, location=location, phone=phone, address=address,
                     website=website, people=people):
            lines = tuple(line for line in (
                location and f"Location: {location}",
                phone and f"Phone: {phone}",
                address and f"Address: {address}",
                website and f"Website: {website}",
                f"People: {len(people)}",
            ) if line)
            badges = ("Company", industry) if industry else ("Company",)
            return EntityCard(index, "Company", name, badges, lines)
        case _:
            assert_never(entity)
