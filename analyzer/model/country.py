"""Country records keyed by tag."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Country:
    """A country as seen in a save game.

    Only the fields the localisation loader fills in are modelled here.
    """

    tag: str
    official_name: str = ''

    def set_official_name(self, name: str) -> None:
        self.official_name = name

    @property
    def display_name(self) -> str:
        """Official name if localised, otherwise the tag."""
        return self.official_name or self.tag
