"""Ignore lists used to keep players who ignore each other apart."""

# Solo Queue
# Copyright (C) 2025  Solo Queue developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import Any, Dict, Set

from soloqueue.type_hints import AvoidanceOracle, EntrantId


@dataclass
class IgnoreRegistry:
    """
    Directed ignore relationships between players.

    Attributes
    ----------
    ignores : dict of id to set of id
        ``ignores[a]`` holds every player ``a`` has on their ignore list.
    """

    ignores: Dict[EntrantId, Set[EntrantId]] = field(default_factory=dict)

    def add_ignore(self, owner: EntrantId, target: EntrantId) -> None:
        """Record that ``owner`` ignores ``target``."""
        self.ignores.setdefault(owner, set()).add(target)

    def remove_ignore(self, owner: EntrantId, target: EntrantId) -> None:
        targets = self.ignores.get(owner)
        if not targets:
            return
        targets.discard(target)
        if not targets:
            del self.ignores[owner]

    def has_ignore(self, owner: EntrantId, target: EntrantId) -> bool:
        return target in self.ignores.get(owner, ())

    def conflicts(self, a: EntrantId, b: EntrantId) -> bool:
        """True if either player ignores the other."""
        return self.has_ignore(a, b) or self.has_ignore(b, a)

    def as_oracle(self) -> AvoidanceOracle:
        """Freeze the current lists into a pure pairwise avoidance function.

        Later changes to the registry do not affect the returned oracle.
        """
        frozen = {owner: frozenset(targets) for owner, targets in self.ignores.items()}

        def oracle(a: EntrantId, b: EntrantId) -> bool:
            return b in frozen.get(a, ()) or a in frozen.get(b, ())

        return oracle

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ignore lists to dictionary.

        Each ignore is stored as an ``[owner, target]`` pair so ids keep
        their JSON type.
        """
        return {
            "ignores": [
                [owner, target]
                for owner, targets in self.ignores.items()
                for target in sorted(targets, key=str)
            ]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IgnoreRegistry":
        """Deserialize ignore lists from dictionary."""
        registry = cls()
        for owner, target in data.get("ignores", []):
            registry.add_ignore(owner, target)
        return registry
