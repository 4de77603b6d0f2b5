"""A participant waiting in the solo queue."""

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

from dataclasses import dataclass
from typing import Any, Dict

from soloqueue.constants import CLASS_NAMES, CLASS_NONE
from soloqueue.exceptions import InvalidEntrantException
from soloqueue.models.enums import Role
from soloqueue.type_hints import EntrantId


@dataclass(frozen=True, slots=True)
class Entrant:
    """
    One queued participant, as seen by the matchmaking core.

    Role and class are resolved by the host before the entrant is queued;
    the core never inspects a live participant.

    Attributes
    ----------
    id : hashable
        Opaque unique identifier.
    role : Role
        Collapsed role (DPS or HEALER).
    rating : int
        Non-negative matchmaking rating used for balance scoring.
    join_time : int
        Queue join timestamp in milliseconds. Establishes FIFO order.
    class_id : int
        Coarse archetype used only by class stacking prevention.
        ``0`` means "no class constraint".

    Notes
    -----
    Instances are immutable so that a queue snapshot can be handed to the
    selector and splitter without any risk of mutation mid-call.
    """

    id: EntrantId
    role: Role
    rating: int
    join_time: int = 0
    class_id: int = CLASS_NONE

    def __post_init__(self):
        if not isinstance(self.role, Role):
            raise InvalidEntrantException(
                f"Entrant {self.id!r} has invalid role {self.role!r}"
            )
        if self.rating < 0:
            raise InvalidEntrantException(
                f"Entrant {self.id!r} has negative rating {self.rating}"
            )
        if self.class_id < 0:
            raise InvalidEntrantException(
                f"Entrant {self.id!r} has negative class id {self.class_id}"
            )

    @property
    def is_healer(self) -> bool:
        return self.role is Role.HEALER

    @property
    def class_name(self) -> str:
        return CLASS_NAMES.get(self.class_id, "None")

    def waited_ms(self, now: int) -> int:
        """Milliseconds spent in queue at ``now``."""
        return now - self.join_time

    def to_dict(self) -> Dict[str, Any]:
        """Serialize entrant to dictionary."""
        return {
            "id": self.id,
            "role": self.role.value,
            "rating": self.rating,
            "join_time": self.join_time,
            "class_id": self.class_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entrant":
        """Deserialize entrant from dictionary."""
        try:
            return cls(
                id=data["id"],
                role=Role.parse(str(data["role"])),
                rating=int(data["rating"]),
                join_time=int(data.get("join_time", 0)),
                class_id=int(data.get("class_id", CLASS_NONE)),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidEntrantException(f"Invalid entrant data {data!r}: {e}") from e
