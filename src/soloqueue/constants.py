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

# --- Constants ---
# Team shape
DEFAULT_TEAM_SIZE = 3
# Exhaustive split search is only used for small teams: C(16, 8) = 12870
MAX_TEAM_SIZE = 8
# Healers required across both teams when roles are enforced (one per team)
HEALERS_PER_MATCH = 2

# Fallback timers (milliseconds)
DEFAULT_ALL_DPS_TIMER_MS = 60_000
DEFAULT_SINGLE_HEALER_DPS_TIMER_MS = 120_000

# Class stacking prevention levels
STACKING_OFF = 0
STACKING_ALL = 1
STACKING_MELEE = 2  # Collapsed to "any DPS" under the two-valued role model
STACKING_RANGED = 3  # Collapsed to "any DPS" under the two-valued role model
STACKING_DPS = 4
STACKING_HEALER_DPS = 5
STACKING_HEALER_DPS_ALT = 6
MIN_STACKING_LEVEL = STACKING_OFF
MAX_STACKING_LEVEL = STACKING_HEALER_DPS_ALT

STACKING_LEVEL_NAMES = {
    STACKING_OFF: "Disabled",
    STACKING_ALL: "Any roles",
    STACKING_MELEE: "Melee DPS (as DPS)",
    STACKING_RANGED: "Ranged DPS (as DPS)",
    STACKING_DPS: "Any DPS",
    STACKING_HEALER_DPS: "Healer + DPS",
    STACKING_HEALER_DPS_ALT: "Healer + DPS",
}

# Class ids. 0 means "no class constraint"; 10 is an unused slot in the
# legacy enumeration, so class 11 is stored at mask bit 10.
CLASS_NONE = 0
CLASS_WARRIOR = 1
CLASS_PALADIN = 2
CLASS_HUNTER = 3
CLASS_ROGUE = 4
CLASS_PRIEST = 5
CLASS_DEATH_KNIGHT = 6
CLASS_SHAMAN = 7
CLASS_MAGE = 8
CLASS_WARLOCK = 9
CLASS_RESERVED_GAP = 10
CLASS_DRUID = 11
MAX_CONTIGUOUS_CLASS_ID = CLASS_WARLOCK
GAP_CLASS_MASK_BIT = 1 << 10

CLASS_NAMES = {
    CLASS_WARRIOR: "Warrior",
    CLASS_PALADIN: "Paladin",
    CLASS_HUNTER: "Hunter",
    CLASS_ROGUE: "Rogue",
    CLASS_PRIEST: "Priest",
    CLASS_DEATH_KNIGHT: "Death Knight",
    CLASS_SHAMAN: "Shaman",
    CLASS_MAGE: "Mage",
    CLASS_WARLOCK: "Warlock",
    CLASS_DRUID: "Druid",
}
PLAYABLE_CLASS_IDS = tuple(CLASS_NAMES)

# Rating used when an entrant has no rating history at all
DEFAULT_START_RATING = 0

# Dotted option names understood by MatchmakingConfig.from_options
OPT_FILTER_TALENTS = "Solo.3v3.FilterTalents"
OPT_AVOID_IGNORE = "Solo.3v3.AvoidSameTeamIgnore"
OPT_ALL_DPS_TIMER = "Solo.3v3.FilterTalents.AllDPSTimer"
OPT_PREVENT_CLASS_STACKING = "Solo.3v3.PreventClassStacking"
OPT_CLASS_STACK_MASK = "Solo.3v3.PreventClassStacking.Classes"
# Package-only options, absent from stock server configs
OPT_TEAM_SIZE = "Solo.3v3.TeamSize"
OPT_SINGLE_HEALER_TIMER = "Solo.3v3.FilterTalents.SingleHealerDPSTimer"

# Environment variable that overrides the package log level
LOG_LEVEL_ENV = "SOLOQUEUE_LOG_LEVEL"
