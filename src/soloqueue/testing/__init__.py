"""Testing module for Solo Queue.

This module provides testing functionality including:
- Random Queue Generator (RQG)
- Queue replay with match validation
- Splitter benchmarking

Use the unified CLI: soloqueue-test
"""

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

from soloqueue.testing.rqg import (
    EntrantFactory,
    RandomQueueGenerator,
    RatingDistribution,
    RQGConfig,
    load_queue_file,
)

__all__ = [
    "EntrantFactory",
    "RandomQueueGenerator",
    "RQGConfig",
    "RatingDistribution",
    "load_queue_file",
]
