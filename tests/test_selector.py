import pytest

from soloqueue.exceptions import InvalidTeamSizeException
from soloqueue.matching.selector import select_candidates
from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import FailureReason, Role

ALL_DPS_WAIT = 60_000
SINGLE_HEALER_WAIT = 120_000


def _queue(roles, start=0, step=1000):
    """Entrants from a role string like "DHDD", joining ``step`` ms apart."""
    entrants = []
    for i, code in enumerate(roles):
        role = Role.HEALER if code == "H" else Role.DPS
        entrants.append(
            Entrant(id=f"{code}{i}", role=role, rating=1500, join_time=start + i * step)
        )
    return entrants


def _select(candidates, now=0, team_size=3, enforce_roles=True):
    return select_candidates(
        candidates, team_size, enforce_roles, ALL_DPS_WAIT, SINGLE_HEALER_WAIT, now
    )


def test_too_few_candidates_is_insufficient_players():
    result = _select(_queue("HHDDD"))

    assert not result
    assert result.failure is FailureReason.INSUFFICIENT_PLAYERS
    assert result.selected == ()


def test_without_role_enforcement_takes_oldest_entrants_verbatim():
    queue = _queue("HHHDDDDD")
    result = _select(queue, enforce_roles=False)

    assert result
    assert list(result.selected) == queue[:6]
    assert not result.all_dps_match


def test_standard_path_takes_oldest_healers_then_oldest_dps():
    queue = _queue("DHDDHDDH")
    result = _select(queue)

    assert result
    assert [e.id for e in result.selected] == ["H1", "H4", "D0", "D2", "D3", "D5"]
    assert not result.all_dps_match


def test_standard_path_never_skips_an_earlier_entrant_of_the_same_role():
    queue = _queue("DDDHDDDHDH")
    result = _select(queue)

    selected = set(e.id for e in result.selected)
    for role in Role:
        bucket = [e for e in queue if e.role is role]
        picked = [i for i, e in enumerate(bucket) if e.id in selected]
        assert picked == list(range(len(picked)))


def test_single_healer_with_five_dps_has_no_valid_composition():
    result = _select(_queue("HDDDDD"), now=10_000_000)

    assert result.failure is FailureReason.NO_VALID_COMPOSITION


def test_two_healers_without_enough_dps_has_no_valid_composition():
    result = _select(_queue("HHHDDD"), now=10_000_000)

    assert result.failure is FailureReason.NO_VALID_COMPOSITION


def test_zero_healers_waits_for_all_dps_timer():
    queue = _queue("DDDDDD", step=1000)
    last_join = queue[-1].join_time

    early = _select(queue, now=last_join + ALL_DPS_WAIT - 1)
    assert early.failure is FailureReason.NO_VALID_COMPOSITION

    ready = _select(queue, now=last_join + ALL_DPS_WAIT)
    assert ready
    assert ready.all_dps_match
    assert list(ready.selected) == queue


def test_all_dps_fallback_only_uses_timed_dps_in_fifo_order():
    old = _queue("DDDDDD", start=0)
    fresh = [
        Entrant(id="late", role=Role.DPS, rating=1500, join_time=50_000),
    ]
    queue = old + fresh
    result = _select(queue, now=ALL_DPS_WAIT + 5_000)

    assert result.all_dps_match
    assert [e.id for e in result.selected] == [e.id for e in old]


def test_single_healer_uses_longer_timer_and_stays_queued():
    queue = _queue("HDDDDDD")
    last_join = queue[-1].join_time

    # The all-DPS timer is not enough while a healer is waiting
    waiting = _select(queue, now=last_join + ALL_DPS_WAIT)
    assert waiting.failure is FailureReason.NO_VALID_COMPOSITION

    early = _select(queue, now=last_join + SINGLE_HEALER_WAIT - 1)
    assert early.failure is FailureReason.NO_VALID_COMPOSITION

    result = _select(queue, now=last_join + SINGLE_HEALER_WAIT)
    assert result.all_dps_match
    assert all(e.role is Role.DPS for e in result.selected)
    assert "H0" not in {e.id for e in result.selected}
    assert len(result.selected) == 6


def test_team_size_one_needs_no_healer():
    result = _select(_queue("DD"), team_size=1)

    assert result
    assert [e.id for e in result.selected] == ["D0", "D1"]
    assert not result.all_dps_match


def test_non_positive_team_size_is_a_contract_violation():
    with pytest.raises(InvalidTeamSizeException):
        _select(_queue("HHDDDD"), team_size=0)


def test_selection_is_pure():
    queue = tuple(_queue("DHDDHDDH"))

    assert _select(queue, now=5_000) == _select(queue, now=5_000)
