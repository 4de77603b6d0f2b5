from soloqueue.constants import (
    CLASS_DRUID,
    CLASS_MAGE,
    CLASS_PRIEST,
    STACKING_ALL,
    STACKING_DPS,
    STACKING_HEALER_DPS,
    STACKING_OFF,
)
from soloqueue.matching.constraints import (
    class_id_to_mask_bit,
    count_avoid_pairs,
    count_healers,
    has_class_stacking_conflict,
    is_class_conflict,
    satisfies_role_composition,
)
from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import Role


def _entrant(eid, role=Role.DPS, class_id=0):
    return Entrant(id=eid, role=role, rating=1500, class_id=class_id)


def test_count_healers_only_counts_given_indices():
    selected = [
        _entrant("h1", Role.HEALER),
        _entrant("d1"),
        _entrant("h2", Role.HEALER),
    ]

    assert count_healers((0, 1), selected) == 1
    assert count_healers((0, 2), selected) == 2
    assert count_healers((1,), selected) == 0


def test_role_composition_standard_and_all_dps():
    selected = [
        _entrant("h1", Role.HEALER),
        _entrant("d1"),
        _entrant("h2", Role.HEALER),
        _entrant("d2"),
    ]

    assert satisfies_role_composition((0, 1), (2, 3), selected, False)
    assert not satisfies_role_composition((0, 2), (1, 3), selected, False)
    assert not satisfies_role_composition((0, 1), (2, 3), selected, True)


def test_conflict_table():
    dps = _entrant("d", class_id=CLASS_MAGE)
    other_dps = _entrant("d2", class_id=CLASS_MAGE)
    healer = _entrant("h", Role.HEALER, CLASS_MAGE)
    other_healer = _entrant("h2", Role.HEALER, CLASS_MAGE)

    assert not is_class_conflict(dps, other_dps, STACKING_OFF)
    assert is_class_conflict(healer, other_healer, STACKING_ALL)
    assert is_class_conflict(dps, other_dps, STACKING_DPS)
    assert not is_class_conflict(dps, healer, STACKING_DPS)
    assert is_class_conflict(dps, healer, STACKING_HEALER_DPS)
    assert is_class_conflict(healer, dps, STACKING_HEALER_DPS)
    assert not is_class_conflict(healer, other_healer, STACKING_HEALER_DPS)


def test_stacking_conflict_requires_same_class():
    selected = [
        _entrant("a", class_id=CLASS_MAGE),
        _entrant("b", class_id=CLASS_PRIEST),
        _entrant("c", class_id=CLASS_MAGE),
    ]

    assert not has_class_stacking_conflict((0, 1), selected, STACKING_ALL)
    assert has_class_stacking_conflict((0, 2), selected, STACKING_ALL)
    assert not has_class_stacking_conflict((0, 2), selected, STACKING_OFF)


def test_stacking_conflict_respects_mask():
    selected = [
        _entrant("a", class_id=CLASS_DRUID),
        _entrant("b", class_id=CLASS_DRUID),
    ]
    druid_bit = class_id_to_mask_bit(CLASS_DRUID)
    mage_bit = class_id_to_mask_bit(CLASS_MAGE)

    assert has_class_stacking_conflict((0, 1), selected, STACKING_ALL, druid_bit)
    assert not has_class_stacking_conflict((0, 1), selected, STACKING_ALL, mage_bit)


def test_classless_pair_never_conflicts():
    selected = [_entrant("a"), _entrant("b")]

    assert not has_class_stacking_conflict((0, 1), selected, STACKING_ALL)


def test_count_avoid_pairs():
    selected = [_entrant("a"), _entrant("b"), _entrant("c")]
    flagged = {frozenset({"a", "b"}), frozenset({"b", "c"})}

    def avoid(x, y):
        return frozenset({x, y}) in flagged

    assert count_avoid_pairs((0, 1, 2), selected, avoid) == 2
    assert count_avoid_pairs((0, 2), selected, avoid) == 0
    assert count_avoid_pairs((0, 1, 2), selected, None) == 0
