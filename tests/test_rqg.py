import json

import pytest

from soloqueue.controllers.social import IgnoreRegistry
from soloqueue.exceptions import FileLoadException, InvalidConfigurationException
from soloqueue.models.config import MatchmakingConfig
from soloqueue.models.entrant import Entrant
from soloqueue.models.enums import Role
from soloqueue.testing.rqg import (
    EntrantFactory,
    RandomQueueGenerator,
    RatingDistribution,
    RQGConfig,
    load_queue_file,
)


def test_factory_is_reproducible_with_seed():
    config = RQGConfig(num_entrants=30, seed=7)

    first = EntrantFactory(config).create_entrants()
    second = EntrantFactory(config).create_entrants()

    assert first == second


@pytest.mark.parametrize("distribution", list(RatingDistribution))
def test_factory_respects_rating_range(distribution):
    config = RQGConfig(
        num_entrants=200,
        rating_distribution=distribution,
        rating_range=(1000, 2000),
        seed=11,
    )
    entrants = EntrantFactory(config).create_entrants()

    assert all(1000 <= e.rating <= 2000 for e in entrants)
    joins = [e.join_time for e in entrants]
    assert joins == sorted(joins)


def test_factory_role_mix_follows_ratio():
    dps_only = EntrantFactory(RQGConfig(num_entrants=50, healer_ratio=0.0, seed=1))
    healers_only = EntrantFactory(RQGConfig(num_entrants=50, healer_ratio=1.0, seed=1))

    assert all(e.role is Role.DPS for e in dps_only.create_entrants())
    assert all(e.role is Role.HEALER for e in healers_only.create_entrants())


@pytest.mark.parametrize(
    "matchmaking",
    [
        MatchmakingConfig(),
        MatchmakingConfig(filter_talents=True),
        MatchmakingConfig(filter_talents=True, prevent_class_stacking=1),
        MatchmakingConfig(filter_talents=True, prevent_class_stacking=5),
        MatchmakingConfig(team_size=2, filter_talents=True, all_dps_timer_ms=10_000),
    ],
)
def test_simulated_matches_satisfy_every_rule(matchmaking):
    config = RQGConfig(
        num_entrants=90,
        seed=5,
        ignore_pairs=10,
        tick_ms=2_000,
        matchmaking=matchmaking,
    )
    simulation = RandomQueueGenerator(config).simulate()
    summary = simulation["summary"]

    if not matchmaking.prevent_class_stacking:
        assert summary["matches"] > 0
    assert summary["violations"] == 0
    assert (
        summary["matches"] * matchmaking.team_size * 2 + summary["left_in_queue"]
        == summary["entrants"]
    )


def test_simulation_without_validation_has_no_reports():
    config = RQGConfig(num_entrants=20, seed=3, validate=False)
    simulation = RandomQueueGenerator(config).simulate()

    assert simulation["reports"] == []
    assert "violations" not in simulation["summary"]


def test_export_and_reload_queue(tmp_path):
    config = RQGConfig(
        num_entrants=24,
        seed=9,
        matchmaking=MatchmakingConfig(team_size=2, filter_talents=True),
    )
    generator = RandomQueueGenerator(config)
    simulation = generator.simulate()
    path = tmp_path / "queue.json"
    path.write_text(generator.export_json(simulation), encoding="utf-8")

    entrants, matchmaking, registry = load_queue_file(path)

    assert [e.to_dict() for e in entrants] == simulation["entrants"]
    assert matchmaking == config.matchmaking
    assert registry.to_dict() == simulation["social"]

    replay = RandomQueueGenerator(
        RQGConfig(num_entrants=len(entrants), matchmaking=matchmaking)
    ).simulate(entrants, registry)
    assert replay["summary"]["matches"] == simulation["summary"]["matches"]


def test_load_queue_file_errors(tmp_path):
    with pytest.raises(FileLoadException):
        load_queue_file(tmp_path / "missing.json")

    empty = tmp_path / "empty.json"
    empty.write_text(json.dumps({"config": {}}), encoding="utf-8")
    with pytest.raises(FileLoadException):
        load_queue_file(empty)


@pytest.mark.parametrize("tick_ms", [0, -500])
def test_non_positive_tick_is_rejected(tick_ms):
    with pytest.raises(InvalidConfigurationException):
        RQGConfig(num_entrants=6, tick_ms=tick_ms, seed=1)


def test_replay_applies_saved_ignore_lists(tmp_path):
    # Equal ratings make every split a tie, so only the ignore lists decide
    entrants = [
        Entrant(id=i, role=Role.DPS, rating=1500, join_time=i * 100) for i in range(6)
    ]
    registry = IgnoreRegistry()
    registry.add_ignore(0, 1)
    generator = RandomQueueGenerator(RQGConfig(num_entrants=6, seed=4))
    simulation = generator.simulate(entrants, registry)
    path = tmp_path / "queue.json"
    path.write_text(generator.export_json(simulation), encoding="utf-8")

    loaded, _, saved = load_queue_file(path)
    replay = generator.simulate(loaded, saved)

    team1 = [e["id"] for e in replay["matches"][0]["team1"]]
    assert saved.conflicts(0, 1)
    assert not {0, 1} <= set(team1)
    assert replay["matches"][0]["avoid_pairs"] == 0


def test_queue_file_without_ignore_lists_loads_empty_registry(tmp_path):
    path = tmp_path / "queue.json"
    path.write_text(
        json.dumps({"entrants": [{"id": "a", "role": "dps", "rating": 1500}]}),
        encoding="utf-8",
    )

    _, config, registry = load_queue_file(path)

    assert config is None
    assert registry.ignores == {}
