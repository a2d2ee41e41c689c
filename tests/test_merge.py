import logging

import pytest

from ffnerd.errors import InjuryMismatchError
from ffnerd.ingest import merge_injuries
from ffnerd.models import Injury, InjuryReport, ProjectedPlayer, Projection


def _projected(player_id: int, name: str, points: float = 10.0, week: int = 5) -> ProjectedPlayer:
    return ProjectedPlayer(
        id=player_id,
        name=name,
        team="NE",
        position="RB",
        projected_points=points,
        rank=player_id,
        projection=Projection(week=week, standard=points),
    )


def _injury(player_id: int, desc: str = "Knee", week: int = 5) -> InjuryReport:
    return InjuryReport(
        id=player_id,
        name=f"Player {player_id}",
        team="NE",
        position="RB",
        injury=Injury(week=week, injury_desc=desc, game_status_desc="Questionable"),
    )


def test_merge_marks_injured_players_in_projection_order():
    projections = [_projected(3, "C"), _projected(1, "A"), _projected(2, "B")]

    merged, report = merge_injuries(projections, [_injury(1)])

    assert [p.id for p in merged] == [3, 1, 2]
    assert [p.injured for p in merged] == [False, True, False]
    assert merged[1].injury is not None
    assert merged[1].injury.injury_desc == "Knee"
    assert merged[0].injury is None
    assert merged[1].projected_points == pytest.approx(10.0)
    assert report.total_players == 3
    assert report.injured_players == 1
    assert report.orphaned_injuries == []


def test_merge_is_idempotent():
    projections = [_projected(1, "A"), _projected(2, "B")]
    injuries = [_injury(2, "Hamstring")]

    first, _ = merge_injuries(projections, injuries)
    second, _ = merge_injuries(projections, injuries)

    assert first == second


def test_merge_does_not_mutate_inputs():
    projections = [_projected(1, "A")]

    merge_injuries(projections, [_injury(1)])

    assert not hasattr(projections[0], "injured")


def test_merge_lenient_skips_orphaned_injury(caplog):
    projections = [_projected(1, "A"), _projected(2, "B")]

    with caplog.at_level(logging.WARNING, logger="ffnerd.ingest.merge"):
        merged, report = merge_injuries(projections, [_injury(1), _injury(99)])

    assert len(merged) == len(projections)
    assert {p.id for p in merged} == {1, 2}
    assert [r.id for r in report.orphaned_injuries] == [99]
    assert "player_id=99" in caplog.text


def test_merge_strict_raises_on_orphaned_injury():
    projections = [_projected(1, "A")]

    with pytest.raises(InjuryMismatchError) as excinfo:
        merge_injuries(projections, [_injury(99, week=7)], strict=True)

    assert excinfo.value.player_id == 99
    assert excinfo.value.week == 7
    assert isinstance(excinfo.value, LookupError)
