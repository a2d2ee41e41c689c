"""Combine weekly projections with weekly injury reports."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from ffnerd.errors import InjuryMismatchError
from ffnerd.models import InjuryReport, MergedPlayer, ProjectedPlayer


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeReport:
    total_players: int
    injured_players: int
    orphaned_injuries: List[InjuryReport] = field(default_factory=list)


def merge_injuries(
    projections: Sequence[ProjectedPlayer],
    injuries: Sequence[InjuryReport],
    *,
    strict: bool = False,
) -> Tuple[List[MergedPlayer], MergeReport]:
    """Annotate each projected player with its injury report.

    Players keep projection order. An injury whose player id is not among the
    projections raises :class:`InjuryMismatchError` when ``strict`` is set;
    otherwise it is skipped and listed in ``MergeReport.orphaned_injuries``.
    """

    players: Dict[int, MergedPlayer] = {}
    for player in projections:
        players[player.id] = MergedPlayer.model_validate({**player.model_dump(), "injured": False})

    injured: set[int] = set()
    orphaned: List[InjuryReport] = []
    for report in injuries:
        existing = players.get(report.id)
        if existing is None:
            if strict:
                raise InjuryMismatchError(report.id, report.name, report.injury.week)
            logger.warning(
                "Skipping injury for player_id=%s (%s): no week %s projection",
                report.id,
                report.name,
                report.injury.week,
            )
            orphaned.append(report)
            continue
        players[report.id] = existing.model_copy(update={"injured": True, "injury": report.injury})
        injured.add(report.id)

    merged = list(players.values())
    summary = MergeReport(
        total_players=len(merged),
        injured_players=len(injured),
        orphaned_injuries=orphaned,
    )
    return merged, summary
