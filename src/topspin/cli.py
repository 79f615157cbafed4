"""Command line interface for Topspin simulations.

Usage:
    topspin [--seed N] [--config FILE] [--verbose] [--json] <command> ...
"""

# Topspin
# Copyright (C) 2025  Topspin developers
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

import argparse
import json
import random
import sys
from typing import Any, List, Optional, Sequence

from topspin.config import SimulationConfig, load_config
from topspin.constants import (
    DEFAULT_TARGET_RATING,
    FULL_ROSTER_SIZE,
    LEAGUE_DAYS_PER_PHASE,
    LEAGUE_OPPONENT_COUNT,
    REDUCED_ROSTER_SIZE,
)
from topspin.exceptions import TopspinException
from topspin.models.competition import Competition, CompetitionShape, CompetitionTier
from topspin.models.factory import CompetitorFactory
from topspin.models.team import Team
from topspin.pairing.internal_swiss import simulate_internal_tournament
from topspin.pairing.round_robin import generate_phase_schedule
from topspin.simulation.match import simulate_match
from topspin.simulation.meeting import simulate_meeting
from topspin.tournament.dispatcher import simulate_competition
from topspin.tournament.league import compute_league_standings, simulate_league_day
from topspin.utils import set_log_level, setup_logger
from topspin.utils.validation import (
    validate_pool_registrants_strict,
    validate_rating_strict,
)

logger = setup_logger(__name__)


def _make_team(
    factory: CompetitorFactory, team_id: str, rating: float, size: int
) -> Team:
    players = [
        factory.create_random_competitor(f"{team_id}-p{i + 1}", rating)
        for i in range(size)
    ]
    return Team(id=team_id, name=f"Team {team_id}", players=players)


def _emit(args: argparse.Namespace, data: Any, lines: Sequence[str]) -> None:
    if args.json:
        print(json.dumps(data, indent=2))
    else:
        print("\n".join(lines))


def _score_line(match) -> str:
    return " ".join(f"{s.score_a}-{s.score_b}" for s in match.sets)


def cmd_match(args, config: SimulationConfig, rng: random.Random) -> int:
    factory = CompetitorFactory(rng=rng)
    player_a = factory.create_random_competitor("A", validate_rating_strict(args.rating_a))
    player_b = factory.create_random_competitor("B", validate_rating_strict(args.rating_b))
    match = simulate_match(player_a, player_b, rng)
    winner = player_a if match.winner_id == player_a.id else player_b
    _emit(
        args,
        {
            "players": [player_a.to_dict(), player_b.to_dict()],
            "match": match.to_dict(include_log=args.log),
        },
        [
            f"{player_a.name} ({player_a.rating:.0f}) vs {player_b.name} ({player_b.rating:.0f})",
            f"Sets: {_score_line(match)}",
            f"Winner: {winner.name} (+{match.exchange.gain:g} / {match.exchange.loss:g})",
        ]
        + ([p.description for p in match.point_log] if args.log else []),
    )
    return 0


def cmd_meeting(args, config: SimulationConfig, rng: random.Random) -> int:
    factory = CompetitorFactory(rng=rng)
    home = _make_team(factory, "home", args.rating, args.size)
    away = _make_team(factory, "away", args.rating, args.size)
    meeting = simulate_meeting(
        home.players, away.players, rng, home_name=home.name, away_name=away.name
    )
    names = {p.id: p.name for p in home.players + away.players}
    lines = [f"{meeting.home_name} {meeting.home_score} - {meeting.away_score} {meeting.away_name}"]
    for match in meeting.matches:
        lines.append(
            f"  {names.get(match.player_a_id, match.player_a_id)} vs "
            f"{names.get(match.player_b_id, match.player_b_id)}: {_score_line(match)}"
        )
    _emit(args, meeting.to_dict(), lines)
    return 0


def cmd_schedule(args, config: SimulationConfig, rng: random.Random) -> int:
    opponents = [f"T{i}" for i in range(1, LEAGUE_OPPONENT_COUNT + 1)]
    schedule = generate_phase_schedule("T0", opponents)
    lines = []
    for day, fixtures in schedule.items():
        lines.append(f"Day {day}: " + ", ".join(f"{h} v {a}" for h, a in fixtures))
    _emit(
        args,
        {str(day): [list(f) for f in fixtures] for day, fixtures in schedule.items()},
        lines,
    )
    return 0


def cmd_league(args, config: SimulationConfig, rng: random.Random) -> int:
    factory = CompetitorFactory(rng=rng)
    teams = [
        _make_team(factory, f"T{i}", args.rating, FULL_ROSTER_SIZE)
        for i in range(LEAGUE_OPPONENT_COUNT + 1)
    ]
    tracked, opponents = teams[0], teams[1:]
    days = [args.day] if args.day is not None else range(1, LEAGUE_DAYS_PER_PHASE + 1)

    meetings = []
    for day in days:
        meetings.extend(
            simulate_league_day(
                day, tracked, opponents, rng, phase=args.phase, include_tracked=True
            )
        )
    standings = compute_league_standings(teams, meetings)

    lines = [
        f"Day {m.day_number}: {m.home_name} {m.home_score} - {m.away_score} {m.away_name}"
        for m in meetings
    ]
    lines.append("")
    for position, entry in enumerate(standings, 1):
        lines.append(
            f"{position:>2}. {entry.name:<10} {entry.points:>3} pts "
            f"{entry.wins}W {entry.draws}D {entry.losses}L "
            f"({entry.matches_won}-{entry.matches_lost})"
        )
    _emit(
        args,
        {
            "meetings": [m.to_dict() for m in meetings],
            "standings": [e.to_dict() for e in standings],
        },
        lines,
    )
    return 0


def cmd_competition(args, config: SimulationConfig, rng: random.Random) -> int:
    factory = CompetitorFactory(rng=rng)
    shape = CompetitionShape(args.shape) if args.shape else None
    competition = Competition(
        id="cli-competition",
        name="Command line competition",
        shape=shape,
        tier=CompetitionTier(args.tier),
        team_size=2 if shape == CompetitionShape.PAIRED_POOL else 1,
    )
    registrants = [
        factory.create_random_competitor(f"R{i + 1}", args.rating)
        for i in range(args.registrants)
    ]
    if competition.shape == CompetitionShape.PAIRED_POOL:
        validate_pool_registrants_strict(registrants)
    results = simulate_competition(
        competition, registrants, rng, rating_cap=config.default_rating_cap
    )
    lines = [
        f"{r.competitor_name:<22} {r.rating:>5} {r.placement_label:<28} "
        f"{r.wins}W {r.losses}L {r.rating_change:+g}"
        for r in results
    ]
    _emit(
        args,
        {
            "competition": competition.to_dict(),
            "results": [r.to_dict() for r in results],
        },
        lines,
    )
    return 0


def cmd_internal(args, config: SimulationConfig, rng: random.Random) -> int:
    factory = CompetitorFactory(rng=rng)
    players = [
        factory.create_random_competitor(f"P{i + 1}", args.rating)
        for i in range(args.players)
    ]
    result = simulate_internal_tournament(
        players,
        rng,
        num_rounds=args.rounds or config.internal_rounds,
        bye_points=config.internal_bye_points,
    )
    lines = [
        f"{s.rank:>2}. {s.competitor.name:<22} {s.score:>3} pts "
        f"{s.wins}W {s.losses}L {s.byes} bye(s)"
        for s in result.standings
    ]
    _emit(args, result.to_dict(), lines)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="topspin",
        description="Simulate table tennis matches, meetings and competitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One match between two generated players
  topspin --seed 7 match --rating-a 900 --rating-b 1200

  # A full league phase with standings, as JSON
  topspin --json league

  # A criterium bracket for five registrants
  topspin competition --shape ranked_bracket --tier criterium --registrants 5
        """,
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument("--config", help="Load configuration from JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)

    match = subparsers.add_parser("match", help="Simulate a single match")
    match.add_argument("--rating-a", type=float, default=DEFAULT_TARGET_RATING)
    match.add_argument("--rating-b", type=float, default=DEFAULT_TARGET_RATING)
    match.add_argument("--log", action="store_true", help="Include every point")
    match.set_defaults(handler=cmd_match)

    meeting = subparsers.add_parser("meeting", help="Simulate a team meeting")
    meeting.add_argument(
        "--size",
        type=int,
        choices=[REDUCED_ROSTER_SIZE, FULL_ROSTER_SIZE],
        default=FULL_ROSTER_SIZE,
        help="Players per team (default: 4)",
    )
    meeting.add_argument("--rating", type=float, default=DEFAULT_TARGET_RATING)
    meeting.set_defaults(handler=cmd_meeting)

    schedule = subparsers.add_parser("schedule", help="Print a league phase schedule")
    schedule.set_defaults(handler=cmd_schedule)

    league = subparsers.add_parser("league", help="Simulate league days and standings")
    league.add_argument("--day", type=int, help="Single day to play (default: all)")
    league.add_argument("--phase", type=int, default=1)
    league.add_argument("--rating", type=float, default=DEFAULT_TARGET_RATING)
    league.set_defaults(handler=cmd_league)

    competition = subparsers.add_parser("competition", help="Simulate a competition")
    competition.add_argument(
        "--shape", choices=[s.value for s in CompetitionShape], default=None
    )
    competition.add_argument(
        "--tier",
        choices=[t.value for t in CompetitionTier],
        default=CompetitionTier.STANDARD.value,
    )
    competition.add_argument("--registrants", type=int, default=4)
    competition.add_argument("--rating", type=float, default=DEFAULT_TARGET_RATING)
    competition.set_defaults(handler=cmd_competition)

    internal = subparsers.add_parser("internal", help="Run an internal Swiss tournament")
    internal.add_argument("--players", type=int, default=8)
    internal.add_argument("--rounds", type=int, help="Rounds to play (default: config)")
    internal.add_argument("--rating", type=float, default=DEFAULT_TARGET_RATING)
    internal.set_defaults(handler=cmd_internal)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else SimulationConfig()
        if args.seed is not None:
            config.seed = args.seed
        set_log_level("DEBUG" if args.verbose else config.log_level)
        return args.handler(args, config, config.make_rng())
    except KeyboardInterrupt:
        logger.info("Simulation interrupted by user")
        return 130
    except TopspinException as e:
        logger.error("Simulation failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
