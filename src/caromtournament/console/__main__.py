"""Unified Tournament CLI for Carom Tournament.

This module provides an interactive command-line interface for creating a
tournament, entering scores and following standings and brackets. The
tournament is kept in a JSON snapshot between commands.
"""

# Carom Tournament
# Copyright (C) 2025  Carom Tournament developers
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
import shlex
import sys
from dataclasses import replace
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from caromtournament.constants import APP_NAME, TBD
from caromtournament.controllers import (
    TournamentSession,
    create_tournament,
    round_display_name,
)
from caromtournament.exceptions import CaromTournamentException
from caromtournament.models import Match, Team, TournamentType, default_team, default_teams
from caromtournament.utils import configure_logging, setup_logger
from caromtournament.utils.snapshot_store import SnapshotStore

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Tournament commands and the options offered for completion
COMMANDS = {
    "new": {
        "description": "Create a league or knockout tournament",
        "options": [
            "--name",
            "--teams",
            "--count",
            "--type",
            "--matches-per-opponent",
            "--with-final",
        ],
    },
    "simple": {"description": "Start the fixed three-team league with a final", "options": []},
    "score": {"description": "Enter a score: score MATCH_ID HOME AWAY", "options": []},
    "clear": {"description": "Clear a score: clear MATCH_ID", "options": []},
    "matches": {"description": "Show the match schedule", "options": ["--pending"]},
    "standings": {"description": "Show the league table", "options": []},
    "bracket": {"description": "Show the knockout bracket", "options": []},
    "history": {"description": "Show played matches, most recent first", "options": []},
    "reset": {"description": "Clear every result and restart the schedule", "options": []},
}

EXIT_WORDS = ("exit", "quit")


def print_banner():
    print(f"{Colors.BOLD}{Colors.OKBLUE}{APP_NAME}{Colors.ENDC}")
    print(f"Type {Colors.BOLD}help{Colors.ENDC} for commands, {Colors.BOLD}exit{Colors.ENDC} to leave\n")


def print_commands_list():
    """Print every tournament command with its one-line description."""
    print(f"\n{Colors.BOLD}Commands:{Colors.ENDC}")
    for name, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{name:<10}{Colors.ENDC} {info['description']}")
    print(f"  {Colors.OKGREEN}{'help CMD':<10}{Colors.ENDC} Show the arguments of CMD\n")


def print_command_help(command: str, parser: Optional[argparse.ArgumentParser] = None):
    """Print the argparse usage of one command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return
    parser = parser or create_main_parser()
    # Let argparse render the subcommand's own usage and options
    try:
        parser.parse_args([command, "--help"])
    except SystemExit:
        pass


def create_completer() -> NestedCompleter:
    """Complete command names, then the options of the chosen command."""
    completions = {
        name: WordCompleter(info["options"]) if info["options"] else None
        for name, info in COMMANDS.items()
    }
    completions["help"] = WordCompleter(list(COMMANDS))
    return NestedCompleter.from_nested_dict(completions)


# ========== Session helpers ==========


def open_session(store: SnapshotStore) -> TournamentSession:
    """Resume whatever tournament the snapshot holds.

    Raises:
        CaromTournamentException: If the snapshot holds no tournament
    """
    session = TournamentSession.load(store)
    if session is not None:
        return session
    if store.load_matches() is not None:
        return TournamentSession.simple_league(store)
    raise CaromTournamentException(
        f"No tournament in {store.path}. Start one with 'new' or 'simple'."
    )


def _build_teams(args: argparse.Namespace) -> List[Team]:
    if args.teams:
        return [replace(default_team(i), name=name) for i, name in enumerate(args.teams)]
    return default_teams(args.count)


def _match_line(session: TournamentSession, match: Match) -> str:
    tournament = session.tournament
    home = tournament.team_name(match.home_team_id)
    away = tournament.team_name(match.away_team_id)
    if match.home_score is None and match.away_score is None:
        score = "vs"
    else:
        home_score = "?" if match.home_score is None else match.home_score
        away_score = "?" if match.away_score is None else match.away_score
        score = f"{home_score} - {away_score}"
    tag = match.match_type.value
    return f"  {match.id:14} [{tag:8}] {home:>20}  {score:^9}  {away}"


# ========== Commands ==========


def run_new_command(args: argparse.Namespace) -> int:
    """Create a new tournament, replacing any saved one."""
    tournament = create_tournament(
        args.name or "",
        _build_teams(args),
        TournamentType(args.type.upper()),
        matches_per_opponent=args.matches_per_opponent,
        with_final=args.with_final,
    )
    # Only replace the saved tournament once the new one is valid
    store = SnapshotStore(args.file)
    store.clear()
    session = TournamentSession(tournament, store=store)
    session.save()
    print(
        f"{Colors.OKGREEN}Created {session.name!r}: {len(session.teams)} teams, "
        f"{len(session.matches)} matches{Colors.ENDC}"
    )
    return 0


def run_simple_command(args: argparse.Namespace) -> int:
    """Start the fixed three-team league."""
    store = SnapshotStore(args.file)
    store.clear()
    session = TournamentSession.simple_league(store)
    print(f"{Colors.OKGREEN}Started {session.name}: {len(session.matches)} group games{Colors.ENDC}")
    return 0


def run_score_command(args: argparse.Namespace) -> int:
    session = open_session(SnapshotStore(args.file))
    before = session.matches
    session.submit_score(args.match_id, args.home, args.away)
    if session.matches == before:
        print(f"{Colors.WARNING}Score not applied (check the match id and digits){Colors.ENDC}")
        return 1
    match = session.tournament.get_match(args.match_id)
    print(session.describe_result(match))
    return 0


def run_clear_command(args: argparse.Namespace) -> int:
    session = open_session(SnapshotStore(args.file))
    before = session.matches
    session.clear_score(args.match_id)
    if session.matches == before:
        print(f"{Colors.WARNING}Nothing cleared (unknown or unplayed match {args.match_id}){Colors.ENDC}")
        return 1
    print(f"Cleared {args.match_id}")
    return 0


def run_matches_command(args: argparse.Namespace) -> int:
    session = open_session(SnapshotStore(args.file))
    print(f"\n{Colors.BOLD}{session.name} - Game Schedule{Colors.ENDC}")
    for match in session.matches:
        if args.pending and match.is_completed:
            continue
        print(_match_line(session, match))
    completed, total = session.group_progress()
    if total:
        print(f"\n  {completed} / {total} group games played")
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    session = open_session(SnapshotStore(args.file))
    print(f"\n{Colors.BOLD}{session.name} - Standings{Colors.ENDC}")
    print(f"  {'#':>2}  {'Team':20} {'P':>3} {'W':>3} {'D':>3} {'L':>3} {'PD':>4} {'Pts':>4}")
    for rank, stats in enumerate(session.standings(), start=1):
        print(
            f"  {rank:>2}  {stats.name:20} {stats.played:>3} {stats.won:>3} "
            f"{stats.drawn:>3} {stats.lost:>3} {stats.goal_difference:>4} {stats.points:>4}"
        )
    return 0


def run_bracket_command(args: argparse.Namespace) -> int:
    session = open_session(SnapshotStore(args.file))
    rounds = session.bracket()
    if not rounds:
        print(f"{Colors.WARNING}{session.name} has no knockout bracket{Colors.ENDC}")
        return 1
    for label, matches in rounds.items():
        print(f"\n{Colors.BOLD}{round_display_name(label)}{Colors.ENDC}")
        for match in matches:
            print(_match_line(session, match))
    winner = session.champion()
    if winner is not None and winner != TBD:
        print(f"\n{Colors.OKGREEN}Champion: {session.tournament.team_name(winner)}{Colors.ENDC}")
    return 0


def run_history_command(args: argparse.Namespace) -> int:
    session = open_session(SnapshotStore(args.file))
    history = session.match_history()
    if not history:
        print("No games played yet")
        return 0
    for number, match in zip(range(len(history), 0, -1), history):
        print(f"  #{number:<3} {session.describe_result(match)}")
    return 0


def run_reset_command(args: argparse.Namespace) -> int:
    session = open_session(SnapshotStore(args.file))
    session.reset()
    print(f"{Colors.OKGREEN}{session.name} reset{Colors.ENDC}")
    return 0


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="carom",
        description=f"{APP_NAME} command-line interface",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  carom

  # Eight team knockout
  carom new --type knockout --count 8

  # Enter a result
  carom score match_1 3 1

  # League table
  carom standings
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument("--file", help="Snapshot file (default: ~/.caromtournament/tournament.json)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    new_parser = subparsers.add_parser("new", help="Create a tournament")
    new_parser.add_argument("--name")
    new_parser.add_argument("--teams", nargs="+")
    new_parser.add_argument("--count", type=int, default=4)
    new_parser.add_argument("--type", choices=["league", "knockout"], default="league")
    new_parser.add_argument("--matches-per-opponent", type=int)
    new_parser.add_argument("--with-final", action="store_true")
    new_parser.set_defaults(func=run_new_command)

    simple_parser = subparsers.add_parser("simple", help="Three-team league with a final")
    simple_parser.set_defaults(func=run_simple_command)

    score_parser = subparsers.add_parser("score", help="Enter a score")
    score_parser.add_argument("match_id")
    score_parser.add_argument("home")
    score_parser.add_argument("away")
    score_parser.set_defaults(func=run_score_command)

    clear_parser = subparsers.add_parser("clear", help="Clear a score")
    clear_parser.add_argument("match_id")
    clear_parser.set_defaults(func=run_clear_command)

    matches_parser = subparsers.add_parser("matches", help="Show the schedule")
    matches_parser.add_argument("--pending", action="store_true")
    matches_parser.set_defaults(func=run_matches_command)

    standings_parser = subparsers.add_parser("standings", help="Show the league table")
    standings_parser.set_defaults(func=run_standings_command)

    bracket_parser = subparsers.add_parser("bracket", help="Show the knockout bracket")
    bracket_parser.set_defaults(func=run_bracket_command)

    history_parser = subparsers.add_parser("history", help="Show played matches")
    history_parser.set_defaults(func=run_history_command)

    reset_parser = subparsers.add_parser("reset", help="Restart the schedule")
    reset_parser.set_defaults(func=run_reset_command)

    return parser


def run_command(args: argparse.Namespace) -> int:
    """Dispatch a parsed command, reporting tournament errors."""
    if not hasattr(args, "func"):
        create_main_parser().print_help()
        return 0
    try:
        return args.func(args)
    except CaromTournamentException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug("Command failed", exc_info=True)
        return 1


def handle_line(line: str, parser: argparse.ArgumentParser, file: Optional[str] = None) -> bool:
    """Run one line typed at the prompt.

    Returns:
        False once the user asked to leave, True otherwise
    """
    try:
        parts = shlex.split(line)
    except ValueError as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return True
    if not parts:
        return True

    command = parts[0]
    if command in EXIT_WORDS:
        return False
    if command == "help":
        if len(parts) > 1:
            print_command_help(parts[1], parser)
        else:
            print_commands_list()
        return True
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC} (try 'help')")
        return True

    if file:
        parts = ["--file", file] + parts
    try:
        run_command(parser.parse_args(parts))
    except SystemExit:
        # argparse already printed the usage error
        pass
    return True


def run_interactive_mode(file: Optional[str] = None) -> int:
    """Prompt for commands until exit or end of input."""
    print_banner()

    prompt = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )
    parser = create_main_parser()

    while True:
        try:
            line = prompt.prompt("carom> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        if not handle_line(line, parser, file):
            break

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the carom CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    # No subcommand means interactive mode
    if args.interactive or args.command is None:
        return run_interactive_mode(args.file)

    return run_command(args)


if __name__ == "__main__":
    sys.exit(main())
