"""Command-line front end for inspecting and exporting party members."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from ebkit.core.errors import EncodeError, UnsupportedFieldError
from ebkit.core.logging import get_logger, setup_logging
from ebkit.core.rng import RNG
from ebkit.data.errors import DataError
from ebkit.data.repositories import PartyMembersRepository
from ebkit.domain.entities import NAME_WIDTH
from ebkit.domain.leveling import project_level_up
from ebkit.domain.text import EarthboundPlainTextEncoding
from ebkit.presentation.cli import config
from ebkit.services import FactoryError, SaveExportError, SaveService
from ebkit.services.factories import create_party_member

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNSUPPORTED = 2

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ebkit",
        description="Inspect EarthBound party members and export their save records.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=config.LOG_LEVELS,
        help="Override the configured log level.",
    )
    parser.add_argument("--config", type=Path, help="Path to a config.json file.")
    parser.add_argument("--definitions", type=Path, help="Directory holding party_members.json.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List defined party members.")

    estimate = subparsers.add_parser("estimate", help="Estimate HP/PP maxima for the next level.")
    estimate.add_argument("member_id")
    estimate.add_argument("--previous-vitality", type=int, help="Vitality at the previous level.")
    estimate.add_argument("--previous-iq", type=int, help="IQ at the previous level.")
    estimate.add_argument("--seed", type=int, help="Seed for the unchanged-stat roll.")

    export = subparsers.add_parser("export", help="Write a member's binary save record.")
    export.add_argument("member_id")
    export.add_argument("--out", type=Path, help="Output file (defaults to the export dir).")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = config.load_config(args.config)
    setup_logging(args.log_level or settings["log_level"])
    repo = PartyMembersRepository(args.definitions)

    try:
        if args.command == "list":
            return _list_members(repo)
        if args.command == "estimate":
            return _estimate(repo, args)
        return _export(repo, args, Path(settings["export_dir"]))
    except (DataError, FactoryError, SaveExportError, EncodeError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        return EXIT_ERROR


def _list_members(repo: PartyMembersRepository) -> int:
    for member_def in repo.all():
        print(
            f"{member_def.id:<8} {member_def.name:<8} Lv{member_def.level:>3}  "
            f"HP {member_def.hp_current}/{member_def.hp_max}  PP {member_def.pp_current}/{member_def.pp_max}  "
            f"PSI {member_def.psychic_points_state.name.lower()}"
        )
    return EXIT_OK


def _estimate(repo: PartyMembersRepository, args: argparse.Namespace) -> int:
    member = create_party_member(args.member_id, repo)
    psychic_points_state = repo.get(args.member_id).psychic_points_state
    projection = project_level_up(
        member,
        psychic_points_state,
        previous_vitality=args.previous_vitality,
        previous_iq=args.previous_iq,
        rng=RNG(args.seed),
    )
    print(f"{member.character.name} (Lv{member.character.level})")
    print(f"  HP max estimate: {projection.estimated_hp_max}  projected: {projection.projected_hp_max}"
          + ("  (vitality unchanged, +1..3)" if projection.hp_used_fallback else ""))
    print(f"  PP max estimate: {projection.estimated_pp_max}  projected: {projection.projected_pp_max}"
          + ("  (IQ unchanged, +1..3)" if projection.pp_used_fallback else ""))
    return EXIT_OK


def _export(repo: PartyMembersRepository, args: argparse.Namespace, export_dir: Path) -> int:
    member = create_party_member(args.member_id, repo)
    target = args.out or export_dir / f"{args.member_id}.bin"
    encoding = EarthboundPlainTextEncoding()
    if not member.character.name_fits:
        stored_name = encoding.decode(encoding.encode_padded(member.character.name, NAME_WIDTH))
        print(f"Note: name will be stored as {stored_name!r}.")
    try:
        SaveService(name_encoder=encoding).export_party_member(member, target)
    except UnsupportedFieldError as exc:
        print(f"Save encoding not yet supported (missing: {', '.join(exc.missing_fields)}).")
        partial = SaveService.partial_path(target)
        print(f"Incomplete record ({exc.bytes_written} bytes) left at {partial}; it is not a usable save.")
        return EXIT_UNSUPPORTED
    print(f"Wrote {target}.")
    return EXIT_OK
