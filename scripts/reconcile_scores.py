#!/usr/bin/env python3
"""Recompute denormalized vote scores from the vote ledger.

Repairs scores left inconsistent by writers that bypassed the ledger.

Usage:
    python scripts/reconcile_scores.py                      # every kind, every target
    python scripts/reconcile_scores.py --kind community_post
    python scripts/reconcile_scores.py --kind question <id> <id>
"""

import argparse
import asyncio
import sys
from uuid import UUID

import logfire
from dishka import AsyncContainer

from paracosm.config import Settings
from paracosm.domain.service import VoteService
from paracosm.domain.value import TargetKind
from paracosm.util.di.container import create_container
from paracosm.util.observability import configure_logfire


async def reconcile_scores(
    container: AsyncContainer,
    target_kinds: list[TargetKind],
    target_ids: list[UUID] | None = None,
) -> dict[TargetKind, dict[UUID, int]]:
    """Reconcile each kind inside its own request scope (one transaction).

    Args:
        container: Application container
        target_kinds: Kinds to reconcile
        target_ids: Restrict to these targets (all targets if None)

    Returns:
        Reconciled scores per kind
    """
    results: dict[TargetKind, dict[UUID, int]] = {}
    for target_kind in target_kinds:
        async with container() as request_container:
            vote_service = await request_container.get(VoteService)
            results[target_kind] = await vote_service.reconcile_scores(
                target_kind, target_ids
            )
        logfire.info(
            "Scores reconciled",
            target_kind=target_kind.value,
            count=len(results[target_kind]),
        )
    return results


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--kind",
        dest="kinds",
        action="append",
        type=TargetKind,
        choices=list(TargetKind),
        help="Target kind to reconcile (repeatable, default: all)",
    )
    parser.add_argument("target_ids", nargs="*", type=UUID)
    args = parser.parse_args(argv)
    if args.target_ids and (not args.kinds or len(args.kinds) != 1):
        parser.error("target ids require exactly one --kind")
    return args


async def _run(args: argparse.Namespace) -> None:
    container = create_container()
    try:
        await reconcile_scores(
            container,
            args.kinds or list(TargetKind),
            args.target_ids or None,
        )
    finally:
        await container.close()


def main(argv: list[str] | None = None) -> int:
    """Run reconciliation and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        asyncio.run(_run(args))
        return 0
    except Exception as e:
        logfire.error(
            "Score reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
