"""Load district statistics from a JSON file into the database.

Usage:
    python -m app.seed data/district_stats.json [--state Maharashtra]

The file holds a JSON array of district statistic objects.  Records without
a ``state`` take the ``--state`` value.  The whole file is one batch: an
invalid record aborts the load and nothing is written.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import structlog

from app.errors import RecordValidationError, RepositoryError
from app.middleware.logging import configure_structured_logging

DEFAULT_STATE = "Maharashtra"

logger = structlog.get_logger("agrismart.seed")


def load_records(path: Path, default_state: str = DEFAULT_STATE) -> list[dict[str, Any]]:
	payload = json.loads(path.read_text(encoding="utf-8"))
	if not isinstance(payload, list):
		raise ValueError(f"{path}: expected a JSON array of records")

	records: list[dict[str, Any]] = []
	for index, item in enumerate(payload):
		if not isinstance(item, dict):
			raise ValueError(f"{path}: record {index} is not an object")
		records.append({"state": default_state, **item})
	return records


async def seed_district_stats(records: list[dict[str, Any]]) -> int:
	from app.database import async_session_factory, engine
	from app.services.ingest_service import IngestService

	try:
		async with async_session_factory() as session, session.begin():
			receipt = await IngestService(session).ingest_district_stats(records)
	finally:
		await engine.dispose()
	return receipt.inserted_count


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="python -m app.seed", description=__doc__.splitlines()[0])
	parser.add_argument("file", type=Path, help="JSON array of district statistics")
	parser.add_argument("--state", default=DEFAULT_STATE, help="state for records that omit one")
	return parser


def main(argv: list[str] | None = None) -> int:
	configure_structured_logging()
	args = build_parser().parse_args(argv)

	try:
		records = load_records(args.file, args.state)
		inserted = asyncio.run(seed_district_stats(records))
	except RecordValidationError as exc:
		logger.error("seed_rejected", file=str(args.file), errors=exc.errors)
		return 1
	except (OSError, ValueError, RepositoryError) as exc:
		logger.error("seed_failed", file=str(args.file), error=str(exc))
		return 1

	logger.info("seed_complete", file=str(args.file), inserted_count=inserted)
	return 0


if __name__ == "__main__":
	sys.exit(main())
