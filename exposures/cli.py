"""CLI entrypoint for querying exposure site feeds."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from exposures.classify.classifier import classify_payload
from exposures.classify.rules import build_rules
from exposures.classify.tokens import clean_payload
from exposures.common.config_loader import load_feed_config
from exposures.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS
from exposures.common.errors import ExposureError
from exposures.common.fs import read_text
from exposures.common.ids import generate_run_id
from exposures.common.logging import build_logger, log_event
from exposures.common.models import Filter
from exposures.common.time_utils import parse_filter_date
from exposures.pipeline.export import limit_results, summary_line, write_results_csv
from exposures.query.engine import QueryEngine


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--file", default="-", help="feed file to read, '-' for stdin")
    parser.add_argument("--limit", type=int, default=0, help="limit how many results are shown")
    parser.add_argument("--status", default="", help="status rating [|new|archived|updated]")
    parser.add_argument("--location", default="")
    parser.add_argument("--street", default="")
    parser.add_argument("--suburb", default="")
    parser.add_argument("--state", default="")
    parser.add_argument("--contact", default="", help="contact rating [|close|casual|monitor]")
    parser.add_argument("--date", default="", help="date (formatted strictly as DD/MM/YYYY)")
    parser.add_argument("--start-time", default="")
    parser.add_argument("--end-time", default="")
    parser.add_argument("--fields", type=int, default=None, help="number of fields in the source line")
    parser.add_argument("-q", "--query", dest="positive", action="append", default=None)
    parser.add_argument("--qn", "--query-not", dest="negative", action="append", default=None)
    parser.add_argument("--raw", action="store_true", help="display output as raw feed lines")
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--log-dir", default=None)
    parser.add_argument("--run-id", default=None)
    return parser.parse_args(argv)


def build_filter(args: argparse.Namespace) -> Filter:
    query_date = parse_filter_date(args.date) if args.date else None
    return Filter(
        status=args.status,
        exposure_location=args.location,
        street=args.street,
        suburb=args.suburb,
        state=args.state,
        date=query_date,
        arrival_time=args.start_time,
        departure_time=args.end_time,
        contact=args.contact,
        field_count=args.fields,
        positive=tuple(args.positive or ()),
        negative=tuple(args.negative or ()),
    )


def _emit_raw(engine: QueryEngine, query: Filter, out: TextIO, limit: int) -> int:
    matched = 0

    def _sink(line: str) -> None:
        nonlocal matched
        if limit <= 0 or matched < limit:
            out.write(f"{line}\n")
        matched += 1

    engine.apply(query, sink=_sink)
    return matched


def _emit_table(engine: QueryEngine, query: Filter, out: TextIO, limit: int) -> tuple[int, int]:
    results = engine.apply(query)
    if not results:
        out.write("no results found\n")
        return 0, 0
    shown = write_results_csv(out, limit_results(results, limit))
    return shown, len(results)


def run_command(args: argparse.Namespace, out: TextIO | None = None) -> int:
    run_id = args.run_id or generate_run_id()
    log_dir = Path(args.log_dir) if args.log_dir else None
    out = out or sys.stdout

    logger = build_logger(run_id, log_dir=log_dir, level=args.log_level)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None

    try:
        config = load_feed_config(Path(args.config_dir), overlay_config_dir=overlay_config_dir)
        query = build_filter(args)

        log_event(logger, "reading feed", run_id=run_id, stage="load", event="STAGE_START", status="ok")
        payload = clean_payload(read_text(args.file), min_fields=config.min_fields)
        # rows_in counts non-blank lines after cleaning, before classify rejects any.
        lines = [line for line in payload.split("\n") if line.strip()]

        records = classify_payload(payload, rules=build_rules(config.vocabulary), min_fields=config.min_fields)
        log_event(
            logger,
            "classified feed lines",
            run_id=run_id,
            stage="classify",
            event="STAGE_END",
            status="ok",
            rows_in=len(lines),
            rows_out=len(records),
        )

        engine = QueryEngine(records)
        if args.raw:
            total = _emit_raw(engine, query, out, args.limit)
            shown = min(total, args.limit) if args.limit > 0 else total
        else:
            shown, total = _emit_table(engine, query, out, args.limit)
        log_event(
            logger,
            summary_line(shown, total),
            run_id=run_id,
            stage="query",
            event="STAGE_END",
            status="ok",
            rows_in=len(records),
            rows_out=total,
        )
    except ExposureError as exc:
        log_event(
            logger,
            str(exc),
            level=logging.ERROR,
            run_id=run_id,
            event="RUN_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL

    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except Exception:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
