"""CLI entry point: ``python -m medipredict.run <command>``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from medipredict.config import API_BASE_URL, CATEGORIES, MONTHS
from medipredict.derive import category_label, disease_meta, display_name
from medipredict.session import Phase, Session
from medipredict.utils.io import export_payload, save_json
from medipredict.utils.logging import get_logger, quiet_transport_logs

log = get_logger("medipredict.run")


def _awareness(text: str) -> float:
    value = float(text)
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError("awareness must be between 0 and 1")
    return value


def cmd_history(args: argparse.Namespace) -> int:
    session = Session(month=args.month)
    asyncio.run(session.start())

    snapshot = session.history.snapshot
    if snapshot is None:
        log.warning(session.history.warning)
        return 1
    print(f"Average cases for {MONTHS[args.month - 1]}:")
    for disease, count in snapshot.rounded().items():
        print(f"  {display_name(disease):<16} {count:>6}")
    return 0


def cmd_predict(args: argparse.Namespace) -> int:
    session = Session(month=args.month)
    session.inputs.set_category(args.category)
    session.inputs.set_reading("humidity", args.humidity)
    session.inputs.set_reading("rainfall", args.rainfall)
    session.inputs.set_reading("temperature", args.temperature)
    session.inputs.set_festive(args.festive)
    session.inputs.set_awareness(args.awareness)

    for name in session.inputs.out_of_range():
        log.warning("%s reading looks out of range", name)

    asyncio.run(session.submit())
    if session.phase is not Phase.REVIEWING:
        log.error(session.error)
        return 1

    result = session.result
    view = session.view()
    if session.result_error:
        log.error(session.result_error)

    print(f"Target: {result.requested_month} · Category: {category_label(result.requested_category)}")
    print(f"Total expected patients: {result.total_expected_patients:,}")
    for disease, count in view.visible_entries.items():
        meta = disease_meta(disease)
        print(
            f"  {meta.icon} {display_name(disease):<16} {count:>6}  "
            f"{view.severity_by_disease[disease]:<9} {meta.ward}"
        )
    if result.recommendations:
        print("Recommendations:")
        for rec in result.recommendations:
            print(f"  - {rec}")

    if args.out:
        save_json(export_payload(result, view), Path(args.out))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="MediPredict forecast CLI")
    parser.add_argument("--verbose", action="store_true", help="Show HTTP client logs.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_hist = sub.add_parser("history", help="Show historical average cases for a month.")
    p_hist.add_argument("--month", type=int, choices=range(1, 13), required=True)

    p_pred = sub.add_parser("predict", help="Request a monthly case-count forecast.")
    p_pred.add_argument("--month", type=int, choices=range(1, 13), required=True)
    p_pred.add_argument("--category", choices=CATEGORIES, default=CATEGORIES[0])
    p_pred.add_argument("--humidity", required=True, help="Relative humidity (%%).")
    p_pred.add_argument("--rainfall", required=True, help="Rainfall (mm).")
    p_pred.add_argument("--temperature", required=True, help="Temperature (°C).")
    p_pred.add_argument("--festive", action="store_true", help="Major festival or event this month.")
    p_pred.add_argument("--awareness", type=_awareness, default=0.5, help="Public awareness, 0-1.")
    p_pred.add_argument("--out", help="Write the result and derived view to this JSON file.")

    args = parser.parse_args()
    if not args.verbose:
        quiet_transport_logs()
    log.info("Using prediction service at %s", API_BASE_URL)

    dispatch = {
        "history": cmd_history,
        "predict": cmd_predict,
    }
    sys.exit(dispatch[args.command](args))


if __name__ == "__main__":
    main()
