#!/usr/bin/env python3
"""
Soulbound reputation CLI: analyze trajectories and replay activity streams.

analyze FILE   JSON array of observations {valence, arousal, dominance, timestamp[, confidence]}.
               Prints trend, complexity, variance complexity, category, profile and prediction.
replay FILE    JSON array of activities {category_scores, occurred_at[, observations]}.
               An entry with "observations" gets emotional_consistency derived from them;
               {interaction_type, occurred_at[, is_positive]} records a community interaction.
               Applies them in order to one identity; prints state, history, badges and metrics.

Usage:
  python -m soulbound_reputation.cli analyze observations.json
  python -m soulbound_reputation.cli replay activities.json --identity sbt-1 --verification verified
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from soulbound_reputation.config import get_settings
from soulbound_reputation.core.exceptions import ReputationError
from soulbound_reputation.emotional_memory import (
    EmotionalObservation,
    classify_trend,
    complexity,
    compute_emotional_profile,
    emotional_category,
    predict_next_observation,
    variance_complexity,
)
from soulbound_reputation.reputation_engine import (
    Activity,
    ReputationRegistry,
    VerificationLevel,
    build_emotional_activity,
)
from soulbound_reputation.sbt_logging import get_logger

logger = get_logger(__name__)


def _load_json_array(path: Path) -> list[dict[str, Any]]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array")
    return data


def _parse_observations(rows: list[dict[str, Any]]) -> list[EmotionalObservation]:
    return [EmotionalObservation.from_dict(r) for r in rows]


def analyze(rows: list[dict[str, Any]]) -> dict[str, Any]:
    """Analyzer report for a list of observation dicts."""
    trajectory = _parse_observations(rows)
    latest = trajectory[-1] if trajectory else None
    prediction = predict_next_observation(trajectory)
    return {
        "observations": len(trajectory),
        "trend": classify_trend(trajectory).value,
        "complexity": complexity(trajectory),
        "variance_complexity": variance_complexity(trajectory),
        "category": emotional_category(latest.valence, latest.arousal) if latest else None,
        "profile": compute_emotional_profile(trajectory).to_dict(),
        "prediction": prediction.to_dict() if prediction else None,
    }


def _activity_from_row(row: dict[str, Any]) -> Activity:
    if "observations" in row:
        return build_emotional_activity(
            _parse_observations(row["observations"]),
            occurred_at=int(row["occurred_at"]),
            extra_scores=row.get("category_scores"),
        )
    return Activity.from_dict(row)


def replay(
    rows: list[dict[str, Any]],
    identity_id: str,
    verification: VerificationLevel = VerificationLevel.BASIC,
) -> dict[str, Any]:
    """Apply activity rows in order to a fresh identity; return state, history, badges and metrics."""
    settings = get_settings()
    registry = ReputationRegistry(settings.reputation_config(), history_max=settings.history_max)
    registry.set_verification_level(identity_id, verification)
    for row in rows:
        if "interaction_type" in row:
            registry.record_interaction(
                identity_id,
                row["interaction_type"],
                occurred_at=int(row["occurred_at"]),
                is_positive=bool(row.get("is_positive", True)),
            )
        else:
            registry.apply(identity_id, _activity_from_row(row))
    return {
        "identity_id": identity_id,
        "state": registry.get_state(identity_id).to_dict(),
        "history": [p.to_dict() for p in registry.get_history(identity_id)],
        "badges": [b.value for b in registry.get_badges(identity_id)],
        "metrics": registry.get_metrics(identity_id).to_dict(),
        "engagement": registry.get_engagement(identity_id).to_dict(),
    }


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="soulbound-reputation",
        description="Emotional trend analysis and time-decayed reputation scoring",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Analyze an emotional trajectory")
    p_analyze.add_argument("file", type=Path, help="JSON array of observations")

    p_replay = sub.add_parser("replay", help="Replay activities into one identity's reputation")
    p_replay.add_argument("file", type=Path, help="JSON array of activities")
    p_replay.add_argument("--identity", default="identity", help="Identity id (default: identity)")
    p_replay.add_argument(
        "--verification",
        choices=[v.value for v in VerificationLevel],
        default=VerificationLevel.BASIC.value,
        help="Verification level (default: basic)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        rows = _load_json_array(args.file)
    except (OSError, ValueError) as e:
        print(f"[soulbound-reputation] ERROR: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "analyze":
            out = analyze(rows)
        else:
            out = replay(rows, args.identity, VerificationLevel(args.verification))
    except ReputationError as e:
        logger.error("cli_rejected_input", command=args.command, **e.to_dict())
        print(f"[soulbound-reputation] ERROR: {e}", file=sys.stderr)
        return 1
    except (KeyError, TypeError, ValueError) as e:
        print(f"[soulbound-reputation] ERROR: malformed record: {e}", file=sys.stderr)
        return 1

    print(json.dumps(out, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
