"""
Tests for the soulbound-reputation CLI (analyze and replay subcommands).

Input files are written to tmp_path; output is the JSON printed on stdout.
"""

from __future__ import annotations

import json

import pytest

from soulbound_reputation.cli import main

NOW = 10**9


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def _run(capsys, argv):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured


def test_analyze_reports_trend_and_metrics(tmp_path, capsys, clean_settings_env):
    path = _write(
        tmp_path,
        "obs.json",
        [
            {"valence": 0.0, "arousal": 0.0, "dominance": 0.0, "timestamp": 0},
            {"valence": 0.05, "arousal": 0.0, "dominance": 0.0, "timestamp": 60},
            {"valence": 0.15, "arousal": 0.0, "dominance": 0.0, "timestamp": 120},
        ],
    )
    code, captured = _run(capsys, ["analyze", path])
    assert code == 0
    out = json.loads(captured.out)
    assert out["observations"] == 3
    assert out["trend"] == "ascending"
    assert out["category"] == "Calm"
    assert out["complexity"] == pytest.approx(0.05)
    assert 0.0 <= out["variance_complexity"] <= 1.0
    assert out["prediction"]["timestamp"] == 120 + 3600
    assert set(out["profile"]) >= {"avg_valence", "consistency_score", "volatility"}


def test_analyze_empty_trajectory(tmp_path, capsys, clean_settings_env):
    code, captured = _run(capsys, ["analyze", _write(tmp_path, "obs.json", [])])
    assert code == 0
    out = json.loads(captured.out)
    assert out["trend"] == "stable"
    assert out["complexity"] == 0.0
    assert out["category"] is None
    assert out["prediction"] is None


def test_replay_applies_activities(tmp_path, capsys, clean_settings_env):
    path = _write(
        tmp_path,
        "activities.json",
        [
            {"category_scores": {"creative_output_quality": 1.0}, "occurred_at": NOW},
            {
                "occurred_at": NOW,
                "observations": [
                    {"valence": 0.2, "arousal": 0.2, "timestamp": NOW - 60},
                    {"valence": 0.2, "arousal": 0.2, "timestamp": NOW},
                ],
            },
        ],
    )
    code, captured = _run(capsys, ["replay", path, "--identity", "sbt-7", "--verification", "verified"])
    assert code == 0
    out = json.loads(captured.out)
    assert out["identity_id"] == "sbt-7"
    state = out["state"]
    assert state["verification_level"] == "verified"
    assert state["last_updated"] == NOW
    assert state["category_scores"]["creative_output_quality"] == pytest.approx(1.0)
    # second activity lands at elapsed 0, so the neutral prior is kept
    assert state["category_scores"]["emotional_consistency"] == pytest.approx(0.5)
    assert state["overall_score"] == pytest.approx(0.25 + 0.25 * 0.5)
    assert len(out["history"]) == 2
    assert out["badges"] == []


def test_replay_rejects_time_going_backwards(tmp_path, capsys, clean_settings_env):
    path = _write(
        tmp_path,
        "activities.json",
        [
            {"category_scores": {"community_engagement": 0.5}, "occurred_at": NOW},
            {"category_scores": {"community_engagement": 0.5}, "occurred_at": NOW - 10},
        ],
    )
    code, captured = _run(capsys, ["replay", path])
    assert code == 1
    assert "precedes" in captured.err
    assert captured.out == ""


def test_missing_file(tmp_path, capsys, clean_settings_env):
    code, captured = _run(capsys, ["analyze", str(tmp_path / "nope.json")])
    assert code == 1
    assert "ERROR" in captured.err


def test_non_array_input(tmp_path, capsys, clean_settings_env):
    code, captured = _run(capsys, ["analyze", _write(tmp_path, "obj.json", {"valence": 0.1})])
    assert code == 1
    assert "JSON array" in captured.err


def test_out_of_range_observation(tmp_path, capsys, clean_settings_env):
    path = _write(tmp_path, "obs.json", [{"valence": 3.0, "arousal": 0.0, "timestamp": 0}])
    code, captured = _run(capsys, ["analyze", path])
    assert code == 1
    assert "valence" in captured.err


def test_replay_non_numeric_occurred_at(tmp_path, capsys, clean_settings_env):
    path = _write(
        tmp_path,
        "activities.json",
        [{"category_scores": {"community_engagement": 0.5}, "occurred_at": "soon"}],
    )
    code, captured = _run(capsys, ["replay", path])
    assert code == 1
    assert "malformed record" in captured.err
    assert captured.out == ""


def test_analyze_non_numeric_timestamp(tmp_path, capsys, clean_settings_env):
    path = _write(tmp_path, "obs.json", [{"valence": 0.1, "arousal": 0.0, "timestamp": "x"}])
    code, captured = _run(capsys, ["analyze", path])
    assert code == 1
    assert "malformed record" in captured.err
    assert captured.out == ""


def test_replay_records_interactions_and_reports_metrics(tmp_path, capsys, clean_settings_env):
    path = _write(
        tmp_path,
        "activities.json",
        [
            {"interaction_type": "collaboration", "occurred_at": NOW},
            {"interaction_type": "mentorship", "occurred_at": NOW + 60, "is_positive": False},
        ],
    )
    code, captured = _run(capsys, ["replay", path, "--verification", "verified"])
    assert code == 0
    out = json.loads(captured.out)
    assert out["engagement"] == {
        "total_interactions": 2,
        "positive_feedback": 1,
        "community_building": pytest.approx(0.25),
    }
    assert out["state"]["category_scores"]["community_engagement"] == pytest.approx(0.1, abs=1e-3)
    assert set(out["metrics"]) == {"complexity", "creativity_index", "engagement_score"}
    assert len(out["history"]) == 2
