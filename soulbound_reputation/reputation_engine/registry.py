"""
Per-identity reputation registry: serialized updates, score trajectory, badges.

apply_activity reads the whole category map and last_updated, then replaces
both, so two interleaved updates for one identity could lose an activity or
decay twice. Each identity therefore owns a lock held for the full
read-compute-replace cycle. Identities never share an update lock; the
registry lock only guards the record map.

Only writes (apply, record_interaction, register, set_verification_level)
create records. Queries for an unknown identity return defaults.

In-memory only. Callers persist what get_state() returns.
"""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field, replace

from soulbound_reputation.core.exceptions import ReputationError
from soulbound_reputation.reputation_engine.activity import (
    build_community_activity,
    update_community_engagement,
)
from soulbound_reputation.reputation_engine.models import (
    Activity,
    Badge,
    CommunityEngagement,
    InteractionType,
    ReputationMetrics,
    ReputationPoint,
    ReputationState,
    VerificationLevel,
)
from soulbound_reputation.reputation_engine.reputation_memory import (
    ReputationConfig,
    apply_activity,
    rescore,
)
from soulbound_reputation.reputation_engine.trajectory import compute_reputation_metrics
from soulbound_reputation.sbt_logging import bind_identity

DEFAULT_HISTORY_MAX = 100
PIONEER_MIN_INTERACTIONS = 100
MASTER_MIN_SCORE = 0.9


@dataclass
class _IdentityRecord:
    state: ReputationState
    history: deque[ReputationPoint]
    interactions: int = 0
    badges: list[Badge] = field(default_factory=list)
    metrics: ReputationMetrics = field(default_factory=ReputationMetrics)
    engagement: CommunityEngagement = field(default_factory=CommunityEngagement)
    lock: threading.Lock = field(default_factory=threading.Lock)


class ReputationRegistry:
    """
    Holds one ReputationState per identity and applies activities to it.

    Updates for the same identity run one at a time; different identities
    proceed in parallel.
    """

    def __init__(
        self,
        config: ReputationConfig | None = None,
        history_max: int = DEFAULT_HISTORY_MAX,
    ) -> None:
        self._config = config or ReputationConfig()
        self._history_max = max(1, int(history_max))
        self._records: dict[str, _IdentityRecord] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> ReputationConfig:
        return self._config

    def _record(self, identity_id: str) -> _IdentityRecord:
        with self._lock:
            record = self._records.get(identity_id)
            if record is None:
                record = _IdentityRecord(
                    state=ReputationState.initial(),
                    history=deque(maxlen=self._history_max),
                )
                self._records[identity_id] = record
            return record

    def _lookup(self, identity_id: str) -> _IdentityRecord | None:
        with self._lock:
            return self._records.get(identity_id)

    def register(self, identity_id: str, state: ReputationState) -> None:
        """Seed an identity with a previously persisted state (replaces any held state)."""
        record = self._record(identity_id)
        with record.lock:
            record.state = rescore(state, self._config)

    def _apply_locked(
        self,
        identity_id: str,
        record: _IdentityRecord,
        activity: Activity,
        now: int,
    ) -> tuple[ReputationState, list[Badge], int]:
        """Caller holds record.lock. Commits state, history, badges and metrics."""
        try:
            new_state = apply_activity(record.state, activity, now, self._config)
        except ReputationError as e:
            bind_identity(identity_id, __name__).warning(
                "reputation_update_rejected",
                error_code=e.code,
                error=str(e),
            )
            raise
        record.state = new_state
        record.interactions += 1
        record.history.append(ReputationPoint(score=new_state.overall_score, timestamp=now))
        record.metrics = compute_reputation_metrics(list(record.history), record.interactions)
        return new_state, self._award_badges(record), record.interactions

    def _log_updated(
        self,
        identity_id: str,
        activity: Activity,
        state: ReputationState,
        awarded: list[Badge],
        interactions: int,
    ) -> None:
        bind_identity(identity_id, __name__).info(
            "reputation_updated",
            overall_score=round(state.overall_score, 4),
            categories=sorted(activity.category_scores),
            interactions=interactions,
            badges_awarded=[b.value for b in awarded],
        )

    def apply(
        self,
        identity_id: str,
        activity: Activity,
        now: int | None = None,
    ) -> ReputationState:
        """
        Apply an activity to one identity under its lock; return the new state.

        now defaults to activity.occurred_at. On ReputationError the stored state
        is unchanged and the error propagates.
        """
        now = activity.occurred_at if now is None else now
        record = self._record(identity_id)
        with record.lock:
            new_state, awarded, interactions = self._apply_locked(identity_id, record, activity, now)
        self._log_updated(identity_id, activity, new_state, awarded, interactions)
        return new_state

    def record_interaction(
        self,
        identity_id: str,
        interaction_type: InteractionType | str,
        occurred_at: int,
        is_positive: bool = True,
        now: int | None = None,
    ) -> ReputationState:
        """
        Count a community interaction and feed the updated community_building
        bonus into the community_engagement category.

        The tally only advances when the resulting activity is accepted.
        """
        now = occurred_at if now is None else now
        record = self._record(identity_id)
        with record.lock:
            engagement = update_community_engagement(record.engagement, interaction_type, is_positive)
            activity = build_community_activity(engagement, occurred_at)
            new_state, awarded, interactions = self._apply_locked(identity_id, record, activity, now)
            record.engagement = engagement
        self._log_updated(identity_id, activity, new_state, awarded, interactions)
        return new_state

    @staticmethod
    def _award_badges(record: _IdentityRecord) -> list[Badge]:
        awarded: list[Badge] = []
        if record.interactions >= PIONEER_MIN_INTERACTIONS and Badge.PIONEER not in record.badges:
            awarded.append(Badge.PIONEER)
        if record.state.overall_score > MASTER_MIN_SCORE and Badge.MASTER not in record.badges:
            awarded.append(Badge.MASTER)
        record.badges.extend(awarded)
        return awarded

    def set_verification_level(self, identity_id: str, level: VerificationLevel) -> ReputationState:
        """Change an identity's tier and recompute its overall score from the stored map."""
        record = self._record(identity_id)
        with record.lock:
            record.state = rescore(
                replace(record.state, verification_level=VerificationLevel(level)),
                self._config,
            )
            state = record.state
        bind_identity(identity_id, __name__).info(
            "verification_level_changed",
            verification_level=state.verification_level.value,
            overall_score=round(state.overall_score, 4),
        )
        return state

    def get_state(self, identity_id: str) -> ReputationState:
        """Copy of the identity's current state (default state if never seen)."""
        record = self._lookup(identity_id)
        if record is None:
            return ReputationState.initial()
        with record.lock:
            return replace(record.state, category_scores=dict(record.state.category_scores))

    def get_history(self, identity_id: str) -> list[ReputationPoint]:
        record = self._lookup(identity_id)
        if record is None:
            return []
        with record.lock:
            return list(record.history)

    def get_badges(self, identity_id: str) -> list[Badge]:
        record = self._lookup(identity_id)
        if record is None:
            return []
        with record.lock:
            return list(record.badges)

    def get_metrics(self, identity_id: str) -> ReputationMetrics:
        """Trajectory metrics as of the last applied activity (computed over the kept history)."""
        record = self._lookup(identity_id)
        if record is None:
            return ReputationMetrics()
        with record.lock:
            return record.metrics

    def get_engagement(self, identity_id: str) -> CommunityEngagement:
        record = self._lookup(identity_id)
        if record is None:
            return CommunityEngagement()
        with record.lock:
            return record.engagement

    def interactions(self, identity_id: str) -> int:
        record = self._lookup(identity_id)
        if record is None:
            return 0
        with record.lock:
            return record.interactions

    def identities(self) -> list[str]:
        with self._lock:
            return sorted(self._records)
