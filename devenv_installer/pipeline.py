from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Sequence

from .context import SetupCtx
from .state import DECLINED, SKIPPED, get_decision, mark_step_completed

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single step. Idempotence is the step's own business (existence checks)."""

    step_id: str

    def run(self, ctx: SetupCtx, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]
    skipped_steps: List[str]


def run_pipeline(
    *,
    ctx: SetupCtx,
    state: Dict[str, Any],
    steps: Sequence[Step],
) -> PipelineResult:
    """Run every step in order. The first exception aborts the rest."""

    ran: List[str] = []
    skipped: List[str] = []

    for step in steps:
        state.setdefault("execution", {})["current_step"] = step.step_id
        logger.debug("Running step %s", step.step_id)

        state = step.run(ctx, state)
        mark_step_completed(state, step.step_id)

        if get_decision(state, step.step_id) in {SKIPPED, DECLINED}:
            skipped.append(step.step_id)
        else:
            ran.append(step.step_id)

    state.setdefault("execution", {})["current_step"] = None
    return PipelineResult(state=state, ran_steps=ran, skipped_steps=skipped)
