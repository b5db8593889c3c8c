from __future__ import annotations

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

INSTALLED = "installed"
SKIPPED = "skipped"
DECLINED = "declined"
DONE = "done"


def ensure_defaults(state: Dict[str, Any]) -> Dict[str, Any]:
    """Fill required keys of the in-memory run state (never written to disk)."""

    state.setdefault("config", {})
    state.setdefault("execution", {})

    exe = state["execution"]
    exe.setdefault("current_step", None)
    exe.setdefault("completed_steps", [])
    exe.setdefault("decisions", {})

    return state


def record_decision(state: Dict[str, Any], step_id: str, decision: str) -> None:
    state.setdefault("execution", {}).setdefault("decisions", {})[step_id] = decision


def get_decision(state: Dict[str, Any], step_id: str) -> Optional[str]:
    exe = state.get("execution") or {}
    return (exe.get("decisions") or {}).get(step_id)


def mark_step_completed(state: Dict[str, Any], step_id: str) -> None:
    exe = state.setdefault("execution", {})
    completed = exe.setdefault("completed_steps", [])
    if step_id not in completed:
        completed.append(step_id)
