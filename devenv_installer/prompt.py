from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def ask_yes_no(question: str, *, input_fn: Optional[Callable[[str], str]] = None) -> bool:
    """Blocking y/N prompt on stdin.

    Only "y" or "Y" (surrounding whitespace ignored) confirms. Empty input,
    EOF and anything else, including "yes", decline.
    """

    reader = input_fn or input
    try:
        answer = reader(f"{question} (y/N): ")
    except EOFError:
        answer = ""
    confirmed = answer.strip() in {"y", "Y"}
    logger.debug("Prompt %r answered %r (confirmed=%s)", question, answer, confirmed)
    return confirmed
