# src/digest_kit/summarization/parsing.py

"""Lenient extraction of `{"bullets": [...]}` from model output.

Degrades progressively and never raises: strict JSON, then the widest
brace-delimited span, then the first decodable object. Output with no
recoverable object yields no bullets.
"""

import json
import logging
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from digest_kit.observability import names
from digest_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

_BARE_JSON_RE = re.compile(r"\{.*\}", re.DOTALL)
_DECODER = json.JSONDecoder()


class BulletsPayload(BaseModel):
    bullets: list[Any] | None = None


def parse_bullets(
    raw_text: str | None,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[str]:
    text = (raw_text or "").strip()

    data = _try_parse(text)
    if data is None:
        data = _extract_object(text)
        if data is not None:
            metrics_hook.increment(names.SUMMARIZATION_PARSE_FALLBACKS)
            logger.warning("Model wrapped its JSON in extra text; recovered the object")

    if data is None:
        logger.warning("Unparseable model response (%d chars); no bullets", len(text))
        return []

    try:
        payload = BulletsPayload.model_validate(data)
    except ValidationError as exc:
        logger.warning("Model response has malformed bullets: %s", exc.errors())
        return []
    return _coerce_bullets(payload.bullets or [])


def _try_parse(text: str) -> dict[str, Any] | None:
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _extract_object(text: str) -> dict[str, Any] | None:
    match = _BARE_JSON_RE.search(text)
    if match:
        data = _try_parse(match.group(0))
        if data is not None:
            return data

    # first balanced object, ignoring anything after it
    for start in (m.start() for m in re.finditer(r"\{", text)):
        try:
            data, _ = _DECODER.raw_decode(text, start)
        except ValueError:
            continue
        if isinstance(data, dict):
            return data
    return None


def _coerce_bullets(items: list[Any]) -> list[str]:
    """Keep string entries, stringify numbers, drop anything else."""
    bullets: list[str] = []
    drifted = 0
    for item in items:
        if isinstance(item, str):
            bullets.append(item)
            continue
        drifted += 1
        if isinstance(item, (int, float)) and not isinstance(item, bool):
            bullets.append(str(item))
    if drifted:
        logger.warning(
            "Model returned %d non-string bullets; kept %d of %d entries",
            drifted,
            len(bullets),
            len(items),
        )
    return bullets
