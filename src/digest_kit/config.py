# src/digest_kit/config.py

"""Top-level configuration and its YAML loader.

Example config.yaml:

    llm:
      provider: openai
      model: llama3.1-8b
      base_url: https://api.cerebras.ai/v1
      api_key: ${CEREBRAS_API_KEY}
    segmentation:
      dedup_window: 5000
    summarization:
      chunk_char_limit: 25000
      chunk_delay_seconds: 10
    retention_seconds: 3600
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from digest_kit.llms.config import LLMConfig
from digest_kit.segmentation.config import SegmentationConfig
from digest_kit.summarization.config import SummarizationConfig

logger = logging.getLogger(__name__)

_ENV_REF_RE = re.compile(r"\$\{(\w+)\}")

DEFAULT_LLM_CONFIG = LLMConfig(
    provider="openai",
    model="llama3.1-8b",
    base_url="https://api.cerebras.ai/v1",
)


@dataclass(frozen=True)
class DigestConfig:
    llm: LLMConfig = DEFAULT_LLM_CONFIG
    segmentation: SegmentationConfig = field(default_factory=SegmentationConfig)
    summarization: SummarizationConfig = field(default_factory=SummarizationConfig)
    retention_seconds: float = 3600.0


def load_config(path: str | Path) -> DigestConfig:
    """Load a DigestConfig from YAML, expanding ${VAR} from the environment.

    Missing sections keep their defaults.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ValueError: If a section contains unknown keys.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found at {path}")

    with path.open(encoding="utf-8") as f:
        raw = _expand_env(yaml.safe_load(f) or {})
    logger.info("Loaded config from %s", path)

    defaults = DigestConfig()
    llm = _build(LLMConfig, raw.get("llm"), "llm") if "llm" in raw else defaults.llm

    segmentation_raw = dict(raw.get("segmentation") or {})
    if "excluded_names" in segmentation_raw:
        segmentation_raw["excluded_names"] = tuple(segmentation_raw["excluded_names"])

    return DigestConfig(
        llm=llm,
        segmentation=_build(SegmentationConfig, segmentation_raw, "segmentation"),
        summarization=_build(
            SummarizationConfig, raw.get("summarization"), "summarization"
        ),
        retention_seconds=float(raw.get("retention_seconds", defaults.retention_seconds)),
    )


def _build(config_cls: type, values: dict[str, Any] | None, section: str) -> Any:
    try:
        return config_cls(**(values or {}))
    except TypeError as exc:
        raise ValueError(f"Invalid '{section}' config: {exc}") from exc


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        return _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {key: _expand_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    return value
