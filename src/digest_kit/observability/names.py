# src/digest_kit/observability/names.py

"""Metric names recorded through MetricsHook.

Durations are in milliseconds. Gauges record the latest observed value.
"""

# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_ERRORS_TOTAL = "llm_errors_total"

# Counters (token usage - monotonic over time for cost/rate tracking)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Segmentation Metrics
# ============================================================================

# Duration
SEGMENTATION_DURATION = "segmentation_duration"

# Counters
SEGMENTATION_MARKERS_FOUND = "segmentation_markers_found"
SEGMENTATION_DUPLICATES_SKIPPED = "segmentation_duplicates_skipped"


# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"
CHUNKING_HARD_CUTS = "chunking_hard_cuts"


# ============================================================================
# Summarization Metrics
# ============================================================================

# Duration
SUMMARIZATION_DURATION = "summarization_duration"

# Counters
SUMMARIZATION_RUNS_TOTAL = "summarization_runs_total"
SUMMARIZATION_CHUNKS_TOTAL = "summarization_chunks_total"
SUMMARIZATION_BULLETS_TOTAL = "summarization_bullets_total"
SUMMARIZATION_ERRORS_TOTAL = "summarization_errors_total"
SUMMARIZATION_PARSE_FALLBACKS = "summarization_parse_fallbacks"

# Gauges
SUMMARIZATION_SECTION_CHARS = "summarization_section_chars"
