from pathlib import Path

import pytest

from digest_kit.config import DEFAULT_LLM_CONFIG, DigestConfig, load_config


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_full_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CEREBRAS_API_KEY", "sk-test")
        path = _write(
            tmp_path,
            """
llm:
  provider: openai
  model: llama3.1-8b
  base_url: https://api.cerebras.ai/v1
  api_key: ${CEREBRAS_API_KEY}
segmentation:
  dedup_window: 4000
  excluded_names: [preface, acknowledgements]
summarization:
  chunk_char_limit: 20000
  chunk_delay_seconds: 5
retention_seconds: 600
""",
        )

        config = load_config(path)

        assert config.llm.api_key == "sk-test"
        assert config.llm.base_url == "https://api.cerebras.ai/v1"
        assert config.segmentation.dedup_window == 4000
        assert config.segmentation.excluded_names == ("preface", "acknowledgements")
        assert config.summarization.chunk_char_limit == 20000
        assert config.summarization.chunk_delay_seconds == 5
        assert config.retention_seconds == 600.0

    def test_missing_sections_keep_defaults(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, "summarization:\n  min_bullets: 3\n"))

        assert config.llm == DEFAULT_LLM_CONFIG
        assert config.segmentation == DigestConfig().segmentation
        assert config.summarization.min_bullets == 3
        assert config.summarization.chunk_char_limit == 25_000

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_config(_write(tmp_path, "")) == DigestConfig()

    def test_unset_env_var_expands_to_empty(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("DIGEST_KIT_MISSING_KEY", raising=False)
        path = _write(
            tmp_path,
            "llm:\n  provider: anthropic\n  model: claude\n  api_key: ${DIGEST_KIT_MISSING_KEY}\n",
        )

        assert load_config(path).llm.api_key == ""

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "summarization:\n  chunk_size: 100\n")

        with pytest.raises(ValueError, match="Invalid 'summarization' config"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config not found"):
            load_config(tmp_path / "nope.yaml")
