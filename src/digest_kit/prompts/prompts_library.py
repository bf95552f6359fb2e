# src/digest_kit/prompts/prompts_library.py

import logging
from pathlib import Path

import yaml

from .prompt import Prompt

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

PromptKey = tuple[str, str]  # (name, version)


class PromptsLibrary:
    """Versioned prompt templates loaded from a directory of YAML files.

    One prompt per `*.yaml` file. Files load in name order; two files
    declaring the same name and version are rejected.
    """

    def __init__(self, directory: str | Path = TEMPLATES_DIR) -> None:
        directory = Path(directory)
        self._prompts: dict[PromptKey, Prompt] = {}
        for path in sorted(directory.glob("*.yaml")):
            self._register(path)
        logger.info("Loaded %d prompts from %s", len(self._prompts), directory)

    def get(self, name: str, version: str) -> Prompt:
        prompt = self._prompts.get((name, version))
        if prompt is None:
            logger.error("Prompt %s v%s requested but not loaded", name, version)
            raise KeyError(f"Prompt '{name}' version '{version}' not found")
        return prompt

    def list(self) -> list[PromptKey]:
        return list(self._prompts)

    def __contains__(self, key: PromptKey) -> bool:
        return key in self._prompts

    def _register(self, path: Path) -> None:
        with path.open(encoding="utf-8") as f:
            prompt = Prompt(**yaml.safe_load(f))
        key = (prompt.name, prompt.version)
        if key in self._prompts:
            raise ValueError(f"Duplicate prompt {prompt.name} v{prompt.version} in {path}")
        self._prompts[key] = prompt
        logger.debug("Registered prompt %s v%s from %s", prompt.name, prompt.version, path.name)
