# src/digest_kit/prompts/prompt.py

import re

from pydantic import BaseModel

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"
        frozen = True

    def render(self, **values: object) -> str:
        """Fill `{{ name }}` placeholders in a single pass.

        Substituted values are never re-scanned, so document text that
        happens to contain braces is left alone.

        Raises:
            KeyError: If a declared input is missing or the template uses an
                undeclared placeholder.
        """
        missing = set(self.inputs) - set(values)
        if missing:
            raise KeyError(f"Prompt '{self.name}' missing inputs: {sorted(missing)}")

        def _substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in self.inputs:
                raise KeyError(f"Prompt '{self.name}' has undeclared placeholder '{key}'")
            return str(values[key])

        return _PLACEHOLDER_RE.sub(_substitute, self.template)
