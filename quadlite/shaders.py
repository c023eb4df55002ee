"""Shader source preprocessing with #include directives."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["PreprocessorConfig", "ShaderPreprocessError", "preprocess_shader"]

_DIRECTIVE = "#include"


class ShaderPreprocessError(ValueError):
    """Raised when a shader source cannot be preprocessed."""


@dataclass
class PreprocessorConfig:
    """Files available to #include, as (filename, content) pairs."""

    includes: list[tuple[str, str]] = field(default_factory=list)

    def lookup(self, filename: str) -> str:
        """Content of the first include with this name."""
        for name, content in self.includes:
            if name == filename:
                return content
        raise ShaderPreprocessError(
            f'Include file {filename} is not on "includes" list'
        )


def preprocess_shader(source: str, config: PreprocessorConfig | None = None) -> str:
    """Replace every `#include "name"` directive with the named content."""
    config = config or PreprocessorConfig()
    text = source
    pos = 0
    while (start := text.find(_DIRECTIVE, pos)) != -1:
        i = start + len(_DIRECTIVE)
        while i < len(text) and text[i] == " ":
            i += 1
        if i >= len(text) or text[i] != '"':
            raise ShaderPreprocessError(
                f"expected '\"' after #include at position {start}"
            )
        name_start = i + 1
        name_end = text.find('"', name_start)
        if name_end == -1:
            raise ShaderPreprocessError(
                f"unterminated include filename at position {name_start}"
            )
        content = config.lookup(text[name_start:name_end])
        text = text[:start] + content + text[name_end + 1 :]
        pos = name_end
    return text