import pytest

from quadlite.shaders import (
    PreprocessorConfig,
    ShaderPreprocessError,
    preprocess_shader,
)

SHADER = """
#version blah blah

asd
asd

#include "hello.glsl"

qwe
"""

PREPROCESSED = """
#version blah blah

asd
asd

iii
jjj

qwe
"""


def test_preprocessor():
    config = PreprocessorConfig(includes=[("hello.glsl", "iii\njjj")])
    assert preprocess_shader(SHADER, config) == PREPROCESSED


def test_no_directives_unchanged():
    assert preprocess_shader("void main() {}\n", PreprocessorConfig()) == "void main() {}\n"


def test_default_config_without_includes():
    assert preprocess_shader("abc") == "abc"


def test_first_matching_include_wins():
    config = PreprocessorConfig(includes=[("a", "first"), ("a", "second")])
    assert preprocess_shader('#include "a"', config) == "first"


def test_missing_include_raises():
    with pytest.raises(ShaderPreprocessError, match="missing.glsl"):
        preprocess_shader('#include "missing.glsl"', PreprocessorConfig())


def test_directive_without_quote_raises():
    with pytest.raises(ShaderPreprocessError):
        preprocess_shader("#include hello.glsl", PreprocessorConfig())


def test_unterminated_filename_raises():
    config = PreprocessorConfig(includes=[("a", "A")])
    with pytest.raises(ShaderPreprocessError):
        preprocess_shader('#include "a', config)