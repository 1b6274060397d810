"""Tests for build-token substitution."""

from email_resource.config.environment import load_build_tokens
from email_resource.utils.tokens import substitute_tokens


def test_replaces_every_placeholder(build_env):
    tokens = load_build_tokens(build_env)
    text = (
        "${BUILD_ID} ${BUILD_NAME} ${BUILD_JOB_NAME} "
        "${BUILD_PIPELINE_NAME} ${ATC_EXTERNAL_URL} ${BUILD_TEAM_NAME}"
    )

    result = substitute_tokens(text, tokens)

    assert result == "42 7 deploy release https://ci.example.com main"


def test_replaces_repeated_occurrences():
    tokens = {"${BUILD_ID}": "42"}

    assert substitute_tokens("${BUILD_ID}-${BUILD_ID}", tokens) == "42-42"


def test_unset_values_become_empty():
    tokens = load_build_tokens({})

    assert substitute_tokens("build [${BUILD_ID}]", tokens) == "build []"


def test_other_text_untouched():
    tokens = {"${BUILD_ID}": "42"}
    text = "cost $5, ${UNKNOWN} and $BUILD_ID stay"

    assert substitute_tokens(text, tokens) == text


def test_substituted_values_not_expanded_again():
    tokens = {"${BUILD_NAME}": "${BUILD_ID}", "${BUILD_ID}": "42"}

    assert substitute_tokens("${BUILD_NAME}", tokens) == "${BUILD_ID}"


def test_empty_text_and_tokens():
    assert substitute_tokens("", {"${BUILD_ID}": "42"}) == ""
    assert substitute_tokens("${BUILD_ID}", {}) == "${BUILD_ID}"
