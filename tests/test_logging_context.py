"""Tests for logging context propagation."""

import pytest

from email_resource.logging.context import (
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


def test_empty_context():
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(build_id="42", pipeline="release")
    assert get_log_context() == {"build_id": "42", "pipeline": "release"}

    pop_log_context(token)
    assert get_log_context() == {}


def test_override_restored_on_pop():
    outer = push_log_context(build_id="42")
    inner = push_log_context(build_id="43")
    assert get_log_context() == {"build_id": "43"}

    pop_log_context(inner)
    assert get_log_context() == {"build_id": "42"}
    pop_log_context(outer)


def test_nested_context_manager():
    with log_context(build_id="42"):
        with log_context(job="deploy"):
            assert get_log_context() == {"build_id": "42", "job": "deploy"}
        assert get_log_context() == {"build_id": "42"}
    assert get_log_context() == {}


def test_context_restored_on_exception():
    with pytest.raises(ValueError):
        with log_context(build_id="42"):
            raise ValueError("boom")

    assert get_log_context() == {}


def test_returned_context_is_a_copy():
    with log_context(build_id="42"):
        context = get_log_context()
        context["build_id"] = "changed"

        assert get_log_context() == {"build_id": "42"}
