"""
Tests for structured logging helpers
"""

import logging

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.app import create_app
from bookshelf.logging import (
    RequestContextFilter,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_graphql_operation,
    get_logger,
    get_request_id,
    resolve_log_level,
    set_graphql_operation,
    set_request_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_request_context()
    yield
    clear_request_context()
    configure_logging(debug=False)


def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(100)}

    assert len(ids) == 100
    assert all(len(request_id) == 12 for request_id in ids)


def test_set_request_context_generates_id():
    request_id = set_request_context()

    assert request_id
    assert get_request_id() == request_id


def test_set_request_context_keeps_given_id():
    assert set_request_context("req-123") == "req-123"
    assert get_request_id() == "req-123"


def test_clear_request_context():
    set_request_context("req-123")
    set_graphql_operation("AllBooks")
    clear_request_context()

    assert get_request_id() is None
    assert get_graphql_operation() is None


def test_request_context_filter_binds_request_and_operation():
    set_request_context("req-456")
    set_graphql_operation("mutation:AddOne")

    event = RequestContextFilter()(None, "info", {"event": "Book added"})

    assert event == {
        "event": "Book added",
        "request_id": "req-456",
        "graphql_operation": "mutation:AddOne",
    }


def test_request_context_filter_without_request():
    assert RequestContextFilter()(None, "info", {"event": "hello"}) == {"event": "hello"}


@pytest.mark.parametrize(
    "level, debug, expected",
    [
        ("info", False, logging.INFO),
        ("WARNING", False, logging.WARNING),
        ("error", False, logging.ERROR),
        ("warning", True, logging.DEBUG),
        ("verbose", False, logging.INFO),
        (None, False, logging.INFO),
    ],
)
def test_resolve_log_level(level, debug, expected):
    assert resolve_log_level(level, debug) == expected


def test_configure_logging_uses_level_name():
    configure_logging(debug=False, level="warning")

    assert logging.getLogger().level == logging.WARNING


@pytest.mark.parametrize("debug", [True, False])
def test_configure_logging_emits(debug, capsys):
    configure_logging(debug=debug)

    get_logger("bookshelf.tests").info("Logging configured", mode="test")

    assert "Logging configured" in capsys.readouterr().out


@pytest.mark.integration
def test_store_logs_carry_graphql_operation(capsys):
    configure_logging(debug=False, level="info")
    client = TestClient(create_app())

    response = client.post(
        "/graphql",
        json={"query": 'mutation AddOne { addBook(name: "Logged", authorId: 1) { id } }'},
        headers={"X-Request-ID": "req-789"},
    )

    assert response.status_code == 200
    added = [line for line in capsys.readouterr().out.splitlines() if "Book added" in line]
    assert len(added) == 1
    assert "mutation:AddOne" in added[0]
    assert "req-789" in added[0]
