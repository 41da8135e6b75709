# tests/test_errors.py
"""
Error Tests - Unit Tests for the API Error Taxonomy

This module tests error construction and the classification of responses
by HTTP status code.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fixer.domain.errors (errors and response_error)
"""
import pytest

from unittest.mock import Mock

from fixer.domain.errors import (
    APIError,
    DomainError,
    ErrorKind,
    NilResponseError,
    NotFoundError,
    UnexpectedStatusError,
    UnprocessableEntityError,
    new_error,
    response_error,
)


class TestNewError:
    @pytest.mark.parametrize("msg", ["", "foo", "bar"])
    def test_message(self, msg):
        err = new_error(msg)
        assert str(err) == msg
        assert isinstance(err, APIError)
        assert err.kind is None


class TestErrorKinds:
    @pytest.mark.parametrize("cls, kind, message", [
        (NilResponseError, ErrorKind.NIL_RESPONSE, "Unexpected nil response"),
        (UnexpectedStatusError, ErrorKind.UNEXPECTED_STATUS, "Unexpected status"),
        (NotFoundError, ErrorKind.NOT_FOUND, "Not Found"),
        (UnprocessableEntityError, ErrorKind.UNPROCESSABLE_ENTITY, "Unprocessable Entity"),
    ])
    def test_kind_and_message(self, cls, kind, message):
        err = cls()
        assert err.kind is kind
        assert str(err) == message
        assert isinstance(err, DomainError)

    def test_kinds_are_closed(self):
        assert len(ErrorKind) == 4


class TestResponseError:
    @pytest.mark.parametrize("resp, want", [
        (None, NilResponseError),
        (Mock(status_code=0), UnexpectedStatusError),
        (Mock(status_code=200), None),
        (Mock(status_code=404), NotFoundError),
        (Mock(status_code=422), UnprocessableEntityError),
        (Mock(status_code=500), UnexpectedStatusError),
        (Mock(status_code=201), UnexpectedStatusError),
    ])
    def test_classification(self, resp, want):
        got = response_error(resp)
        if want is None:
            assert got is None
        else:
            assert type(got) is want

    def test_status_code_is_kept(self):
        err = response_error(Mock(status_code=422))
        assert err.status_code == 422
        assert err.kind is ErrorKind.UNPROCESSABLE_ENTITY
