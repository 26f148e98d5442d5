"""Tests for compose session state."""

import pytest

from subtoggle.core.session import Session, SessionError


class TestSession:
    def test_initially_inactive(self):
        session = Session()
        assert session.active is False
        assert session.state.separator == "/"
        assert session.state.dialect == ""

    def test_start(self):
        session = Session()
        session.start("foo", "#", "\\V")
        assert session.active
        assert session.state.captured_text == "foo"
        assert session.state.separator == "#"
        assert session.state.dialect == "\\V"

    def test_start_twice_raises(self):
        session = Session()
        session.start("foo", "/", "")
        with pytest.raises(SessionError):
            session.start("bar", "/", "")
        assert session.state.captured_text == "foo"

    def test_leave_then_start(self):
        session = Session()
        session.start("foo", "/", "")
        session.leave()
        assert session.active is False
        session.start("bar", "?", "")
        assert session.state.captured_text == "bar"

    def test_leave_when_inactive(self):
        session = Session()
        session.leave()
        assert session.active is False

    def test_remember(self):
        session = Session()
        session.remember("@", "\\v")
        assert session.state.separator == "@"
        assert session.state.dialect == "\\v"
        assert session.active is False
