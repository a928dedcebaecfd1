"""Tests for the mock OTP login."""

import pytest

from acservice.auth import CUSTOMER_PERMISSIONS, MockAuthSession
from acservice.errors import AuthenticationError, InvalidRequestError
from acservice.latency import disabled


@pytest.fixture
def session(store):
    return MockAuthSession(store, disabled(), demo_otp="123456")


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_known_customer(self, session):
        state = await session.authenticate("98765 43201", "123456")
        assert state.is_authenticated
        assert state.user.id == "cust-001"
        assert state.user.name == "Rohit Verma"
        assert state.permissions == CUSTOMER_PERMISSIONS

    @pytest.mark.asyncio
    async def test_unknown_phone_logs_in_guest(self, session):
        state = await session.authenticate("+91-9000000001", "123456")
        assert state.user.name == "Guest User"
        assert state.user.id.startswith("user_")
        assert state.user.phone == "+91-9000000001"

    @pytest.mark.asyncio
    async def test_wrong_otp(self, session):
        with pytest.raises(AuthenticationError, match="Invalid OTP"):
            await session.authenticate("+91-9876543201", "000000")
        assert session.state.is_authenticated is False

    @pytest.mark.asyncio
    async def test_blank_phone(self, session):
        with pytest.raises(InvalidRequestError):
            await session.authenticate("  ", "123456")

    @pytest.mark.asyncio
    async def test_state_is_a_copy(self, session):
        await session.authenticate("+91-9876543202", "123456")
        snapshot = session.state
        snapshot.permissions.clear()
        assert session.state.permissions == CUSTOMER_PERMISSIONS


class TestLogout:
    @pytest.mark.asyncio
    async def test_logout_clears_state(self, session):
        await session.authenticate("+91-9876543201", "123456")
        session.logout()
        state = session.state
        assert state.is_authenticated is False
        assert state.user is None
        assert state.permissions == []

    def test_logout_when_anonymous(self, session):
        session.logout()
        assert session.state.user is None
