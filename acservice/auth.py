"""
Mock OTP authentication.

Holds a single session state. The demo OTP logs in the customer whose
phone matches, or a guest user for unknown numbers. Entity services never
consult this state; it exists for callers that want a login flow.
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from acservice.config import settings
from acservice.data.store import DataStore
from acservice.errors import AuthenticationError, InvalidRequestError
from acservice.latency import LatencySimulator
from acservice.utils import generate_id

logger = logging.getLogger(__name__)

CUSTOMER_PERMISSIONS = ["booking:create", "booking:read", "profile:update"]


class UserRole(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"
    TECHNICIAN = "technician"


class AuthUser(BaseModel):
    id: str
    name: str
    role: UserRole = UserRole.CUSTOMER
    phone: Optional[str] = None
    email: Optional[str] = None


class AuthState(BaseModel):
    is_authenticated: bool = False
    user: Optional[AuthUser] = None
    permissions: list[str] = Field(default_factory=list)


class MockAuthSession:
    def __init__(
        self,
        store: DataStore,
        latency: Optional[LatencySimulator] = None,
        demo_otp: Optional[str] = None,
    ) -> None:
        self.store = store
        self.latency = latency or LatencySimulator()
        self._otp = demo_otp or settings.auth.demo_otp
        self._state = AuthState()

    @property
    def state(self) -> AuthState:
        return self._state.model_copy(deep=True)

    async def authenticate(self, phone: str, otp: str) -> AuthState:
        await self.latency.wait(800, 1200)
        if not phone.strip():
            raise InvalidRequestError("Phone number is required")
        if otp != self._otp:
            logger.warning("Rejected OTP for %s", phone)
            raise AuthenticationError("Invalid OTP")

        customer = self.store.find_customer_by_phone(phone)
        if customer is not None:
            user = AuthUser(id=customer.id, name=customer.name, phone=customer.phone, email=customer.email)
        else:
            user = AuthUser(id=generate_id("user"), name="Guest User", phone=phone)
        self._state = AuthState(is_authenticated=True, user=user, permissions=list(CUSTOMER_PERMISSIONS))
        logger.info("Authenticated %s as %s", phone, user.id)
        return self.state

    def logout(self) -> None:
        if self._state.user is not None:
            logger.info("Logged out %s", self._state.user.id)
        self._state = AuthState()
