"""
Customer records and their address books.

Two invariants hold after every mutation: a customer always has at least
one address, and exactly one of those addresses is the default.
"""

from collections import Counter
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from acservice.envelope import ApiResponse, PaginatedResponse, create_api_response
from acservice.errors import BusinessRuleError, ConflictError, InvalidRequestError, NotFoundError
from acservice.logging_context import get_request_logger
from acservice.query import exact, text_search
from acservice.schemas.customer_schema import (
    Address,
    AddressUpdate,
    AreaCount,
    CreateCustomerRequest,
    Customer,
    CustomerFilters,
    CustomerStats,
    CustomerType,
    LoyaltyTier,
    UpdateCustomerRequest,
)
from acservice.services.base import EntityService, snapshot
from acservice.utils import canonical_phone, generate_id, now_ist

logger = get_request_logger(__name__)

TOP_AREAS = 5

# (tier, inclusive lower bound), highest first
LOYALTY_THRESHOLDS: list[tuple[LoyaltyTier, int]] = [
    (LoyaltyTier.PLATINUM, 700),
    (LoyaltyTier.GOLD, 300),
    (LoyaltyTier.SILVER, 100),
    (LoyaltyTier.BRONZE, 0),
]


def loyalty_tier(points: int) -> LoyaltyTier:
    """bronze <100, silver 100-299, gold 300-699, platinum >=700."""
    for tier, floor in LOYALTY_THRESHOLDS:
        if points >= floor:
            return tier
    return LoyaltyTier.BRONZE


def _set_default(addresses: list[Address], address_id: str) -> None:
    for address in addresses:
        address.is_default = address.id == address_id


def _validate_changes(target: BaseModel, changes: dict[str, Any]) -> None:
    """Reject a partial update that would leave ``target`` invalid, e.g. a required field set to None."""
    try:
        type(target).model_validate({**target.model_dump(), **changes})
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
        raise InvalidRequestError(f"Invalid value for {', '.join(fields)}", details={"fields": fields}) from None


def _customer_text(customer: Customer) -> list[str]:
    fields = [customer.name, customer.phone, canonical_phone(customer.phone)]
    if customer.email:
        fields.append(customer.email)
    for address in customer.addresses:
        fields.extend([address.area, address.street, address.pincode])
    return fields


class CustomerService(EntityService):
    sort_keys = {
        "name": lambda c: c.name.lower(),
        "created_at": lambda c: c.created_at,
        "total_bookings": lambda c: c.total_bookings,
        "loyalty_points": lambda c: c.loyalty_points,
    }

    def _require(self, customer_id: str) -> Customer:
        customer = self.store.find_customer(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer with ID {customer_id} not found")
        return customer

    async def create_customer(self, request: CreateCustomerRequest) -> ApiResponse[Customer]:
        await self.latency.wait(500, 1000)
        if not request.name.strip():
            raise InvalidRequestError("Customer name is required")
        if not request.phone.strip():
            raise InvalidRequestError("Phone number is required")
        if self.store.find_customer_by_phone(request.phone) is not None:
            logger.warning("Rejected duplicate customer phone %s", request.phone)
            raise ConflictError(f"Customer with phone {request.phone} already exists")

        now = now_ist()
        address = request.address.model_copy(
            update={"id": request.address.id or generate_id("addr"), "is_default": True}
        )
        customer = Customer(
            id=generate_id("cust"),
            name=request.name.strip(),
            phone=request.phone.strip(),
            email=request.email,
            alternate_phone=request.alternate_phone,
            addresses=[address],
            customer_type=request.customer_type,
            created_at=now,
            updated_at=now,
        )
        self.store.customers.append(customer)
        logger.info("Customer created: %s (%s)", customer.id, customer.name)
        return create_api_response(snapshot(customer), "Customer created successfully")

    async def get_customer(self, customer_id: str) -> ApiResponse[Optional[Customer]]:
        await self.latency.wait(200, 500)
        customer = self.store.find_customer(customer_id)
        if customer is None:
            return create_api_response(None, f"Customer with ID {customer_id} not found")
        return create_api_response(snapshot(customer), "Customer retrieved successfully")

    async def get_customer_by_phone(self, phone: str) -> ApiResponse[Optional[Customer]]:
        await self.latency.wait(200, 500)
        customer = self.store.find_customer_by_phone(phone)
        if customer is None:
            return create_api_response(None, f"No customer found with phone {phone}")
        return create_api_response(snapshot(customer), "Customer retrieved successfully")

    async def list_customers(
        self,
        page: int = 1,
        limit: Optional[int] = None,
        filters: Optional[CustomerFilters] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> PaginatedResponse[Customer]:
        await self.latency.wait(300, 800)
        f = filters or CustomerFilters()
        predicates = [
            exact(lambda c: c.customer_type, f.customer_type),
            text_search(f.area, lambda c: [a.area for a in c.addresses]),
            exact(lambda c: bool(c.email), f.has_email),
            text_search(f.search, _customer_text),
            exact(lambda c: loyalty_tier(c.loyalty_points), f.loyalty_tier),
        ]
        return self._list(self.store.customers, predicates, page, limit, sort_by, sort_order)

    async def update_customer(
        self, customer_id: str, updates: UpdateCustomerRequest
    ) -> ApiResponse[Customer]:
        await self.latency.wait(400, 800)
        customer = self._require(customer_id)
        changes = updates.model_dump(exclude_unset=True)
        if "name" in changes and not (changes["name"] or "").strip():
            raise InvalidRequestError("Customer name cannot be empty")
        _validate_changes(customer, changes)
        for field_name, value in changes.items():
            setattr(customer, field_name, value)
        customer.updated_at = now_ist()
        logger.info("Customer updated: %s (%s)", customer_id, ", ".join(changes) or "no fields")
        return create_api_response(snapshot(customer), "Customer updated successfully")

    # ------------------------------------------------------------------ #
    # Address book
    # ------------------------------------------------------------------ #

    async def add_address(self, customer_id: str, address: Address) -> ApiResponse[Customer]:
        await self.latency.wait(300, 700)
        customer = self._require(customer_id)
        new_address = address.model_copy(update={"id": generate_id("addr")})
        customer.addresses.append(new_address)
        if new_address.is_default or len(customer.addresses) == 1:
            _set_default(customer.addresses, new_address.id)
        customer.updated_at = now_ist()
        logger.info("Address %s added to customer %s", new_address.id, customer_id)
        return create_api_response(snapshot(customer), "Address added successfully")

    async def update_address(
        self, customer_id: str, address_id: str, updates: AddressUpdate
    ) -> ApiResponse[Customer]:
        await self.latency.wait(300, 700)
        customer = self._require(customer_id)
        address = next((a for a in customer.addresses if a.id == address_id), None)
        if address is None:
            raise NotFoundError(f"Address with ID {address_id} not found for customer {customer_id}")

        changes = updates.model_dump(exclude_unset=True)
        make_default = changes.pop("is_default", None)
        _validate_changes(address, changes)
        for field_name, value in changes.items():
            setattr(address, field_name, value)

        if make_default:
            _set_default(customer.addresses, address_id)
        elif make_default is False and address.is_default:
            # Unsetting the default hands it to the first other address, if any.
            other = next((a for a in customer.addresses if a.id != address_id), None)
            if other is not None:
                _set_default(customer.addresses, other.id)

        customer.updated_at = now_ist()
        logger.info("Address %s updated for customer %s", address_id, customer_id)
        return create_api_response(snapshot(customer), "Address updated successfully")

    async def delete_address(self, customer_id: str, address_id: str) -> ApiResponse[Customer]:
        await self.latency.wait(300, 700)
        customer = self._require(customer_id)
        address = next((a for a in customer.addresses if a.id == address_id), None)
        if address is None:
            raise NotFoundError(f"Address with ID {address_id} not found for customer {customer_id}")
        if len(customer.addresses) == 1:
            logger.warning("Refused to delete last address %s of customer %s", address_id, customer_id)
            raise BusinessRuleError("Cannot delete the only address. Customer must have at least one address.")

        customer.addresses.remove(address)
        if address.is_default:
            _set_default(customer.addresses, customer.addresses[0].id)
        customer.updated_at = now_ist()
        logger.info("Address %s deleted from customer %s", address_id, customer_id)
        return create_api_response(snapshot(customer), "Address deleted successfully")

    # ------------------------------------------------------------------ #
    # Loyalty, stats and search
    # ------------------------------------------------------------------ #

    async def update_loyalty_points(
        self, customer_id: str, points: int, reason: Optional[str] = None
    ) -> ApiResponse[Customer]:
        """Add (or with a negative value, deduct) points. The balance never drops below 0."""
        await self.latency.wait(200, 500)
        customer = self._require(customer_id)
        customer.loyalty_points = max(0, customer.loyalty_points + points)
        customer.updated_at = now_ist()
        logger.info(
            "Loyalty points for %s changed by %+d to %d%s",
            customer_id,
            points,
            customer.loyalty_points,
            f" ({reason})" if reason else "",
        )
        verb = "added" if points >= 0 else "deducted"
        return create_api_response(snapshot(customer), f"{abs(points)} loyalty points {verb} successfully")

    async def get_customer_stats(self) -> ApiResponse[CustomerStats]:
        await self.latency.wait(400, 800)
        customers = self.store.customers
        tiers = Counter(loyalty_tier(c.loyalty_points) for c in customers)
        areas = Counter(a.area for c in customers for a in c.addresses)
        stats = CustomerStats(
            total=len(customers),
            residential=sum(1 for c in customers if c.customer_type == CustomerType.RESIDENTIAL),
            commercial=sum(1 for c in customers if c.customer_type == CustomerType.COMMERCIAL),
            with_email=sum(1 for c in customers if c.email),
            loyalty_tiers={tier: tiers.get(tier, 0) for tier in LoyaltyTier},
            top_areas=[AreaCount(area=a, count=n) for a, n in areas.most_common(TOP_AREAS)],
        )
        return create_api_response(stats, "Customer statistics retrieved successfully")

    async def search_customers(self, query: str, limit: int = 10) -> ApiResponse[list[Customer]]:
        await self.latency.wait(300, 600)
        match = text_search(query, _customer_text)
        if match is None:
            return create_api_response([], "Empty search query")
        found = [snapshot(c) for c in self.store.customers if match(c)][:limit]
        return create_api_response(found, f'Found {len(found)} customers matching "{query}"')
