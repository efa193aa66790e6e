"""Properties router"""
from decimal import Decimal
from fastapi import APIRouter, Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel, Field, PlainSerializer, model_validator
from typing import Annotated, Any, Dict, List, Optional, Union
import logging

from property_inventory.database import get_db
from property_inventory.exceptions import NotFoundError, StorageError, StorageTimeoutError
from property_inventory.openapi import PROPERTY_EXAMPLE, error_responses
from property_inventory.repositories import Outcome, PropertyRepository
from property_inventory.services.valuation import MAX_TOTAL_PRICE, as_json_number, compute_total_price

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/properties", tags=["Properties"])

NOT_FOUND_MESSAGE = "Property not found"

# Decimal columns are rendered as JSON numbers rather than strings
Money = Annotated[Decimal, PlainSerializer(as_json_number, return_type=Union[int, float], when_used="json")]

# Range of the INT primary key column
PropertyId = Annotated[int, Path(ge=1, le=2**31 - 1, description="The id of the property")]


class PropertyRequest(BaseModel):
    """Writable fields of a property, used for both create and full update"""
    location: str = Field(..., description="The location of the property")
    square_meters: Decimal = Field(
        ..., ge=0, max_digits=10, decimal_places=2,
        description="The size of the property in square meters"
    )
    price_per_square_meter: Decimal = Field(
        ..., ge=0, max_digits=10, decimal_places=2,
        description="The price per square meter of the property"
    )
    owner: str = Field(..., description="The owner of the property")
    country: str = Field(..., description="The country where the property is located")
    region: str = Field(..., description="The region where the property is located")
    province: str = Field(..., description="The province where the property is located")
    district: str = Field(..., description="The district where the property is located")

    class Config:
        json_schema_extra = {
            "example": {k: v for k, v in PROPERTY_EXAMPLE.items() if k not in ("id", "total_price")}
        }

    @model_validator(mode="after")
    def check_total_price(self) -> "PropertyRequest":
        total = compute_total_price(self.price_per_square_meter, self.square_meters)
        if total > MAX_TOTAL_PRICE:
            raise ValueError(f"total price must not exceed {MAX_TOTAL_PRICE}")
        return self

    def to_row(self) -> Dict[str, Any]:
        """Column values to store, including the derived total price"""
        row = self.model_dump()
        row["total_price"] = compute_total_price(self.price_per_square_meter, self.square_meters)
        return row


class PropertyResponse(BaseModel):
    """A stored property"""
    id: int = Field(..., description="The auto-generated id of the property")
    location: Optional[str]
    square_meters: Optional[Money]
    price_per_square_meter: Optional[Money]
    total_price: Optional[Money] = Field(..., description="The total price of the property")
    owner: Optional[str]
    country: Optional[str]
    region: Optional[str]
    province: Optional[str]
    district: Optional[str]

    class Config:
        from_attributes = True
        json_schema_extra = {"example": PROPERTY_EXAMPLE}


class MessageResponse(BaseModel):
    message: str


class PropertyCreatedResponse(MessageResponse):
    id: int


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Dict[str, Any]] = None


def get_property_repository(
    request: Request,
    db: AsyncSession = Depends(get_db)
) -> PropertyRepository:
    """Repository bound to the request's session"""
    settings = request.app.state.settings
    return PropertyRepository(db, timeout=settings.STORAGE_TIMEOUT_SECONDS)


def unwrap(outcome: Outcome) -> Any:
    """Return the outcome's value or raise the matching HTTP-facing error"""
    if outcome.is_not_found:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    if outcome.is_error:
        if outcome.timed_out:
            raise StorageTimeoutError()
        raise StorageError()
    return outcome.value


@router.get(
    "",
    response_model=List[PropertyResponse],
    summary="Retrieve a list of properties",
    responses=error_responses(ErrorResponse, 500, 504),
)
async def list_properties(repo: PropertyRepository = Depends(get_property_repository)):
    """Retrieve every stored property."""
    items = unwrap(await repo.list_all())
    return [PropertyResponse.model_validate(p) for p in items]


@router.post(
    "",
    response_model=PropertyCreatedResponse,
    summary="Create a new property",
    responses=error_responses(ErrorResponse, 422, 500, 504),
)
async def create_property(
    request: PropertyRequest,
    repo: PropertyRepository = Depends(get_property_repository)
):
    """Create a new property with the values provided in the request body.

    The total price is computed from the square meters and the price per
    square meter; any total price sent by the client is ignored.
    """
    property_id = unwrap(await repo.create(request.to_row()))
    return PropertyCreatedResponse(message="Property registered successfully", id=property_id)


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Get a specific property",
    responses=error_responses(ErrorResponse, 404, 422, 500, 504),
)
async def get_property(
    property_id: PropertyId,
    repo: PropertyRepository = Depends(get_property_repository)
):
    """Get a specific property by id."""
    item = unwrap(await repo.get(property_id))
    return PropertyResponse.model_validate(item)


@router.put(
    "/{property_id}",
    response_model=MessageResponse,
    summary="Update a property",
    responses=error_responses(ErrorResponse, 404, 422, 500, 504),
)
async def update_property(
    property_id: PropertyId,
    request: PropertyRequest,
    repo: PropertyRepository = Depends(get_property_repository)
):
    """Replace every field of a specific property and recompute its total price."""
    unwrap(await repo.update(property_id, request.to_row()))
    return MessageResponse(message="Property updated successfully")


@router.delete(
    "/{property_id}",
    response_model=MessageResponse,
    summary="Delete a property",
    responses=error_responses(ErrorResponse, 404, 422, 500, 504),
)
async def delete_property(
    property_id: PropertyId,
    repo: PropertyRepository = Depends(get_property_repository)
):
    """Delete a specific property by id."""
    unwrap(await repo.delete(property_id))
    return MessageResponse(message="Property deleted successfully")
