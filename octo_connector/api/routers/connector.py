from fastapi import APIRouter, Depends, status

from octo_connector.api.dependencies import get_use_cases
from octo_connector.api.schemas.connector import (
    AvailabilityRequest,
    AvailabilityResponse,
    BookingResponse,
    BookingsResponse,
    CancelBookingRequest,
    CancellationResponse,
    CreateBookingRequest,
    ProductSearchRequest,
    ProductsResponse,
    QuoteRequest,
    QuoteResponse,
    SearchBookingRequest,
    TokenRequest,
    TokenTemplateField,
    ValidateTokenResponse,
)
from octo_connector.application.dtos.availability_dto import AvailabilityQueryDTO
from octo_connector.application.dtos.booking_dto import (
    CancelBookingDTO,
    CreateBookingDTO,
    SearchBookingDTO,
)
from octo_connector.domain.value_objects.credential import Credential, token_template

router = APIRouter()


def _credential(request: TokenRequest) -> Credential:
    return Credential(api_key=request.token.api_key)


@router.get("/token-template", response_model=dict[str, TokenTemplateField])
async def get_token_template() -> dict[str, TokenTemplateField]:
    return {
        name: TokenTemplateField(
            type=field["type"],
            regExp=field["regExp"].pattern,
            description=field["description"],
        )
        for name, field in token_template().items()
    }


@router.post("/validate-token", response_model=ValidateTokenResponse)
async def validate_token(
    request: TokenRequest,
    use_cases=Depends(get_use_cases),
) -> ValidateTokenResponse:
    valid = await use_cases["validate_credential"].execute(_credential(request))
    return ValidateTokenResponse(valid=valid)


@router.post("/products/search", response_model=ProductsResponse)
async def search_products(
    request: ProductSearchRequest,
    use_cases=Depends(get_use_cases),
) -> ProductsResponse:
    result = await use_cases["search_products"].execute(_credential(request), request.payload)
    return ProductsResponse(**result)


@router.post("/quotes/search", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
async def search_quote(
    request: QuoteRequest,
    use_cases=Depends(get_use_cases),
) -> QuoteResponse:
    """Not implemented for OCTO suppliers: always an empty quote."""
    result = await use_cases["search_quote"].execute(_credential(request), request.payload)
    return QuoteResponse(**result)


@router.post("/availability/search", response_model=AvailabilityResponse)
async def search_availability(
    request: AvailabilityRequest,
    use_cases=Depends(get_use_cases),
) -> AvailabilityResponse:
    query = AvailabilityQueryDTO.from_payload(request.payload.model_dump(by_alias=True))
    result = await use_cases["search_availability"].execute(_credential(request), query)
    return AvailabilityResponse(**result)


@router.post("/availability/calendar", response_model=AvailabilityResponse)
async def availability_calendar(
    request: AvailabilityRequest,
    use_cases=Depends(get_use_cases),
) -> AvailabilityResponse:
    query = AvailabilityQueryDTO.from_payload(request.payload.model_dump(by_alias=True))
    result = await use_cases["availability_calendar"].execute(_credential(request), query)
    return AvailabilityResponse(**result)


@router.post("/bookings", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    request: CreateBookingRequest,
    use_cases=Depends(get_use_cases),
) -> BookingResponse:
    command = CreateBookingDTO.from_payload(request.payload.model_dump(by_alias=True))
    result = await use_cases["create_booking"].execute(_credential(request), command)
    return BookingResponse(**result)


@router.post("/bookings/cancel", response_model=CancellationResponse)
async def cancel_booking(
    request: CancelBookingRequest,
    use_cases=Depends(get_use_cases),
) -> CancellationResponse:
    command = CancelBookingDTO.from_payload(request.payload.model_dump(by_alias=True))
    result = await use_cases["cancel_booking"].execute(_credential(request), command)
    return CancellationResponse(**result)


@router.post("/bookings/search", response_model=BookingsResponse)
async def search_booking(
    request: SearchBookingRequest,
    use_cases=Depends(get_use_cases),
) -> BookingsResponse:
    query = SearchBookingDTO.from_payload(request.payload.model_dump(by_alias=True))
    result = await use_cases["search_booking"].execute(_credential(request), query)
    return BookingsResponse(**result)
