"""Address lookup endpoints."""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette import status

from app.core.address import AddressResolver, get_address_resolver
from app.models.address import ErrorKind

router = APIRouter(tags=["lookup"])

# Anything not listed maps to 500
STATUS_BY_ERROR: dict[ErrorKind, int] = {
    ErrorKind.MISSING_ADDRESS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_ADDRESS_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ADDRESS_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NETWORK_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_resolver(request: Request) -> AddressResolver:
    """Return the resolver built at startup, or a fresh one."""
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        resolver = get_address_resolver()
    return resolver


@router.get("/", response_class=PlainTextResponse)
def usage(request: Request) -> str:
    """Explain how to call the lookup endpoint."""
    base_url = str(request.base_url).rstrip("/")
    return (
        "Lookup address by adding address query parameter after '/lookup'. "
        f"e.g. {base_url}/lookup?address=346 panorama avenue bathurst"
    )


@router.get("/lookup")
def lookup_address(
    address: list[str] | None = Query(
        default=None,
        description="Street address to resolve; the first non-blank value is used",
    ),
    resolver: AddressResolver = Depends(get_resolver),
) -> JSONResponse:
    """
    Resolve an address to its location, suburb and state electoral district.

    Runs in the threadpool: both upstream calls block.
    """
    result = resolver.resolve(address)

    if result.success:
        return JSONResponse(status_code=status.HTTP_200_OK, content=result.to_dict())

    status_code = STATUS_BY_ERROR.get(
        result.error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return JSONResponse(status_code=status_code, content=result.to_dict())
