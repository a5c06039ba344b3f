from fastapi import FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
from typing import Optional

from src.geocoding.errors import GeocodingError, InvalidQuery, OutOfBounds, UpstreamUnavailable
from src.geocoding.service import resolve, resolve_address
from src.reference.rwanda import districts_with_sectors, sectors_by_district

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Rwanda Geocoding API",
    description="Resolves coordinates into Rwandan administrative addresses",
    version="1.0.0"
)

# Map of domain errors to (HTTP status, error code)
ERROR_STATUS = {
    OutOfBounds: (400, "OUT_OF_BOUNDS"),
    InvalidQuery: (400, "VALIDATION_ERROR"),
    UpstreamUnavailable: (502, "GEOCODING_FAILED"),
}


def error_response(status_code, code, message, details=None):
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})


@app.exception_handler(GeocodingError)
async def geocoding_error_handler(request: Request, exc: GeocodingError):
    status_code, code = ERROR_STATUS.get(type(exc), (500, "GEOCODING_ERROR"))
    if status_code >= 500:
        logger.error(f"{request.url.path}: {exc}")
    return error_response(status_code, code, str(exc))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.url.path}: invalid query parameters {request.query_params}")
    return error_response(
        400,
        "VALIDATION_ERROR",
        "Invalid query parameters",
        details=jsonable_encoder(exc.errors()),
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to the Rwanda Geocoding API"}


@app.get("/geocoding/reverse")
def reverse_geocode(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180)
):
    """
    Resolve coordinates to province, district, sector, cell, village and road.

    Low-confidence results are returned with status 200; clients should flag
    them to users rather than present them as authoritative.
    """
    result = resolve(lat, lon)
    return result.to_dict()


@app.get("/geocoding/forward")
def forward_geocode(q: Optional[str] = None):
    candidates = resolve_address(q)

    if not candidates:
        return {
            "results": [],
            "message": "No locations found in Rwanda for the given address"
        }

    return {"results": [c.to_dict() for c in candidates]}


@app.get("/geocoding/sectors")
def get_sectors(district: Optional[str] = None):
    if not district or not district.strip():
        raise InvalidQuery(district, "District parameter is required")

    sectors = sectors_by_district(district.strip())

    if not sectors:
        logger.warning(f"No sectors found for district '{district}'")
        return {
            "district": district,
            "sectors": [],
            "count": 0,
            "message": "No sectors found for the specified district"
        }

    return {
        "district": district,
        "sectors": sectors,
        "count": len(sectors)
    }


@app.get("/geocoding/districts")
def get_districts():
    """Return the districts that have a sector list"""
    return {"districts": districts_with_sectors()}
