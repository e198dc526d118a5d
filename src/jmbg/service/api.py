import typing as t

from fastapi import APIRouter, FastAPI

from jmbg.service.validator import JmbgDetails, validate
from jmbg.util.config import ValidationSettings
from jmbg.util.fastapi import setup_fastapi


class IdentifierResponse(JmbgDetails):
    formatted: str


router = APIRouter(prefix="/v1/identifiers", tags=["identifiers"])


@router.get("/{value}")
async def validate_identifier(value: str, accept_oib: t.Optional[bool] = None) -> IdentifierResponse:
    """
    Decode a JMBG (or OIB) passed in the path. Invalid identifiers are not an
    error; they come back with `is_valid` false.
    """
    if accept_oib is None:
        accept_oib = ValidationSettings().accept_oib
    details = validate(value, accept_oib)
    return IdentifierResponse(**details.model_dump(), formatted=details.format())


def create_app() -> FastAPI:
    """
    Build the HTTP service. Sentry is initialised by setup_fastapi.
    """
    return setup_fastapi(routers=[router], title="JMBG validator")
