# workout_log/deps/validation.py
from typing import Callable, TypeVar

from fastapi import Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from workout_log.settings import Settings, get_settings

M = TypeVar("M", bound=BaseModel)

def validate_query(model: type[M]) -> Callable[[Request], M]:
    """
    Parse the query string into ``model`` before the handler runs.

    Usage: filters: SessionListQuery = Depends(validate_query(SessionListQuery))

    The handler receives the normalized model (parsed dates, blanks dropped),
    never the raw strings. Failures surface as a RequestValidationError whose
    issue paths are prefixed with "query", like FastAPI's own parameter errors.
    """
    def dependency(request: Request) -> M:
        raw = {}
        for key in request.query_params.keys():
            values = request.query_params.getlist(key)
            raw[key] = values[0] if len(values) == 1 else values
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise RequestValidationError(
                [{**err, "loc": ("query", *err["loc"])} for err in e.errors()]
            )
    return dependency

def require_session_mutations(settings: Settings = Depends(get_settings)) -> None:
    """Session update/delete routes only exist when ENABLE_SESSION_MUTATIONS is on."""
    if not settings.ENABLE_SESSION_MUTATIONS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
