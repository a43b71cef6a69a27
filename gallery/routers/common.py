"""Helpers shared by the media routers."""
from __future__ import annotations

from typing import Any, TypeVar

from fastapi import HTTPException, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ValidationError

from ..schemas import describe_validation_error

FormT = TypeVar("FormT", bound=BaseModel)


def build_form(form_cls: type[FormT], **values: Any) -> FormT:
    """Validate submitted form fields, answering 422 before any file is staged."""

    try:
        return form_cls(**values)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=describe_validation_error(exc),
        ) from exc


def redirect_to(path: str) -> RedirectResponse:
    # 303 so browsers follow POST/DELETE with a GET.
    return RedirectResponse(path, status_code=status.HTTP_303_SEE_OTHER)


__all__ = ["build_form", "redirect_to"]
