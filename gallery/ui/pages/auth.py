"""Account pages. They render forms only; no credentials are checked."""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ..template_helpers import render_template

router = APIRouter()


@router.get("/signup", response_class=HTMLResponse)
async def signup(request: Request) -> HTMLResponse:
    return render_template(
        request,
        "signup.html",
        {
            "page_title": "SignIn/SignUp",
            "active_nav": None,
        },
    )


@router.get("/signin", response_class=HTMLResponse)
async def signin(request: Request) -> HTMLResponse:
    return render_template(
        request,
        "signin.html",
        {
            "page_title": "SignIn/SignUp",
            "active_nav": None,
        },
    )
