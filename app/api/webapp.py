# app/api/webapp.py
"""
Operator page: date strip, picker and editor rendered from the controller view.

The page talks to the JSON API exactly like a browser client would, over
an in-process httpx transport.
"""
import logging
from contextlib import asynccontextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import httpx
from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.client.api_client import AssignmentAPI
from app.client import controller
from app.services.dates import parse_date

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Web App"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


@asynccontextmanager
async def _local_api(request: Request):
    # Server errors come back as 500 envelopes so the controller can show them
    transport = httpx.ASGITransport(app=request.app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url=str(request.base_url)) as client:
        yield AssignmentAPI(client)


def _render_page(request: Request, state: controller.PublisherState, today: date, now: datetime):
    view = controller.render(state, today, now)
    return templates.TemplateResponse(request, "index.html", {"view": view})


@router.get("/", response_class=HTMLResponse)
async def show_publisher(request: Request, date: Optional[str] = None, picker: bool = False):
    """
    Show the editor for ``?date=YYYY-MM-DD`` (today when missing or invalid).
    """
    today = datetime.now().date()
    now = datetime.now()
    state = controller.initial_state(today)

    async with _local_api(request) as api:
        selected = parse_date(date)
        if selected is not None:
            await controller.select_date(state, api, selected, now)
        else:
            await controller.load_current_date(state, api, today, now)

    if picker:
        controller.open_picker(state)
    return _render_page(request, state, today, now)


@router.post("/", response_class=HTMLResponse)
async def submit_publisher(
    request: Request,
    date: str = Form(...),
    action: str = Form("publish"),
    content: str = Form(""),
    picked: Optional[str] = Form(None),
):
    """
    Handle the editor form: ``action=publish`` saves the content,
    ``action=pick`` jumps to the date chosen in the picker.
    """
    today = datetime.now().date()
    now = datetime.now()
    state = controller.initial_state(parse_date(date) or today)

    async with _local_api(request) as api:
        if action == "pick":
            controller.open_picker(state)
            if parse_date(picked) is None:
                # Nothing to jump to: the editor still needs the current date's note
                await controller.select_date(state, api, state.selected_date, now)
            await controller.confirm_picker(state, api, picked or "", now)
        else:
            state.input_text = content
            await controller.publish(state, api, now)

    return _render_page(request, state, today, now)
