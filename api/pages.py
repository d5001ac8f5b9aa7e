import os
from datetime import datetime

from fastapi import Request
from fastapi.templating import Jinja2Templates

GENERIC_FAILURE_MESSAGE = "We could not submit your application right now. Please try again later."

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

# Starlette enables autoescaping for these templates
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def format_submitted_at(moment: datetime) -> str:
    return moment.strftime("%d %b %Y, %I:%M %p")


templates.env.filters["submitted_at"] = format_submitted_at


def render_confirmation(request: Request, name: str, mobile: str, submitted_at: datetime):
    return templates.TemplateResponse(
        request,
        "confirmation.html",
        {"name": name, "mobile": mobile, "submitted_at": submitted_at},
    )


def render_error(request: Request, message: str = GENERIC_FAILURE_MESSAGE, status_code: int = 500):
    return templates.TemplateResponse(
        request, "error.html", {"message": message}, status_code=status_code
    )
