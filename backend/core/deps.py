from fastapi import Request
from fastapi.templating import Jinja2Templates

from core.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
