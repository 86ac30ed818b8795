import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from core.config import Settings
from core.deps import get_settings, get_templates
from services.durations import (
    badge_class,
    classify_duration,
    event_duration,
    event_offset,
    format_duration,
    timeline_duration,
    timeline_position,
)
from services.report_loader import ReportError, load_report

logger = logging.getLogger(__name__)

router = APIRouter()

TEMPLATE_NAME = "index.html"

# helpers exposed to the template alongside the report
TEMPLATE_HELPERS = {
    "event_duration": event_duration,
    "timeline_duration": timeline_duration,
    "classify_duration": classify_duration,
    "badge_class": badge_class,
    "format_duration": format_duration,
    "event_offset": event_offset,
    "timeline_position": timeline_position,
}


@router.get("/{path:path}", response_class=HTMLResponse)
def render_report(
    path: str,
    settings: Settings = Depends(get_settings),
    templates: Jinja2Templates = Depends(get_templates),
) -> Response:
    try:
        report = load_report(settings.report_path)
    except ReportError as exc:
        return PlainTextResponse(str(exc), status_code=500)

    try:
        template = templates.get_template(TEMPLATE_NAME)
        html = template.render(report=report, **TEMPLATE_HELPERS)
    except Exception as exc:  # template lookup, syntax or render-time error
        logger.exception("failed to render template %s: %s", TEMPLATE_NAME, exc)
        return PlainTextResponse(str(exc), status_code=500)

    return HTMLResponse(html)
