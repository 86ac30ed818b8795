"""
Reads the actuator startup report from disk. The file is read once per call
and never cached, so every request sees the current file.
"""
import logging
from pathlib import Path

from pydantic import ValidationError

from schemas.report import StartupReport

logger = logging.getLogger(__name__)


class ReportError(Exception):
    pass


class ReportReadError(ReportError):
    pass


class ReportDecodeError(ReportError):
    pass


def load_report(report_path: str | Path) -> StartupReport:
    path = Path(report_path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        logger.warning("failed to read report %s: %s", path, exc)
        raise ReportReadError(f"failed to read report {path}: {exc.strerror or exc}") from exc

    try:
        report = StartupReport.model_validate_json(content)
    except ValidationError as exc:
        logger.error("failed to unmarshal report %s: %s", path, exc)
        raise ReportDecodeError(f"failed to unmarshal report {path}: {exc}") from exc

    logger.debug("loaded report %s with %d events", path, len(report.timeline.events))
    return report
