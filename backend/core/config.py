from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
import argparse
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = "8080"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "info"

WEB_DIR = Path(str(files("web")))

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    report_path: Path
    port: str = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL
    web_dir: Path = WEB_DIR

    @property
    def static_dir(self) -> Path:
        return self.web_dir / "static"

    @property
    def templates_dir(self) -> Path:
        return self.web_dir / "templates"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="startup-viewer",
        description="Serve a Spring Boot actuator startup report as an HTML timeline.",
    )
    parser.add_argument(
        "--port",
        default=os.getenv("STARTUP_VIEWER_PORT", DEFAULT_PORT),
        help="server port.",
    )
    parser.add_argument(
        "--report",
        default=os.getenv("STARTUP_VIEWER_REPORT", ""),
        help="spring actuator startup report. required!",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("STARTUP_VIEWER_HOST", DEFAULT_HOST),
        help="interface to bind.",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("STARTUP_VIEWER_LOG_LEVEL", DEFAULT_LOG_LEVEL).lower(),
        choices=LOG_LEVELS,
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Validate parsed flags and freeze them into a Settings value."""
    if not args.report:
        raise ConfigError("spring actuator startup report is required!")
    port = str(args.port).strip()
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ConfigError(f"invalid port: {args.port!r}")
    # argparse does not check choices against env-supplied defaults
    log_level = str(args.log_level).strip().lower()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"invalid log level: {args.log_level!r}")
    return Settings(
        report_path=Path(args.report),
        port=port,
        host=args.host,
        log_level=log_level,
    )


def load_settings(argv: list[str] | None = None) -> Settings:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return settings_from_args(args)
    except ConfigError as exc:
        parser.error(str(exc))
