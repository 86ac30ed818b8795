from schemas.report import Event, StartupReport, Step, Tag, Timeline

__all__ = [
    "StartupReport",
    "Timeline",
    "Event",
    "Step",
    "Tag",
]
