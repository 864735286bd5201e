"""Turn raw app attributes into a display record for apps:info."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

import structlog

from app_manager.core.client_base import AppAttributes
from app_manager.utils.formatting import format_bytes, format_date, quantify

logger = structlog.get_logger()

CURRENT_STACK = "cedar"

DisplayValue = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class DisplayRecord:
    """Ordered label -> value pairs for a single app. Never mutated."""

    title: str
    items: Tuple[Tuple[str, DisplayValue], ...]
    raw: bool = False

    def labels(self) -> Tuple[str, ...]:
        return tuple(label for label, _ in self.items)

    def get(self, label: str, default: Optional[DisplayValue] = None) -> Optional[DisplayValue]:
        for key, value in self.items:
            if key == label:
                return value
        return default

    def __contains__(self, label: str) -> bool:
        return label in self.labels()


def aggregate(attrs: AppAttributes, raw: bool = False) -> DisplayRecord:
    """Build the display record for an app.

    Raw mode keeps every attribute, sorted by key. Formatted mode projects
    a fixed set of fields; rules run in order and later rules may append
    to what earlier ones produced.
    """
    title = str(attrs.get("name", ""))
    if raw:
        return DisplayRecord(title=title, items=_raw_items(attrs), raw=True)
    return DisplayRecord(title=title, items=_formatted_items(attrs))


def _raw_items(attrs: AppAttributes) -> Tuple[Tuple[str, DisplayValue], ...]:
    items = []
    for key in sorted(attrs, key=str):
        if key == "addons":
            value = ",".join(sorted(addon["name"] for addon in attrs[key] or []))
        elif key == "collaborators":
            value = ",".join(sorted(c["email"] for c in attrs[key] or []))
        else:
            value = _raw_value(attrs[key])
        items.append((str(key), value))
    return tuple(items)


def _raw_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _formatted_items(attrs: AppAttributes) -> Tuple[Tuple[str, DisplayValue], ...]:
    data: Dict[str, DisplayValue] = {}

    for key in ("domain_name", "owner", "stack"):
        if attrs.get(key) is not None:
            data[label_for(key)] = str(attrs[key])

    data[label_for("addons")] = tuple(
        str(addon.get("description") or addon.get("name", ""))
        for addon in attrs.get("addons") or []
    )

    owner = attrs.get("owner")
    data[label_for("collaborators")] = tuple(
        collaborator["email"]
        for collaborator in attrs.get("collaborators") or []
        if collaborator.get("email") != owner
    )

    create_status = attrs.get("create_status")
    if create_status and create_status != "complete":
        data[label_for("create_status")] = str(create_status)

    for key in ("cron_finished_at", "cron_next_run"):
        if attrs.get(key):
            data[label_for(key)] = format_date(attrs[key])

    for key in ("database_size", "repo_size", "slug_size"):
        if attrs.get(key) is not None:
            data[label_for(key)] = format_bytes(attrs[key])

    for key in ("git_url", "web_url"):
        if attrs.get(key) is not None:
            data[label_for(key)] = str(attrs[key])

    if attrs.get("stack") != CURRENT_STACK:
        for key in ("dynos", "workers"):
            if attrs.get(key) is not None:
                data[label_for(key)] = str(attrs[key])

    tables = attrs.get("database_tables")
    if tables is not None:
        size = data.get(label_for("database_size"), format_bytes(0))
        size = str(size).replace("(empty)", "0K")
        data[label_for("database_size")] = f"{size} in {quantify('table', tables)}"

    dyno_hours = attrs.get("dyno_hours")
    if isinstance(dyno_hours, dict):
        data[label_for("dyno_hours")] = tuple(
            "%s - %0.2f dyno-hours" % (str(kind).capitalize(), float(hours))
            for kind, hours in dyno_hours.items()
        )

    logger.debug("aggregated_app_info", app=attrs.get("name"), fields=len(data))
    return tuple(data.items())


def label_for(key: str) -> str:
    """'database_size' -> 'Database Size', 'git_url' -> 'Git URL'."""
    words = [word.capitalize() for word in key.split("_")]
    return " ".join("URL" if word == "Url" else word for word in words)
