# mpris_presence/rows.py
import re
from typing import Any, List, Mapping, Sequence

from .errors import FieldNotFoundError
from .models import value_to_string

MAX_ROWS = 3
NAMESPACE = "xesam:"

FILTER = re.compile(r"^.*?\{([^}]+)\}.*?$")


def template_field(template: str) -> str:
    """Name inside the first ``{...}`` of a row template, or "" if there is none."""
    match = FILTER.match(template)
    return match.group(1) if match else ""


def render_rows(templates: Sequence[str], metadata: Mapping[str, Any]) -> List[str]:
    rows = []
    for template in list(templates)[:MAX_ROWS]:
        field = template_field(template)
        key = f"{NAMESPACE}{field}"
        if key not in metadata:
            raise FieldNotFoundError(field)
        rows.append(template.replace(f"{{{field}}}", value_to_string(metadata[key])))

    while len(rows) < MAX_ROWS:
        rows.append("")
    return rows
