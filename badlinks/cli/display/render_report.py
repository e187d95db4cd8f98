"""Render command output as a human-readable report with Jinja2."""

from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined

from badlinks.api.link.BadLinkReason import BadLinkReason

_ENV = Environment(
    loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True, undefined=StrictUndefined
)
_ENV.filters["reason_message"] = lambda code: BadLinkReason(code).message

REPORT_TEMPLATE = """\
{% for entry in bad_links %}
{{ entry.file_path }}
{% for issue in entry.found_issues %}
  {{ issue.line_numbers | join(",") }}: {{ issue.markdown_link }}
{% for reason in issue.reasons %}
      - {{ reason }}: {{ reason | reason_message }}
{% endfor %}
{% endfor %}

{% endfor %}
{% for error in errors %}
error: {{ error }}
{% endfor %}
{{ issue_count }} bad links in {{ bad_links | length }} files
"""


def render_report(data: dict[str, Any]) -> str:
    """Render scan or check output grouped by file."""
    bad_links = data.get("bad_links", [])
    context = {
        "bad_links": bad_links,
        "errors": data.get("errors", []),
        "issue_count": sum(len(entry["found_issues"]) for entry in bad_links),
    }
    return _ENV.from_string(REPORT_TEMPLATE).render(**context)
