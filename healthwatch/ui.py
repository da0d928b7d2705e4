"""Configuration of the dashboard's user interface."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TITLE = "Health Dashboard | Gatus"
DEFAULT_LOGO = ""
STATIC_FOLDER = "./web/static"

_ACTION = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_FIELD = re.compile(r"\s*\.(\w+)\s*")


@dataclass
class UIConfig:
    """Title and logo shown on the dashboard page."""

    title: str = ""
    logo: str = ""

    def validate_and_set_defaults(self, static_folder: str | Path = STATIC_FOLDER) -> str:
        """Fill in the default title and render ``index.html`` with this configuration.

        Returns the rendered page. Raises ``OSError`` if the template cannot be
        read and ``ValueError`` if it references anything but the known fields.
        """
        if not self.title:
            self.title = DEFAULT_TITLE
        template = (Path(static_folder) / "index.html").read_text(encoding="utf-8")
        return self._render(template)

    def _render(self, template: str) -> str:
        values = {"Title": self.title, "Logo": self.logo}

        def substitute(match: re.Match) -> str:
            action = _FIELD.fullmatch(match.group(1))
            if action is None:
                raise ValueError(f"unsupported template action: {match.group(0)!r}")
            name = action.group(1)
            if name not in values:
                raise ValueError(f"can't evaluate field {name} in UI configuration")
            return html.escape(values[name])

        rendered = _ACTION.sub(substitute, template)
        if "{{" in rendered:
            raise ValueError("unclosed template action")
        return rendered


def default_config() -> UIConfig:
    """Return a UI configuration with the default title and logo."""
    return UIConfig(title=DEFAULT_TITLE, logo=DEFAULT_LOGO)