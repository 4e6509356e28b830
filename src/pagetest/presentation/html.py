"""Results page rendered with Jinja2."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from pagetest.config import PageConfig
from pagetest.presentation.base import BasePresentation, GroupHandle

logger = logging.getLogger("pagetest.presentation")


class HtmlPresentation(BasePresentation):
    """Collects groups and writes them into a single HTML page on ``reveal``.

    Each group becomes a ``div.test-group`` (``pass`` or ``fail``) inside the
    container ``div``, with one ``li`` per reported result.
    """

    def __init__(self, config: PageConfig | None = None):
        self.config = config or PageConfig()
        self.groups: list[GroupHandle] = []

    def begin_group(self, name: str) -> GroupHandle:
        group = GroupHandle(name=name)
        self.groups.append(group)
        return group

    def render(self) -> str:
        tmpl_dir = Path(__file__).parent / "templates"
        env = Environment(loader=FileSystemLoader(str(tmpl_dir)), autoescape=True)
        template = env.get_template("results.html.j2")
        return template.render(
            title=self.config.title,
            container_id=self.config.container_id,
            groups=self.groups,
            total_failures=sum(1 for g in self.groups for r in g.records if not r.passed),
            total_results=sum(len(g.records) for g in self.groups),
        )

    def reveal(self) -> Path:
        """Write the page to the configured output path and return it."""
        page_path = self.config.output_path
        page_path.parent.mkdir(parents=True, exist_ok=True)
        page_path.write_text(self.render(), encoding="utf-8")
        logger.debug(f"Wrote results page: {page_path}")

        if self.config.open_browser:
            import webbrowser

            webbrowser.open(page_path.resolve().as_uri())

        return page_path
