"""Static site builder.

Assembles rendered fragments into full HTML pages and writes them to the
output directory: ``index.html`` plus one ``{key}.html`` per category.
"""

import logging
import os
import tempfile
from pathlib import Path

from nodcast.site.hooks import apply_post_render_hooks
from nodcast.site.models import PageFragments, PageKind, Redirect
from nodcast.site.renderer import SiteRenderer
from nodcast.utils.errors import RenderError

logger = logging.getLogger(__name__)

HOME_PAGE = "index.html"


class SiteBuilder:
    """Build every page of the site into a directory.

    Example:
        >>> builder = SiteBuilder(SiteRenderer(loader), output_dir=Path("site"))
        >>> written = await builder.build()
    """

    def __init__(
        self,
        renderer: SiteRenderer,
        output_dir: Path,
        stylesheet: str = "css/style.css",
    ) -> None:
        """Initialize the builder.

        Args:
            renderer: Renderer used for every page
            output_dir: Directory pages are written to
            stylesheet: Stylesheet href linked from each page
        """
        self.renderer = renderer
        self.output_dir = output_dir
        self.stylesheet = stylesheet

    def assemble_page(self, fragments: PageFragments, title: str) -> str:
        """Insert fragments into the page shell and run post-render hooks."""
        page = self.renderer.env.get_template("page.html.j2").render(
            title=title,
            stylesheet=self.stylesheet,
            fragments=fragments,
        )
        return apply_post_render_hooks(page)

    async def build(self) -> list[Path]:
        """Load the document once and write every page.

        Returns:
            Paths of the written pages, home page first

        Raises:
            DurationParseError: If episode data can't be aggregated
            RenderError: If a category key would place a page outside output_dir
        """
        document = await self.renderer.load()
        self.output_dir.mkdir(parents=True, exist_ok=True)

        site_title = document.podcast.title
        pages: list[tuple[str, str, PageFragments | Redirect]] = [
            (HOME_PAGE, site_title, self.renderer.render_page(PageKind.HOME))
        ]
        if document.episodes is not None:
            for key, category in document.categories.items():
                pages.append(
                    (
                        f"{key}.html",
                        f"{category.title} - {site_title}",
                        self.renderer.render_page(PageKind.CATEGORY, key),
                    )
                )

        # Check every target before writing anything
        targets = [
            (self._page_path(filename), title, outcome)
            for filename, title, outcome in pages
            if not isinstance(outcome, Redirect)
        ]

        written = []
        for path, title, outcome in targets:
            self._write_file_atomic(path, self.assemble_page(outcome, title))
            logger.info("Wrote %s", path)
            written.append(path)

        return written

    def _page_path(self, filename: str) -> Path:
        """Resolve a page filename inside the output directory.

        Category keys come from the data document, so a key like
        "../../index" must not escape the output directory.

        Raises:
            RenderError: If the filename isn't a plain name inside output_dir
        """
        output_root = self.output_dir.resolve()
        path = (output_root / filename).resolve()

        if Path(filename).name != filename or path.parent != output_root:
            raise RenderError(
                f"Refusing to write page '{filename}' outside {output_root}"
            )
        return path

    def _write_file_atomic(self, file_path: Path, content: str) -> None:
        """Write via a temp file in the same directory, then rename.

        Raises:
            OSError: If write or rename fails
        """
        temp_fd, temp_path = tempfile.mkstemp(
            dir=file_path.parent, prefix=".tmp_", suffix=".html"
        )

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            Path(temp_path).replace(file_path)
        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise
