"""Site renderer producing header, main and footer fragments.

Every render method is a pure function of the loaded document plus its
arguments. Call :meth:`SiteRenderer.load` (or :meth:`SiteRenderer.init`)
before rendering.

Example:
    >>> renderer = SiteRenderer(DataLoader("./data/episodes.json"))
    >>> outcome = await renderer.init("category", "sleep")
    >>> if isinstance(outcome, Redirect):
    ...     print("go to", outcome.location)
"""

import logging

from jinja2 import Environment, PackageLoader
from markupsafe import Markup
from pydantic import BaseModel

from nodcast.site.helpers import (
    average_duration,
    count_unique_techniques,
    format_label,
    lighten_color,
    total_minutes,
)
from nodcast.site.loader import DataLoader
from nodcast.site.models import (
    Category,
    Document,
    Episode,
    PageFragments,
    PageKind,
    Redirect,
)
from nodcast.utils.errors import CategoryNotFoundError, RenderError

logger = logging.getLogger(__name__)

BANNER_LIGHTEN_PERCENT = 20

# Returned by init() when the document carries no episode list at all
FALLBACK_FRAGMENTS = PageFragments(
    header='<header><div class="container"><h1>Nodcast</h1></div></header>',
    main=(
        '<main><div class="container"><p>Content loading failed. '
        "Please refresh the page.</p></div></main>"
    ),
    footer='<footer><div class="container"><p>Nodcast Podcast</p></div></footer>',
)


class CategoryCard(BaseModel):
    """Summary of one category on the home page."""

    category: Category
    episode_count: int
    average_duration: str


class SiteStats(BaseModel):
    """Aggregate stats shown on the home page."""

    episode_count: int
    total_minutes: int
    unique_techniques: int


def create_environment() -> Environment:
    """Jinja2 environment over the packaged templates."""
    return Environment(
        loader=PackageLoader("nodcast.site", "templates"),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class SiteRenderer:
    """Render site pages from a data document."""

    def __init__(
        self,
        loader: DataLoader | None = None,
        copyright_year: int = 2024,
        env: Environment | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            loader: Data loader (defaults to the standard relative data path)
            copyright_year: Year shown in the footer
            env: Jinja2 environment (creates one over packaged templates if None)
        """
        self.loader = loader or DataLoader()
        self.copyright_year = copyright_year
        self.env = env or create_environment()
        self.document: Document | None = None

    async def load(self) -> Document:
        """Load the data document (never raises; see DataLoader)."""
        self.document = await self.loader.load()
        return self.document

    @property
    def data(self) -> Document:
        if self.document is None:
            raise RenderError("No document loaded; call load() first")
        return self.document

    def _render(self, template_name: str, **context) -> str:
        return self.env.get_template(template_name).render(**context)

    def render_header(
        self,
        page_kind: PageKind | str = PageKind.HOME,
        category_title: str | None = None,
        current_key: str | None = None,
    ) -> str:
        """Render the page header.

        Home headers show the tagline and a subscribe button; category headers
        show a breadcrumb and links to every other category.

        Args:
            page_kind: Page being rendered
            category_title: Title for the breadcrumb on category pages
            current_key: Category excluded from the navigation row
        """
        page_kind = PageKind(page_kind)
        nav_categories = [
            category
            for key, category in self.data.categories.items()
            if key != current_key
        ]
        return self._render(
            "header.html.j2",
            podcast=self.data.podcast,
            page_kind=page_kind.value,
            category_title=category_title,
            nav_categories=nav_categories,
        )

    def render_footer(self) -> str:
        """Render the page footer."""
        return self._render(
            "footer.html.j2",
            podcast=self.data.podcast,
            year=self.copyright_year,
        )

    def render_episode_card(self, episode: Episode, accent_color: str) -> str:
        """Render one episode card with its audio control."""
        details = [
            (format_label(label), value)
            for label, value in (episode.technique_details or {}).items()
        ]
        return self._render(
            "episode_card.html.j2",
            episode=episode,
            accent_color=accent_color,
            details=details,
        )

    def category_cards(self) -> list[CategoryCard]:
        """Per-category episode counts and average durations."""
        cards = []
        for key, category in self.data.categories.items():
            episodes = self.data.episodes_in(key)
            cards.append(
                CategoryCard(
                    category=category,
                    episode_count=len(episodes),
                    average_duration=average_duration(episodes),
                )
            )
        return cards

    def site_stats(self) -> SiteStats:
        """Aggregate stats over every episode in the document."""
        episodes = self.data.episodes or []
        return SiteStats(
            episode_count=len(episodes),
            total_minutes=total_minutes(episodes),
            unique_techniques=count_unique_techniques(episodes),
        )

    def render_home(self) -> str:
        """Render the home page main content.

        Raises:
            DurationParseError: If an episode duration has no number in it
        """
        return self._render(
            "home.html.j2",
            podcast=self.data.podcast,
            category_cards=self.category_cards(),
            stats=self.site_stats(),
        )

    def render_category(self, category_key: str) -> str:
        """Render the main content of a category page.

        Raises:
            CategoryNotFoundError: If the key isn't in the document
        """
        category = self.data.categories.get(category_key)
        if category is None:
            raise CategoryNotFoundError(category_key)

        episode_cards = [
            Markup(self.render_episode_card(episode, category.color))
            for episode in self.data.episodes_in(category_key)
        ]
        return self._render(
            "category.html.j2",
            category=category,
            gradient_end=lighten_color(category.color, BANNER_LIGHTEN_PERCENT),
            episode_cards=episode_cards,
        )

    def render_page(
        self,
        page_kind: PageKind | str = PageKind.HOME,
        category_key: str | None = None,
    ) -> PageFragments | Redirect:
        """Render one page from the already loaded document.

        Returns:
            The page fragments, the fixed fallback fragments when the document
            has no episode list, or a Redirect to the home page when a
            category page is requested for an unknown key.

        Raises:
            ValueError: If page_kind isn't a known page kind
        """
        page_kind = PageKind(page_kind)

        if self.data.episodes is None:
            logger.warning("Document has no episodes list, using fallback content")
            return FALLBACK_FRAGMENTS

        if page_kind is PageKind.HOME:
            return PageFragments(
                header=self.render_header(PageKind.HOME),
                main=self.render_home(),
                footer=self.render_footer(),
            )

        category = self.data.categories.get(category_key) if category_key else None
        if category is None:
            logger.info("Category %r not found, redirecting to home", category_key)
            return Redirect()

        return PageFragments(
            header=self.render_header(
                PageKind.CATEGORY, category.title, current_key=category.key
            ),
            main=self.render_category(category.key),
            footer=self.render_footer(),
        )

    async def init(
        self,
        page_kind: PageKind | str = PageKind.HOME,
        category_key: str | None = None,
    ) -> PageFragments | Redirect:
        """Load the document and render one page (see render_page)."""
        page_kind = PageKind(page_kind)
        await self.load()
        return self.render_page(page_kind, category_key)
