"""
Component Loader

Fetches shared HTML fragments (header, footer) and injects them into page
markup at a CSS selector. Fragments are cached per path for the lifetime
of the loader. Elements carrying a `data-<lang>` attribute get that
attribute's text when a language is given.
"""

import asyncio
from typing import Callable, Mapping, Optional

import httpx
from bs4 import BeautifulSoup, Tag

from tranex.db import COMPONENTS_BASE_URL
from tranex.errors import ERROR_COMPONENT_LOAD, ERROR_TARGET_NOT_FOUND, ComponentLoadError
from tranex.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


def _apply_language(root: Tag, language: str) -> None:
    attribute = f"data-{language}"
    for element in root.select(f"[{attribute}]"):
        translated = element.get(attribute)
        if translated:
            element.string = translated


def process_language_attributes(html: str, language: str) -> str:
    """Replace the text of every element with a data-<language> attribute."""
    soup = BeautifulSoup(html, "html.parser")
    _apply_language(soup, language)
    return str(soup)


class ComponentLoader:
    """
    Loads HTML components into pages.

    Usage:
        loader = ComponentLoader("https://tranex.example")
        page = await loader.initialize_components(page, {
            "/src/components/header.html": "#header",
            "/src/components/footer.html": "#footer",
        }, language="ar")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = (base_url if base_url is not None else COMPONENTS_BASE_URL).rstrip("/")
        self._client = client
        self.timeout = timeout
        self.components_cache: dict[str, str] = {}

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url)

    async def fetch_component(self, path: str) -> str:
        """
        Fetch a component's HTML, using the cache when possible.

        Raises:
            ComponentLoadError: On network failure or a non-2xx response
        """
        cached = self.components_cache.get(path)
        if cached is not None:
            return cached

        try:
            response = await self._get(self._url(path))
        except httpx.HTTPError as e:
            logger.error(f"Error loading component {path}: {e}")
            raise ComponentLoadError(f"{ERROR_COMPONENT_LOAD}: {path}") from e

        if not response.is_success:
            logger.error(f"Error loading component {path}: HTTP {response.status_code}")
            raise ComponentLoadError(f"{ERROR_COMPONENT_LOAD}: {path}")

        self.components_cache[path] = response.text
        return response.text

    async def load_component(
        self,
        page_html: str,
        component_path: str,
        target_selector: str,
        language: Optional[str] = None,
        callback: Optional[Callable[[Tag], None]] = None,
    ) -> str:
        """
        Inject a component as the inner HTML of the first element matching
        target_selector.

        Args:
            page_html: Page markup to inject into
            component_path: Path of the component, relative to base_url
            target_selector: CSS selector for the target element
            language: Apply data-<language> translations inside the component
            callback: Called with the filled target element

        Returns:
            The updated page markup

        Raises:
            ComponentLoadError: If the target is missing or the fetch fails
        """
        soup = BeautifulSoup(page_html, "html.parser")
        target = soup.select_one(target_selector)
        if target is None:
            logger.error(f"Target element not found: {sanitize_string_for_logging(target_selector)}")
            raise ComponentLoadError(f"{ERROR_TARGET_NOT_FOUND}: {target_selector}")

        fragment = BeautifulSoup(await self.fetch_component(component_path), "html.parser")
        target.clear()
        for node in list(fragment.contents):
            target.append(node.extract())

        if language:
            _apply_language(target, language)

        if callback is not None:
            callback(target)

        return str(soup)

    async def initialize_components(
        self,
        page_html: str,
        component_map: Mapping[str, str],
        language: Optional[str] = None,
    ) -> str:
        """
        Inject every {component_path: target_selector} entry.

        Components are fetched concurrently, then injected in map order.
        """
        await asyncio.gather(*(self.fetch_component(path) for path in component_map))
        for path, selector in component_map.items():
            page_html = await self.load_component(page_html, path, selector, language)
        return page_html
