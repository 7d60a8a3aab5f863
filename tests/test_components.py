"""Tests for the HTML component loader"""
import httpx
import pytest

from tranex.components import ComponentLoader, process_language_attributes
from tranex.errors import ComponentLoadError

PAGE = '<html><body><div id="header">old</div><main>content</main><div id="footer"></div></body></html>'

COMPONENTS = {
    "/src/components/header.html": '<nav><a href="/" data-en="Home" data-ar="الرئيسية">Home</a></nav>',
    "/src/components/footer.html": "<footer><p>TRANEX</p></footer>",
}


def make_loader(requests=None, status=200):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request.url.path)
        body = COMPONENTS.get(request.url.path)
        if body is None:
            return httpx.Response(404)
        return httpx.Response(status, text=body)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ComponentLoader("https://tranex.test/", client=client)


@pytest.mark.asyncio
async def test_load_component_replaces_target_content():
    loader = make_loader()

    html = await loader.load_component(PAGE, "/src/components/footer.html", "#footer")

    assert '<div id="footer"><footer><p>TRANEX</p></footer></div>' in html
    assert "<main>content</main>" in html


@pytest.mark.asyncio
async def test_load_component_applies_language():
    loader = make_loader()

    html = await loader.load_component(PAGE, "/src/components/header.html", "#header", language="ar")

    assert ">الرئيسية</a>" in html
    assert "old" not in html


@pytest.mark.asyncio
async def test_load_component_calls_callback():
    loader = make_loader()
    seen = []

    await loader.load_component(PAGE, "/src/components/footer.html", "#footer", callback=seen.append)

    assert len(seen) == 1
    assert seen[0].get("id") == "footer"


@pytest.mark.asyncio
async def test_fetch_component_is_cached():
    requests = []
    loader = make_loader(requests)

    first = await loader.fetch_component("/src/components/footer.html")
    second = await loader.fetch_component("/src/components/footer.html")

    assert first == second
    assert requests == ["/src/components/footer.html"]


@pytest.mark.asyncio
async def test_missing_target_raises():
    loader = make_loader()

    with pytest.raises(ComponentLoadError):
        await loader.load_component(PAGE, "/src/components/footer.html", "#sidebar")


@pytest.mark.asyncio
async def test_http_error_raises_and_is_not_cached():
    loader = make_loader()

    with pytest.raises(ComponentLoadError):
        await loader.fetch_component("/src/components/missing.html")
    assert loader.components_cache == {}


@pytest.mark.asyncio
async def test_server_error_status_raises():
    loader = make_loader(status=500)

    with pytest.raises(ComponentLoadError):
        await loader.fetch_component("/src/components/footer.html")


@pytest.mark.asyncio
async def test_network_error_raises():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    loader = ComponentLoader("https://tranex.test", client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    with pytest.raises(ComponentLoadError):
        await loader.fetch_component("/src/components/footer.html")


@pytest.mark.asyncio
async def test_initialize_components():
    requests = []
    loader = make_loader(requests)

    html = await loader.initialize_components(PAGE, {
        "/src/components/header.html": "#header",
        "/src/components/footer.html": "#footer",
    }, language="en")

    assert ">Home</a>" in html
    assert "<p>TRANEX</p>" in html
    assert sorted(requests) == ["/src/components/footer.html", "/src/components/header.html"]


def test_process_language_attributes():
    html = process_language_attributes('<p data-ar="مرحبا" data-en="Hello">Hello</p><span>x</span>', "ar")

    assert html.startswith('<p data-ar="مرحبا" data-en="Hello">مرحبا</p>')
    assert "<span>x</span>" in html
