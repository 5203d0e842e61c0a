"""Tests for the scrape endpoints."""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from recipe_extractor.api.app import create_app
from recipe_extractor.api.dependencies import get_recipe_fetcher
from recipe_extractor.fetcher import RecipeFetcher

from conftest import HEURISTIC_RECIPE_HTML, NOT_A_RECIPE_HTML, RECIPE_JSON_LD, ld_json_script, page

PAGES = {
    "/structured": page(ld_json_script(RECIPE_JSON_LD)),
    "/heuristic": HEURISTIC_RECIPE_HTML,
    "/about": NOT_A_RECIPE_HTML,
}


def fake_site(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/slow":
        raise httpx.ConnectTimeout("timed out", request=request)
    if request.url.path in PAGES:
        return httpx.Response(200, text=PAGES[request.url.path])
    return httpx.Response(404)


@pytest.fixture
def app():
    """Create the app with a fetcher that talks to a fake site."""
    test_app = create_app()

    async def fake_fetcher():
        async with RecipeFetcher(transport=httpx.MockTransport(fake_site)) as fetcher:
            yield fetcher

    test_app.dependency_overrides[get_recipe_fetcher] = fake_fetcher
    return test_app


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


async def test_scrape_structured(client):
    response = await client.post("/api/scrape", json={"url": "https://site.test/structured"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "failureReason" not in body
    recipe = body["recipe"]
    assert recipe["name"] == "Classic Pancakes"
    assert len(recipe["parsedIngredients"]) == len(recipe["ingredients"])
    assert recipe["parsedIngredients"][0] == {
        "quantity": "1 1/2",
        "quantity2": None,
        "unit": "cups",
        "unitId": "cup",
        "item": "all-purpose flour",
        "original": "1 1/2 cups all-purpose flour",
        "order": 0,
    }


async def test_scrape_heuristic(client):
    response = await client.post("/api/scrape", json={"url": "https://site.test/heuristic"})
    assert response.json()["recipe"]["name"] == "Tomato Soup"


async def test_scrape_no_recipe(client):
    response = await client.post("/api/scrape", json={"url": "https://site.test/about"})
    assert response.status_code == 200
    assert response.json() == {"success": False, "failureReason": "No recipe data found"}


async def test_scrape_http_error(client):
    response = await client.post("/api/scrape", json={"url": "https://site.test/missing"})
    assert response.json() == {"success": False, "failureReason": "404 Not Found"}


async def test_scrape_timeout(client):
    response = await client.post("/api/scrape", json={"url": "https://site.test/slow"})
    assert response.json() == {"success": False, "failureReason": "Timeout"}


@pytest.mark.parametrize("payload", [{}, {"url": ""}, {"url": None}])
async def test_scrape_requires_url(client, payload):
    response = await client.post("/api/scrape", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "url is required"}


async def test_scrape_without_body(client):
    response = await client.post("/api/scrape")
    assert response.status_code == 400
    assert response.json() == {"error": "url is required"}


async def test_parse_ingredients(client):
    response = await client.post(
        "/api/ingredients/parse",
        json={"lines": ["2-3 cups flour", "pinch of salt", "Parmesan 24 month aged"]},
    )

    assert response.status_code == 200
    parsed = response.json()
    assert [p["order"] for p in parsed] == [0, 1, 2]
    assert (parsed[0]["quantity"], parsed[0]["quantity2"], parsed[0]["unit"]) == ("2", "3", "cups")
    assert (parsed[1]["quantity"], parsed[1]["unit"], parsed[1]["item"]) == (None, "pinch", "salt")
    assert (parsed[2]["quantity"], parsed[2]["unit"], parsed[2]["item"]) == (None, None, "Parmesan 24 month aged")
