"""Tests for the FastAPI integration."""

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from raptor.api import create_app, get_views, render_view
from raptor.config import ViewSettings
from raptor.views import ViewComposer


@pytest.fixture
def client(views_dir, make_views):
    make_views({"views/broken.html": "{{ upper user.name }}"})
    app = create_app(ViewSettings(views_directory=views_dir))

    @app.get("/")
    async def home(views: ViewComposer = Depends(get_views)):
        return await render_view(views, "home", {"user": {"name": "<Ana>"}})

    @app.get("/created")
    async def created(views: ViewComposer = Depends(get_views)):
        return await render_view(views, "plain", status_code=201)

    @app.get("/missing")
    async def missing(views: ViewComposer = Depends(get_views)):
        return await render_view(views, "does-not-exist")

    @app.get("/broken")
    async def broken(views: ViewComposer = Depends(get_views)):
        return await render_view(views, "broken")

    return TestClient(app)


class TestViewResponses:
    def test_renders_html(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text == "<html><body><h1>Hola &lt;Ana&gt;</h1></body></html>"

    def test_custom_status(self, client):
        response = client.get("/created")
        assert response.status_code == 201
        assert response.text == "<html><body><p>Plain</p></body></html>"

    def test_missing_view_is_404(self, client):
        response = client.get("/missing")
        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")
        assert "Not Found" in response.text

    def test_helper_error_is_500(self, client):
        response = client.get("/broken")
        assert response.status_code == 500
        assert "could not be rendered" in response.text


class TestHelpersEndpoint:
    def test_lists_builtins(self, client):
        response = client.get("/api/helpers")
        assert response.status_code == 200
        data = response.json()
        names = [h["name"] for h in data["helpers"]]
        assert names == ["currency", "date", "lower", "truncate", "upper"]
        assert data["total_helpers"] == 5

    def test_lists_custom_helpers(self, client):
        client.app.state.views.register_helper("bold", lambda text: f"<b>{text}</b>")
        data = client.get("/api/helpers").json()
        bold = next(h for h in data["helpers"] if h["name"] == "bold")
        assert bold["builtin"] is False
