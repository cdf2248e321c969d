"""Shared fixtures: temporary views trees."""

from pathlib import Path

import pytest


def write_views(root: Path, files: dict[str, str]) -> Path:
    """Write {relative_path: content} under root and return root."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def views_dir(tmp_path):
    """A views tree with two layouts, a few views and partials."""
    return write_views(
        tmp_path / "views",
        {
            "layouts/main.html": "<html><body>@content</body></html>",
            "layouts/alt.html": "<section>[[CONTENT]]</section>",
            "layouts/titled.html": "<title>{{ title }}</title><main>@content</main>",
            "layouts/bare.html": "<div>no marker</div>",
            "home.html": "<h1>Hola {{ user.name }}</h1>",
            "plain.html": "<p>Plain</p>",
            "helper.html": "<p>{{ upper user.name }}</p>",
            "with_partial.html": "{{> header }}<p>{{ body }}</p>{{> missing }}",
            "partials/header.html": "<header>{{ title }}</header>",
            "partials/nav/menu.html": "<nav>{{#each links}}<a>{{ this }}</a>{{/each}}</nav>",
        },
    )


@pytest.fixture
def make_views(tmp_path):
    """Factory writing a views tree under tmp_path from {relative_path: content}."""

    def _make(files: dict[str, str]) -> Path:
        return write_views(tmp_path, files)

    return _make
