"""Template file loading.

Files are read off the event loop with asyncio.to_thread. Path helpers
map logical names to files under the views directory:

    views/<name>.html
    views/layouts/<name>.html
    views/partials/<name>.html
"""

import asyncio
from pathlib import Path

TEMPLATE_SUFFIX = ".html"
LAYOUTS_DIR = "layouts"
PARTIALS_DIR = "partials"


async def read_template(path: Path) -> str:
    """Read a template file as UTF-8 text.

    Raises:
        OSError: File is missing or unreadable
        UnicodeDecodeError: File is not valid UTF-8
    """
    return await asyncio.to_thread(path.read_text, encoding="utf-8")


def view_path(views_directory: Path, name: str) -> Path:
    return views_directory / f"{name}{TEMPLATE_SUFFIX}"


def layout_path(views_directory: Path, name: str) -> Path:
    return views_directory / LAYOUTS_DIR / f"{name}{TEMPLATE_SUFFIX}"


def partial_path(views_directory: Path, name: str) -> Path:
    return views_directory / PARTIALS_DIR / f"{name}{TEMPLATE_SUFFIX}"
