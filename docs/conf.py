"""Sphinx configuration for nourishnet-offline."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

from nourishnet_offline import __version__  # noqa: E402

project = "nourishnet-offline"
author = "NourishNet contributors"
copyright = f"2026, {author}"
release = __version__
version = ".".join(release.split(".")[:2])

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
]

root_doc = "index"
source_suffix = {".md": "markdown"}
exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"nourishnet-offline {release}"

myst_enable_extensions = ["colon_fence"]
myst_heading_anchors = 2

# The SQLAlchemy store is optional; build the API page without it.
autodoc_mock_imports = ["sqlalchemy", "aiosqlite"]
autodoc_member_order = "groupwise"
autodoc_typehints = "signature"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pydantic": ("https://docs.pydantic.dev/latest/", None),
    "litestar": ("https://docs.litestar.dev/2/", None),
}
