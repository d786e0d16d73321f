"""Sphinx configuration for chardetect documentation."""

import chardetect

project = "chardetect"
copyright = "2026, chardetect contributors"
author = "chardetect contributors"
release = chardetect.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"chardetect {release}"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
# Strip the ">>> " and "$ " prompts when copying examples.
copybutton_prompt_text = r">>> |\$ "
copybutton_prompt_is_regexp = True
