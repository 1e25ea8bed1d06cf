"""Rendering of the RaspiPass Configuration Page."""
import logging
from typing import Optional

from .config import PathsConfig
from .engine import PageTemplates
from .version import read_version

logger = logging.getLogger(__name__)

PAGE_TITLE = "RaspiPass Configuration Page"
INDEX_TEMPLATE = "index.tpl"


def build_index(paths: Optional[PathsConfig] = None) -> PageTemplates:
    """Create a template engine with the index page variables assigned."""
    paths = paths or PathsConfig()
    templates = PageTemplates(paths)
    templates.set_caching(False)

    templates.assign("title", PAGE_TITLE)
    templates.assign("version", read_version(paths.version_file))
    return templates


def render_index(paths: Optional[PathsConfig] = None) -> str:
    """Render the configuration page and return the output.

    Raises:
        jinja2.TemplateNotFound: If ``index.tpl`` cannot be located.
    """
    templates = build_index(paths)
    logger.info("Rendering %s (version=%r)", INDEX_TEMPLATE, templates.get_template_vars("version"))
    return templates.fetch(INDEX_TEMPLATE)
