"""Jinja2 template engine set up for the RaspiPass pages."""
import logging
import os
import sys
import tempfile
from configparser import ConfigParser
from typing import Any, Optional, TextIO

from jinja2 import Environment, FileSystemBytecodeCache, FileSystemLoader, select_autoescape

from .config import PathsConfig

logger = logging.getLogger(__name__)

APP_NAME = "RaspiPass"


class PageTemplates:
    """Template engine with the RaspiPass directories and defaults applied.

    Each instance owns its own variables, so a fresh instance per request
    never sees values assigned for another request.
    """

    def __init__(self, paths: Optional[PathsConfig] = None):
        """Initialize the engine.

        Args:
            paths: Directory configuration. Defaults to the package layout.
        """
        paths = paths or PathsConfig()
        self.template_dir = paths.resolve("template_dir")
        self.compile_dir = paths.resolve("compile_dir")
        self.config_dir = paths.resolve("config_dir")
        self.cache_dir = paths.resolve("cache_dir")
        self.caching = False

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            bytecode_cache=self._bytecode_cache(),
            autoescape=select_autoescape(["html", "tpl"]),
        )

        self._vars: dict[str, Any] = {}
        self._config_vars: dict[str, Any] = {}
        self.assign("app_name", APP_NAME)

    def _bytecode_cache(self) -> Optional[FileSystemBytecodeCache]:
        """Use the compile directory only when it can be written to."""
        try:
            self.compile_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Compile directory %s unavailable (%s), compiling in memory", self.compile_dir, e)
            return None
        if not os.access(self.compile_dir, os.W_OK):
            logger.warning("Compile directory %s is not writable, compiling in memory", self.compile_dir)
            return None
        return FileSystemBytecodeCache(str(self.compile_dir))

    def set_caching(self, enabled: bool) -> None:
        self.caching = bool(enabled)

    def assign(self, name: str, value: Any) -> None:
        """Assign a template variable on this instance."""
        self._vars[name] = value

    def get_template_vars(self, name: Optional[str] = None) -> Any:
        """Return one assigned variable, or a copy of all of them."""
        if name is not None:
            return self._vars.get(name)
        return dict(self._vars)

    def config_load(self, filename: str, section: Optional[str] = None) -> dict[str, Any]:
        """Load an INI file from the config directory into ``config``.

        Without a section, top-level (DEFAULT) keys are loaded flat and
        every section is exposed as a nested mapping.

        Raises:
            FileNotFoundError: If the file is not in the config directory.
            KeyError: If the section does not exist.
        """
        path = self.config_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        parser = ConfigParser()
        parser.read(path)

        if section is not None:
            loaded: dict[str, Any] = dict(parser[section])
        else:
            loaded = dict(parser.defaults())
            for name in parser.sections():
                loaded[name] = dict(parser[name])

        self._config_vars.update(loaded)
        logger.debug("Loaded config vars from %s", path)
        return loaded

    def _cache_file(self, template_name: str):
        return self.cache_dir / f"{template_name.replace('/', '_')}.html"

    def _write_cache(self, target, output: str) -> None:
        # Readers only ever see a complete file.
        fd, tmp_name = tempfile.mkstemp(dir=str(self.cache_dir), prefix=target.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(output)
            os.replace(tmp_name, target)
        except BaseException:
            os.unlink(tmp_name)
            raise

    def fetch(self, template_name: str) -> str:
        """Render a template and return the output.

        Raises:
            jinja2.TemplateNotFound: If the template cannot be located.
        """
        if self.caching:
            cached = self._cache_file(template_name)
            if cached.exists():
                logger.debug("Serving %s from cache", template_name)
                return cached.read_text(encoding="utf-8")

        template = self.env.get_template(template_name)
        context = {"config": dict(self._config_vars)}
        context.update(self._vars)
        output = template.render(context)

        if self.caching:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            self._write_cache(self._cache_file(template_name), output)

        return output

    def display(self, template_name: str, stream: Optional[TextIO] = None) -> str:
        """Render a template and write it to a stream (stdout by default)."""
        output = self.fetch(template_name)
        (stream or sys.stdout).write(output)
        return output
