"""
SiteMapper package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

# Expose CLI entry point; `site_mapper.cli` stays the submodule
from site_mapper.cli import cli as main_cli  # noqa: E402
from site_mapper.engine import start_crawl  # noqa: E402

__all__ = ["__version__", "main_cli", "start_crawl"]
