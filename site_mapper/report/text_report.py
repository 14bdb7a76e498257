"""site_mapper.report.text_report: Текстовый вывод карты сайта."""

from __future__ import annotations

from typing import Callable, Dict, List

from site_mapper.crawler.sitemap import SitemapStore


def render_flattest(sitemap: SitemapStore) -> str:
    """Только посещённые URL, по одному в строке."""
    return "\n".join(sitemap.urls())


def render_flat(sitemap: SitemapStore) -> str:
    """Каждый URL и под ним его дочерние ссылки."""
    lines: List[str] = []

    def _emit(parent: str, children: List[str]) -> None:
        lines.append("")
        lines.append(parent)
        lines.extend(f"  --> {child}" for child in children)

    sitemap.for_each(_emit)
    return "\n".join(lines)


PRINT_MODES: Dict[str, Callable[[SitemapStore], str]] = {
    "flattest": render_flattest,
    "flat": render_flat,
}


def render_text(sitemap: SitemapStore, mode: str = "flattest") -> str:
    """Рендерит карту сайта в одном из режимов PRINT_MODES."""
    try:
        renderer = PRINT_MODES[mode]
    except KeyError:
        raise ValueError(f"Unknown print mode ({mode})") from None
    return renderer(sitemap)
