# site_mapper/report/json_report.py

"""
Генерация JSON-отчёта для проекта SiteMapper.

Сериализация объекта CrawlReport в файл.
"""
import json
from pathlib import Path
from typing import Any, Dict

from site_mapper.crawler.models import CrawlReport


def report_to_dict(report: CrawlReport) -> Dict[str, Any]:
    """Преобразует CrawlReport в JSON-совместимый словарь."""
    return {
        "base_url": report.base_url,
        "domain": report.domain,
        "total_crawls": report.total_crawls,
        "elapsed": round(report.elapsed, 3),
        "sitemap": report.sitemap.to_dict(),
        "failures": {url: str(err) for url, err in report.failures.items()},
        "skipped": list(report.skipped),
        "stats": {
            url: {"total_time": round(s.total_time, 4), "fetch_time": round(s.fetch_time, 4)}
            for url, s in report.stats.items()
        },
    }


def render_json(report: CrawlReport, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект CrawlReport с результатами обхода
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report_to_dict(report), f, ensure_ascii=False, indent=2)

    return output
