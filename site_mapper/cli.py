# === FILE: site_mapper/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска обхода SiteMapper через командную строку.

Команды:
  crawl     Обойти сайт и вывести карту сайта / сохранить отчёты
  config    Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязательно)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только консоль, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --print-mode MODE   flattest (только URL) или flat (URL и дочерние ссылки)
  --verbose           Вывести время обхода каждой страницы
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --crawl-timeout SEC Таймаут всего обхода (секунд)

Пример:
  site_mapper crawl https://example.com --print-mode flat --workers 16
"""
import asyncio
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from site_mapper import __version__
from site_mapper.config import load_config
from site_mapper.crawler.crawler import parse_seed
from site_mapper.engine import start_crawl
from site_mapper.errors import InvalidSeedURL
from site_mapper.logger import DEFAULT_FORMAT, init_logging, logger
from site_mapper.report.html_report import render_html
from site_mapper.report.json_report import render_json
from site_mapper.report.text_report import PRINT_MODES, render_text

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def crawl_options(func):
    """Опции, переопределяющие поля CrawlConfig (общие для crawl и config)."""
    options = [
        click.argument('seed', required=False),
        click.option('--domain', '-d', default=None, help='Домен-фильтр (по умолчанию хост стартового URL)'),
        click.option('--workers', '-w', type=click.IntRange(min=1), default=None, help='Число воркеров'),
        click.option('--queue-capacity', '-q', type=click.IntRange(min=1), default=None, help='Ёмкость очереди URL'),
        click.option('--timeout', type=click.FloatRange(min=0, min_open=True), default=None,
                     help='Таймаут одного запроса (секунд)'),
        click.option('--ignore-suffix', '-i', 'ignore_suffixes', multiple=True,
                     help='Суффикс URL, который не загружается (можно повторять)'),
        click.option('--user-agent', default=None, help='Заголовок User-Agent'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_config(ctx, seed, domain, workers, queue_capacity, timeout, ignore_suffixes, user_agent):
    try:
        cfg = load_config(
            ctx.obj['config_path'],
            base_url=seed,
            domain=domain,
            workers=workers,
            queue_capacity=queue_capacity,
            timeout=timeout,
            ignore_suffixes=list(ignore_suffixes) or None,
            user_agent=user_agent,
        )
        parse_seed(cfg.base_url)
    except (InvalidSeedURL, ValidationError, OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    return cfg


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteMapper, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только консоль, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteMapper CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@crawl_options
@click.option(
    '--print-mode', '-p', 'print_mode',
    default='flattest', show_default=True,
    type=click.Choice(sorted(PRINT_MODES)),
    help='flattest: только URL; flat: URL и его дочерние ссылки'
)
@click.option('--verbose', is_flag=True, help='Вывести статистику времени по каждой странице')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном sitemap.html.j2'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl(ctx, seed, domain, workers, queue_capacity, timeout, ignore_suffixes, user_agent,
          print_mode, verbose, json_output, html_output, template_dir, crawl_timeout):
    """Обойти сайт, начиная с SEED, и вывести карту сайта."""
    cfg = build_config(ctx, seed, domain, workers, queue_capacity, timeout, ignore_suffixes, user_agent)
    logger.info('Starting crawl: %s', cfg.base_url)
    try:
        if crawl_timeout:
            report = asyncio.run(
                asyncio.wait_for(start_crawl(cfg), timeout=crawl_timeout)
            )
        else:
            report = asyncio.run(start_crawl(cfg))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    if verbose:
        for url, stat in report.stats.items():
            logger.info('Crawl (%s) took %.3fs. GET(%.3fs)', url, stat.total_time, stat.fetch_time)
        logger.info('%d crawls took %.3fs', report.total_crawls, report.elapsed)

    click.echo(render_text(report.sitemap, print_mode))

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}', err=True)
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}', err=True)
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@crawl_options
@click.pass_context
def show_config(ctx, seed, domain, workers, queue_capacity, timeout, ignore_suffixes, user_agent):
    """Показать итоговую конфигурацию в JSON."""
    cfg = build_config(ctx, seed, domain, workers, queue_capacity, timeout, ignore_suffixes, user_agent)
    click.echo(json.dumps(cfg.model_dump(mode='json'), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
