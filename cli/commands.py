"""
CLI Commands for the Roster Scraper
===================================

This module provides command-line interface commands for scraping football
rosters and serving the scrape API.

Usage:
    python -m cli.commands scrape https://gohuskies.com/sports/football/roster
    python -m cli.commands scrape URL --render --save-html page-debug.html
    python -m cli.commands batch urls.txt --output output/
    python -m cli.commands parse page-debug.html --url URL
    python -m cli.commands run-web --port 8080

For Junior Developers:
---------------------
Click is a library that makes it easy to create command-line tools.
The @click.command() decorator turns a function into a CLI command.
The @click.option() decorator adds command-line flags/arguments.
"""

import re
import sys
from pathlib import Path

import click
from loguru import logger

from config.settings import Config
from scrapers.exceptions import ExtractionError
from scrapers.football.roster_scraper import FootballRosterScraper
from services.roster_service import RosterService

# Configure loguru for CLI
logger.remove()
logger.add(
    sys.stderr,
    level=Config.LOG_LEVEL,
    format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
)


def team_slug(name: str) -> str:
    """Directory-safe form of a team name ('Ohio State' -> 'ohio-state')."""
    slug = re.sub(r'[^a-z0-9]+', '-', name.lower()).strip('-')
    return slug or 'team'


def echo_summary(result, team_path: Path, roster_path: Path):
    click.echo(f"\nScrape Complete!")
    click.echo(f"  Team: {result.team.name}")
    click.echo(f"  Players: {len(result.roster)} (strategy: {result.strategy})")
    click.echo(f"  Team file: {team_path}")
    click.echo(f"  Roster file: {roster_path}")


@click.group()
def cli():
    """Football Roster Scraper CLI - extract rosters from athletics websites."""
    pass


@cli.command()
@click.argument('url')
@click.option('--render', is_flag=True, help='Load the page in headless Chrome (JavaScript sites)')
@click.option('--output', 'output_dir', default=None, type=click.Path(file_okay=False),
              help='Directory for team.json and roster.json')
@click.option('--save-html', default=None, type=click.Path(dir_okay=False),
              help='Also save the fetched page HTML here (e.g. page-debug.html)')
def scrape(url: str, render: bool, output_dir: str, save_html: str):
    """
    Scrape one roster page and save team.json / roster.json.

    Examples:
        python -m cli.commands scrape https://gohuskies.com/sports/football/roster
        python -m cli.commands scrape URL --render --save-html page-debug.html
    """
    click.echo(f"\nScraping roster from {url}...")

    scraper = FootballRosterScraper()
    outcome = scraper.run(url=url, render=render)

    if save_html and scraper.last_page is not None:
        Path(save_html).write_text(scraper.last_page.html, encoding='utf-8')
        click.echo(f"  Saved page HTML to {save_html}")

    if outcome['status'] != 'success':
        if outcome.get('suggestion'):
            click.echo(f"  Suggestion: {outcome['suggestion']}")
        raise click.ClickException(outcome['error'])

    result = outcome['result']
    service = RosterService(scraper=scraper)
    team_path, roster_path = service.save(result, output_dir)
    echo_summary(result, team_path, roster_path)


@cli.command()
@click.argument('url_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--render', is_flag=True, help='Load pages in headless Chrome (JavaScript sites)')
@click.option('--output', 'output_dir', default=None, type=click.Path(file_okay=False),
              help='Base directory; each team gets its own subdirectory')
def batch(url_file: str, render: bool, output_dir: str):
    """
    Scrape every roster URL listed in a file (one per line, # for comments).

    Examples:
        python -m cli.commands batch urls.txt
        python -m cli.commands batch urls.txt --output rosters/
    """
    lines = Path(url_file).read_text(encoding='utf-8').splitlines()
    urls = [line.strip() for line in lines if line.strip() and not line.strip().startswith('#')]
    if not urls:
        raise click.ClickException(f"No URLs found in {url_file}")

    click.echo(f"\nScraping {len(urls)} rosters...")

    base_dir = Path(output_dir or Config.OUTPUT_DIR)
    service = RosterService()
    summaries = service.scrape_many(urls, render=render)

    failed = 0
    for summary in summaries:
        if summary['status'] == 'success':
            result = summary['result']
            _, roster_path = service.save(result, base_dir / team_slug(result.team.name))
            click.echo(f"  OK    {summary['url']} -> {summary['players']} players ({roster_path})")
        else:
            failed += 1
            click.echo(f"  FAIL  {summary['url']}: {summary['error']}")

    click.echo(f"\nBatch Complete! {len(summaries) - failed} succeeded, {failed} failed")
    if failed == len(summaries):
        raise click.ClickException('Every roster in the batch failed')


@cli.command()
@click.argument('html_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--url', required=True, help='URL the HTML was saved from (used for links)')
@click.option('--output', 'output_dir', default=None, type=click.Path(file_okay=False),
              help='Directory for team.json and roster.json')
def parse(html_file: str, url: str, output_dir: str):
    """
    Extract a roster from a saved HTML page.

    Examples:
        python -m cli.commands parse page-debug.html --url https://gohuskies.com/sports/football/roster
    """
    click.echo(f"\nParsing {html_file}...")

    service = RosterService()
    html = Path(html_file).read_text(encoding='utf-8', errors='replace')

    try:
        result = service.parse_html(html, url)
    except ExtractionError as e:
        logger.error(f"Parse failed: {e.message}")
        raise click.ClickException(e.message)

    team_path, roster_path = service.save(result, output_dir)
    echo_summary(result, team_path, roster_path)


@cli.command('run-web')
@click.option('--host', default='0.0.0.0', help='Host to bind to')
@click.option('--port', default=5000, type=int, help='Port to bind to')
@click.option('--debug', is_flag=True, help='Enable debug mode')
def run_web(host: str, port: int, debug: bool):
    """
    Run the Flask web application.

    Examples:
        python -m cli.commands run-web
        python -m cli.commands run-web --port 8080 --debug
    """
    click.echo(f"\nStarting web server on {host}:{port}...")

    try:
        from web.app import create_app

        app = create_app()
        app.run(host=host, port=port, debug=debug)

    except Exception as e:
        logger.error(f"Failed to start web server: {str(e)}")
        raise click.ClickException(str(e))


if __name__ == '__main__':
    cli()
