# budget_tracker/cli.py
import logging
import os
import click
import yaml
from dotenv import load_dotenv
from budget_tracker.config import load_config
from budget_tracker.core.ledger import Ledger
from budget_tracker.manual import load_manual_entries
from budget_tracker.outputs.csv_output import CSVOutput
from budget_tracker.shell import run_shell
from budget_tracker.utils import parse_amount

logger = logging.getLogger(__name__)

@click.command()
@click.option(
    '--config', 'config_path',
    default='config.yaml',
    type=click.Path(dir_okay=False),
    help='Path to config.yaml (defaults are used when the file is missing)'
)
@click.option(
    '--csv-file', 'csv_file',
    default=None,
    type=click.Path(dir_okay=False),
    help='CSV file used by "Save Data to CSV" (overrides config)'
)
@click.option(
    '--budget', 'budget',
    default=None,
    type=click.FloatRange(min=0),
    help='Starting budget limit (overrides config, default 1000.0)'
)
@click.option(
    '--manual-file', 'manual_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='YAML file of income/expense entries to load at start (overrides config)'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file, e.g. with BUDGET_LOG_LEVEL'
)
def main(config_path, csv_file, budget, manual_file, env_file):
    """
    Interactive personal budget tracker. Record income and expenses,
    display totals, check expenses against a budget limit and save
    everything to a comma-delimited file.
    """
    if env_file:
        load_dotenv(env_file)
    logging.basicConfig(level=os.getenv("BUDGET_LOG_LEVEL", "WARNING").upper())

    try:
        cfg = load_config(config_path)
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(str(e))
    if csv_file:
        cfg['csv_file'] = csv_file
    if budget is None:
        budget = parse_amount(cfg.get('default_budget'))
        if budget is None:
            raise click.ClickException(
                f"default_budget must be a non-negative number, got {cfg.get('default_budget')!r}"
            )
    if not isinstance(cfg.get('csv_file'), str) or not cfg['csv_file'].strip():
        raise click.ClickException(
            f"csv_file must be a non-empty path, got {cfg.get('csv_file')!r}"
        )

    ledger = Ledger(budget)
    logger.info("Starting with budget limit %.2f", budget)

    manual_path = manual_file or cfg.get('manual_entries_file')
    if manual_path:
        try:
            count = load_manual_entries(manual_path, ledger)
            click.echo(f"Loaded {count} entr{'y' if count == 1 else 'ies'} from {manual_path}.")
        except (OSError, ValueError, yaml.YAMLError) as e:
            click.echo(f"Error loading manual entries: {e}", err=True)

    outputter = CSVOutput(cfg)
    run_shell(ledger, outputter, cfg['csv_file'])
