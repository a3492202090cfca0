# budget_tracker/shell.py
import os

import click

from budget_tracker.report import format_overrun, format_summary
from budget_tracker.utils import read_amount, read_date, read_input, read_yes_no

MENU = """
Select an option:
1. Add Income/Budget
2. Add Expense
3. Display Data
4. Save Data to CSV
5. Check if Expenses Exceed Budget
6. Enter Previous Budget
7. Exit"""

def _add_income(ledger):
    amount = read_amount("Enter income amount: ")
    source = read_input("Enter income source: ")
    date = read_date("Enter date (YYYY-MM-DD): ")
    ledger.add_income(amount, source, date)
    click.echo("Income added.")

def _add_expense(ledger):
    amount = read_amount("Enter expense amount: ")
    category = read_input("Enter expense category: ")
    date = read_date("Enter date (YYYY-MM-DD): ")
    ledger.add_expense(amount, category, date)
    click.echo("Expense added.")

def _save(ledger, output, csv_path):
    append = False
    if os.path.exists(csv_path):
        append = read_yes_no("CSV file exists. Append data? (y/n): ")

    if not read_yes_no("Do you want to save data to CSV? (y/n): "):
        click.echo("Save canceled.")
        return
    try:
        output.write(ledger, path=csv_path, append=append)
    except OSError as e:
        click.echo(f"Failed to save data: {e}")
    else:
        click.echo(f"Data saved successfully to '{csv_path}'.")

def _set_previous_budget(ledger):
    previous_budget = read_amount("Enter your previous budget: ")
    ledger.set_budget_limit(previous_budget)
    click.echo(f"Previous budget of ${previous_budget:.2f} set.")

def run_shell(ledger, output, csv_path):
    """
    Drive the ledger from a numbered menu until the user exits
    or input runs out.
    """
    actions = {
        '1': lambda: _add_income(ledger),
        '2': lambda: _add_expense(ledger),
        '3': lambda: click.echo(format_summary(ledger.render_summary())),
        '4': lambda: _save(ledger, output, csv_path),
        '5': lambda: click.echo(format_overrun(ledger.check_overrun())),
        '6': lambda: _set_previous_budget(ledger),
    }
    while True:
        click.echo(MENU)
        try:
            choice = read_input("Enter choice: ")
        except click.Abort:
            click.echo("\nExiting program.")
            return
        if choice == '7':
            click.echo("Exiting program.")
            return
        action = actions.get(choice)
        if action is None:
            click.echo("Invalid option, please try again.")
            continue
        action()
