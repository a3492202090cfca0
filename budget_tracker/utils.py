# budget_tracker/utils.py
import math

import click


def is_valid_date(value):
    """
    Accept any 10-character string with '-' at positions 4 and 7.
    Digits and calendar ranges are not checked.
    """
    return len(value) == 10 and value[4] == '-' and value[7] == '-'

def parse_amount(value):
    """Return a non-negative float, or None if value is not one."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(amount) or amount < 0:
        return None
    return amount

def parse_yes_no(value):
    answer = value.strip().lower()
    if answer in ('y', 'yes'):
        return True
    if answer in ('n', 'no'):
        return False
    return None

def parse_transaction_type(value):
    """Resolve "1"/"income" or "2"/"expense" (any case) to a type name."""
    return {
        '1': 'income', 'income': 'income',
        '2': 'expense', 'expense': 'expense',
    }.get(str(value).strip().lower())


def read_input(prompt):
    return click.prompt(
        prompt, default='', show_default=False, prompt_suffix=''
    ).strip()

def read_amount(prompt):
    while True:
        amount = parse_amount(read_input(prompt))
        if amount is not None:
            return amount
        click.echo("Invalid number, please enter a positive numeric value.")

def read_date(prompt):
    while True:
        value = read_input(prompt)
        if is_valid_date(value):
            return value
        click.echo("Invalid date format. Please enter in YYYY-MM-DD format.")

def read_yes_no(prompt):
    while True:
        answer = parse_yes_no(read_input(prompt))
        if answer is not None:
            return answer
        click.echo("Please enter 'y' or 'n'.")
