# budget_tracker/manual.py
import yaml
from budget_tracker.utils import is_valid_date, parse_amount, parse_transaction_type


def load_manual_entries(path, ledger):
    """Append income/expense entries listed in a YAML file to the ledger."""
    with open(path) as f:
        data = yaml.safe_load(f) or []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of entries in {path}")

    parsed = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ValueError(f"Manual entry is not a mapping: {entry}")
        tx_type = parse_transaction_type(entry.get('type', ''))
        if tx_type is None:
            raise ValueError(f"Missing or unknown 'type' in manual entry: {entry}")
        amount = parse_amount(entry.get('amount'))
        if amount is None:
            raise ValueError(f"Invalid 'amount' in manual entry: {entry}")
        # dates must stay strings; unquoted YAML dates load as datetime.date
        date_str = entry.get('date')
        if hasattr(date_str, 'isoformat'):
            date_str = date_str.isoformat()
        if not date_str or not is_valid_date(str(date_str)):
            raise ValueError(f"Invalid 'date' in manual entry: {entry}")
        label_key = 'source' if tx_type == 'income' else 'category'
        label = entry.get('label', entry.get(label_key))
        label = '' if label is None else str(label)
        parsed.append((tx_type, amount, label, str(date_str)))

    # nothing is appended unless the whole file is valid
    for tx_type, amount, label, date_str in parsed:
        if tx_type == 'income':
            ledger.add_income(amount, label, date_str)
        else:
            ledger.add_expense(amount, label, date_str)
    return len(parsed)
