# budget_tracker/outputs/csv_output.py

import os
import logging
from decimal import Decimal
from budget_tracker.outputs.base import BaseOutput

logger = logging.getLogger(__name__)

HEADER = ['Type', 'Amount', 'Source/Category', 'Date']


def format_amount(amount):
    """Shortest float text without an exponent: 2000.0, 12.5, 0.00001."""
    return format(Decimal(repr(float(amount))), 'f')


def format_field(value):
    # only a delimiter or line break forces quoting; bare quotes pass through
    text = str(value)
    if ',' in text or '\n' in text or '\r' in text:
        return '"' + text.replace('"', '""') + '"'
    return text


class CSVOutput(BaseOutput):
    """
    Writes the ledger to a single comma-delimited file, income rows first,
    then expense rows, each in insertion order.

    In append mode against an existing file the header is skipped and all
    current entries are added again; rows saved earlier are not tracked,
    so repeated appends repeat them.
    """
    def __init__(self, config):
        self.config   = config
        self.csv_file = config.get('csv_file') or 'budget_data.csv'

    def write(self, ledger, path=None, append=False):
        return self.save(ledger, path=path, append=append)

    def save(self, ledger, path=None, append=False):
        out_path    = path or self.csv_file
        file_exists = os.path.exists(out_path)
        write_header = not (append and file_exists)
        mode = 'w' if write_header else 'a'

        rows = [self._row('Income', e) for e in ledger.income_entries]
        rows.extend(self._row('Expense', e) for e in ledger.expense_entries)

        try:
            with open(out_path, mode, newline='') as f:
                if write_header:
                    f.write(','.join(HEADER) + '\n')
                for row in rows:
                    f.write(','.join(format_field(v) for v in row) + '\n')
        except OSError:
            logger.error("Could not write %s", out_path)
            raise

        logger.info(
            "%s %d row(s) to %s",
            'Wrote' if write_header else 'Appended', len(rows), out_path,
        )
        return out_path

    @staticmethod
    def _row(kind, entry):
        return [kind, format_amount(entry.amount), entry.label, entry.date]
