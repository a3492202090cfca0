# budget_tracker/outputs/base.py
from abc import ABC, abstractmethod

class BaseOutput(ABC):
    @abstractmethod
    def write(self, ledger, path=None, append=False):
        """Write every ledger entry to the chosen sink and return its location."""
        pass
