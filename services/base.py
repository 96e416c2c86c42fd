"""Base services container for dependency injection."""

from config import Config
from db.store import DataStore


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a pre-seeded store for testing.

    Args:
        config: Application configuration object.
        store: Optional data store for testing. If provided, the config's
               seed file is not read.
    """

    def __init__(self, config: Config, store=None):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
            store: Optional data store for dependency injection (testing).
                   If None, creates DataStore from config.
        """
        self.config = config
        self.store = store or DataStore(config)

        # Lazy import to avoid circular dependencies
        from services.accounts import AccountService
        from services.transactions import TransactionService
        from services.categories import CategoryService
        from services.budgets import BudgetService

        self.accounts = AccountService(self.store)
        self.transactions = TransactionService(self.store)
        self.categories = CategoryService(self.store)
        self.budgets = BudgetService(self.store)
