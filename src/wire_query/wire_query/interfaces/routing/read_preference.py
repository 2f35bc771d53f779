"""
ABOUTME: [L0] Read preference interface consumed by query specs
ABOUTME: Defines the single capability a query spec reads from a routing directive
"""

from abc import ABC, abstractmethod
from typing import Any


class AbstractReadPreference(ABC):
    """
    [L0] Abstract base class for read-routing directives.

    A query spec only needs to know whether the directive lets the query run
    against a non-primary replica member. Implementations must be immutable
    and define value equality and hashing, because query specs compare and
    hash the preference they hold.
    """

    @property
    @abstractmethod
    def is_slave_ok(self) -> bool:
        """
        Whether results may come from a non-primary replica member.

        Returns:
            bool: True when the slave-ok flag must be added to outgoing queries.
        """
        pass

    def to_dict(self) -> dict[str, Any]:
        """
        Describes the directive for logs and diagnostics.

        Returns:
            dict[str, Any]: The implementation name and its slave-ok capability.
                Implementations with richer state override this.
        """
        return {"type": type(self).__name__, "is_slave_ok": self.is_slave_ok}
