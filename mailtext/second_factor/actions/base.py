"""
Base interface for actions protected by second factor authentication
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from mailtext.core.security import Guardian


class SecondFactorAction(ABC):
    """
    An operation that may require a second factor before it runs.
    The second factor flow calls exactly one of the hooks below,
    depending on the user's second factor setup and the request.
    """

    def __init__(self, guardian: Guardian):
        self.guardian = guardian
        self.current_user = guardian.user
        self.data: Dict[str, Any] = {}

    def skip_second_factor_auth(self, params: Dict[str, Any]) -> bool:
        """Return True to run the action without asking for a second factor"""
        return False

    @abstractmethod
    def second_factor_auth_skipped(self, params: Dict[str, Any]) -> None:
        """
        Run the action when skip_second_factor_auth() returned True.

        Args:
            params: Request parameters
        """
        pass

    @abstractmethod
    def no_second_factors_enabled(self, params: Dict[str, Any]) -> None:
        """
        Run the action for a user who has no second factor configured.

        Args:
            params: Request parameters
        """
        pass

    @abstractmethod
    def second_factor_auth_required(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Prepare the challenge shown before the action runs.

        Args:
            params: Request parameters

        Returns:
            Callback parameters that come back in second_factor_auth_completed()
        """
        pass

    @abstractmethod
    def second_factor_auth_completed(self, callback_params: Dict[str, Any]) -> None:
        """
        Run the action after the second factor was verified.

        Args:
            callback_params: Parameters returned by second_factor_auth_required()
        """
        pass

    def add_data(self, key: str, value: Any) -> None:
        """Attach data for the client to the action result"""
        self.data[key] = value
