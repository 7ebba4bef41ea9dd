"""Notification port for account activation.

The application layer only needs to hand an address and an activation token
to something that delivers them; SMTP details live in infrastructure.
"""

from abc import ABC, abstractmethod


class ActivationNotifier(ABC):
    """Delivers the account activation message to a freshly registered user."""

    @abstractmethod
    async def send_account_activation_email(self, to_email: str, token: str) -> None:
        """
        Send the activation message.

        Parameters
        ----------
        to_email
            Recipient address
        token
            Activation token the recipient uses to activate the account

        Raises
        ------
        Exception
            Any failure to hand the message over for delivery
        """
