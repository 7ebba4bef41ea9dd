"""Ports the application layer depends on; adapters live in infrastructure."""

from userhub.application.ports.notifications import ActivationNotifier
from userhub.application.ports.unit_of_work import UnitOfWork

__all__ = ["ActivationNotifier", "UnitOfWork"]
