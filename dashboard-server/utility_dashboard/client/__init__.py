"""Python client mirroring the browser dashboard."""

from .api import DashboardApiClient
from .dashboard import AccountCard, Dashboard
from .exceptions import AccountListError, DashboardClientError, PaymentRequestError
from .notifications import Notification, ToastCenter
from .overlay import CardPreview, OverlayState, PaymentOverlay

__all__ = [
    "AccountCard",
    "AccountListError",
    "CardPreview",
    "Dashboard",
    "DashboardApiClient",
    "DashboardClientError",
    "Notification",
    "OverlayState",
    "PaymentOverlay",
    "PaymentRequestError",
    "ToastCenter",
]
