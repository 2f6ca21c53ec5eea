from enum import Enum


class Dashboard(Enum):
    """Which dashboard a message is rendered for (selects the l10n section)."""
    CLIENT = "client"
    AGENT = "agent"
    ADMIN = "admin"
    COMMON = "common"
