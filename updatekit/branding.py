"""Centralized branding constants — app and distribution names."""


class AppBranding:
    """Application identity constants."""

    APP_NAME = "UpdateKit"
    DISTRIBUTION = "updatekit"      # Looked up for the installed version
