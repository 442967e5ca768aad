# app/errors.py


class SettingsError(ValueError):
    """Raised when a settings dict or settings file cannot be used."""
