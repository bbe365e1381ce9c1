# -*- coding: utf-8 -*-
"""
LocaleForge Exceptions Module
Custom exception classes for structured error handling across the application.
"""


class LocaleForgeError(Exception):
    """
    Base exception class for all LocaleForge-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Model Exceptions
# =============================================================================

class ModelError(LocaleForgeError):
    """Base exception for localized asset model errors."""
    pass


class InvariantViolation(ModelError):
    """Raised when a mutation would break the locale collection invariants."""

    def __init__(self, message: str, asset_id: str = None, operation: str = None):
        super().__init__(message, details={'asset_id': asset_id, 'operation': operation})
        self.asset_id = asset_id
        self.operation = operation


class NotFoundError(ModelError):
    """Raised when a referenced asset or locale item no longer exists."""

    def __init__(self, message: str, asset_id: str = None):
        super().__init__(message, details={'asset_id': asset_id})
        self.asset_id = asset_id


# =============================================================================
# Translation Exceptions
# =============================================================================

class TranslationFailure(LocaleForgeError):
    """
    A single target-language translation request failed.

    Reported per item and never raised across a batch; carried on the
    engine's item_failed signal instead.
    """

    def __init__(self, message: str, asset_id: str = None, source_lang: str = None,
                 target_lang: str = None):
        super().__init__(message, details={
            'asset_id': asset_id,
            'source_lang': source_lang,
            'target_lang': target_lang,
        })
        self.asset_id = asset_id
        self.source_lang = source_lang
        self.target_lang = target_lang


# =============================================================================
# Persistence Exceptions
# =============================================================================

class PersistenceFailure(LocaleForgeError):
    """Raised when the asset store rejects a change."""

    def __init__(self, message: str, asset_id: str = None, file_path: str = None):
        super().__init__(message, details={'asset_id': asset_id, 'file_path': file_path})
        self.asset_id = asset_id
        self.file_path = file_path


# =============================================================================
# Settings Exceptions
# =============================================================================

class SettingsError(LocaleForgeError):
    """Base exception for settings-related errors."""
    pass


class SettingsLoadError(SettingsError):
    """Raised when loading settings fails."""
    pass
