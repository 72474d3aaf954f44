class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or record does not exist."""


class NotificationError(Exception):
    """Base exception for outbound message failures."""


class ConfigurationError(NotificationError):
    """Raised when the notification channel has no credential configured."""


class DeliveryError(NotificationError):
    """Raised when the upstream chat service rejects a message."""
