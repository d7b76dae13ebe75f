"""Common constants."""

# Application statuses
APPLICATION_STATUS_PENDING = "pending"
