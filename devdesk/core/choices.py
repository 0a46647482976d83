"""Shared ticket status and category constants."""

STATUS_OPEN = "Open"
STATUS_IN_PROGRESS = "In Progress"
STATUS_CLOSED = "Closed"

STATUS_CHOICES = (
    STATUS_OPEN,
    STATUS_IN_PROGRESS,
    STATUS_CLOSED,
)

# Offered by the client; the server accepts any non-empty category on create.
CATEGORY_CHOICES = (
    "Network",
    "Hardware",
    "Access",
    "Software",
)


__all__ = [
    "CATEGORY_CHOICES",
    "STATUS_CHOICES",
    "STATUS_CLOSED",
    "STATUS_IN_PROGRESS",
    "STATUS_OPEN",
]
