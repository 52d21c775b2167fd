class InfoError(Exception):
    """Base class for errors raised by Info_app."""


class SubscriberClosed(InfoError):
    """A notification was offered to a subscriber that has already been closed."""
