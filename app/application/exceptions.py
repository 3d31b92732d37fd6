class WidgetNotFoundError(LookupError):
    """Raised when no mounted widget matches the given id."""
    pass


class WidgetDisposedError(RuntimeError):
    """Raised when an event reaches a widget after teardown."""
    pass
