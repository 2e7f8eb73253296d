from __future__ import annotations


class FluentDialogsError(Exception):
    """Base exception class for all fluent-dialogs errors.

    Presentation failures are normally delivered as values through
    ``PresentationResult``; exceptions in this hierarchy are reserved for
    configuration problems, host misuse, and callers that explicitly ask for
    a failure to be raised.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            settings = load_settings()
        except FluentDialogsError as e:
            click.echo(f"Error: {e.message}", err=True)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the FluentDialogsError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
