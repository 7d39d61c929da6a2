class ServiceError(Exception):
    """Base of the errors this package raises on purpose; renders as "[emoji E<code>] message"."""
    http_status: int = 500
    emoji: str = "⚠️"

    message: str
    error_code: int

    def __init__(self, message: str, error_code: int, emoji: str | None = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        if emoji:
            self.emoji = emoji

    def __str__(self) -> str:
        rendered = f"[{self.emoji} E{self.error_code}] {self.message}"
        if self.__cause__:
            rendered += f" # Caused by: {self.__cause__}"
        return rendered


class UnsupportedOperationError(ServiceError):
    """Raised for operations a type refuses by design, e.g. decoding a write-only payload."""
    http_status = 501
    emoji = "🚫"
