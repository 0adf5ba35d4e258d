class ProxyError(Exception):
    """Error that knows which HTTP status it should be answered with."""

    def __init__(self, message: str, status: int = 500):
        super().__init__(message)
        self.message = message
        self.status = status


class ClientError(ProxyError):
    def __init__(self, message: str, status: int = 400):
        super().__init__(message, status=status)


class UpstreamError(ProxyError):
    def __init__(self, status: int, text: str):
        super().__init__(f"Supabase request failed: {status} {text}", status=status)
        self.text = text
