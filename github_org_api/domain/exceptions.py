class GitHubApiException(Exception):
    """Base exception for all errors raised while talking to GitHub."""
    pass

class NetworkError(GitHubApiException):
    """Raised when no response could be obtained from GitHub (connection, DNS, timeout)."""
    pass

class RemoteStatusError(GitHubApiException):
    """Raised when GitHub answers with a client or server error status."""
    def __init__(self, status_code: int, url: str = "", message: str = "GitHub responded with an error status."):
        self.status_code = status_code
        self.url = url
        super().__init__(f"{message} Status: {status_code}")

class ParseError(GitHubApiException):
    """Raised when a GitHub response body does not have the expected shape."""
    pass
