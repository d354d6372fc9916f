import requests


BASE_URL = "https://login.example.edu/cas"
SERVICE_URL = "https://app.example.com/callback"

SUCCESS_BODY = (
    b"<cas:serviceResponse><cas:authenticationSuccess>"
    b"<cas:user>alice</cas:user>"
    b"</cas:authenticationSuccess></cas:serviceResponse>"
)

FAILURE_BODY = (
    b'<cas:serviceResponse><cas:authenticationFailure code="INVALID_TICKET">'
    b"Ticket not recognized"
    b"</cas:authenticationFailure></cas:serviceResponse>"
)


class FakeResponse:
    """Stands in for a streamed requests.Response."""

    def __init__(self, body=b"", status_code=200, chunk_error=None):
        self.body = body
        self.status_code = status_code
        self.chunk_error = chunk_error
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError("%d Server Error" % self.status_code)

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i : i + chunk_size]
        if self.chunk_error is not None:
            raise self.chunk_error

    def close(self):
        self.closed = True


