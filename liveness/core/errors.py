class BindError(Exception):
    """The listening socket for a service could not be acquired."""

    def __init__(self, port, reason: str):
        self.port = port
        self.reason = reason
        super().__init__(f"cannot listen on port {port}: {reason}")
