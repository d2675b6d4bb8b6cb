class QueryDecodeError(ValueError):
    """A percent-encoded fragment did not decode to valid text."""

    def __init__(self, fragment: str, reason: str):
        self.fragment = fragment
        super().__init__(f"cannot decode {fragment!r}: {reason}")
