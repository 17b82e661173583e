"""Exception hierarchy for token issuance failures."""


class TokenIssueError(Exception):
    """Base class for every failure raised while issuing a token."""


class ResourceNotFound(TokenIssueError):
    """A named key or claims resource does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Failed to find resource: {name}")
        self.name = name


class DecodeError(TokenIssueError):
    """PEM, base64 or PKCS#8 content could not be decoded into a key."""


class ParseError(TokenIssueError):
    """The base claims document is not a well-formed JSON object."""


class ClaimsError(TokenIssueError):
    """The claim set cannot be serialized into a valid JWT payload."""


class SigningError(TokenIssueError):
    """The key cannot produce an RS256 signature."""
