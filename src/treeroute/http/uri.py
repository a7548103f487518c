"""URI value — the pre-parsed request location handed to the router."""

from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit


@dataclass(frozen=True, slots=True)
class URI:
    """A parsed URI. Immutable.

    Only ``path`` and ``query`` take part in routing; the remaining
    components are kept so the value can be rendered back::

        uri = URI.parse("http://example.com/users/42?tab=posts")
        uri.path          # "/users/42"
        uri.query["tab"]  # "posts"
    """

    path: str = "/"
    query_string: str = ""
    scheme: str = ""
    authority: str = ""
    fragment: str = ""

    @classmethod
    def parse(cls, value: str) -> "URI":
        """Parse *value*, an absolute URI or a bare ``/path?query``."""
        parts = urlsplit(value)
        return cls(
            path=parts.path or "/",
            query_string=parts.query,
            scheme=parts.scheme,
            authority=parts.netloc,
            fragment=parts.fragment,
        )

    @property
    def query(self) -> dict[str, str]:
        """Query parameters, first value per key. Blank values are kept."""
        parsed = parse_qs(self.query_string, keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}

    def __str__(self) -> str:
        result = ""
        if self.scheme:
            result += f"{self.scheme}:"
        if self.authority or self.scheme:
            result += f"//{self.authority}"
        result += self.path
        if self.query_string:
            result += f"?{self.query_string}"
        if self.fragment:
            result += f"#{self.fragment}"
        return result


def as_uri(value: "URI | str") -> URI:
    """Return *value* as a ``URI``, parsing strings."""
    if isinstance(value, URI):
        return value
    return URI.parse(value)
