"""Path template compilation.

A template such as ``/users/:id?tab=:tab`` compiles into a matcher over
request paths and an extractor that maps a concrete URI to parameter
values.
"""

import re
from dataclasses import dataclass
from urllib.parse import unquote

from treeroute.http.uri import URI, as_uri

PARAM_PREFIX = ":"

# One non-empty path segment
SEGMENT_PATTERN = r"[^/]+"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a path template.

    Static:  ``/users``  (is_param=False)
    Param:   ``/:id``    (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class QueryBinding:
    """A query string key bound to a parameter: ``?tab=:tab``."""

    key: str
    param_name: str


@dataclass(frozen=True, slots=True)
class ParsedTemplate:
    segments: tuple[PathSegment, ...]
    query: tuple[QueryBinding, ...]


def _is_param(text: str) -> bool:
    return text.startswith(PARAM_PREFIX) and len(text) > len(PARAM_PREFIX)


def remove_end_slash(template: str) -> str:
    """Strip trailing slashes from the path part of *template*.

    The root template ``/`` is left alone, as is anything after ``?``
    or ``#``::

        "/users/"        -> "/users"
        "/users/?id=:id" -> "/users?id=:id"
        "/"              -> "/"
    """
    match = re.search(r"[?#]", template)
    cut = match.start() if match else len(template)
    path, tail = template[:cut], template[cut:]
    if len(path) > 1 and path.endswith("/"):
        path = path.rstrip("/") or "/"
    return path + tail


def parse_template(template: str) -> ParsedTemplate:
    """Parse a path template into segments and query bindings.

    Examples::

        "/users"            -> segments [PathSegment("users")]
        "/users/:id"        -> [PathSegment("users"), PathSegment(":id", True, "id")]
        "/search?q=:term"   -> query [QueryBinding("q", "term")]

    Query values that do not start with ``:`` are literals and bind
    nothing. Duplicate or dangling parameter names are not checked.
    """
    path, _, query = template.partition("?")
    query = query.partition("#")[0]

    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if _is_param(part):
            segments.append(
                PathSegment(value=part, is_param=True, param_name=part[len(PARAM_PREFIX) :])
            )
        else:
            segments.append(PathSegment(value=part))

    bindings: list[QueryBinding] = []
    for pair in query.split("&"):
        key, _, value = pair.partition("=")
        if key and _is_param(value):
            bindings.append(QueryBinding(key=key, param_name=value[len(PARAM_PREFIX) :]))

    return ParsedTemplate(segments=tuple(segments), query=tuple(bindings))


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Matcher and extractor for one path template.

    Matching looks at path segments only: the segment count must be equal
    and every static segment must be identical. Query bindings are used
    by ``extract`` alone.
    """

    template: str
    expression: re.Pattern[str]
    path_params: tuple[str, ...]
    query: tuple[QueryBinding, ...]

    def test(self, path: str) -> bool:
        """Return True if *path* matches the template's path segments."""
        return self.expression.fullmatch(path) is not None

    def extract(self, uri: URI | str) -> dict[str, str]:
        """Map every declared parameter to its value in *uri*.

        Positional values are percent-decoded. Query parameters missing
        from the URI are omitted. When the URI's path does not match the
        template, only query parameters are returned.
        """
        location = as_uri(uri)
        params: dict[str, str] = {}

        match = self.expression.fullmatch(location.path)
        if match is not None:
            for name, value in zip(self.path_params, match.groups(), strict=True):
                params[name] = unquote(value)

        if self.query:
            query = location.query
            for binding in self.query:
                value = query.get(binding.key)
                if value is not None:
                    params[binding.param_name] = value

        return params


def compile_pattern(template: str) -> CompiledPattern:
    """Compile *template* into a ``CompiledPattern``.

    A pure function of the template string; compiling the same template
    twice gives equivalent, independent patterns.
    """
    parsed = parse_template(template)

    source = ""
    for segment in parsed.segments:
        if segment.is_param:
            source += f"/({SEGMENT_PATTERN})"
        else:
            source += "/" + re.escape(segment.value)
    # A single trailing slash on the candidate is insignificant
    source = f"{source}/?" if source else "/?"

    return CompiledPattern(
        template=template,
        expression=re.compile(source),
        path_params=tuple(s.param_name for s in parsed.segments if s.param_name),
        query=parsed.query,
    )
