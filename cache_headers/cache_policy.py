"""
Cache-Control policy

Maps a response status code to the Cache-Control value the middleware sets
when no handler has chosen one. Pure functions only - no request/response
objects and no I/O here, so the policy can be used and tested on its own.
"""

from dataclasses import dataclass
from typing import Optional

# Seconds a successful response may be cached when nothing else is configured
DEFAULT_MAX_AGE = 3600

# Redirects can change, so caches must revalidate them
REDIRECT_CACHE_CONTROL = "no-cache"

# Errors and unknown statuses are never cached
NO_STORE = "no-store"


def build_cache_control(
    *,
    public: bool = False,
    private: bool = False,
    no_cache: bool = False,
    no_store: bool = False,
    must_revalidate: bool = False,
    max_age: Optional[int] = None,
) -> str:
    """
    Render a Cache-Control directive list in a stable order.

    Usage:
        build_cache_control(public=True, max_age=60)  # "public, max-age=60"

    Raises:
        ValueError: if max_age is negative
    """
    directives = []
    if public:
        directives.append("public")
    if private:
        directives.append("private")
    if no_cache:
        directives.append("no-cache")
    if no_store:
        directives.append("no-store")
    if must_revalidate:
        directives.append("must-revalidate")
    if max_age is not None:
        if max_age < 0:
            raise ValueError(f"max_age must be >= 0, got {max_age}")
        directives.append(f"max-age={max_age}")
    return ", ".join(directives)


@dataclass(frozen=True)
class CacheControlConfig:
    """
    Immutable middleware configuration.

    Either the built-in status based policy (``CacheControlConfig.default()``)
    or a fixed literal sent on every response
    (``CacheControlConfig.override("private, max-age=60")``).
    """

    override_value: Optional[str] = None
    max_age: int = DEFAULT_MAX_AGE
    mirror_request: bool = False

    def __post_init__(self) -> None:
        if self.max_age < 0:
            raise ValueError(f"max_age must be >= 0, got {self.max_age}")
        # An override ignores the status policy, so its knobs must stay unset
        if self.override_value is not None and (
            self.max_age != DEFAULT_MAX_AGE or self.mirror_request
        ):
            raise ValueError(
                "override_value cannot be combined with max_age or mirror_request"
            )

    @classmethod
    def default(
        cls, max_age: int = DEFAULT_MAX_AGE, mirror_request: bool = False
    ) -> "CacheControlConfig":
        return cls(max_age=max_age, mirror_request=mirror_request)

    @classmethod
    def override(cls, value: str) -> "CacheControlConfig":
        return cls(override_value=value)

    @property
    def is_override(self) -> bool:
        return self.override_value is not None


DEFAULT_CONFIG = CacheControlConfig.default()


def _private_directive(directive: str) -> str:
    """Drop `public` from a directive list and make sure it starts with `private`."""
    parts = [part.strip() for part in directive.split(",")]
    kept = [
        part for part in parts
        if part and part.lower() not in ("public", "private")
    ]
    return ", ".join(["private"] + kept)


def resolve_cache_control(
    status_code: int,
    config: Optional[CacheControlConfig] = None,
    request_directive: Optional[str] = None,
) -> str:
    """
    Return the Cache-Control value for a response status.

    Args:
        status_code: HTTP status of the outgoing response
        config: Policy to apply, defaults to DEFAULT_CONFIG
        request_directive: Cache-Control header of the incoming request. Only
            consulted when config.mirror_request is enabled.

    Returns:
        The header value. Defined for every integer, never raises.
    """
    if config is None:
        config = DEFAULT_CONFIG

    if config.override_value is not None:
        return config.override_value

    status_class = status_code // 100

    if status_class in (2, 3) and config.mirror_request and request_directive:
        directive = request_directive.strip()
        if directive:
            if status_class == 3:
                return _private_directive(directive)
            return directive

    if status_class == 2:
        return build_cache_control(public=True, max_age=config.max_age)
    if status_class == 3:
        return REDIRECT_CACHE_CONTROL
    # 4xx, 5xx and anything outside the known classes
    return NO_STORE
