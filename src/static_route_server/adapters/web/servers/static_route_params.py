"""Options understood by the Starlette static route host."""

from pydantic import BaseModel, ConfigDict, Field


class StaticRouteParams(BaseModel):
    """Serving options for one static route. Unknown keys are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    max_age: int = Field(default=0, ge=0, description="Cache lifetime in seconds")
    cache_control: str | None = Field(
        default=None, description="Explicit Cache-Control value, overrides max_age"
    )
    follow_symlink: bool = Field(
        default=False, description="Serve files reached through symlinks leaving the directory"
    )
    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra headers added to successful responses"
    )

    def cache_control_header(self) -> str:
        """Cache-Control value for successful responses."""
        if self.cache_control:
            return self.cache_control
        return f"public, max-age={self.max_age}"
