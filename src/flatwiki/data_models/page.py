from pydantic import BaseModel, ConfigDict


class Page(BaseModel):
    """A single wiki page: its title and the raw bytes stored for it."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: bytes = b""  # empty = page does not exist yet

    @property
    def exists(self) -> bool:
        return len(self.body) > 0

    @property
    def text(self) -> str:
        """Body decoded for display; undecodable bytes become U+FFFD."""
        return self.body.decode("utf-8", errors="replace")
