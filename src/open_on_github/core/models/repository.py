"""Models reported by the Git integration."""

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """A Git working tree."""

    model_config = ConfigDict(frozen=True)

    root: str


class Remote(BaseModel):
    """A named remote of a repository."""

    model_config = ConfigDict(frozen=True)

    name: str
    fetch_url: str | None = None


class Head(BaseModel):
    """State of HEAD: branch name when on a branch, commit when one exists."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    commit: str | None = None

    @property
    def is_detached(self) -> bool:
        return self.name is None and self.commit is not None
