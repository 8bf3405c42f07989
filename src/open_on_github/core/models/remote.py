"""Remote and file reference models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RemoteDescriptor(BaseModel):
    """Host, owner and repository name derived from a remote URL."""

    model_config = ConfigDict(frozen=True)

    host: str
    owner: str
    repo: str


class LineRange(BaseModel):
    """Inclusive, 1-based line range."""

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(ge=1)
    end_line: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_order(self) -> "LineRange":
        if self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) must not be before start_line ({self.start_line})"
            )
        return self

    @property
    def is_single_line(self) -> bool:
        return self.start_line == self.end_line


class FileReference(BaseModel):
    """A file inside a repository, pinned to a ref.

    repo_relative_path may use either separator; it is normalized and
    encoded when the URL is built.
    """

    model_config = ConfigDict(frozen=True)

    repo_relative_path: str
    ref: str
    line_range: LineRange | None = None
