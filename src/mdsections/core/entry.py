"""HeaderEntry model for extracted markdown sections."""

from pydantic import BaseModel, Field


class HeaderEntry(BaseModel):
    """Body text captured under a top-level markdown header."""

    description: str = Field(
        default="", description="Trimmed body text following the header"
    )

    def __repr__(self) -> str:
        preview = self.description[:60] + "..." if len(self.description) > 60 else self.description
        return f"HeaderEntry(description={preview!r})"


# Header text -> entry, in first-insertion order
SectionMap = dict[str, HeaderEntry]
