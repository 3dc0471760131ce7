"""Staff record — an assignable member of the configured roster."""

from pydantic import BaseModel, ConfigDict, Field


class Staff(BaseModel):
    """
    Staff member the operator can assign a task to.

    Loaded once from config.toml and never mutated. Identity is the Acetics
    id, not the position in the roster.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Acetics staff id")
    name: str = Field(min_length=1, description="Display name")

    def __str__(self) -> str:
        return self.name
