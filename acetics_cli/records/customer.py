"""Customer record — optional Task reference, not prompted for by the CLI."""

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Acetics customer id")
    first_name: str = ""
    last_name: str = ""
    is_prospect: bool = Field(default=False, description="Prospect rather than client")

    @property
    def display_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
