"""Domain models."""

from pydantic import BaseModel, ConfigDict


class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class User(BaseModel):
    """A user record as served by the remote endpoint.

    Only the fields the dashboard displays are declared; anything else in
    the payload is ignored. Records are frozen once parsed.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    username: str
    email: str
    company: Company

    @property
    def initial(self) -> str:
        """First letter of the name, used as the card avatar."""
        return self.name[:1]

    @property
    def is_active(self) -> bool:
        return self.id % 2 == 0

    def matches(self, query: str) -> bool:
        """Return True if name or email contains the query (case-insensitive)."""
        q = query.lower()
        return q in self.name.lower() or q in self.email.lower()
