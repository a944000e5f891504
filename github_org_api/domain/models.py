from pydantic import BaseModel, Field, ConfigDict

class RawRepository(BaseModel):
    """
    Repository record as returned by GitHub's REST "list organization repositories" endpoint.
    Only the fields the API reshapes are kept; anything else GitHub sends is ignored.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., description="Name of the repository")
    stargazers_count: int = Field(..., ge=0, description="Total number of stargazers")
    updated_at: str = Field(..., description="ISO-8601 timestamp of the last update")
    html_url: str = Field(..., description="Canonical URL of the repository")


class Repository(BaseModel):
    """
    Immutable, API-facing shape of a repository.
    Serialized with the keys name, stars, updatedAt and url.
    """
    # Enforces immutability: once created, fields cannot be modified.
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Name of the repository")
    stars: int = Field(..., ge=0, description="Total number of stargazers")
    updated_at: str = Field(..., alias="updatedAt", description="ISO-8601 timestamp of the last update")
    url: str = Field(..., description="Canonical URL of the repository")


class StarSum(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    org: str
    total_stars: int = Field(..., alias="totalStars", ge=0)
