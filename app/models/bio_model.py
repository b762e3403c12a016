# /app/models/bio_model.py

# --- Core Imports ---
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Enumerations for Generation Settings ---
class Platform(str, Enum):
    TIKTOK = "tiktok"
    INSTAGRAM = "instagram"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    ONLYFANS = "onlyfans"


class Style(str, Enum):
    FUN = "fun"
    PROFESSIONAL = "professional"
    GAMING = "gaming"
    SEXY = "sexy"
    MYSTERIOUS = "mysterious"
    CREATIVE = "creative"


class Entitlement(str, Enum):
    STANDARD = "standard"
    PREMIUM = "premium"


# --- Request Models ---
class GenerationFeatures(BaseModel):
    """Optional feature flags. Only honoured for premium callers."""
    branding: bool = False
    postIdeas: bool = False
    resume: bool = False
    realtimeScore: bool = False
    linkInBio: bool = False


class GenerationRequest(BaseModel):
    """
    Defines the data contract for POST /api/bios/generate.
    """
    name: str = Field(..., min_length=1, max_length=100)
    platform: Platform
    style: Style
    interests: str = Field(..., min_length=1, max_length=500)
    isPremium: bool = False
    features: GenerationFeatures = Field(default_factory=GenerationFeatures)

    @field_validator("name", "interests")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


# --- Result Models ---
HexColor = Annotated[str, Field(pattern=r"^#[0-9A-Fa-f]{6}$")]


def _to_score(value):
    # Models sometimes answer 85.5; scores are whole numbers.
    if isinstance(value, float):
        return round(value)
    return value


def _clamp(value: Optional[int]) -> Optional[int]:
    if value is None:
        return value
    return max(0, min(100, value))


class ScoreDetails(BaseModel):
    readability: int
    engagement: int
    uniqueness: int
    platformRelevance: int

    @field_validator("readability", "engagement", "uniqueness", "platformRelevance", mode="before")
    @classmethod
    def _round_details(cls, value):
        return _to_score(value)

    @field_validator("readability", "engagement", "uniqueness", "platformRelevance", mode="after")
    @classmethod
    def _clamp_details(cls, value: int) -> int:
        return _clamp(value)


class Branding(BaseModel):
    username: str
    slogan: str
    colors: List[HexColor] = Field(..., min_length=3, max_length=3)


class StandardGenerationResult(BaseModel):
    """
    The result shape available to every caller. Keys the model was not asked
    for (e.g. premium sections) are ignored on construction, so a standard
    result can never carry premium data.
    """
    model_config = ConfigDict(extra="ignore")

    entitlement: Literal[Entitlement.STANDARD] = Entitlement.STANDARD
    success: bool
    bio: Optional[str] = None
    score: Optional[int] = None
    scoreDetails: Optional[ScoreDetails] = None
    error: Optional[str] = None

    @field_validator("score", mode="before")
    @classmethod
    def _round_score(cls, value):
        return _to_score(value)

    @field_validator("score", mode="after")
    @classmethod
    def _clamp_score(cls, value: Optional[int]) -> Optional[int]:
        return _clamp(value)


class PremiumGenerationResult(StandardGenerationResult):
    """Adds the premium-only sections to the standard result."""
    entitlement: Literal[Entitlement.PREMIUM] = Entitlement.PREMIUM
    branding: Optional[Branding] = None
    postIdeas: Optional[List[str]] = None
    hashtags: Optional[List[str]] = None
    resume: Optional[str] = None


GenerationResult = Annotated[
    Union[StandardGenerationResult, PremiumGenerationResult],
    Field(discriminator="entitlement"),
]
