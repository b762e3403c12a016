# /app/services/bio_helpers/entitlement.py

"""
Premium entitlement and feature-flag policy.

Every decision about what a caller is allowed to receive lives here so that
the prompt builder, the response interpreter and the LLM client all agree.
"""

from typing import List, Optional

from ...core import config
from ...db.models.user_models import User
from ...models.bio_model import Entitlement, GenerationFeatures

# Premium output keys, in the order the prompt requests them. Each entry maps
# a feature flag to the result keys it unlocks.
PREMIUM_FEATURE_FIELDS = (
    ("branding", ("branding",)),
    ("postIdeas", ("postIdeas", "hashtags")),
    ("resume", ("resume",)),
)

BIO_MAX_LENGTH = {
    Entitlement.STANDARD: 150,
    Entitlement.PREMIUM: 250,
}

PREMIUM_FEATURES = [
    "Unlimited bios",
    "Bios up to 250 characters",
    "All styles available",
    "Advanced AI model",
    "Full branding (bio + username + slogan + colours)",
    "Post ideas + optimised hashtags",
    "Bio + LinkedIn summary / Twitter thread",
    "Bio score + real-time optimisation",
]

FREE_FEATURES = [
    "5 bios per day",
    "Bios up to 150 characters",
    "Basic styles",
    "Standard AI model",
    "Basic branding (bio only)",
    "Simple bio score",
]


def resolve_entitlement(requested_premium: bool, user: Optional[User]) -> Entitlement:
    """
    A request is served as premium only when it asks for it AND the
    authenticated caller actually holds a premium account.
    """
    if requested_premium and user is not None and user.is_premium:
        return Entitlement.PREMIUM
    return Entitlement.STANDARD


def requested_premium_fields(features: GenerationFeatures, entitlement: Entitlement) -> List[str]:
    """Returns the flag names whose premium sections the prompt should ask for."""
    if entitlement is not Entitlement.PREMIUM:
        return []
    return [flag for flag, _ in PREMIUM_FEATURE_FIELDS if getattr(features, flag)]


def model_for(entitlement: Entitlement, provider: str) -> str:
    """Selects the provider model name for the caller's tier."""
    premium = entitlement is Entitlement.PREMIUM
    if provider == "openai":
        return config.OPENAI_PREMIUM_MODEL if premium else config.OPENAI_STANDARD_MODEL
    return config.GEMINI_PREMIUM_MODEL if premium else config.GEMINI_STANDARD_MODEL


def premium_feature_list(is_premium: bool) -> List[str]:
    return list(PREMIUM_FEATURES if is_premium else FREE_FEATURES)
