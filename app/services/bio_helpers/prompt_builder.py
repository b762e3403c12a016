# /app/services/bio_helpers/prompt_builder.py

from ...models.bio_model import Entitlement, GenerationRequest
from .. import prompt_library
from .entitlement import BIO_MAX_LENGTH, requested_premium_fields

_PREMIUM_FRAGMENTS = {
    "branding": prompt_library.BRANDING_FIELDS_FRAGMENT,
    "postIdeas": prompt_library.POST_IDEAS_FIELDS_FRAGMENT,
    "resume": prompt_library.RESUME_FIELDS_FRAGMENT,
}

_PREMIUM_KEY_NAMES = {
    "branding": "branding",
    "postIdeas": "postIdeas, hashtags",
    "resume": "resume",
}


def build_prompt(request: GenerationRequest, entitlement: Entitlement) -> str:
    """
    Assembles the full instruction for the LLM. The output is a pure function
    of the request and the entitlement.
    """
    values = {
        "name": request.name,
        "platform": request.platform.value,
        "style": request.style.value,
        "interests": request.interests,
    }
    premium_flags = requested_premium_fields(request.features, entitlement)

    parts = [
        prompt_library.BIO_BASE_PROMPT.format(
            max_length=BIO_MAX_LENGTH[entitlement], **values
        )
    ]
    if premium_flags:
        premium_keys = ", ".join(_PREMIUM_KEY_NAMES[flag] for flag in premium_flags)
        parts.append(prompt_library.PREMIUM_SECTION_HEADER.format(premium_keys=premium_keys))

    fields = [prompt_library.BASE_FIELDS_FRAGMENT.format()]
    fields.extend(_PREMIUM_FRAGMENTS[flag].format(**values) for flag in premium_flags)

    parts.append(prompt_library.JSON_STRUCTURE_HEADER)
    parts.append("{\n" + ",\n".join(fields) + "\n}")
    parts.append(prompt_library.JSON_ONLY_FOOTER)
    return "".join(parts)
