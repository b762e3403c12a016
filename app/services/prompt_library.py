# /app/services/prompt_library.py

"""
This file is the central, version-controlled library for all prompts used by
the bio generator. Prompts are assembled from these fragments by
`bio_helpers.prompt_builder`; literal JSON braces are doubled because every
fragment goes through `str.format`.
"""

SYSTEM_INSTRUCTION = (
    "You are a digital marketing expert who writes social media bios. "
    "You always answer with a single valid JSON object."
)

BIO_BASE_PROMPT = """
Write a social media bio that matches the following criteria:
- Name/Handle: {name}
- Platform: {platform}
- Style: {style}
- Interests: {interests}

**--- RULES ---**

1.  The bio must be original, engaging and optimised for {platform}.
2.  Keep the bio under {max_length} characters and include relevant emojis.
3.  Score the bio you wrote. Every score is an integer between 0 and 100.
"""

PREMIUM_SECTION_HEADER = """
4.  As the user is premium, the JSON object must ALSO contain these extra keys: {premium_keys}.
"""

JSON_STRUCTURE_HEADER = """
**--- REQUIRED JSON STRUCTURE ---**

"""

BASE_FIELDS_FRAGMENT = """  "bio": "The generated bio text",
  "score": 85,
  "scoreDetails": {{
    "readability": 80,
    "engagement": 85,
    "uniqueness": 75,
    "platformRelevance": 90
  }}"""

BRANDING_FIELDS_FRAGMENT = """  "branding": {{
    "username": "A username suggestion based on {name} and {interests}",
    "slogan": "A catchy slogan about {interests} in a {style} tone",
    "colors": ["#RRGGBB", "#RRGGBB", "#RRGGBB"]
  }}"""

POST_IDEAS_FIELDS_FRAGMENT = """  "postIdeas": ["Post idea 1", "Post idea 2", "Post idea 3", "Post idea 4"],
  "hashtags": ["#hashtag1", "#hashtag2", "#hashtag3", "#hashtag4", "#hashtag5"]"""

RESUME_FIELDS_FRAGMENT = """  "resume": "A professional summary for {name} based on {interests}, adapted for {platform}\""""

JSON_ONLY_FOOTER = """

**--- CRITICAL FORMATTING ---**

Answer ONLY with the requested JSON object, without any other explanation or commentary. Do not wrap it in markdown backticks.
"""
