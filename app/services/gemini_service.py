# /app/services/gemini_service.py

from typing import Optional

import google.generativeai as genai
from google.generativeai.types import GenerationConfig


class GeminiService:
    """
    Thin async wrapper around the Gemini SDK. Constructed once at startup;
    `genai.configure` sets the API key for the whole process.
    """

    name = "gemini"

    def __init__(self, api_key: str, system_instruction: Optional[str] = None):
        if not api_key:
            raise ValueError("FATAL ERROR: GOOGLE_API_KEY environment variable is not set.")
        genai.configure(api_key=api_key)
        self.system_instruction = system_instruction

    async def generate_text(self, prompt: str, model_name: str, temperature: float = 0.8) -> str:
        """The workhorse for text-only, non-streaming tasks."""
        model = genai.GenerativeModel(model_name, system_instruction=self.system_instruction)
        config = GenerationConfig(temperature=temperature)
        response = await model.generate_content_async(prompt, generation_config=config)
        if not response.parts:
            raise ValueError("AI model returned an empty response.")
        return response.text
