# /app/services/openai_service.py

from typing import Optional

from openai import AsyncOpenAI


class OpenAIService:
    """Async chat-completions wrapper, mirroring GeminiService's interface."""

    name = "openai"

    def __init__(self, api_key: str, system_instruction: Optional[str] = None):
        if not api_key:
            raise ValueError("FATAL ERROR: OPENAI_API_KEY environment variable is not set.")
        # Timeouts and retries are owned by LLMClient.
        self.client = AsyncOpenAI(api_key=api_key, max_retries=0)
        self.system_instruction = system_instruction

    async def generate_text(self, prompt: str, model_name: str, temperature: float = 0.8) -> str:
        messages = []
        if self.system_instruction:
            messages.append({"role": "system", "content": self.system_instruction})
        messages.append({"role": "user", "content": prompt})

        response = await self.client.chat.completions.create(
            model=model_name,
            messages=messages,
            temperature=temperature,
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ValueError("AI model returned an empty response.")
        return content.strip()
