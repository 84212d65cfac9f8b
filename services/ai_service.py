"""
RecipeGen AI Service Client
Pass-through to the Gemini generateContent API with best-effort JSON extraction
"""

from typing import Any, Dict, List, Optional
import structlog
import httpx

from core.config import Settings, get_settings
from core.exceptions import InternalError, ValidationError
from middleware.logging import log_business_event
from services.prompt_engineering import JSONExtractionError, extract_json, prompt_templates

logger = structlog.get_logger()


def empty_recipe_process() -> Dict[str, Any]:
    return {
        "ingredients": [],
        "steps": [],
        "description": "",
        "cooking_time": "",
    }


class AIServiceClient:
    """Client for the Gemini text-generation endpoint"""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = settings or get_settings()
        self.api_key = settings.GEMINI_API_KEY
        self.generate_url = settings.gemini_generate_url
        self.client = client
        self.prompts = prompt_templates

    def open(self) -> httpx.AsyncClient:
        """Create the HTTP client unless one is already open"""
        if self.client is None or self.client.is_closed:
            # Transport default timeout; no retries and no caching
            self.client = httpx.AsyncClient()
        return self.client

    async def aclose(self):
        if self.client is not None:
            await self.client.aclose()
            self.client = None

    async def _generate_text(self, prompt: str) -> Optional[str]:
        """Send one prompt and return the first candidate's text, if any"""
        if not self.api_key:
            raise InternalError("Gemini API key not set")

        try:
            response = await self.open().post(
                self.generate_url,
                params={"key": self.api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Gemini API returned error", status=e.response.status_code)
            raise InternalError("Failed to call Gemini API")
        except httpx.HTTPError as e:
            logger.error("Gemini API request failed", error=str(e), error_type=type(e).__name__)
            raise InternalError("Failed to call Gemini API")

        try:
            payload = response.json()
        except ValueError:
            logger.error("Gemini API returned a non-JSON body")
            raise InternalError("Failed to parse Gemini response")

        try:
            text = payload["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            logger.warning("Gemini response carried no candidate text")
            return None
        return text if isinstance(text, str) else None

    async def generate_recipes(self, ingredients: List[str]) -> List[Dict[str, Any]]:
        """Suggest recipes (name and short description) for a list of ingredients"""
        ingredients = [i.strip() for i in ingredients if i and i.strip()]
        if not ingredients:
            raise ValidationError("At least one ingredient is required")

        text = await self._generate_text(self.prompts.build_recipe_suggestions_prompt(ingredients))
        if text is None:
            return []

        try:
            recipes = extract_json(text, "[", "]")
        except JSONExtractionError:
            raise InternalError("Failed to parse recipe JSON")
        if not isinstance(recipes, list) or not all(isinstance(r, dict) for r in recipes):
            raise InternalError("Failed to parse recipe JSON")

        log_business_event("recipes_generated", {"ingredients": len(ingredients), "recipes": len(recipes)})
        return recipes

    async def generate_recipe_process(self, recipe_name: str) -> Dict[str, Any]:
        """Expand a recipe name into ingredients, steps, description and cooking time"""
        recipe_name = (recipe_name or "").strip()
        if not recipe_name:
            raise ValidationError("Recipe name is required")

        text = await self._generate_text(self.prompts.build_recipe_process_prompt(recipe_name))
        if text is None:
            return empty_recipe_process()

        try:
            process = extract_json(text, "{", "}")
        except JSONExtractionError:
            raise InternalError("Failed to parse recipe process JSON")
        if not isinstance(process, dict):
            raise InternalError("Failed to parse recipe process JSON")

        log_business_event("recipe_process_generated", {"recipe_name": recipe_name})
        return {**empty_recipe_process(), **process}


# Global AI service client instance
ai_service = AIServiceClient()


def get_ai_service() -> AIServiceClient:
    """Dependency for FastAPI to get the AI service client"""
    return ai_service
