"""
RecipeGen Prompt Engineering
Prompt templates for Gemini and extraction of the JSON embedded in its replies
"""

import json
from typing import Any, List
import structlog

logger = structlog.get_logger()


class PromptTemplates:
    """Natural-language prompts that ask Gemini for JSON answers"""

    RECIPE_SUGGESTIONS = """
What are the names of recipes that can be made using some or all of these ingredients? Given the following list of ingredients: {ingredients}, provide the recipe names and a short description (approximately 1-2 sentences) for each.  Return the results in JSON format, using the structure shown in the example below:

[
  {{
    "recipe_name": "Recipe Name 1",
    "description": "Description of Recipe 1, including key characteristics, flavor profile, and main ingredients."
  }},
  {{
    "recipe_name": "Recipe Name 2",
    "description": "Description of Recipe 2, including key characteristics, flavor profile, and main ingredients."
  }}
]"""

    RECIPE_PROCESS = """Provide the detailed recipe for {recipe_name}. Include the following sections:

**Ingredients:** (A bulleted list of all necessary ingredients with quantities)

**Steps:** (A numbered list of sequential instructions for preparing the recipe)

**Description:** (Description of Recipe 1, including key characteristics, flavor profile, and main ingredients.)

**Cooking Time:** (The estimated total time required to prepare and cook the recipe, e.g., "30 minutes", "1 hour 15 minutes")

Return the response in JSON format with the following structure:
{{
  "ingredients": ["ingredient 1", "ingredient 2", ...],
  "steps": ["step 1", "step 2", ...],
  "description": "Description of Recipe 1, including key characteristics, flavor profile, and main ingredients.",
  "cooking_time": "total cooking time"
}}"""

    def build_recipe_suggestions_prompt(self, ingredients: List[str]) -> str:
        return self.RECIPE_SUGGESTIONS.format(ingredients=", ".join(ingredients))

    def build_recipe_process_prompt(self, recipe_name: str) -> str:
        return self.RECIPE_PROCESS.format(recipe_name=recipe_name)


class JSONExtractionError(ValueError):
    """Raised when free text holds no parseable JSON of the expected kind"""


def extract_json(text: str, opening: str, closing: str) -> Any:
    """
    Parse the JSON value spanning from the first `opening` bracket to the last
    `closing` bracket in free-form model output.

    Model replies often wrap the JSON in prose or Markdown fences, so anything
    outside that span is ignored.
    """
    start = text.find(opening)
    end = text.rfind(closing)
    if start == -1 or end == -1 or end < start:
        raise JSONExtractionError(f"No JSON {opening}{closing} span found in model output")

    try:
        return json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        logger.warning("Model output is not valid JSON", error=str(e))
        raise JSONExtractionError(str(e)) from e


prompt_templates = PromptTemplates()
