import logging

from fastapi import APIRouter, Depends, Response
from openai import APIStatusError

from app.config import AI_IMAGE_MODEL, AI_TEXT_MODEL, get_ai_client
from app.dependencies.auth import verify_token
from app.exceptions import GatewayError, MissingOutputError, error_from_status
from app.models.dish.healthy_dish_models import HealthyDishRequest, HealthyDishResponse
from app.models.error_models import ErrorResponse
from app.utils.gateway import complete, extract_image_url, extract_text

router = APIRouter()


def build_image_prompt(dish_description: str) -> str:
    return f"""Create a beautiful, appetizing image of a healthy, oil-free version of this Indian dish: {dish_description}.
    The dish should look delicious and authentic, but prepared using healthy cooking methods with minimal oil.
    Show the dish plated attractively with vibrant colors and fresh ingredients."""


def build_recipe_prompt(dish_description: str) -> str:
    return f"""Create a detailed, healthy oil-free recipe for this Indian dish: {dish_description}.
    Include:
    - List of ingredients with quantities
    - Step-by-step cooking instructions
    - Cooking time and servings
    - Tips for making it healthier without oil
    Keep it authentic to Indian cuisine but focus on healthy cooking methods."""


@router.options("/generate-healthy-dish", include_in_schema=False)
async def generate_healthy_dish_preflight():
    return Response(status_code=200)


@router.post("/generate-healthy-dish", tags=["Dish"], response_model=HealthyDishResponse,
             dependencies=[Depends(verify_token)],
             responses={402: {"model": ErrorResponse}, 429: {"model": ErrorResponse},
                        500: {"model": ErrorResponse}})
def generate_healthy_dish(request: HealthyDishRequest):
    """
    Generates an image of a healthier, oil-free version of the dish, then a matching recipe.
    The image is required; the recipe is best-effort and comes back as null if its generation fails.
    """
    try:
        with get_ai_client() as client:
            # Image first: nothing is returned without it.
            try:
                image_response = complete(client, AI_IMAGE_MODEL, build_image_prompt(request.dishDescription),
                                          modalities=["image", "text"])
            except APIStatusError as e:
                logging.error(f"AI gateway error: {e.status_code} {e.response.text}")
                raise error_from_status(e.status_code)

            image_url = extract_image_url(image_response)
            if not image_url:
                raise MissingOutputError("No image generated")

            # Recipe text only needs the description, not the generated image.
            try:
                recipe_response = complete(client, AI_TEXT_MODEL, build_recipe_prompt(request.dishDescription))
            except APIStatusError as e:
                logging.error(f"Failed to generate recipe: {e.status_code} {e.response.text}")
                return HealthyDishResponse(imageUrl=image_url, recipe=None)

            return HealthyDishResponse(imageUrl=image_url, recipe=extract_text(recipe_response))

    except GatewayError:
        raise
    except Exception as e:
        logging.error(f"Generate healthy dish error: {e}", exc_info=True)
        raise GatewayError(str(e))
