from fastapi import APIRouter

from api.v1.endpoints import comment, interaction, personal_list, recipe, user

api_router = APIRouter()

api_router.include_router(user.router, prefix="/auth", tags=["auth"])
api_router.include_router(recipe.router, prefix="/recipes", tags=["recipes"])
api_router.include_router(interaction.router, prefix="/recipes", tags=["interactions"])
api_router.include_router(comment.recipe_router, prefix="/recipes", tags=["comments"])
api_router.include_router(comment.router, prefix="/comments", tags=["comments"])
api_router.include_router(personal_list.router, prefix="/lists", tags=["lists"])
