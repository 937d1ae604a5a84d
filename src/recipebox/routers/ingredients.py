"""API routes for parsing and categorizing ingredient lines."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from recipebox.logging_config import get_logger
from recipebox.normalize.categories import categorize, categorize_ingredient
from recipebox.normalize.parsing import parse_ingredient
from recipebox.schemas import ParsedIngredientResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


class ParseRequest(BaseModel):
    """Ingredient lines to parse."""

    lines: list[str] = Field(description="Raw ingredient lines, e.g. '2 cups flour'")


class ParseResponse(BaseModel):
    """Parsed ingredient lines, in request order."""

    ingredients: list[ParsedIngredientResponse]
    total: int


class CategorizeRequest(BaseModel):
    """Ingredient names to assign to departments."""

    names: list[str]


class CategorizedName(BaseModel):
    name: str
    category: str


class CategorizeResponse(BaseModel):
    categories: list[CategorizedName]


@router.post("/parse", response_model=ParseResponse)
async def parse_lines(request: ParseRequest) -> ParseResponse:
    """Split each line into amount, unit and name."""
    parsed = []
    for line in request.lines:
        ingredient = parse_ingredient(line)
        parsed.append(
            ParsedIngredientResponse(
                original=ingredient.original,
                amount=ingredient.amount,
                unit=ingredient.unit,
                name=ingredient.name,
                category=categorize_ingredient(ingredient.unit, ingredient.name),
            )
        )

    logger.debug(f"Parsed {len(parsed)} ingredient lines")
    return ParseResponse(ingredients=parsed, total=len(parsed))


@router.post("/categorize", response_model=CategorizeResponse)
async def categorize_names(request: CategorizeRequest) -> CategorizeResponse:
    """Assign each name to a shopping department."""
    return CategorizeResponse(
        categories=[CategorizedName(name=name, category=categorize(name)) for name in request.names]
    )
