from enum import Enum
from pydantic import BaseModel, Field

from beauty_advisor.domain.entities.product import Product


class Role(str, Enum):
    user = "user"
    assistant = "assistant"


class Theme(str, Enum):
    light = "light"
    dark = "dark"


class ProductSchema(BaseModel):
    id: int
    name: str
    brand: str
    category: str
    description: str = ""
    image: str = ""

    @classmethod
    def from_entity(cls, product: Product) -> "ProductSchema":
        return cls(
            id=product.id,
            name=product.name,
            brand=product.brand,
            category=product.category,
            description=product.description,
            image=product.image,
        )


class ProductListSchema(BaseModel):
    products: list[ProductSchema]
    total: int


class CategoryListSchema(BaseModel):
    categories: list[str]


class SelectionSchema(BaseModel):
    products: list[ProductSchema] = Field(default_factory=list)


class ToggleResponseSchema(BaseModel):
    product_id: int
    selected: bool
    selection: list[ProductSchema]


class ClearResponseSchema(BaseModel):
    message: str
    selection: list[ProductSchema] = Field(default_factory=list)


class ChatRequestSchema(BaseModel):
    message: str = Field(min_length=1)


class ChatResponseSchema(BaseModel):
    reply: str
    products: list[ProductSchema] = Field(default_factory=list)
    used_web_search: bool = False
    failed: bool = False


class RoutineResponseSchema(BaseModel):
    routine: str
    generated: bool
    failed: bool = False


class TurnSchema(BaseModel):
    role: Role
    content: str


class HistorySchema(BaseModel):
    turns: list[TurnSchema]
    generated_routine: str | None = None


class ThemeSchema(BaseModel):
    theme: Theme
