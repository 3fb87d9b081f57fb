import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from beauty_advisor.api.v1.schemas import (
    CategoryListSchema,
    ChatRequestSchema,
    ChatResponseSchema,
    ClearResponseSchema,
    HistorySchema,
    ProductListSchema,
    ProductSchema,
    RoutineResponseSchema,
    SelectionSchema,
    ThemeSchema,
    ToggleResponseSchema,
    TurnSchema,
)
from beauty_advisor.application.exceptions import CatalogUnavailable, ChatInProgress
from beauty_advisor.application.use_cases.session import AdvisorSession
from beauty_advisor.wiring.dependencies import get_session

router = APIRouter()
logger = logging.getLogger(__name__)

CATALOG_ERROR = "Error loading products. Please refresh the page."


def _products(items) -> list[ProductSchema]:
    return [ProductSchema.from_entity(p) for p in items]


@router.get("/products", response_model=ProductListSchema)
def list_products(
    category: str | None = Query(None),
    q: str = Query(""),
    session: AdvisorSession = Depends(get_session),
):
    filtered = session.catalog.filter(category=category, search_term=q)
    return ProductListSchema(products=_products(filtered), total=len(session.catalog.products))


@router.get("/products/categories", response_model=CategoryListSchema)
def list_categories(session: AdvisorSession = Depends(get_session)):
    return CategoryListSchema(categories=session.catalog.categories())


@router.post("/products/reload", response_model=ProductListSchema)
def reload_products(session: AdvisorSession = Depends(get_session)):
    try:
        products = session.reload_catalog()
    except CatalogUnavailable as e:
        logger.error("Catalog reload failed", extra={"error": str(e)})
        raise HTTPException(status_code=503, detail=CATALOG_ERROR)
    return ProductListSchema(products=_products(products), total=len(products))


@router.get("/selection", response_model=SelectionSchema)
def get_selection(session: AdvisorSession = Depends(get_session)):
    return SelectionSchema(products=_products(session.selection.products))


@router.post("/selection/{product_id}/toggle", response_model=ToggleResponseSchema)
def toggle_selection(product_id: int, session: AdvisorSession = Depends(get_session)):
    selected = session.toggle_product(product_id)
    if selected is None:
        raise HTTPException(status_code=404, detail=f"Unknown product id {product_id}")
    return ToggleResponseSchema(
        product_id=product_id,
        selected=selected,
        selection=_products(session.selection.products),
    )


@router.delete("/selection", response_model=ClearResponseSchema)
def clear_selection(session: AdvisorSession = Depends(get_session)):
    message = session.clear_selection()
    return ClearResponseSchema(message=message)


@router.post("/chat", response_model=ChatResponseSchema)
def chat(req: ChatRequestSchema, session: AdvisorSession = Depends(get_session)):
    try:
        reply = session.chat.ask(req.message)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ChatInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))

    return ChatResponseSchema(
        reply=reply.text,
        products=_products(reply.products),
        used_web_search=reply.used_web_search,
        failed=reply.failed,
    )


@router.post("/routine", response_model=RoutineResponseSchema)
def routine(session: AdvisorSession = Depends(get_session)):
    result = session.routine.generate()
    return RoutineResponseSchema(routine=result.text, generated=result.generated, failed=result.failed)


@router.get("/history", response_model=HistorySchema)
def history(session: AdvisorSession = Depends(get_session)):
    return HistorySchema(
        turns=[TurnSchema(role=t.role, content=t.content) for t in session.context.history],
        generated_routine=session.context.generated_routine,
    )


@router.get("/theme", response_model=ThemeSchema)
def get_theme(session: AdvisorSession = Depends(get_session)):
    return ThemeSchema(theme=session.theme())


@router.post("/theme/toggle", response_model=ThemeSchema)
def toggle_theme(session: AdvisorSession = Depends(get_session)):
    return ThemeSchema(theme=session.toggle_theme())
