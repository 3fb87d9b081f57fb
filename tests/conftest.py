from __future__ import annotations

import pytest

from beauty_advisor.application.exceptions import (
    CatalogUnavailable,
    LLMUpstreamError,
    PersistenceError,
    SearchUpstreamError,
)
from beauty_advisor.application.ports.catalog_source import CatalogSourcePort
from beauty_advisor.application.ports.llm import LLMPort
from beauty_advisor.application.ports.web_search import WebSearchPort
from beauty_advisor.application.use_cases.product_catalog import ProductCatalog
from beauty_advisor.domain.entities.product import Product
from beauty_advisor.domain.entities.search_result import SearchResult
from beauty_advisor.domain.entities.turn import Turn
from beauty_advisor.infrastructure.store.memory_storage import MemoryKeyValueStorage
from beauty_advisor.wiring.dependencies import build_session


class CountingStorage(MemoryKeyValueStorage):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        super().set(key, value)


class BrokenStorage(MemoryKeyValueStorage):
    """Every read and write fails, like a browser with storage disabled."""

    def get(self, key: str) -> str | None:
        raise PersistenceError("storage unavailable")

    def set(self, key: str, value: str) -> None:
        raise PersistenceError("quota exceeded")


class StaticCatalogSource(CatalogSourcePort):
    def __init__(self, products: list[Product]) -> None:
        self.products = list(products)
        self.fail = False

    def load(self) -> list[Product]:
        if self.fail:
            raise CatalogUnavailable("products.json missing")
        return list(self.products)


class ScriptedLLM(LLMPort):
    def __init__(self, replies: list[str] | None = None, routine: str = "Morning: cleanse.") -> None:
        self.replies = list(replies or [])
        self.routine = routine
        self.fail = False
        self.calls: list[tuple[str, list[Turn]]] = []
        self.routine_calls: list[list[Product]] = []

    def generate_reply(self, session_context: str, history: list[Turn]) -> str:
        self.calls.append((session_context, list(history)))
        if self.fail:
            raise LLMUpstreamError("HTTP error! status: 500")
        if self.replies:
            return self.replies.pop(0)
        return f"reply {len(self.calls)}"

    def generate_routine(self, products: list[Product]) -> str:
        self.routine_calls.append(list(products))
        if self.fail:
            raise LLMUpstreamError("HTTP error! status: 503")
        return self.routine


class RecordingSearch(WebSearchPort):
    def __init__(self, results: list[SearchResult] | None = None, fail: bool = False) -> None:
        self.results = list(results or [])
        self.fail = fail
        self.queries: list[str] = []

    def search(self, query: str) -> list[SearchResult]:
        self.queries.append(query)
        if self.fail:
            raise SearchUpstreamError("search down")
        return list(self.results)


PRODUCTS = [
    Product(id=1, name="Foaming Facial Cleanser", brand="CeraVe", category="cleanser",
            description="Gel cleanser with ceramides", image="cleanser.jpg"),
    Product(id=2, name="Moisturizing Cream", brand="CeraVe", category="moisturizer",
            description="Rich cream for dry skin", image="cream.jpg"),
    Product(id=3, name="Sky High Mascara", brand="Maybelline", category="makeup",
            description="Lengthening mascara", image="mascara.jpg"),
    Product(id=4, name="Revitalift Serum", brand="L'Oréal Paris", category="skincare",
            description="Hyaluronic acid serum", image="serum.jpg"),
    Product(id=5, name="Fructis Conditioner", brand="Garnier", category="haircare",
            description="Smoothing conditioner", image="conditioner.jpg"),
    Product(id=6, name="Ultra Facial Cream", brand="Kiehl's", category="moisturizer",
            description="Daily moisturizer", image="ultra.jpg"),
]


@pytest.fixture
def products() -> list[Product]:
    return list(PRODUCTS)


@pytest.fixture
def storage() -> CountingStorage:
    return CountingStorage()


@pytest.fixture
def broken_storage() -> BrokenStorage:
    return BrokenStorage()


@pytest.fixture
def catalog_source(products) -> StaticCatalogSource:
    return StaticCatalogSource(products)


@pytest.fixture
def catalog(catalog_source) -> ProductCatalog:
    catalog = ProductCatalog(catalog_source)
    catalog.load()
    return catalog


@pytest.fixture
def llm() -> ScriptedLLM:
    return ScriptedLLM()


@pytest.fixture
def web_search() -> RecordingSearch:
    return RecordingSearch(
        results=[SearchResult(title="CeraVe price", url="https://cerave.com/p", snippet="$15.99")]
    )


@pytest.fixture
def session(storage, llm, web_search, catalog_source):
    return build_session(
        storage=storage,
        llm=llm,
        web_search=web_search,
        catalog=ProductCatalog(catalog_source),
    )
