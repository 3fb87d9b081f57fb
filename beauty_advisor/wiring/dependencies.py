from functools import lru_cache
import logging

from beauty_advisor.core.config import settings
from beauty_advisor.application.exceptions import CatalogUnavailable
from beauty_advisor.application.ports.llm import LLMPort
from beauty_advisor.application.ports.storage import KeyValueStoragePort
from beauty_advisor.application.ports.web_search import WebSearchPort
from beauty_advisor.application.use_cases.chat import ChatUseCase
from beauty_advisor.application.use_cases.conversation_context import ConversationContext
from beauty_advisor.application.use_cases.product_catalog import ProductCatalog
from beauty_advisor.application.use_cases.routine import RoutineUseCase
from beauty_advisor.application.use_cases.selection_store import SelectionStore
from beauty_advisor.application.use_cases.session import AdvisorSession
from beauty_advisor.infrastructure.catalog.json_catalog import JsonFileCatalogSource
from beauty_advisor.infrastructure.llm.mock_llm import MockLLM
from beauty_advisor.infrastructure.llm.openai_llm import OpenAIChatLLM
from beauty_advisor.infrastructure.search.brave_search import BraveWebSearch
from beauty_advisor.infrastructure.search.null_search import NullWebSearch
from beauty_advisor.infrastructure.store.json_storage import JsonFileKeyValueStorage
from beauty_advisor.infrastructure.store.memory_storage import MemoryKeyValueStorage


_session: AdvisorSession | None = None


@lru_cache
def get_llm() -> LLMPort:
    if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip():
        return OpenAIChatLLM()
    return MockLLM()


@lru_cache
def get_web_search() -> WebSearchPort:
    if settings.BRAVE_API_KEY and settings.BRAVE_API_KEY.strip():
        return BraveWebSearch()
    return NullWebSearch()


@lru_cache
def get_storage() -> KeyValueStoragePort:
    if settings.STORAGE_PROVIDER.lower() == "memory":
        return MemoryKeyValueStorage()
    return JsonFileKeyValueStorage(path=settings.STORAGE_PATH)


def build_session(
    storage: KeyValueStoragePort,
    llm: LLMPort,
    web_search: WebSearchPort,
    catalog: ProductCatalog,
    history_limit: int = 10,
) -> AdvisorSession:
    selection = SelectionStore(storage)
    context = ConversationContext(history_limit=history_limit)
    return AdvisorSession(
        storage=storage,
        catalog=catalog,
        selection=selection,
        context=context,
        chat=ChatUseCase(
            llm=llm,
            web_search=web_search,
            catalog=catalog,
            selection=selection,
            context=context,
        ),
        routine=RoutineUseCase(llm=llm, selection=selection, context=context),
    )


def get_session() -> AdvisorSession:
    global _session
    if _session is None:
        _session = build_session(
            storage=get_storage(),
            llm=get_llm(),
            web_search=get_web_search(),
            catalog=ProductCatalog(JsonFileCatalogSource(path=settings.CATALOG_PATH)),
            history_limit=settings.HISTORY_LIMIT,
        )
        try:
            _session.start()
        except CatalogUnavailable as e:
            # Session stays usable; callers may retry with reload_catalog().
            logging.getLogger(__name__).error("Error loading products", extra={"error": str(e)})
    return _session


def reset_session() -> None:
    global _session
    _session = None
