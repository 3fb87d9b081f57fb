from __future__ import annotations

import logging

from beauty_advisor.application.exceptions import PersistenceError
from beauty_advisor.application.ports.storage import KeyValueStoragePort
from beauty_advisor.application.use_cases.chat import ChatUseCase
from beauty_advisor.application.use_cases.conversation_context import ConversationContext
from beauty_advisor.application.use_cases.product_catalog import ProductCatalog
from beauty_advisor.application.use_cases.routine import RoutineUseCase
from beauty_advisor.application.use_cases.selection_store import SelectionStore
from beauty_advisor.domain.entities.product import Product

WELCOME_MESSAGE = (
    "Hi! I'm your L'Oréal beauty advisor. Browse the products above and I'll help you "
    "build the perfect routine when you're ready! ✨"
)
CLEARED_MESSAGE = "All product selections have been cleared!"

THEME_KEY = "theme"
LIGHT = "light"
DARK = "dark"


class AdvisorSession:
    """
    Process-wide session state: catalog, selection, conversation and the
    chat/routine flows that read them.

    Construction leaves everything empty; `start()` restores the persisted
    selection, posts the welcome turn, then loads the catalog and prunes the
    selection against it.
    """

    def __init__(
        self,
        storage: KeyValueStoragePort,
        catalog: ProductCatalog,
        selection: SelectionStore,
        context: ConversationContext,
        chat: ChatUseCase,
        routine: RoutineUseCase,
    ) -> None:
        self.storage = storage
        self.catalog = catalog
        self.selection = selection
        self.context = context
        self.chat = chat
        self.routine = routine
        self._started = False
        self._theme: str | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        """
        Raises CatalogUnavailable if the catalog cannot be loaded. The session is
        started either way; the caller retries with reload_catalog().
        """
        if self._started:
            return
        self._started = True
        self.selection.restore()
        self.context.append_assistant_turn(WELCOME_MESSAGE)
        self.reload_catalog()

    def reload_catalog(self) -> list[Product]:
        products = self.catalog.load()
        self.selection.reconcile(products)
        return products

    def toggle_product(self, product_id: int) -> bool | None:
        """Toggle a catalog product by id. Returns None when the id is unknown."""
        product = self.catalog.find(product_id)
        if product is None:
            return None
        return self.selection.toggle(product)

    def clear_selection(self) -> str:
        self.selection.clear()
        return CLEARED_MESSAGE

    def theme(self) -> str:
        if self._theme is not None:
            return self._theme
        try:
            value = self.storage.get(THEME_KEY)
        except PersistenceError as e:
            self._logger.error("Error loading theme", extra={"error": str(e)})
            value = None
        self._theme = value if value in (LIGHT, DARK) else LIGHT
        return self._theme

    def toggle_theme(self) -> str:
        new_theme = LIGHT if self.theme() == DARK else DARK
        self._theme = new_theme
        try:
            self.storage.set(THEME_KEY, new_theme)
        except PersistenceError as e:
            self._logger.error("Error saving theme", extra={"error": str(e)})
        return new_theme
