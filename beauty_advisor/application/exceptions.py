class CatalogUnavailable(RuntimeError):
    """Raised when the product catalog cannot be read or parsed."""
    pass


class PersistenceError(RuntimeError):
    """Raised by storage adapters when a read or write fails."""
    pass


class RemoteServiceError(RuntimeError):
    """Base for failures of the chat-completion or web-search services."""
    pass


class LLMUpstreamError(RemoteServiceError):
    """Raised when LLM provider fails (timeouts, network errors, service unavailable)."""
    pass


class LLMContractError(RemoteServiceError):
    """Raised when LLM adapter violates contract (bad format or missing data)."""
    pass


class SearchUpstreamError(RemoteServiceError):
    """Raised when the web search provider fails or answers with a non-success status."""
    pass


class ChatInProgress(RuntimeError):
    """Raised when a chat message is submitted while another one is still outstanding."""
    pass
