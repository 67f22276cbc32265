"""HTTP client for the remote reply/rewrite suggestion service.

Every call ends in exactly one of: a parsed suggestion list, or one of the
exceptions in ``replykit.clients.suggestion_api.exceptions``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar

import httpx
import orjson
from pydantic import ValidationError

from replykit.clients.suggestion_api.exceptions import (
    SuggestionApiParseError,
    SuggestionApiResponseError,
    SuggestionApiTimeoutError,
    SuggestionApiUnavailableError,
)
from replykit.clients.suggestion_api.models import (
    ErrorResponse,
    ReplyRequest,
    ReplyResponse,
    RewriteRequest,
    RewriteResponse,
)
from replykit.core.config.settings import DEFAULT_API_BASE_URL
from replykit.observability.logging import get_logger
from replykit.schemas.base import DownstreamResponse


if TYPE_CHECKING:
    from replykit.core.config import Settings
    from replykit.schemas.base import DownstreamRequest
    from replykit.schemas.enums import LanguageMode, ToneType


logger = get_logger(__name__)

R = TypeVar("R", bound=DownstreamResponse)


class SuggestionApiClient:
    """Async HTTP client for the suggestion service.

    Credentials and base URL may change at any time through ``configure``;
    they are read when each request is built, so requests already on the
    wire are unaffected.

    Example:
        ```python
        client = SuggestionApiClient(api_key="secret")
        replies = await client.get_replies("see you at 5?", tone, mode)
        await client.shutdown()
        ```
    """

    REPLY_ENDPOINT: Final[str] = "/reply"
    REWRITE_ENDPOINT: Final[str] = "/rewrite"
    DEFAULT_TIMEOUT: Final[float] = 10.0

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Bearer token; requests are sent unauthenticated when None.
            base_url: Service base URL, defaults to the public endpoint.
            timeout: Connect/read/write/pool timeout in seconds.
            http_client: Optional pre-built HTTP client (not closed by us).
        """
        self.api_key: str | None = None
        self.base_url = DEFAULT_API_BASE_URL
        self.configure(api_key, base_url)
        self.timeout = timeout
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @classmethod
    def from_settings(cls, settings: Settings) -> SuggestionApiClient:
        """Build a client from the ``suggestions`` settings section."""
        return cls(
            api_key=settings.suggestion_api_key,
            base_url=settings.suggestion_api_base_url,
            timeout=settings.suggestions.timeout,
        )

    def configure(self, api_key: str | None, base_url: str | None = None) -> None:
        """Replace credentials and base URL for subsequent requests.

        A None or blank ``base_url`` restores the default endpoint.
        """
        self.api_key = api_key or None
        if base_url and base_url.strip():
            self.base_url = base_url.strip().rstrip("/")
        else:
            self.base_url = DEFAULT_API_BASE_URL

    async def initialize(self) -> None:
        """Create the HTTP client if one was not injected."""
        if self._http_client is not None:
            return

        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )
        self._owns_http_client = True
        logger.info(
            "SuggestionApiClient initialized",
            base_url=self.base_url,
            timeout=self.timeout,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.debug("SuggestionApiClient shutdown")

    async def get_replies(
        self,
        context: str,
        tone: ToneType,
        language_mode: LanguageMode,
        count: int = 3,
    ) -> list[str]:
        """Fetch reply suggestions for ``context``.

        Raises:
            SuggestionApiUnavailableError: If the service is unreachable.
            SuggestionApiTimeoutError: If the request times out.
            SuggestionApiResponseError: If the service returns an error.
            SuggestionApiParseError: If the body is not a reply payload.
        """
        request = ReplyRequest(
            context=context,
            tone=tone.value,
            language_mode=language_mode.value,
            count=count,
        )
        content = await self._post(self.REPLY_ENDPOINT, request)
        return self._parse(content, ReplyResponse).suggestions

    async def get_rewrites(
        self,
        text: str,
        tone: ToneType,
        language_mode: LanguageMode,
        count: int = 3,
    ) -> list[str]:
        """Fetch rewrites of ``text``. Raises like ``get_replies``."""
        request = RewriteRequest(
            text=text,
            tone=tone.value,
            language_mode=language_mode.value,
            count=count,
        )
        content = await self._post(self.REWRITE_ENDPOINT, request)
        return self._parse(content, RewriteResponse).rewrites

    async def _post(self, endpoint: str, request: DownstreamRequest) -> bytes:
        """POST a request model and return the raw 2xx body."""
        if self._http_client is None:
            await self.initialize()
        assert self._http_client is not None

        url = f"{self.base_url}{endpoint}"
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            response = await self._http_client.post(
                url,
                content=orjson.dumps(request.model_dump()),
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.warning("Suggestion service request timed out", url=url)
            msg = f"Suggestion service timeout after {self.timeout}s"
            raise SuggestionApiTimeoutError(msg) from e
        except httpx.RequestError as e:
            logger.warning(
                "Failed to connect to suggestion service",
                url=url,
                error=str(e),
            )
            msg = f"Cannot connect to suggestion service: {e}"
            raise SuggestionApiUnavailableError(msg) from e
        except httpx.InvalidURL as e:
            # Not a RequestError; raised for a malformed configured base URL
            logger.warning("Invalid suggestion service URL", url=url, error=str(e))
            msg = f"Invalid suggestion service URL: {e}"
            raise SuggestionApiUnavailableError(msg) from e

        if response.is_success:
            return response.content

        self._raise_for_error(response)
        msg = f"Unexpected response: {response.status_code}"
        raise SuggestionApiResponseError(response.status_code, msg)

    @staticmethod
    def _raise_for_error(response: httpx.Response) -> None:
        """Translate a non-2xx response into SuggestionApiResponseError."""
        status_code = response.status_code
        try:
            error = ErrorResponse.model_validate(orjson.loads(response.content))
        except (orjson.JSONDecodeError, ValidationError):
            message = f"HTTP {status_code}: {response.text}"
            code = None
        else:
            message = error.error
            code = error.code

        logger.warning(
            "Suggestion service returned error",
            status_code=status_code,
            message=message,
            code=code,
        )
        raise SuggestionApiResponseError(status_code, message, code)

    @staticmethod
    def _parse(content: bytes, schema: type[R]) -> R:
        """Validate a 2xx body against ``schema``."""
        try:
            data: Any = orjson.loads(content)
            return schema.model_validate(data)
        except (orjson.JSONDecodeError, ValidationError) as e:
            logger.warning(
                "Failed to parse suggestion service response",
                schema=schema.__name__,
                error=str(e),
            )
            msg = f"Response does not match {schema.__name__}: {e}"
            raise SuggestionApiParseError(msg) from e
