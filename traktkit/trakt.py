"""Top-level Trakt API facade.

Usage:
    async with Trakt(client_id="...", client_secret="...") as trakt:
        codes = await trakt.auth.get_codes()
        print(f"Open {codes.verification_url} and enter {codes.user_code}")
        await trakt.auth.poll_device_token(codes)

        history = await trakt.sync.history.get(type="movies", limit=10)
"""

import structlog

from traktkit.api.calendars import CalendarsModule
from traktkit.api.comments import CommentsModule
from traktkit.api.lists import ListsModule
from traktkit.api.metadata import (
    CertificationsModule,
    CountriesModule,
    GenresModule,
    LanguagesModule,
    NetworksModule,
)
from traktkit.api.movies import MoviesModule
from traktkit.api.recommendations import RecommendationsModule
from traktkit.api.search import SearchModule
from traktkit.api.shows import ShowsModule
from traktkit.api.sync import SyncModule
from traktkit.api.users import UsersModule
from traktkit.auth.models import TokenState
from traktkit.auth.oauth import TraktOAuth
from traktkit.client import TraktClient

logger = structlog.get_logger(__name__)


class Trakt:
    """Trakt API client with one attribute per resource.

    All modules share a single ``TraktClient``, so a token obtained through
    ``auth`` authenticates every later call.
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        api_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        token: TokenState | None = None,
    ):
        """Initialize the facade.

        Args:
            client_id: Trakt application id. Uses settings.trakt_client_id if None.
            client_secret: Application secret, needed for OAuth.
            redirect_uri: OAuth redirect URI (default: out-of-band).
            api_url: API base URL (e.g. the staging API).
            user_agent: User-Agent header.
            timeout: Request timeout in seconds.
            token: Previously exported session to start with.

        Raises:
            TraktNotConfiguredError: No client id given or configured
        """
        self.client = TraktClient(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri,
            api_url=api_url,
            user_agent=user_agent,
            timeout=timeout,
            token=token,
        )

        self.auth = TraktOAuth(self.client)
        self.movies = MoviesModule(self.client)
        self.shows = ShowsModule(self.client)
        self.search = SearchModule(self.client)
        self.calendars = CalendarsModule(self.client)
        self.users = UsersModule(self.client)
        self.sync = SyncModule(self.client)
        self.lists = ListsModule(self.client)
        self.comments = CommentsModule(self.client)
        self.genres = GenresModule(self.client)
        self.certifications = CertificationsModule(self.client)
        self.countries = CountriesModule(self.client)
        self.languages = LanguagesModule(self.client)
        self.networks = NetworksModule(self.client)
        self.recommendations = RecommendationsModule(self.client)

    async def __aenter__(self) -> "Trakt":
        await self.client.__aenter__()
        logger.debug("trakt_session_opened", api_url=self.client.api_url)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.client.__aexit__(exc_type, exc_val, exc_tb)
