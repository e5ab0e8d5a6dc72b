"""Strava API client."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import datetime
from urllib.parse import urlencode

import httpx

from ...config import get_settings
from ...errors import NotConnectedError
from ..base import ActivitySummary, BaseApiClient, OAuthTokens
from .parsers import parse_activity, parse_tokens

logger = logging.getLogger(__name__)

# Refresh this long before the token actually expires
REFRESH_MARGIN_SECONDS = 300

AUTHORIZE_URL = "https://www.strava.com/oauth/authorize"


def authorization_url(client_id: str, redirect_uri: str = "http://localhost/exchange_token") -> str:
    """URL the athlete opens to grant read access to their activities."""
    params = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "approval_prompt": "auto",
        "scope": "read,activity:read_all",
    }
    return f"{AUTHORIZE_URL}?{urlencode(params)}"


class StravaClient(BaseApiClient):
    """Client for the Strava v3 REST API.

    Tokens are refreshed transparently when they are about to expire;
    `on_token_refresh` is awaited with the new tokens so they can be stored.
    """

    source_name = "strava"

    def __init__(
        self,
        tokens: OAuthTokens | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        on_token_refresh: Callable[[OAuthTokens], Awaitable[None]] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        settings = get_settings()
        super().__init__(settings.strava_api_base, http_client=http_client)
        self.tokens = tokens
        self.client_id = client_id or settings.strava_client_id
        self.client_secret = client_secret or settings.strava_client_secret
        self.token_url = settings.strava_token_url
        self.on_token_refresh = on_token_refresh

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.tokens.access_token}"}

    def require_client_credentials(self) -> None:
        if not self.client_id or not self.client_secret:
            raise NotConnectedError(
                "Strava client id/secret not configured "
                "(set COACH_STRAVA_CLIENT_ID and COACH_STRAVA_CLIENT_SECRET)"
            )

    async def exchange_code(self, code: str) -> OAuthTokens:
        """Trade an authorization code for tokens."""
        self.require_client_credentials()
        response = await self._send(
            "POST",
            self.token_url,
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
                "grant_type": "authorization_code",
            },
        )
        self.tokens = parse_tokens(response.json())
        logger.info("Connected Strava athlete %s", self.tokens.athlete_id)
        return self.tokens

    async def ensure_fresh_token(self) -> OAuthTokens:
        """Refresh the access token if it expires within five minutes."""
        if self.tokens is None:
            raise NotConnectedError("Strava is not connected")
        if not self.tokens.expires_within(REFRESH_MARGIN_SECONDS):
            return self.tokens

        self.require_client_credentials()
        response = await self._send(
            "POST",
            self.token_url,
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "grant_type": "refresh_token",
                "refresh_token": self.tokens.refresh_token,
            },
        )
        self.tokens = parse_tokens(response.json(), athlete_id=self.tokens.athlete_id)
        logger.info("Refreshed Strava token (expires at %s)", self.tokens.expires_at)

        if self.on_token_refresh is not None:
            await self.on_token_refresh(self.tokens)
        return self.tokens

    async def _get(self, path: str, params: dict | None = None):
        await self.ensure_fresh_token()
        return await super()._get(path, params=params)

    async def get_activities(
        self,
        page: int = 1,
        per_page: int = 30,
        after: datetime | None = None,
    ) -> list[ActivitySummary]:
        """One page of the athlete's activities, newest first."""
        params = {"page": page, "per_page": per_page}
        if after is not None:
            params["after"] = int(after.timestamp())
        data = await self._get("/athlete/activities", params=params)
        return [parse_activity(item) for item in data]

    async def get_activity(self, activity_id: str) -> ActivitySummary:
        data = await self._get(f"/activities/{activity_id}")
        return parse_activity(data)

    async def get_athlete_stats(self, athlete_id: str | None = None) -> dict:
        """Raw totals (recent, year-to-date, all-time) for the athlete."""
        await self.ensure_fresh_token()
        athlete_id = athlete_id or self.tokens.athlete_id
        if not athlete_id:
            athlete = await self._get("/athlete")
            athlete_id = str(athlete["id"])
        return await self._get(f"/athletes/{athlete_id}/stats")

    async def iter_activities(
        self,
        max_pages: int = 10,
        per_page: int = 100,
        after: datetime | None = None,
    ) -> AsyncIterator[ActivitySummary]:
        """Walk pages until an empty one (or `max_pages`)."""
        for page in range(1, max_pages + 1):
            activities = await self.get_activities(page=page, per_page=per_page, after=after)
            if not activities:
                return
            logger.debug("Fetched %d Strava activities from page %d", len(activities), page)
            for activity in activities:
                yield activity
