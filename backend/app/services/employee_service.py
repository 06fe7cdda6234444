"""Random-user API employee service (read-only, no caching)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from app.core.config import Settings
from app.core.exceptions import UpstreamError
from app.models.employee import Address, Employee, RandomUserResponse, RandomUserResult

logger = logging.getLogger(__name__)


def resolve_postal_code(value: Any) -> str:
    """Normalize an upstream postcode to a string.

    randomuser.me returns numbers for some nationalities and strings for others.
    Strings pass through, numbers are stringified, anything else becomes "".
    """
    if isinstance(value, str):
        return value
    # bool is an int subclass but a JSON true/false is not a postcode
    if isinstance(value, bool):
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return ""


def transform_employee(result: RandomUserResult) -> Employee:
    location = result.location
    return Employee(
        id=result.login.uuid,
        first_name=result.name.first,
        last_name=result.name.last,
        email=result.email,
        phone=result.phone,
        picture_url=result.picture.large,
        address=Address(
            street=f"{location.street.number} {location.street.name}",
            city=location.city,
            state=location.state,
            country=location.country,
            postal_code=resolve_postal_code(location.postcode),
        ),
    )


class EmployeeService:
    def __init__(self) -> None:
        self.initialized = False
        self.api_url = ""
        self.results_count = 0
        self.seed = ""
        self.timeout_seconds = 0.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.RANDOM_USER_API_URL:
            logger.warning("Random-user API URL missing - EmployeeService not initialized")
            return

        self.api_url = settings.RANDOM_USER_API_URL
        self.results_count = settings.RANDOM_USER_RESULTS_COUNT
        self.seed = settings.RANDOM_USER_SEED.strip()
        self.timeout_seconds = settings.RANDOM_USER_TIMEOUT_SECONDS
        self.initialized = True
        logger.info(
            "EmployeeService initialized (url=%s, results=%d, seeded=%s)",
            self.api_url,
            self.results_count,
            bool(self.seed),
        )

    async def close(self) -> None:
        self.initialized = False
        self.api_url = ""
        self.results_count = 0
        self.seed = ""
        self.timeout_seconds = 0.0

    def _query_params(self) -> dict[str, str]:
        params = {"results": str(self.results_count)}
        if self.seed:
            params["seed"] = self.seed
        return params

    async def fetch_employees(self) -> list[Employee]:
        """Fetch one batch from the upstream API and map it to employees.

        Every call re-fetches; without a seed each call returns a different dataset.
        """
        if not self.initialized:
            raise UpstreamError("EmployeeService not initialized")

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.api_url, params=self._query_params()) as response:
                    if response.status != 200:
                        error_text = await response.text(errors="replace")
                        raise UpstreamError(f"Random-user API returned {response.status}: {error_text[:200]}")
                    data = await response.json(content_type=None)
        except UpstreamError:
            raise
        # ValueError covers undecodable bytes as well as invalid JSON
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise UpstreamError(f"Random-user API request failed: {e}") from e

        try:
            payload = RandomUserResponse.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(f"Malformed random-user payload: {e}") from e

        if not payload.results:
            logger.warning("No results returned from random-user API")
            return []

        employees = [transform_employee(result) for result in payload.results]
        logger.info("Fetched %d employees from random-user API", len(employees))
        return employees

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False

        try:
            timeout = aiohttp.ClientTimeout(total=10)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.api_url, params={"results": "1"}) as response:
                    return response.status == 200
        except Exception:
            logger.exception("EmployeeService connection check failed")
            return False


employee_service = EmployeeService()
