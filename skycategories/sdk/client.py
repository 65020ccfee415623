"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Sky Categories, a product of Garudex Labs

SDK client for the categories microservice.

Wraps the service's REST endpoints: creating and reading categories, and
linking categories to projects and skills. Each operation is one HTTP round
trip with a single expected status code; anything else is an error.
"""

import json
import time
from typing import Any, Callable, Dict, List, Optional, TypeVar
from uuid import UUID

import requests

from skycategories.config.settings import DEFAULT_TIMEOUT, ClientConfig
from skycategories.exceptions import (
    RequestBuildError,
    RequestEncodingError,
    ResponseDecodeError,
    SDKConfigurationError,
    SDKError,
    TransportError,
    UnexpectedStatusError,
)
from skycategories.logging_config import get_logger, log_http_request
from skycategories.sdk.models import (
    AssociateCategoryWithProjectRequest,
    AssociateCategoryWithSkillRequest,
    Category,
    CreateCategoryRequest,
    DisassociateCategoryFromSkillRequest,
    GetCategoriesForSkillRequest,
    GetCategoriesForSkillResponse,
    GetSkillIDsForCategoryRequest,
    GetSkillIDsForCategoryResponse,
    parse_category_list,
    parse_uuid_list,
)

logger = get_logger(__name__)

T = TypeVar("T")

# Errors raised by requests when the URL itself is unusable
_URL_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
)


class CategoriesClient:
    """
    SDK client for the categories microservice.

    Provides methods for:
    - Creating and fetching categories
    - Associating categories with projects and skills
    - Querying categories by project or skill, and the reverse

    The client keeps no per-call state and may be shared between threads.
    Failures are never retried; every error is raised with its cause chained.

    Example:
        >>> with CategoriesClient("http://localhost:8080", token="Bearer abc", api_key="key") as client:
        ...     category = client.create_category(CreateCategoryRequest(name="Sales"))
        ...     client.associate_category_with_project(category.id, project_id)
    """

    def __init__(
        self,
        base_url: str,
        token: str = "",
        api_key: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the categories client.

        Args:
            base_url: Root URL of the categories service (e.g., "http://localhost:8080")
            token: Default Authorization header value, used when a call does not pass one
            api_key: Value sent as the X-API-Key header on every call
            session: Optional requests session to send through (proxies, adapters, mocks).
                A session passed in is not closed by ``close()``.
            timeout: Request timeout in seconds (default: 10)

        Raises:
            SDKConfigurationError: If configuration is invalid
        """
        if not base_url:
            raise SDKConfigurationError("base_url is required")
        if timeout is None or timeout <= 0:
            raise SDKConfigurationError(f"timeout must be positive, got {timeout}")

        self.base_url = base_url.rstrip('/')
        self.token = token
        self.api_key = api_key
        self.timeout = timeout

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

        logger.debug(f"Categories client initialized for {self.base_url}")

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        session: Optional[requests.Session] = None,
    ) -> "CategoriesClient":
        """Build a client from a ClientConfig."""
        return cls(
            base_url=config.base_url,
            token=config.token,
            api_key=config.api_key,
            session=session,
            timeout=config.timeout,
        )

    def close(self) -> None:
        """
        Close the HTTP session if the client created it.

        Should be called when the client is no longer needed.
        """
        if self._owns_session and self.session is not None:
            self.session.close()
            logger.debug("Closed categories client session")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _make_request(
        self,
        method: str,
        endpoint: str,
        expected_status: int,
        auth_token: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """
        Send one request and check its status code.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: API endpoint path
            expected_status: The only status code treated as success
            auth_token: Authorization header value; falls back to the client token
            data: Request body; when given it is sent as JSON

        Returns:
            The response, with its body unread

        Raises:
            RequestEncodingError: If the body cannot be serialized
            RequestBuildError: If the request cannot be constructed
            TransportError: If the request cannot be delivered
            UnexpectedStatusError: If the status differs from expected_status
        """
        url = f"{self.base_url}{endpoint}"

        headers = {
            "Authorization": self.token if auth_token is None else auth_token,
            "X-API-Key": self.api_key,
        }

        body = None
        if data is not None:
            try:
                body = json.dumps(data)
            except (TypeError, ValueError) as e:
                logger.error(f"Failed to encode request body for {method} {url}: {e}")
                raise RequestEncodingError(f"failed to encode request body: {e}") from e
            headers["Content-Type"] = "application/json"

        try:
            prepared = self.session.prepare_request(
                requests.Request(method=method, url=url, headers=headers, data=body)
            )
            settings = self.session.merge_environment_settings(
                prepared.url, {}, None, None, None
            )
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Failed to build request {method} {url}: {e}")
            raise RequestBuildError(f"failed to create request: {e}") from e

        logger.debug(f"Making {method} request to {url}")
        start = time.monotonic()

        try:
            response = self.session.send(prepared, timeout=self.timeout, **settings)
        except _URL_ERRORS as e:
            logger.error(f"Failed to build request {method} {url}: {e}")
            raise RequestBuildError(f"failed to create request: {e}") from e
        except requests.exceptions.Timeout as e:
            log_http_request(logger, method, url, None, _elapsed_ms(start), reason="timeout")
            raise TransportError(f"request timed out after {self.timeout}s: {e}") from e
        except requests.exceptions.RequestException as e:
            log_http_request(logger, method, url, None, _elapsed_ms(start), reason=str(e))
            raise TransportError(f"failed to send request: {e}") from e

        log_http_request(logger, method, url, response.status_code, _elapsed_ms(start))

        if response.status_code != expected_status:
            try:
                text = response.text
            finally:
                response.close()
            logger.error(
                f"Request failed: {method} {url} - "
                f"Status {response.status_code} (expected {expected_status})"
            )
            raise UnexpectedStatusError(
                status_code=response.status_code,
                expected_status=expected_status,
                method=method,
                url=url,
                body=text,
            )

        return response

    @staticmethod
    def _decode(response: requests.Response, parse: Callable[[Any], T]) -> T:
        """
        Decode a JSON response body with ``parse``.

        Raises:
            ResponseDecodeError: If the body is not JSON or has the wrong shape
        """
        try:
            try:
                payload = response.json()
            except ValueError as e:
                raise ResponseDecodeError(f"failed to decode response body: {e}") from e

            try:
                return parse(payload)
            except (KeyError, TypeError, ValueError) as e:
                raise ResponseDecodeError(
                    f"failed to decode response body: unexpected shape: {e!r}"
                ) from e
        finally:
            response.close()

    # -- Categories -----------------------------------------------------------

    def create_category(
        self,
        request: CreateCategoryRequest,
        auth_token: Optional[str] = None,
    ) -> Category:
        """
        Create a new category.

        Sends a POST request to /api/categories and expects 201 Created.

        Args:
            request: Category to create
            auth_token: Authorization header value for this call

        Returns:
            The category as stored by the service

        Raises:
            SDKError: If the request fails at any stage
        """
        logger.info(f"Creating category: name={request.name!r}")

        try:
            response = self._make_request(
                method="POST",
                endpoint="/api/categories",
                expected_status=201,
                auth_token=auth_token,
                data=request.to_dict(),
            )
            category = self._decode(response, Category.from_dict)
        except SDKError as e:
            logger.error(f"Failed to create category {request.name!r}: {e}")
            raise

        logger.info(f"Successfully created category: {category.id}")
        return category

    def get_category(
        self,
        category_id: UUID,
        auth_token: Optional[str] = None,
    ) -> Category:
        """
        Retrieve a category by ID.

        Sends a GET request to /api/categories/{category_id} and expects 200 OK.
        """
        response = self._make_request(
            method="GET",
            endpoint=f"/api/categories/{category_id}",
            expected_status=200,
            auth_token=auth_token,
        )
        return self._decode(response, Category.from_dict)

    # -- Projects -------------------------------------------------------------

    def associate_category_with_project(
        self,
        category_id: UUID,
        project_id: UUID,
        auth_token: Optional[str] = None,
    ) -> None:
        """
        Associate a category with a project.

        Sends a POST request to /api/projects/categories/associate and
        expects 201 Created. The response body is ignored.
        """
        logger.info(f"Associating category {category_id} with project {project_id}")

        body = AssociateCategoryWithProjectRequest(
            category_id=category_id,
            project_id=project_id,
        )

        try:
            response = self._make_request(
                method="POST",
                endpoint="/api/projects/categories/associate",
                expected_status=201,
                auth_token=auth_token,
                data=body.to_dict(),
            )
        except SDKError as e:
            logger.error(
                f"Failed to associate category {category_id} with project {project_id}: {e}"
            )
            raise
        response.close()

    def disassociate_category_from_project(
        self,
        category_id: UUID,
        project_id: UUID,
        auth_token: Optional[str] = None,
    ) -> None:
        """
        Remove the association between a category and a project.

        Sends a POST request to /api/projects/categories/disassociate and
        expects 204 No Content.
        """
        logger.info(f"Disassociating category {category_id} from project {project_id}")

        body = AssociateCategoryWithProjectRequest(
            category_id=category_id,
            project_id=project_id,
        )

        try:
            response = self._make_request(
                method="POST",
                endpoint="/api/projects/categories/disassociate",
                expected_status=204,
                auth_token=auth_token,
                data=body.to_dict(),
            )
        except SDKError as e:
            logger.error(
                f"Failed to disassociate category {category_id} from project {project_id}: {e}"
            )
            raise
        response.close()

    def get_categories_for_project(
        self,
        project_id: UUID,
        auth_token: Optional[str] = None,
    ) -> List[Category]:
        """Get the categories associated with a project."""
        response = self._make_request(
            method="GET",
            endpoint=f"/api/projects/{project_id}/categories",
            expected_status=200,
            auth_token=auth_token,
        )
        categories = self._decode(response, parse_category_list)
        logger.debug(f"Project {project_id} has {len(categories)} categories")
        return categories

    def get_project_ids_for_category(
        self,
        category_id: UUID,
        auth_token: Optional[str] = None,
    ) -> List[UUID]:
        """Get the IDs of the projects a category is associated with."""
        response = self._make_request(
            method="GET",
            endpoint=f"/api/categories/{category_id}/projects",
            expected_status=200,
            auth_token=auth_token,
        )
        return self._decode(response, parse_uuid_list)

    # -- Skills ---------------------------------------------------------------

    def associate_category_with_skill(
        self,
        request: AssociateCategoryWithSkillRequest,
        auth_token: Optional[str] = None,
    ) -> None:
        """
        Associate a category with a skill.

        Sends a POST request to /api/categories/skills/association and
        expects 201 Created.
        """
        logger.info(
            f"Associating category {request.category_id} with skill {request.skill_id}"
        )

        try:
            response = self._make_request(
                method="POST",
                endpoint="/api/categories/skills/association",
                expected_status=201,
                auth_token=auth_token,
                data=request.to_dict(),
            )
        except SDKError as e:
            logger.error(
                f"Failed to associate category {request.category_id} "
                f"with skill {request.skill_id}: {e}"
            )
            raise
        response.close()

    def disassociate_category_from_skill(
        self,
        request: DisassociateCategoryFromSkillRequest,
        auth_token: Optional[str] = None,
    ) -> None:
        """
        Remove the association between a category and a skill.

        Sends a DELETE request with a JSON body to
        /api/categories/skills/disassociation and expects 204 No Content.
        """
        logger.info(
            f"Disassociating category {request.category_id} from skill {request.skill_id}"
        )

        try:
            response = self._make_request(
                method="DELETE",
                endpoint="/api/categories/skills/disassociation",
                expected_status=204,
                auth_token=auth_token,
                data=request.to_dict(),
            )
        except SDKError as e:
            logger.error(
                f"Failed to disassociate category {request.category_id} "
                f"from skill {request.skill_id}: {e}"
            )
            raise
        response.close()

    def get_categories_for_skill(
        self,
        request: GetCategoriesForSkillRequest,
        auth_token: Optional[str] = None,
    ) -> GetCategoriesForSkillResponse:
        """
        Get the categories associated with a skill.

        The skill ID travels in the path; the response is an object with a
        ``categories`` array.
        """
        response = self._make_request(
            method="GET",
            endpoint=f"/api/skills/{request.skill_id}/categories",
            expected_status=200,
            auth_token=auth_token,
        )
        return self._decode(response, GetCategoriesForSkillResponse.from_dict)

    def get_skill_ids_for_category(
        self,
        request: GetSkillIDsForCategoryRequest,
        auth_token: Optional[str] = None,
    ) -> GetSkillIDsForCategoryResponse:
        """
        Get the IDs of the skills a category is associated with.

        The category ID travels in the path; the response is an object with a
        ``skill_ids`` array.
        """
        response = self._make_request(
            method="GET",
            endpoint=f"/api/categories/{request.category_id}/skills",
            expected_status=200,
            auth_token=auth_token,
        )
        return self._decode(response, GetSkillIDsForCategoryResponse.from_dict)


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 2)
