"""Pterodactyl application API client

Creates panel users and servers once a purchase is paid.
"""

import logging
import random
import string
from typing import Any, Dict, Optional
import httpx
from pydantic import ValidationError
from src.app.services.provisioning_service import (
    ProvisioningService,
    ProvisioningError,
    ProvisioningResult,
)
from src.domain.product import resources_for

logger = logging.getLogger(__name__)

SERVER_ENVIRONMENT = {
    "INST": "npm",
    "USER_UPLOAD": "0",
    "AUTO_UPDATE": "0",
    "CMD_RUN": "npm start",
}
FEATURE_LIMITS = {"databases": 5, "backups": 5, "allocations": 5}


def generate_password(username: str, digits: int = 3) -> str:
    """Username followed by random digits, e.g. budi482"""
    return username + "".join(random.choices(string.digits, k=digits))


class PterodactylProvisioningService(ProvisioningService):
    """
    Provisioning through the Pterodactyl application API

    A response carrying an `errors` array is a failure; the first error's
    detail becomes the ProvisioningError message.
    """

    def __init__(
        self,
        domain: str,
        application_key: str,
        location_id: int = 1,
        nest_id: int = 1,
        egg_id: int = 15,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.domain = domain.rstrip("/")
        self.application_key = application_key
        self.location_id = int(location_id)
        self.nest_id = int(nest_id)
        self.egg_id = int(egg_id)
        self.timeout = timeout
        self.transport = transport

    async def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {self.application_key}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                base_url=self.domain, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.request(method, path, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise ProvisioningError(f"Panel request {method} {path} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ProvisioningError(f"Panel returned a non-JSON response (HTTP {response.status_code})") from e

        if isinstance(payload, dict) and payload.get("errors"):
            first = payload["errors"][0]
            detail = first.get("detail") if isinstance(first, dict) else str(first)
            raise ProvisioningError(detail or "Panel rejected the request")

        if response.status_code >= 400 or not isinstance(payload, dict):
            raise ProvisioningError(f"Panel request {method} {path} failed with HTTP {response.status_code}")

        return payload

    @staticmethod
    def _attributes(payload: Dict[str, Any], what: str) -> Dict[str, Any]:
        attributes = payload.get("attributes")
        if not isinstance(attributes, dict):
            raise ProvisioningError(f"Panel response for {what} has no attributes")
        return attributes

    async def _create_user(self, username: str, email: str, password: str, root_admin: bool = False) -> Dict[str, Any]:
        payload = await self._request(
            "POST",
            "/api/application/users",
            {
                "username": username,
                "email": email,
                "first_name": username,
                "last_name": "User",
                "password": password,
                "root_admin": root_admin,
            },
        )
        logger.info(f"Panel user created: {username} (root_admin={root_admin})")
        return self._attributes(payload, f"user {username}")

    async def create_admin_panel(self, username: str) -> ProvisioningResult:
        email = f"{username}@admin.com"
        password = generate_password(username)
        user = await self._create_user(username, email, password, root_admin=True)
        return self._result(user=user, password=password, email=email)

    async def create_server(self, username: str, product_type: str) -> ProvisioningResult:
        resources = resources_for(product_type)
        email = f"{username}@panel.com"
        password = generate_password(username)

        user = await self._create_user(username, email, password)

        egg = await self._request("GET", f"/api/application/nests/{self.nest_id}/eggs/{self.egg_id}")
        egg_attributes = self._attributes(egg, f"egg {self.egg_id}")

        server = await self._request(
            "POST",
            "/api/application/servers",
            {
                "name": f"{username}-server",
                "user": user.get("id"),
                "egg": self.egg_id,
                "docker_image": egg_attributes.get("docker_image"),
                "startup": egg_attributes.get("startup"),
                "environment": SERVER_ENVIRONMENT,
                "limits": {
                    "memory": resources.ram,
                    "swap": 0,
                    "disk": resources.disk,
                    "io": 500,
                    "cpu": 100,
                },
                "feature_limits": FEATURE_LIMITS,
                "deploy": {
                    "locations": [self.location_id],
                    "dedicated_ip": False,
                    "port_range": [],
                },
            },
        )
        logger.info(f"Server {username}-server created for {product_type}")
        return self._result(
            user=user,
            server=self._attributes(server, f"server {username}-server"),
            password=password,
            email=email,
        )

    @staticmethod
    def _result(**fields) -> ProvisioningResult:
        try:
            return ProvisioningResult(**fields)
        except ValidationError as e:
            raise ProvisioningError(f"Unexpected panel response: {e.errors()[0]['msg']}") from e
