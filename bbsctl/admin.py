"""Client for the BigBlueSwarm admin API."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ElementTree
from typing import Any
from urllib.parse import quote_plus

import requests

from bbsctl.system import CommandError

_SUCCESS = "SUCCESS"


class AdminError(CommandError):
    """An admin API call failed."""


class AdminClient:
    """Calls the admin endpoints of a BigBlueSwarm server."""

    def __init__(self, bbs: str, api_key: str, session: requests.Session | None = None) -> None:
        self.bbs = bbs
        self.api_key = api_key
        self.session = session if session is not None else requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        auth: bool = True,
        headers: dict[str, str] | None = None,
        data: bytes | None = None,
    ) -> requests.Response:
        all_headers = {"Authorization": self.api_key} if auth else {}
        all_headers.update(headers or {})
        try:
            return self.session.request(
                method, f"{self.bbs}{path}", headers=all_headers, data=data
            )
        except requests.RequestException as exc:
            raise AdminError(str(exc)) from exc

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise AdminError(f"invalid response body: {exc}") from exc

    def list_instances(self) -> list[dict[str, Any]]:
        """Return the BigBlueButton instances of the cluster."""
        return self._json(self._request("GET", "/admin/api/instances"))

    def add(self, url: str, secret: str) -> None:
        """Register a BigBlueButton instance."""
        body = json.dumps({"url": url, "secret": secret}).encode()
        response = self._request(
            "POST",
            "/admin/api/instances",
            headers={"Content-Type": "application/json"},
            data=body,
        )
        if response.status_code != 201:
            raise AdminError(
                f"api respond with a {response.status_code} status code instead of 201"
            )

    def delete(self, instance: str) -> None:
        """Remove a BigBlueButton instance from the cluster."""
        response = self._request("DELETE", f"/admin/api/instances?url={quote_plus(instance)}")
        if response.status_code == 404:
            raise AdminError("instance does not found in your cluster")
        if response.status_code != 204:
            raise AdminError(
                f"api respond with a {response.status_code} status code instead of 204"
            )

    def cluster_status(self) -> list[dict[str, Any]]:
        """Return the status of every instance in the cluster."""
        return self._json(self._request("GET", "/admin/api/cluster"))

    def api_status(self) -> str:
        """Return "Up" or "Down" for the BigBlueSwarm API itself."""
        response = self._request("GET", "/bigbluebutton/api", auth=False)
        try:
            root = ElementTree.fromstring(response.content)
        except ElementTree.ParseError as exc:
            raise AdminError(f"invalid response body: {exc}") from exc
        return "Up" if root.findtext("returncode") == _SUCCESS else "Down"

    def get_configuration(self) -> Any:
        """Return the server configuration."""
        return self._json(self._request("GET", "/admin/api/configurations"))

    def get_tenants(self) -> dict[str, Any]:
        """Return the tenant list of the cluster."""
        return self._json(self._request("GET", "/admin/api/tenants"))

    def get_tenant(self, hostname: str) -> dict[str, Any]:
        """Return a single tenant."""
        response = self._request("GET", f"/admin/api/tenants/{hostname}")
        if response.status_code == 404:
            raise AdminError("tenant not found")
        if response.status_code == 500:
            raise AdminError(
                "bigblueswarm internal error. Please check your bigblueswarm instance"
            )
        return self._json(response)

    def delete_tenant(self, hostname: str) -> None:
        """Remove a tenant from the cluster."""
        response = self._request("DELETE", f"/admin/api/tenants/{hostname}")
        if response.status_code != 204:
            raise AdminError(f"unable to delete tenant: {response.text}")

    def apply(self, kind: str, resource: Any) -> None:
        """Send an InstanceList or Tenant resource to the cluster."""
        path = "/admin/api/instances" if kind == "InstanceList" else "/admin/api/tenants"
        response = self._request("POST", path, data=json.dumps(resource).encode())
        if response.status_code != 201:
            raise AdminError(
                f"bigblueswarm returns a {response.status_code} status instead of 201"
            )