# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Household list management service client.

The list API is always served from ``LIST_API_ENDPOINT`` regardless of the
configured ``api_endpoint``.
"""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import BaseServiceClient
from skill_sdk.services._common import json_headers, require_param

LIST_API_ENDPOINT = "https://api.amazonalexa.com/"


class ListManagementServiceClient(BaseServiceClient):
    """Reads and edits the customer's household to-do and shopping lists."""

    async def _call(
        self,
        method: str,
        path: str,
        path_params: dict[str, str],
        body: Any,
        errors: dict[int, str],
    ) -> Any:
        response = await self.invoke(
            method,
            LIST_API_ENDPOINT,
            path,
            path_params,
            [],
            json_headers(self, self.api_configuration.authorization_value),
            body,
            errors,
        )
        return response.body

    async def get_lists_metadata(self) -> Any:
        errors = {200: "Success", 403: "Forbidden", 500: "Internal Server Error"}
        return await self._call("GET", "/v2/householdlists/", {}, None, errors)

    async def create_list(self, create_list_request: Any) -> Any:
        require_param(create_list_request, "createListRequest", "createList")
        errors = {
            201: "Success",
            400: "Bad Request",
            403: "Forbidden",
            409: "Conflict",
            500: "Internal Server Error",
            0: "Internal Server Error",
        }
        return await self._call("POST", "/v2/householdlists/", {}, create_list_request, errors)

    async def get_list(self, list_id: str, status: str) -> Any:
        """Get a list with the items in ``status`` ("active" or "completed")."""
        require_param(list_id, "listId", "getList")
        require_param(status, "status", "getList")
        errors = {
            200: "Success",
            400: "Bad Request",
            403: "Forbidden",
            404: "Not Found",
            500: "Internal Server Error",
            0: "Internal Server Error",
        }
        return await self._call(
            "GET",
            "/v2/householdlists/{listId}/{status}/",
            {"listId": list_id, "status": status},
            None,
            errors,
        )

    async def update_list(self, list_id: str, update_list_request: Any) -> Any:
        require_param(list_id, "listId", "updateList")
        require_param(update_list_request, "updateListRequest", "updateList")
        errors = {
            200: "Success",
            400: "Bad Request",
            403: "Forbidden",
            404: "List not found",
            409: "Conflict",
            500: "Internal Server Error",
            0: "Internal Server Error",
        }
        return await self._call(
            "PUT",
            "/v2/householdlists/{listId}/",
            {"listId": list_id},
            update_list_request,
            errors,
        )

    async def delete_list(self, list_id: str) -> None:
        require_param(list_id, "listId", "deleteList")
        errors = {
            200: "Success",
            403: "Forbidden",
            404: "Not Found",
            500: "Internal Server Error",
            0: "Internal Server Error",
        }
        await self._call("DELETE", "/v2/householdlists/{listId}/", {"listId": list_id}, None, errors)

    async def create_list_item(self, list_id: str, create_list_item_request: Any) -> Any:
        require_param(list_id, "listId", "createListItem")
        require_param(create_list_item_request, "createListItemRequest", "createListItem")
        errors = {
            201: "Success",
            400: "Bad Request",
            403: "Forbidden",
            404: "Not found",
            500: "Internal Server Error",
            0: "Internal Server Error",
        }
        return await self._call(
            "POST",
            "/v2/householdlists/{listId}/items/",
            {"listId": list_id},
            create_list_item_request,
            errors,
        )

    async def get_list_item(self, list_id: str, item_id: str) -> Any:
        require_param(list_id, "listId", "getListItem")
        require_param(item_id, "itemId", "getListItem")
        errors = {
            200: "Success",
            403: "Forbidden",
            404: "Not Found",
            500: "Internal Server Error",
            0: "Internal Server Error",
        }
        return await self._call(
            "GET",
            "/v2/householdlists/{listId}/items/{itemId}/",
            {"listId": list_id, "itemId": item_id},
            None,
            errors,
        )

    async def update_list_item(
        self, list_id: str, item_id: str, update_list_item_request: Any
    ) -> Any:
        require_param(list_id, "listId", "updateListItem")
        require_param(item_id, "itemId", "updateListItem")
        require_param(update_list_item_request, "updateListItemRequest", "updateListItem")
        errors = {
            200: "Success",
            403: "Forbidden",
            404: "Not Found",
            409: "Conflict",
            500: "Internal Server Error",
            0: "Internal Server Error",
        }
        return await self._call(
            "PUT",
            "/v2/householdlists/{listId}/items/{itemId}/",
            {"listId": list_id, "itemId": item_id},
            update_list_item_request,
            errors,
        )

    async def delete_list_item(self, list_id: str, item_id: str) -> None:
        require_param(list_id, "listId", "deleteListItem")
        require_param(item_id, "itemId", "deleteListItem")
        errors = {
            200: "Success",
            403: "Forbidden",
            404: "Not Found",
            500: "Internal Server Error",
            0: "Internal Server Error",
        }
        await self._call(
            "DELETE",
            "/v2/householdlists/{listId}/items/{itemId}/",
            {"listId": list_id, "itemId": item_id},
            None,
            errors,
        )
