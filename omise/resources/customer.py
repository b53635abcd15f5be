"""Customers API: https://www.omise.co/customers-api"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from omise.api.request import Method
from omise.api.result import Result
from omise.models.customer import Customer
from omise.models.shapes import Entity, ListOf
from omise.resources.base import Resource, merge_params


class CustomerResource(Resource):
    """List, retrieve, create, update and destroy customers.

    Every method returns ``Success(Customer)`` / ``Success(OmiseList[Customer])``
    or ``Failure(OmiseError)``.
    """

    endpoint = "customers"

    def list(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        """List customers.

        Query parameters: ``offset`` (default 0), ``limit`` (default 20, max
        100), ``from`` / ``to`` (ISO 8601), ``order``.
        """
        return self._get(self._path(), ListOf(Customer), merge_params(params, kwargs))

    def retrieve(self, customer_id: str) -> Result:
        return self._get(self._path(customer_id), Entity(Customer))

    def create(self, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Result:
        """Create a customer.

        Request parameters: ``email``, ``description`` and ``card`` (a token
        id to attach), all optional.
        """
        return self._send(
            Method.POST, self._path(), Entity(Customer), merge_params(params, kwargs)
        )

    def update(
        self, customer_id: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> Result:
        """Update a customer; same parameters as ``create``."""
        return self._send(
            Method.PATCH,
            self._path(customer_id),
            Entity(Customer),
            merge_params(params, kwargs),
        )

    def destroy(self, customer_id: str) -> Result:
        return self._send(Method.DELETE, self._path(customer_id), Entity(Customer))
