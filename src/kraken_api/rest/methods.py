# SPDX-License-Identifier: Apache-2.0
"""Catalog of REST operations exposed by the exchange."""

from __future__ import annotations

from enum import Enum
from typing import Union

from kraken_api.exceptions import UnknownMethodError


class Access(str, Enum):
    """Authentication class of an operation."""

    PUBLIC = "public"
    PRIVATE = "private"


class ApiMethod(Enum):
    """Every REST operation known to the client, tagged with its access class.

    The member name and the wire name are identical, so ``ApiMethod["Ticker"]``
    and ``ApiMethod.lookup("Ticker")`` both resolve the market-data call.
    """

    # Market data
    Time = Access.PUBLIC
    Assets = Access.PUBLIC
    AssetPairs = Access.PUBLIC
    Ticker = Access.PUBLIC
    Depth = Access.PUBLIC
    Trades = Access.PUBLIC
    Spread = Access.PUBLIC
    OHLC = Access.PUBLIC

    # Account and trading
    Balance = Access.PRIVATE
    TradeBalance = Access.PRIVATE
    OpenOrders = Access.PRIVATE
    ClosedOrders = Access.PRIVATE
    QueryOrders = Access.PRIVATE
    TradesHistory = Access.PRIVATE
    QueryTrades = Access.PRIVATE
    OpenPositions = Access.PRIVATE
    Ledgers = Access.PRIVATE
    QueryLedgers = Access.PRIVATE
    TradeVolume = Access.PRIVATE
    AddOrder = Access.PRIVATE
    CancelOrder = Access.PRIVATE
    DepositMethods = Access.PRIVATE
    DepositAddresses = Access.PRIVATE
    DepositStatus = Access.PRIVATE
    WithdrawInfo = Access.PRIVATE
    Withdraw = Access.PRIVATE
    WithdrawStatus = Access.PRIVATE
    WithdrawCancel = Access.PRIVATE
    GetWebSocketsToken = Access.PRIVATE

    def __new__(cls, access: Access) -> "ApiMethod":
        # Values repeat, so give each member a unique value to avoid aliasing.
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        obj.access = access
        return obj

    @property
    def wire_name(self) -> str:
        return self.name

    @property
    def is_private(self) -> bool:
        return self.access is Access.PRIVATE

    @classmethod
    def lookup(cls, method: Union[str, "ApiMethod"]) -> "ApiMethod":
        """Resolve an operation by exact (case-sensitive) name.

        Raises:
            UnknownMethodError: If the name is not in the catalog.
        """
        if isinstance(method, cls):
            return method
        try:
            return cls[method]
        except (KeyError, TypeError):
            # TypeError: unhashable input such as a list
            raise UnknownMethodError(str(method)) from None

    @classmethod
    def by_access(cls, access: Access) -> list["ApiMethod"]:
        return [m for m in cls if m.access is access]


PUBLIC_METHODS = tuple(m.name for m in ApiMethod.by_access(Access.PUBLIC))
PRIVATE_METHODS = tuple(m.name for m in ApiMethod.by_access(Access.PRIVATE))

__all__ = ["Access", "ApiMethod", "PUBLIC_METHODS", "PRIVATE_METHODS"]
