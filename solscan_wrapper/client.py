"""
Solscan Pro API client: one coroutine per REST endpoint, raw JSON text out.
"""

from urllib.parse import quote

import aiohttp
from loguru import logger

from solscan_wrapper.config import HTTP_TIMEOUT, SOLSCAN_BASE_URL, SOLSCAN_USER_AGENT
from solscan_wrapper.errors import InvalidBoundError, MissingIdentifierError
from solscan_wrapper.response import ApiResponse


def query(key: str, value) -> str:
    """Format a single `key=value` query fragment with the value percent-encoded."""
    return f"{key}={quote(str(value), safe='')}"


def _segment(value) -> str:
    return quote(str(value), safe="")


def _require(param: str, value) -> None:
    if value is None or value == "":
        raise MissingIdentifierError(param)


def _require_positive(param: str, value: int) -> None:
    if value <= 0:
        raise InvalidBoundError(param, value)


class SolscanClient:
    """
    Thin async wrapper around https://pro-api.solscan.io/v1.0.

    Every endpoint method validates its arguments, builds the URL and returns
    the response body as text. Non-2xx responses are logged and their body is
    returned anyway; use `fetch` to get the status alongside the body.

    The aiohttp session can be injected. If none is given, one is created on
    the first request and closed by `close()` / the async context manager.
    """

    OPERATIONS = (
        "get_last_block",
        "get_block_transactions",
        "get_block_info",
        "get_last_transaction",
        "get_transaction_signature_info",
        "get_account_tokens",
        "get_account_transactions",
        "get_account_stake_accounts",
        "get_account_spl_transfers",
        "get_account_sol_transfers",
        "get_account_export_transactions",
        "get_account_info",
        "get_token_holders",
        "get_token_meta",
        "get_token_list",
        "get_market_token_info",
        "get_chain_info",
    )

    def __init__(self, api_key: str, *,
                 session: aiohttp.ClientSession | None = None,
                 base_url: str = SOLSCAN_BASE_URL,
                 timeout: float = HTTP_TIMEOUT):
        _require("api_key", api_key)
        self.base_url = base_url
        self.timeout = timeout
        self.headers = {
            "accept": "application/json",
            "token": api_key,
            "User-Agent": SOLSCAN_USER_AGENT,
        }
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "SolscanClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    # ── Request plumbing ──────────────────────────────────────────────────────

    def build_url(self, path: str, *fragments: str) -> str:
        """Join base URL, path and pre-formatted `key=value` fragments."""
        if not fragments:
            return f"{self.base_url}{path}"
        return f"{self.base_url}{path}?{'&'.join(fragments)}"

    async def fetch(self, path: str, *fragments: str) -> ApiResponse:
        """
        GET `path` and return status and body.

        HTTP error statuses are logged, not raised. Connection errors and
        timeouts from aiohttp propagate to the caller.
        """
        url = self.build_url(path, *fragments)
        session = self._get_session()
        logger.debug(f"[SOLSCAN] GET {url}")

        async with session.get(url, headers=self.headers,
                               timeout=aiohttp.ClientTimeout(total=self.timeout)) as resp:
            error = None
            if not 200 <= resp.status < 300:
                error = f"HTTP {resp.status} {resp.reason or ''}".rstrip()
                logger.error(f"[SOLSCAN] ERROR: {error} [{url}]")
            body = await resp.text(errors="replace")

        return ApiResponse(url=url, status=resp.status, body=body, error=error)

    async def _get(self, path: str, *fragments: str) -> str:
        response = await self.fetch(path, *fragments)
        return response.body

    # ── Blocks ────────────────────────────────────────────────────────────────

    async def get_last_block(self, limit: int = 10) -> str:
        """Latest blocks. `/block/last`"""
        return await self._get("/block/last", query("limit", limit))

    async def get_block_transactions(self, block, limit: int = 10, offset: int = 0) -> str:
        """Transactions included in `block`. `/block/transactions`"""
        _require("block", block)
        return await self._get("/block/transactions",
                               query("limit", limit),
                               query("offset", offset),
                               query("block", block))

    async def get_block_info(self, block: int) -> str:
        """Details of a single block. `/block/{block}`"""
        _require_positive("block", block)
        return await self._get(f"/block/{block}")

    # ── Transactions ──────────────────────────────────────────────────────────

    async def get_last_transaction(self, limit: int = 10) -> str:
        """Latest transactions. `/transaction/last`"""
        return await self._get("/transaction/last", query("limit", limit))

    async def get_transaction_signature_info(self, signature: str) -> str:
        """Transaction details by signature. `/transaction/{signature}`"""
        _require("signature", signature)
        return await self._get(f"/transaction/{_segment(signature)}")

    # ── Accounts ──────────────────────────────────────────────────────────────

    async def get_account_tokens(self, account: str) -> str:
        """Token accounts owned by `account`. `/account/tokens`"""
        _require("account", account)
        return await self._get("/account/tokens", query("account", account))

    async def get_account_transactions(self, account: str,
                                       before_hash: str | None = None,
                                       limit: int = 10) -> str:
        """
        Transactions of `account`, newest first. `/account/transactions`

        Pass the last signature of a page as `before_hash` to get the next one.
        """
        _require("account", account)
        _require_positive("limit", limit)

        fragments = [query("account", account), query("limit", limit)]
        if before_hash:
            fragments.append(query("beforeHash", before_hash))
        return await self._get("/account/transactions", *fragments)

    async def get_account_stake_accounts(self, account: str) -> str:
        """Stake accounts delegated by `account`. `/account/stakeAccounts`"""
        _require("account", account)
        return await self._get("/account/stakeAccounts", query("account", account))

    async def get_account_spl_transfers(self, account: str, limit: int = 10, offset: int = 0,
                                        from_time: int | None = None,
                                        to_time: int | None = None) -> str:
        """SPL token transfers of `account`. `/account/splTransfers`"""
        return await self._transfers("/account/splTransfers", account, limit, offset,
                                     from_time, to_time)

    async def get_account_sol_transfers(self, account: str, limit: int = 10, offset: int = 0,
                                        from_time: int | None = None,
                                        to_time: int | None = None) -> str:
        """Native SOL transfers of `account`. `/account/solTransfers`"""
        return await self._transfers("/account/solTransfers", account, limit, offset,
                                     from_time, to_time)

    async def _transfers(self, path: str, account: str, limit: int, offset: int,
                         from_time: int | None, to_time: int | None) -> str:
        _require("account", account)
        _require_positive("limit", limit)

        fragments = [query("account", account), query("offset", offset), query("limit", limit)]
        fragments.extend(_time_range(from_time, to_time))
        return await self._get(path, *fragments)

    async def get_account_export_transactions(self, account: str, type: str = "all",
                                              from_time: int | None = None,
                                              to_time: int | None = None) -> str:
        """
        CSV-style export of account activity. `/account/exportTransactions`

        `type` is one of `tokenchange`, `soltransfer` or `all`.
        """
        _require("account", account)

        fragments = [query("account", account), query("type", type)]
        fragments.extend(_time_range(from_time, to_time))
        return await self._get("/account/exportTransactions", *fragments)

    async def get_account_info(self, account: str) -> str:
        """Overview of a single account. `/account/{account}`"""
        _require("account", account)
        return await self._get(f"/account/{_segment(account)}")

    # ── Tokens ────────────────────────────────────────────────────────────────

    async def get_token_holders(self, token_address: str, limit: int = 10, offset: int = 0) -> str:
        """Largest holders of a token. `/token/holders`"""
        _require("token_address", token_address)
        _require_positive("limit", limit)
        return await self._get("/token/holders",
                               query("tokenAddress", token_address),
                               query("limit", limit),
                               query("offset", offset))

    async def get_token_meta(self, token_address: str) -> str:
        """Token metadata (name, symbol, decimals...). `/token/meta`"""
        _require("token_address", token_address)
        return await self._get("/token/meta", query("tokenAddress", token_address))

    async def get_token_list(self, sort_by: str = "market_cap", direction: str = "desc",
                             limit: int = 10, offset: int = 0) -> str:
        """
        Ranked token list. `/token/list`

        `sort_by` accepts market_cap, volume, holder, price and the
        price_change_* windows (24h, 7d, 14d, 30d, 60d, 200d, 1y).
        """
        return await self._get("/token/list",
                               query("sortBy", sort_by),
                               query("direction", direction),
                               query("limit", limit),
                               query("offset", offset))

    # ── Market / chain ────────────────────────────────────────────────────────

    async def get_market_token_info(self, token_address: str) -> str:
        """Price and volume data for a token. `/market/token/{token_address}`"""
        _require("token_address", token_address)
        return await self._get(f"/market/token/{_segment(token_address)}")

    async def get_chain_info(self) -> str:
        """Network-wide statistics. `/chaininfo`"""
        return await self._get("/chaininfo")


def _time_range(from_time: int | None, to_time: int | None) -> list[str]:
    fragments = []
    if from_time is not None:
        fragments.append(query("fromTime", from_time))
    if to_time is not None:
        fragments.append(query("toTime", to_time))
    return fragments
