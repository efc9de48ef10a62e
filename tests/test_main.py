"""Tests for the command-line runner."""

from unittest.mock import patch

import pytest

from solscan_wrapper import SolscanClient
from solscan_wrapper.main import main, parse_args
from fakes import FakeSession


class TestParseArgs:
    def test_operation_and_kwargs(self):
        operation, kwargs = parse_args(["get_token_holders", "token_address=ABC", "limit=20"])
        assert operation == "get_token_holders"
        assert kwargs == {"token_address": "ABC", "limit": 20}

    def test_negative_int(self):
        _, kwargs = parse_args(["get_block_info", "block=-5"])
        assert kwargs == {"block": -5}

    def test_value_with_equals(self):
        _, kwargs = parse_args(["get_account_info", "account=a=b"])
        assert kwargs == {"account": "a=b"}

    def test_missing_operation(self):
        with pytest.raises(ValueError):
            parse_args([])

    def test_unknown_operation(self):
        with pytest.raises(ValueError):
            parse_args(["close"])

    def test_bad_argument(self):
        with pytest.raises(ValueError):
            parse_args(["get_account_info", "ABC"])


@pytest.fixture
def cli_session():
    session = FakeSession()

    class _Client(SolscanClient):
        def __init__(self, api_key):
            super().__init__(api_key, session=session)

    with patch("solscan_wrapper.main.SolscanClient", _Client), \
         patch("solscan_wrapper.main.SOLSCAN_API_KEY", "test-key"), \
         patch("solscan_wrapper.main.logger"):
        yield session


@pytest.mark.anyio
async def test_main_prints_body(cli_session, capsys):
    code = await main(["get_block_info", "block=100"])
    assert code == 0
    assert capsys.readouterr().out.strip() == '{"success": true}'
    assert cli_session.urls[0].endswith("/block/100")


@pytest.mark.anyio
async def test_main_validation_error(cli_session, capsys):
    code = await main(["get_block_info", "block=0"])
    assert code == 2
    assert "block" in capsys.readouterr().out
    assert cli_session.calls == []


@pytest.mark.anyio
async def test_main_unknown_keyword(cli_session, capsys):
    code = await main(["get_chain_info", "limit=5"])
    assert code == 2
    assert cli_session.calls == []


@pytest.mark.anyio
async def test_main_usage(capsys):
    code = await main([])
    assert code == 1
    assert "get_chain_info" in capsys.readouterr().out


@pytest.mark.anyio
async def test_main_requires_api_key(capsys):
    with patch("solscan_wrapper.main.SOLSCAN_API_KEY", ""):
        code = await main(["get_chain_info"])
    assert code == 1
    assert "SOLSCAN_API_KEY" in capsys.readouterr().out
