from __future__ import annotations

from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any

import pytest
from solana.rpc.commitment import Commitment
from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature
from spl.token.constants import TOKEN_PROGRAM_ID

from solana_quick_wallet import connection as connection_module
from solana_quick_wallet.connection import SolanaConnection

DEVNET_RPC_URL = "https://api.devnet.example"


@dataclass
class FakeSolanaClient:
    """Stand-in for ``AsyncClient`` that records every RPC call it receives."""

    balances: dict[str, int] = field(default_factory=dict)
    token_accounts: dict[tuple[str, str], list[dict[str, Any]]] = field(
        default_factory=dict
    )
    mints: dict[str, int] = field(default_factory=dict)
    existing_accounts: set[str] = field(default_factory=set)
    fail_with: Exception | None = None
    confirm_err: Any = None
    calls: list[str] = field(default_factory=list)
    sent_transactions: list[Any] = field(default_factory=list)
    closed: bool = False

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    async def get_balance(self, pubkey: Pubkey, commitment=None):
        self._record("get_balance")
        return SimpleNamespace(value=self.balances.get(str(pubkey), 0))

    async def get_token_accounts_by_owner_json_parsed(
        self, owner: Pubkey, opts, commitment=None
    ):
        self._record("get_token_accounts_by_owner_json_parsed")
        amounts = self.token_accounts.get((str(owner), str(opts.mint)), [])
        return SimpleNamespace(
            value=[
                SimpleNamespace(
                    account=SimpleNamespace(
                        data=SimpleNamespace(
                            parsed={"info": {"tokenAmount": token_amount}}
                        )
                    )
                )
                for token_amount in amounts
            ]
        )

    async def get_account_info_json_parsed(self, pubkey: Pubkey, commitment=None):
        self._record("get_account_info_json_parsed")
        decimals = self.mints.get(str(pubkey))
        if decimals is None:
            return SimpleNamespace(value=None)
        return SimpleNamespace(
            value=SimpleNamespace(
                owner=TOKEN_PROGRAM_ID,
                data=SimpleNamespace(
                    program="spl-token",
                    parsed={"type": "mint", "info": {"decimals": decimals}},
                ),
            )
        )

    async def get_account_info(self, pubkey: Pubkey, commitment=None):
        self._record("get_account_info")
        if str(pubkey) in self.existing_accounts:
            return SimpleNamespace(value=SimpleNamespace(owner=TOKEN_PROGRAM_ID))
        return SimpleNamespace(value=None)

    async def get_latest_blockhash(self, commitment=None):
        self._record("get_latest_blockhash")
        return SimpleNamespace(
            value=SimpleNamespace(
                blockhash=Hash.new_unique(), last_valid_block_height=1_000
            )
        )

    async def send_transaction(self, txn, opts=None):
        self._record("send_transaction")
        self.sent_transactions.append(txn)
        return SimpleNamespace(value=txn.signatures[0])

    async def confirm_transaction(
        self, tx_sig: Signature, commitment=None, last_valid_block_height=None
    ):
        self._record("confirm_transaction")
        return SimpleNamespace(value=[SimpleNamespace(err=self.confirm_err)])

    async def close(self):
        self.closed = True

    @property
    def contacted(self) -> bool:
        return bool(self.calls)


def decode_instructions(transaction) -> list[dict[str, Any]]:
    message = transaction.message
    keys = message.account_keys
    return [
        {
            "program_id": keys[ix.program_id_index],
            "accounts": [keys[index] for index in bytes(ix.accounts)],
            "data": bytes(ix.data),
        }
        for ix in message.instructions
    ]


@pytest.fixture(autouse=True)
def reset_connection(monkeypatch):
    """Every test starts without an initialized connection."""
    monkeypatch.setattr(connection_module, "_connection", None)
    yield


@pytest.fixture
def fake_client():
    return FakeSolanaClient()


@pytest.fixture
def connected(monkeypatch, fake_client):
    handle = SolanaConnection(
        rpc_url=DEVNET_RPC_URL,
        commitment=Commitment("processed"),
        client=fake_client,
    )
    monkeypatch.setattr(connection_module, "_connection", handle)
    return fake_client


@pytest.fixture
def token_mint():
    return Pubkey.new_unique()


@pytest.fixture
def instructions_of():
    return decode_instructions
