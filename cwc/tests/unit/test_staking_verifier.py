# cwc/tests/unit/test_staking_verifier.py
'''
Test Suite para StakingVerifier:
    Documenta el comportamiento actual: solo se comprueba la presencia del
    registro más reciente, no su acción.

    Functions::
        test_empty_registrations_is_not_delegated(): Lista vacía -> NotDelegated.
        test_query_error_is_not_delegated(): Fallo del indexador -> NotDelegated.
        test_latest_record_present_passes(): registered o deregistered -> sin error (regresión).
'''

import sys
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from cwc.core.services.staking_verifier import StakingVerifier
from cwc.core.interfaces.i_ledger_index import ILedgerIndex
from cwc.core.models.schemas import StakeRegistrationRecord, AccountHistoryRecord
from cwc.core.errors.wallet_errors import (
    NotDelegatedError,
    BlockfrostGetRegistrationsError,
    BlockfrostGetRewardsHistoryError,
    ConfigurationError,
)

REWARD_ADDRESS = "stake1uxyz"


def _verifier(registrations=None, error=None):
    index = MagicMock(spec=ILedgerIndex)
    index.get_accounts_registrations = AsyncMock(return_value=registrations, side_effect=error)
    index.get_accounts_history = AsyncMock(return_value=[])
    return StakingVerifier(index), index


@pytest.mark.asyncio
async def test_empty_registrations_is_not_delegated():
    verifier, index = _verifier(registrations=[])

    with pytest.raises(NotDelegatedError) as exc_info:
        await verifier.verify_staking(REWARD_ADDRESS)

    assert str(exc_info.value) == "Not delegated"
    index.get_accounts_registrations.assert_awaited_once_with(REWARD_ADDRESS)


@pytest.mark.asyncio
async def test_no_data_is_not_delegated():
    verifier, _ = _verifier(registrations=None)
    with pytest.raises(NotDelegatedError):
        await verifier.verify_staking(REWARD_ADDRESS)


@pytest.mark.asyncio
async def test_query_error_is_not_delegated():
    verifier, _ = _verifier(error=BlockfrostGetRegistrationsError())

    with pytest.raises(NotDelegatedError) as exc_info:
        await verifier.verify_staking(REWARD_ADDRESS)

    assert isinstance(exc_info.value.__cause__, BlockfrostGetRegistrationsError)


@pytest.mark.asyncio
async def test_configuration_error_is_not_masked():
    verifier, _ = _verifier(error=ConfigurationError("Blockfrost URL not defined"))
    with pytest.raises(ConfigurationError):
        await verifier.verify_staking(REWARD_ADDRESS)


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ["registered", "deregistered"])
async def test_latest_record_present_passes(action):
    print(f">> Ejecutando: test_latest_record_present_passes[{action}]...")
    verifier, _ = _verifier(registrations=[
        StakeRegistrationRecord(tx_hash="ab" * 32, action=action),
        StakeRegistrationRecord(tx_hash="cd" * 32, action="registered"),
    ])

    await verifier.verify_staking(REWARD_ADDRESS)
    print("[SUCCESS] Presencia del registro suficiente (comportamiento actual).\n")


@pytest.mark.asyncio
async def test_get_delegation_history_passthrough():
    verifier, index = _verifier()
    history = [AccountHistoryRecord(active_epoch=420, amount="1000000", pool_id="pool1abc")]
    index.get_accounts_history = AsyncMock(return_value=history)

    assert await verifier.get_delegation_history(REWARD_ADDRESS) == history


@pytest.mark.asyncio
async def test_get_delegation_history_error_propagates():
    verifier, index = _verifier()
    index.get_accounts_history = AsyncMock(side_effect=BlockfrostGetRewardsHistoryError())

    with pytest.raises(BlockfrostGetRewardsHistoryError):
        await verifier.get_delegation_history(REWARD_ADDRESS)
