# cwc/tests/unit/test_signing_pipeline.py
import sys
import os
import unittest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from cwc.core.services.signing_pipeline import SigningPipeline
from cwc.core.session.wallet_session import WalletSession
from cwc.core.errors.wallet_errors import SessionNotEnabledError
from cwc.tests.mocks.mock_wallet_provider import MockWalletProvider, MockEnabledWallet
from cwc.tests.mocks.mock_serialization_engine import (
    MockSerializationEngine,
    encode_json_hex,
    decode_json_hex,
)

UNSIGNED_BODY = {"inputs": ["aa"], "outputs": [["addr1x", 1000000]], "fee": 170000}
PARTIAL_WITNESSES = {
    "vkeys": [{"vkey": "pub1", "signature": "sig1"}],
    "native_scripts": [{"script": "should-be-dropped"}],
}

class TestSigningPipeline(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.engine = MockSerializationEngine()
        self.unsigned_tx = self.engine.encode_transaction(UNSIGNED_BODY, self.engine.empty_witness_set())
        self.enabled = MockEnabledWallet(witness_set_hex=encode_json_hex(PARTIAL_WITNESSES))
        self.session = WalletSession(self.engine)
        self.session.install(MockWalletProvider(enabled_wallet=self.enabled), self.enabled)
        self.pipeline = SigningPipeline(self.session, self.engine)

    async def test_sign_requests_partial_signature(self):
        await self.pipeline.sign_transaction(self.unsigned_tx)
        self.assertIn(("sign_tx", (self.unsigned_tx, True)), self.enabled.calls)

    async def test_sign_keeps_only_vkey_witnesses(self):
        print("\n>> Ejecutando: test_sign_keeps_only_vkey_witnesses...")
        signed_hex = await self.pipeline.sign_transaction(self.unsigned_tx)

        signed = decode_json_hex(signed_hex)
        self.assertEqual(signed["body"], UNSIGNED_BODY)
        self.assertEqual(signed["witness_set"], {"vkeys": PARTIAL_WITNESSES["vkeys"]})
        print("[SUCCESS] Solo los vkeys sobreviven a la fusión.")

    async def test_submit_forwards_to_session(self):
        tx_id = await self.pipeline.submit_signed_transaction("cafe")
        self.assertEqual(tx_id, MockEnabledWallet.MOCK_TX_ID)
        self.assertIn(("submit_tx", ("cafe",)), self.enabled.calls)

    async def test_sign_and_submit_in_order(self):
        tx_id = await self.pipeline.sign_and_submit_transaction(self.unsigned_tx)

        self.assertEqual(tx_id, MockEnabledWallet.MOCK_TX_ID)
        order = [name for name, _ in self.enabled.calls]
        self.assertEqual(order, ["sign_tx", "submit_tx"])

        submitted = decode_json_hex(self.enabled.calls[1][1][0])
        self.assertEqual(submitted["witness_set"], {"vkeys": PARTIAL_WITNESSES["vkeys"]})

    async def test_sign_failure_never_submits(self):
        error = RuntimeError("UserDeclined")
        self.enabled.sign_error = error

        with self.assertRaises(RuntimeError) as ctx:
            await self.pipeline.sign_and_submit_transaction(self.unsigned_tx)

        self.assertIs(ctx.exception, error)
        self.assertFalse(self.enabled.called("submit_tx"))

    async def test_undecodable_witness_set_never_submits(self):
        self.enabled.witness_set_hex = "zz-not-hex"

        with self.assertRaises(ValueError):
            await self.pipeline.sign_and_submit_transaction(self.unsigned_tx)

        self.assertFalse(self.enabled.called("submit_tx"))

    async def test_requires_enabled_session(self):
        pipeline = SigningPipeline(WalletSession(self.engine), self.engine)
        with self.assertRaises(SessionNotEnabledError):
            await pipeline.sign_transaction(self.unsigned_tx)

if __name__ == "__main__":
    unittest.main()
