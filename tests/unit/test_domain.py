"""Unit tests for domain models: memo, fees, transaction, account."""

from stellar_explain.domain.account import Account, AccountFlags, Balance
from stellar_explain.domain.fees import FeeStats, fee_multiplier, is_high_fee, stroops_to_xlm
from stellar_explain.domain.memo import Memo, MemoType
from stellar_explain.domain.operations import OtherOperation, PaymentOperation
from stellar_explain.domain.transaction import Transaction


def test_stroops_to_xlm_zero():
    assert stroops_to_xlm(0) == "0.0000000"


def test_stroops_to_xlm_one_xlm():
    assert stroops_to_xlm(10_000_000) == "1.0000000"


def test_stroops_to_xlm_fraction():
    assert stroops_to_xlm(100) == "0.0000100"
    assert stroops_to_xlm(12_345_678_901) == "1234.5678901"


def test_is_high_fee_boundary():
    assert is_high_fee(500, 100) is False
    assert is_high_fee(501, 100) is True
    assert is_high_fee(100, 100) is False


def test_fee_multiplier_floors():
    assert fee_multiplier(1000, 100) == 10
    assert fee_multiplier(1099, 100) == 10


def test_fee_multiplier_zero_base_does_not_divide_by_zero():
    assert fee_multiplier(700, 0) == 700


def test_default_network_fees():
    stats = FeeStats.default_network_fees()
    assert (stats.base_fee, stats.min_fee, stats.max_fee) == (100, 100, 100_000)
    assert (stats.mode_fee, stats.p90_fee) == (100, 1000)


def test_recommended_fee_by_priority():
    stats = FeeStats(base_fee=100, min_fee=100, max_fee=9000, mode_fee=150, p90_fee=400)
    assert stats.recommended_fee("low") == 100
    assert stats.recommended_fee("medium") == 150
    assert stats.recommended_fee("high") == 400
    assert stats.recommended_fee("whatever") == 100


def test_recommended_fee_medium_never_below_base():
    stats = FeeStats(base_fee=200, min_fee=100, max_fee=9000, mode_fee=100, p90_fee=100)
    assert stats.recommended_fee("medium") == 200


def test_text_memo_byte_limit():
    assert Memo.text("a" * 28) is not None
    assert Memo.text("a" * 29) is None


def test_text_memo_counts_utf8_bytes():
    # 10 two-byte characters = 20 bytes; 15 = 30 bytes
    assert Memo.text("é" * 10) is not None
    assert Memo.text("é" * 15) is None


def test_id_memo_range():
    assert Memo.id(2**64 - 1) is not None
    assert Memo.id(2**64) is None


def test_memo_helpers():
    memo = Memo.id(42)
    assert memo.memo_type == "id"
    assert memo.value_string() == "42"
    assert memo.display() == "ID: 42"
    assert Memo.none().display() == "No memo"
    assert Memo.none().is_none
    assert Memo.text("hello").display() == "Text: hello"
    assert Memo.return_hash("ab").kind is MemoType.RETURN


def test_transaction_payment_helpers():
    tx = Transaction(
        hash="h",
        successful=True,
        fee_charged=100,
        operations=(
            PaymentOperation(id="1", destination="GDEST", amount="1"),
            OtherOperation(id="2", type_name="bump_sequence"),
        ),
    )
    assert tx.payment_count() == 1
    assert tx.has_payments()
    assert all(isinstance(op, PaymentOperation) for op in tx.payment_operations())


def test_other_operation_exposes_type_name():
    op = OtherOperation(id="9", type_name="invoke_host_function")
    assert op.operation_type == "invoke_host_function"


def test_account_balance_helpers():
    account = Account(
        account_id="GACC",
        sequence="1",
        balances=(
            Balance(asset_type="credit_alphanum4", balance="5", asset_code="USDC"),
            Balance(asset_type="native", balance="12.5"),
        ),
        flags=AccountFlags(auth_required=True),
    )
    assert account.native_balance() == "12.5"
    assert account.other_asset_count() == 1
