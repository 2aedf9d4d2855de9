"""Facade pattern: a wallet API hiding accounts, codes, ledger and notices."""

from __future__ import annotations

_U32_MAX = 2**32 - 1


class WalletError(Exception):
    """A wallet operation was refused."""


def _check_amount(amount: int) -> None:
    if not 0 <= amount <= _U32_MAX:
        raise ValueError(f"amount out of range: {amount}")


class Account:
    """An account identified by name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def check(self, name: str) -> None:
        """Raise WalletError unless the name matches."""
        if self.name != name:
            raise WalletError("Account name is incorrect")
        print("Account verified")


class SecurityCode:
    """A numeric security code."""

    def __init__(self, code: int) -> None:
        self.code = code

    def check(self, code: int) -> None:
        """Raise WalletError unless the code matches."""
        if self.code != code:
            raise WalletError("Security code is incorrect")
        print("Security code verified")


class Wallet:
    """Holds a balance."""

    def __init__(self) -> None:
        self.balance = 0

    def credit_balance(self, amount: int) -> None:
        _check_amount(amount)
        if self.balance + amount > _U32_MAX:
            raise OverflowError("balance overflows 32 bits")
        self.balance += amount

    def debit_balance(self, amount: int) -> None:
        """Raise WalletError if the balance does not cover the amount."""
        _check_amount(amount)
        if amount > self.balance:
            raise WalletError("Balance is not sufficient")


class Notification:
    """Sends wallet notices; each method prints the notice and returns it."""

    def __init__(self) -> None:
        self.sent: list[str] = []

    def _send(self, message: str) -> str:
        self.sent.append(message)
        print(message)
        return message

    def send_wallet_credit_notification(self) -> str:
        return self._send("Sending wallet credit notification")

    def send_wallet_debit_notification(self) -> str:
        return self._send("Sending wallet debit notification")


class Ledger:
    def make_entry(self, account_id: str, txn_type: str, amount: int) -> None:
        print(
            f"Make ledger entry for accountId {account_id} "
            f"with transaction type {txn_type} for amount {amount}"
        )


class WalletFacade:
    """One entry point for wallet operations."""

    def __init__(self, account_id: str, code: int) -> None:
        print("Starting create account")
        self.account = Account(account_id)
        self.wallet = Wallet()
        self.code = SecurityCode(code)
        self.notification = Notification()
        self.ledger = Ledger()
        print("Account created")

    def add_money_to_wallet(self, account_id: str, security_code: int, amount: int) -> None:
        print("Starting add money to wallet")
        self.account.check(account_id)
        self.code.check(security_code)
        self.wallet.credit_balance(amount)
        self.notification.send_wallet_credit_notification()
        self.ledger.make_entry(account_id, "credit", amount)

    def deduct_money_from_wallet(
        self, account_id: str, security_code: int, amount: int
    ) -> None:
        print("Starting debit money from wallet")
        self.account.check(account_id)
        self.code.check(security_code)
        self.wallet.debit_balance(amount)
        self.notification.send_wallet_debit_notification()
        self.ledger.make_entry(account_id, "debit", amount)


def demo() -> None:
    """Create a wallet, credit it and debit it."""
    wallet = WalletFacade("abc", 1234)
    print()
    wallet.add_money_to_wallet("abc", 1234, 10)
    print()
    wallet.deduct_money_from_wallet("abc", 1234, 5)