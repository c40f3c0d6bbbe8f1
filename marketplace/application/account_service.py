"""Account application service: signup registration hook and account reads."""

import logging

from marketplace.application.account_repository import AccountRoleStore
from marketplace.application.exceptions import NotFoundError
from marketplace.core.clock import Clock, utc_now
from marketplace.domain.models.account import Account
from marketplace.domain.validators.workflow_validator import (
    validate_email_address,
    validate_required_text,
)
from marketplace.scalability.retry import PersistenceRetry


class AccountService:
    """Accounts start as customer/none. Sellers are only ever made by approval; admins are provisioned outside signup."""

    def __init__(
        self,
        accounts: AccountRoleStore,
        logger: logging.Logger,
        retry: PersistenceRetry | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._accounts = accounts
        self._logger = logger
        self._retry = retry or PersistenceRetry(logger=logger)
        self._clock = clock

    async def register(self, account_id: str, email: str) -> Account:
        """Create the account for a new auth identity as customer/none. Re-registering returns the stored account."""
        validate_required_text("account_id", account_id)
        validate_email_address("email", email)

        existing = await self._retry.read(self._accounts.get, account_id)
        if existing is not None:
            self._logger.info("account_already_registered", extra={"account_id": account_id})
            return existing

        account = Account.register(account_id, email, self._clock())
        stored = await self._retry.write(self._accounts.add, account)
        self._logger.info(
            "account_registered",
            extra={"account_id": account_id, "role": stored.role.value},
        )
        return stored

    async def get(self, account_id: str) -> Account:
        account = await self._retry.read(self._accounts.get, account_id)
        if account is None:
            raise NotFoundError(f"Account not found: {account_id}")
        return account
