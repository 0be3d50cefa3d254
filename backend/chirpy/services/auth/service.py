# chirpy/services/auth/service.py
from __future__ import annotations

import logging
from datetime import UTC, datetime

from chirpy.repositories import DocumentStore
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import (
    EntropyError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    InvalidSubjectError,
)
from chirpy.services._shared.ports import (
    EntropySource,
    PasswordHasher,
    SystemEntropySource,
    TokenSigner,
)
from chirpy.services.auth.dto import (
    AccessTokenClaims,
    AuthTokenConfig,
    LoginIn,
    LoginOut,
    RefreshTokenCheck,
)

log = logging.getLogger(__name__)

ISSUER = "chirpy"
REFRESH_TOKEN_BYTES = 32


class AuthorizationService(BaseService):
    """
    Access/refresh token lifecycle (login / refresh / revoke).

    Access tokens are short-lived signed JWTs bound to an account id. Refresh
    tokens are opaque random strings stored on the account itself: one live
    token per account, overwritten on every login, cleared on revoke. There is
    no access-token denylist, so a revoked session keeps its access token
    until that token expires.
    """

    def __init__(
        self,
        *,
        store: DocumentStore,
        hasher: PasswordHasher,
        signer: TokenSigner,
        token_cfg: AuthTokenConfig,
        entropy: EntropySource | None = None,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param store: Document store holding accounts.
        :param hasher: Password hashing adapter.
        :param signer: Access-token sign/verify adapter.
        :param token_cfg: Secret and lifetimes.
        :param entropy: Randomness source for refresh tokens.
        """
        super().__init__(store=store)
        self.hasher = hasher
        self.signer = signer
        self.cfg = token_cfg
        self.entropy = entropy or SystemEntropySource()

    # ------------------------------------------------------------------ #
    # Access tokens
    # ------------------------------------------------------------------ #

    def effective_access_ttl(self, requested_ttl_seconds: int | None) -> int:
        """Honour ``requested_ttl_seconds`` only when ``0 < ttl < max``."""
        cap = self.cfg.access_max_ttl_seconds
        if requested_ttl_seconds is not None and 0 < requested_ttl_seconds < cap:
            return requested_ttl_seconds
        return cap

    def issue_access_token(
        self,
        account_id: int,
        requested_ttl_seconds: int | None = 0,
        secret: str | None = None,
    ) -> str:
        """
        Mint a signed access token for ``account_id``.

        Claims: ``iss`` = ``"chirpy"``, ``iat`` = now (UTC), ``exp`` = now +
        effective TTL, ``sub`` = the account id as a string.

        :param secret: Signing secret; defaults to the configured one.
        """
        issued = int(self.now_utc().timestamp())
        claims = {
            "iss": ISSUER,
            "iat": issued,
            "exp": issued + self.effective_access_ttl(requested_ttl_seconds),
            "sub": str(account_id),
        }
        return self.signer.sign(claims, secret if secret is not None else self.cfg.secret)

    def parse_access_token(self, token: str, secret: str | None = None) -> AccessTokenClaims:
        """
        Verify ``token`` and return its claims.

        :raises InvalidSignatureError: Wrong algorithm or signature.
        :raises ExpiredTokenError: Token is past ``exp``.
        :raises MalformedTokenError: Token cannot be parsed.
        """
        raw = self.signer.verify(token, secret if secret is not None else self.cfg.secret)
        subject = raw.get("sub")
        return AccessTokenClaims(
            issuer=raw.get("iss"),
            subject=subject if subject is None else str(subject),
            issued_at=datetime.fromtimestamp(int(raw["iat"]), tz=UTC),
            expires_at=datetime.fromtimestamp(int(raw["exp"]), tz=UTC),
            raw=raw,
        )

    def account_id_from_access_token(self, token: str, secret: str | None = None) -> int:
        """
        Parse ``token`` and return its subject as an account id.

        :raises InvalidSubjectError: If ``sub`` is missing or not an integer.
        """
        claims = self.parse_access_token(token, secret)
        return self._coerce_account_id(claims.subject)

    # ------------------------------------------------------------------ #
    # Refresh tokens
    # ------------------------------------------------------------------ #

    def issue_refresh_token(self) -> str:
        """
        Return 32 secure random bytes, hex-encoded (64 characters).

        :raises EntropyError: If the randomness source fails.
        """
        try:
            raw = self.entropy.fill(REFRESH_TOKEN_BYTES)
        except (OSError, NotImplementedError) as exc:
            raise EntropyError("Secure randomness source is unavailable.") from exc
        if len(raw) != REFRESH_TOKEN_BYTES:
            raise EntropyError(
                f"Randomness source returned {len(raw)} of {REFRESH_TOKEN_BYTES} bytes."
            )
        return raw.hex()

    def validate_refresh_token(
        self, token: str, store: DocumentStore | None = None
    ) -> RefreshTokenCheck:
        """
        Look ``token`` up across all accounts.

        A match counts as valid only while its expiry is strictly in the
        future. An expired match is reported with ``matched=True`` and logged,
        but is not an error.
        """
        source = store if store is not None else self.store
        if not token:
            return RefreshTokenCheck(valid=False, account=None, matched=False)

        now = self.now_utc()
        for account in source.list_accounts():
            if account.refresh_token != token:
                continue
            expires_at = account.refresh_token_expires_at
            if expires_at is not None and expires_at > now:
                return RefreshTokenCheck(valid=True, account=account, matched=True)
            log.info("auth.refresh_expired", extra={"account_id": account.id})
            return RefreshTokenCheck(valid=False, account=None, matched=True)
        return RefreshTokenCheck(valid=False, account=None, matched=False)

    # ------------------------------------------------------------------ #
    # Session flows
    # ------------------------------------------------------------------ #

    def login(self, dto: LoginIn) -> LoginOut:
        """
        Check credentials, mint an access token and store a new refresh token.

        Any previous refresh token on the account is overwritten.

        :raises InvalidCredentialsError: Unknown email or wrong password.
        """
        # Hash verification is slow; keep it outside the store lock.
        candidate = self.store.get_account_by_email(dto.email)
        if candidate is None or not self.hasher.verify(candidate.password_hash, dto.password):
            log.info("auth.login_failed")
            raise InvalidCredentialsError("Invalid credentials")

        refresh_token = self.issue_refresh_token()
        with self.rw_uow():
            account = self.store.get_account(candidate.id)
            # credentials changed while the password was being verified
            if account is None or account.password_hash != candidate.password_hash:
                log.info("auth.login_failed", extra={"account_id": candidate.id})
                raise InvalidCredentialsError("Invalid credentials")
            account.refresh_token = refresh_token
            account.refresh_token_expires_at = self.now_utc() + self.cfg.refresh_expires
            self.store.update_account(account)

        access = self.issue_access_token(account.id, dto.expires_in_seconds)
        return LoginOut(
            id=account.id, email=account.email, token=access, refresh_token=refresh_token
        )

    def refresh(self, refresh_token: str) -> str:
        """
        Exchange a live refresh token for a default-lifetime access token.

        The refresh token itself is not rotated.

        :raises InvalidRefreshTokenError: Unknown, cleared or expired token.
        """
        check = self.validate_refresh_token(refresh_token)
        if not check.valid or check.account is None:
            raise InvalidRefreshTokenError("Refresh token is no longer valid. Please sign in.")
        return self.issue_access_token(check.account.id)

    def revoke(self, refresh_token: str) -> None:
        """
        Clear the refresh token from its account.

        :raises InvalidRefreshTokenError: If no account holds ``refresh_token``.
        """
        with self.rw_uow() as uow:
            account = uow.document.find_account_by_refresh_token(refresh_token)
            if account is None:
                raise InvalidRefreshTokenError("Unknown refresh token.")
            account.clear_refresh_token()
            self.store.update_account(account)
        log.info("auth.revoked", extra={"account_id": account.id})

    # ------------------------------------------------------------------ #
    # Utilities
    # ------------------------------------------------------------------ #

    @staticmethod
    def _coerce_account_id(subject: int | str | None) -> int:
        """Ensure the JWT subject can be treated as an integer account id."""
        if isinstance(subject, int):
            return subject
        if isinstance(subject, str) and subject.isascii() and subject.isdigit():
            return int(subject)
        raise InvalidSubjectError("Invalid token subject.")
