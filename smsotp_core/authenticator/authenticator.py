"""
SMS OTP Authenticator
=====================
Challenge/verify state machine for one SMS OTP authentication step.

States: no challenge -> challenged -> verified | expired | failed. A failed
verification on an optional step hands control back to the flow engine
instead of failing the whole flow.
"""

import re
from typing import Callable, Mapping, Optional

import structlog

from ..brokers import BrokerDispatcher, BrokerRegistry
from ..config import AuthenticatorSettings
from ..exceptions import BrokerError, MessageTemplateError
from ..messaging import DestinationStatus, MessageCatalog, mask_phone, validate_destination
from ..otp import current_millis, generate_challenge
from .context import AuthenticationContext, UserRecord
from .outcomes import CODE_FORM, AuthenticationOutcome, FailureKind, OutcomeStatus

logger = structlog.get_logger(__name__)

NOTE_CODE = "code"
NOTE_EXPIRY = "code_expiry"

DIGITS_ONLY = re.compile(r"[0-9]+")


class OtpAuthenticator:
    """Sends a one-time code by SMS and verifies the code the user types back."""

    def __init__(
        self,
        catalog: Optional[MessageCatalog] = None,
        registry: Optional[BrokerRegistry] = None,
        clock: Callable[[], int] = current_millis,
    ):
        self.catalog = catalog or MessageCatalog()
        self.registry = registry
        self.clock = clock

    # Flow-engine hooks

    def requires_user(self) -> bool:
        return True

    def configured_for(self, user: UserRecord) -> bool:
        # Destination is checked when the challenge is issued so that a
        # missing number surfaces as an explicit setup error.
        logger.debug("Checking SMS OTP configuration", user=user.username)
        return True

    def set_required_actions(self, user: UserRecord) -> None:
        logger.debug("No required actions for SMS OTP", user=user.username)

    def close(self) -> None:
        logger.debug("Closing SMS OTP authenticator")

    # Outcome helpers

    def _failure(
        self,
        context: AuthenticationContext,
        kind: FailureKind,
        message: Optional[str],
        http_status: int,
        detail: Optional[str] = None,
        form: Optional[str] = None,
    ) -> AuthenticationOutcome:
        text = None
        if message:
            text = self.catalog.get(message, theme=context.theme, locale=context.locale)
        return AuthenticationOutcome(
            OutcomeStatus.FAILURE,
            kind=kind,
            message=message,
            text=text,
            detail=detail,
            http_status=http_status,
            form=form,
        )

    def _invalid_code(self, context: AuthenticationContext, kind: FailureKind) -> AuthenticationOutcome:
        if context.requirement.is_optional:
            return AuthenticationOutcome.attempted()
        return self._failure(context, kind, "smsAuthCodeInvalid", 400, form=CODE_FORM)

    # State transitions

    def authenticate(self, context: AuthenticationContext) -> AuthenticationOutcome:
        """
        Issue a challenge and send it by SMS.

        Any earlier challenge for this attempt is overwritten, so calling
        this again acts as "resend".

        Raises:
            ConfigurationError: if the authenticator config is malformed
        """
        user = context.user
        logger.debug("SMS OTP authenticate", user=user.username)

        settings = AuthenticatorSettings.from_mapping(context.config)
        mobile_number = user.first_attribute(settings.phone_attribute_name)

        check = validate_destination(mobile_number)
        if check.status is DestinationStatus.MISSING:
            logger.warning("User has no phone number configured", user=user.username)
            return self._failure(
                context, FailureKind.MISSING_DESTINATION, "smsAuthMobileNumberMissing", 400,
            )
        if not check.is_valid:
            logger.warning(
                "Invalid phone number format",
                user=user.username,
                phone=mask_phone(mobile_number),
            )
            return self._failure(
                context, FailureKind.INVALID_FORMAT, "smsAuthMobileNumberInvalid", 400,
            )

        challenge = generate_challenge(settings.length, settings.ttl, now_millis=self.clock())
        context.notes.set_note(NOTE_CODE, challenge.code)
        context.notes.set_note(NOTE_EXPIRY, str(challenge.expires_at_millis))

        dispatcher = BrokerDispatcher(registry=self.registry, simulation=settings.simulation)
        try:
            sms_text = self.catalog.format_sms(
                challenge.code,
                context.realm.label,
                theme=context.theme,
                locale=context.locale,
            )
            broker = dispatcher.resolve(settings.broker, settings.broker_config())
            broker.send(check.number, sms_text)
        except (BrokerError, MessageTemplateError) as e:
            logger.error(
                "Failed to send SMS OTP",
                user=user.username,
                provider=getattr(e, "provider", None),
                error=str(e),
            )
            return self._failure(
                context, FailureKind.DELIVERY_FAILED, "smsAuthSmsNotSent", 500, detail=str(e),
            )

        logger.info(
            "SMS OTP sent",
            user=user.username,
            phone=mask_phone(check.number),
            provider=broker.name,
        )
        return AuthenticationOutcome.challenge()

    def verify(self, context: AuthenticationContext, submitted_code: Optional[str]) -> AuthenticationOutcome:
        """Check the code the user submitted against the stored challenge."""
        user = context.user
        logger.debug("SMS OTP verify", user=user.username)

        if submitted_code is None or not DIGITS_ONLY.fullmatch(submitted_code):
            logger.warning("Invalid code format entered", user=user.username)
            return self._invalid_code(context, FailureKind.INVALID_FORMAT)

        code = context.notes.get_note(NOTE_CODE)
        expiry = context.notes.get_note(NOTE_EXPIRY)
        if code is None or expiry is None:
            logger.error("Missing OTP code or expiry in session", user=user.username)
            return self._failure(
                context, FailureKind.INTERNAL_ERROR, None, 500,
                detail="No challenge stored for this session",
            )
        try:
            expires_at = int(expiry)
        except ValueError:
            logger.error("Corrupt OTP expiry in session", user=user.username)
            return self._failure(
                context, FailureKind.INTERNAL_ERROR, None, 500,
                detail="Stored challenge expiry is not a number",
            )

        if submitted_code != code:
            logger.warning("Invalid OTP code entered", user=user.username)
            return self._invalid_code(context, FailureKind.CODE_MISMATCH)

        if self.clock() >= expires_at:
            logger.warning("Expired OTP code used", user=user.username)
            return self._failure(context, FailureKind.EXPIRED, "smsAuthCodeExpired", 400)

        context.notes.remove_note(NOTE_CODE)
        context.notes.remove_note(NOTE_EXPIRY)
        logger.info("SMS OTP authentication successful", user=user.username)
        return AuthenticationOutcome.success()

    def action(self, context: AuthenticationContext, form_data: Mapping[str, str]) -> AuthenticationOutcome:
        """Verify using the `code` field of submitted form data."""
        return self.verify(context, form_data.get(NOTE_CODE))
