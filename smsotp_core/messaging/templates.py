"""
Message Templates
=================
Theme- and locale-resolved texts for SMS bodies and user-facing errors.
"""

from typing import Dict, Iterator, Mapping, Optional

import structlog

from ..exceptions import MessageTemplateError

logger = structlog.get_logger(__name__)

DEFAULT_THEME = "base"
DEFAULT_LOCALE = "en"

SMS_TEXT_KEY = "smsAuthText"

DEFAULT_MESSAGES: Dict[str, Dict[str, Dict[str, str]]] = {
    DEFAULT_THEME: {
        "en": {
            SMS_TEXT_KEY: "Your {realm} verification code is {code}.",
            "smsAuthMobileNumberMissing": "No mobile number is configured for your account.",
            "smsAuthMobileNumberInvalid": "The mobile number configured for your account is invalid.",
            "smsAuthSmsNotSent": "The SMS could not be sent. Please try again later.",
            "smsAuthCodeInvalid": "Invalid code, please try again.",
            "smsAuthCodeExpired": "The code has expired.",
        },
        "pt-BR": {
            SMS_TEXT_KEY: "Seu código de verificação {realm} é {code}.",
            "smsAuthMobileNumberMissing": "Nenhum número de celular cadastrado para sua conta.",
            "smsAuthMobileNumberInvalid": "O número de celular cadastrado para sua conta é inválido.",
            "smsAuthSmsNotSent": "Não foi possível enviar o SMS. Tente novamente mais tarde.",
            "smsAuthCodeInvalid": "Código inválido, tente novamente.",
            "smsAuthCodeExpired": "O código expirou.",
        },
    },
}


class MessageCatalog:
    """
    Lookup of message texts by theme, locale and key.

    Resolution order for a locale like "pt-BR": the exact locale, its base
    language ("pt"), then the default locale. Each locale is tried in the
    requested theme first, then in the default theme.
    """

    def __init__(self, messages: Optional[Mapping[str, Mapping[str, Mapping[str, str]]]] = None):
        self._messages = messages if messages is not None else DEFAULT_MESSAGES

    def _candidates(self, theme: str, locale: Optional[str]) -> Iterator[Mapping[str, str]]:
        locales = []
        if locale:
            locales.append(locale)
            base = locale.replace("_", "-").split("-")[0]
            if base != locale:
                locales.append(base)
        locales.append(DEFAULT_LOCALE)

        themes = [theme] if theme == DEFAULT_THEME else [theme, DEFAULT_THEME]
        for loc in locales:
            for name in themes:
                bundle = self._messages.get(name, {}).get(loc)
                if bundle:
                    yield bundle

    def get(self, key: str, theme: str = DEFAULT_THEME, locale: Optional[str] = None) -> str:
        """Resolve a message text; falls back to the key itself."""
        for bundle in self._candidates(theme, locale):
            if key in bundle:
                return bundle[key]
        logger.warning("Message key not found", key=key, theme=theme, locale=locale)
        return key

    def format_sms(
        self,
        code: str,
        realm_name: str,
        theme: str = DEFAULT_THEME,
        locale: Optional[str] = None,
    ) -> str:
        """
        Render the SMS body carrying `code`.

        Raises:
            MessageTemplateError: if the template has unknown or malformed fields
        """
        template = self.get(SMS_TEXT_KEY, theme=theme, locale=locale)
        try:
            return template.format(code=code, realm=realm_name)
        except (KeyError, IndexError, ValueError) as e:
            logger.error("SMS template cannot be rendered", theme=theme, locale=locale, error=repr(e))
            raise MessageTemplateError(SMS_TEXT_KEY, repr(e)) from e
